"""
Symbol normalization for raw scanner output.

Strips the symbology identifier some readers prepend to GS1 data and
restores the leading AI(01) that scanners drop from bare French GTINs.
"""

from __future__ import annotations

import logging
import re
from typing import Optional, Tuple

from .ai_table import FixedLengthAI
from .options import DEFAULT_OPTIONS, ScanOptions


logger = logging.getLogger(__name__)

GTIN_LENGTH = FixedLengthAI.GTIN.length


def strip_symbology(
    text: str,
    options: Optional[ScanOptions] = None
) -> Tuple[str, Optional[str]]:
    """
    Strip symbology identifier prefix if present.

    Returns:
        (stripped_text, identifier_name)
    """
    options = options or DEFAULT_OPTIONS
    for prefix, name in options.symbology_prefixes.items():
        if text.startswith(prefix):
            return text[len(prefix):], name
    return text, None


def _bare_gtin_pattern(home_prefix: str) -> re.Pattern:
    remaining = GTIN_LENGTH - len(home_prefix)
    return re.compile(rf"^{re.escape(home_prefix)}\d{{{remaining}}}", re.ASCII)


def normalize(raw: str, options: Optional[ScanOptions] = None) -> Optional[str]:
    """
    Normalize scanner output into an element string starting with AI(01).

    Args:
        raw: Raw scanned text
        options: Optional decoding configuration

    Returns:
        The element string, or None if it is not recognizable as GS1 data

    Examples:
        >>> normalize("]d201034009340123081723063010LOT")
        '01034009340123081723063010LOT'
        >>> normalize("034009340123081723063010LOT")
        '01034009340123081723063010LOT'
    """
    if not isinstance(raw, str):
        raise TypeError(f"Scan text must be a string, got {type(raw).__name__}")

    options = options or DEFAULT_OPTIONS
    data, _ = strip_symbology(raw, options)

    if data.startswith(FixedLengthAI.GTIN.value):
        return data

    # Some scanners omit the leading AI on French packs
    if _bare_gtin_pattern(options.home_gtin_prefix).match(data):
        return FixedLengthAI.GTIN.value + data

    logger.debug("Not GS1 framed: %r", raw[:32])
    return None
