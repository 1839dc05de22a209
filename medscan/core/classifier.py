"""
Scan classification.

Turns any scanned text into a unified ScanResult: a GS1 DataMatrix is
decoded first, then a plain CIP13 (EAN-13) barcode is tried. Anything else
is None, which callers surface as "not recognized, try manual search".
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional

from .options import DEFAULT_OPTIONS, ScanOptions
from .parser import parse_gs1


logger = logging.getLogger(__name__)

PRODUCT_CODE_LENGTH = 13


class ScanSource(str, Enum):
    """Where a product code came from."""
    STRUCTURED = "structured"  # GS1 DataMatrix / GS1-128 / QR
    PLAIN = "plain"            # bare CIP13 barcode


@dataclass(frozen=True)
class ScanResult:
    """Product code with what the scan could tell about the pack."""
    product_code: str
    expiry_date: Optional[str] = None
    batch_number: Optional[str] = None
    source: ScanSource = ScanSource.PLAIN

    def to_dict(self) -> Dict[str, Any]:
        return {
            'productCode': self.product_code,
            'expiryDate': self.expiry_date,
            'batchNumber': self.batch_number,
            'source': self.source.value,
        }


def is_plain_product_code(code: str, options: Optional[ScanOptions] = None) -> bool:
    """
    Check for a plain CIP13: 13 digits starting with the national prefix.

    Examples:
        >>> is_plain_product_code("3400930000001")
        True
        >>> is_plain_product_code("1234567890123")
        False
    """
    options = options or DEFAULT_OPTIONS
    return (
        re.fullmatch(rf"\d{{{PRODUCT_CODE_LENGTH}}}", code, flags=re.ASCII) is not None
        and code.startswith(options.plain_code_prefix)
    )


def classify(
    raw: str,
    *,
    options: Optional[ScanOptions] = None
) -> Optional[ScanResult]:
    """
    Extract a CIP13 from any scanned code.

    Handles both GS1 DataMatrix and plain CIP13 barcodes.

    Args:
        raw: Raw scanned text
        options: Optional decoding configuration

    Returns:
        ScanResult, or None if the scan is not a recognized medicine code

    Examples:
        >>> classify("3400930000001").source
        <ScanSource.PLAIN: 'plain'>
        >>> classify("hello world") is None
        True
    """
    if not isinstance(raw, str):
        raise TypeError(f"Scan text must be a string, got {type(raw).__name__}")

    if not raw:
        return None

    options = options or DEFAULT_OPTIONS

    gs1 = parse_gs1(raw, options=options)
    if gs1.is_gs1_structured and gs1.product_code:
        return ScanResult(
            product_code=gs1.product_code,
            expiry_date=gs1.expiry_date,
            batch_number=gs1.batch_number,
            source=ScanSource.STRUCTURED,
        )

    cleaned = raw.strip()
    if is_plain_product_code(cleaned, options):
        return ScanResult(product_code=cleaned, source=ScanSource.PLAIN)

    logger.debug("Unrecognized scan: %r", raw[:32])
    return None
