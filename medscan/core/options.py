"""
Scan decoding options.

Defaults target French medicine packaging: GTINs issued under the 0340
prefix and plain CIP13 barcodes starting with 340.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Dict, Mapping, Optional


# Symbology identifier prefixes (ISO/IEC 15424) announcing GS1 framing
SYMBOLOGY_PREFIXES: Dict[str, str] = {
    "]d2": "GS1 DataMatrix",
    "]Q3": "GS1 QR Code",
    "]C1": "GS1-128",
}


def _env_int(environ: Mapping[str, str], name: str, default: int) -> int:
    value = environ.get(name, "").strip()
    if not value:
        return default
    try:
        return int(value)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {value!r}") from None


@dataclass
class ScanOptions:
    """
    Configuration options for scan decoding.

    Attributes:
        century_pivot: Two-digit years below the pivot resolve to 20YY,
            the rest to 19YY
        symbology_prefixes: Prefixes stripped before parsing, mapped to
            the symbology name they announce
        home_gtin_prefix: Leading digits of a bare GTIN-14 whose AI(01)
            may be restored
        plain_code_prefix: Leading digits of a plain 13-digit product code
        min_structured_length: Shortest input considered for GS1 parsing
    """
    century_pivot: int = 50
    symbology_prefixes: Dict[str, str] = field(
        default_factory=lambda: dict(SYMBOLOGY_PREFIXES)
    )
    home_gtin_prefix: str = "0340"
    plain_code_prefix: str = "340"
    min_structured_length: int = 16

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "ScanOptions":
        """
        Build options with overrides from MEDSCAN_* environment variables.

        Args:
            environ: Mapping to read instead of os.environ

        Raises:
            ValueError: If an integer variable cannot be parsed
        """
        env = os.environ if environ is None else environ
        defaults = cls()
        return cls(
            century_pivot=_env_int(env, "MEDSCAN_CENTURY_PIVOT", defaults.century_pivot),
            home_gtin_prefix=env.get("MEDSCAN_HOME_GTIN_PREFIX") or defaults.home_gtin_prefix,
            plain_code_prefix=env.get("MEDSCAN_PLAIN_CODE_PREFIX") or defaults.plain_code_prefix,
            min_structured_length=_env_int(
                env, "MEDSCAN_MIN_STRUCTURED_LENGTH", defaults.min_structured_length
            ),
        )


DEFAULT_OPTIONS = ScanOptions()
