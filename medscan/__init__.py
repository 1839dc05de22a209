"""
Medicine scan decoding

Decodes raw scanner output from French medicine packaging (GS1 DataMatrix,
GS1-128, GS1 QR Code or a plain CIP13 barcode) into a product code, expiry
date, batch and serial number.

Based on the GS1 General Specifications.
"""

import logging

from .core.options import ScanOptions
from .core.ai_table import FixedLengthAI, VariableLengthAI
from .core.normalizer import normalize, strip_symbology
from .core.scanner import scan_fields, FieldScan
from .core.parser import parse_gs1, Gs1ParseResult
from .core.classifier import classify, is_plain_product_code, ScanResult, ScanSource
from .validators.validators import (
    gtin_to_product_code,
    interpret_expiry_date,
    validate_check_digit,
    expiry_status,
    ExpiryStatus,
)
from .formatters.json_formatter import (
    format_scan_result,
    scan_to_json,
    prepare_for_lookup,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "1.0.0"
__all__ = [
    "ScanOptions",
    "FixedLengthAI",
    "VariableLengthAI",
    "normalize",
    "strip_symbology",
    "scan_fields",
    "FieldScan",
    "parse_gs1",
    "Gs1ParseResult",
    "classify",
    "is_plain_product_code",
    "ScanResult",
    "ScanSource",
    "gtin_to_product_code",
    "interpret_expiry_date",
    "validate_check_digit",
    "expiry_status",
    "ExpiryStatus",
    "format_scan_result",
    "scan_to_json",
    "prepare_for_lookup",
]
