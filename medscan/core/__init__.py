"""
Core decoding modules for medscan.
"""

from .options import ScanOptions, SYMBOLOGY_PREFIXES
from .ai_table import FixedLengthAI, VariableLengthAI, lookup_ai, GS
from .normalizer import normalize, strip_symbology
from .scanner import scan_fields, FieldScan
from .parser import parse_gs1, Gs1ParseResult
from .classifier import classify, is_plain_product_code, ScanResult, ScanSource

__all__ = [
    "ScanOptions",
    "SYMBOLOGY_PREFIXES",
    "FixedLengthAI",
    "VariableLengthAI",
    "lookup_ai",
    "GS",
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
]
