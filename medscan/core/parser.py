"""
GS1 DataMatrix parser for French medicine packaging.

French pharmaceutical DataMatrix codes follow the GS1 standard:

    AI 01 - GTIN-14 (14 digits) -> last 13 digits = CIP13
    AI 17 - Expiry date (YYMMDD, DD=00 -> last day of month)
    AI 10 - Batch/Lot number (variable length)
    AI 21 - Serial number (variable length)

Variable-length fields are delimited by GS (ASCII 29). Other AIs seen on
packs (02, 11, 13, 15, 16, 22, 30, 37) are read into the raw field map but
not interpreted.

Example:
    01034009340123081723063010ABC123\\x1d2112345
    -> GTIN 03400934012308, CIP13 3400934012308, expiry 2023-06-30,
       batch ABC123, serial 12345
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from .ai_table import FixedLengthAI, VariableLengthAI
from .normalizer import normalize, strip_symbology
from .options import DEFAULT_OPTIONS, ScanOptions
from .scanner import scan_fields
from ..validators.validators import (
    gtin_to_product_code,
    interpret_expiry_date,
    validate_check_digit,
)


@dataclass
class Gs1ParseResult:
    """
    Structured result of parsing a GS1 element string.

    Attributes:
        product_code: CIP13 derived from the GTIN-14 (AI 01)
        trade_item_code: Full GTIN-14 as scanned
        expiry_date: Expiry as YYYY-MM-DD (AI 17)
        batch_number: Batch/Lot number (AI 10)
        serial_number: Serial number (AI 21)
        is_gs1_structured: Whether the input was recognized as GS1 data
        truncated: True if scanning stopped at an unknown AI
        symbology_identifier: Name of the stripped symbology prefix
        check_digit_valid: GS1 Mod10 check of the GTIN (informational)
        fields: Raw AI code -> value map
    """
    product_code: Optional[str] = None
    trade_item_code: Optional[str] = None
    expiry_date: Optional[str] = None
    batch_number: Optional[str] = None
    serial_number: Optional[str] = None
    is_gs1_structured: bool = False
    truncated: bool = False
    symbology_identifier: Optional[str] = None
    check_digit_valid: Optional[bool] = None
    fields: Dict[str, str] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary representation."""
        return {
            'productCode': self.product_code,
            'tradeItemCode': self.trade_item_code,
            'expiryDate': self.expiry_date,
            'batchNumber': self.batch_number,
            'serialNumber': self.serial_number,
            'isGs1Structured': self.is_gs1_structured,
            'truncated': self.truncated,
            'symbologyIdentifier': self.symbology_identifier,
            'checkDigitValid': self.check_digit_valid,
            'fields': dict(self.fields),
        }


def parse_gs1(
    raw: str,
    *,
    options: Optional[ScanOptions] = None
) -> Gs1ParseResult:
    """
    Parse a GS1 DataMatrix string into structured fields.

    Input shorter than options.min_structured_length, or not GS1 framed,
    gives a result with is_gs1_structured=False and every field empty.

    Args:
        raw: Raw scanned text
        options: Optional decoding configuration

    Returns:
        Gs1ParseResult

    Examples:
        >>> result = parse_gs1("01034009340123081723063010ABC123")
        >>> result.product_code
        '3400934012308'
        >>> result.expiry_date
        '2023-06-30'
    """
    if not isinstance(raw, str):
        raise TypeError(f"Scan text must be a string, got {type(raw).__name__}")

    options = options or DEFAULT_OPTIONS

    if len(raw) < options.min_structured_length:
        return Gs1ParseResult()

    data = normalize(raw, options)
    if data is None:
        return Gs1ParseResult()

    _, symbology_id = strip_symbology(raw, options)
    scan = scan_fields(data)

    gtin = scan.get(FixedLengthAI.GTIN)
    product_code = gtin_to_product_code(gtin)

    check_digit_valid = None
    if product_code is not None:
        check_digit_valid = validate_check_digit(gtin).valid

    return Gs1ParseResult(
        product_code=product_code,
        trade_item_code=gtin,
        expiry_date=interpret_expiry_date(
            scan.get(FixedLengthAI.EXPIRY_DATE),
            century_pivot=options.century_pivot,
        ),
        batch_number=scan.get(VariableLengthAI.BATCH),
        serial_number=scan.get(VariableLengthAI.SERIAL),
        is_gs1_structured=True,
        truncated=scan.truncated,
        symbology_identifier=symbology_id,
        check_digit_valid=check_digit_valid,
        fields=scan.fields,
    )
