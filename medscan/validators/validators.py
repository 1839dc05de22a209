"""
Field interpreters for decoded GS1 fields.

Implements:
- GTIN-14 to CIP13 conversion (AI 01)
- Expiry date decoding (AI 17, YYMMDD with DD=00 meaning end of month)
- GS1 Mod10 check digit calculation and validation
- Expiry status classification for parsed dates

Malformed values never raise; they interpret to None.
"""

from __future__ import annotations

from calendar import monthrange
from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Any, Dict, List, Optional

from dateutil.relativedelta import relativedelta


def is_numeric(value: Optional[str]) -> bool:
    """True for a non-empty string of ASCII digits."""
    return bool(value) and value.isascii() and value.isdigit()


@dataclass
class ValidationResult:
    """Result of a validation operation."""
    valid: bool
    errors: List[str] = field(default_factory=list)
    meta: Dict[str, Any] = field(default_factory=dict)


def calculate_check_digit_mod10(digits: str) -> int:
    """
    Calculate GS1 Mod10 check digit.

    Algorithm (GS1 General Specifications):
    1. From right to left, alternate multipliers 3 and 1
    2. Sum all products
    3. Check digit = (10 - (sum mod 10)) mod 10

    Args:
        digits: Numeric string without check digit

    Returns:
        Calculated check digit (0-9)
    """
    if not is_numeric(digits):
        raise ValueError("Input must be a non-empty numeric string")

    total = 0
    for i, digit in enumerate(reversed(digits)):
        multiplier = 3 if i % 2 == 0 else 1
        total += int(digit) * multiplier

    return (10 - (total % 10)) % 10


def validate_check_digit(value: str) -> ValidationResult:
    """
    Validate the trailing GS1 check digit of a GTIN or CIP13.

    Args:
        value: The complete value including check digit

    Returns:
        ValidationResult with check digit status in meta
    """
    result = ValidationResult(valid=True)

    if not is_numeric(value) or len(value) < 2:
        result.valid = False
        result.errors.append("Value must be numeric with at least 2 digits")
        return result

    provided_check = int(value[-1])
    calculated_check = calculate_check_digit_mod10(value[:-1])

    result.meta['calculated_check_digit'] = calculated_check
    result.meta['provided_check_digit'] = provided_check
    result.meta['check_digit_valid'] = provided_check == calculated_check

    if provided_check != calculated_check:
        result.valid = False
        result.errors.append(
            f"Check digit mismatch: expected {calculated_check}, got {provided_check}"
        )

    return result


def gtin_to_product_code(gtin: Optional[str]) -> Optional[str]:
    """
    Extract the CIP13 from a GTIN-14 by dropping the indicator digit.

    Returns None unless the GTIN is exactly 14 digits.
    """
    if gtin is None or len(gtin) != 14 or not is_numeric(gtin):
        return None
    return gtin[1:]


def interpret_expiry_date(value: Optional[str], century_pivot: int = 50) -> Optional[str]:
    """
    Decode a GS1 YYMMDD date into an ISO date string.

    - YY below century_pivot resolves to 20YY, otherwise 19YY
    - DD=00 means the last day of the month (leap years included)
    - Month outside 01-12 or a day the month does not have gives None

    Args:
        value: Six-digit YYMMDD string
        century_pivot: Year pivot for century determination

    Returns:
        'YYYY-MM-DD' or None

    Examples:
        >>> interpret_expiry_date("230630")
        '2023-06-30'
        >>> interpret_expiry_date("240200")
        '2024-02-29'
    """
    if value is None or len(value) != 6 or not is_numeric(value):
        return None

    yy = int(value[0:2])
    mm = int(value[2:4])
    dd = int(value[4:6])

    if mm < 1 or mm > 12:
        return None

    year = 2000 + yy if yy < century_pivot else 1900 + yy
    last_day = monthrange(year, mm)[1]

    if dd == 0:
        dd = last_day
    elif dd > last_day:
        return None

    return f"{year:04d}-{mm:02d}-{dd:02d}"


class ExpiryStatus(str, Enum):
    """Expiry classification of an inventory item."""
    EXPIRED = "Expired"
    NEAR_EXPIRY = "Near Expiry"
    VALID = "Valid"
    UNKNOWN = "Unknown"


def _parse_iso_date(value: str) -> Optional[date]:
    try:
        return date.fromisoformat(value)
    except (TypeError, ValueError):
        return None


def expiry_status(
    expiry_date: Optional[str],
    today: Optional[date] = None,
    near_days: int = 30
) -> ExpiryStatus:
    """
    Classify an ISO expiry date relative to today.

    Returns: EXPIRED, NEAR_EXPIRY (within near_days), VALID or UNKNOWN
    """
    if not expiry_date:
        return ExpiryStatus.UNKNOWN
    expiry = _parse_iso_date(expiry_date)
    if expiry is None:
        return ExpiryStatus.UNKNOWN

    today = today or date.today()
    if expiry < today:
        return ExpiryStatus.EXPIRED
    if expiry <= today + relativedelta(days=near_days):
        return ExpiryStatus.NEAR_EXPIRY
    return ExpiryStatus.VALID
