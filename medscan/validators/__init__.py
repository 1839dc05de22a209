"""
Field interpreters and validation for medscan.
"""

from .validators import (
    is_numeric,
    calculate_check_digit_mod10,
    validate_check_digit,
    gtin_to_product_code,
    interpret_expiry_date,
    expiry_status,
    ExpiryStatus,
    ValidationResult,
)

__all__ = [
    "is_numeric",
    "calculate_check_digit_mod10",
    "validate_check_digit",
    "gtin_to_product_code",
    "interpret_expiry_date",
    "expiry_status",
    "ExpiryStatus",
    "ValidationResult",
]
