"""
Application Identifier table for medicine scan decoding.

Only two-digit AIs seen on pharmaceutical packaging are listed. Fixed-length
AIs carry their data length; variable-length AIs run until a GS (ASCII 29)
separator or the end of the string. New AIs are added by extending one of
the enumerations below.
"""

from __future__ import annotations

from enum import Enum
from typing import Dict, Optional, Union


# GS1 Group Separator (FNC1 as transmitted by scanners)
GS = "\x1d"

AI_LENGTH = 2


class FixedLengthAI(str, Enum):
    """AIs whose data has a predefined length."""
    GTIN = "01"
    CONTENT_GTIN = "02"
    PRODUCTION_DATE = "11"
    PACKAGING_DATE = "13"
    BEST_BEFORE_DATE = "15"
    SELL_BY_DATE = "16"
    EXPIRY_DATE = "17"

    @property
    def length(self) -> int:
        return FIXED_LENGTHS[self]

    @property
    def label(self) -> str:
        return AI_LABELS[self]


class VariableLengthAI(str, Enum):
    """AIs delimited by GS or end of data."""
    BATCH = "10"
    SERIAL = "21"
    CONSUMER_VARIANT = "22"
    VARIABLE_COUNT = "30"
    CONTENT_COUNT = "37"

    @property
    def max_length(self) -> int:
        return VARIABLE_MAX_LENGTHS[self]

    @property
    def label(self) -> str:
        return AI_LABELS[self]


ApplicationIdentifier = Union[FixedLengthAI, VariableLengthAI]


FIXED_LENGTHS: Dict[FixedLengthAI, int] = {
    FixedLengthAI.GTIN: 14,
    FixedLengthAI.CONTENT_GTIN: 14,
    FixedLengthAI.PRODUCTION_DATE: 6,
    FixedLengthAI.PACKAGING_DATE: 6,
    FixedLengthAI.BEST_BEFORE_DATE: 6,
    FixedLengthAI.SELL_BY_DATE: 6,
    FixedLengthAI.EXPIRY_DATE: 6,
}

# Informational only: the scanner does not cut fields at these lengths
VARIABLE_MAX_LENGTHS: Dict[VariableLengthAI, int] = {
    VariableLengthAI.BATCH: 20,
    VariableLengthAI.SERIAL: 20,
    VariableLengthAI.CONSUMER_VARIANT: 20,
    VariableLengthAI.VARIABLE_COUNT: 8,
    VariableLengthAI.CONTENT_COUNT: 8,
}

AI_LABELS: Dict[ApplicationIdentifier, str] = {
    FixedLengthAI.GTIN: "GTIN",
    FixedLengthAI.CONTENT_GTIN: "CONTENT",
    FixedLengthAI.PRODUCTION_DATE: "PROD DATE",
    FixedLengthAI.PACKAGING_DATE: "PACK DATE",
    FixedLengthAI.BEST_BEFORE_DATE: "BEST BEFORE or BEST BY",
    FixedLengthAI.SELL_BY_DATE: "SELL BY",
    FixedLengthAI.EXPIRY_DATE: "USE BY or EXPIRY",
    VariableLengthAI.BATCH: "BATCH/LOT",
    VariableLengthAI.SERIAL: "SERIAL",
    VariableLengthAI.CONSUMER_VARIANT: "CPV",
    VariableLengthAI.VARIABLE_COUNT: "VAR. COUNT",
    VariableLengthAI.CONTENT_COUNT: "COUNT",
}


_BY_CODE: Dict[str, ApplicationIdentifier] = {
    **{ai.value: ai for ai in FixedLengthAI},
    **{ai.value: ai for ai in VariableLengthAI},
}


def lookup_ai(code: str) -> Optional[ApplicationIdentifier]:
    """Return the AI member for a two-character code, or None if unknown."""
    return _BY_CODE.get(code)
