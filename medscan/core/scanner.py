"""
GS1 field scanner.

Walks a normalized element string left to right:

- Fixed-length AIs consume exactly their predefined length
- Variable-length AIs run until the next GS (ASCII 29) or end of data
- An unknown AI ends the scan; fields read so far are kept and the
  result is flagged as truncated
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, Optional, Tuple, Union

from .ai_table import AI_LENGTH, GS, FixedLengthAI, VariableLengthAI, lookup_ai


logger = logging.getLogger(__name__)


@dataclass
class FieldScan:
    """
    Raw fields read from an element string.

    Attributes:
        fields: AI code -> raw value, in scan order
        truncated: True if the scan stopped at an unknown AI
        stopped_at: Cursor index where an unknown AI was met
    """
    fields: Dict[str, str] = field(default_factory=dict)
    truncated: bool = False
    stopped_at: Optional[int] = None

    def get(self, ai: Union[str, FixedLengthAI, VariableLengthAI]) -> Optional[str]:
        code = ai.value if isinstance(ai, (FixedLengthAI, VariableLengthAI)) else ai
        return self.fields.get(code)

    def __contains__(self, ai) -> bool:
        return self.get(ai) is not None

    def __len__(self) -> int:
        return len(self.fields)


def _read_variable_field(data: str, pos: int) -> Tuple[str, int]:
    """Read until GS or end of string. Returns (value, next_pos)."""
    gs_pos = data.find(GS, pos)
    if gs_pos == -1:
        return data[pos:], len(data)
    return data[pos:gs_pos], gs_pos + 1


def scan_fields(data: str) -> FieldScan:
    """
    Scan a normalized element string into raw AI fields.

    A repeated AI overwrites the earlier value.

    Args:
        data: Element string, normally the output of normalize()

    Returns:
        FieldScan with the fields found

    Examples:
        >>> scan_fields("0103400934012308\\x1d10LOT").fields
        {'01': '03400934012308', '10': 'LOT'}
    """
    scan = FieldScan()
    pos = 0

    while pos < len(data):
        # Superfluous GS after a fixed-length field
        if data[pos] == GS:
            pos += 1
            continue

        code = data[pos:pos + AI_LENGTH]
        ai = lookup_ai(code)

        if ai is None:
            scan.truncated = True
            scan.stopped_at = pos
            logger.debug(
                "Unknown AI %r at index %d; keeping %d field(s)",
                code, pos, len(scan.fields)
            )
            break

        data_start = pos + AI_LENGTH
        if isinstance(ai, FixedLengthAI):
            value = data[data_start:data_start + ai.length]
            pos = data_start + ai.length
        else:
            value, pos = _read_variable_field(data, data_start)

        scan.fields[ai.value] = value

    return scan
