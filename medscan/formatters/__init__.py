"""
Output formatters for medscan.
"""

from .json_formatter import (
    format_scan_result,
    scan_to_json,
    prepare_for_lookup,
)

__all__ = [
    "format_scan_result",
    "scan_to_json",
    "prepare_for_lookup",
]
