"""
JSON formatter for scan results.

Renders the camelCase payload consumed by the inventory and medicine
lookup services:

    {
      "productCode": "3400934012308",
      "expiryDate": "2023-06-30",
      "batchNumber": "ABC123",
      "source": "structured"
    }
"""

from __future__ import annotations

import json
from datetime import date
from typing import Any, Dict, Optional

from ..core.classifier import ScanResult, classify
from ..core.options import ScanOptions
from ..core.parser import parse_gs1
from ..validators.validators import expiry_status


# Filled in by the medicine lookup service
LOOKUP_FIELDS = ("cis", "medicineName", "pharmaceuticalForm")


def format_scan_result(
    result: ScanResult,
    include_status: bool = False,
    today: Optional[date] = None
) -> Dict[str, Any]:
    """
    Format a ScanResult as a plain dictionary.

    Args:
        result: Classified scan
        include_status: Add the expiryStatus field (default: False)
        today: Reference date for the expiry status

    Returns:
        Dictionary with camelCase keys
    """
    output = result.to_dict()
    if include_status:
        output["expiryStatus"] = expiry_status(result.expiry_date, today=today).value
    return output


def scan_to_json(
    raw: str,
    include_gs1: bool = False,
    options: Optional[ScanOptions] = None
) -> str:
    """
    Classify a scan and return JSON output.

    Unrecognized scans give {"error": ..., "input": ...}.

    Args:
        raw: Raw scanned text
        include_gs1: Include the full GS1 parse under "gs1" (default: False)
        options: Optional decoding configuration

    Returns:
        JSON string

    Example:
        >>> print(scan_to_json("3400930000001"))
        {
          "productCode": "3400930000001",
          "expiryDate": null,
          "batchNumber": null,
          "source": "plain"
        }
    """
    result = classify(raw, options=options)

    if result is None:
        output: Dict[str, Any] = {
            "error": "Scan not recognized",
            "input": raw,
        }
    else:
        output = format_scan_result(result)

    if include_gs1:
        output["gs1"] = parse_gs1(raw, options=options).to_dict()

    return json.dumps(output, ensure_ascii=False, indent=2)


def prepare_for_lookup(
    raw: str,
    today: Optional[date] = None,
    options: Optional[ScanOptions] = None
) -> Optional[Dict[str, Any]]:
    """
    Classify a scan and prepare the payload for medicine lookup.

    Returns the scan fields, the expiry status and placeholder fields
    for the lookup results, or None if the scan is not recognized.

    Example:
        >>> prepare_for_lookup("01034009340123081723063010ABC123")
        {
          "productCode": "3400934012308",
          "expiryDate": "2023-06-30",
          "batchNumber": "ABC123",
          "source": "structured",
          "expiryStatus": "Expired",
          "cis": None,
          "medicineName": None,
          "pharmaceuticalForm": None
        }
    """
    result = classify(raw, options=options)
    if result is None:
        return None

    output = format_scan_result(result, include_status=True, today=today)
    return {**output, **{name: None for name in LOOKUP_FIELDS}}
