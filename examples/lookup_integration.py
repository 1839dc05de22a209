"""
Example Integration Script

Shows how scan results feed the medicine lookup and the inventory form.

This script demonstrates:
1. Classifying a scan to get the CIP13 and pack details
2. Preparing the payload for the lookup service
3. Simulating the lookup (replace with the real medicine API)
4. Printing the pre-filled inventory entry as JSON
"""

import json
from typing import Optional

from medscan import prepare_for_lookup


# Simulated medicine reference (replace with the real lookup service)
MEDICINE_DATABASE = {
    "3400934012308": {
        "cis": "60234100",
        "medicineName": "DOLIPRANE 1000 mg, comprimé",
        "pharmaceuticalForm": "comprimé",
    },
    "3400930000001": {
        "cis": "60001234",
        "medicineName": "SPASFON, comprimé enrobé",
        "pharmaceuticalForm": "comprimé enrobé",
    },
}


def lookup_medicine(product_code: str) -> Optional[dict]:
    """
    Lookup a CIP13 and return medicine information.

    Replace this function with your actual lookup service call.
    """
    return MEDICINE_DATABASE.get(product_code)


def scan_and_lookup(scan_text: str) -> str:
    """
    Complete workflow: classify scan + lookup CIP13 + return entry.

    Returns:
        JSON string with the pre-filled inventory entry
    """
    payload = prepare_for_lookup(scan_text)

    if payload is None:
        return json.dumps(
            {"error": "Not recognized, try manual search", "input": scan_text},
            ensure_ascii=False,
            indent=2,
        )

    info = lookup_medicine(payload["productCode"])
    if info:
        payload.update(info)

    return json.dumps(payload, ensure_ascii=False, indent=2)


def main():
    """Demo: scan a few packs and show the resulting entries."""
    print("=" * 80)
    print("  MEDICINE SCAN + LOOKUP INTEGRATION")
    print("=" * 80)

    test_cases = [
        ("DataMatrix", "01034009340123081723063010ABC123"),
        ("DataMatrix with prefix", "]d201034009340123081727020010LOT\x1d2112345"),
        ("Bare GTIN (no AI 01)", "034009340123081723063110LOT"),
        ("Plain CIP13", "3400930000001"),
        ("Not a medicine", "hello world"),
    ]

    for case_name, scan_text in test_cases:
        print(f"\n{case_name}:")
        print("-" * 80)
        print(f"Input: {scan_text!r}")
        print("\nOutput:")
        print(scan_and_lookup(scan_text))


if __name__ == "__main__":
    main()
