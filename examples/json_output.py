"""
Demo: JSON Output

Shows the JSON payload for typical scans, with and without the full
GS1 field map.
"""

from medscan import parse_gs1, scan_to_json


def demo_json_output():
    """Demonstrate JSON output for common scans."""

    print("=" * 80)
    print("  JSON OUTPUT DEMO")
    print("=" * 80)

    test_cases = [
        ("Complete DataMatrix", "01034009340123081723063010ABC123"),
        ("Batch and serial", "01034009340123081723063110BATCH\x1d2112345"),
        ("Last day of month (DD=00)", "01034009340123081727020010LOT"),
        ("Plain CIP13", "3400930000001"),
        ("Unrecognized", "hello world"),
    ]

    for title, scan_text in test_cases:
        print(f"\n{title}")
        print("-" * 80)
        print(f"Input: {scan_text!r}")
        print("\nJSON Output:")
        print(scan_to_json(scan_text))

    print("\n\n" + "=" * 80)
    print("  FULL GS1 PARSE")
    print("=" * 80)

    scan_text = "]d201034009340123081723063010ABC123\x1d21SN42\x1d99INTERNAL"
    result = parse_gs1(scan_text)

    print(f"\nInput: {scan_text!r}")
    print(f"  Symbology:   {result.symbology_identifier}")
    print(f"  GTIN:        {result.trade_item_code}")
    print(f"  CIP13:       {result.product_code}")
    print(f"  Expiry:      {result.expiry_date}")
    print(f"  Batch:       {result.batch_number}")
    print(f"  Serial:      {result.serial_number}")
    print(f"  Truncated:   {result.truncated}")
    print(f"  Check digit: {result.check_digit_valid}")


if __name__ == "__main__":
    demo_json_output()
