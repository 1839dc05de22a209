#!/usr/bin/env python3
"""
Simple CLI for decoding a medicine scan.

Usage:
    python parse_scan.py "01034009340123081723063010ABC123"

Output:
    JSON with productCode, expiryDate, batchNumber and source
"""

import sys

from medscan import classify, scan_to_json


def main():
    """Main CLI entry point."""
    if len(sys.argv) < 2:
        print("Usage: python parse_scan.py <scan_text>")
        print("\nExample:")
        print('  python parse_scan.py "01034009340123081723063010ABC123"')
        sys.exit(1)

    scan_text = sys.argv[1]
    print(scan_to_json(scan_text))

    if classify(scan_text) is None:
        sys.exit(1)


if __name__ == "__main__":
    main()
