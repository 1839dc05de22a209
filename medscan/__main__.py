"""
CLI interface for medscan.

Usage:
    python -m medscan "<scanned text>" [options]

Options:
    --json        Output as JSON
    --raw         Include the full GS1 parse (JSON only)
    --verbose     Log decoding decisions to stderr
"""

import argparse
import json
import logging
import sys
from typing import Optional

from .core.classifier import ScanResult, classify
from .core.options import ScanOptions
from .core.parser import Gs1ParseResult, parse_gs1
from .formatters.json_formatter import format_scan_result
from .validators.validators import expiry_status


def format_result(
    raw: str,
    result: Optional[ScanResult],
    gs1: Gs1ParseResult
) -> str:
    """Format a classified scan for display."""
    lines = [
        "=" * 60,
        "Medicine Scan Result",
        "=" * 60,
        f"Raw Input: {raw!r}",
    ]

    if result is None:
        lines.extend([
            "Recognized: False",
            "Not a medicine code, try manual search.",
        ])
        return '\n'.join(lines)

    lines.extend([
        "Recognized: True",
        f"Source: {result.source.value}",
        f"Product Code (CIP13): {result.product_code}",
        f"Expiry Date: {result.expiry_date or '-'}",
        f"Expiry Status: {expiry_status(result.expiry_date).value}",
        f"Batch/Lot Number: {result.batch_number or '-'}",
    ])

    if gs1.is_gs1_structured:
        lines.extend([
            "",
            "GS1 Fields:",
            "-" * 40,
        ])
        if gs1.symbology_identifier:
            lines.append(f"  Symbology: {gs1.symbology_identifier}")
        for ai, value in gs1.fields.items():
            lines.append(f"  AI({ai}): {value!r}")
        if gs1.serial_number is not None:
            lines.append(f"  Serial Number: {gs1.serial_number}")
        if gs1.check_digit_valid is not None:
            lines.append(f"  Check Digit Valid: {gs1.check_digit_valid}")
        if gs1.truncated:
            lines.append("  Warning: unknown AI, trailing data not decoded")

    return '\n'.join(lines)


def main(argv: Optional[list] = None) -> int:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog='medscan',
        description='Decode medicine barcodes (GS1 DataMatrix or CIP13)'
    )

    parser.add_argument(
        'scan',
        help='Scanned text to decode'
    )

    parser.add_argument(
        '--json',
        action='store_true',
        help='Output result as JSON'
    )

    parser.add_argument(
        '--raw',
        action='store_true',
        help='Include the full GS1 parse in JSON output'
    )

    parser.add_argument(
        '--verbose',
        action='store_true',
        help='Log decoding decisions to stderr'
    )

    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    try:
        options = ScanOptions.from_env()
    except ValueError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 2

    result = classify(args.scan, options=options)
    gs1 = parse_gs1(args.scan, options=options)

    if args.json:
        if result is None:
            output = {"error": "Scan not recognized", "input": args.scan}
        else:
            output = format_scan_result(result, include_status=True)
        if args.raw:
            output["gs1"] = gs1.to_dict()
        print(json.dumps(output, indent=2, ensure_ascii=False))
    else:
        print(format_result(args.scan, result, gs1))

    return 0 if result is not None else 1


if __name__ == '__main__':
    sys.exit(main())
