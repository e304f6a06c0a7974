"""
CLI interface for the HIBC UDI encoder.

Usage:
    python -m hibc_udi primary --lic A123 --pcn BJC5D6E71G --uom 1
    python -m hibc_udi secondary --lic A123 --pcn BJC5D6E71G --uom 1 --lot 3C001
    python -m hibc_udi combined --lic A123 --pcn BJC5D6E71G --uom 1 --lot 3C001 \\
        --exp 20200101 --exp-format YYYYMMDD
    python -m hibc_udi check "+A123BJC5D6E71"

Options:
    --json              Output as JSON
    --human-readable    Print the human-readable line (*...*) instead
    --details           Print all label fields
    --lax-lic           Accept LICs that start with a digit
    --strict-dates      Reject dates that are not on the calendar
    -v, --verbose       Debug logging
"""

import argparse
import json
import logging
import sys
from typing import Any, Dict, Optional

from .core.check_char import generate_check_char, verify_check_char
from .core.data_structure import (
    DataStructureType,
    EncodeOptions,
    build_secondary_config,
    encode_data_structure,
)
from .errors import HIBCError
from .formats import DateFormat, QuantityFormat
from .formatters.fields import barcodify
from .json_formatter import check_char_to_dict, format_udi_result


logger = logging.getLogger("hibc_udi")


def format_result(result: Dict[str, Any]) -> str:
    """Format an output dict for display."""
    lines = [
        "=" * 60,
        f"HIBC {result['Data Structure']} Data Structure",
        "=" * 60,
    ]
    for key, value in result.items():
        if key == "Data Structure" or value is None:
            continue
        lines.append(f"{key + ':':30} {value!s}")
    return '\n'.join(lines)


def _add_identity_arguments(parser: argparse.ArgumentParser, required: bool) -> None:
    parser.add_argument('--lic', required=required, help='Labeler Identification Code (4 characters)')
    parser.add_argument('--pcn', required=required, help='Product or Catalog Number (1-18 characters)')
    parser.add_argument('--uom', type=int, required=required, help='Unit of measure (0-9)')


def _add_secondary_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument('--lot', help='Lot/batch number')
    parser.add_argument('--sn', help='Serial number')
    parser.add_argument('--qty', help='Quantity (2 or 5 digits)')
    parser.add_argument(
        '--qty-format',
        choices=[f.value for f in QuantityFormat],
        default=QuantityFormat.QQ.value,
        help='Quantity format (default: QQ)'
    )
    parser.add_argument('--exp', help='Expiration date digits')
    parser.add_argument(
        '--exp-format',
        choices=[f.value for f in DateFormat],
        default=DateFormat.YYMMDD.value,
        help='Expiration date format (default: YYMMDD)'
    )
    parser.add_argument('--mfg', help='Manufacture date (YYYYMMDD)')


def _add_common_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument('--json', action='store_true', help='Output result as JSON')
    parser.add_argument(
        '--human-readable',
        action='store_true',
        help='Print only the human-readable line placed under the barcode'
    )
    parser.add_argument('--details', action='store_true', help='Print all label fields')
    parser.add_argument('--lax-lic', action='store_true', help='Accept LICs starting with a digit')
    parser.add_argument('--strict-dates', action='store_true', help='Reject non-calendar dates')
    parser.add_argument('-v', '--verbose', action='store_true', help='Enable debug logging')


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='hibc_udi',
        description='Encode HIBC UDI data structures'
    )
    subparsers = parser.add_subparsers(dest='command', required=True)

    primary = subparsers.add_parser('primary', help='Primary data structure')
    _add_identity_arguments(primary, required=True)
    primary.add_argument('--no-check-char', action='store_true', help='Do not append the check character')
    _add_common_arguments(primary)

    secondary = subparsers.add_parser('secondary', help='Secondary data structure')
    _add_identity_arguments(secondary, required=False)
    _add_secondary_arguments(secondary)
    secondary.add_argument('--no-check-char', action='store_true', help='Do not append the check character')
    _add_common_arguments(secondary)

    combined = subparsers.add_parser('combined', help='Combined data structure')
    _add_identity_arguments(combined, required=True)
    _add_secondary_arguments(combined)
    _add_common_arguments(combined)

    check = subparsers.add_parser('check', help='Compute the check character of data')
    check.add_argument('data', help='Data characters')
    check.add_argument(
        '--verify',
        action='store_true',
        help='Treat the last character of data as check character and verify it'
    )
    check.add_argument('--json', action='store_true', help='Output result as JSON')
    check.add_argument('-v', '--verbose', action='store_true', help='Enable debug logging')

    return parser


def _fields_from_args(args: argparse.Namespace) -> Dict[str, Any]:
    fields: Dict[str, Any] = {
        'lic': args.lic,
        'pcn': args.pcn,
        'unit_of_measure': args.uom,
        'no_check_char': getattr(args, 'no_check_char', False),
    }
    if args.command == 'primary':
        return fields
    fields.update(
        lot=args.lot,
        sn=args.sn,
        manufacture_date=args.mfg,
    )
    if args.qty is not None:
        fields['quantity'] = {'format': args.qty_format, 'value': args.qty}
    if args.exp is not None:
        fields['exp_date'] = {'format': args.exp_format, 'value': args.exp}
    return fields


def _run_check(args: argparse.Namespace) -> int:
    if args.verify:
        valid = verify_check_char(args.data)
        if args.json:
            print(json.dumps({"Data": args.data, "Valid": valid}, indent=2))
        else:
            print("valid" if valid else "invalid")
        return 0 if valid else 1

    if args.json:
        print(json.dumps(check_char_to_dict(args.data), indent=2, ensure_ascii=False))
    else:
        print(generate_check_char(args.data))
    return 0


def main(argv: Optional[list] = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        if args.command == 'check':
            return _run_check(args)

        options = EncodeOptions(strict_lic=not args.lax_lic, strict_dates=args.strict_dates)
        structure = DataStructureType(args.command)
        config = build_secondary_config(**_fields_from_args(args))
        udi = encode_data_structure(structure, config, options)
    except HIBCError as exc:
        logger.debug("Encoding rejected: %s", exc)
        if args.json:
            print(json.dumps(exc.to_dict(), indent=2, ensure_ascii=False))
        else:
            print(f"error: {exc}", file=sys.stderr)
        return 1

    if args.json:
        print(json.dumps(format_udi_result(structure, config, udi), indent=2, ensure_ascii=False))
    elif args.details:
        print(format_result(format_udi_result(structure, config, udi)))
    elif args.human_readable:
        print(barcodify(udi))
    else:
        print(udi)
    return 0


if __name__ == '__main__':
    sys.exit(main())
