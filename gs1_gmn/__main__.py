"""
CLI interface for the GMN check character library.

Usage:
    python -m gs1_gmn verify "1987654Ad4X4bL5ttr2310c2K"
    python -m gs1_gmn complete "1987654Ad4X4bL5ttr2310c"
    python -m gs1_gmn check "1987654Ad4X4bL5ttr2310c"
    python -m gs1_gmn verify --file gmns.txt
    python -m gs1_gmn positions "12345£Ad4X4bL5" --partial

Options:
    --file PATH     Process one GMN per line of PATH
    --json          Output result as JSON
    -v, --verbose   Log debug information to stderr

Exit status is 0 when every input is valid, 1 on an invalid check pair or
format error, 2 when the input file cannot be read.
"""

import argparse
import json
import logging
import sys
from typing import List, Optional, Tuple

from .core.gmn import (
    add_check_characters,
    check_characters,
    verify_check_characters,
)
from .errors import GMNFormatError
from .formatters.json_formatter import FormatOptions, gmn_result_to_dict
from .validators.validators import good_character_positions


logger = logging.getLogger(__name__)

VALID = "*** Valid ***"
NOT_VALID = "*** Not valid ***"


def run_operation(operation: str, value: str) -> Tuple[bool, str]:
    """
    Run one operation on one value for text output.

    Returns:
        (success, outcome) where outcome is the text to display
    """
    try:
        if operation == "verify":
            valid = verify_check_characters(value)
            return valid, VALID if valid else NOT_VALID
        if operation == "complete":
            return True, add_check_characters(value)
        return True, check_characters(value)
    except GMNFormatError as e:
        return False, e.message


def format_positions(value: str, good: List[bool]) -> str:
    """Show the value with a ``^`` marker under each bad character."""
    if all(good):
        return f"{value}\nAll characters are valid for their positions"
    markers = "".join(" " if ok else "^" for ok in good).rstrip()
    return f"{value}\n{markers}"


def process_value(operation: str, value: str, as_json: bool) -> int:
    """Handle a single value given on the command line."""
    if as_json:
        output = gmn_result_to_dict(value, operation, FormatOptions(include_positions=True))
        print(json.dumps(output, indent=2, ensure_ascii=False))
        return 0 if output["Valid"] else 1

    if operation == "verify":
        try:
            valid = verify_check_characters(value)
        except GMNFormatError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1
        print("The check characters are " + ("valid" if valid else "NOT valid"))
        return 0 if valid else 1

    success, outcome = run_operation(operation, value)
    if not success:
        print(f"Error: {outcome}", file=sys.stderr)
        return 1
    print(outcome)
    return 0


def process_file(operation: str, path: str, as_json: bool) -> int:
    """Handle one value per line of a file, printing ``value : outcome``."""
    try:
        with open(path, encoding="utf-8") as f:
            lines = [line.rstrip("\r\n") for line in f]
    except OSError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    logger.debug("Processing %d lines from %s", len(lines), path)

    all_ok = True
    if as_json:
        outputs = []
        for line in lines:
            output = gmn_result_to_dict(line, operation)
            all_ok = all_ok and output["Valid"]
            outputs.append(output)
        print(json.dumps(outputs, indent=2, ensure_ascii=False))
        return 0 if all_ok else 1

    for line in lines:
        success, outcome = run_operation(operation, line)
        all_ok = all_ok and success
        print(f"{line} : {outcome}")

    return 0 if all_ok else 1


def process_positions(value: str, complete: bool, as_json: bool) -> int:
    """Report per-character validity without raising."""
    good = good_character_positions(value, complete)
    if as_json:
        output = {
            "Input": value,
            "Complete": complete,
            "Good Positions": good,
        }
        print(json.dumps(output, indent=2, ensure_ascii=False))
    else:
        print(format_positions(value, good))
    return 0 if all(good) else 1


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='gs1_gmn',
        description='Calculate and verify GS1 Global Model Number check characters'
    )
    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='Log debug information to stderr'
    )

    subparsers = parser.add_subparsers(dest='operation', required=True)

    for name, help_text in (
        ('verify', 'Verify the check characters of a complete GMN'),
        ('complete', 'Complete a partial GMN by adding check characters'),
        ('check', 'Print only the check characters of a partial GMN'),
    ):
        sub = subparsers.add_parser(name, help=help_text)
        sub.add_argument('value', nargs='?', help='GMN data')
        sub.add_argument(
            '--file',
            default=None,
            help='Process one GMN per line of this file'
        )
        sub.add_argument(
            '--json',
            action='store_true',
            help='Output result as JSON'
        )

    positions = subparsers.add_parser(
        'positions',
        help='Show which characters are invalid for their position'
    )
    positions.add_argument('value', help='GMN data')
    positions.add_argument(
        '--partial',
        action='store_true',
        help='The value has no check character pair'
    )
    positions.add_argument(
        '--json',
        action='store_true',
        help='Output result as JSON'
    )

    return parser


def main(argv: Optional[list] = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.operation == 'positions':
        return process_positions(args.value, not args.partial, args.json)

    if (args.value is None) == (args.file is None):
        parser.error("supply either a GMN value or --file, but not both")

    if args.file is not None:
        return process_file(args.operation, args.file, args.json)
    return process_value(args.operation, args.value, args.json)


if __name__ == '__main__':
    sys.exit(main())
