"""CLI entry point for decimal weights."""

import argparse
import json
import sys
from typing import Optional

from . import __version__
from .exceptions import WeightException
from .logging import configure_logging, WeightLogger
from .config import get_settings
from .models import Unit, Weight


def setup_logging(verbose: bool = False, log_format: str = None) -> None:
    """Configure logging.

    Args:
        verbose: Enable debug level logging
        log_format: Output format ('json' or 'text'). Defaults to settings value.
    """
    settings = get_settings()
    level = "DEBUG" if verbose else settings.log_level
    fmt = log_format or settings.log_format
    configure_logging(log_level=level, log_format=fmt)


def build_parser() -> argparse.ArgumentParser:
    """Build the command line parser."""
    parser = argparse.ArgumentParser(
        prog="decimal-weight",
        description="Convert and compare weights with exact decimal arithmetic",
        epilog='Example: decimal-weight convert "3.5 lb" --to kg',
    )

    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Verbose output",
    )

    parser.add_argument(
        "--log-format",
        choices=["json", "text"],
        default=None,
        help="Log output format: 'json' for structured, 'text' for human-readable",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    convert = subparsers.add_parser("convert", help="Convert a weight to another unit")
    convert.add_argument("weight", help='Weight to convert, e.g. "3.5 lb"')
    convert.add_argument(
        "-t",
        "--to",
        required=True,
        help="Target unit name or abbreviation (e.g. kg, ounce)",
    )
    convert.add_argument(
        "-r",
        "--round",
        type=int,
        default=None,
        dest="precision",
        help="Round the result to this many decimal places",
    )
    convert.add_argument(
        "--json",
        action="store_true",
        help="Print the structured form instead of text",
    )

    compare = subparsers.add_parser(
        "compare", help="Compare two weights; prints -1, 0 or 1"
    )
    compare.add_argument("left", help='Left weight, e.g. "1 lb"')
    compare.add_argument("right", help='Right weight, e.g. "16 oz"')

    return parser


def run_convert(args: argparse.Namespace, logger: WeightLogger) -> str:
    weight = Weight.parse(args.weight)
    target = Unit.from_text(args.to)
    if target is None:
        raise WeightException(f"Unknown unit: '{args.to}'", {"unit": args.to})

    result = weight.to(target)
    if args.precision is not None:
        result = result.round(args.precision)

    logger.conversion_performed(
        source=weight.unit.value,
        dest=target.value,
        value=str(weight),
        result=str(result),
    )

    if args.json:
        return json.dumps(result.to_structured(), ensure_ascii=False)
    return str(result)


def run_compare(args: argparse.Namespace) -> str:
    left = Weight.parse(args.left)
    right = Weight.parse(args.right)
    return str(left.cmp(right))


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)
    setup_logging(args.verbose, args.log_format)
    logger = WeightLogger(__name__)

    try:
        if args.command == "convert":
            output = run_convert(args, logger)
        else:
            output = run_compare(args)
    except WeightException as e:
        logger.cli_error(command=args.command, error=str(e), error_type=type(e).__name__)
        print(f"error: {e.message}", file=sys.stderr)
        return 1

    print(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
