"""Command-line validator for JSON documents.

Usage:
    strictjson data.json
    strictjson - < data.json
    strictjson --format json --reject-duplicate-keys data.json

Output:
    OK <kind>   Document parsed; <kind> is the root value kind

Exit Codes:
    0   Parsed successfully
    1   Syntax error (diagnostic on stderr)
    2   Input could not be read, or exceeded the size limit

Python 3.13+.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from strictjson.diagnostics import DiagnosticFormatter, OutputFormat
from strictjson.enums import DuplicateKeyPolicy
from strictjson.syntax.cursor import ParseError
from strictjson.syntax.parser import JsonParser

__all__ = ["build_arg_parser", "main"]

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_SYNTAX_ERROR = 1
EXIT_INPUT_ERROR = 2


def _positive_int(text: str) -> int:
    value = int(text)
    if value < 1:
        msg = f"must be >= 1, got {value}"
        raise argparse.ArgumentTypeError(msg)
    return value


def build_arg_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the strictjson command."""
    parser = argparse.ArgumentParser(
        prog="strictjson",
        description="Validate a JSON document against strict RFC 8259 grammar.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Validate a file:
  strictjson config.json

  # Validate stdin, machine-readable diagnostics:
  cat payload.json | strictjson --format json -
""",
    )
    parser.add_argument(
        "file",
        nargs="?",
        default="-",
        help="JSON file to validate ('-' or omitted reads stdin)",
    )
    parser.add_argument(
        "--format",
        choices=[fmt.value for fmt in OutputFormat],
        default=OutputFormat.RUST.value,
        help="Diagnostic output style (default: rust)",
    )
    parser.add_argument(
        "--max-depth",
        type=_positive_int,
        default=None,
        help="Maximum array/object nesting depth",
    )
    parser.add_argument(
        "--reject-duplicate-keys",
        action="store_true",
        help="Treat a repeated object key as a syntax error",
    )
    parser.add_argument(
        "--combine-surrogates",
        action="store_true",
        help="Merge escaped UTF-16 surrogate pairs into single code points",
    )
    parser.add_argument(
        "--context",
        type=int,
        default=2,
        help="Source lines shown around a syntax error (default: 2)",
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )
    return parser


def _read_source(file_arg: str) -> str:
    if file_arg == "-":
        return sys.stdin.read()
    return Path(file_arg).read_text(encoding="utf-8")


def _report_error(error: ParseError, output_format: OutputFormat, context_lines: int) -> None:
    formatter = DiagnosticFormatter(output_format=output_format)
    print(formatter.format(error.to_diagnostic()), file=sys.stderr)
    if output_format is not OutputFormat.JSON and context_lines >= 0:
        print(file=sys.stderr)
        print(error.format_with_context(context_lines), file=sys.stderr)


def main(argv: list[str] | None = None) -> int:
    """Main entry point.

    Args:
        argv: Arguments without the program name (default: sys.argv[1:])

    Returns:
        Process exit code
    """
    args = build_arg_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        source = _read_source(args.file)
    except (OSError, UnicodeDecodeError) as e:
        print(f"strictjson: cannot read {args.file}: {e}", file=sys.stderr)
        return EXIT_INPUT_ERROR

    parser = JsonParser(
        max_nesting_depth=args.max_depth,
        duplicate_keys=(
            DuplicateKeyPolicy.REJECT
            if args.reject_duplicate_keys
            else DuplicateKeyPolicy.LAST_WINS
        ),
        combine_surrogates=args.combine_surrogates,
    )

    try:
        result = parser.try_parse(source)
    except ValueError as e:
        print(f"strictjson: {e}", file=sys.stderr)
        return EXIT_INPUT_ERROR

    if isinstance(result, ParseError):
        _report_error(result, OutputFormat(args.format), args.context)
        return EXIT_SYNTAX_ERROR

    logger.debug("Parsed %s from %s", result.kind, args.file)
    print(f"OK {result.kind}")
    return EXIT_OK
