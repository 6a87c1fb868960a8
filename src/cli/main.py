"""csv2json CLI entry points.

This module parses arguments, validates the input path, and runs the
streaming conversion pipeline.
"""

from __future__ import annotations

import argparse
import sys
from typing import Sequence

from cli.input_validation import validate_input_path
from core.config import ConverterConfig
from core.constants import SEPARATOR_DELIMITERS
from core.errors import Csv2JsonError
from core.types import ConversionOptions
from ingest.pipeline import convert_csv_to_json


def build_parser(config: ConverterConfig) -> argparse.ArgumentParser:
    """Build the CLI parser with environment-derived defaults.

    Args:
        config: Runtime defaults.

    Returns:
        Configured argument parser.
    """
    parser = argparse.ArgumentParser(
        prog="csv2json",
        description="Convert a CSV table into a JSON array of row objects",
    )
    parser.add_argument("csv_file", help="CSV file to convert")
    parser.add_argument(
        "--separator",
        default=config.separator,
        choices=sorted(SEPARATOR_DELIMITERS),
        help="Column separator",
    )
    parser.add_argument(
        "--pretty",
        action=argparse.BooleanOptionalAction,
        default=config.pretty,
        help="Generate pretty, indented JSON",
    )
    parser.add_argument("--encoding", default=config.encoding, help="Input file encoding")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the csv2json CLI.

    Args:
        argv: Optional argument vector.

    Returns:
        Process exit code.
    """
    try:
        config = ConverterConfig.from_env()
    except Csv2JsonError as error:
        return _exit_with_error(error)
    args = build_parser(config).parse_args(argv)
    try:
        options = ConversionOptions(
            input_path=validate_input_path(args.csv_file),
            separator=args.separator,
            pretty=args.pretty,
            encoding=args.encoding,
        )
        print("Writing JSON file...")
        result = convert_csv_to_json(options)
    except Csv2JsonError as error:
        return _exit_with_error(error)
    print(f"Completed! {result.output_path}")
    return 0


def _exit_with_error(error: Csv2JsonError) -> int:
    """Report a fatal error on stderr and return the failure exit code."""
    print(f"error: {error}", file=sys.stderr)
    return 1
