#!/usr/bin/env python3
"""
Person record file reader and writer - command line entry points.
"""

import argparse
import sys
from pathlib import Path
from typing import Optional

from .core.reader import PeopleFileReader
from .core.writer import PeopleFileWriter
from .models.config import (
    DEFAULT_APPEND_FILE,
    DEFAULT_INPUT_FILE,
    DEFAULT_OVERWRITE_FILE,
    ReaderConfig,
    WriterConfig,
)
from .utils.exceptions import RecordFileError
from .utils.logging import setup_logging


def _add_common_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Log internal operations to stderr",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Also write log records to this file",
    )


def _add_reader_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "input_file",
        nargs="?",
        type=Path,
        default=DEFAULT_INPUT_FILE,
        help=f"Record file to read (default: {DEFAULT_INPUT_FILE})",
    )
    parser.add_argument(
        "--encoding",
        default=None,
        help="Input encoding (default: detected)",
    )
    _add_common_arguments(parser)


def _add_writer_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "overwrite_file",
        nargs="?",
        type=Path,
        default=DEFAULT_OVERWRITE_FILE,
        help=f"File to overwrite (default: {DEFAULT_OVERWRITE_FILE})",
    )
    parser.add_argument(
        "append_file",
        nargs="?",
        type=Path,
        default=DEFAULT_APPEND_FILE,
        help=f"File to append to (default: {DEFAULT_APPEND_FILE})",
    )
    _add_common_arguments(parser)


def _run_reader(args: argparse.Namespace) -> None:
    config = ReaderConfig.from_cli_args(vars(args))
    PeopleFileReader().run(config)


def _run_writer(args: argparse.Namespace) -> None:
    config = WriterConfig.from_cli_args(vars(args))
    PeopleFileWriter().run(config)


def _execute(action, args: argparse.Namespace) -> None:
    setup_logging(log_file=args.log_file, verbose=args.verbose)
    try:
        action(args)
    except KeyboardInterrupt:
        print("\nOperation cancelled.", file=sys.stderr)
        sys.exit(130)
    except RecordFileError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


def read_main(argv: Optional[list[str]] = None) -> None:
    """Entry point for the record file reader."""
    parser = argparse.ArgumentParser(
        description="Read a person record file by token, line, character and record"
    )
    _add_reader_arguments(parser)
    _execute(_run_reader, parser.parse_args(argv))


def write_main(argv: Optional[list[str]] = None) -> None:
    """Entry point for the record file writer."""
    parser = argparse.ArgumentParser(
        description="Write a person record to an overwritten and an appended file"
    )
    _add_writer_arguments(parser)
    _execute(_run_writer, parser.parse_args(argv))


def main(argv: Optional[list[str]] = None) -> None:
    """Simple main entry point."""
    parser = argparse.ArgumentParser(
        description="Read and write person record files"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    read_parser = subparsers.add_parser("read", help="Read a record file")
    _add_reader_arguments(read_parser)
    read_parser.set_defaults(action=_run_reader)

    write_parser = subparsers.add_parser("write", help="Write a record to files")
    _add_writer_arguments(write_parser)
    write_parser.set_defaults(action=_run_writer)

    args = parser.parse_args(argv)
    _execute(args.action, args)


if __name__ == "__main__":
    main()
