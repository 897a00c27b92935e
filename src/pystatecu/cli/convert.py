"""
CLI subcommand for rewriting a StateCU file.

Usage::

    pystatecu convert <input> <output> [--version {current,10}] [--precision N]
                      [--auto-adjust] [--interval N] [--comment TEXT ...]

The ``#`` comments of the input file are carried into the output header.
Delay tables are written in the variant they were read with (``--interval``).
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from pystatecu.cli._component import add_component_arguments, read_records
from pystatecu.core.exceptions import PyStateCUError
from pystatecu.io.config import FileVersion, WriteOptions
from pystatecu.io.dataset import write_component


def add_convert_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    """Register the ``pystatecu convert`` subcommand."""
    p = subparsers.add_parser(
        "convert",
        help="Rewrite a StateCU file, optionally in the Version 10 layout",
    )
    p.add_argument("input", type=Path, help="StateCU file to read")
    p.add_argument("output", type=Path, help="File to write")
    add_component_arguments(p)
    p.add_argument(
        "--version",
        dest="file_version",
        choices=[v.value for v in FileVersion],
        default=FileVersion.CURRENT.value,
        help="Layout to write (default: current)",
    )
    p.add_argument(
        "--precision",
        type=int,
        default=None,
        help="Decimal places for crop coefficients (default: 3)",
    )
    p.add_argument(
        "--auto-adjust",
        action="store_true",
        help="Truncate Version 10 crop names at the first '.'",
    )
    p.add_argument(
        "--comment",
        action="append",
        default=[],
        metavar="TEXT",
        help="Comment to add to the output header (repeatable)",
    )
    p.set_defaults(func=run_convert)


def run_convert(args: argparse.Namespace) -> int:
    """Read the input file and write it back out."""
    path: Path = args.input
    if not path.is_file():
        print(f"Error: file not found: {path}", file=sys.stderr)
        return 1

    options = WriteOptions(
        precision=args.precision,
        version=FileVersion(args.file_version),
        auto_adjust=args.auto_adjust,
        delay_interval=args.interval,
    )
    try:
        component, records = read_records(args, path)
        write_component(component, records, args.output, path, args.comment, options)
    except PyStateCUError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    print(f"Wrote {len(records)} {component.description} records: {args.output}")
    return 0
