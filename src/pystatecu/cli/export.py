"""
``pystatecu export`` subcommand.

Writes the records of a StateCU file as a delimited list file.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from pystatecu.cli._component import add_component_arguments, read_records
from pystatecu.core.exceptions import PyStateCUError
from pystatecu.io.config import ListFileOptions
from pystatecu.io.dataset import write_component_list_file

logger = logging.getLogger(__name__)


def add_export_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    """Register the ``export`` subcommand."""
    p = subparsers.add_parser(
        "export",
        help="Export a StateCU file as a delimited list file.",
        description="Write the records of a StateCU file as a delimited list file.",
    )
    p.add_argument("input", type=Path, help="StateCU file to read")
    p.add_argument("output", type=Path, help="List file to write")
    add_component_arguments(p)
    p.add_argument(
        "--delimiter",
        default=",",
        help="Column delimiter (default: ',')",
    )
    p.add_argument(
        "--update",
        action="store_true",
        help="Keep the comments of an existing output file",
    )
    p.set_defaults(func=run_export)


def run_export(args: argparse.Namespace) -> int:
    """Run the ``export`` subcommand."""
    path: Path = args.input
    if not path.is_file():
        print(f"ERROR: File not found: {path}", file=sys.stderr)
        return 1

    try:
        component, records = read_records(args, path)
        options = ListFileOptions(delimiter=args.delimiter, update=args.update)
        write_component_list_file(component, records, args.output, options)
    except PyStateCUError as exc:
        logger.debug("Export failed", exc_info=True)
        print(f"ERROR: {exc}", file=sys.stderr)
        return 1

    print(f"  Exported: {args.output}")
    return 0
