"""
CLI subcommand for validating a StateCU file.

Usage::

    pystatecu validate <file> [--type TYPE] [--complete]
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from pystatecu.cli._component import add_component_arguments, read_records
from pystatecu.core.dataset import StateCUDataSet
from pystatecu.core.exceptions import PyStateCUError


def add_validate_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    """Register the ``pystatecu validate`` subcommand."""
    p = subparsers.add_parser(
        "validate",
        help="Check the values in a StateCU file",
        description="Read a StateCU file and list every validation problem.",
    )
    p.add_argument("file", type=Path, help="StateCU file to check")
    add_component_arguments(p)
    p.add_argument(
        "--complete",
        action="store_true",
        help="Also report missing values and blank names",
    )
    p.set_defaults(func=run_validate)


def run_validate(args: argparse.Namespace) -> int:
    """Validate a file; return 1 if any problem is found."""
    path: Path = args.file
    if not path.is_file():
        print(f"Error: file not found: {path}", file=sys.stderr)
        return 1

    try:
        component, records = read_records(args, path)
    except PyStateCUError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    dataset = StateCUDataSet()
    dataset.set_component(component, records)
    problems = dataset.validate(complete=args.complete)

    for problem, recommendation in problems:
        print(f"{problem}  {recommendation}")
    print(f"{len(records)} {component.description} records, {len(problems)} problems")
    return 1 if problems else 0
