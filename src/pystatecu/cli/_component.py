"""
Shared component handling for the CLI subcommands.

Determines which StateCU component a file holds (from ``--type`` or the
file extension) and reads it.
"""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Any

from pystatecu.core.dataset import ComponentType
from pystatecu.io.dataset import read_component
from pystatecu.io.delay_table import INTERVAL_PERCENT

_TYPE_CHOICES = [c.extension for c in ComponentType]


def add_component_arguments(p: argparse.ArgumentParser) -> None:
    """Add the ``--type`` and ``--interval`` options to a subcommand."""
    p.add_argument(
        "--type",
        dest="component_type",
        choices=_TYPE_CHOICES,
        default=None,
        help="File type (default: from the file extension)",
    )
    p.add_argument(
        "--interval",
        type=int,
        default=INTERVAL_PERCENT,
        help=(
            "Delay table interval: number of values per table, or -1 (percent) "
            "/ -100 (fraction) for tables with their own counts (default: -1)"
        ),
    )


def resolve_component(args: argparse.Namespace, path: Path) -> ComponentType:
    """Return the component selected by ``--type`` or the extension of *path*."""
    if args.component_type:
        return ComponentType.from_name(args.component_type)
    return ComponentType.from_path(path)


def read_records(args: argparse.Namespace, path: Path) -> tuple[ComponentType, list[Any]]:
    """Read *path* as the component selected by *args*."""
    component = resolve_component(args, path)
    return component, read_component(component, path, args.interval)
