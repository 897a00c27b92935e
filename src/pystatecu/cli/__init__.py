"""
pystatecu command-line interface.

Usage:
    pystatecu validate FILE        Check the values in a StateCU file
    pystatecu convert IN OUT       Rewrite a StateCU file
    pystatecu export IN OUT        Write a delimited list file
    python -m pystatecu <command>  Same as above
"""

from __future__ import annotations

import argparse
import logging


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="pystatecu",
        description="Python tools for StateCU consumptive use model input files.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Register subcommands
    from pystatecu.cli.convert import add_convert_parser
    from pystatecu.cli.export import add_export_parser
    from pystatecu.cli.validate import add_validate_parser

    add_validate_parser(subparsers)
    add_convert_parser(subparsers)
    add_export_parser(subparsers)

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    # Dispatch to the subcommand handler
    result: int = args.func(args)
    return result


__all__ = ["main"]
