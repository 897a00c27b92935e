"""
Unified StateCU file line-writing utilities.

Mirrors ``statecu_reader.py`` on the output side: every ``io/`` writer should
import helpers from this module rather than defining its own copy.

Canonical helpers
-----------------
- ``format_record``     -- apply a printf-style record format
- ``format_optional``   -- format a value, substituting text for missing
- ``write_header_lines`` -- write pre-built header lines
- ``ensure_parent_dir`` -- create parent directories for an output path
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from pathlib import Path
from typing import Any, TextIO

from pystatecu.core.data import is_missing


def format_record(fmt: str, values: Sequence[Any]) -> str:
    """Apply a C printf-style *fmt* to *values*.

    Python's ``%`` operator honors precision on strings, so ``%-12.12s``
    left-justifies and truncates to 12 characters exactly as the
    Fortran-era StateCU tools do.

    Parameters
    ----------
    fmt : str
        Record format, e.g. ``"%-12.12s%6.6s"``.
    values : Sequence
        One value per conversion in *fmt*.

    Returns
    -------
    str
        The formatted record (no trailing newline).
    """
    return fmt % tuple(values)


def format_optional(value: Any, fmt: str, missing: str = "") -> str:
    """Format *value* with *fmt*, or return *missing* for the sentinel.

    Parameters
    ----------
    value : Any
        Value to format.
    fmt : str
        Single-conversion format, e.g. ``"%6.2f"``.
    missing : str, optional
        Text written in place of a missing value (blank by default).
    """
    if is_missing(value):
        return missing
    return fmt % value


def write_header_lines(f: TextIO, lines: Iterable[str]) -> None:
    """Write each line of a pre-built header followed by a newline."""
    for line in lines:
        f.write(f"{line}\n")


def ensure_parent_dir(filepath: Path) -> None:
    """Create parent directories for *filepath* if they do not exist.

    Parameters
    ----------
    filepath : Path
        Target file path whose parent directory tree will be created.
    """
    filepath.parent.mkdir(parents=True, exist_ok=True)
