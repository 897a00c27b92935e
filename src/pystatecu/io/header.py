"""
Header merging for StateCU output files.

Every StateCU file written by this package starts with a ``#`` comment
block: a provenance block naming the program, user and date, the new
comments supplied by the caller, and then the user comments carried
over from the previous version of the file.  The ``#>`` documentation
block is regenerated on every write and is never carried over.

Functions:
    read_previous_comments: Collect carry-over comments from a file.
    process_file_headers: Build the full ``#`` header for a new file.
"""

from __future__ import annotations

import getpass
import logging
from collections.abc import Sequence
from datetime import datetime
from pathlib import Path

from pystatecu.templates.engine import TemplateEngine, get_engine

logger = logging.getLogger(__name__)

PROGRAM_NAME = "pystatecu"
PROVENANCE_MARKER = "# File generated by"
PROVENANCE_DIVIDER = "#" + "-" * 79
PREVIOUS_COMMENTS_MARKER = "# Comments from previous version of file:"


def _current_user() -> str:
    try:
        return getpass.getuser()
    except (KeyError, OSError):
        return "unknown"


def read_previous_comments(
    previous_file: Path | str | None,
    comment_prefixes: Sequence[str] = ("#",),
    ignore_prefixes: Sequence[str] = ("#>",),
) -> list[str]:
    """Return the comment lines of *previous_file* worth carrying forward.

    Only the leading comment block is scanned.  Lines starting with one
    of *ignore_prefixes* are dropped, as are the provenance block and the
    separator line of an earlier write.

    Args:
        previous_file: File to scan; ``None`` or a missing file gives ``[]``
        comment_prefixes: Prefixes that mark comment lines
        ignore_prefixes: Prefixes of comment lines that are regenerated

    Returns:
        Comment lines without trailing newlines
    """
    if previous_file is None:
        return []
    path = Path(previous_file)
    if not path.is_file():
        return []

    kept: list[str] = []
    in_provenance = False
    with open(path) as f:
        for raw in f:
            line = raw.rstrip("\r\n")
            if not line.startswith(tuple(comment_prefixes)):
                break
            if line.startswith(tuple(ignore_prefixes)):
                continue
            if line.startswith(PROVENANCE_MARKER):
                in_provenance = True
                continue
            if in_provenance:
                if line == PROVENANCE_DIVIDER:
                    in_provenance = False
                continue
            if line == PREVIOUS_COMMENTS_MARKER:
                continue
            kept.append(line)

    logger.debug("Carrying %d comment lines forward from %s", len(kept), path)
    return kept


def process_file_headers(
    previous_file: Path | str | None,
    new_comments: Sequence[str] | None = None,
    comment_prefixes: Sequence[str] = ("#",),
    ignore_prefixes: Sequence[str] = ("#>",),
    engine: TemplateEngine | None = None,
) -> list[str]:
    """Build the ``#`` header lines for a new StateCU file.

    The previous file is read completely here, so it may be the same
    path as the file about to be written.

    Args:
        previous_file: Earlier version of the file, or ``None``
        new_comments: Comments to add (blank strings give a bare ``#``)
        comment_prefixes: Prefixes that mark comment lines
        ignore_prefixes: Prefixes of comment lines that are not carried over
        engine: Template engine (the shared package engine by default)

    Returns:
        Header lines without trailing newlines
    """
    from pystatecu import __version__

    previous = read_previous_comments(previous_file, comment_prefixes, ignore_prefixes)
    engine = engine or get_engine()
    return engine.render_lines(
        "provenance.j2",
        program=PROGRAM_NAME,
        version=__version__,
        user=_current_user(),
        date=datetime.now().strftime("%Y-%m-%d %H:%M:%S"),
        divider=PROVENANCE_DIVIDER,
        comments=list(new_comments or []),
        previous=previous,
        previous_marker=PREVIOUS_COMMENTS_MARKER,
    )
