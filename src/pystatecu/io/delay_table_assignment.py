"""
Delay Table Assignment (DLA) Reader/Writer for StateCU.

Each line assigns the return flow of one CU location to delay tables::

    ID          ND   Pct   DTID   Pct   DTID ...
    a12         i2  (f8.2  i8) repeated ND times
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path
from typing import TextIO

from pystatecu.components.delay_table_assignment import DelayTableAssignment
from pystatecu.io.base import BaseReader, BaseWriter
from pystatecu.io.config import WriteOptions
from pystatecu.io.statecu_reader import (
    FixedField,
    FixedFormat,
    LineBuffer,
    is_integer,
    parse_optional_float,
    parse_optional_int,
)

logger = logging.getLogger(__name__)

DLA_FORMAT = FixedFormat(
    name="delay table assignment",
    fields=(
        FixedField("id", 12),
        FixedField("ndt", 2),
    ),
)

DLA_GROUP_FORMAT = FixedFormat(
    name="delay table assignment group",
    fields=(
        FixedField("percent", 8),
        FixedField("table_id", 8),
    ),
)

# Column where the first (percent, table) group starts, and group width
GROUP_START = 14
GROUP_WIDTH = 16


def parse_delay_table_assignment(line: str) -> DelayTableAssignment:
    """Parse one data line of a delay table assignment file."""
    head = DLA_FORMAT.read(line)
    data = DelayTableAssignment(id=head["id"], name=head["id"])
    ndt = parse_optional_int(head["ndt"], default=0)
    data.set_num_delay_tables(max(ndt, 0))
    for i in range(data.num_delay_tables):
        group = DLA_GROUP_FORMAT.read(line[GROUP_START + i * GROUP_WIDTH :])
        percent = parse_optional_float(group["percent"], default=0.0)
        data.set_delay_table_percent(percent, i)
        data.set_delay_table_id(group["table_id"], i)
    return data


def format_delay_table_assignment(data: DelayTableAssignment) -> str:
    """Format one assignment as a data line.

    Table identifiers must be integers in this file; others are written as 0.
    """
    parts = ["%-12.12s" % data.id, "%2d" % data.num_delay_tables]
    for i in range(data.num_delay_tables):
        table_id = data.get_delay_table_id(i)
        parts.append("%8.2f" % data.get_delay_table_percent(i))
        parts.append("%8d" % (int(table_id) if is_integer(table_id) else 0))
    return "".join(parts)


class DelayTableAssignmentReader(BaseReader):
    """Reader for StateCU delay table assignment files."""

    @property
    def format(self) -> str:
        return "dla"

    def read(self) -> list[DelayTableAssignment]:
        logger.info("Reading StateCU delay table assignment file: %s", self.filepath)
        buffer = LineBuffer.from_file(self.filepath)
        records = [parse_delay_table_assignment(line) for _, line in buffer.data_lines()]
        logger.info("Read %d delay table assignments from %s", len(records), self.filepath)
        return records


class DelayTableAssignmentWriter(BaseWriter):
    """Writer for StateCU delay table assignment files."""

    template_name = "delay_table_assignment.j2"

    @property
    def format(self) -> str:
        return "dla"

    def write_records(self, f: TextIO, records: list[DelayTableAssignment]) -> None:
        for data in records:
            f.write(format_delay_table_assignment(data) + "\n")


def read_delay_table_assignments(filepath: Path | str) -> list[DelayTableAssignment]:
    """Read a StateCU delay table assignment (``.dla``) file.

    Args:
        filepath: Path to the file

    Returns:
        Assignments in file order
    """
    return DelayTableAssignmentReader(filepath).read()


def write_delay_table_assignments(
    records: Sequence[DelayTableAssignment | None],
    filepath: Path | str,
    previous_file: Path | str | None = None,
    new_comments: Sequence[str] | None = None,
    options: WriteOptions | None = None,
) -> None:
    """Write a StateCU delay table assignment (``.dla``) file.

    Args:
        records: Assignments to write (``None`` entries are skipped)
        filepath: Output path
        previous_file: Earlier version of the file whose header is kept
        new_comments: Comments to add to the header
        options: Output options
    """
    DelayTableAssignmentWriter(filepath, options).write(records, previous_file, new_comments)
