"""
Delay (Return Flow) Table Reader/Writer for StateCU.

Each table starts with its identifier, optionally followed by its value
count, then the return values; values may continue on following lines::

    ID  Ndly  Ret1 Ret2 ... Ret12
              Ret13 ...

The control-file interval selects the variant: a positive interval is
the fixed number of values in every table (no count column), ``-1``
means each table carries its own count with values in percent, and
``-100`` means the same with values as fractions.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path
from typing import TextIO

from pystatecu.components.delay_table import (
    UNITS_FRACTION,
    UNITS_PERCENT,
    DelayTable,
)
from pystatecu.core.exceptions import FileFormatError
from pystatecu.io.base import BaseReader, BaseWriter
from pystatecu.io.config import DEFAULT_DELAY_INTERVAL, WriteOptions
from pystatecu.io.statecu_reader import (
    COMMENT_CHAR,
    LineBuffer,
    parse_count,
    parse_optional_float,
    split_tokens,
)

logger = logging.getLogger(__name__)

INTERVAL_PERCENT = DEFAULT_DELAY_INTERVAL
INTERVAL_FRACTION = -100

VALUES_PER_LINE = 12
CONTINUATION_PREFIX = " " * 12


class DelayTableReader(BaseReader):
    """Reader for StateCU delay table files."""

    def __init__(self, filepath: Path | str, interval: int = INTERVAL_PERCENT) -> None:
        """
        Initialize the reader.

        Args:
            filepath: Path to the file to read
            interval: Fixed value count (> 0), or -1 / -100 for
                per-table counts in percent / fraction
        """
        super().__init__(filepath)
        self.interval = interval

    @property
    def format(self) -> str:
        return "dly"

    @property
    def units(self) -> str:
        return UNITS_FRACTION if self.interval == INTERVAL_FRACTION else UNITS_PERCENT

    def read(self) -> list[DelayTable]:
        logger.info("Reading StateCU delay table file: %s", self.filepath)
        tables: list[DelayTable] = []
        table: DelayTable | None = None
        expected = 0

        buffer = LineBuffer.from_file(self.filepath)
        for line_num, line in buffer.data_lines():
            # Comments may be indented in this file
            if line.strip().startswith(COMMENT_CHAR):
                continue
            tokens = split_tokens(line)
            if table is None:
                table = DelayTable(id=tokens[0], name=tokens[0], units=self.units)
                tables.append(table)
                tokens = tokens[1:]
                if self.interval < 0:
                    if not tokens:
                        raise FileFormatError(
                            f"Missing number of values for delay table {table.id}",
                            line_number=line_num,
                        )
                    expected = parse_count(
                        tokens[0], f"number of values in delay table {table.id}", line_num
                    )
                    tokens = tokens[1:]
                else:
                    expected = self.interval

            for token in tokens:
                table.add_ret_val(parse_optional_float(token))

            if table.ndly >= expected:
                if table.ndly > expected:
                    logger.warning(
                        "Delay table %s has %d values, expected %d",
                        table.id,
                        table.ndly,
                        expected,
                    )
                table = None

        if table is not None:
            logger.warning(
                "Delay table %s ended with %d of %d values", table.id, table.ndly, expected
            )
        logger.info("Read %d delay tables from %s", len(tables), self.filepath)
        return tables


def format_delay_table(table: DelayTable, interval: int = INTERVAL_PERCENT) -> list[str]:
    """Format a delay table as its data lines (12 values per line).

    The value count follows the ID unless *interval* is positive, in
    which case every table has that fixed number of values.
    """
    lines: list[str] = []
    current = "%8s" % table.table_id
    if interval <= 0:
        current += "%4d" % table.ndly
    printed = False
    for j, value in enumerate(table.ret_vals):
        current += "%8.2f" % value
        printed = False
        if (j + 1) % VALUES_PER_LINE == 0:
            lines.append(current)
            current = CONTINUATION_PREFIX
            printed = True
    if not printed:
        lines.append(current)
    return lines


class DelayTableWriter(BaseWriter):
    """Writer for StateCU delay table files."""

    template_name = "delay_table.j2"

    @property
    def format(self) -> str:
        return "dly"

    def write_records(self, f: TextIO, records: list[DelayTable]) -> None:
        interval = self.options.delay_interval
        logger.debug("Writing %d delay tables", len(records))
        for table in records:
            if 0 < interval != table.ndly:
                logger.warning(
                    "Delay table %s has %d values, expected %d", table.id, table.ndly, interval
                )
            for line in format_delay_table(table, interval):
                f.write(line + "\n")


def read_delay_tables(filepath: Path | str, interval: int = INTERVAL_PERCENT) -> list[DelayTable]:
    """Read a StateCU delay table (``.dly``) file.

    Args:
        filepath: Path to the file
        interval: Fixed value count (> 0), or -1 / -100 for per-table
            counts in percent / fraction

    Returns:
        Delay tables in file order
    """
    return DelayTableReader(filepath, interval).read()


def write_delay_tables(
    tables: Sequence[DelayTable | None],
    filepath: Path | str,
    previous_file: Path | str | None = None,
    new_comments: Sequence[str] | None = None,
    options: WriteOptions | None = None,
) -> None:
    """Write a StateCU delay table (``.dly``) file.

    Args:
        tables: Tables to write (``None`` entries are skipped)
        filepath: Output path
        previous_file: Earlier version of the file whose header is kept
        new_comments: Comments to add to the header
        options: Output options; ``delay_interval`` selects the fixed
            variant (no count column)
    """
    DelayTableWriter(filepath, options).write(tables, previous_file, new_comments)
