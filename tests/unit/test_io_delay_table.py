"""Tests for the delay table reader/writer (io/delay_table.py)."""

from __future__ import annotations

from pathlib import Path

import pytest

from pystatecu.components.delay_table import UNITS_FRACTION, UNITS_PERCENT, DelayTable
from pystatecu.core.data import MISSING_DOUBLE
from pystatecu.core.exceptions import FileFormatError
from pystatecu.io.config import WriteOptions
from pystatecu.io.delay_table import (
    CONTINUATION_PREFIX,
    INTERVAL_FRACTION,
    format_delay_table,
    read_delay_tables,
    write_delay_tables,
)

TWENTY_VALUES = [5.0] * 20

SAMPLE_DLY = """\
# Monthly return flow delay tables
#>EndHeader
       1   3   50.00   30.00   20.00
       2  14   10.00   10.00   10.00   10.00   10.00   10.00   10.00   10.00   10.00    6.00    1.00    1.00
                1.00    1.00
"""


class TestReadDelayTables:
    def test_variable_interval(self, write_sample) -> None:
        tables = read_delay_tables(write_sample("a.dly", SAMPLE_DLY))
        assert [t.table_id for t in tables] == ["1", "2"]
        assert tables[0].ret_vals == [50.0, 30.0, 20.0]
        assert tables[0].units == UNITS_PERCENT
        assert tables[1].ndly == 14
        assert tables[1].ret_vals[-2:] == [1.0, 1.0]
        assert tables[1].total == pytest.approx(100.0)

    def test_fraction_units(self, write_sample) -> None:
        text = "A 2 0.6 0.4\nB 1 1.0\n"
        tables = read_delay_tables(write_sample("a.dly", text), INTERVAL_FRACTION)
        assert [t.units for t in tables] == [UNITS_FRACTION, UNITS_FRACTION]
        assert tables[0].ret_vals == [0.6, 0.4]

    def test_fixed_interval(self, write_sample) -> None:
        text = "1 50 30 20\n2 60 40\n   0\n"
        tables = read_delay_tables(write_sample("a.dly", text), 3)
        assert [t.ret_vals for t in tables] == [[50.0, 30.0, 20.0], [60.0, 40.0, 0.0]]

    def test_extra_values_close_table(self, write_sample) -> None:
        text = "1 2 50 30 20\n2 1 100\n"
        tables = read_delay_tables(write_sample("a.dly", text))
        assert len(tables) == 2
        assert tables[0].ndly == 3
        assert tables[1].ret_vals == [100.0]

    def test_short_last_table_is_kept(self, write_sample) -> None:
        tables = read_delay_tables(write_sample("a.dly", "1 4 50 30\n"))
        assert tables[0].ret_vals == [50.0, 30.0]

    def test_non_numeric_value_is_missing(self, write_sample) -> None:
        tables = read_delay_tables(write_sample("a.dly", "1 2 50 abc\n"))
        assert tables[0].ret_vals == [50.0, MISSING_DOUBLE]

    def test_bad_count_raises(self, write_sample) -> None:
        with pytest.raises(FileFormatError, match="number of values in delay table 1"):
            read_delay_tables(write_sample("a.dly", "1 three 50 30 20\n"))

    def test_missing_count_raises(self, write_sample) -> None:
        with pytest.raises(FileFormatError, match="Missing number of values") as excinfo:
            read_delay_tables(write_sample("a.dly", "# only an id\n7\n"))
        assert excinfo.value.line_number == 2

    def test_indented_comment_is_skipped(self, write_sample) -> None:
        text = "       1   2   50.00   50.00\n   # indented note\n       2   1  100.00\n"
        tables = read_delay_tables(write_sample("a.dly", text))
        assert [t.table_id for t in tables] == ["1", "2"]
        assert tables[1].ret_vals == [100.0]


class TestFormatDelayTable:
    def test_single_line(self, delay_table: DelayTable) -> None:
        assert format_delay_table(delay_table) == ["       1   3   50.00   30.00   20.00"]

    def test_exactly_twelve_values(self) -> None:
        table = DelayTable(id="12", name="12", ret_vals=[1.0] * 12)
        lines = format_delay_table(table)
        assert len(lines) == 1
        assert len(lines[0]) == 12 + 12 * 8

    def test_continuation_lines(self) -> None:
        table = DelayTable(id="20", name="20", ret_vals=TWENTY_VALUES)
        lines = format_delay_table(table)
        assert len(lines) == 2
        assert lines[0].startswith("      20  20    5.00")
        assert lines[1] == CONTINUATION_PREFIX + "    5.00" * 8

    def test_long_identifier_not_truncated(self) -> None:
        table = DelayTable(id="LONGTABLE1", name="LONGTABLE1", ret_vals=[100.0])
        assert format_delay_table(table) == ["LONGTABLE1   1  100.00"]

    def test_fixed_interval_omits_count(self, delay_table: DelayTable) -> None:
        assert format_delay_table(delay_table, 3) == ["       1   50.00   30.00   20.00"]


class TestWriteDelayTables:
    def test_round_trip(self, tmp_path: Path, delay_table: DelayTable) -> None:
        long_table = DelayTable(id="2", name="2", ret_vals=TWENTY_VALUES)
        path = tmp_path / "StateCU.dly"
        write_delay_tables([delay_table, None, long_table], path)

        tables = read_delay_tables(path)
        assert [t.table_id for t in tables] == ["1", "2"]
        assert tables[0].ret_vals == delay_table.ret_vals
        assert tables[1].ret_vals == TWENTY_VALUES

    def test_round_trip_fixed_interval(self, tmp_path: Path) -> None:
        first = DelayTable(id="1", name="1", ret_vals=[50.0, 30.0, 20.0])
        second = DelayTable(id="2", name="2", ret_vals=[60.0, 30.0, 10.0])
        path = tmp_path / "StateCU.dly"
        write_delay_tables([first, second], path, options=WriteOptions(delay_interval=3))

        tables = read_delay_tables(path, 3)
        assert [(t.table_id, t.ret_vals) for t in tables] == [
            ("1", [50.0, 30.0, 20.0]),
            ("2", [60.0, 30.0, 10.0]),
        ]

    def test_round_trip_fixed_interval_with_continuation(self, tmp_path: Path) -> None:
        table = DelayTable(id="7", name="7", ret_vals=TWENTY_VALUES)
        path = tmp_path / "StateCU.dly"
        write_delay_tables([table, table], path, options=WriteOptions(delay_interval=20))

        tables = read_delay_tables(path, 20)
        assert len(tables) == 2
        assert tables[1].ret_vals == TWENTY_VALUES

    def test_header(self, tmp_path: Path, delay_table: DelayTable) -> None:
        path = tmp_path / "StateCU.dly"
        write_delay_tables([delay_table], path, new_comments=["Monthly tables"])
        text = path.read_text()
        assert "# Monthly tables\n" in text
        assert "#>     Format (a8, i4, (12f8.2)\n" in text
        assert text.endswith("#>EndHeader\n#>\n       1   3   50.00   30.00   20.00\n")
