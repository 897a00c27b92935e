"""
Delimited list-file export for StateCU components.

A list file is a spreadsheet-friendly view of a component: the merged
``#`` header, one row of quoted field names, then one row per logical
sub-record (one per curve point for coefficient curves, one per value
for delay tables).  Values are formatted with the field format, trimmed,
and quoted only when they contain the delimiter.
"""

from __future__ import annotations

import csv
import logging
from collections.abc import Callable, Iterator, Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from pystatecu.components.blaney_criddle import BlaneyCriddle
from pystatecu.components.climate_station import ClimateStation
from pystatecu.components.crop_characteristics import CropCharacteristics
from pystatecu.components.delay_table import DelayTable
from pystatecu.components.delay_table_assignment import DelayTableAssignment
from pystatecu.components.penman_monteith import PenmanMonteith
from pystatecu.io.header import process_file_headers
from pystatecu.io.statecu_writer import ensure_parent_dir, write_header_lines

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ListField:
    """A list-file column: header name and printf-style value format."""

    name: str
    fmt: str

    def format(self, value: Any) -> str:
        return (self.fmt % value).strip()


_NAME = "%-20.20s"

CLIMATE_STATION_FIELDS = (
    ListField("ID", _NAME),
    ListField("NAME", _NAME),
    ListField("LATITUDE (DEC. DEG.)", "%10.2f"),
    ListField("ELEVATION (FT)", "%10.2f"),
    ListField("REGION1", _NAME),
    ListField("REGION2", _NAME),
    ListField("HEIGHT HUMIDITY/TEMPERATURE MEASUREMENT (FT)", "%8.2f"),
    ListField("HEIGHT WIND MEASUREMENT (FT)", "%8.2f"),
)

CROP_CHARACTERISTICS_FIELDS = (
    ListField("NAME", _NAME),
    ListField("PLANTING MONTH", "%8d"),
    ListField("PLANTING DAY", "%8d"),
    ListField("HARVEST MONTH", "%8d"),
    ListField("HARVEST DAY", "%8d"),
    ListField("DAYS TO FULL COVER", "%8d"),
    ListField("SEASON LENGTH", "%8d"),
    ListField("TEMP EARLY MOISTURE (F)", "%8.2f"),
    ListField("TEMP LATE MOISTURE (F)", "%8.2f"),
    ListField("MANAGEMENT ALLOWABLE DEFICIT LEVEL", "%8.2f"),
    ListField("INITIAL ROOT ZONE DEPTH (IN)", "%8.2f"),
    ListField("MAXIMUM ROOT ZONE DEPTH (IN)", "%8.2f"),
    ListField("AVAILABLE WATER HOLDING CAPACITY AWC (IN)", "%8.2f"),
    ListField("MAXIMUM APPLICATION DEPTH (IN)", "%8.2f"),
    ListField("SPRING FROST FLAG", "%8d"),
    ListField("FALL FROST FLAG", "%8d"),
    ListField("DAYS BETWEEN 1ST AND 2ND CUT", "%8d"),
    ListField("DAYS BETWEEN 2ND AND 3RD CUT", "%8d"),
)

BLANEY_CRIDDLE_FIELDS = (
    ListField("CROP NAME", _NAME),
    ListField("CURVE TYPE", "%-8.8s"),
    ListField("DAY OR PERCENT", "%8d"),
    ListField("COEFFICIENT", "%10.2f"),
)

PENMAN_MONTEITH_FIELDS = (
    ListField("CROP NAME", _NAME),
    ListField("GROWTH STAGE", "%1d"),
    ListField("PERCENT", "%5.3f"),
    ListField("COEFFICIENT", "%10.3f"),
)

DELAY_TABLE_ASSIGNMENT_FIELDS = (
    ListField("CU LOCATION ID", _NAME),
    ListField("DELAY TABLE ID", _NAME),
    ListField("PERCENT", "%10.2f"),
)

DELAY_TABLE_FIELDS = (
    ListField("DELAY TABLE ID", _NAME),
    ListField("PERIOD", "%8d"),
    ListField("RETURN", "%10.2f"),
)


# =============================================================================
# Row generators
# =============================================================================


def _climate_station_rows(station: ClimateStation) -> Iterator[tuple[Any, ...]]:
    yield (
        station.id,
        station.name,
        station.latitude,
        station.elevation,
        station.region1,
        station.region2,
        station.zh,
        station.zm,
    )


def _crop_characteristics_rows(cch: CropCharacteristics) -> Iterator[tuple[Any, ...]]:
    yield (
        cch.name,
        cch.gdate1,
        cch.gdate2,
        cch.gdate3,
        cch.gdate4,
        cch.gdate5,
        cch.gdates,
        cch.tmois1,
        cch.tmois2,
        cch.mad,
        cch.irx,
        cch.frx,
        cch.awc,
        cch.apd,
        cch.tflg1,
        cch.tflg2,
        cch.cut2,
        cch.cut3,
    )


def _blaney_criddle_rows(curve: BlaneyCriddle) -> Iterator[tuple[Any, ...]]:
    for position, coeff in curve.curve_points():
        yield (curve.name, curve.flag, position, coeff)


def _penman_monteith_rows(kpm: PenmanMonteith) -> Iterator[tuple[Any, ...]]:
    for igs in range(kpm.n_growth_stages):
        for j in range(kpm.n_coefficients_per_growth_stage):
            yield (kpm.name, igs + 1, kpm.get_kcday(igs, j), kpm.get_kcb(igs, j))


def _delay_table_assignment_rows(data: DelayTableAssignment) -> Iterator[tuple[Any, ...]]:
    for i in range(data.num_delay_tables):
        yield (data.id, data.get_delay_table_id(i), data.get_delay_table_percent(i))


def _delay_table_rows(table: DelayTable) -> Iterator[tuple[Any, ...]]:
    for i, value in enumerate(table.ret_vals):
        yield (table.table_id, i + 1, value)


# =============================================================================
# Writer
# =============================================================================


def write_list_file(
    records: Sequence[Any],
    filepath: Path | str,
    list_fields: Sequence[ListField],
    rows: Callable[[Any], Iterator[tuple[Any, ...]]],
    description: str,
    delimiter: str = ",",
    update: bool = False,
    new_comments: Sequence[str] | None = None,
) -> None:
    """Write records as a delimited list file.

    Args:
        records: Records to write (``None`` entries are skipped)
        filepath: Output path
        list_fields: Column definitions
        rows: Function returning the rows of one record
        description: Component description used in the header comment
        delimiter: Column delimiter
        update: Keep the user comments of an existing *filepath*
        new_comments: Comments to add to the header
    """
    filepath = Path(filepath)
    comments = ["", f"StateCU {description} as a delimited list file.", ""]
    comments.extend(new_comments or [])
    header = process_file_headers(filepath if update else None, comments)

    ensure_parent_dir(filepath)
    logger.info("Writing StateCU %s list file: %s", description, filepath)
    n_rows = 0
    with open(filepath, "w", newline="") as f:
        write_header_lines(f, header)
        f.write(delimiter.join(f'"{fld.name}"' for fld in list_fields) + "\n")
        writer = csv.writer(f, delimiter=delimiter, lineterminator="\n")
        for record in records:
            if record is None:
                continue
            for row in rows(record):
                writer.writerow([fld.format(v) for fld, v in zip(list_fields, row)])
                n_rows += 1
    logger.debug("Wrote %d rows to %s", n_rows, filepath)


def write_climate_station_list_file(
    records: Sequence[ClimateStation | None],
    filepath: Path | str,
    delimiter: str = ",",
    update: bool = False,
    new_comments: Sequence[str] | None = None,
) -> None:
    """Write climate stations as a delimited list file (one row per station)."""
    write_list_file(
        records,
        filepath,
        CLIMATE_STATION_FIELDS,
        _climate_station_rows,
        "climate stations",
        delimiter,
        update,
        new_comments,
    )


def write_crop_characteristics_list_file(
    records: Sequence[CropCharacteristics | None],
    filepath: Path | str,
    delimiter: str = ",",
    update: bool = False,
    new_comments: Sequence[str] | None = None,
) -> None:
    """Write crop characteristics as a delimited list file (one row per crop)."""
    write_list_file(
        records,
        filepath,
        CROP_CHARACTERISTICS_FIELDS,
        _crop_characteristics_rows,
        "crop characteristics",
        delimiter,
        update,
        new_comments,
    )


def write_blaney_criddle_list_file(
    records: Sequence[BlaneyCriddle | None],
    filepath: Path | str,
    delimiter: str = ",",
    update: bool = False,
    new_comments: Sequence[str] | None = None,
) -> None:
    """Write Blaney-Criddle curves as a delimited list file (one row per point)."""
    write_list_file(
        records,
        filepath,
        BLANEY_CRIDDLE_FIELDS,
        _blaney_criddle_rows,
        "Blaney-Criddle crop coefficients",
        delimiter,
        update,
        new_comments,
    )


def write_penman_monteith_list_file(
    records: Sequence[PenmanMonteith | None],
    filepath: Path | str,
    delimiter: str = ",",
    update: bool = False,
    new_comments: Sequence[str] | None = None,
) -> None:
    """Write Penman-Monteith curves as a delimited list file.

    One row is written per point of each growth stage; growth stages are
    numbered from 1.
    """
    write_list_file(
        records,
        filepath,
        PENMAN_MONTEITH_FIELDS,
        _penman_monteith_rows,
        "Penman-Monteith crop coefficients",
        delimiter,
        update,
        new_comments,
    )


def write_delay_table_assignment_list_file(
    records: Sequence[DelayTableAssignment | None],
    filepath: Path | str,
    delimiter: str = ",",
    update: bool = False,
    new_comments: Sequence[str] | None = None,
) -> None:
    """Write delay table assignments as a delimited list file (one row per table)."""
    write_list_file(
        records,
        filepath,
        DELAY_TABLE_ASSIGNMENT_FIELDS,
        _delay_table_assignment_rows,
        "delay table assignment",
        delimiter,
        update,
        new_comments,
    )


def write_delay_table_list_file(
    records: Sequence[DelayTable | None],
    filepath: Path | str,
    delimiter: str = ",",
    update: bool = False,
    new_comments: Sequence[str] | None = None,
) -> None:
    """Write delay tables as a delimited list file (one row per return value)."""
    write_list_file(
        records,
        filepath,
        DELAY_TABLE_FIELDS,
        _delay_table_rows,
        "delay tables",
        delimiter,
        update,
        new_comments,
    )
