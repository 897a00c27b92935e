"""
Climate Station (CLI) Reader/Writer for StateCU.

The climate station file is fixed format, one station per line::

    StationID   Lat   Elev    Region1             Region2   StationName             zHumid   zWind
    a12         f6.2  f9.2 2x a20                 a8     2x a24                     f8.2     f8.2

Blank numeric columns are missing data and are written back blank.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path
from typing import TextIO

from pystatecu.components.climate_station import ClimateStation
from pystatecu.io.base import BaseReader, BaseWriter
from pystatecu.io.config import WriteOptions
from pystatecu.io.statecu_reader import (
    FieldKind,
    FixedField,
    FixedFormat,
    LineBuffer,
    gap,
)
from pystatecu.io.statecu_writer import format_record
from pystatecu.templates.filters import fortran_float

logger = logging.getLogger(__name__)

CLI_FORMAT = FixedFormat(
    name="climate station",
    fields=(
        FixedField("id", 12),
        FixedField("latitude", 6, FieldKind.DOUBLE),
        FixedField("elevation", 9, FieldKind.DOUBLE),
        gap(2),
        FixedField("region1", 20),
        FixedField("region2", 8),
        gap(2),
        FixedField("name", 24),
        FixedField("zh", 8, FieldKind.DOUBLE),
        FixedField("zm", 8, FieldKind.DOUBLE),
    ),
    realign=True,
)

CLI_RECORD_FORMAT = "%-12.12s%6.6s%9.9s  %-20.20s%-8.8s  %-24.24s%8.8s%8.8s"


def parse_climate_station(line: str) -> ClimateStation:
    """Parse one data line of a climate station file."""
    values = CLI_FORMAT.read(line)
    return ClimateStation(**values)


def format_climate_station(station: ClimateStation) -> str:
    """Format one climate station as a fixed-column data line."""
    return format_record(
        CLI_RECORD_FORMAT,
        [
            station.id,
            fortran_float(station.latitude, 6, 2),
            fortran_float(station.elevation, 9, 2),
            station.region1,
            station.region2,
            station.name,
            fortran_float(station.zh, 8, 2),
            fortran_float(station.zm, 8, 2),
        ],
    )


class ClimateStationReader(BaseReader):
    """Reader for StateCU climate station files."""

    @property
    def format(self) -> str:
        return "cli"

    def read(self) -> list[ClimateStation]:
        logger.info("Reading StateCU climate station file: %s", self.filepath)
        buffer = LineBuffer.from_file(self.filepath)
        stations = [parse_climate_station(line) for _, line in buffer.data_lines()]
        logger.info("Read %d climate stations from %s", len(stations), self.filepath)
        return stations


class ClimateStationWriter(BaseWriter):
    """Writer for StateCU climate station files."""

    template_name = "climate_station.j2"

    @property
    def format(self) -> str:
        return "cli"

    def write_records(self, f: TextIO, records: list[ClimateStation]) -> None:
        for station in records:
            f.write(format_climate_station(station) + "\n")


def read_climate_stations(filepath: Path | str) -> list[ClimateStation]:
    """Read a StateCU climate station (``.cli``) file.

    Args:
        filepath: Path to the file

    Returns:
        Stations in file order
    """
    return ClimateStationReader(filepath).read()


def write_climate_stations(
    stations: Sequence[ClimateStation | None],
    filepath: Path | str,
    previous_file: Path | str | None = None,
    new_comments: Sequence[str] | None = None,
    options: WriteOptions | None = None,
) -> None:
    """Write a StateCU climate station (``.cli``) file.

    Args:
        stations: Stations to write (``None`` entries are skipped)
        filepath: Output path
        previous_file: Earlier version of the file whose header is kept
        new_comments: Comments to add to the header
        options: Output options
    """
    ClimateStationWriter(filepath, options).write(stations, previous_file, new_comments)
