"""
Crop Characteristics (CCH) Reader/Writer for StateCU.

Two fixed-column layouts exist.  The current layout has a 30-character
crop name followed by 6-character columns.  The Version 10 layout has a
20-character name and narrower columns separated by blanks.  The layout
of an existing file is detected from its data line lengths.

The crop number column is not read; it is written as a sequential
number.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path
from typing import Any, TextIO

from pystatecu.components.crop_characteristics import CropCharacteristics
from pystatecu.core.data import is_missing
from pystatecu.io.base import BaseReader, BaseWriter
from pystatecu.io.config import FileVersion, WriteOptions
from pystatecu.io.statecu_reader import (
    FieldKind,
    FixedField,
    FixedFormat,
    LineBuffer,
    gap,
    ignore,
    iter_data_lines,
)
from pystatecu.io.statecu_writer import format_optional, format_record

logger = logging.getLogger(__name__)

# Data lines shorter than this are Version 10
VERSION_10_MAX_LENGTH = 103

_INT = FieldKind.INTEGER
_DBL = FieldKind.DOUBLE

CCH_FORMAT = FixedFormat(
    name="crop characteristics",
    fields=(
        FixedField("name", 30),
        ignore(6),  # crop number
        FixedField("gdate1", 6, _INT),
        FixedField("gdate2", 6, _INT),
        FixedField("gdate3", 6, _INT),
        FixedField("gdate4", 6, _INT),
        FixedField("gdate5", 6, _INT),
        FixedField("gdates", 6, _INT),
        FixedField("tmois1", 6, _DBL),
        FixedField("tmois2", 6, _DBL),
        FixedField("mad", 6, _DBL),
        FixedField("irx", 6, _DBL),
        FixedField("frx", 6, _DBL),
        FixedField("awc", 6, _DBL),
        FixedField("apd", 6, _DBL),
        FixedField("tflg1", 6, _INT),
        FixedField("tflg2", 6, _INT),
        FixedField("cut2", 6, _INT),
        FixedField("cut3", 6, _INT),
    ),
)

CCH_V10_FORMAT = FixedFormat(
    name="crop characteristics (version 10)",
    fields=(
        FixedField("name", 20),
        ignore(5),  # blank, crop number, blanks
        FixedField("gdate1", 2, _INT),
        gap(1),
        FixedField("gdate2", 2, _INT),
        gap(2),
        FixedField("gdate3", 2, _INT),
        gap(2),
        FixedField("gdate4", 2, _INT),
        gap(2),
        FixedField("gdate5", 4, _INT),
        gap(1),
        FixedField("gdates", 4, _INT),
        gap(1),
        FixedField("tmois1", 3, _DBL),
        gap(1),
        FixedField("tmois2", 3, _DBL),
        gap(1),
        FixedField("mad", 3, _DBL),
        gap(1),
        FixedField("irx", 4, _DBL),
        gap(1),
        FixedField("frx", 4, _DBL),
        gap(1),
        FixedField("awc", 4, _DBL),
        gap(1),
        FixedField("apd", 4, _DBL),
        gap(1),
        FixedField("tflg1", 2, _INT),
        gap(1),
        FixedField("tflg2", 2, _INT),
        gap(1),
        FixedField("cut2", 3, _INT),
        gap(1),
        FixedField("cut3", 2, _INT),
    ),
)


# =============================================================================
# Output layouts
# =============================================================================

# Header record format, line format and value formats by version
_OUTPUT_FORMATS: dict[FileVersion, dict[str, str]] = {
    FileVersion.CURRENT: {
        "rec_format": "  Record format (a30,10(i6),4(f6.1),4(i5))",
        "format": (
            "%-30.30s%6.6s%6.6s%6.6s%6.6s%6.6s"
            "%6.6s%6.6s%6.6s%6.6s%6.6s"
            "%6.6s%6.6s%6.6s%6.6s%5.5s%5.5s%5.5s%5.5s"
        ),
        "crop_num": "%6d",
        "date": "%6d",
        "date2": "%6d",
        "temp": "%6d",
        "float": "%6.1f",
        "last": "%5d",
    },
    FileVersion.VERSION_10: {
        "rec_format": (
            "  Record format "
            "(a20,2(1x,i2,2x,i2),2x,i2,2x,2(i4,1x),"
            "3(f3.0,1x),4(f4.1,1x),2(i2,1x),i3,1x,i2)"
        ),
        "format": (
            "%-20.20s %2.2s  %2.2s %2.2s  %2.2s  %2.2s  "
            "%4.4s %4.4s %3.3s %3.3s %3.3s "
            "%4.4s %4.4s %4.4s %4.4s %2.2s %2.2s %3.3s %2.2s"
        ),
        "crop_num": "%6d",
        "date": "%2d",
        "date2": "%4d",
        "temp": "%3.0f",
        "float": "%4.1f",
        "last": "%2d",
    },
}

MISSING_TEXT = "-999"


def detect_version(filepath: Path | str) -> FileVersion:
    """Return the layout version of an existing crop characteristics file.

    Any data line shorter than 103 characters marks the file as Version 10.
    """
    for line in iter_data_lines(filepath):
        if len(line) < VERSION_10_MAX_LENGTH:
            return FileVersion.VERSION_10
    return FileVersion.CURRENT


def _crop_values(cch: CropCharacteristics, crop_num: int, fmts: dict[str, str]) -> list[str]:
    def fmt(value: Any, key: str) -> str:
        return format_optional(value, fmts[key], MISSING_TEXT)

    def frost(value: int) -> str:
        # Flags read from loosely formatted files may come in as -99
        if is_missing(value) or value < -90:
            return MISSING_TEXT
        return fmts["last"] % value

    def cutting(value: int) -> str:
        if is_missing(value) or not cch.is_alfalfa:
            return ""
        return fmts["last"] % value

    return [
        fmts["crop_num"] % crop_num,
        fmt(cch.gdate1, "date"),
        fmt(cch.gdate2, "date"),
        fmt(cch.gdate3, "date"),
        fmt(cch.gdate4, "date"),
        fmt(cch.gdate5, "date2"),
        fmt(cch.gdates, "date2"),
        fmt(cch.tmois1, "temp"),
        fmt(cch.tmois2, "temp"),
        fmt(cch.mad, "temp"),
        fmt(cch.irx, "float"),
        fmt(cch.frx, "float"),
        fmt(cch.awc, "float"),
        fmt(cch.apd, "float"),
        frost(cch.tflg1),
        frost(cch.tflg2),
        cutting(cch.cut2),
        cutting(cch.cut3),
    ]


def format_crop_characteristics(
    cch: CropCharacteristics,
    crop_num: int,
    options: WriteOptions | None = None,
) -> str:
    """Format one crop as a data line.

    Args:
        cch: Crop to format
        crop_num: Sequential crop number written in the (unused) number column
        options: Output options selecting the layout version

    Returns:
        The data line without a newline
    """
    options = options or WriteOptions()
    fmts = _OUTPUT_FORMATS[options.version]
    name = cch.name
    if options.is_version_10 and options.auto_adjust:
        pos = name.find(".")
        if pos > 0:
            name = name[:pos]
    return format_record(fmts["format"], [name, *_crop_values(cch, crop_num, fmts)])


class CropCharacteristicsReader(BaseReader):
    """Reader for StateCU crop characteristics files (either version)."""

    @property
    def format(self) -> str:
        return "cch"

    def read(self) -> list[CropCharacteristics]:
        version = detect_version(self.filepath)
        layout = CCH_FORMAT
        if version is FileVersion.VERSION_10:
            logger.info(
                "Format of %s was found to be version 10; using the old format for reading",
                self.filepath,
            )
            layout = CCH_V10_FORMAT

        logger.info("Reading StateCU CCH file: %s", self.filepath)
        crops: list[CropCharacteristics] = []
        buffer = LineBuffer.from_file(self.filepath)
        for _, line in buffer.data_lines():
            values = layout.read(line)
            # The name doubles as the identifier
            crops.append(CropCharacteristics(id=values["name"], **values))
        logger.info("Read %d crops from %s", len(crops), self.filepath)
        return crops


class CropCharacteristicsWriter(BaseWriter):
    """Writer for StateCU crop characteristics files."""

    template_name = "crop_characteristics.j2"

    @property
    def format(self) -> str:
        return "cch"

    def header_context(self) -> dict[str, Any]:
        context = super().header_context()
        context["rec_format"] = _OUTPUT_FORMATS[self.options.version]["rec_format"]
        return context

    def write_records(self, f: TextIO, records: list[CropCharacteristics]) -> None:
        if self.options.is_version_10:
            logger.info("Writing %s in version 10 format", self.filepath)
        for i, cch in enumerate(records):
            f.write(format_crop_characteristics(cch, i + 1, self.options) + "\n")


def read_crop_characteristics(filepath: Path | str) -> list[CropCharacteristics]:
    """Read a StateCU crop characteristics (``.cch``) file.

    Args:
        filepath: Path to the file

    Returns:
        Crops in file order
    """
    return CropCharacteristicsReader(filepath).read()


def write_crop_characteristics(
    crops: Sequence[CropCharacteristics | None],
    filepath: Path | str,
    previous_file: Path | str | None = None,
    new_comments: Sequence[str] | None = None,
    options: WriteOptions | None = None,
) -> None:
    """Write a StateCU crop characteristics (``.cch``) file.

    Args:
        crops: Crops to write (``None`` entries are skipped)
        filepath: Output path
        previous_file: Earlier version of the file whose header is kept
        new_comments: Comments to add to the header
        options: Output options (version, auto-adjust)
    """
    CropCharacteristicsWriter(filepath, options).write(crops, previous_file, new_comments)
