"""
Blaney-Criddle Crop Coefficient (KBC) Reader/Writer for StateCU.

The file is free format::

    Title line
    NumCurves
    ID CropName CurveType [BCMethod]      (one per curve)
    Position Coeff                        (21 or 25 lines per curve)

Version 10 files omit the Blaney-Criddle method column.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path
from typing import TextIO

from pystatecu.components.blaney_criddle import KTSW_METHODS, BlaneyCriddle
from pystatecu.core.data import is_missing_string
from pystatecu.core.exceptions import FileFormatError
from pystatecu.io.base import BaseReader, BaseWriter
from pystatecu.io.config import FileVersion, WriteOptions
from pystatecu.io.statecu_reader import (
    LineBuffer,
    is_integer,
    iter_data_lines,
    parse_count,
    parse_optional_float,
    parse_optional_int,
    split_tokens,
)

logger = logging.getLogger(__name__)

KBC_TITLE = "Crop Coefficient Curves for Blaney-Criddle"


def detect_version(filepath: Path | str) -> FileVersion:
    """Return the layout version of an existing KBC file.

    The first curve line (third data line) has three tokens in
    Version 10 and four in the current layout.
    """
    for count, line in enumerate(iter_data_lines(filepath)):
        if count == 2:
            if len(split_tokens(line)) == 3:
                return FileVersion.VERSION_10
            break
    return FileVersion.CURRENT


def format_curve_id(curve: BlaneyCriddle, position: int, options: WriteOptions) -> str:
    """Return the ID token written for a curve.

    StateCU expects a number, so an integer ID is written as-is and
    anything else is replaced by the 1-based *position* (or ``-999`` for
    Version 10).
    """
    if not is_missing_string(curve.id) and is_integer(curve.id):
        return curve.id.strip()
    if options.is_version_10:
        return "-999"
    return str(position)


class BlaneyCriddleReader(BaseReader):
    """Reader for StateCU Blaney-Criddle crop coefficient files."""

    @property
    def format(self) -> str:
        return "kbc"

    def read(self) -> list[BlaneyCriddle]:
        version = detect_version(self.filepath)
        if version is FileVersion.VERSION_10:
            logger.info("Format of %s was found to be version 10", self.filepath)

        logger.info("Reading StateCU KBC file: %s", self.filepath)
        buffer = LineBuffer.from_file(self.filepath)
        title = buffer.next_data("title")
        logger.debug("KBC title: %s", title.strip())
        nc = parse_count(buffer.next_data("number of curves"), "number of curves", buffer.line_num)

        curves = [self._read_curve(buffer, version) for _ in range(nc)]
        logger.info("Read %d Blaney-Criddle curves from %s", len(curves), self.filepath)
        return curves

    def _read_curve(self, buffer: LineBuffer, version: FileVersion) -> BlaneyCriddle:
        line = buffer.next_data("curve header")
        tokens = split_tokens(line)
        if len(tokens) < 3:
            raise FileFormatError(
                f"Expected 'ID CropName CurveType' in {self.filepath}, got {line.strip()!r}",
                line_number=buffer.line_num,
            )
        cropn, flag = tokens[1], tokens[2]

        curve = BlaneyCriddle.for_curve_type(flag, cropn)
        if version is FileVersion.CURRENT and len(tokens) > 3:
            curve.ktsw = parse_optional_int(tokens[3])

        for j in range(curve.curve_length):
            pair = split_tokens(buffer.next_data("coefficient pair"))
            if len(pair) < 2:
                raise FileFormatError(
                    f"Expected 'Position Coeff' for crop {cropn} in {self.filepath}",
                    line_number=buffer.line_num,
                )
            curve.set_curve_position(j, parse_optional_int(pair[0]))
            curve.set_curve_value(j, parse_optional_float(pair[1]))
        return curve


class BlaneyCriddleWriter(BaseWriter):
    """Writer for StateCU Blaney-Criddle crop coefficient files."""

    template_name = "blaney_criddle.j2"

    @property
    def format(self) -> str:
        return "kbc"

    def header_context(self) -> dict[str, object]:
        context = super().header_context()
        context["title"] = KBC_TITLE
        context["ktsw_methods"] = KTSW_METHODS
        return context

    def write_records(self, f: TextIO, records: list[BlaneyCriddle]) -> None:
        value_format = f"%9.{self.options.effective_precision}f"
        f.write(f"{len(records)}\n")
        for i, curve in enumerate(records):
            curve_id = format_curve_id(curve, i + 1, self.options)
            if self.options.is_version_10:
                f.write(f"{curve_id} {curve.name} {curve.flag}\n")
            else:
                f.write(f"{curve_id} {curve.name} {curve.flag} {curve.ktsw}\n")
            for position, coeff in zip(
                curve.get_curve_positions().tolist(), curve.get_curve_values().tolist()
            ):
                f.write("%-3d" % position + value_format % coeff + "\n")


def read_blaney_criddle(filepath: Path | str) -> list[BlaneyCriddle]:
    """Read a StateCU Blaney-Criddle (``.kbc``) file.

    Args:
        filepath: Path to the file

    Returns:
        Curves in file order
    """
    return BlaneyCriddleReader(filepath).read()


def write_blaney_criddle(
    curves: Sequence[BlaneyCriddle | None],
    filepath: Path | str,
    previous_file: Path | str | None = None,
    new_comments: Sequence[str] | None = None,
    options: WriteOptions | None = None,
) -> None:
    """Write a StateCU Blaney-Criddle (``.kbc``) file.

    Args:
        curves: Curves to write (``None`` entries are skipped)
        filepath: Output path
        previous_file: Earlier version of the file whose header is kept
        new_comments: Comments to add to the header
        options: Output options (version, precision)
    """
    BlaneyCriddleWriter(filepath, options).write(curves, previous_file, new_comments)
