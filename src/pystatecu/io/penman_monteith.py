"""
Penman-Monteith Crop Coefficient (KPM) Reader/Writer for StateCU.

The file is free format::

    Title line
    NumCurves
    ID CropName                 (one per crop)
    Percent Coeff               (11 lines per growth stage)

The number of growth stages is implied by the crop name: 3 for alfalfa,
1 for grass pasture and 2 for everything else.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path
from typing import TextIO

from pystatecu.components.penman_monteith import (
    N_COEFFICIENTS_PER_GROWTH_STAGE,
    PenmanMonteith,
)
from pystatecu.core.exceptions import FileFormatError
from pystatecu.io.base import BaseReader, BaseWriter
from pystatecu.io.config import WriteOptions
from pystatecu.io.statecu_reader import (
    LineBuffer,
    parse_count,
    parse_optional_float,
    split_tokens,
)

logger = logging.getLogger(__name__)

KPM_TITLE = "Crop Coefficient Curves for Penman-Monteith"


class PenmanMonteithReader(BaseReader):
    """Reader for StateCU Penman-Monteith crop coefficient files."""

    @property
    def format(self) -> str:
        return "kpm"

    def read(self) -> list[PenmanMonteith]:
        logger.info("Reading StateCU KPM file: %s", self.filepath)
        buffer = LineBuffer.from_file(self.filepath)
        try:
            buffer.next_data("title")
            nc = parse_count(buffer.next_data("number of curves"), "number of curves")
            curves = [self._read_crop(buffer) for _ in range(nc)]
        except FileFormatError as e:
            logger.warning("Error reading %s: %s", self.filepath, e)
            raise FileFormatError(
                f'Error reading file "{self.filepath}" near line {buffer.line_num}',
                line_number=buffer.line_num,
            ) from e
        logger.info("Read %d Penman-Monteith curves from %s", len(curves), self.filepath)
        return curves

    def _read_crop(self, buffer: LineBuffer) -> PenmanMonteith:
        tokens = split_tokens(buffer.next_data("crop"))
        if len(tokens) < 2:
            raise FileFormatError("Expected 'ID CropName'", line_number=buffer.line_num)
        kpm = PenmanMonteith.for_crop(tokens[1])

        for igs in range(kpm.n_growth_stages):
            for j in range(N_COEFFICIENTS_PER_GROWTH_STAGE):
                pair = split_tokens(buffer.next_data("coefficient pair"))
                if len(pair) < 2:
                    raise FileFormatError("Expected 'Percent Coeff'", line_number=buffer.line_num)
                kpm.set_curve_position(igs, j, parse_optional_float(pair[0]))
                kpm.set_curve_value(igs, j, parse_optional_float(pair[1]))
        return kpm


class PenmanMonteithWriter(BaseWriter):
    """Writer for StateCU Penman-Monteith crop coefficient files."""

    template_name = "penman_monteith.j2"

    @property
    def format(self) -> str:
        return "kpm"

    def header_context(self) -> dict[str, object]:
        context = super().header_context()
        context["title"] = KPM_TITLE
        return context

    def write_records(self, f: TextIO, records: list[PenmanMonteith]) -> None:
        # Width allows precision to be increased some
        value_format = f"%8.{self.options.effective_precision}f"
        f.write(f"{len(records)}\n")
        for i, kpm in enumerate(records):
            # The crop number is not used by StateCU
            f.write(f"{i + 1} {kpm.name}\n")
            for igs in range(kpm.n_growth_stages):
                for j in range(N_COEFFICIENTS_PER_GROWTH_STAGE):
                    f.write("%3.0f" % kpm.get_kcday(igs, j) + value_format % kpm.get_kcb(igs, j))
                    f.write("\n")


def read_penman_monteith(filepath: Path | str) -> list[PenmanMonteith]:
    """Read a StateCU Penman-Monteith (``.kpm``) file.

    Args:
        filepath: Path to the file

    Returns:
        Crop curves in file order

    Raises:
        FileFormatError: If the curve structure cannot be read
    """
    return PenmanMonteithReader(filepath).read()


def write_penman_monteith(
    curves: Sequence[PenmanMonteith | None],
    filepath: Path | str,
    previous_file: Path | str | None = None,
    new_comments: Sequence[str] | None = None,
    options: WriteOptions | None = None,
) -> None:
    """Write a StateCU Penman-Monteith (``.kpm``) file.

    Args:
        curves: Crop curves to write (``None`` entries are skipped)
        filepath: Output path
        previous_file: Earlier version of the file whose header is kept
        new_comments: Comments to add to the header
        options: Output options (precision)
    """
    PenmanMonteithWriter(filepath, options).write(curves, previous_file, new_comments)
