"""
File configuration classes for StateCU I/O.

These dataclasses define the output options of the writers and the
file naming of a StateCU data set.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from pystatecu.io.statecu_reader import resolve_path

DEFAULT_PRECISION = 3

# Per-table value counts, values in percent
DEFAULT_DELAY_INTERVAL = -1


class FileVersion(Enum):
    """StateCU file layout version."""

    CURRENT = "current"  # Layout written by current StateCU releases
    VERSION_10 = "10"  # StateCU 10 layout

    @classmethod
    def from_string(cls, value: str | None) -> FileVersion:
        """``"10"`` selects Version 10; anything else is current."""
        if value is not None and value.strip().lower() in ("10", "version_10"):
            return cls.VERSION_10
        return cls.CURRENT


@dataclass
class WriteOptions:
    """
    Options controlling how StateCU files are written.

    Attributes:
        precision: Decimal places for crop coefficients (``None`` gives 3)
        version: Layout version to write
        auto_adjust: Truncate Version 10 crop names at the first ``.``
        delay_interval: Delay table interval; a positive value is the fixed
            number of values per table and omits the count column
    """

    precision: int | None = None
    version: FileVersion = FileVersion.CURRENT
    auto_adjust: bool = False
    delay_interval: int = DEFAULT_DELAY_INTERVAL

    @property
    def effective_precision(self) -> int:
        if self.precision is None or self.precision < 0:
            return DEFAULT_PRECISION
        return self.precision

    @property
    def is_version_10(self) -> bool:
        return self.version is FileVersion.VERSION_10

    @classmethod
    def from_props(cls, props: Mapping[str, str] | None) -> WriteOptions:
        """Build options from legacy string properties.

        Recognized keys are ``Precision``, ``Version`` and ``AutoAdjust``.
        A precision that is not an integer is ignored.
        """
        if not props:
            return cls()
        precision: int | None = None
        raw = props.get("Precision")
        if raw is not None and raw.strip().lstrip("-").isdigit():
            precision = int(raw)
        auto_adjust = str(props.get("AutoAdjust", "")).strip().lower() == "true"
        return cls(
            precision=precision,
            version=FileVersion.from_string(props.get("Version")),
            auto_adjust=auto_adjust,
        )


@dataclass
class ListFileOptions:
    """Options for delimited list-file export."""

    delimiter: str = ","
    update: bool = False


@dataclass
class StateCUFileConfig:
    """
    Configuration for the files of a StateCU data set.

    File names are relative to ``working_dir`` unless absolute.  A file
    name of ``None`` means the component is not part of the data set.
    """

    working_dir: Path
    climate_stations_file: str | None = "StateCU.cli"
    crop_characteristics_file: str | None = "StateCU.cch"
    blaney_criddle_file: str | None = "StateCU.kbc"
    penman_monteith_file: str | None = "StateCU.kpm"
    delay_tables_file: str | None = "StateCU.dly"
    delay_table_assignments_file: str | None = "StateCU.dla"

    def __post_init__(self) -> None:
        self.working_dir = Path(self.working_dir)

    def get_path(self, filename: str | None) -> Path | None:
        return resolve_path(self.working_dir, filename, allow_empty=True)

    @property
    def climate_stations_path(self) -> Path | None:
        return self.get_path(self.climate_stations_file)

    @property
    def crop_characteristics_path(self) -> Path | None:
        return self.get_path(self.crop_characteristics_file)

    @property
    def blaney_criddle_path(self) -> Path | None:
        return self.get_path(self.blaney_criddle_file)

    @property
    def penman_monteith_path(self) -> Path | None:
        return self.get_path(self.penman_monteith_file)

    @property
    def delay_tables_path(self) -> Path | None:
        return self.get_path(self.delay_tables_file)

    @property
    def delay_table_assignments_path(self) -> Path | None:
        return self.get_path(self.delay_table_assignments_file)

    def path_for(self, attribute: str) -> Path | None:
        """Return the path for a data set attribute name (e.g. ``"delay_tables"``)."""
        return getattr(self, f"{attribute}_path")
