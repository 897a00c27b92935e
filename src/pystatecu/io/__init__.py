"""I/O handlers for StateCU file formats."""

from __future__ import annotations

import importlib
from typing import TYPE_CHECKING

# ---------------------------------------------------------------------------
# Lazy import mapping: symbol_name -> (module_path, attr_name)
# ---------------------------------------------------------------------------
_LAZY_IMPORTS: dict[str, tuple[str, str]] = {
    # Base classes and configuration
    "BaseReader": ("pystatecu.io.base", "BaseReader"),
    "BaseWriter": ("pystatecu.io.base", "BaseWriter"),
    "FileVersion": ("pystatecu.io.config", "FileVersion"),
    "ListFileOptions": ("pystatecu.io.config", "ListFileOptions"),
    "StateCUFileConfig": ("pystatecu.io.config", "StateCUFileConfig"),
    "WriteOptions": ("pystatecu.io.config", "WriteOptions"),
    # Header merge
    "process_file_headers": ("pystatecu.io.header", "process_file_headers"),
    "read_previous_comments": ("pystatecu.io.header", "read_previous_comments"),
    # Climate stations
    "ClimateStationReader": ("pystatecu.io.climate_station", "ClimateStationReader"),
    "ClimateStationWriter": ("pystatecu.io.climate_station", "ClimateStationWriter"),
    "read_climate_stations": ("pystatecu.io.climate_station", "read_climate_stations"),
    "write_climate_stations": ("pystatecu.io.climate_station", "write_climate_stations"),
    # Crop characteristics
    "CropCharacteristicsReader": (
        "pystatecu.io.crop_characteristics",
        "CropCharacteristicsReader",
    ),
    "CropCharacteristicsWriter": (
        "pystatecu.io.crop_characteristics",
        "CropCharacteristicsWriter",
    ),
    "read_crop_characteristics": (
        "pystatecu.io.crop_characteristics",
        "read_crop_characteristics",
    ),
    "write_crop_characteristics": (
        "pystatecu.io.crop_characteristics",
        "write_crop_characteristics",
    ),
    # Blaney-Criddle
    "BlaneyCriddleReader": ("pystatecu.io.blaney_criddle", "BlaneyCriddleReader"),
    "BlaneyCriddleWriter": ("pystatecu.io.blaney_criddle", "BlaneyCriddleWriter"),
    "read_blaney_criddle": ("pystatecu.io.blaney_criddle", "read_blaney_criddle"),
    "write_blaney_criddle": ("pystatecu.io.blaney_criddle", "write_blaney_criddle"),
    # Penman-Monteith
    "PenmanMonteithReader": ("pystatecu.io.penman_monteith", "PenmanMonteithReader"),
    "PenmanMonteithWriter": ("pystatecu.io.penman_monteith", "PenmanMonteithWriter"),
    "read_penman_monteith": ("pystatecu.io.penman_monteith", "read_penman_monteith"),
    "write_penman_monteith": ("pystatecu.io.penman_monteith", "write_penman_monteith"),
    # Delay tables
    "DelayTableReader": ("pystatecu.io.delay_table", "DelayTableReader"),
    "DelayTableWriter": ("pystatecu.io.delay_table", "DelayTableWriter"),
    "read_delay_tables": ("pystatecu.io.delay_table", "read_delay_tables"),
    "write_delay_tables": ("pystatecu.io.delay_table", "write_delay_tables"),
    # Delay table assignments
    "DelayTableAssignmentReader": (
        "pystatecu.io.delay_table_assignment",
        "DelayTableAssignmentReader",
    ),
    "DelayTableAssignmentWriter": (
        "pystatecu.io.delay_table_assignment",
        "DelayTableAssignmentWriter",
    ),
    "read_delay_table_assignments": (
        "pystatecu.io.delay_table_assignment",
        "read_delay_table_assignments",
    ),
    "write_delay_table_assignments": (
        "pystatecu.io.delay_table_assignment",
        "write_delay_table_assignments",
    ),
    # List files
    "write_climate_station_list_file": (
        "pystatecu.io.list_file",
        "write_climate_station_list_file",
    ),
    "write_crop_characteristics_list_file": (
        "pystatecu.io.list_file",
        "write_crop_characteristics_list_file",
    ),
    "write_blaney_criddle_list_file": (
        "pystatecu.io.list_file",
        "write_blaney_criddle_list_file",
    ),
    "write_penman_monteith_list_file": (
        "pystatecu.io.list_file",
        "write_penman_monteith_list_file",
    ),
    "write_delay_table_list_file": ("pystatecu.io.list_file", "write_delay_table_list_file"),
    "write_delay_table_assignment_list_file": (
        "pystatecu.io.list_file",
        "write_delay_table_assignment_list_file",
    ),
    # Data sets
    "read_component": ("pystatecu.io.dataset", "read_component"),
    "write_component": ("pystatecu.io.dataset", "write_component"),
    "write_component_list_file": ("pystatecu.io.dataset", "write_component_list_file"),
    "read_dataset": ("pystatecu.io.dataset", "read_dataset"),
    "write_dataset": ("pystatecu.io.dataset", "write_dataset"),
}

__all__ = list(_LAZY_IMPORTS)


def __getattr__(name: str) -> object:
    """Lazy import of io symbols and submodules (PEP 562).

    Looks up *name* in ``_LAZY_IMPORTS`` first, falling back to
    ``importlib.import_module`` for submodule access (e.g.
    ``pystatecu.io.header``).  Resolved values are cached in
    ``globals()``.
    """
    spec = _LAZY_IMPORTS.get(name)
    if spec is not None:
        module_path, attr_name = spec
        value = getattr(importlib.import_module(module_path), attr_name)
        globals()[name] = value
        return value

    try:
        module = importlib.import_module(f"pystatecu.io.{name}")
    except ImportError:
        raise AttributeError(f"module 'pystatecu.io' has no attribute {name!r}") from None
    globals()[name] = module
    return module


if TYPE_CHECKING:
    from pystatecu.io.base import BaseReader as BaseReader
    from pystatecu.io.base import BaseWriter as BaseWriter
    from pystatecu.io.config import FileVersion as FileVersion
    from pystatecu.io.config import ListFileOptions as ListFileOptions
    from pystatecu.io.config import StateCUFileConfig as StateCUFileConfig
    from pystatecu.io.config import WriteOptions as WriteOptions
    from pystatecu.io.dataset import read_dataset as read_dataset
    from pystatecu.io.dataset import write_dataset as write_dataset
    from pystatecu.io.header import process_file_headers as process_file_headers
