"""
pystatecu - Python package for StateCU consumptive use model input files.

This package provides tools for:
- Reading and writing StateCU climate station, crop characteristics,
  crop coefficient, delay table and delay table assignment files
- Validating records against the documented value ranges
- Exporting records as delimited list files
"""

from __future__ import annotations

__version__ = "0.1.0"

from pystatecu.components import (
    BlaneyCriddle,
    ClimateStation,
    CropCharacteristics,
    DelayTable,
    DelayTableAssignment,
    PenmanMonteith,
)
from pystatecu.core.dataset import ComponentType, StateCUDataSet
from pystatecu.core.exceptions import (
    ComponentError,
    FileFormatError,
    PyStateCUError,
    StateCUIOError,
    ValidationError,
)
from pystatecu.io.config import FileVersion, StateCUFileConfig, WriteOptions
from pystatecu.io.dataset import read_dataset, write_dataset

__all__ = [
    "__version__",
    # Records
    "ClimateStation",
    "CropCharacteristics",
    "BlaneyCriddle",
    "PenmanMonteith",
    "DelayTable",
    "DelayTableAssignment",
    # Data set
    "ComponentType",
    "StateCUDataSet",
    "StateCUFileConfig",
    "read_dataset",
    "write_dataset",
    # Output options
    "FileVersion",
    "WriteOptions",
    # Exceptions
    "PyStateCUError",
    "StateCUIOError",
    "FileFormatError",
    "ValidationError",
    "ComponentError",
]
