"""Core data structures for pystatecu."""

from __future__ import annotations

from pystatecu.core.data import (
    MISSING_DOUBLE,
    MISSING_INT,
    MISSING_STRING,
    StateCUData,
    is_missing,
    is_missing_double,
    is_missing_int,
    is_missing_string,
)
from pystatecu.core.exceptions import (
    ComponentError,
    FileFormatError,
    PyStateCUError,
    StateCUIOError,
    ValidationError,
)
from pystatecu.core.validation import (
    ComponentValidation,
    ComponentValidationProblem,
    is_out_of_range,
)
from pystatecu.core.base_component import ComponentValidator

__all__ = [
    # Records
    "StateCUData",
    # Missing values
    "MISSING_DOUBLE",
    "MISSING_INT",
    "MISSING_STRING",
    "is_missing",
    "is_missing_double",
    "is_missing_int",
    "is_missing_string",
    # Validation
    "ComponentValidator",
    "ComponentValidation",
    "ComponentValidationProblem",
    "is_out_of_range",
    # Exceptions
    "PyStateCUError",
    "StateCUIOError",
    "FileFormatError",
    "ValidationError",
    "ComponentError",
]
