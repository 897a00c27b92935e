"""Custom exceptions for pystatecu package."""

from __future__ import annotations


class PyStateCUError(Exception):
    """Base exception for all pystatecu errors."""

    pass


class ValidationError(PyStateCUError):
    """Error raised when a caller asks for validation problems to be fatal."""

    def __init__(self, message: str, errors: list[str] | None = None) -> None:
        super().__init__(message)
        self.errors = errors or []


class StateCUIOError(PyStateCUError):
    """Error related to file I/O operations."""

    pass


class FileFormatError(StateCUIOError):
    """Error raised when the structure of a data file is invalid."""

    def __init__(self, message: str, line_number: int | None = None) -> None:
        super().__init__(message)
        self.line_number = line_number


class ComponentError(PyStateCUError):
    """Error related to an unknown or unsupported data set component."""

    pass
