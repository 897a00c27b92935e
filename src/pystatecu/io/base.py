"""
Base classes for StateCU file I/O.

This module provides abstract base classes for reading and writing
StateCU input files, including carry-over of the ``#`` comment header
when a file is rewritten.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Sequence
from pathlib import Path
from typing import Any, TextIO

from pystatecu.io.config import WriteOptions
from pystatecu.io.header import process_file_headers
from pystatecu.io.statecu_writer import ensure_parent_dir, write_header_lines
from pystatecu.templates.engine import TemplateEngine, get_engine

logger = logging.getLogger(__name__)


class BaseReader(ABC):
    """Abstract base class for StateCU file readers."""

    def __init__(self, filepath: Path | str) -> None:
        """
        Initialize the reader.

        Args:
            filepath: Path to the file to read
        """
        self.filepath = Path(filepath)
        self._validate_file()

    def _validate_file(self) -> None:
        """Validate that the file exists and is readable."""
        if not self.filepath.exists():
            raise FileNotFoundError(f"File not found: {self.filepath}")
        if not self.filepath.is_file():
            raise ValueError(f"Path is not a file: {self.filepath}")

    @abstractmethod
    def read(self) -> list[Any]:
        """
        Read the file and return the parsed records.

        Returns:
            Records in file order
        """

    @property
    @abstractmethod
    def format(self) -> str:
        """Return the file format identifier (the file extension)."""


class BaseWriter(ABC):
    """Abstract base class for StateCU file writers.

    Subclasses provide the ``#>`` header template and the record lines;
    this class handles the merged ``#`` header.
    """

    #: Name of the ``#>`` header template
    template_name: str = ""

    def __init__(
        self,
        filepath: Path | str,
        options: WriteOptions | None = None,
        engine: TemplateEngine | None = None,
    ) -> None:
        """
        Initialize the writer.

        Args:
            filepath: Path to the output file
            options: Output options (defaults to current version, precision 3)
            engine: Template engine for headers
        """
        self.filepath = Path(filepath)
        self.options = options or WriteOptions()
        self.engine = engine or get_engine()

    def _ensure_parent_exists(self) -> None:
        """Ensure the parent directory exists."""
        ensure_parent_dir(self.filepath)

    def write(
        self,
        records: Sequence[Any],
        previous_file: Path | str | None = None,
        new_comments: Sequence[str] | None = None,
    ) -> None:
        """
        Write records to the file.

        Args:
            records: Records to write; ``None`` entries are skipped
            previous_file: Earlier version of the file whose ``#``
                comments are carried into the new header
            new_comments: Comments to add to the header
        """
        header = process_file_headers(previous_file, new_comments, engine=self.engine)
        self._ensure_parent_exists()
        logger.info("Writing StateCU %s file: %s", self.format, self.filepath)
        with open(self.filepath, "w") as f:
            write_header_lines(f, header)
            f.write(self.render_header())
            self.write_records(f, [r for r in records if r is not None])

    def header_context(self) -> dict[str, Any]:
        """Template variables for the ``#>`` header."""
        return {"version_10": self.options.is_version_10}

    def render_header(self) -> str:
        return self.engine.render_template(self.template_name, **self.header_context())

    @abstractmethod
    def write_records(self, f: TextIO, records: list[Any]) -> None:
        """
        Write the data lines.

        Args:
            f: Open output file
            records: Records to write (no ``None`` entries)
        """

    @property
    @abstractmethod
    def format(self) -> str:
        """Return the file format identifier."""
