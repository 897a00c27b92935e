"""
Unified StateCU file line-reading utilities.

StateCU input files are line oriented.  Lines starting with ``#`` and
blank lines are comments.  Data lines are either fixed-column records
(described by a :class:`FixedFormat`) or whitespace-delimited tokens.

Every ``io/`` reader should import helpers from this module rather than
defining its own copy.
"""

from __future__ import annotations

import re
from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Literal, overload

from pystatecu.core.data import MISSING_DOUBLE, MISSING_INT
from pystatecu.core.exceptions import FileFormatError

COMMENT_CHAR = "#"

_INTEGER_RE = re.compile(r"^[+-]?\d+$")
_DOUBLE_RE = re.compile(r"^[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?$")


def is_comment_line(line: str) -> bool:
    """Check if line is a StateCU comment (``#`` in column 1) or blank."""
    if not line or not line.strip():
        return True
    return line.startswith(COMMENT_CHAR)


def is_integer(value: str) -> bool:
    """Return ``True`` if *value* (trimmed) is an integer literal."""
    return bool(_INTEGER_RE.match(value.strip()))


def is_double(value: str) -> bool:
    """Return ``True`` if *value* (trimmed) is a decimal or exponent literal."""
    return bool(_DOUBLE_RE.match(value.strip()))


def parse_optional_int(value: str | None, default: int = MISSING_INT) -> int:
    """Parse *value* as an integer, or return *default* if it is not one.

    Malformed tokens are not errors in StateCU files; they are treated
    as missing data.
    """
    if value is None:
        return default
    value = value.strip()
    if value and is_integer(value):
        return int(value)
    return default


def parse_optional_float(value: str | None, default: float = MISSING_DOUBLE) -> float:
    """Parse *value* as a float, or return *default* if it is not one."""
    if value is None:
        return default
    value = value.strip()
    if value and is_double(value):
        return float(value)
    return default


def parse_count(value: str, context: str = "", line_number: int | None = None) -> int:
    """Parse a structural count (records, values) that the reader depends on.

    Unlike data values, a malformed count raises :class:`FileFormatError`.
    """
    value = value.strip()
    if not is_integer(value):
        msg = (
            f"Expected integer for {context}, got {value!r}"
            if context
            else f"Expected integer, got {value!r}"
        )
        raise FileFormatError(msg, line_number=line_number)
    return int(value)


def split_tokens(line: str) -> list[str]:
    """Split a free-format line on spaces and tabs, skipping blanks."""
    return line.split()


# =============================================================================
# Fixed-column layouts
# =============================================================================


class FieldKind(Enum):
    """How a fixed-width field is interpreted."""

    STRING = "str"
    INTEGER = "int"
    DOUBLE = "float"
    IGNORE = "ignore"  # data present in the file but not read
    GAP = "gap"  # blank separator columns


@dataclass(frozen=True)
class FixedField:
    """One column range of a fixed-format record."""

    name: str | None
    width: int
    kind: FieldKind = FieldKind.STRING

    @property
    def is_value(self) -> bool:
        return self.kind not in (FieldKind.IGNORE, FieldKind.GAP)


def gap(width: int) -> FixedField:
    return FixedField(None, width, FieldKind.GAP)


def ignore(width: int) -> FixedField:
    return FixedField(None, width, FieldKind.IGNORE)


@dataclass(frozen=True)
class FixedFormat:
    """
    A named fixed-column record layout.

    Attributes:
        name: Layout name (used in log messages)
        fields: Column ranges in file order
        realign: If True, a value that spills into a gap shifts the rest
            of the line right so that it lands in the next field
    """

    name: str
    fields: tuple[FixedField, ...]
    realign: bool = False

    @property
    def widths(self) -> list[int]:
        return [f.width for f in self.fields]

    @property
    def record_length(self) -> int:
        return sum(self.widths)

    @property
    def value_names(self) -> list[str]:
        return [f.name for f in self.fields if f.is_value and f.name]

    def split(self, line: str) -> list[str]:
        """Split *line* into raw (untrimmed) strings, one per value field.

        Fields beyond the end of the line are returned as empty strings.
        """
        line = line.rstrip("\r\n")
        values: list[str] = []
        pos = 0
        for fld in self.fields:
            text = line[pos : pos + fld.width]
            if fld.kind is FieldKind.GAP and self.realign and text.strip():
                # Shift the remainder so the spilled value starts after the gap
                shift = fld.width - (len(text) - len(text.lstrip()))
                line = line[:pos] + " " * shift + line[pos:]
            elif fld.is_value:
                values.append(text)
            pos += fld.width
        return values

    def read(self, line: str) -> dict[str, Any]:
        """Parse *line* into a dict of typed values keyed by field name.

        Strings are trimmed.  Numeric fields that are blank or not
        numeric are returned as the missing sentinel.
        """
        raw = self.split(line)
        result: dict[str, Any] = {}
        value_fields = [f for f in self.fields if f.is_value]
        for fld, text in zip(value_fields, raw):
            if fld.name is None:
                continue
            if fld.kind is FieldKind.INTEGER:
                result[fld.name] = parse_optional_int(text)
            elif fld.kind is FieldKind.DOUBLE:
                result[fld.name] = parse_optional_float(text)
            else:
                result[fld.name] = text.strip()
        return result


# =============================================================================
# Line iteration
# =============================================================================


class LineBuffer:
    """Sequential reader over the lines of a StateCU file.

    Tracks 1-based line numbers for error messages and skips comment
    lines when asked for data.
    """

    __slots__ = ("_lines", "_pos", "source")

    def __init__(self, lines: list[str], source: str = "") -> None:
        self._lines = lines
        self._pos = 0
        self.source = source

    @classmethod
    def from_file(cls, filepath: Path | str) -> LineBuffer:
        with open(filepath) as f:
            return cls(f.read().splitlines(), source=str(filepath))

    @property
    def line_num(self) -> int:
        """1-based number of the last line returned."""
        return self._pos

    def next_line(self) -> str | None:
        """Return the next raw line, or ``None`` at EOF."""
        if self._pos >= len(self._lines):
            return None
        line = self._lines[self._pos]
        self._pos += 1
        return line

    def next_data_or_none(self) -> str | None:
        """Return the next non-comment line, or ``None`` at EOF."""
        while self._pos < len(self._lines):
            line = self._lines[self._pos]
            self._pos += 1
            if is_comment_line(line):
                continue
            return line
        return None

    def next_data(self, what: str = "data") -> str:
        """Return the next non-comment line.

        Raises :class:`FileFormatError` on EOF.
        """
        line = self.next_data_or_none()
        if line is None:
            raise FileFormatError(
                f"Unexpected end of file reading {what}",
                line_number=self._pos,
            )
        return line

    def data_lines(self) -> Iterator[tuple[int, str]]:
        """Yield ``(line_number, line)`` for the remaining data lines."""
        while True:
            line = self.next_data_or_none()
            if line is None:
                return
            yield self._pos, line


def iter_data_lines(filepath: Path | str) -> Iterator[str]:
    """Yield the non-comment lines of a file (trailing newline removed)."""
    with open(filepath) as f:
        for line in f:
            line = line.rstrip("\r\n")
            if is_comment_line(line):
                continue
            yield line


@overload
def resolve_path(base_dir: Path | None, filepath: str | Path) -> Path: ...


@overload
def resolve_path(
    base_dir: Path | None, filepath: str | Path, *, allow_empty: Literal[False]
) -> Path: ...


@overload
def resolve_path(
    base_dir: Path | None, filepath: str | Path | None, *, allow_empty: Literal[True]
) -> Path | None: ...


def resolve_path(
    base_dir: Path | None, filepath: str | Path | None, *, allow_empty: bool = False
) -> Path | None:
    """Resolve a file path relative to the working directory *base_dir*.

    Absolute paths are returned unchanged.  With *allow_empty*, a blank
    or ``None`` *filepath* gives ``None``.
    """
    stripped = str(filepath).strip() if filepath is not None else ""
    if allow_empty and not stripped:
        return None
    path = Path(stripped)
    if path.is_absolute() or base_dir is None:
        return path
    return Path(base_dir) / path
