"""
Base record type shared by all StateCU data components.

Every StateCU record has an identifier and a name, supports a single
level of backup/restore for edit-cancel workflows, and sorts by
``(id, name)``.  Missing values use the StateCU sentinels defined here.
"""

from __future__ import annotations

import copy
import math
from dataclasses import dataclass, field, fields
from typing import Any, TypeVar

import numpy as np

# StateCU missing-value sentinels
MISSING_STRING = ""
MISSING_INT = -999
MISSING_DOUBLE = -999.0

# Floats inside this open interval are treated as missing
_MISSING_DOUBLE_FLOOR = -999.1
_MISSING_DOUBLE_CEILING = -998.9

T = TypeVar("T", bound="StateCUData")


def is_missing_int(value: int | None) -> bool:
    """Return ``True`` if *value* is ``None`` or the missing integer."""
    return value is None or value == MISSING_INT


def is_missing_double(value: float | None) -> bool:
    """Return ``True`` if *value* is ``None``, NaN, or within the missing band."""
    if value is None:
        return True
    value = float(value)
    if math.isnan(value):
        return True
    return _MISSING_DOUBLE_FLOOR < value < _MISSING_DOUBLE_CEILING


def is_missing_string(value: str | None) -> bool:
    """Return ``True`` if *value* is ``None`` or blank."""
    return value is None or not value.strip()


def is_missing(value: Any) -> bool:
    """Return ``True`` if *value* is the missing sentinel for its type."""
    if value is None:
        return True
    if isinstance(value, str):
        return is_missing_string(value)
    if isinstance(value, (bool, np.bool_)):
        return False
    if isinstance(value, (int, np.integer)):
        return is_missing_int(int(value))
    if isinstance(value, (float, np.floating)):
        return is_missing_double(float(value))
    return False


def _copy_value(value: Any) -> Any:
    """Return an independent copy of a record field value."""
    if isinstance(value, np.ndarray):
        return value.copy()
    if isinstance(value, (list, dict)):
        return copy.deepcopy(value)
    return value


def _values_equal(a: Any, b: Any) -> bool:
    if a is None or b is None:
        return a is b
    if isinstance(a, np.ndarray) or isinstance(b, np.ndarray):
        a_arr = np.asarray(a, dtype=np.float64)
        b_arr = np.asarray(b, dtype=np.float64)
        return a_arr.shape == b_arr.shape and bool(np.array_equal(a_arr, b_arr, equal_nan=True))
    if isinstance(a, float) and isinstance(b, float):
        if is_missing_double(a) and is_missing_double(b):
            return True
    return bool(a == b)


@dataclass(eq=False)
class StateCUData:
    """
    Base class for StateCU records.

    Attributes:
        id: Record identifier
        name: Display name (often the same as the identifier)
    """

    id: str = MISSING_STRING
    name: str = MISSING_STRING
    _original: StateCUData | None = field(default=None, init=False, repr=False)
    _is_clone: bool = field(default=False, init=False, repr=False)

    # -- copies ------------------------------------------------------------

    def copy(self: T) -> T:
        """Return an independent field-by-field copy of this record.

        Array and list fields are copied so that the copy never shares
        storage with this record.  Backup state is not copied.
        """
        values = {f.name: _copy_value(getattr(self, f.name)) for f in fields(self) if f.init}
        dup = type(self)(**values)
        # Constructors may normalize fields; keep the values exactly as copied
        for name, value in values.items():
            setattr(dup, name, value)
        return dup

    # -- backup / restore --------------------------------------------------

    @property
    def is_clone(self) -> bool:
        """``True`` while a backup snapshot is held for this record."""
        return self._is_clone

    @property
    def has_backup(self) -> bool:
        return self._original is not None

    @property
    def original(self) -> StateCUData | None:
        """The backup snapshot, or ``None``."""
        return self._original

    def create_backup(self) -> None:
        """Snapshot the current field values so edits can be cancelled.

        Only one level of backup is kept; a second call replaces the
        earlier snapshot.
        """
        self._original = self.copy()
        self._is_clone = True

    def restore_original(self) -> None:
        """Copy all fields back from the snapshot and discard it."""
        original = self._original
        if original is None:
            return
        for f in fields(self):
            if f.init:
                setattr(self, f.name, _copy_value(getattr(original, f.name)))
        self._original = None
        self._is_clone = False

    def has_changed(self) -> bool:
        """Return ``True`` if any field differs from the backup snapshot."""
        if self._original is None:
            return False
        return any(
            not _values_equal(getattr(self, f.name), getattr(self._original, f.name))
            for f in fields(self)
            if f.init
        )

    # -- ordering ----------------------------------------------------------

    def sort_key(self) -> tuple[str, str]:
        return (self.id, self.name)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, StateCUData):
            return NotImplemented
        return self.sort_key() < other.sort_key()

