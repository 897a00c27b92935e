"""
Delay (return flow) tables for StateCU models.

A delay table distributes the return flow of diverted water over the
following time periods, as percentages (or fractions) of the total.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from pystatecu.core.base_component import ComponentValidator
from pystatecu.core.data import StateCUData, is_missing_double
from pystatecu.core.validation import ComponentValidation, is_out_of_range

if TYPE_CHECKING:
    from pystatecu.core.dataset import StateCUDataSet

UNITS_PERCENT = "PCT"
UNITS_FRACTION = "FRACTION"

# Allowed difference between the table total and 100% (or 1.0)
TOTAL_TOLERANCE = 0.01


@dataclass(eq=False)
class DelayTable(StateCUData, ComponentValidator):
    """
    A return flow delay table.

    ``id`` holds the table identifier; ``table_id`` is an alias.

    Attributes:
        ret_vals: Return values, one per period
        units: ``"PCT"`` or ``"FRACTION"``
    """

    ret_vals: list[float] = field(default_factory=list)
    units: str = UNITS_PERCENT

    @property
    def table_id(self) -> str:
        return self.id

    @table_id.setter
    def table_id(self, value: str) -> None:
        self.id = value
        if not self.name:
            self.name = value

    @property
    def ndly(self) -> int:
        """Number of return values in the table."""
        return len(self.ret_vals)

    def add_ret_val(self, value: float) -> None:
        self.ret_vals.append(float(value))

    @property
    def total(self) -> float:
        return sum(v for v in self.ret_vals if not is_missing_double(v))

    def validate(
        self,
        dataset: StateCUDataSet | None = None,
        complete: bool = False,
    ) -> ComponentValidation:
        validation = ComponentValidation()
        label = f'Delay table "{self.id}"'
        full = 1.0 if self.units == UNITS_FRACTION else 100.0
        advice = "Specify as 0 to 1." if full == 1.0 else "Specify as 0 to 100."

        for i, value in enumerate(self.ret_vals):
            if is_out_of_range(value, 0.0, full, complete=complete):
                validation.add(self, f"{label} value {i + 1} ({value}) is invalid.", advice)

        if self.ret_vals and not any(is_missing_double(v) for v in self.ret_vals):
            if abs(self.total - full) > TOTAL_TOLERANCE * full:
                validation.add(
                    self,
                    f"{label} values total {self.total:.2f} rather than {full:g}.",
                    "Adjust the values so the returns total 100% of the diversion.",
                )
        elif complete and not self.ret_vals:
            validation.add(self, f"{label} has no values.", "Specify at least one return value.")
        return validation
