"""
Delay table assignments for StateCU locations.

Each CU location assigns a percentage of its return flow to one or
more delay tables.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from pystatecu.core.base_component import ComponentValidator
from pystatecu.core.data import StateCUData, is_missing_double
from pystatecu.core.validation import ComponentValidation

if TYPE_CHECKING:
    from pystatecu.core.dataset import StateCUDataSet


@dataclass(eq=False)
class DelayTableAssignment(StateCUData, ComponentValidator):
    """
    Delay table assignment for one CU location.

    Attributes:
        delay_table_ids: Delay table identifiers
        delay_table_percents: Percent of return flow using each table
    """

    delay_table_ids: list[str] = field(default_factory=list)
    delay_table_percents: list[float] = field(default_factory=list)

    @property
    def num_delay_tables(self) -> int:
        return len(self.delay_table_ids)

    def set_num_delay_tables(self, num: int) -> None:
        """Reallocate the assignment lists for *num* delay tables."""
        self.delay_table_ids = [""] * num
        self.delay_table_percents = [0.0] * num

    def get_delay_table_id(self, pos: int) -> str:
        """Return the table identifier at *pos*, or ``""`` if out of range."""
        if 0 <= pos < len(self.delay_table_ids):
            return self.delay_table_ids[pos]
        return ""

    def get_delay_table_percent(self, pos: int) -> float:
        """Return the percent at *pos*, or ``0.0`` if out of range."""
        if 0 <= pos < len(self.delay_table_percents):
            return self.delay_table_percents[pos]
        return 0.0

    def set_delay_table_id(self, table_id: str, pos: int) -> None:
        self.delay_table_ids[pos] = table_id

    def set_delay_table_percent(self, percent: float, pos: int) -> None:
        self.delay_table_percents[pos] = percent

    def add_delay_table(self, table_id: str, percent: float) -> None:
        self.delay_table_ids.append(table_id)
        self.delay_table_percents.append(percent)

    def validate(
        self,
        dataset: StateCUDataSet | None = None,
        complete: bool = False,
    ) -> ComponentValidation:
        validation = ComponentValidation()
        label = f'CU location "{self.id}"'

        if dataset is not None and dataset.delay_tables:
            known = {table.id for table in dataset.delay_tables if table is not None}
            for table_id in self.delay_table_ids:
                if table_id not in known:
                    validation.add(
                        self,
                        f"{label} delay table ({table_id}) is not defined.",
                        "Specify a delay table identifier from the delay table file.",
                    )

        if complete and self.delay_table_percents:
            if not any(is_missing_double(p) for p in self.delay_table_percents):
                total = sum(self.delay_table_percents)
                if abs(total - 100.0) > 0.01:
                    validation.add(
                        self,
                        f"{label} delay table percents total {total:.2f}.",
                        "Specify percents that total 100.",
                    )
        return validation
