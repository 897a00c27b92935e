"""
In-memory StateCU data set.

Groups the record lists of every supported component so that records
can be validated against each other (for example, delay table
assignments against the delay tables that are loaded).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any

from pystatecu.components.blaney_criddle import BlaneyCriddle
from pystatecu.components.climate_station import ClimateStation
from pystatecu.components.crop_characteristics import CropCharacteristics
from pystatecu.components.delay_table import DelayTable
from pystatecu.components.delay_table_assignment import DelayTableAssignment
from pystatecu.components.penman_monteith import PenmanMonteith
from pystatecu.core.exceptions import ComponentError
from pystatecu.core.validation import ComponentValidation

logger = logging.getLogger(__name__)


class ComponentType(Enum):
    """StateCU data set components handled by this package."""

    CLIMATE_STATIONS = "cli"
    CROP_CHARACTERISTICS = "cch"
    BLANEY_CRIDDLE = "kbc"
    PENMAN_MONTEITH = "kpm"
    DELAY_TABLES = "dly"
    DELAY_TABLE_ASSIGNMENTS = "dla"

    @property
    def extension(self) -> str:
        """File extension (without the dot)."""
        return self.value

    @property
    def description(self) -> str:
        return _DESCRIPTIONS[self]

    @property
    def attribute(self) -> str:
        """Name of the :class:`StateCUDataSet` list holding this component."""
        return _ATTRIBUTES[self]

    @classmethod
    def from_name(cls, name: str) -> ComponentType:
        """Look up a component by extension (``"cli"``) or enum name."""
        key = name.strip().lower().lstrip(".")
        for member in cls:
            if key in (member.value, member.name.lower()):
                return member
        raise ComponentError(f"Unknown StateCU component: {name!r}")

    @classmethod
    def from_path(cls, filepath: Path | str) -> ComponentType:
        """Determine the component from a file extension."""
        suffix = Path(filepath).suffix
        if not suffix:
            raise ComponentError(f"Cannot determine component type of {filepath}")
        return cls.from_name(suffix)


_DESCRIPTIONS = {
    ComponentType.CLIMATE_STATIONS: "climate stations",
    ComponentType.CROP_CHARACTERISTICS: "crop characteristics",
    ComponentType.BLANEY_CRIDDLE: "Blaney-Criddle crop coefficients",
    ComponentType.PENMAN_MONTEITH: "Penman-Monteith crop coefficients",
    ComponentType.DELAY_TABLES: "delay tables",
    ComponentType.DELAY_TABLE_ASSIGNMENTS: "delay table assignment",
}

_ATTRIBUTES = {
    ComponentType.CLIMATE_STATIONS: "climate_stations",
    ComponentType.CROP_CHARACTERISTICS: "crop_characteristics",
    ComponentType.BLANEY_CRIDDLE: "blaney_criddle",
    ComponentType.PENMAN_MONTEITH: "penman_monteith",
    ComponentType.DELAY_TABLES: "delay_tables",
    ComponentType.DELAY_TABLE_ASSIGNMENTS: "delay_table_assignments",
}


@dataclass
class StateCUDataSet:
    """
    Record lists for a StateCU data set.

    Attributes:
        climate_stations: Climate station records
        crop_characteristics: Crop characteristics records
        blaney_criddle: Blaney-Criddle crop coefficient curves
        penman_monteith: Penman-Monteith crop coefficient curves
        delay_tables: Delay (return flow) tables
        delay_table_assignments: Delay table assignments
    """

    climate_stations: list[ClimateStation] = field(default_factory=list)
    crop_characteristics: list[CropCharacteristics] = field(default_factory=list)
    blaney_criddle: list[BlaneyCriddle] = field(default_factory=list)
    penman_monteith: list[PenmanMonteith] = field(default_factory=list)
    delay_tables: list[DelayTable] = field(default_factory=list)
    delay_table_assignments: list[DelayTableAssignment] = field(default_factory=list)

    def get_component(self, component: ComponentType) -> list[Any]:
        return getattr(self, component.attribute)

    def set_component(self, component: ComponentType, records: list[Any]) -> None:
        setattr(self, component.attribute, list(records))

    def has_component(self, component: ComponentType) -> bool:
        return bool(self.get_component(component))

    @property
    def n_items(self) -> int:
        """Total number of records across all components."""
        return sum(len(self.get_component(c)) for c in ComponentType)

    def validate(self, complete: bool = False) -> ComponentValidation:
        """Validate every record of every component."""
        validation = ComponentValidation()
        for component in ComponentType:
            records = self.get_component(component)
            for record in records:
                if record is None:
                    continue
                validation.extend(record.validate(self, complete=complete))
            logger.debug("Validated %d %s records", len(records), component.description)
        return validation
