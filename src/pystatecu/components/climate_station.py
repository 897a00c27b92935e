"""
Climate station records for StateCU models.

A climate station supplies temperature, precipitation and (for daily
analysis) humidity and wind data.  Stations are stored in the StateCU
climate station (``.cli``) file.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from pystatecu.core.base_component import ComponentValidator
from pystatecu.core.data import MISSING_DOUBLE, MISSING_STRING, StateCUData, is_missing_string
from pystatecu.core.validation import ComponentValidation, is_out_of_range

if TYPE_CHECKING:
    from pystatecu.core.dataset import StateCUDataSet


@dataclass(eq=False)
class ClimateStation(StateCUData, ComponentValidator):
    """
    A StateCU climate station.

    Attributes:
        id: Station identifier (e.g., "3951")
        name: Station name
        latitude: Latitude in decimal degrees
        elevation: Elevation in feet
        region1: Region 1 (e.g., county)
        region2: Region 2 (e.g., hydrologic unit code)
        zh: Height of humidity and temperature measurements (feet)
        zm: Height of wind speed measurement (feet)
    """

    latitude: float = MISSING_DOUBLE
    elevation: float = MISSING_DOUBLE
    region1: str = MISSING_STRING
    region2: str = MISSING_STRING
    zh: float = MISSING_DOUBLE
    zm: float = MISSING_DOUBLE

    def validate(
        self,
        dataset: StateCUDataSet | None = None,
        complete: bool = False,
    ) -> ComponentValidation:
        validation = ComponentValidation()
        label = f'Climate station "{self.id}"'

        if is_out_of_range(self.latitude, -90.0, 90.0, complete=complete):
            validation.add(
                self,
                f"{label} latitude ({self.latitude}) is invalid.",
                "Specify a latitude -90 to 90.",
            )
        if is_out_of_range(self.elevation, 0.0, 15000.0, complete=complete):
            validation.add(
                self,
                f"{label} elevation ({self.elevation}) is invalid.",
                "Specify an elevation 0 to 15000 FT (maximum varies by location).",
            )
        if complete and is_missing_string(self.name):
            validation.add(
                self,
                f"{label} name is blank - may cause confusion.",
                "Specify the station name or use the ID for the name.",
            )
        if complete and is_missing_string(self.region1):
            validation.add(
                self,
                f"{label} region1 is blank - may cause region lookups to fail for other data.",
                "Specify as county or other region indicator.",
            )
        if is_out_of_range(self.zh, 0.0, complete=complete):
            validation.add(
                self,
                f"{label} zh ({self.zh}) is invalid.",
                "Specify a zh >= 0.",
            )
        if is_out_of_range(self.zm, 0.0, complete=complete):
            validation.add(
                self,
                f"{label} zm ({self.zm}) is invalid.",
                "Specify a zm >= 0.",
            )
        return validation
