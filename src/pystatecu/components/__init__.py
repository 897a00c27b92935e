"""StateCU data components (one record type per input file)."""

from __future__ import annotations

from pystatecu.components.blaney_criddle import (
    CURVE_TYPE_DAY,
    CURVE_TYPE_PERCENT,
    DAY_POSITIONS,
    PERCENT_POSITIONS,
    BlaneyCriddle,
)
from pystatecu.components.climate_station import ClimateStation
from pystatecu.components.crop_characteristics import CropCharacteristics
from pystatecu.components.delay_table import (
    UNITS_FRACTION,
    UNITS_PERCENT,
    DelayTable,
)
from pystatecu.components.delay_table_assignment import DelayTableAssignment
from pystatecu.components.penman_monteith import (
    N_COEFFICIENTS_PER_GROWTH_STAGE,
    PenmanMonteith,
    get_n_growth_stages_from_crop_name,
)

__all__ = [
    # Climate
    "ClimateStation",
    # Crops
    "CropCharacteristics",
    "BlaneyCriddle",
    "CURVE_TYPE_DAY",
    "CURVE_TYPE_PERCENT",
    "DAY_POSITIONS",
    "PERCENT_POSITIONS",
    "PenmanMonteith",
    "N_COEFFICIENTS_PER_GROWTH_STAGE",
    "get_n_growth_stages_from_crop_name",
    # Return flows
    "DelayTable",
    "UNITS_PERCENT",
    "UNITS_FRACTION",
    "DelayTableAssignment",
]
