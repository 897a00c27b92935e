"""
Crop characteristics records for StateCU models.

Each record describes the planting/harvest calendar, moisture and root
zone parameters, frost flags and (for alfalfa) cutting intervals of one
crop, as stored in the StateCU crop characteristics (``.cch``) file.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from pystatecu.core.base_component import ComponentValidator
from pystatecu.core.data import MISSING_DOUBLE, MISSING_INT, StateCUData
from pystatecu.core.validation import ComponentValidation, is_out_of_range

if TYPE_CHECKING:
    from pystatecu.core.dataset import StateCUDataSet


@dataclass(eq=False)
class CropCharacteristics(StateCUData, ComponentValidator):
    """
    Characteristics of one StateCU crop.

    The crop name is used as both ``id`` and ``name``; the legacy
    numeric crop key is not stored.

    Attributes:
        gdate1: Planting month (1-12)
        gdate2: Planting day (1-31)
        gdate3: Harvest month (1-12)
        gdate4: Harvest day (1-31)
        gdate5: Days to full cover
        gdates: Length of season (days)
        tmois1: Temperature early moisture (F)
        tmois2: Temperature late moisture (F)
        mad: Management allowable deficit level
        irx: Initial root zone depth (in)
        frx: Maximum root zone depth (in)
        awc: Available water holding capacity (in)
        apd: Maximum application depth (in)
        tflg1: Spring frost date flag (0 = mean, 1 = 28F, 2 = 32F)
        tflg2: Fall frost date flag (0 = mean, 1 = 28F, 2 = 32F)
        cut2: Days between 1st and 2nd cuttings (alfalfa only)
        cut3: Days between 2nd and 3rd cuttings (alfalfa only)
    """

    gdate1: int = MISSING_INT
    gdate2: int = MISSING_INT
    gdate3: int = MISSING_INT
    gdate4: int = MISSING_INT
    gdate5: int = MISSING_INT
    gdates: int = MISSING_INT
    tmois1: float = MISSING_DOUBLE
    tmois2: float = MISSING_DOUBLE
    mad: float = MISSING_DOUBLE
    irx: float = MISSING_DOUBLE
    frx: float = MISSING_DOUBLE
    awc: float = MISSING_DOUBLE
    apd: float = MISSING_DOUBLE
    tflg1: int = MISSING_INT
    tflg2: int = MISSING_INT
    cut2: int = MISSING_INT
    cut3: int = MISSING_INT

    @property
    def is_alfalfa(self) -> bool:
        """``True`` if the crop name contains ALFALFA (any case)."""
        return "ALFALFA" in self.name.upper()

    def validate(
        self,
        dataset: StateCUDataSet | None = None,
        complete: bool = False,
    ) -> ComponentValidation:
        validation = ComponentValidation()
        label = f'Crop "{self.name}"'
        alfalfa = self.is_alfalfa

        def check(value, low, high, what, recommendation, low_exclusive=False, required=True):
            required = complete and required
            if is_out_of_range(value, low, high, low_exclusive=low_exclusive, complete=required):
                validation.add(self, f"{label} {what} ({value}) is invalid.", recommendation)

        check(self.gdate1, 1, 12, "planting month", "Specify a month 1-12.")
        check(self.gdate2, 1, 31, "planting day", "Specify a day 1-31.")
        check(self.gdate3, 1, 12, "harvest month", "Specify a month 1-12.")
        check(self.gdate4, 1, 31, "harvest day", "Specify a day 1-31.")
        check(self.gdate5, 0, 365, "days to full cover", "Specify a day 0 - 365.")
        check(self.gdates, 0, 365, "days in season", "Specify days 1 - 365.", low_exclusive=True)
        # Temperature limits are approximate
        check(self.tmois1, 0.0, 100.0, "temperature early moisture", "Specify degrees F.")
        check(self.tmois2, 0.0, 100.0, "temperature late moisture", "Specify degrees F.")
        # MAD, initial root depth and AWC are not used by StateCU
        check(self.frx, 0.0, None, "maximum root zone depth", "Specify inches > 0.", low_exclusive=True)
        check(self.apd, 0.0, 100.0, "maximum application depth", "Specify inches > 0.")
        check(self.tflg1, 0, 2, "spring frost flag", "Specify 0, 1, 2.")
        check(self.tflg2, 0, 2, "fall frost flag", "Specify 0, 1, 2.")
        check(self.cut2, None, 365, "days to 2nd cut", "Specify days < 365.", required=alfalfa)
        check(self.cut3, None, 365, "days to 3rd cut", "Specify days < 365.", required=alfalfa)
        return validation
