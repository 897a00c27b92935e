"""
Blaney-Criddle crop coefficient curves for StateCU models.

Each curve is keyed either by percent of growing season (annual crops,
21 points at 0, 5, ..., 100) or by day of year (perennial crops, 25
points at the start, middle and end of each month).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

import numpy as np
from numpy.typing import NDArray

from pystatecu.core.base_component import ComponentValidator
from pystatecu.core.data import MISSING_DOUBLE, MISSING_INT, StateCUData
from pystatecu.core.validation import ComponentValidation, is_out_of_range

if TYPE_CHECKING:
    from pystatecu.core.dataset import StateCUDataSet

CURVE_TYPE_DAY = "Day"
CURVE_TYPE_PERCENT = "Percent"

# Positions for annual (percent of season) curves
PERCENT_POSITIONS: tuple[int, ...] = tuple(i * 5 for i in range(21))

# Positions for perennial (day of year) curves
DAY_POSITIONS: tuple[int, ...] = (
    1, 15, 32, 46, 60, 74, 91, 105, 121, 135, 152, 166, 182,
    196, 213, 227, 244, 258, 274, 288, 305, 319, 335, 349, 366,
)  # fmt: skip

# Blaney-Criddle method switch values
KTSW_METHODS = {
    0: "SCS Modified Blaney-Criddle",
    1: "Original Blaney-Criddle",
    2: "Modified Blaney-Criddle w/ Elev. Adj.",
    3: "Original Blaney-Criddle w/ Elev. Adj.",
    4: "Pochop",
}


def is_day_curve(flag: str) -> bool:
    return flag.strip().upper() == CURVE_TYPE_DAY.upper()


@dataclass(eq=False)
class BlaneyCriddle(StateCUData, ComponentValidator):
    """
    Blaney-Criddle crop coefficient curve for one crop.

    Exactly one pair of arrays is populated: ``nckca``/``ckca`` for a
    ``"Percent"`` curve, or ``nckcp``/``ckcp`` for a ``"Day"`` curve.
    Arrays left as ``None`` are allocated from ``flag`` on construction.

    Attributes:
        flag: Curve type, ``"Day"`` (perennial) or ``"Percent"`` (annual)
        ktsw: Blaney-Criddle method switch (0-4)
        nckca: Percent of season positions (annual crops)
        ckca: Coefficients for annual crops
        nckcp: Day of year positions (perennial crops)
        ckcp: Coefficients for perennial crops
    """

    flag: str = CURVE_TYPE_PERCENT
    ktsw: int = MISSING_INT
    nckca: NDArray[np.int64] | None = None
    ckca: NDArray[np.float64] | None = None
    nckcp: NDArray[np.int64] | None = None
    ckcp: NDArray[np.float64] | None = None

    def __post_init__(self) -> None:
        if self.nckca is None and self.nckcp is None:
            self._allocate()
        if self.nckca is not None:
            self.nckca = np.asarray(self.nckca, dtype=np.int64)
            if self.ckca is None:
                self.ckca = np.full(len(self.nckca), MISSING_DOUBLE)
            self.ckca = np.asarray(self.ckca, dtype=np.float64)
        if self.nckcp is not None:
            self.nckcp = np.asarray(self.nckcp, dtype=np.int64)
            if self.ckcp is None:
                self.ckcp = np.full(len(self.nckcp), MISSING_DOUBLE)
            self.ckcp = np.asarray(self.ckcp, dtype=np.float64)

    def _allocate(self) -> None:
        if is_day_curve(self.flag):
            self.nckcp = np.array(DAY_POSITIONS, dtype=np.int64)
            self.ckcp = np.full(len(DAY_POSITIONS), MISSING_DOUBLE)
        else:
            self.nckca = np.array(PERCENT_POSITIONS, dtype=np.int64)
            self.ckca = np.full(len(PERCENT_POSITIONS), MISSING_DOUBLE)

    @classmethod
    def for_curve_type(cls, flag: str, crop_name: str = "") -> BlaneyCriddle:
        """Create an empty curve of the given type for *crop_name*."""
        return cls(id=crop_name, name=crop_name, flag=flag)

    # -- curve access ------------------------------------------------------

    @property
    def is_annual_crop(self) -> bool:
        """``True`` for percent-of-season curves."""
        return not is_day_curve(self.flag)

    @property
    def is_perennial_crop(self) -> bool:
        """``True`` for day-of-year curves."""
        return is_day_curve(self.flag)

    @property
    def curve_length(self) -> int:
        return len(self.get_curve_positions())

    def get_curve_positions(self) -> NDArray:
        """Positions (percent or day) of the active curve."""
        positions = self.nckcp if self.is_perennial_crop else self.nckca
        if positions is None:
            return np.array([], dtype=np.float64)
        return positions

    def get_curve_values(self) -> NDArray[np.float64]:
        """Coefficients of the active curve."""
        values = self.ckcp if self.is_perennial_crop else self.ckca
        if values is None:
            return np.array([], dtype=np.float64)
        return values

    def set_curve_position(self, i: int, position: float) -> None:
        self.get_curve_positions()[i] = position

    def set_curve_value(self, i: int, coeff: float) -> None:
        self.get_curve_values()[i] = coeff

    def curve_points(self) -> list[tuple[float, float]]:
        """Return ``(position, coefficient)`` pairs of the active curve."""
        return list(zip(self.get_curve_positions().tolist(), self.get_curve_values().tolist()))

    # -- validation --------------------------------------------------------

    def validate(
        self,
        dataset: StateCUDataSet | None = None,
        complete: bool = False,
    ) -> ComponentValidation:
        validation = ComponentValidation()
        label = f'Crop "{self.name}"'
        has_annual = self.nckca is not None and len(self.nckca) > 0
        has_perennial = self.nckcp is not None and len(self.nckcp) > 0
        coeff_advice = "Specify as 0 to 3.0 (upper limit may vary by location)."

        if not has_annual and not has_perennial:
            validation.add(
                self,
                f"{label} data are neither specified as day of year or percent of season.",
                "Specify coefficients for day of year OR percent of season.",
            )
        elif has_annual and has_perennial:
            validation.add(
                self,
                f"{label} data are specified as day of year and percent of season.",
                "Specify coefficients for day of year OR percent of season.",
            )
        elif has_annual:
            for pos, coeff in zip(self.nckca.tolist(), self.ckca.tolist()):
                if is_out_of_range(pos, 0, 100, complete=complete):
                    validation.add(
                        self,
                        f"{label} percent of season ({pos}) is invalid.",
                        "Specify as 0 to 100.",
                    )
                if is_out_of_range(coeff, 0.0, 3.0, complete=complete):
                    validation.add(self, f"{label} coefficient ({coeff}) is invalid.", coeff_advice)
        else:
            for pos, coeff in zip(self.nckcp.tolist(), self.ckcp.tolist()):
                if is_out_of_range(pos, 1, 366, complete=complete):
                    validation.add(
                        self,
                        f"{label} day of year ({pos}) is invalid.",
                        "Specify as 1 to 366.",
                    )
                if is_out_of_range(coeff, 0.0, 3.0, complete=complete):
                    validation.add(self, f"{label} coefficient ({coeff}) is invalid.", coeff_advice)

        if is_out_of_range(self.ktsw, 0, 4, complete=complete):
            validation.add(
                self,
                f"{label} Blaney-Criddle method ({self.ktsw}) is invalid.",
                "Specify as 0 to 4 (refer to StateCU documentation).",
            )
        return validation
