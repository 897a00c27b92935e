"""
Penman-Monteith crop coefficient curves for StateCU models.

Each crop has one to three growth stages; every growth stage has an
11-point curve of crop coefficients keyed by percent of the stage
(0, 10, ..., 100).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

import numpy as np
from numpy.typing import NDArray

from pystatecu.core.base_component import ComponentValidator
from pystatecu.core.data import MISSING_DOUBLE, StateCUData
from pystatecu.core.validation import ComponentValidation, is_out_of_range

if TYPE_CHECKING:
    from pystatecu.core.dataset import StateCUDataSet

# Number of curve points in each growth stage
N_COEFFICIENTS_PER_GROWTH_STAGE = 11


def get_n_growth_stages_from_crop_name(crop_name: str) -> int:
    """Return the number of growth stages implied by a crop name.

    Alfalfa has 3 growth stages, grass pasture has 1, and all other
    crops have 2.
    """
    name = crop_name.upper()
    if "ALFALFA" in name:
        return 3
    if "GRASS" in name and "PASTURE" in name:
        return 1
    return 2


def default_kcday(n_growth_stages: int) -> NDArray[np.float64]:
    """Default curve positions: 0, 10, ..., 100 percent for every stage."""
    ncpgs = N_COEFFICIENTS_PER_GROWTH_STAGE
    row = np.arange(ncpgs, dtype=np.float64) * 100.0 / (ncpgs - 1)
    return np.tile(row, (n_growth_stages, 1))


@dataclass(eq=False)
class PenmanMonteith(StateCUData, ComponentValidator):
    """
    Penman-Monteith crop coefficient curves for one crop.

    Attributes:
        n_growth_stages: Number of growth stages (1-3)
        kcday: Percent of growth stage, shape ``(n_growth_stages, 11)``
        kcb: Crop coefficients, shape ``(n_growth_stages, 11)``
    """

    n_growth_stages: int = 2
    kcday: NDArray[np.float64] | None = None
    kcb: NDArray[np.float64] | None = None

    def __post_init__(self) -> None:
        shape = (self.n_growth_stages, N_COEFFICIENTS_PER_GROWTH_STAGE)
        if self.kcday is None:
            self.kcday = default_kcday(self.n_growth_stages)
        if self.kcb is None:
            self.kcb = np.full(shape, MISSING_DOUBLE)
        self.kcday = np.asarray(self.kcday, dtype=np.float64).reshape(shape)
        self.kcb = np.asarray(self.kcb, dtype=np.float64).reshape(shape)

    @classmethod
    def for_crop(cls, crop_name: str) -> PenmanMonteith:
        """Create empty curves sized for *crop_name*."""
        return cls(
            id=crop_name,
            name=crop_name,
            n_growth_stages=get_n_growth_stages_from_crop_name(crop_name),
        )

    @property
    def n_coefficients_per_growth_stage(self) -> int:
        return N_COEFFICIENTS_PER_GROWTH_STAGE

    def get_kcday(self, growth_stage: int, i: int) -> float:
        return float(self.kcday[growth_stage, i])

    def get_kcb(self, growth_stage: int, i: int) -> float:
        return float(self.kcb[growth_stage, i])

    def set_curve_position(self, growth_stage: int, i: int, position: float) -> None:
        self.kcday[growth_stage, i] = position

    def set_curve_value(self, growth_stage: int, i: int, coeff: float) -> None:
        self.kcb[growth_stage, i] = coeff

    def validate(
        self,
        dataset: StateCUDataSet | None = None,
        complete: bool = False,
    ) -> ComponentValidation:
        validation = ComponentValidation()
        label = f'Crop "{self.name}"'
        for stage in range(self.n_growth_stages):
            for pos, coeff in zip(self.kcday[stage].tolist(), self.kcb[stage].tolist()):
                if is_out_of_range(pos, 0.0, 100.0, complete=complete):
                    validation.add(
                        self,
                        f"{label} percent of growth stage ({pos}) is invalid.",
                        "Specify as 0 to 100.",
                    )
                if is_out_of_range(coeff, 0.0, 3.0, complete=complete):
                    validation.add(
                        self,
                        f"{label} coefficient ({coeff}) is invalid.",
                        "Specify as 0 to 3.0 (upper limit may vary by location).",
                    )
        return validation
