"""Pytest configuration and fixtures for pystatecu tests."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import numpy as np
import pytest

from pystatecu.components.blaney_criddle import BlaneyCriddle
from pystatecu.components.climate_station import ClimateStation
from pystatecu.components.crop_characteristics import CropCharacteristics
from pystatecu.components.delay_table import DelayTable
from pystatecu.components.delay_table_assignment import DelayTableAssignment
from pystatecu.components.penman_monteith import PenmanMonteith


@pytest.fixture
def write_sample(tmp_path: Path) -> Callable[[str, str], Path]:
    """Return a function that writes sample text to a file under tmp_path."""

    def _write(name: str, text: str) -> Path:
        path = tmp_path / name
        path.write_text(text)
        return path

    return _write


@pytest.fixture
def denver_station() -> ClimateStation:
    """A fully specified climate station."""
    return ClimateStation(
        id="3951",
        name="DENVER STAPLETON",
        latitude=40.12,
        elevation=5280.0,
        region1="DENVER",
        region2="HUC01",
        zh=1.5,
        zm=2.0,
    )


@pytest.fixture
def alfalfa_crop() -> CropCharacteristics:
    """Crop characteristics for alfalfa (cuttings are written)."""
    return CropCharacteristics(
        id="ALFALFA",
        name="ALFALFA",
        gdate1=4,
        gdate2=15,
        gdate3=10,
        gdate4=15,
        gdate5=30,
        gdates=180,
        tmois1=45.0,
        tmois2=45.0,
        mad=50.0,
        irx=3.0,
        frx=4.5,
        awc=2.0,
        apd=4.0,
        tflg1=0,
        tflg2=1,
        cut2=45,
        cut3=40,
    )


@pytest.fixture
def day_curve() -> BlaneyCriddle:
    """A perennial (day of year) Blaney-Criddle curve."""
    curve = BlaneyCriddle.for_curve_type("Day", "ALFALFA")
    curve.ckcp = np.linspace(0.5, 1.1, 25)
    curve.ktsw = 0
    return curve


@pytest.fixture
def percent_curve() -> BlaneyCriddle:
    """An annual (percent of season) Blaney-Criddle curve."""
    curve = BlaneyCriddle.for_curve_type("Percent", "CORN_GRAIN")
    curve.ckca = np.linspace(0.2, 1.0, 21)
    curve.ktsw = 1
    return curve


@pytest.fixture
def corn_kpm() -> PenmanMonteith:
    """Penman-Monteith curves for a two growth stage crop."""
    kpm = PenmanMonteith.for_crop("CORN_GRAIN")
    kpm.kcb = np.linspace(0.1, 1.2, 22).reshape(2, 11)
    return kpm


@pytest.fixture
def delay_table() -> DelayTable:
    """A percent delay table whose values total 100."""
    return DelayTable(id="1", name="1", ret_vals=[50.0, 30.0, 20.0])


@pytest.fixture
def assignment() -> DelayTableAssignment:
    """A CU location split between two delay tables."""
    data = DelayTableAssignment(id="0100503", name="0100503")
    data.add_delay_table("1", 60.0)
    data.add_delay_table("2", 40.0)
    return data
