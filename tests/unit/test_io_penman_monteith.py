"""Tests for the Penman-Monteith reader/writer (io/penman_monteith.py)."""

from __future__ import annotations

from pathlib import Path

import numpy as np
import pytest

from pystatecu.components.penman_monteith import (
    PenmanMonteith,
    get_n_growth_stages_from_crop_name,
)
from pystatecu.core.data import MISSING_DOUBLE
from pystatecu.core.exceptions import FileFormatError
from pystatecu.io.config import WriteOptions
from pystatecu.io.penman_monteith import (
    KPM_TITLE,
    read_penman_monteith,
    write_penman_monteith,
)


def _stage_lines(start: float) -> list[str]:
    return [f"{pct:3d}{start + pct / 1000:8.3f}" for pct in range(0, 101, 10)]


def _kpm_text(count: int = 2, crops: tuple[str, ...] = ("ALFALFA", "GRASS_PASTURE")) -> str:
    lines = ["# Penman-Monteith sample", KPM_TITLE, str(count)]
    for i, crop in enumerate(crops):
        lines.append(f"{i + 1} {crop}")
        for igs in range(get_n_growth_stages_from_crop_name(crop)):
            lines += _stage_lines(0.2 * (igs + 1))
    return "\n".join(lines) + "\n"


class TestGrowthStages:
    @pytest.mark.parametrize(
        "name, expected",
        [
            ("ALFALFA", 3),
            ("alfalfa.tr21", 3),
            ("GRASS_PASTURE", 1),
            ("grass pasture", 1),
            ("GRASS", 2),
            ("CORN_GRAIN", 2),
        ],
    )
    def test_from_crop_name(self, name: str, expected: int) -> None:
        assert get_n_growth_stages_from_crop_name(name) == expected

    def test_default_positions(self) -> None:
        kpm = PenmanMonteith.for_crop("ALFALFA")
        assert kpm.kcday.shape == (3, 11)
        assert kpm.kcday[2].tolist() == [float(p) for p in range(0, 101, 10)]
        assert np.all(kpm.kcb == MISSING_DOUBLE)


class TestReadPenmanMonteith:
    def test_read(self, write_sample) -> None:
        curves = read_penman_monteith(write_sample("a.kpm", _kpm_text()))
        assert [c.name for c in curves] == ["ALFALFA", "GRASS_PASTURE"]

        alfalfa, grass = curves
        assert alfalfa.n_growth_stages == 3
        assert grass.n_growth_stages == 1
        assert alfalfa.get_kcday(1, 10) == pytest.approx(100.0)
        assert alfalfa.get_kcb(0, 0) == pytest.approx(0.2)
        assert alfalfa.get_kcb(2, 10) == pytest.approx(0.7)
        assert grass.get_kcb(0, 5) == pytest.approx(0.25)

    def test_non_numeric_value_is_missing(self, write_sample) -> None:
        text = _kpm_text().replace("  0   0.200", "  0   n/a", 1)
        curves = read_penman_monteith(write_sample("a.kpm", text))
        assert curves[0].get_kcb(0, 0) == MISSING_DOUBLE

    def test_truncated_file_raises(self, write_sample) -> None:
        path = write_sample("a.kpm", _kpm_text(count=3))
        with pytest.raises(FileFormatError, match="Error reading file") as excinfo:
            read_penman_monteith(path)
        assert "near line" in str(excinfo.value)
        assert excinfo.value.line_number is not None

    def test_bad_count_raises(self, write_sample) -> None:
        text = _kpm_text().replace("\n2\n", "\nTWO\n", 1)
        with pytest.raises(FileFormatError, match="near line 3"):
            read_penman_monteith(write_sample("a.kpm", text))

    def test_missing_coefficient_raises(self, write_sample) -> None:
        text = _kpm_text().replace("  0   0.200", "  0", 1)
        with pytest.raises(FileFormatError, match="Error reading file"):
            read_penman_monteith(write_sample("a.kpm", text))


class TestWritePenmanMonteith:
    def test_layout(self, tmp_path: Path, corn_kpm: PenmanMonteith) -> None:
        path = tmp_path / "StateCU.kpm"
        write_penman_monteith([None, corn_kpm], path)
        lines = path.read_text().splitlines()
        start = lines.index(KPM_TITLE)
        assert lines[start + 1] == "1"
        assert lines[start + 2] == "1 CORN_GRAIN"
        assert lines[start + 3] == "  0   0.100"
        assert lines[start + 24] == "100   1.200"
        assert len(lines) == start + 25

    def test_precision(self, tmp_path: Path, corn_kpm: PenmanMonteith) -> None:
        path = tmp_path / "StateCU.kpm"
        write_penman_monteith([corn_kpm], path, options=WriteOptions(precision=4))
        assert "  0  0.1000\n" in path.read_text()

    def test_round_trip(self, tmp_path: Path, corn_kpm: PenmanMonteith) -> None:
        alfalfa = PenmanMonteith.for_crop("ALFALFA")
        alfalfa.kcb[:] = 0.9
        path = tmp_path / "StateCU.kpm"
        write_penman_monteith([corn_kpm, alfalfa], path)

        curves = read_penman_monteith(path)
        assert [c.n_growth_stages for c in curves] == [2, 3]
        np.testing.assert_allclose(curves[0].kcb, corn_kpm.kcb, atol=5e-4)
        np.testing.assert_allclose(curves[1].kcday, alfalfa.kcday)
        np.testing.assert_allclose(curves[1].kcb, 0.9)

    def test_missing_values_round_trip(self, tmp_path: Path) -> None:
        path = tmp_path / "StateCU.kpm"
        write_penman_monteith([PenmanMonteith.for_crop("GRASS_PASTURE")], path)
        curve = read_penman_monteith(path)[0]
        assert np.all(curve.kcb == MISSING_DOUBLE)
