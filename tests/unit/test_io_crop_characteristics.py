"""Tests for the crop characteristics reader/writer (io/crop_characteristics.py)."""

from __future__ import annotations

from pathlib import Path

import pytest

from pystatecu.components.crop_characteristics import CropCharacteristics
from pystatecu.core.data import MISSING_DOUBLE, MISSING_INT
from pystatecu.io.config import FileVersion, WriteOptions
from pystatecu.io.crop_characteristics import (
    CCH_FORMAT,
    CCH_V10_FORMAT,
    VERSION_10_MAX_LENGTH,
    detect_version,
    format_crop_characteristics,
    read_crop_characteristics,
    write_crop_characteristics,
)

V10 = WriteOptions(version=FileVersion.VERSION_10)

# Version 10 line for ALFALFA written by StateCU 10
V10_LINE = (
    "ALFALFA".ljust(20)
    + "  1"
    + "   4"
    + " 15"
    + "  10"
    + "  15"
    + "    30"
    + "  180"
    + "  45"
    + "  45"
    + "  50"
    + "  3.0"
    + "  4.5"
    + "  2.0"
    + "  4.0"
    + "  0"
    + "  1"
    + "  45"
    + " 40"
)


class TestLayouts:
    def test_current_record_length(self) -> None:
        assert CCH_FORMAT.record_length == 30 + 6 + 17 * 6

    def test_version_10_widths(self) -> None:
        assert CCH_V10_FORMAT.widths[:4] == [20, 5, 2, 1]
        assert len(CCH_V10_FORMAT.value_names) == 18


class TestFormatCropCharacteristics:
    def test_current_layout(self, alfalfa_crop: CropCharacteristics) -> None:
        line = format_crop_characteristics(alfalfa_crop, 1)
        assert len(line) == 134
        assert line[:30] == "ALFALFA".ljust(30)
        assert line[30:36] == "     1"
        assert line[36:48] == "     4    15"
        assert line[72:84] == "    45    45"
        assert line[84:90] == "    50"
        assert line[90:102] == "   3.0   4.5"
        assert line[114:134] == "    0    1   45   40"

    def test_current_temperatures_are_truncated(self, alfalfa_crop: CropCharacteristics) -> None:
        alfalfa_crop.tmois1 = 45.7
        line = format_crop_characteristics(alfalfa_crop, 1)
        assert line[72:78] == "    45"

    def test_version_10_layout(self, alfalfa_crop: CropCharacteristics) -> None:
        line = format_crop_characteristics(alfalfa_crop, 1, V10)
        assert len(line) == 94
        assert line[:20] == "ALFALFA".ljust(20)
        assert line[25:27] == " 4"
        assert line[28:30] == "15"
        assert line[49:53] == "  45"
        assert line[62:71] == " 3.0  4.5"

    def test_missing_written_as_sentinel(self) -> None:
        line = format_crop_characteristics(CropCharacteristics(id="X", name="X"), 3)
        assert line[36:42] == "  -999"
        assert line[84:90] == "  -999"
        assert line[114:124] == " -999 -999"

    def test_frost_flag_below_minus_90_is_missing(self, alfalfa_crop: CropCharacteristics) -> None:
        alfalfa_crop.tflg1 = -99
        line = format_crop_characteristics(alfalfa_crop, 1)
        assert line[114:119] == " -999"

    def test_cuttings_only_for_alfalfa(self, alfalfa_crop: CropCharacteristics) -> None:
        alfalfa_crop.name = "CORN_GRAIN"
        line = format_crop_characteristics(alfalfa_crop, 1)
        assert line[124:134] == " " * 10

    def test_cuttings_for_any_alfalfa_name(self, alfalfa_crop: CropCharacteristics) -> None:
        alfalfa_crop.name = "Alfalfa.TR21"
        line = format_crop_characteristics(alfalfa_crop, 1)
        assert line[124:134] == "   45   40"

    def test_auto_adjust_truncates_version_10_name(
        self, alfalfa_crop: CropCharacteristics
    ) -> None:
        alfalfa_crop.name = "ALFALFA.TR21"
        adjusted = WriteOptions(version=FileVersion.VERSION_10, auto_adjust=True)
        assert format_crop_characteristics(alfalfa_crop, 1, adjusted)[:20] == "ALFALFA".ljust(20)
        assert format_crop_characteristics(alfalfa_crop, 1, V10)[:20] == "ALFALFA.TR21".ljust(20)

    def test_auto_adjust_ignored_for_current(self, alfalfa_crop: CropCharacteristics) -> None:
        alfalfa_crop.name = "ALFALFA.TR21"
        options = WriteOptions(auto_adjust=True)
        assert format_crop_characteristics(alfalfa_crop, 1, options).startswith("ALFALFA.TR21")


class TestDetectVersion:
    def test_current(self, tmp_path: Path, alfalfa_crop: CropCharacteristics) -> None:
        path = tmp_path / "StateCU.cch"
        write_crop_characteristics([alfalfa_crop], path)
        assert detect_version(path) is FileVersion.CURRENT

    def test_version_10(self, write_sample) -> None:
        path = write_sample("old.cch", f"# old file\n{V10_LINE}\n")
        assert len(V10_LINE) < VERSION_10_MAX_LENGTH
        assert detect_version(path) is FileVersion.VERSION_10

    def test_any_short_line_marks_version_10(
        self, write_sample, alfalfa_crop: CropCharacteristics
    ) -> None:
        long_line = format_crop_characteristics(alfalfa_crop, 1)
        path = write_sample("mixed.cch", f"{long_line}\n{V10_LINE}\n")
        assert detect_version(path) is FileVersion.VERSION_10


class TestReadCropCharacteristics:
    def test_read_version_10(self, write_sample) -> None:
        path = write_sample("old.cch", f"#> header\n{V10_LINE}\n")
        crops = read_crop_characteristics(path)
        assert len(crops) == 1
        crop = crops[0]
        assert crop.id == crop.name == "ALFALFA"
        assert (crop.gdate1, crop.gdate2, crop.gdate3, crop.gdate4) == (4, 15, 10, 15)
        assert crop.gdate5 == 30
        assert crop.gdates == 180
        assert crop.tmois1 == pytest.approx(45.0)
        assert crop.frx == pytest.approx(4.5)
        assert (crop.tflg1, crop.tflg2, crop.cut2, crop.cut3) == (0, 1, 45, 40)

    def test_blank_columns_are_missing(self, write_sample) -> None:
        line = "CORN".ljust(30) + "     2" + "     5"
        path = write_sample("short.cch", line.ljust(140) + "\n")
        crop = read_crop_characteristics(path)[0]
        assert crop.gdate1 == 5
        assert crop.gdate2 == MISSING_INT
        assert crop.awc == MISSING_DOUBLE


class TestWriteCropCharacteristics:
    @pytest.mark.parametrize("version", [FileVersion.CURRENT, FileVersion.VERSION_10])
    def test_round_trip(
        self, tmp_path: Path, alfalfa_crop: CropCharacteristics, version: FileVersion
    ) -> None:
        path = tmp_path / "StateCU.cch"
        write_crop_characteristics([alfalfa_crop, None], path, options=WriteOptions(version=version))
        assert detect_version(path) is version

        crops = read_crop_characteristics(path)
        assert len(crops) == 1
        crop = crops[0]
        for name in ("gdate1", "gdate2", "gdate3", "gdate4", "gdate5", "gdates"):
            assert getattr(crop, name) == getattr(alfalfa_crop, name)
        for name in ("tmois1", "tmois2", "mad", "irx", "frx", "awc", "apd"):
            assert getattr(crop, name) == pytest.approx(getattr(alfalfa_crop, name))
        assert (crop.tflg1, crop.tflg2, crop.cut2, crop.cut3) == (0, 1, 45, 40)

    def test_missing_round_trip(self, tmp_path: Path) -> None:
        path = tmp_path / "StateCU.cch"
        write_crop_characteristics([CropCharacteristics(id="GRASS", name="GRASS")], path)
        crop = read_crop_characteristics(path)[0]
        assert crop.gdate1 == MISSING_INT
        assert crop.frx == MISSING_DOUBLE

    def test_header_record_format(self, tmp_path: Path, alfalfa_crop: CropCharacteristics) -> None:
        path = tmp_path / "StateCU.cch"
        write_crop_characteristics([alfalfa_crop], path)
        current = path.read_text()
        write_crop_characteristics([alfalfa_crop], path, options=V10)
        old = path.read_text()
        assert "#>  Record format (a30,10(i6),4(f6.1),4(i5))" in current
        assert "(a20,2(1x,i2,2x,i2)" in old
        assert "Crop     Plant      Harvest" in current
        assert "Crop     Plant      Harvest" not in old

    def test_sequential_crop_numbers(self, tmp_path: Path, alfalfa_crop: CropCharacteristics) -> None:
        path = tmp_path / "StateCU.cch"
        corn = CropCharacteristics(id="CORN", name="CORN")
        write_crop_characteristics([alfalfa_crop, None, corn], path)
        data = [line for line in path.read_text().splitlines() if line and not line.startswith("#")]
        assert [line[30:36] for line in data] == ["     1", "     2"]
