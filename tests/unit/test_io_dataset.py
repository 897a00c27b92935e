"""Tests for data set read/write dispatch (io/dataset.py)."""

from __future__ import annotations

from pathlib import Path

import pytest

from pystatecu.components.blaney_criddle import BlaneyCriddle
from pystatecu.components.climate_station import ClimateStation
from pystatecu.components.crop_characteristics import CropCharacteristics
from pystatecu.components.delay_table import DelayTable
from pystatecu.components.delay_table_assignment import DelayTableAssignment
from pystatecu.components.penman_monteith import PenmanMonteith
from pystatecu.core.dataset import ComponentType, StateCUDataSet
from pystatecu.io.config import (
    FileVersion,
    ListFileOptions,
    StateCUFileConfig,
    WriteOptions,
)
from pystatecu.io.crop_characteristics import detect_version
from pystatecu.io.dataset import (
    LIST_FILE_WRITERS,
    WRITERS,
    read_component,
    read_dataset,
    write_component,
    write_component_list_file,
    write_dataset,
)


@pytest.fixture
def full_dataset(
    denver_station: ClimateStation,
    alfalfa_crop: CropCharacteristics,
    day_curve: BlaneyCriddle,
    corn_kpm: PenmanMonteith,
    delay_table: DelayTable,
    assignment: DelayTableAssignment,
) -> StateCUDataSet:
    return StateCUDataSet(
        climate_stations=[denver_station],
        crop_characteristics=[alfalfa_crop],
        blaney_criddle=[day_curve],
        penman_monteith=[corn_kpm],
        delay_tables=[delay_table, DelayTable(id="2", name="2", ret_vals=[100.0])],
        delay_table_assignments=[assignment],
    )


class TestRegistries:
    def test_every_component_has_writers(self) -> None:
        assert set(WRITERS) == set(ComponentType)
        assert set(LIST_FILE_WRITERS) == set(ComponentType)


class TestReadWriteComponent:
    def test_round_trip(self, tmp_path: Path, delay_table: DelayTable) -> None:
        path = tmp_path / "StateCU.dly"
        write_component(ComponentType.DELAY_TABLES, [delay_table], path)
        tables = read_component(ComponentType.DELAY_TABLES, path)
        assert tables[0].ret_vals == [50.0, 30.0, 20.0]

    def test_options_passed_through(self, tmp_path: Path, alfalfa_crop: CropCharacteristics) -> None:
        path = tmp_path / "StateCU.cch"
        options = WriteOptions(version=FileVersion.VERSION_10)
        write_component(ComponentType.CROP_CHARACTERISTICS, [alfalfa_crop], path, options=options)
        assert detect_version(path) is FileVersion.VERSION_10

    def test_list_file(self, tmp_path: Path, assignment: DelayTableAssignment) -> None:
        path = tmp_path / "dla.txt"
        options = ListFileOptions(delimiter=";")
        component = ComponentType.DELAY_TABLE_ASSIGNMENTS
        write_component_list_file(component, [assignment], path, options)
        assert path.read_text().endswith("0100503;1;60.00\n0100503;2;40.00\n")


class TestDataSet:
    def test_write_and_read(self, tmp_path: Path, full_dataset: StateCUDataSet) -> None:
        config = StateCUFileConfig(working_dir=tmp_path)
        written = write_dataset(full_dataset, config)
        assert set(written) == set(ComponentType)
        assert written[ComponentType.CLIMATE_STATIONS] == tmp_path / "StateCU.cli"

        dataset = read_dataset(config)
        assert dataset.n_items == full_dataset.n_items
        assert dataset.climate_stations[0].name == "DENVER STAPLETON"
        assert dataset.crop_characteristics[0].cut2 == 45
        assert dataset.blaney_criddle[0].is_perennial_crop
        assert dataset.penman_monteith[0].n_growth_stages == 2
        assert dataset.delay_tables[0].ret_vals == [50.0, 30.0, 20.0]
        assert dataset.delay_table_assignments[0].delay_table_ids == ["1", "2"]
        assert len(dataset.validate()) == 0

    def test_empty_components_not_written(
        self, tmp_path: Path, delay_table: DelayTable
    ) -> None:
        config = StateCUFileConfig(working_dir=tmp_path)
        written = write_dataset(StateCUDataSet(delay_tables=[delay_table]), config)
        assert list(written) == [ComponentType.DELAY_TABLES]
        assert not (tmp_path / "StateCU.cli").exists()

    def test_missing_files_are_skipped(self, tmp_path: Path, delay_table: DelayTable) -> None:
        config = StateCUFileConfig(working_dir=tmp_path, climate_stations_file=None)
        write_dataset(StateCUDataSet(delay_tables=[delay_table]), config)
        dataset = read_dataset(config)
        assert len(dataset.delay_tables) == 1
        assert dataset.climate_stations == []

    def test_rewrite_keeps_user_comments(
        self, tmp_path: Path, full_dataset: StateCUDataSet
    ) -> None:
        config = StateCUFileConfig(working_dir=tmp_path)
        write_dataset(full_dataset, config, new_comments=["Calibration run"])
        write_dataset(full_dataset, config)
        text = (tmp_path / "StateCU.kpm").read_text()
        assert "# Calibration run" in text
        assert text.count("# File generated by pystatecu") == 1

    def test_relative_and_absolute_paths(self, tmp_path: Path, delay_table: DelayTable) -> None:
        other = tmp_path / "elsewhere" / "tables.dly"
        config = StateCUFileConfig(
            working_dir=tmp_path / "data", delay_tables_file=str(other)
        )
        written = write_dataset(StateCUDataSet(delay_tables=[delay_table]), config)
        assert written[ComponentType.DELAY_TABLES] == other
        assert other.is_file()
