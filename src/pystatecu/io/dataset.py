"""
Reading and writing a complete StateCU data set.

The per-component readers and writers are registered by
:class:`ComponentType` so that callers (including the command line
interface) can dispatch on a file extension.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from pathlib import Path
from typing import Any

from pystatecu.core.dataset import ComponentType, StateCUDataSet
from pystatecu.io.blaney_criddle import read_blaney_criddle, write_blaney_criddle
from pystatecu.io.climate_station import read_climate_stations, write_climate_stations
from pystatecu.io.config import ListFileOptions, StateCUFileConfig, WriteOptions
from pystatecu.io.crop_characteristics import (
    read_crop_characteristics,
    write_crop_characteristics,
)
from pystatecu.io.delay_table import INTERVAL_PERCENT, read_delay_tables, write_delay_tables
from pystatecu.io.delay_table_assignment import (
    read_delay_table_assignments,
    write_delay_table_assignments,
)
from pystatecu.io.list_file import (
    write_blaney_criddle_list_file,
    write_climate_station_list_file,
    write_crop_characteristics_list_file,
    write_delay_table_assignment_list_file,
    write_delay_table_list_file,
    write_penman_monteith_list_file,
)
from pystatecu.io.penman_monteith import read_penman_monteith, write_penman_monteith

logger = logging.getLogger(__name__)

WRITERS: dict[ComponentType, Callable[..., None]] = {
    ComponentType.CLIMATE_STATIONS: write_climate_stations,
    ComponentType.CROP_CHARACTERISTICS: write_crop_characteristics,
    ComponentType.BLANEY_CRIDDLE: write_blaney_criddle,
    ComponentType.PENMAN_MONTEITH: write_penman_monteith,
    ComponentType.DELAY_TABLES: write_delay_tables,
    ComponentType.DELAY_TABLE_ASSIGNMENTS: write_delay_table_assignments,
}

LIST_FILE_WRITERS: dict[ComponentType, Callable[..., None]] = {
    ComponentType.CLIMATE_STATIONS: write_climate_station_list_file,
    ComponentType.CROP_CHARACTERISTICS: write_crop_characteristics_list_file,
    ComponentType.BLANEY_CRIDDLE: write_blaney_criddle_list_file,
    ComponentType.PENMAN_MONTEITH: write_penman_monteith_list_file,
    ComponentType.DELAY_TABLES: write_delay_table_list_file,
    ComponentType.DELAY_TABLE_ASSIGNMENTS: write_delay_table_assignment_list_file,
}


def read_component(
    component: ComponentType,
    filepath: Path | str,
    delay_interval: int = INTERVAL_PERCENT,
) -> list[Any]:
    """Read the records of one component file.

    Args:
        component: Component stored in the file
        filepath: Path to the file
        delay_interval: Delay table interval (delay tables only)

    Returns:
        Records in file order
    """
    if component is ComponentType.CLIMATE_STATIONS:
        return read_climate_stations(filepath)
    if component is ComponentType.CROP_CHARACTERISTICS:
        return read_crop_characteristics(filepath)
    if component is ComponentType.BLANEY_CRIDDLE:
        return read_blaney_criddle(filepath)
    if component is ComponentType.PENMAN_MONTEITH:
        return read_penman_monteith(filepath)
    if component is ComponentType.DELAY_TABLES:
        return read_delay_tables(filepath, delay_interval)
    return read_delay_table_assignments(filepath)


def write_component(
    component: ComponentType,
    records: Sequence[Any],
    filepath: Path | str,
    previous_file: Path | str | None = None,
    new_comments: Sequence[str] | None = None,
    options: WriteOptions | None = None,
) -> None:
    """Write the records of one component file."""
    WRITERS[component](records, filepath, previous_file, new_comments, options)


def write_component_list_file(
    component: ComponentType,
    records: Sequence[Any],
    filepath: Path | str,
    options: ListFileOptions | None = None,
    new_comments: Sequence[str] | None = None,
) -> None:
    """Write the records of one component as a delimited list file."""
    options = options or ListFileOptions()
    LIST_FILE_WRITERS[component](
        records, filepath, options.delimiter, options.update, new_comments
    )


def read_dataset(
    config: StateCUFileConfig,
    delay_interval: int = INTERVAL_PERCENT,
) -> StateCUDataSet:
    """Read every configured component file that exists.

    Args:
        config: Data set file names and working directory
        delay_interval: Delay table interval (see
            :func:`pystatecu.io.delay_table.read_delay_tables`)

    Returns:
        The data set; components whose files are not configured or do
        not exist are left empty
    """
    dataset = StateCUDataSet()
    for component in ComponentType:
        path = config.path_for(component.attribute)
        if path is None:
            continue
        if not path.is_file():
            logger.debug("No %s file at %s", component.description, path)
            continue
        dataset.set_component(component, read_component(component, path, delay_interval))
    logger.info("Read StateCU data set with %d records from %s", dataset.n_items, config.working_dir)
    return dataset


def write_dataset(
    dataset: StateCUDataSet,
    config: StateCUFileConfig,
    options: WriteOptions | None = None,
    new_comments: Sequence[str] | None = None,
) -> dict[ComponentType, Path]:
    """Write every non-empty component of a data set.

    The user comments of an existing file at each output path are
    carried into the new header.

    Args:
        dataset: Data set to write
        config: Data set file names and working directory
        options: Output options
        new_comments: Comments added to every file header

    Returns:
        Paths written, keyed by component
    """
    written: dict[ComponentType, Path] = {}
    for component in ComponentType:
        path = config.path_for(component.attribute)
        if not dataset.has_component(component) or path is None:
            continue
        records = dataset.get_component(component)
        write_component(component, records, path, path, new_comments, options)
        written[component] = path
    logger.info("Wrote %d StateCU files to %s", len(written), config.working_dir)
    return written
