"""Device/sensor dataset resolution with a default-dataset fallback."""

import logging
from typing import Callable, Dict, List, Mapping, Optional, Sequence

from .datasets import (
    DEFAULT_DATASET,
    DEFAULT_DESCRIPTION,
    DEFAULT_TITLE,
    DEVICE_LABELS,
    DEVICE_SENSOR_DATASETS,
    SENSOR_LABELS,
)
from .models import DatasetSelection, DeviceSensorKey, Observation

logger = logging.getLogger(__name__)

DatasetTable = Mapping[str, Mapping[str, Sequence[Observation]]]
DatasetFetcher = Callable[[DeviceSensorKey], Optional[Sequence[Observation]]]


def lookup_dataset(table: DatasetTable, key: DeviceSensorKey) -> Optional[Sequence[Observation]]:
    """Exact-match lookup; None for an incomplete or unknown key."""
    if not key.is_complete:
        return None
    return table.get(key.device, {}).get(key.sensor)


def fetch_or_default(
    key: DeviceSensorKey,
    fetch: DatasetFetcher,
    default: Sequence[Observation],
) -> List[Observation]:
    """Fetch the dataset for ``key``, falling back to ``default`` on any miss."""
    dataset = fetch(key) if key.is_complete else None
    if dataset is None:
        logger.debug("No dataset for device=%r sensor=%r, using default", key.device, key.sensor)
        return list(default)
    return list(dataset)


def resolve_dataset(
    device: str,
    sensor: str,
    table: Optional[DatasetTable] = None,
    default: Optional[Sequence[Observation]] = None,
) -> List[Observation]:
    """
    Return the observations recorded for ``device``/``sensor``.

    Keys must match exactly. A missing device, a missing sensor or an empty
    key falls back to the default dataset; this never raises.
    """
    if table is None:
        table = DEVICE_SENSOR_DATASETS
    if default is None:
        default = DEFAULT_DATASET

    return fetch_or_default(
        DeviceSensorKey(device=device, sensor=sensor),
        lambda key: lookup_dataset(table, key),
        default,
    )


def list_devices(table: Optional[DatasetTable] = None) -> List[str]:
    if table is None:
        table = DEVICE_SENSOR_DATASETS
    return list(table)


def list_sensors(device: str, table: Optional[DatasetTable] = None) -> List[str]:
    if table is None:
        table = DEVICE_SENSOR_DATASETS
    return list(table.get(device, {}))


def device_label(device: str) -> str:
    return DEVICE_LABELS.get(device, device)


def sensor_label(sensor: str) -> str:
    return SENSOR_LABELS.get(sensor, sensor)


def describe_selection(selection: DatasetSelection) -> Dict[str, str]:
    """Widget title and description for a device/sensor selection."""
    if not selection.is_complete:
        return {"title": DEFAULT_TITLE, "description": DEFAULT_DESCRIPTION}

    sensor_words = selection.sensor.replace("-", " ")
    return {
        "title": f"{selection.device.upper()} - {sensor_words.upper()} Analysis",
        "description": f"Pareto analysis of {sensor_words} issues from {selection.device}",
    }
