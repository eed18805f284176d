"""In-memory repository adapter over a static device/sensor table."""

from typing import Optional, Sequence

from ..datasets import DEFAULT_DATASET, DEVICE_SENSOR_DATASETS
from ..models import DeviceSensorKey, Observation
from ..resolver import DatasetTable, list_devices, list_sensors, lookup_dataset


class StaticDatasetRepository:
    """Serves datasets from a pre-populated lookup table."""

    def __init__(
        self,
        table: Optional[DatasetTable] = None,
        default: Optional[Sequence[Observation]] = None,
    ):
        self.table = DEVICE_SENSOR_DATASETS if table is None else table
        self.default = DEFAULT_DATASET if default is None else tuple(default)

    def fetch_dataset(self, key: DeviceSensorKey) -> Optional[Sequence[Observation]]:
        return lookup_dataset(self.table, key)

    def default_dataset(self) -> Sequence[Observation]:
        return self.default

    def list_devices(self) -> Sequence[str]:
        return list_devices(self.table)

    def list_sensors(self, device: str) -> Sequence[str]:
        return list_sensors(device, self.table)
