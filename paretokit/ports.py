"""Port definitions for fetching device/sensor datasets from any source."""

from typing import Optional, Protocol, Sequence

from .models import DeviceSensorKey, Observation


class DatasetRepository(Protocol):
    """Repository interface that adapters can implement for any backend."""

    def fetch_dataset(self, key: DeviceSensorKey) -> Optional[Sequence[Observation]]:
        """Return the dataset for an exact key, or None when unknown."""

    def default_dataset(self) -> Sequence[Observation]:
        """Return the dataset used when a pair cannot be resolved."""

    def list_devices(self) -> Sequence[str]:
        """Return the known device identifiers."""

    def list_sensors(self, device: str) -> Sequence[str]:
        """Return the sensor identifiers recorded for a device."""
