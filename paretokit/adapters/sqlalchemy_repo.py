"""SQLAlchemy repository adapter for ParetoKit."""

from typing import Optional, Sequence

from sqlalchemy import text
from sqlalchemy.orm import Session

from ..datasets import DEFAULT_DATASET
from ..models import DeviceSensorKey, Observation


class SQLAlchemyDatasetRepository:
    """Reads device/sensor observations from a relational table.

    Expected table::

        sensor_observations(device, sensor, category, occurrences, position)

    ``position`` preserves the recorded order of a dataset, which the
    stable descending sort relies on for tie-breaking.
    """

    def __init__(self, db: Session, default: Optional[Sequence[Observation]] = None):
        self.db = db
        self.default = DEFAULT_DATASET if default is None else tuple(default)

    def fetch_dataset(self, key: DeviceSensorKey) -> Optional[Sequence[Observation]]:
        rows = self.db.execute(
            text(
                """
                SELECT category, occurrences
                FROM sensor_observations
                WHERE device = :device AND sensor = :sensor
                ORDER BY position
                """
            ),
            {"device": key.device, "sensor": key.sensor},
        ).fetchall()

        if not rows:
            return None
        return [
            Observation(category=row.category, count=_parse_count(row.occurrences))
            for row in rows
        ]

    def default_dataset(self) -> Sequence[Observation]:
        return self.default

    def list_devices(self) -> Sequence[str]:
        rows = self.db.execute(
            text(
                """
                SELECT DISTINCT device
                FROM sensor_observations
                ORDER BY device
                """
            )
        ).fetchall()
        return [row.device for row in rows]

    def list_sensors(self, device: str) -> Sequence[str]:
        rows = self.db.execute(
            text(
                """
                SELECT DISTINCT sensor
                FROM sensor_observations
                WHERE device = :device
                ORDER BY sensor
                """
            ),
            {"device": device},
        ).fetchall()
        return [row.sensor for row in rows]


def _parse_count(raw_count) -> int:
    if raw_count is None:
        return 0
    try:
        return int(raw_count)
    except (TypeError, ValueError):
        return 0
