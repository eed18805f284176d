"""Core domain models used by the Pareto engine."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Tuple


class SortOrder(str, Enum):
    """Ordering policy applied before the cumulative walk."""

    DESCENDING = "descending"
    ASCENDING = "ascending"
    CUSTOM = "custom"


@dataclass(frozen=True)
class Observation:
    """A single (category, count) observation."""

    category: str
    count: int


@dataclass(frozen=True)
class DeviceSensorKey:
    """Lookup key into a device/sensor dataset table."""

    device: str
    sensor: str

    @property
    def is_complete(self) -> bool:
        return bool(self.device) and bool(self.sensor)


@dataclass(frozen=True)
class AnalysisRow:
    """One ranked, percentage-annotated observation."""

    category: str
    count: int
    rank: int
    individual_percentage: float
    cumulative_percentage: float

    def to_dict(self) -> Dict:
        return {
            "category": self.category,
            "count": self.count,
            "rank": self.rank,
            "individual_percentage": self.individual_percentage,
            "cumulative_percentage": self.cumulative_percentage,
        }


@dataclass(frozen=True)
class AnalysisResult:
    """Aggregate Pareto analysis over all rows."""

    total: int
    rows: Tuple[AnalysisRow, ...]
    critical_count: int
    pareto_efficiency: int
    sort_order: SortOrder = SortOrder.DESCENDING
    threshold: float = 80.0

    @property
    def top_issue_impact(self) -> float:
        return self.rows[0].individual_percentage if self.rows else 0.0

    @property
    def critical_rows(self) -> Tuple[AnalysisRow, ...]:
        return self.rows[: self.critical_count]

    def to_dict(self) -> Dict:
        return {
            "total": self.total,
            "rows": [row.to_dict() for row in self.rows],
            "critical_count": self.critical_count,
            "pareto_efficiency": self.pareto_efficiency,
            "top_issue_impact": self.top_issue_impact,
            "sort_order": self.sort_order.value,
            "threshold": self.threshold,
        }


@dataclass(frozen=True)
class DatasetSelection:
    """Device/sensor pair chosen by the widget user."""

    device: str = ""
    sensor: str = ""

    @property
    def is_complete(self) -> bool:
        return self.key.is_complete

    @property
    def key(self) -> DeviceSensorKey:
        return DeviceSensorKey(device=self.device, sensor=self.sensor)

    def with_device(self, device: str) -> "DatasetSelection":
        """Switch device; a new device invalidates the sensor choice."""
        return DatasetSelection(device=device, sensor="")

    def with_sensor(self, sensor: str) -> "DatasetSelection":
        return DatasetSelection(device=self.device, sensor=sensor)


@dataclass(frozen=True)
class WidgetConfig:
    """Engine-relevant slice of the dashboard widget configuration."""

    selection: DatasetSelection = field(default_factory=DatasetSelection)
    sort_order: SortOrder = SortOrder.DESCENDING
    threshold: float = 80.0
