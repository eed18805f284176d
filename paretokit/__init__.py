"""ParetoKit - Pareto (80/20) analysis engine for dashboard widgets."""

from .analytics import (
    build_export_payload,
    classify_row,
    compute_pareto_analysis,
    empty_pareto_analysis,
)
from .models import (
    AnalysisResult,
    AnalysisRow,
    DatasetSelection,
    DeviceSensorKey,
    Observation,
    SortOrder,
    WidgetConfig,
)
from .resolver import (
    describe_selection,
    device_label,
    list_devices,
    list_sensors,
    resolve_dataset,
    sensor_label,
)
from .service import ParetoService

__all__ = [
    "ParetoService",
    "compute_pareto_analysis",
    "empty_pareto_analysis",
    "classify_row",
    "build_export_payload",
    "resolve_dataset",
    "list_devices",
    "list_sensors",
    "device_label",
    "sensor_label",
    "describe_selection",
    "Observation",
    "AnalysisRow",
    "AnalysisResult",
    "DeviceSensorKey",
    "DatasetSelection",
    "SortOrder",
    "WidgetConfig",
]

__version__ = "0.1.0"
