"""Application service orchestrating dataset repositories and pure analytics."""

import logging
from typing import Dict, List, Optional

from .analytics import build_export_payload, compute_pareto_analysis
from .config import Settings
from .models import AnalysisResult, DatasetSelection, DeviceSensorKey, Observation, WidgetConfig
from .ports import DatasetRepository
from .resolver import describe_selection, device_label, fetch_or_default, sensor_label

logger = logging.getLogger(__name__)


class ParetoService:
    """Facade the widget layer calls whenever device, sensor or data changes."""

    def __init__(self, repo: DatasetRepository, settings: Optional[Settings] = None):
        self.repo = repo
        self.settings = settings or Settings()

    def default_config(self) -> WidgetConfig:
        return WidgetConfig(
            selection=DatasetSelection(
                device=self.settings.default_device,
                sensor=self.settings.default_sensor,
            ),
            sort_order=self.settings.sort_order,
            threshold=self.settings.critical_threshold,
        )

    def resolve_dataset(self, device: str, sensor: str) -> List[Observation]:
        return self._resolve(DeviceSensorKey(device=device, sensor=sensor))

    def _resolve(self, key: DeviceSensorKey) -> List[Observation]:
        return fetch_or_default(key, self.repo.fetch_dataset, self.repo.default_dataset())

    def recompute(self, config: Optional[WidgetConfig] = None) -> AnalysisResult:
        if config is None:
            config = self.default_config()
        selection = config.selection
        observations = self._resolve(selection.key)
        result = compute_pareto_analysis(
            observations,
            sort_order=config.sort_order,
            threshold=config.threshold,
        )
        logger.debug(
            "Recomputed %s/%s: %d rows, %d critical",
            selection.device,
            selection.sensor,
            len(result.rows),
            result.critical_count,
        )
        return result

    def export(self, config: Optional[WidgetConfig] = None) -> Dict:
        if config is None:
            config = self.default_config()
        result = self.recompute(config)
        title = describe_selection(config.selection)["title"]
        return build_export_payload(result, title=title)

    def catalog(self) -> Dict[str, Dict]:
        """Devices and their sensors, with display labels for selector widgets."""
        return {
            device: {
                "label": device_label(device),
                "sensors": [
                    {"id": sensor, "label": sensor_label(sensor)}
                    for sensor in self.repo.list_sensors(device)
                ],
            }
            for device in self.repo.list_devices()
        }
