from paretokit.adapters import StaticDatasetRepository
from paretokit.config import Settings
from paretokit.datasets import DEFAULT_DATASET
from paretokit.models import DatasetSelection, Observation, SortOrder, WidgetConfig
from paretokit.service import ParetoService


class FakeRepo:
    def __init__(self):
        self.fetched = []

    def fetch_dataset(self, key):
        self.fetched.append((key.device, key.sensor))
        if (key.device, key.sensor) == ("line-a", "temperature"):
            return [
                Observation(category="Overheating", count=60),
                Observation(category="Drift", count=30),
                Observation(category="Other", count=10),
            ]
        return None

    def default_dataset(self):
        return [Observation(category="Default", count=1)]

    def list_devices(self):
        return ["line-a"]

    def list_sensors(self, device):
        return ["temperature"] if device == "line-a" else []


def _settings(**overrides):
    values = {
        "sort_order": SortOrder.DESCENDING,
        "critical_threshold": 80.0,
        "default_device": "line-a",
        "default_sensor": "",
    }
    values.update(overrides)
    return Settings(**values)


def test_recompute_resolves_then_transforms():
    repo = FakeRepo()
    service = ParetoService(repo, settings=_settings())
    config = WidgetConfig(selection=DatasetSelection(device="line-a", sensor="temperature"))

    result = service.recompute(config)

    assert repo.fetched == [("line-a", "temperature")]
    assert result.total == 100
    assert [row.category for row in result.rows] == ["Overheating", "Drift", "Other"]
    assert result.critical_count == 2


def test_incomplete_selection_skips_lookup_and_uses_default():
    repo = FakeRepo()
    service = ParetoService(repo, settings=_settings())

    result = service.recompute(WidgetConfig(selection=DatasetSelection(device="line-a")))

    assert repo.fetched == []
    assert [row.category for row in result.rows] == ["Default"]


def test_unknown_pair_uses_repository_default():
    repo = FakeRepo()
    service = ParetoService(repo, settings=_settings())

    dataset = service.resolve_dataset("line-b", "temperature")

    assert repo.fetched == [("line-b", "temperature")]
    assert dataset == [Observation(category="Default", count=1)]


def test_default_config_comes_from_settings():
    service = ParetoService(
        FakeRepo(),
        settings=_settings(sort_order=SortOrder.ASCENDING, critical_threshold=70.0),
    )

    config = service.default_config()

    assert config.selection == DatasetSelection(device="line-a", sensor="")
    assert config.sort_order is SortOrder.ASCENDING
    assert config.threshold == 70.0


def test_recompute_is_idempotent():
    service = ParetoService(StaticDatasetRepository(), settings=_settings())
    config = WidgetConfig(selection=DatasetSelection(device="device-005", sensor="pressure"))

    assert service.recompute(config) == service.recompute(config)


def test_export_uses_selection_title():
    service = ParetoService(StaticDatasetRepository(), settings=_settings())
    config = WidgetConfig(selection=DatasetSelection(device="device-002", sensor="flow-rate"))

    payload = service.export(config)

    assert payload["title"] == "DEVICE-002 - FLOW RATE Analysis"
    assert payload["total"] == 885
    assert payload["rows"][0]["category"] == "Flow Restrictions"


def test_static_repository_default_flow():
    service = ParetoService(StaticDatasetRepository(), settings=_settings())

    result = service.recompute(WidgetConfig(selection=DatasetSelection(device="nope", sensor="x")))

    assert result.total == sum(obs.count for obs in DEFAULT_DATASET)
    assert result.critical_count == 6


def test_catalog_falls_back_to_raw_ids_for_unlabelled_keys():
    service = ParetoService(FakeRepo(), settings=_settings())

    assert service.catalog() == {
        "line-a": {
            "label": "line-a",
            "sensors": [{"id": "temperature", "label": "Temperature Sensor"}],
        }
    }


def test_catalog_carries_display_labels():
    service = ParetoService(StaticDatasetRepository(), settings=_settings())

    catalog = service.catalog()

    assert list(catalog)[0] == "device-001"
    assert catalog["device-001"]["label"] == "Device-001 (Production Line A)"
    assert catalog["cluster-west"]["label"] == "Cluster-West (Multiple Devices)"
    assert catalog["cluster-east"]["sensors"] == [
        {"id": "cpu-usage", "label": "CPU Usage"},
        {"id": "disk-io", "label": "Disk I/O"},
    ]


def test_blank_keys_never_reach_the_repository():
    repo = FakeRepo()
    service = ParetoService(repo, settings=_settings())

    for device, sensor in [("", "temperature"), ("line-a", ""), ("", "")]:
        assert service.resolve_dataset(device, sensor) == [Observation(category="Default", count=1)]

    assert repo.fetched == []
