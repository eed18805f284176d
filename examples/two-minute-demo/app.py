"""Two-minute ParetoKit demo: FastAPI backend serving widget-ready analyses."""

from typing import Optional

from fastapi import FastAPI, HTTPException

from paretokit.adapters import StaticDatasetRepository
from paretokit.analytics import classify_row
from paretokit.config import Settings, configure_logging
from paretokit.models import DatasetSelection, SortOrder, WidgetConfig
from paretokit.resolver import describe_selection
from paretokit.service import ParetoService

SETTINGS = Settings()
configure_logging(SETTINGS)

app = FastAPI(title="ParetoKit Two-Minute Demo", version="0.1.0")
service = ParetoService(StaticDatasetRepository(), settings=SETTINGS)


def _build_config(
    device: str,
    sensor: str,
    sort_order: Optional[str],
    threshold: Optional[float],
) -> WidgetConfig:
    try:
        order = SortOrder(sort_order) if sort_order else SETTINGS.sort_order
    except ValueError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    return WidgetConfig(
        selection=DatasetSelection(device=device, sensor=sensor),
        sort_order=order,
        threshold=SETTINGS.critical_threshold if threshold is None else threshold,
    )


@app.get("/health")
def health() -> dict:
    return {"status": "ok", "demo": "paretokit-two-minute"}


@app.get("/api/devices")
def devices() -> dict:
    return service.catalog()


@app.get("/api/pareto")
def pareto(
    device: str = "",
    sensor: str = "",
    sort_order: Optional[str] = None,
    threshold: Optional[float] = None,
) -> dict:
    config = _build_config(device, sensor, sort_order, threshold)
    result = service.recompute(config)
    return {
        **describe_selection(config.selection),
        "analysis": result.to_dict(),
        "drill_down": [classify_row(row, result) for row in result.rows],
    }


@app.get("/api/export")
def export(
    device: str = "",
    sensor: str = "",
    sort_order: Optional[str] = None,
    threshold: Optional[float] = None,
) -> dict:
    return service.export(_build_config(device, sensor, sort_order, threshold))
