"""Engine settings loaded from environment variables."""

import logging
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings

from .models import SortOrder


class Settings(BaseSettings):
    model_config = {"env_prefix": "PARETOKIT_", "env_file": ".env", "env_file_encoding": "utf-8"}

    # Analysis
    sort_order: SortOrder = SortOrder.DESCENDING
    critical_threshold: float = Field(default=80.0, ge=0.0, le=100.0)

    # Initial selection shown before the user picks a sensor
    default_device: str = "device-001"
    default_sensor: str = ""

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"


def configure_logging(settings: Settings) -> None:
    """Apply the configured level to the package logger."""
    logging.getLogger("paretokit").setLevel(settings.log_level)
