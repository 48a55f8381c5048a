"""Pydantic v2 configuration schema with strict validation."""

from enum import StrEnum

from pydantic import BaseModel, Field

from barweather.config.defaults import (
    API_KEY_FILENAME,
    DEFAULT_EXCLUDE,
    DEFAULT_TIMEOUT,
    OPENWEATHER_BASE_URL,
)


class Units(StrEnum):
    # Temperature bands are Celsius thresholds, so only metric is accepted
    METRIC = "metric"


class BarweatherConfig(BaseModel):
    model_config = {"extra": "forbid"}

    base_url: str = OPENWEATHER_BASE_URL
    timeout: float = Field(default=DEFAULT_TIMEOUT, gt=0.0)
    units: Units = Units.METRIC
    exclude: list[str] = Field(default_factory=lambda: list(DEFAULT_EXCLUDE))
    api_key_filename: str = Field(default=API_KEY_FILENAME, min_length=1)
