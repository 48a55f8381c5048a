"""Shared test fixtures."""

import json
from pathlib import Path

import pytest

from barweather.config.schema import BarweatherConfig
from barweather.models.weather import WeatherObservation

TEST_BASE_URL = "https://test-owm.example.com"


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to the test fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def onecall_payload(fixtures_dir: Path) -> dict:
    with open(fixtures_dir / "onecall_current.json") as f:
        return json.load(f)


@pytest.fixture
def polar_night_payload(fixtures_dir: Path) -> dict:
    with open(fixtures_dir / "onecall_polar_night.json") as f:
        return json.load(f)


@pytest.fixture
def test_config() -> BarweatherConfig:
    """Config pointed at a fake host so respx can intercept requests."""
    return BarweatherConfig(base_url=TEST_BASE_URL)


@pytest.fixture
def clear_day() -> WeatherObservation:
    sunrise = 1718417462
    return WeatherObservation(
        code=800,
        description="clear sky",
        observed_at=sunrise + 3600,
        temperature=20.0,
        sunrise=sunrise,
        sunset=1718477834,
    )
