"""Shared test fixtures."""

import json
from collections.abc import Callable
from datetime import datetime
from pathlib import Path

import pytest

from flightwx.config.defaults import DEFAULT_LOCATION
from flightwx.config.schema import FlightwxConfig, WeatherApiConfig

FIXTURE_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to the test fixtures directory."""
    return FIXTURE_DIR


@pytest.fixture
def load_fixture() -> Callable[[str], dict]:
    def _load(name: str) -> dict:
        with open(FIXTURE_DIR / name) as f:
            return json.load(f)

    return _load


@pytest.fixture
def default_config() -> FlightwxConfig:
    """Default config with the default airfield and a test API key."""
    return FlightwxConfig(
        weather=WeatherApiConfig(
            api_key="test-key",
            base_url="https://test-weather.example.com",
            max_pages=5,
        ),
        location=DEFAULT_LOCATION,
    )


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2025, 12, 24, 12, 0, 0)


@pytest.fixture
def make_hour() -> Callable[..., dict]:
    """Build one upstream forecast hour in the hours:lookup shape."""

    def _make(
        start: str,
        condition: str = "Clear",
        temp: float = 5.4,
        rain: int = 10,
        thunder: int = 0,
        wind: float = 12.3,
    ) -> dict:
        return {
            "interval": {"startTime": start},
            "weatherCondition": {"description": {"text": condition}},
            "temperature": {"degrees": temp, "unit": "CELSIUS"},
            "precipitation": {"probability": {"percent": rain, "type": "RAIN"}},
            "thunderstormProbability": thunder,
            "wind": {"speed": {"value": wind, "unit": "KILOMETERS_PER_HOUR"}},
        }

    return _make
