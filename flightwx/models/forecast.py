"""Hourly forecast data models."""

from dataclasses import dataclass, field
from datetime import datetime

from flightwx.models.common import RawHourlyForecast


@dataclass(frozen=True)
class ForecastRequest:
    latitude: float
    longitude: float
    target_local_datetime: datetime  # naive, location-local


@dataclass(frozen=True)
class ForecastPage:
    hours: list[RawHourlyForecast] = field(default_factory=list)
    next_page_token: str | None = None


@dataclass(frozen=True)
class WeatherSummary:
    condition_text: str
    temperature_degrees: int
    rain_probability_percent: int
    thunderstorm_probability_percent: int
    wind_speed_kmh: int
