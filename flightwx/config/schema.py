"""Pydantic v2 configuration schema with strict validation."""

from pydantic import BaseModel, Field


class WeatherApiConfig(BaseModel):
    model_config = {"extra": "forbid"}

    api_key: str = ""
    base_url: str = "https://weather.googleapis.com"
    horizon_hours: int = Field(default=240, ge=1, le=240)
    timeout_seconds: float = Field(default=30.0, gt=0.0)
    max_pages: int = Field(default=50, ge=1)


class LocationConfig(BaseModel):
    model_config = {"extra": "forbid"}

    name: str
    latitude: float = Field(ge=-90.0, le=90.0)
    longitude: float = Field(ge=-180.0, le=180.0)
    timezone: str = "UTC"


class SafetyCriteria(BaseModel):
    model_config = {"extra": "forbid"}

    max_wind_kmh: int = Field(default=20, gt=0)
    max_rain_percent: int = Field(default=30, ge=0, le=100)
    max_thunderstorm_percent: int = Field(default=0, ge=0, le=100)


class OpsConfig(BaseModel):
    model_config = {"extra": "forbid"}

    max_forecast_days: int = Field(default=9, ge=1, le=10)


class FlightwxConfig(BaseModel):
    model_config = {"extra": "forbid"}

    weather: WeatherApiConfig = WeatherApiConfig()
    location: LocationConfig | None = None
    criteria: SafetyCriteria = SafetyCriteria()
    ops: OpsConfig = OpsConfig()
