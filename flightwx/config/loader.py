"""YAML config loader with credential injection and dotted-key lookup."""

import os
from pathlib import Path
from typing import Any

import yaml

from flightwx.config.defaults import API_KEY_ENV_VAR, DEFAULT_LOCATION
from flightwx.config.schema import FlightwxConfig


def load_config(
    path: str | Path, environ: dict[str, str] | None = None
) -> FlightwxConfig:
    """Load and validate config from a YAML file.

    A missing file yields the defaults. If no location is given,
    injects DEFAULT_LOCATION. A blank ``weather.api_key`` is filled from
    the GOOGLE_API_KEY environment variable here, once, so the HTTP
    client only ever sees an explicit key.
    """
    path = Path(path)
    raw: dict[str, Any] = {}
    if path.exists():
        with open(path) as f:
            raw = yaml.safe_load(f) or {}
    if not isinstance(raw, dict):
        raise ValueError(
            f"Config file {path} must contain a mapping, got {type(raw).__name__}"
        )

    if not raw.get("location"):
        raw["location"] = DEFAULT_LOCATION.model_dump()

    env = os.environ if environ is None else environ
    weather = raw.setdefault("weather", {}) or {}
    raw["weather"] = weather
    if not weather.get("api_key"):
        weather["api_key"] = env.get(API_KEY_ENV_VAR, "")

    return FlightwxConfig(**raw)


def get_config_value(config: FlightwxConfig, dotted_key: str) -> Any:
    """Get a config value by dotted key path. E.g. 'criteria.max_wind_kmh'."""
    parts = dotted_key.split(".")
    obj: Any = config
    for part in parts:
        if isinstance(obj, list):
            obj = obj[int(part)]
        elif hasattr(obj, part):
            obj = getattr(obj, part)
        elif isinstance(obj, dict):
            obj = obj[part]
        else:
            raise KeyError(f"Config key not found: {dotted_key}")
    return obj


def redacted_dump(config: FlightwxConfig) -> str:
    """JSON dump of the config with the API key masked."""
    data = config.model_dump(mode="json")
    if data["weather"]["api_key"]:
        data["weather"]["api_key"] = "***"
    return FlightwxConfig.model_validate(data).model_dump_json(indent=2)
