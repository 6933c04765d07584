"""Default training airfield and credential source."""

from flightwx.config.schema import LocationConfig

DEFAULT_LOCATION = LocationConfig(
    name="North Weald Airfield",
    latitude=51.7509,
    longitude=0.3398,
    timezone="Europe/London",
)

API_KEY_ENV_VAR = "GOOGLE_API_KEY"
