"""Google Weather API client for the hourly forecast endpoint."""

import logging

import httpx

from flightwx.models.forecast import ForecastPage

logger = logging.getLogger(__name__)

WEATHER_BASE_URL = "https://weather.googleapis.com"
HOURS_LOOKUP_PATH = "/v1/forecast/hours:lookup"


class WeatherClientError(Exception):
    """Raised when a forecast page cannot be retrieved or decoded."""

    def __init__(self, message: str, status_code: int | None = None, body: str = ""):
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class WeatherClient:
    """Issues one GET per call against the hourly forecast endpoint.

    No retries: a failed page is reported to the caller as-is.
    """

    def __init__(
        self,
        api_key: str,
        base_url: str = WEATHER_BASE_URL,
        timeout: float = 30.0,
    ):
        if not api_key:
            raise WeatherClientError("GOOGLE_API_KEY not set")
        self.api_key = api_key
        self.base_url = base_url
        self.timeout = timeout

    def get_hours_page(
        self,
        latitude: float,
        longitude: float,
        hours: int,
        page_token: str | None = None,
    ) -> ForecastPage:
        """Fetch one page of hourly forecasts.

        Raises WeatherClientError on a non-200 status, a blank body,
        a body that is not a JSON object, or a transport failure.
        """
        url = f"{self.base_url}{HOURS_LOOKUP_PATH}"
        params: dict[str, str | float | int] = {
            "key": self.api_key,
            "location.latitude": latitude,
            "location.longitude": longitude,
            "hours": hours,
        }
        if page_token:
            params["pageToken"] = page_token

        logger.debug(
            "Requesting hourly forecast lat=%s lon=%s hours=%d token=%s",
            latitude, longitude, hours, page_token or "-",
        )
        try:
            resp = httpx.get(url, params=params, timeout=self.timeout)
        except httpx.RequestError as e:
            logger.error("Weather API request failed: %s", e)
            raise WeatherClientError(f"Request failed: {e}") from e

        if resp.status_code != 200:
            body = resp.text
            logger.error("Weather API %d: %s", resp.status_code, body)
            raise WeatherClientError(
                f"HTTP {resp.status_code}: {body}", resp.status_code, body
            )

        if not resp.text.strip():
            raise WeatherClientError("empty body", resp.status_code)

        try:
            data = resp.json()
        except ValueError as e:  # JSONDecodeError or UnicodeDecodeError
            raise WeatherClientError(
                f"Unparseable body: {e}", resp.status_code, resp.text
            ) from e
        if not isinstance(data, dict):
            raise WeatherClientError(
                "Unexpected body: expected a JSON object", resp.status_code, resp.text
            )

        return _to_page(data)


def _to_page(data: dict) -> ForecastPage:
    hours = data.get("forecastHours")
    if not isinstance(hours, list):
        hours = []
    token = data.get("nextPageToken")
    if not isinstance(token, str) or not token:
        token = None
    return ForecastPage(hours=hours, next_page_token=token)
