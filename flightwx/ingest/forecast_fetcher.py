"""Forecast fetcher: follows page tokens and flattens hourly forecasts."""

import logging

from flightwx.ingest.weather_client import WeatherClient, WeatherClientError
from flightwx.models.common import RawHourlyForecast

logger = logging.getLogger(__name__)

DEFAULT_HORIZON_HOURS = 240
DEFAULT_MAX_PAGES = 50


class PaginationLimitError(WeatherClientError):
    """Raised when the upstream keeps returning page tokens past max_pages."""

    def __init__(self, max_pages: int):
        super().__init__(f"pagination limit exceeded after {max_pages} pages")
        self.max_pages = max_pages


class ForecastFetcher:
    def __init__(self, client: WeatherClient, max_pages: int = DEFAULT_MAX_PAGES):
        self.client = client
        self.max_pages = max_pages

    def fetch_all(
        self,
        latitude: float,
        longitude: float,
        horizon_hours: int = DEFAULT_HORIZON_HOURS,
    ) -> list[RawHourlyForecast]:
        """Fetch every page of the hourly forecast, in upstream order.

        Pages are requested strictly one after another since each token
        comes from the previous response. Any failing page aborts the
        whole fetch; no partial series is returned.
        """
        series: list[RawHourlyForecast] = []
        token: str | None = None
        pages = 0

        while True:
            if pages >= self.max_pages:
                logger.error(
                    "Stopping after %d pages, upstream still returned a token",
                    pages,
                )
                raise PaginationLimitError(self.max_pages)

            page = self.client.get_hours_page(
                latitude, longitude, horizon_hours, page_token=token
            )
            pages += 1
            series.extend(page.hours)

            token = page.next_page_token
            if token is None:
                break

        logger.info(
            "Fetched %d hourly forecasts across %d page(s)", len(series), pages
        )
        return series
