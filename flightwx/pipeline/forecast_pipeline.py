"""Forecast pipeline: time slot in, forecast outcome out."""

import logging
from collections.abc import Callable
from datetime import datetime

from flightwx.config.schema import FlightwxConfig
from flightwx.ingest.forecast_fetcher import ForecastFetcher, PaginationLimitError
from flightwx.ingest.forecast_matcher import SummaryParseError, find_and_summarize
from flightwx.ingest.horizon import TimeSlotError, parse_time_slot, validate_target
from flightwx.ingest.weather_client import WeatherClient, WeatherClientError
from flightwx.models.common import local_now
from flightwx.models.forecast import ForecastRequest
from flightwx.models.outcome import ForecastOutcome, OutcomeKind

logger = logging.getLogger(__name__)


class ForecastPipeline:
    """Runs parse, validate, fetch and match for one time slot per call.

    Holds no per-request state, so separate calls may run in parallel if
    the underlying HTTP client allows it.
    """

    def __init__(
        self,
        config: FlightwxConfig,
        fetcher: ForecastFetcher | None = None,
        clock: Callable[[], datetime] | None = None,
    ):
        if config.location is None:
            raise ValueError("No location configured")
        self.config = config
        self._fetcher = fetcher
        self._clock = clock or (lambda: local_now(config.location.timezone))

    @property
    def fetcher(self) -> ForecastFetcher:
        # Built lazily so a missing API key only surfaces once a fetch is due.
        if self._fetcher is None:
            weather = self.config.weather
            client = WeatherClient(
                api_key=weather.api_key,
                base_url=weather.base_url,
                timeout=weather.timeout_seconds,
            )
            self._fetcher = ForecastFetcher(client, max_pages=weather.max_pages)
        return self._fetcher

    def build_request(self, time_slot_id: str) -> ForecastRequest:
        """Parse and validate a time slot. Raises TimeSlotError."""
        target = parse_time_slot(time_slot_id)
        validate_target(target, self._clock(), self.config.ops.max_forecast_days)
        location = self.config.location
        return ForecastRequest(
            latitude=location.latitude,
            longitude=location.longitude,
            target_local_datetime=target,
        )

    def run(self, time_slot_id: str) -> ForecastOutcome:
        try:
            request = self.build_request(time_slot_id)
        except TimeSlotError as e:
            return ForecastOutcome(
                kind=OutcomeKind.INPUT_ERROR,
                time_slot_id=time_slot_id,
                detail=str(e),
                input_reason=e.reason,
            )

        try:
            series = self.fetcher.fetch_all(
                request.latitude,
                request.longitude,
                self.config.weather.horizon_hours,
            )
        except PaginationLimitError as e:
            return ForecastOutcome(
                kind=OutcomeKind.PAGINATION_LIMIT,
                time_slot_id=time_slot_id,
                detail=str(e),
            )
        except WeatherClientError as e:
            return ForecastOutcome(
                kind=OutcomeKind.FETCH_ERROR,
                time_slot_id=time_slot_id,
                detail=str(e),
                status_code=e.status_code,
            )

        try:
            summary = find_and_summarize(series, request.target_local_datetime)
        except SummaryParseError as e:
            logger.error("Forecast data for %s is malformed: %s", time_slot_id, e)
            return ForecastOutcome(
                kind=OutcomeKind.PARSE_ERROR,
                time_slot_id=time_slot_id,
                detail=str(e),
            )

        if summary is None:
            return ForecastOutcome(
                kind=OutcomeKind.NOT_FOUND,
                time_slot_id=time_slot_id,
                detail=(
                    f"no forecast hour for {request.target_local_datetime.isoformat()}"
                ),
            )
        return ForecastOutcome(
            kind=OutcomeKind.SUMMARY, time_slot_id=time_slot_id, summary=summary
        )
