"""Forecast lookup outcome variants returned to callers."""

from dataclasses import dataclass
from enum import StrEnum

from flightwx.models.forecast import WeatherSummary


class OutcomeKind(StrEnum):
    SUMMARY = "SUMMARY"
    NOT_FOUND = "NOT_FOUND"
    INPUT_ERROR = "INPUT_ERROR"
    FETCH_ERROR = "FETCH_ERROR"
    PARSE_ERROR = "PARSE_ERROR"
    PAGINATION_LIMIT = "PAGINATION_LIMIT"


class InputErrorReason(StrEnum):
    UNPARSEABLE = "UNPARSEABLE"
    HISTORICAL = "HISTORICAL"
    BEYOND_HORIZON = "BEYOND_HORIZON"


@dataclass(frozen=True)
class ForecastOutcome:
    kind: OutcomeKind
    time_slot_id: str
    summary: WeatherSummary | None = None
    detail: str = ""
    status_code: int | None = None
    input_reason: InputErrorReason | None = None

    @property
    def ok(self) -> bool:
        return self.kind == OutcomeKind.SUMMARY
