"""Locate the forecast hour for a target time and reduce it to a summary."""

import logging
import math
from datetime import datetime
from typing import Any

from flightwx.models.common import RawHourlyForecast
from flightwx.models.forecast import WeatherSummary

logger = logging.getLogger(__name__)


class SummaryParseError(Exception):
    """Raised when a forecast hour lacks the structure a summary needs."""


def find_and_summarize(
    series: list[RawHourlyForecast], target: datetime
) -> WeatherSummary | None:
    """Summarize the first hour whose local year/month/day/hour equal target's.

    Each hour's start time keeps its own UTC offset; the target is
    compared against that local representation without conversion.
    Minutes and seconds are ignored. Returns None when nothing matches.
    Start times without a UTC offset raise SummaryParseError.
    """
    for index, hour in enumerate(series):
        start = _start_time(hour, index)
        if (
            start.year == target.year
            and start.month == target.month
            and start.day == target.day
            and start.hour == target.hour
        ):
            return summarize_hour(hour)

    logger.warning(
        "No forecast hour matched %s in %d hours", target.isoformat(), len(series)
    )
    return None


def summarize_hour(hour: RawHourlyForecast) -> WeatherSummary:
    try:
        return WeatherSummary(
            condition_text=_text(hour, "weatherCondition", "description", "text"),
            temperature_degrees=round_half_up(_number(hour, "temperature", "degrees")),
            rain_probability_percent=int(
                _number(hour, "precipitation", "probability", "percent")
            ),
            thunderstorm_probability_percent=int(
                _number(hour, "thunderstormProbability")
            ),
            wind_speed_kmh=round_half_up(_number(hour, "wind", "speed", "value")),
        )
    except (TypeError, ValueError) as e:
        raise SummaryParseError(f"Malformed forecast hour: {e}") from e


def round_half_up(value: Any) -> int:
    """Round to the nearest integer, halves away from zero."""
    number = float(value)
    if math.isnan(number) or math.isinf(number):
        raise ValueError(f"not a finite number: {value!r}")
    return int(math.copysign(math.floor(abs(number) + 0.5), number))


def _start_time(hour: RawHourlyForecast, index: int) -> datetime:
    raw = _path(hour, "interval", "startTime")
    if not isinstance(raw, str):
        raise SummaryParseError(
            f"Forecast hour {index} has non-string startTime {raw!r}"
        )
    try:
        start = datetime.fromisoformat(raw)
    except ValueError as e:
        raise SummaryParseError(
            f"Forecast hour {index} has unparseable startTime {raw!r}"
        ) from e
    if start.tzinfo is None:
        raise SummaryParseError(
            f"Forecast hour {index} startTime {raw!r} has no UTC offset"
        )
    return start


def _text(record: Any, *keys: str) -> str:
    value = _path(record, *keys)
    if not isinstance(value, str):
        raise SummaryParseError(
            f"Field {'.'.join(keys)} is not text: {value!r}"
        )
    return value


def _number(record: Any, *keys: str) -> int | float:
    value = _path(record, *keys)
    # bool is an int subclass
    if isinstance(value, bool) or not isinstance(value, int | float):
        raise SummaryParseError(
            f"Field {'.'.join(keys)} is not a number: {value!r}"
        )
    return value


def _path(record: Any, *keys: str) -> Any:
    node = record
    for i, key in enumerate(keys):
        if not isinstance(node, dict) or node.get(key) is None:
            raise SummaryParseError(
                f"Missing field {'.'.join(keys[: i + 1])}"
            )
        node = node[key]
    return node
