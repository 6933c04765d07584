"""Output formatters for weather summaries and forecast outcomes."""

import json
import re

from flightwx.models.forecast import WeatherSummary
from flightwx.models.outcome import ForecastOutcome, OutcomeKind

_SUMMARY_RE = re.compile(
    r"^(?P<condition>.*), Temp: (?P<temp>-?\d+)°C, Rain: (?P<rain>-?\d+)%, "
    r"Thunderstorm: (?P<thunder>-?\d+)%, Wind: (?P<wind>-?\d+) km/h\Z",
    re.DOTALL,
)


def format_summary_text(s: WeatherSummary) -> str:
    """Plain text summary handed to the reasoning component."""
    return (
        f"{s.condition_text}, Temp: {s.temperature_degrees}°C, "
        f"Rain: {s.rain_probability_percent}%, "
        f"Thunderstorm: {s.thunderstorm_probability_percent}%, "
        f"Wind: {s.wind_speed_kmh} km/h"
    )


def parse_summary_text(text: str) -> WeatherSummary:
    """Inverse of format_summary_text. Raises ValueError on other input."""
    m = _SUMMARY_RE.match(text)
    if m is None:
        raise ValueError(f"Not a weather summary: {text!r}")
    return WeatherSummary(
        condition_text=m.group("condition"),
        temperature_degrees=int(m.group("temp")),
        rain_probability_percent=int(m.group("rain")),
        thunderstorm_probability_percent=int(m.group("thunder")),
        wind_speed_kmh=int(m.group("wind")),
    )


def format_outcome_text(o: ForecastOutcome) -> str:
    """One-line message for an outcome; never empty."""
    if o.kind == OutcomeKind.SUMMARY and o.summary is not None:
        return format_summary_text(o.summary)
    if o.kind == OutcomeKind.NOT_FOUND:
        return (
            f"No forecast available for {o.time_slot_id}: the hour is not "
            f"in the upstream forecast."
        )
    if o.kind == OutcomeKind.INPUT_ERROR:
        return f"Invalid time slot {o.time_slot_id}: {o.detail}"
    if o.kind == OutcomeKind.FETCH_ERROR:
        status = f" (status {o.status_code})" if o.status_code is not None else ""
        return f"Error: weather fetch failed{status}: {o.detail}"
    if o.kind == OutcomeKind.PAGINATION_LIMIT:
        return f"Error: weather fetch aborted: {o.detail}"
    if o.kind == OutcomeKind.PARSE_ERROR:
        return f"Error: forecast data for {o.time_slot_id} is malformed: {o.detail}"
    return f"Error: unexpected outcome {o.kind} for {o.time_slot_id}"


def outcome_to_dict(o: ForecastOutcome) -> dict:
    data: dict = {
        "time_slot_id": o.time_slot_id,
        "kind": o.kind.value,
        "message": format_outcome_text(o),
    }
    if o.summary is not None:
        data["summary"] = {
            "condition": o.summary.condition_text,
            "temperature_c": o.summary.temperature_degrees,
            "rain_percent": o.summary.rain_probability_percent,
            "thunderstorm_percent": o.summary.thunderstorm_probability_percent,
            "wind_kmh": o.summary.wind_speed_kmh,
        }
    if o.detail:
        data["detail"] = o.detail
    if o.status_code is not None:
        data["status_code"] = o.status_code
    if o.input_reason is not None:
        data["input_reason"] = o.input_reason.value
    return data


def format_outcome_json(o: ForecastOutcome) -> str:
    """JSON outcome for programmatic consumption."""
    return json.dumps(outcome_to_dict(o), indent=2, ensure_ascii=False)
