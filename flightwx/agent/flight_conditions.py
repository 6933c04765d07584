"""Contract with the flight conditions reasoning component.

The go/no-go decision is made by an external model. This module supplies
what it needs: the safety thresholds as instructions, the user message
for a time slot, the weather tool output, and validation of the
structured report it sends back.
"""

import logging

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from flightwx.config.schema import SafetyCriteria
from flightwx.pipeline.forecast_pipeline import ForecastPipeline
from flightwx.reporting.formatters import format_outcome_text

logger = logging.getLogger(__name__)

WEATHER_TOOL_NAME = "getWeatherForecast"
WEATHER_TOOL_DESCRIPTION = (
    "Queries the weather conditions as they are forecasted based on the "
    "time slot ID of the training session booking"
)


class ConditionsReport(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    time_slot_id: str = Field(alias="timeSlotId")
    meets_requirements: bool = Field(alias="meetsRequirements")


class ConditionsReportError(Exception):
    """Raised when the reasoning component's reply is not a valid report."""


def build_system_message(criteria: SafetyCriteria) -> str:
    return f"""\
You are a flight conditions agent responsible for evaluating weather conditions to determine if it is safe to fly a small plane.
Your task is to assess the weather for a given time slot and decide if it meets the safety requirements.

You MUST use the '{WEATHER_TOOL_NAME}' tool to obtain the weather data for the specified 'timeSlotId'.

The flight conditions are considered safe ONLY IF ALL of the following criteria are met:
1.  Wind speed is less than {criteria.max_wind_kmh} km/h.
2.  The chance of rain is less than {criteria.max_rain_percent}%.
3.  {_thunderstorm_rule(criteria.max_thunderstorm_percent)}

Based on the data from the weather tool, you will return a 'ConditionsReport'.
- Set 'meetsRequirements' to 'true' if and only if all the above safety criteria are satisfied.
- Set 'meetsRequirements' to 'false' if any of the criteria are not met, or if the tool reports an error or no forecast.
- The 'timeSlotId' in the report must match the one provided in the user message.
"""


def _thunderstorm_rule(max_percent: int) -> str:
    if max_percent == 0:
        return "The chance of a thunderstorm is 0%."
    return f"The chance of a thunderstorm is at most {max_percent}%."


def build_user_message(time_slot_id: str) -> str:
    return f"Validate the conditions for time slot {time_slot_id}"


def get_weather_forecast(pipeline: ForecastPipeline, time_slot_id: str) -> str:
    """Tool output for the reasoning component: summary or a descriptive error."""
    outcome = pipeline.run(time_slot_id)
    if not outcome.ok:
        logger.info("Weather tool for %s returned %s", time_slot_id, outcome.kind)
    return format_outcome_text(outcome)


def parse_conditions_report(
    text: str, expected_time_slot_id: str | None = None
) -> ConditionsReport:
    """Validate a JSON ConditionsReport, optionally checking the echoed slot id."""
    try:
        report = ConditionsReport.model_validate_json(text)
    except ValidationError as e:
        raise ConditionsReportError(f"Invalid conditions report: {e}") from e
    if expected_time_slot_id is not None and report.time_slot_id != expected_time_slot_id:
        raise ConditionsReportError(
            f"Report is for {report.time_slot_id!r}, expected {expected_time_slot_id!r}"
        )
    return report
