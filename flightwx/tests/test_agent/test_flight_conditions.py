"""Tests for the reasoning component contract."""

from unittest.mock import MagicMock

import pytest

from flightwx.agent.flight_conditions import (
    ConditionsReportError,
    build_system_message,
    build_user_message,
    get_weather_forecast,
    parse_conditions_report,
)
from flightwx.config.schema import SafetyCriteria
from flightwx.models.forecast import WeatherSummary
from flightwx.models.outcome import ForecastOutcome, OutcomeKind
from flightwx.pipeline.forecast_pipeline import ForecastPipeline


class TestMessages:
    def test_system_message_thresholds(self):
        text = build_system_message(SafetyCriteria())
        assert "getWeatherForecast" in text
        assert "less than 20 km/h" in text
        assert "less than 30%" in text
        assert "thunderstorm is 0%" in text

    def test_system_message_custom_thresholds(self):
        text = build_system_message(
            SafetyCriteria(max_wind_kmh=15, max_rain_percent=10, max_thunderstorm_percent=5)
        )
        assert "less than 15 km/h" in text
        assert "at most 5%" in text

    def test_user_message(self):
        assert build_user_message("2025-12-25T10:00:00") == (
            "Validate the conditions for time slot 2025-12-25T10:00:00"
        )


class TestWeatherTool:
    def test_summary_string(self):
        pipeline = MagicMock(spec=ForecastPipeline)
        pipeline.run.return_value = ForecastOutcome(
            OutcomeKind.SUMMARY, "s", summary=WeatherSummary("Clear", 5, 10, 0, 12)
        )
        assert get_weather_forecast(pipeline, "s") == (
            "Clear, Temp: 5°C, Rain: 10%, Thunderstorm: 0%, Wind: 12 km/h"
        )

    def test_error_is_descriptive(self):
        pipeline = MagicMock(spec=ForecastPipeline)
        pipeline.run.return_value = ForecastOutcome(
            OutcomeKind.FETCH_ERROR, "s", detail="HTTP 500: boom", status_code=500
        )
        text = get_weather_forecast(pipeline, "s")
        assert text.startswith("Error")
        assert "500" in text


class TestParseConditionsReport:
    def test_valid(self):
        report = parse_conditions_report(
            '{"timeSlotId": "2025-12-25T10:00:00", "meetsRequirements": true}',
            "2025-12-25T10:00:00",
        )
        assert report.time_slot_id == "2025-12-25T10:00:00"
        assert report.meets_requirements is True

    def test_mismatched_slot(self):
        with pytest.raises(ConditionsReportError, match="expected"):
            parse_conditions_report(
                '{"timeSlotId": "2025-12-25T11:00:00", "meetsRequirements": false}',
                "2025-12-25T10:00:00",
            )

    def test_missing_field(self):
        with pytest.raises(ConditionsReportError):
            parse_conditions_report('{"timeSlotId": "x"}')

    def test_not_json(self):
        with pytest.raises(ConditionsReportError):
            parse_conditions_report("sure, looks fine to fly")
