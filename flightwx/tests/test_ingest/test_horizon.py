"""Tests for time slot parsing and horizon boundaries."""

from datetime import datetime, timedelta

import pytest

from flightwx.ingest.horizon import TimeSlotError, parse_time_slot, validate_target
from flightwx.models.outcome import InputErrorReason

NOW = datetime(2025, 12, 24, 12, 0, 0)


class TestParseTimeSlot:
    def test_iso_local(self):
        assert parse_time_slot("2025-12-25T10:00:00") == datetime(2025, 12, 25, 10, 0)

    def test_without_seconds(self):
        assert parse_time_slot("2025-12-25T10:00") == datetime(2025, 12, 25, 10, 0)

    def test_garbage(self):
        with pytest.raises(TimeSlotError) as exc_info:
            parse_time_slot("next tuesday")
        assert exc_info.value.reason == InputErrorReason.UNPARSEABLE

    def test_offset_rejected(self):
        with pytest.raises(TimeSlotError) as exc_info:
            parse_time_slot("2025-12-25T10:00:00+02:00")
        assert exc_info.value.reason == InputErrorReason.UNPARSEABLE


class TestValidateTarget:
    def test_within_window(self):
        validate_target(NOW + timedelta(days=2), NOW)

    def test_now_is_accepted(self):
        validate_target(NOW, NOW)

    def test_upper_boundary_inclusive(self):
        validate_target(NOW + timedelta(days=9), NOW)

    def test_historical(self):
        with pytest.raises(TimeSlotError, match="historical") as exc_info:
            validate_target(NOW - timedelta(seconds=1), NOW)
        assert exc_info.value.reason == InputErrorReason.HISTORICAL

    def test_beyond_horizon(self):
        with pytest.raises(TimeSlotError, match="beyond") as exc_info:
            validate_target(NOW + timedelta(days=9, seconds=1), NOW)
        assert exc_info.value.reason == InputErrorReason.BEYOND_HORIZON

    def test_custom_horizon(self):
        with pytest.raises(TimeSlotError):
            validate_target(NOW + timedelta(days=4), NOW, max_days=3)
