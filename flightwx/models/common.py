"""Common types and helpers shared across models."""

from datetime import UTC, datetime
from typing import Any, TypeAlias
from zoneinfo import ZoneInfo

RawHourlyForecast: TypeAlias = dict[str, Any]


def utc_now() -> datetime:
    return datetime.now(UTC)


def local_now(timezone: str) -> datetime:
    """Current wall-clock time in ``timezone``, without tzinfo."""
    return datetime.now(ZoneInfo(timezone)).replace(tzinfo=None)
