"""Time slot parsing and forecast horizon checks."""

import logging
from datetime import datetime, timedelta

from flightwx.models.outcome import InputErrorReason

logger = logging.getLogger(__name__)

DEFAULT_MAX_FORECAST_DAYS = 9


class TimeSlotError(Exception):
    """Raised for a time slot that cannot be forecast."""

    def __init__(self, message: str, reason: InputErrorReason):
        super().__init__(message)
        self.reason = reason


def parse_time_slot(time_slot_id: str) -> datetime:
    """Parse a time slot id like "2025-12-25T10:00:00" into a naive datetime.

    Zone-qualified ids are rejected: slots are local wall-clock times.
    """
    try:
        dt = datetime.fromisoformat(time_slot_id.strip())
    except (ValueError, TypeError, AttributeError) as e:
        raise TimeSlotError(
            f"Unparseable time slot id {time_slot_id!r}: {e}",
            InputErrorReason.UNPARSEABLE,
        ) from e
    if dt.tzinfo is not None:
        raise TimeSlotError(
            f"Time slot id {time_slot_id!r} must be a local date-time without offset",
            InputErrorReason.UNPARSEABLE,
        )
    return dt


def validate_target(
    target: datetime,
    now: datetime,
    max_days: int = DEFAULT_MAX_FORECAST_DAYS,
) -> None:
    """Reject targets in the past or beyond ``now + max_days``.

    Both bounds are inclusive: ``now`` itself and ``now + max_days``
    are accepted.
    """
    if target < now:
        logger.info("Rejected historical target %s (now %s)", target, now)
        raise TimeSlotError(
            f"historical data unavailable: {target.isoformat()} is before "
            f"{now.isoformat(timespec='seconds')}",
            InputErrorReason.HISTORICAL,
        )
    limit = now + timedelta(days=max_days)
    if target > limit:
        logger.info("Rejected target %s beyond horizon %s", target, limit)
        raise TimeSlotError(
            f"beyond forecast horizon: {target.isoformat()} is more than "
            f"{max_days} days ahead",
            InputErrorReason.BEYOND_HORIZON,
        )
