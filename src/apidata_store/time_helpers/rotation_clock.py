from __future__ import annotations

"""Timezone and cutoff arithmetic for the daily rotation boundary."""


import logging
from datetime import date, datetime, timedelta, timezone, tzinfo

import pytz
from dateutil import parser as dateutil_parser

from ..constants import SECONDS_PER_MINUTE

logger = logging.getLogger(__name__)


def get_current_utc() -> datetime:
    """Get current UTC time as timezone-aware datetime."""
    return datetime.now(timezone.utc)


def ensure_timezone_aware(value: object) -> datetime:
    """
    Ensure datetime is timezone-aware, defaulting to UTC when naive.

    Args:
        value: ISO-8601 string or datetime to normalize

    Returns:
        Timezone-aware datetime

    Raises:
        TypeError: If value is not str or datetime
        ValueError: If a string value is not ISO-8601
    """
    if isinstance(value, datetime):
        dt = value
    elif isinstance(value, str):
        dt = dateutil_parser.isoparse(value)
    else:
        raise TypeError(f"Unsupported datetime value type: {type(value)!r}")

    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt


def to_utc(dt: datetime) -> datetime:
    """Convert a datetime to UTC, assuming naive values are already UTC."""
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def rotation_timezone(utc_offset: timedelta) -> tzinfo:
    """Return the fixed-offset zone the rotation clock runs in."""
    return pytz.FixedOffset(int(utc_offset.total_seconds()) // SECONDS_PER_MINUTE)


def rotation_cutoff(now: datetime, *, utc_offset: timedelta, rotation_time: timedelta) -> datetime:
    """
    Return today's rotation boundary in UTC.

    The boundary is local midnight of ``now`` in the ``utc_offset`` zone plus
    ``rotation_time``. Between local midnight and the rotation time it lies
    after ``now``, so every segment created before it counts as stale.
    """
    local_now = to_utc(now).astimezone(rotation_timezone(utc_offset))
    boundary = local_now.replace(hour=0, minute=0, second=0, microsecond=0) + rotation_time
    cutoff = boundary.astimezone(timezone.utc)
    logger.debug("Rotation cutoff for %s is %s", now.isoformat(), cutoff.isoformat())
    return cutoff


def local_date(timestamp: datetime, *, utc_offset: timedelta) -> date:
    """Return the calendar date of ``timestamp`` in the ``utc_offset`` zone."""
    return to_utc(timestamp).astimezone(rotation_timezone(utc_offset)).date()


__all__ = [
    "ensure_timezone_aware",
    "get_current_utc",
    "local_date",
    "rotation_cutoff",
    "rotation_timezone",
    "to_utc",
]
