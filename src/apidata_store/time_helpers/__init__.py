"""Clock helpers for daily segment rotation."""

from .rotation_clock import (
    ensure_timezone_aware,
    get_current_utc,
    local_date,
    rotation_cutoff,
    rotation_timezone,
    to_utc,
)

__all__ = [
    "ensure_timezone_aware",
    "get_current_utc",
    "local_date",
    "rotation_cutoff",
    "rotation_timezone",
    "to_utc",
]
