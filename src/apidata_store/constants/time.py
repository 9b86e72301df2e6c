"""Time conversion constants."""

SECONDS_PER_MINUTE = 60
MINUTES_PER_DAY = 24 * 60

__all__ = [
    "SECONDS_PER_MINUTE",
    "MINUTES_PER_DAY",
]
