"""Constants package for shared constant values."""

from .storage import (
    AZURE_APPEND_BLOCK_MAX_BYTES,
    DEFAULT_BLOB_CONTAINER,
    DEFAULT_LINE_TERMINATOR,
    DEFAULT_ROTATION_TIME_MINUTES,
    DEFAULT_SEGMENT_DATE_FORMAT,
    DEFAULT_SEGMENT_NAME_FORMAT,
    DEFAULT_SESSION_KEY_PREFIX,
    DEFAULT_SPLIT_MARKER,
    DEFAULT_UTC_OFFSET_MINUTES,
    TSV_FIELD_SEPARATOR,
)
from .time import MINUTES_PER_DAY, SECONDS_PER_MINUTE

__all__ = [
    "AZURE_APPEND_BLOCK_MAX_BYTES",
    "DEFAULT_BLOB_CONTAINER",
    "DEFAULT_LINE_TERMINATOR",
    "DEFAULT_ROTATION_TIME_MINUTES",
    "DEFAULT_SEGMENT_DATE_FORMAT",
    "DEFAULT_SEGMENT_NAME_FORMAT",
    "DEFAULT_SESSION_KEY_PREFIX",
    "DEFAULT_SPLIT_MARKER",
    "DEFAULT_UTC_OFFSET_MINUTES",
    "MINUTES_PER_DAY",
    "SECONDS_PER_MINUTE",
    "TSV_FIELD_SEPARATOR",
]
