"""Segment storage defaults.

Rotation defaults follow the agents' home timezone (UTC+09:00) and the daily
05:00 reset of the recorded service.
"""

# Rotation clock
DEFAULT_UTC_OFFSET_MINUTES = 9 * 60
DEFAULT_ROTATION_TIME_MINUTES = 5 * 60

# Records whose request URI contains this start a new recording unit
DEFAULT_SPLIT_MARKER = "api_port/port"

# Segment layout
DEFAULT_SEGMENT_NAME_FORMAT = "{date}/{session_id}.log"
DEFAULT_SEGMENT_DATE_FORMAT = "%Y-%m-%d"
DEFAULT_LINE_TERMINATOR = "\n"
TSV_FIELD_SEPARATOR = "\t"

# Stores
DEFAULT_BLOB_CONTAINER = "apidata"
DEFAULT_SESSION_KEY_PREFIX = "apidata:session"
AZURE_APPEND_BLOCK_MAX_BYTES = 4 * 1024 * 1024

__all__ = [
    "DEFAULT_UTC_OFFSET_MINUTES",
    "DEFAULT_ROTATION_TIME_MINUTES",
    "DEFAULT_SPLIT_MARKER",
    "DEFAULT_SEGMENT_NAME_FORMAT",
    "DEFAULT_SEGMENT_DATE_FORMAT",
    "DEFAULT_LINE_TERMINATOR",
    "TSV_FIELD_SEPARATOR",
    "DEFAULT_BLOB_CONTAINER",
    "DEFAULT_SESSION_KEY_PREFIX",
    "AZURE_APPEND_BLOCK_MAX_BYTES",
]
