from __future__ import annotations

"""Settings dataclasses for the rotation engine and its stores."""


from dataclasses import dataclass
from datetime import timedelta
from functools import lru_cache
from pathlib import Path
from typing import Optional

from ..constants import (
    DEFAULT_BLOB_CONTAINER,
    DEFAULT_LINE_TERMINATOR,
    DEFAULT_ROTATION_TIME_MINUTES,
    DEFAULT_SEGMENT_DATE_FORMAT,
    DEFAULT_SEGMENT_NAME_FORMAT,
    DEFAULT_SESSION_KEY_PREFIX,
    DEFAULT_SPLIT_MARKER,
    DEFAULT_UTC_OFFSET_MINUTES,
    MINUTES_PER_DAY,
)
from .errors import ConfigurationError
from .runtime import env_bool, env_float, env_int, env_str

SEGMENT_BACKENDS = ("azure", "local")


@dataclass(frozen=True)
class RotationSettings:
    """Clock, marker and naming parameters of the rotation engine."""

    utc_offset: timedelta = timedelta(minutes=DEFAULT_UTC_OFFSET_MINUTES)
    rotation_time: timedelta = timedelta(minutes=DEFAULT_ROTATION_TIME_MINUTES)
    split_marker: str = DEFAULT_SPLIT_MARKER
    segment_name_format: str = DEFAULT_SEGMENT_NAME_FORMAT
    segment_date_format: str = DEFAULT_SEGMENT_DATE_FORMAT
    line_terminator: str = DEFAULT_LINE_TERMINATOR
    serialize_per_session: bool = False

    def __post_init__(self) -> None:
        if abs(self.utc_offset) >= timedelta(days=1):
            raise ConfigurationError.invalid_value("utc_offset", self.utc_offset, "Offset must be within +/- 24 hours")
        if self.utc_offset % timedelta(minutes=1):
            raise ConfigurationError.invalid_value("utc_offset", self.utc_offset, "Offset must be a whole number of minutes")
        if not timedelta(0) <= self.rotation_time < timedelta(days=1):
            raise ConfigurationError.invalid_value("rotation_time", self.rotation_time, "Rotation time must fall within one day")
        if not self.split_marker:
            raise ConfigurationError.missing_value("split_marker")
        if "{session_id}" not in self.segment_name_format or "{date}" not in self.segment_name_format:
            raise ConfigurationError.invalid_format(
                "segment_name_format", self.segment_name_format, "a template containing {date} and {session_id}"
            )
        if not self.line_terminator:
            raise ConfigurationError.missing_value("line_terminator")


@dataclass(frozen=True)
class RedisSettings:
    host: str
    port: int
    db: int
    password: str | None
    ssl: bool
    socket_timeout: float | None
    socket_connect_timeout: float | None
    retry_on_timeout: bool
    session_key_prefix: str


@dataclass(frozen=True)
class SegmentStoreSettings:
    backend: str
    container_name: str
    connection_string: Optional[str]
    local_root: Optional[Path]

    def __post_init__(self) -> None:
        if self.backend not in SEGMENT_BACKENDS:
            raise ConfigurationError.invalid_value("APIDATA_SEGMENT_BACKEND", self.backend, f"Expected one of {SEGMENT_BACKENDS}")
        if self.backend == "azure" and not self.connection_string:
            raise ConfigurationError.missing_value("AZURE_STORAGE_CONNECTION_STRING", "required for the azure segment backend")
        if self.backend == "local" and self.local_root is None:
            raise ConfigurationError.missing_value("APIDATA_LOCAL_SEGMENT_ROOT", "required for the local segment backend")


def _minutes_setting(name: str, default: int) -> timedelta:
    value = env_int(name, or_value=default)
    assert value is not None
    if abs(value) >= MINUTES_PER_DAY:
        raise ConfigurationError.invalid_value(name, value, "Must be less than one day in minutes")
    return timedelta(minutes=value)


@lru_cache(maxsize=1)
def get_rotation_settings() -> RotationSettings:
    split_marker = env_str("APIDATA_SPLIT_MARKER", or_value=DEFAULT_SPLIT_MARKER)
    name_format = env_str("APIDATA_SEGMENT_NAME_FORMAT", or_value=DEFAULT_SEGMENT_NAME_FORMAT)
    date_format = env_str("APIDATA_SEGMENT_DATE_FORMAT", or_value=DEFAULT_SEGMENT_DATE_FORMAT)
    serialize_flag = env_bool("APIDATA_SERIALIZE_PER_SESSION", or_value=False)

    return RotationSettings(
        utc_offset=_minutes_setting("APIDATA_UTC_OFFSET_MINUTES", DEFAULT_UTC_OFFSET_MINUTES),
        rotation_time=_minutes_setting("APIDATA_ROTATION_TIME_MINUTES", DEFAULT_ROTATION_TIME_MINUTES),
        split_marker=str(split_marker),
        segment_name_format=str(name_format),
        segment_date_format=str(date_format),
        serialize_per_session=bool(serialize_flag),
    )


@lru_cache(maxsize=1)
def get_redis_settings() -> RedisSettings:
    host = env_str("REDIS_HOST", or_value="localhost")
    port_value = env_int("REDIS_PORT", or_value=6379)
    db_value = env_int("REDIS_DB", or_value=0)
    password = env_str("REDIS_PASSWORD", or_value=None, allow_blank=True)
    ssl_flag = env_bool("REDIS_SSL", or_value=False)
    socket_timeout = env_float("REDIS_SOCKET_TIMEOUT", or_value=5.0)
    socket_connect_timeout = env_float("REDIS_SOCKET_CONNECT_TIMEOUT", or_value=5.0)
    retry_on_timeout_flag = env_bool("REDIS_RETRY_ON_TIMEOUT", or_value=False)
    key_prefix = env_str("APIDATA_SESSION_KEY_PREFIX", or_value=DEFAULT_SESSION_KEY_PREFIX)

    if db_value is None or db_value < 0:
        raise ConfigurationError.invalid_value("REDIS_DB", db_value, "Database index must be non-negative")

    return RedisSettings(
        host=str(host),
        port=int(port_value or 6379),
        db=db_value,
        password=password or None,
        ssl=bool(ssl_flag),
        socket_timeout=socket_timeout,
        socket_connect_timeout=socket_connect_timeout,
        retry_on_timeout=bool(retry_on_timeout_flag),
        session_key_prefix=str(key_prefix),
    )


@lru_cache(maxsize=1)
def get_segment_store_settings() -> SegmentStoreSettings:
    backend = env_str("APIDATA_SEGMENT_BACKEND", or_value="azure")
    container_name = env_str("APIDATA_BLOB_CONTAINER", or_value=DEFAULT_BLOB_CONTAINER)
    connection_string = env_str("AZURE_STORAGE_CONNECTION_STRING")
    local_root = env_str("APIDATA_LOCAL_SEGMENT_ROOT")

    return SegmentStoreSettings(
        backend=str(backend).lower(),
        container_name=str(container_name),
        connection_string=connection_string,
        local_root=Path(local_root).expanduser() if local_root else None,
    )


def clear_settings_cache() -> None:
    """Drop cached settings so the next getter call re-reads the environment."""
    get_rotation_settings.cache_clear()
    get_redis_settings.cache_clear()
    get_segment_store_settings.cache_clear()


__all__ = [
    "RedisSettings",
    "RotationSettings",
    "SegmentStoreSettings",
    "clear_settings_cache",
    "get_redis_settings",
    "get_rotation_settings",
    "get_segment_store_settings",
]
