"""Shared configuration helpers and dataclasses."""

from .errors import ConfigurationError
from .runtime import (
    env_bool,
    env_float,
    env_int,
    env_str,
    reset_default_values,
)
from .settings import (
    RedisSettings,
    RotationSettings,
    SegmentStoreSettings,
    clear_settings_cache,
    get_redis_settings,
    get_rotation_settings,
    get_segment_store_settings,
)

__all__ = [
    "ConfigurationError",
    "RedisSettings",
    "RotationSettings",
    "SegmentStoreSettings",
    "clear_settings_cache",
    "env_bool",
    "env_float",
    "env_int",
    "env_str",
    "get_redis_settings",
    "get_rotation_settings",
    "get_segment_store_settings",
    "reset_default_values",
]
