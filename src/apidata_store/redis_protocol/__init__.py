"""Redis client construction and typing helpers."""

from .connection import build_connection_pool, create_redis_client
from .error_types import REDIS_ERRORS
from .typing import RedisClient, ensure_awaitable

__all__ = [
    "REDIS_ERRORS",
    "RedisClient",
    "build_connection_pool",
    "create_redis_client",
    "ensure_awaitable",
]
