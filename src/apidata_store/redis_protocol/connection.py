"""
Redis connection setup for the session index.
"""

import logging
from typing import Any, Dict

import redis.asyncio

from ..config import RedisSettings

logger = logging.getLogger(__name__)

SESSION_INDEX_MAX_CONNECTIONS = 32


def build_connection_pool(settings: RedisSettings) -> redis.asyncio.ConnectionPool:
    """Create a decoded-response connection pool from ``settings``."""
    pool_kwargs: Dict[str, Any] = {
        "host": settings.host,
        "port": settings.port,
        "db": settings.db,
        "max_connections": SESSION_INDEX_MAX_CONNECTIONS,
        "socket_timeout": settings.socket_timeout,
        "socket_connect_timeout": settings.socket_connect_timeout,
        "retry_on_timeout": settings.retry_on_timeout,
        # Session index code reads hash fields as ``str``.
        "decode_responses": True,
    }
    if settings.password:
        pool_kwargs["password"] = settings.password
    if settings.ssl:
        pool_kwargs["connection_class"] = redis.asyncio.SSLConnection

    logger.debug("Creating Redis pool for %s:%s db=%s", settings.host, settings.port, settings.db)
    return redis.asyncio.ConnectionPool(**pool_kwargs)


def create_redis_client(settings: RedisSettings) -> redis.asyncio.Redis:
    """Return a Redis client backed by a fresh pool for ``settings``."""
    return redis.asyncio.Redis(connection_pool=build_connection_pool(settings))


__all__ = ["SESSION_INDEX_MAX_CONNECTIONS", "build_connection_pool", "create_redis_client"]
