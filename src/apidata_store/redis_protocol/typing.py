from __future__ import annotations

"""
Typing helpers for redis.asyncio usage.

redis-py exposes unified sync/async command signatures that confuse static type
checkers. These helpers provide narrow aliases that reflect the async behavior
we rely on.
"""


from typing import TYPE_CHECKING, Awaitable, TypeVar, cast

from redis import asyncio as redis_asyncio

if TYPE_CHECKING:
    from redis.asyncio import Redis as RedisClient
else:  # pragma: no cover - runtime alias for typing-only import
    RedisClient = redis_asyncio.Redis

T = TypeVar("T")


def ensure_awaitable(result: "Awaitable[T] | T") -> Awaitable[T]:
    """Coerce redis command results into awaitables for typing purposes."""

    return cast(Awaitable[T], result)


__all__ = ["RedisClient", "ensure_awaitable"]
