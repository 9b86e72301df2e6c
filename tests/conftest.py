"""Root pytest configuration and shared fixtures."""

from __future__ import annotations

from typing import Any

import pytest

from apidata_store.config import RotationSettings, clear_settings_cache, reset_default_values
from apidata_store.session_index import RedisSessionIndex
from tests.helpers.segment_fakes import FakeSegmentStore


class FakeRedis:
    """In-memory Redis mock for testing."""

    def __init__(self):
        self._hashes: dict[str, dict[str, str]] = {}
        self.pings = 0
        self.closed = False

    async def hset(self, key: str, mapping: dict[str, str] | None = None, **kwargs: Any) -> int:
        """Set hash fields."""
        if key not in self._hashes:
            self._hashes[key] = {}
        update_map = mapping if mapping is not None else kwargs
        added = sum(1 for k in update_map if k not in self._hashes[key])
        self._hashes[key].update(update_map)
        return added

    async def hgetall(self, key: str) -> dict[str, str]:
        """Get all fields in a hash."""
        return self._hashes.get(key, {}).copy()

    async def delete(self, *keys: str) -> int:
        """Delete keys."""
        deleted = 0
        for k in keys:
            if k in self._hashes:
                del self._hashes[k]
                deleted += 1
        return deleted

    async def exists(self, *keys: str) -> int:
        """Check if keys exist."""
        return sum(1 for k in keys if k in self._hashes)

    async def ping(self) -> str:
        """Ping the Redis server."""
        self.pings += 1
        return "PONG"

    async def aclose(self) -> None:
        self.closed = True

    def pipeline(self, transaction: bool = True):
        """Create a pipeline context."""
        return FakeRedisPipeline(self, transaction=transaction)

    def dump_hash(self, key: str) -> dict[str, str]:
        """Dump contents of a hash (test helper)."""
        return self._hashes.get(key, {}).copy()

    def seed_hash(self, key: str, fields: dict[str, str]) -> None:
        """Store a hash directly (test helper)."""
        self._hashes[key] = dict(fields)


class FakeRedisPipeline:
    """Redis pipeline mock."""

    def __init__(self, fake_redis: FakeRedis, transaction: bool = True):
        self.fake_redis = fake_redis
        self.transaction = transaction
        self.commands: list[tuple[str, Any]] = []

    def hset(self, key: str, mapping: dict[str, str] | None = None, **kwargs: str) -> "FakeRedisPipeline":
        """Pipeline hset."""
        self.commands.append(("hset", (key, mapping if mapping is not None else kwargs)))
        return self

    def delete(self, *keys: str) -> "FakeRedisPipeline":
        """Pipeline delete."""
        self.commands.append(("delete", keys))
        return self

    async def execute(self) -> list[Any]:
        """Execute all commands."""
        results = []
        for cmd, args in self.commands:
            if cmd == "hset":
                results.append(await self.fake_redis.hset(args[0], mapping=args[1]))
            elif cmd == "delete":
                results.append(await self.fake_redis.delete(*args))
        self.commands.clear()
        return results

    async def __aenter__(self) -> "FakeRedisPipeline":
        return self

    async def __aexit__(self, *args):
        self.commands.clear()


@pytest.fixture(autouse=True)
def _isolated_configuration(monkeypatch, tmp_path):
    """Keep cached settings and file defaults from leaking between tests."""
    monkeypatch.chdir(tmp_path)
    clear_settings_cache()
    reset_default_values()
    yield
    clear_settings_cache()
    reset_default_values()


@pytest.fixture
def fake_redis() -> FakeRedis:
    """Provide a fake Redis instance."""
    return FakeRedis()


@pytest.fixture
def fake_segment_store() -> FakeSegmentStore:
    return FakeSegmentStore()


@pytest.fixture
def session_index(fake_redis) -> RedisSessionIndex:
    return RedisSessionIndex(fake_redis, key_prefix="apidata:session")


@pytest.fixture
def rotation_settings() -> RotationSettings:
    return RotationSettings()
