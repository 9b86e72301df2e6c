from __future__ import annotations

import redis.asyncio

from apidata_store.config import RedisSettings
from apidata_store.redis_protocol import build_connection_pool, create_redis_client


def _settings(**overrides) -> RedisSettings:
    values = dict(
        host="redis.internal",
        port=6380,
        db=2,
        password=None,
        ssl=False,
        socket_timeout=5.0,
        socket_connect_timeout=3.0,
        retry_on_timeout=False,
        session_key_prefix="apidata:session",
    )
    values.update(overrides)
    return RedisSettings(**values)


def test_pool_decodes_responses():
    pool = build_connection_pool(_settings())

    assert pool.connection_kwargs["host"] == "redis.internal"
    assert pool.connection_kwargs["port"] == 6380
    assert pool.connection_kwargs["db"] == 2
    assert pool.connection_kwargs["decode_responses"] is True
    assert "password" not in pool.connection_kwargs
    assert pool.connection_class is redis.asyncio.Connection


def test_pool_with_password_and_ssl():
    pool = build_connection_pool(_settings(password="secret", ssl=True))

    assert pool.connection_kwargs["password"] == "secret"
    assert pool.connection_class is redis.asyncio.SSLConnection


def test_create_redis_client_uses_pool():
    client = create_redis_client(_settings())

    assert isinstance(client, redis.asyncio.Redis)
    assert client.connection_pool.connection_kwargs["host"] == "redis.internal"
