"""
Redis-backed session index.

Each session is one hash at ``{key_prefix}:{session_id}`` with the fields
``segment_name`` and ``segment_created`` (ISO-8601, UTC).
"""

from __future__ import annotations

import logging
from typing import Dict, Mapping, Optional

from ..constants import DEFAULT_SESSION_KEY_PREFIX
from ..data_models import SessionState
from ..errors import SessionStateDecodeError
from ..redis_protocol import REDIS_ERRORS, RedisClient, ensure_awaitable
from ..time_helpers import ensure_timezone_aware, to_utc

logger = logging.getLogger(__name__)

SEGMENT_NAME_FIELD = "segment_name"
SEGMENT_CREATED_FIELD = "segment_created"


class RedisSessionIndex:
    """Session index stored as one Redis hash per session."""

    def __init__(self, redis_client: RedisClient, *, key_prefix: str = DEFAULT_SESSION_KEY_PREFIX) -> None:
        self._client = redis_client
        self.key_prefix = key_prefix

    def key_for(self, session_id: str) -> str:
        return f"{self.key_prefix}:{session_id}"

    async def ensure_exists(self) -> None:
        # Hashes are created on first write; only reachability needs checking.
        try:
            await ensure_awaitable(self._client.ping())
        except REDIS_ERRORS:
            logger.error("Session index Redis server is unreachable", exc_info=True)
            raise

    async def get(self, session_id: str) -> Optional[SessionState]:
        key = self.key_for(session_id)
        try:
            fields = await ensure_awaitable(self._client.hgetall(key))
        except REDIS_ERRORS:
            logger.error("Failed to read session state for %s", session_id, exc_info=True)
            raise
        if not fields:
            logger.debug("No session state stored for %s", session_id)
            return None
        return decode_session_state(session_id, fields)

    async def put(self, state: SessionState) -> None:
        key = self.key_for(state.session_id)
        mapping = encode_session_state(state)
        try:
            async with self._client.pipeline(transaction=True) as pipe:
                pipe.delete(key)
                pipe.hset(key, mapping=mapping)
                await pipe.execute()
        except REDIS_ERRORS:
            logger.error("Failed to store session state for %s", state.session_id, exc_info=True)
            raise
        logger.debug("Stored session state for %s -> %s", state.session_id, state.segment_name)

    async def close(self) -> None:
        await self._client.aclose()


def encode_session_state(state: SessionState) -> Dict[str, str]:
    return {
        SEGMENT_NAME_FIELD: state.segment_name,
        SEGMENT_CREATED_FIELD: to_utc(state.segment_created).isoformat(),
    }


def decode_session_state(session_id: str, fields: Mapping[str, str]) -> SessionState:
    """Rebuild a ``SessionState`` from its Redis hash fields."""
    segment_name = fields.get(SEGMENT_NAME_FIELD)
    raw_created = fields.get(SEGMENT_CREATED_FIELD)
    if not segment_name:
        raise SessionStateDecodeError(session_id, reason=f"missing {SEGMENT_NAME_FIELD}")
    if not raw_created:
        raise SessionStateDecodeError(session_id, reason=f"missing {SEGMENT_CREATED_FIELD}")
    try:
        segment_created = ensure_timezone_aware(raw_created)
    except (TypeError, ValueError) as exc:
        raise SessionStateDecodeError(session_id, reason=f"unparseable {SEGMENT_CREATED_FIELD} {raw_created!r}") from exc
    return SessionState(session_id=session_id, segment_name=segment_name, segment_created=segment_created)


__all__ = ["RedisSessionIndex", "decode_session_state", "encode_session_state"]
