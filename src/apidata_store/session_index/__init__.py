"""Session index contract and backends."""

from .protocol import SessionIndex
from .redis_index import RedisSessionIndex, decode_session_state, encode_session_state

__all__ = ["RedisSessionIndex", "SessionIndex", "decode_session_state", "encode_session_state"]
