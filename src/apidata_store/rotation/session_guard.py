"""In-process mutual exclusion per session id."""

from __future__ import annotations

import asyncio
from contextlib import asynccontextmanager
from dataclasses import dataclass, field
from typing import AsyncIterator, Dict


@dataclass
class _LockEntry:
    lock: asyncio.Lock = field(default_factory=asyncio.Lock)
    holders: int = 0


class SessionLockRegistry:
    """
    Serializes the read-decide-write sequence of writes to the same session.

    Only guards callers sharing this registry (one process, one event loop);
    writers in other processes still race on the index.
    """

    def __init__(self) -> None:
        self._entries: Dict[str, _LockEntry] = {}

    @asynccontextmanager
    async def hold(self, session_id: str) -> AsyncIterator[None]:
        entry = self._entries.get(session_id)
        if entry is None:
            entry = _LockEntry()
            self._entries[session_id] = entry
        entry.holders += 1
        try:
            async with entry.lock:
                yield
        finally:
            entry.holders -= 1
            if entry.holders == 0:
                del self._entries[session_id]

    def active_sessions(self) -> int:
        return len(self._entries)


__all__ = ["SessionLockRegistry"]
