"""Session index contract."""

from __future__ import annotations

from typing import Optional, Protocol

from ..data_models import SessionState


class SessionIndex(Protocol):
    """
    Key-value store holding one current ``SessionState`` per session id.

    Implementations must be strongly consistent per key; ``put`` replaces the
    whole entry (last write wins).
    """

    async def ensure_exists(self) -> None:
        """Provision the backing store if necessary."""
        ...

    async def get(self, session_id: str) -> Optional[SessionState]:
        """Return the current state for ``session_id`` or ``None``."""
        ...

    async def put(self, state: SessionState) -> None:
        """Replace the state stored for ``state.session_id``."""
        ...

    async def close(self) -> None:
        """Release client resources."""
        ...


__all__ = ["SessionIndex"]
