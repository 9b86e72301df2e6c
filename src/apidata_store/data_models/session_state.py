"""Routing state kept per session in the session index."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class SessionState:
    """
    Current segment of a session.

    Instances are replaced whole on rotation; ``segment_created`` is the
    rotation clock and must be timezone-aware.
    """

    session_id: str
    segment_name: str
    segment_created: datetime

    def __post_init__(self) -> None:
        if not self.segment_name:
            raise ValueError("segment_name must be a non-empty string")
        if self.segment_created.tzinfo is None:
            raise ValueError("segment_created must be timezone-aware")

    def is_stale(self, cutoff: datetime) -> bool:
        """Return True when the segment was created before ``cutoff``."""
        return self.segment_created < cutoff


__all__ = ["SessionState"]
