"""Segment store contract and the shared append procedure."""

from __future__ import annotations

import logging
from typing import Protocol

logger = logging.getLogger(__name__)


class SegmentStore(Protocol):
    """Append-only object store holding log segments by name."""

    async def ensure_container_exists(self) -> None:
        """Create the segment container if it is absent."""
        ...

    async def exists(self, segment_name: str) -> bool:
        """Return True when the named segment exists."""
        ...

    async def create(self, segment_name: str) -> None:
        """Create (or replace) the named segment with empty content."""
        ...

    async def append_text(self, segment_name: str, text: str) -> None:
        """Append ``text`` verbatim to the named segment."""
        ...

    async def close(self) -> None:
        """Release client resources."""
        ...


async def append_to_segment(store: SegmentStore, segment_name: str, text: str) -> None:
    """
    Append ``text`` to ``segment_name``, creating the segment first if absent.

    An existing segment is never re-created. Empty text creates the segment
    without appending.
    """
    if not await store.exists(segment_name):
        logger.debug("Creating segment %s", segment_name)
        await store.create(segment_name)
    if text:
        await store.append_text(segment_name, text)


__all__ = ["SegmentStore", "append_to_segment"]
