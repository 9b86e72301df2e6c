"""Filesystem segment backend for development and tests against real files."""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path

from ..errors import ApiDataValidationError

logger = logging.getLogger(__name__)


class LocalSegmentStore:
    """Stores each segment as a UTF-8 file below ``root``."""

    def __init__(self, root: Path, *, encoding: str = "utf-8") -> None:
        self.root = Path(root)
        self._encoding = encoding

    def path_for(self, segment_name: str) -> Path:
        """Map a segment name to its file, rejecting names outside the root."""
        root = self.root.resolve()
        candidate = (root / segment_name).resolve()
        if candidate == root or root not in candidate.parents:
            raise ApiDataValidationError.unsafe_segment_name(segment_name)
        return candidate

    async def ensure_container_exists(self) -> None:
        await asyncio.to_thread(self.root.mkdir, parents=True, exist_ok=True)

    async def exists(self, segment_name: str) -> bool:
        return await asyncio.to_thread(self.path_for(segment_name).is_file)

    async def create(self, segment_name: str) -> None:
        await asyncio.to_thread(self._create_sync, self.path_for(segment_name))
        logger.info("Created segment file %s", segment_name)

    async def append_text(self, segment_name: str, text: str) -> None:
        await asyncio.to_thread(self._append_sync, self.path_for(segment_name), text)

    async def close(self) -> None:
        return None

    def _create_sync(self, path: Path) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(b"")

    def _append_sync(self, path: Path, text: str) -> None:
        with path.open("a", encoding=self._encoding, newline="") as handle:
            handle.write(text)


__all__ = ["LocalSegmentStore"]
