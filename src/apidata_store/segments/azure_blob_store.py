"""
Azure append-blob backend for log segments.

Each segment is one append blob inside a single container. Appends larger
than the service's block limit are sent as consecutive blocks.
"""

from __future__ import annotations

import logging
from typing import Iterator, Optional

from azure.core.exceptions import ResourceExistsError
from azure.storage.blob.aio import ContainerClient

from ..constants import AZURE_APPEND_BLOCK_MAX_BYTES

logger = logging.getLogger(__name__)


class AzureBlobSegmentStore:
    """Segment store backed by an Azure Blob Storage container."""

    def __init__(
        self,
        container_client: ContainerClient,
        *,
        encoding: str = "utf-8",
        max_block_bytes: int = AZURE_APPEND_BLOCK_MAX_BYTES,
    ) -> None:
        if max_block_bytes <= 0:
            raise ValueError("max_block_bytes must be positive")
        self._container = container_client
        self._encoding = encoding
        self._max_block_bytes = max_block_bytes

    @classmethod
    def from_connection_string(cls, connection_string: str, container_name: str) -> "AzureBlobSegmentStore":
        container = ContainerClient.from_connection_string(
            connection_string,
            container_name,
            logging_enable=False,
        )
        return cls(container)

    @property
    def container_name(self) -> Optional[str]:
        return getattr(self._container, "container_name", None)

    async def ensure_container_exists(self) -> None:
        try:
            await self._container.create_container()
        except ResourceExistsError:
            logger.debug("Segment container %s already exists", self.container_name)
        else:
            logger.info("Created segment container %s", self.container_name)

    async def exists(self, segment_name: str) -> bool:
        blob = self._container.get_blob_client(segment_name)
        return bool(await blob.exists())

    async def create(self, segment_name: str) -> None:
        blob = self._container.get_blob_client(segment_name)
        await blob.create_append_blob()
        logger.info("Created append blob %s", segment_name)

    async def append_text(self, segment_name: str, text: str) -> None:
        blob = self._container.get_blob_client(segment_name)
        payload = text.encode(self._encoding)
        for block in _iter_blocks(payload, self._max_block_bytes):
            await blob.append_block(block, length=len(block))
        logger.debug("Appended %d bytes to %s", len(payload), segment_name)

    async def close(self) -> None:
        await self._container.close()


def _iter_blocks(payload: bytes, max_block_bytes: int) -> Iterator[bytes]:
    for offset in range(0, len(payload), max_block_bytes):
        yield payload[offset : offset + max_block_bytes]


__all__ = ["AzureBlobSegmentStore"]
