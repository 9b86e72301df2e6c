"""Wiring of ``ApiDataWriter`` from configured settings."""

from __future__ import annotations

import logging
from typing import Optional

from ..config import (
    ConfigurationError,
    RedisSettings,
    RotationSettings,
    SegmentStoreSettings,
    get_redis_settings,
    get_rotation_settings,
    get_segment_store_settings,
)
from ..redis_protocol import create_redis_client
from ..segments import SegmentStore
from ..session_index import RedisSessionIndex
from .api_data_writer import ApiDataWriter

logger = logging.getLogger(__name__)


def create_segment_store(settings: SegmentStoreSettings) -> SegmentStore:
    """Build the segment backend named by ``settings.backend``."""
    if settings.backend == "azure":
        from ..segments.azure_blob_store import AzureBlobSegmentStore

        if not settings.connection_string:
            raise ConfigurationError.missing_value("AZURE_STORAGE_CONNECTION_STRING")
        return AzureBlobSegmentStore.from_connection_string(settings.connection_string, settings.container_name)

    if settings.backend == "local":
        from ..segments.local_store import LocalSegmentStore

        if settings.local_root is None:
            raise ConfigurationError.missing_value("APIDATA_LOCAL_SEGMENT_ROOT")
        return LocalSegmentStore(settings.local_root / settings.container_name)

    raise ConfigurationError.invalid_value("APIDATA_SEGMENT_BACKEND", settings.backend)


def create_api_data_writer(
    *,
    rotation_settings: Optional[RotationSettings] = None,
    redis_settings: Optional[RedisSettings] = None,
    segment_store_settings: Optional[SegmentStoreSettings] = None,
) -> ApiDataWriter:
    """Create a writer backed by Redis and the configured segment store."""
    rotation = rotation_settings or get_rotation_settings()
    redis_config = redis_settings or get_redis_settings()
    store_config = segment_store_settings or get_segment_store_settings()

    session_index = RedisSessionIndex(create_redis_client(redis_config), key_prefix=redis_config.session_key_prefix)
    segment_store = create_segment_store(store_config)
    logger.info(
        "API data writer using %s segments in %s, index at %s:%s",
        store_config.backend,
        store_config.container_name,
        redis_config.host,
        redis_config.port,
    )
    return ApiDataWriter(session_index, segment_store, rotation)


__all__ = ["create_api_data_writer", "create_segment_store"]
