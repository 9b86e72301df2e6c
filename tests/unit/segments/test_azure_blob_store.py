from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock, call, patch

import pytest
from azure.core.exceptions import HttpResponseError, ResourceExistsError

from apidata_store.segments.azure_blob_store import AzureBlobSegmentStore


@pytest.fixture
def blob_client():
    blob = MagicMock()
    blob.exists = AsyncMock(return_value=False)
    blob.create_append_blob = AsyncMock()
    blob.append_block = AsyncMock()
    return blob


@pytest.fixture
def container_client(blob_client):
    container = MagicMock()
    container.container_name = "apidata"
    container.create_container = AsyncMock()
    container.close = AsyncMock()
    container.get_blob_client.return_value = blob_client
    return container


@pytest.fixture
def store(container_client) -> AzureBlobSegmentStore:
    return AzureBlobSegmentStore(container_client)


class TestContainerProvisioning:
    @pytest.mark.asyncio
    async def test_creates_container(self, store, container_client):
        await store.ensure_container_exists()

        container_client.create_container.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_existing_container_is_not_an_error(self, store, container_client):
        container_client.create_container.side_effect = ResourceExistsError("exists")

        await store.ensure_container_exists()

    @pytest.mark.asyncio
    async def test_other_service_errors_propagate(self, store, container_client):
        container_client.create_container.side_effect = HttpResponseError("forbidden")

        with pytest.raises(HttpResponseError):
            await store.ensure_container_exists()


class TestSegmentOperations:
    @pytest.mark.asyncio
    async def test_exists_asks_blob(self, store, container_client, blob_client):
        blob_client.exists.return_value = True

        assert await store.exists("2024-03-10/sess1.log") is True
        container_client.get_blob_client.assert_called_with("2024-03-10/sess1.log")

    @pytest.mark.asyncio
    async def test_create_makes_append_blob(self, store, blob_client):
        await store.create("2024-03-10/sess1.log")

        blob_client.create_append_blob.assert_awaited_once_with()

    @pytest.mark.asyncio
    async def test_append_text_encodes_utf8(self, store, blob_client):
        await store.append_text("a.log", "é\n")

        blob_client.append_block.assert_awaited_once_with("é\n".encode("utf-8"), length=3)

    @pytest.mark.asyncio
    async def test_large_append_is_chunked_in_order(self, container_client, blob_client):
        store = AzureBlobSegmentStore(container_client, max_block_bytes=4)

        await store.append_text("a.log", "abcdefghij")

        assert blob_client.append_block.await_args_list == [
            call(b"abcd", length=4),
            call(b"efgh", length=4),
            call(b"ij", length=2),
        ]

    @pytest.mark.asyncio
    async def test_close_closes_container(self, store, container_client):
        await store.close()

        container_client.close.assert_awaited_once()


def test_rejects_non_positive_block_size(container_client):
    with pytest.raises(ValueError):
        AzureBlobSegmentStore(container_client, max_block_bytes=0)


def test_from_connection_string_builds_container_client():
    with patch("apidata_store.segments.azure_blob_store.ContainerClient") as client_cls:
        store = AzureBlobSegmentStore.from_connection_string("UseDevelopmentStorage=true", "apidata")

    client_cls.from_connection_string.assert_called_once_with(
        "UseDevelopmentStorage=true",
        "apidata",
        logging_enable=False,
    )
    assert isinstance(store, AzureBlobSegmentStore)
