from __future__ import annotations

import pytest

from apidata_store.errors import ApiDataValidationError
from apidata_store.segments import append_to_segment
from apidata_store.segments.local_store import LocalSegmentStore


@pytest.fixture
def store(tmp_path) -> LocalSegmentStore:
    return LocalSegmentStore(tmp_path / "segments")


@pytest.mark.asyncio
async def test_ensure_container_creates_root(store):
    await store.ensure_container_exists()

    assert store.root.is_dir()


@pytest.mark.asyncio
async def test_create_and_append_nested_segment(store):
    await store.ensure_container_exists()

    assert await store.exists("2024-03-10/sess1.log") is False
    await store.create("2024-03-10/sess1.log")
    await store.append_text("2024-03-10/sess1.log", "one\n")
    await store.append_text("2024-03-10/sess1.log", "two\r\n")

    assert await store.exists("2024-03-10/sess1.log") is True
    assert (store.root / "2024-03-10" / "sess1.log").read_bytes() == b"one\ntwo\r\n"


@pytest.mark.asyncio
async def test_create_replaces_existing_content(store):
    await store.create("a.log")
    await store.append_text("a.log", "old\n")

    await store.create("a.log")

    assert (store.root / "a.log").read_text() == ""


@pytest.mark.asyncio
async def test_append_to_segment_keeps_existing_file(store):
    await store.create("a.log")
    await store.append_text("a.log", "old\n")

    await append_to_segment(store, "a.log", "new\n")

    assert (store.root / "a.log").read_text() == "old\nnew\n"


@pytest.mark.parametrize("segment_name", ["../escape.log", "/etc/passwd", "a/../../b.log", "."])
def test_rejects_names_outside_root(store, segment_name):
    with pytest.raises(ApiDataValidationError):
        store.path_for(segment_name)


@pytest.mark.asyncio
async def test_close_is_noop(store):
    await store.close()
