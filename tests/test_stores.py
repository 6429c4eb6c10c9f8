import json
import time

import pytest

from larasession.session import ArraySessionStore, FileSessionStore, Session, SessionOptions


# =============================================================================
# ArraySessionStore
# =============================================================================

@pytest.mark.asyncio
async def test_array_store_reads_copies():
    store = ArraySessionStore()
    await store.write("abc", {"a": 1}, 60)

    data = await store.read("abc")
    data["b"] = 2

    assert await store.read("abc") == {"a": 1}


@pytest.mark.asyncio
async def test_array_store_expired_record_reads_empty():
    store = ArraySessionStore()
    await store.write("abc", {"a": 1}, -1)

    assert await store.read("abc") == {}
    assert await store.exists("abc") is False


@pytest.mark.asyncio
async def test_array_store_exists_ignores_expired_record():
    store = ArraySessionStore()
    await store.write("abc", {"a": 1}, -1)

    assert await store.exists("abc") is False
    assert len(store) == 1


@pytest.mark.asyncio
async def test_array_store_gc_removes_expired_records():
    store = ArraySessionStore()
    await store.write("old", {}, -1)
    await store.write("fresh", {}, 60)

    assert await store.gc(60) == 1
    assert await store.exists("fresh") is True
    assert len(store) == 1


@pytest.mark.asyncio
async def test_array_store_clear_all():
    store = ArraySessionStore()
    await store.write("abc", {}, 60)

    store.clear_all()

    assert len(store) == 0


def test_generate_id_is_url_safe():
    session_id = ArraySessionStore().generate_id()

    assert len(session_id) >= 40
    assert all(c.isalnum() or c in "-_" for c in session_id)


# =============================================================================
# FileSessionStore
# =============================================================================

@pytest.fixture
def file_store(tmp_path):
    return FileSessionStore(tmp_path / "sessions")


def test_file_store_creates_directory(tmp_path):
    FileSessionStore(tmp_path / "nested" / "sessions")

    assert (tmp_path / "nested" / "sessions").is_dir()


@pytest.mark.asyncio
async def test_file_store_round_trip_keeps_integer_keys(file_store):
    assert await file_store.write("abc", {"name": "Bob", 7: "seven"}, 60) is True

    assert await file_store.read("abc") == {"name": "Bob", 7: "seven"}
    assert await file_store.exists("abc") is True


@pytest.mark.asyncio
async def test_file_store_keeps_string_and_integer_keys_apart(file_store):
    await file_store.write("abc", {"1": "str", 1: "int"}, 60)

    data = await file_store.read("abc")

    assert data == {"1": "str", 1: "int"}
    assert data["1"] == "str"
    assert data[1] == "int"


@pytest.mark.asyncio
async def test_file_store_file_layout(file_store):
    before = time.time()
    await file_store.write("abc", {"a": 1}, 60)

    payload = json.loads((file_store.path / "session_abc.json").read_text())

    assert payload["data"] == {"a": 1}
    assert payload["_expire_at"] >= before + 60


@pytest.mark.asyncio
async def test_file_store_missing_session_reads_empty(file_store):
    assert await file_store.read("nope") == {}
    assert await file_store.exists("nope") is False


@pytest.mark.asyncio
async def test_file_store_expired_session_is_removed_on_read(file_store):
    await file_store.write("abc", {"a": 1}, -1)

    assert await file_store.read("abc") == {}
    assert await file_store.exists("abc") is False


@pytest.mark.asyncio
async def test_file_store_corrupt_file_reads_empty(file_store):
    (file_store.path / "session_abc.json").write_text("{not json")

    assert await file_store.read("abc") == {}


@pytest.mark.asyncio
async def test_file_store_unserialisable_data_is_not_written(file_store):
    await file_store.write("abc", {"a": 1}, 60)

    assert await file_store.write("abc", {"a": object()}, 60) is False
    assert await file_store.read("abc") == {"a": 1}


@pytest.mark.asyncio
async def test_file_store_destroy(file_store):
    await file_store.write("abc", {"a": 1}, 60)

    assert await file_store.destroy("abc") is True
    assert await file_store.exists("abc") is False
    assert await file_store.destroy("abc") is True


@pytest.mark.asyncio
async def test_file_store_gc_removes_expired_and_corrupt_files(file_store):
    await file_store.write("old", {}, -1)
    await file_store.write("fresh", {}, 60)
    (file_store.path / "session_broken.json").write_text("garbage")

    assert await file_store.gc(60) == 2
    assert await file_store.exists("fresh") is True


@pytest.mark.asyncio
async def test_session_persists_through_file_store(file_store):
    first = Session(file_store)
    await first.start()
    first.put_all({"user": "alice", 1: "one"})
    await first.close()

    second = Session(file_store, options=SessionOptions(id=first.id()))
    await second.start()

    assert second.get("user") == "alice"
    assert second.get(1) == "one"
