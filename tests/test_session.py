import pytest

from larasession.exceptions import InvalidSessionIdentifierException
from larasession.session import (
    ArrayCookieChannel,
    ArraySessionStore,
    Session,
    SessionOptions,
    SessionStatus,
)


# =============================================================================
# Status
# =============================================================================

def test_new_session_has_status_none(session):
    assert session.status() is SessionStatus.NONE
    assert session.is_none()
    assert not session.is_active()
    assert not session.is_disabled()
    assert session.enabled()
    assert not session.exists()


@pytest.mark.asyncio
async def test_start_makes_session_active(session):
    assert await session.start() is True

    assert session.status() is SessionStatus.ACTIVE
    assert session.is_active()
    assert session.exists()
    assert session.id() != ""


@pytest.mark.asyncio
async def test_disabled_session_cannot_start(store):
    session = Session(store, options=SessionOptions().disabled())

    assert session.status() is SessionStatus.DISABLED
    assert session.is_disabled()
    assert not session.enabled()
    assert await session.start() is False
    assert session.status() is SessionStatus.DISABLED


@pytest.mark.asyncio
async def test_start_twice_keeps_the_same_session(started_session):
    session_id = started_session.id()
    started_session.set("user", "alice")

    assert await started_session.start() is True
    assert started_session.id() == session_id
    assert started_session.get("user") == "alice"


# =============================================================================
# Data access
# =============================================================================

@pytest.mark.asyncio
@pytest.mark.parametrize("key, value", [
    ("name", "Bob"),
    (1, "first"),
    ("items", [1, 2, 3]),
    ("none", None),
])
async def test_set_then_get(started_session, key, value):
    started_session.set(key, value)

    assert started_session.get(key) == value
    assert started_session.has(key) is True


@pytest.mark.asyncio
async def test_set_is_chainable(started_session):
    result = started_session.set("name", "Bob").set("surname", "Marley")

    assert result is started_session
    assert started_session.get_all() == {"name": "Bob", "surname": "Marley"}


@pytest.mark.asyncio
async def test_put_is_alias_of_set(started_session):
    assert started_session.put("a", 1) is started_session
    assert started_session.get("a") == 1


@pytest.mark.asyncio
async def test_put_all_sets_every_entry(started_session):
    started_session.put_all({"a": 1, "b": 2})
    assert started_session.get("a") == 1
    assert started_session.get("b") == 2

    started_session.put_all({"b": 3, "c": 4})
    started_session.put_all({"b": 3, "c": 4})
    assert started_session.get_all() == {"a": 1, "b": 3, "c": 4}


@pytest.mark.asyncio
async def test_get_missing_key_returns_default(started_session):
    assert started_session.get("missing") is None
    assert started_session.get("missing", "fallback") == "fallback"


@pytest.mark.asyncio
async def test_remove_reports_presence(started_session):
    started_session.set("k", "v")

    assert started_session.remove("k") is True
    assert started_session.has("k") is False
    assert started_session.remove("k") is False


@pytest.mark.asyncio
async def test_clear_keeps_session_active(started_session):
    started_session.put_all({"a": 1, "b": 2})

    started_session.clear()

    assert started_session.get_all() == {}
    assert started_session.status() is SessionStatus.ACTIVE


@pytest.mark.asyncio
async def test_get_all_returns_a_copy(started_session):
    started_session.set("a", 1)

    snapshot = started_session.get_all()
    snapshot["b"] = 2

    assert started_session.has("b") is False


@pytest.mark.asyncio
async def test_dictionary_interface(started_session):
    started_session["name"] = "Bob"

    assert started_session["name"] == "Bob"
    assert "name" in started_session
    assert len(started_session) == 1

    del started_session["name"]
    assert "name" not in started_session
    assert started_session["name"] is None


def test_data_access_without_session_fails_soft(session):
    assert session.get("x") is None
    assert session.get("x", 5) == 5
    assert session.has("x") is False
    assert session.remove("x") is False
    assert session.get_all() == {}
    assert session.set("x", 1) is session
    assert session.put_all({"y": 2}) is session
    session.clear()

    assert session.has("x") is False
    assert len(session) == 0


# =============================================================================
# Lifecycle
# =============================================================================

@pytest.mark.asyncio
async def test_close_persists_data_for_the_same_id(store):
    first = Session(store)
    await first.start()
    first.set("user", "alice")
    session_id = first.id()

    assert await first.close() is True
    assert first.status() is SessionStatus.NONE
    assert first.get("user") is None

    second = Session(store, options=SessionOptions(id=session_id))
    assert await second.start() is True
    assert second.get("user") == "alice"


@pytest.mark.asyncio
async def test_restart_after_close_resumes_same_session(started_session):
    started_session.set("count", 1)
    session_id = started_session.id()
    await started_session.close()

    assert await started_session.start() is True
    assert started_session.id() == session_id
    assert started_session.get("count") == 1


@pytest.mark.asyncio
async def test_close_without_session_returns_false(session):
    assert await session.close() is False


@pytest.mark.asyncio
async def test_destroy_removes_data(store, started_session):
    started_session.set("user", "alice")
    session_id = started_session.id()
    await store.write(session_id, {"user": "alice"}, 60)

    assert await started_session.destroy() is True

    assert started_session.status() is SessionStatus.NONE
    assert started_session.get("user") is None
    assert started_session.id() == ""
    assert await store.exists(session_id) is False


@pytest.mark.asyncio
async def test_destroy_does_not_touch_cookie(cookies, started_session):
    sent_before = list(cookies.queued)

    await started_session.destroy()

    assert cookies.queued == sent_before


@pytest.mark.asyncio
async def test_destroy_without_session_returns_false(session):
    assert await session.destroy() is False


@pytest.mark.asyncio
async def test_start_fails_when_store_read_raises(cookies):
    class BrokenStore(ArraySessionStore):
        async def read(self, session_id):
            raise PermissionError("no access")

    session = Session(BrokenStore(), cookies)

    assert await session.start() is False
    assert session.status() is SessionStatus.NONE


@pytest.mark.asyncio
async def test_close_reports_store_write_failure():
    class ReadOnlyStore(ArraySessionStore):
        async def write(self, session_id, data, lifetime):
            return False

    session = Session(ReadOnlyStore())
    await session.start()

    assert await session.close() is False
    assert session.status() is SessionStatus.NONE


# =============================================================================
# Identity
# =============================================================================

@pytest.mark.asyncio
async def test_set_id_before_start_is_used(store):
    session = Session(store)

    assert session.set_id("custom-id-123") is True
    await session.start()

    assert session.id() == "custom-id-123"


@pytest.mark.asyncio
async def test_set_id_after_start_is_refused(started_session):
    session_id = started_session.id()

    assert started_session.set_id("another-id") is False
    assert started_session.id() == session_id


def test_set_id_rejects_malformed_ids(session):
    with pytest.raises(InvalidSessionIdentifierException):
        session.set_id("../../etc/passwd")


@pytest.mark.asyncio
async def test_set_name_before_and_after_start(session):
    assert session.name() == "app_session"
    assert session.set_name("other_session") is True
    assert session.name() == "other_session"

    await session.start()

    assert session.set_name("third") is False
    assert session.name() == "other_session"


@pytest.mark.asyncio
async def test_facades_sharing_options_do_not_affect_each_other(store):
    shared = SessionOptions(name="app_session")
    first = Session(store, ArrayCookieChannel(), shared)
    second = Session(store, ArrayCookieChannel(), shared)

    await first.start()
    assert second.set_name("other") is True
    assert second.set_id("second-id") is True
    second.set_cookie_params(lifetime=60)

    assert first.name() == "app_session"
    assert first.id() != "second-id"
    assert first.cookie_params().lifetime == 0
    assert shared.name == "app_session"
    assert shared.id is None
    assert shared.cookie_params is None


def test_set_name_rejects_numeric_names(session):
    with pytest.raises(InvalidSessionIdentifierException):
        session.set_name("12345")


# =============================================================================
# Regeneration
# =============================================================================

@pytest.mark.asyncio
async def test_regenerate_id_keeps_old_record(store, started_session):
    started_session.set("user", "alice")
    old_id = started_session.id()

    assert await started_session.regenerate_id() is True

    assert started_session.id() != old_id
    assert started_session.get("user") == "alice"
    assert await store.read(old_id) == {"user": "alice"}


@pytest.mark.asyncio
async def test_regenerate_id_deletes_old_record(store, started_session):
    old_id = started_session.id()
    await store.write(old_id, {"user": "alice"}, 60)

    assert await started_session.regenerate_id(delete_old=True) is True

    assert started_session.id() != old_id
    assert await store.exists(old_id) is False


@pytest.mark.asyncio
async def test_regenerate_id_fails_when_old_record_cannot_be_deleted():
    class StickyStore(ArraySessionStore):
        async def destroy(self, session_id):
            return False

    session = Session(StickyStore())
    await session.start()
    old_id = session.id()

    assert await session.regenerate_id(delete_old=True) is False
    assert session.id() == old_id


@pytest.mark.asyncio
async def test_regenerate_id_without_session_returns_false(session):
    assert await session.regenerate_id() is False


@pytest.mark.asyncio
async def test_regenerate_id_skips_taken_ids(store):
    ids = iter(["taken-id", "fresh-id", "newer-id"])

    class PredictableStore(ArraySessionStore):
        def generate_id(self):
            return next(ids)

    predictable = PredictableStore()
    await predictable.write("taken-id", {}, 60)
    session = Session(predictable, options=SessionOptions(id="start-id"))
    await session.start()

    assert await session.regenerate_id() is True
    assert session.id() == "fresh-id"


def test_repr_hides_full_id(store):
    session = Session(store, options=SessionOptions(id="abcdefghijklmnop"))

    text = repr(session)

    assert "abcdefgh..." in text
    assert "abcdefghijklmnop" not in text
    assert "status=none" in text


def test_defaults_to_in_memory_cookie_channel(store):
    session = Session(store)

    assert isinstance(session.cookies, ArrayCookieChannel)
    assert session.use_cookies() is True
