"""
Tests for the record store and session store.

The collection file is the single source of truth: every load re-reads it.
"""

import asyncio
import json
import os

import pytest

from hostel.core.errors import PersistenceError, RecordParseError
from hostel.core.models import Fine
from hostel.services import FineService
from hostel.storage import (
    Collections,
    CollectionRepository,
    InMemorySessionStore,
    JsonFileRecordStore,
    create_local_storage,
)


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def store(tmp_path):
    """Record store over an empty data directory."""
    return JsonFileRecordStore(tmp_path / "data")


# =============================================================================
# JsonFileRecordStore Tests
# =============================================================================


class TestJsonFileRecordStore:
    @pytest.mark.asyncio
    async def test_ensure_collections_creates_empty_arrays(self, store):
        await store.ensure_collections()

        for name in Collections.ALL:
            path = store.path_for(name)
            assert path.exists()
            assert json.loads(path.read_text()) == []

    @pytest.mark.asyncio
    async def test_ensure_collections_keeps_existing_data(self, store):
        await store.ensure_collections()
        await store.save_all(Collections.ROOMS, [{"roomNumber": "101"}])

        await store.ensure_collections()

        assert await store.load_all(Collections.ROOMS) == [{"roomNumber": "101"}]

    @pytest.mark.asyncio
    async def test_round_trip_preserves_append_order(self, store):
        await store.ensure_collections()
        records = [{"id": str(i), "value": i * i} for i in range(25)]

        await store.save_all(Collections.COMPLAINTS, records)

        assert await store.load_all(Collections.COMPLAINTS) == records

    @pytest.mark.asyncio
    async def test_save_writes_indented_json_without_leftovers(self, store):
        await store.ensure_collections()
        await store.save_all(Collections.FINES, [{"id": "1"}])

        text = store.path_for(Collections.FINES).read_text()
        assert text == json.dumps([{"id": "1"}], indent=2)
        assert not list(store.data_dir.glob("*.tmp"))

    @pytest.mark.asyncio
    async def test_failed_save_keeps_previous_file(self, store, monkeypatch):
        await store.ensure_collections()
        await store.save_all(Collections.FINES, [{"id": "1"}])
        path = store.path_for(Collections.FINES)
        before = path.read_bytes()

        def failing_replace(src, dst):
            raise OSError("disk full")

        monkeypatch.setattr(os, "replace", failing_replace)

        with pytest.raises(PersistenceError):
            await store.save_all(Collections.FINES, [{"id": "1"}, {"id": "2"}])

        assert path.read_bytes() == before
        assert sorted(p.name for p in store.data_dir.iterdir()) == sorted(
            f"{name}.json" for name in Collections.ALL
        )

    @pytest.mark.asyncio
    async def test_invalid_json_is_a_parse_error(self, store):
        await store.ensure_collections()
        store.path_for(Collections.USERS).write_text("{not json")

        with pytest.raises(RecordParseError):
            await store.load_all(Collections.USERS)

    @pytest.mark.asyncio
    async def test_non_array_is_a_parse_error(self, store):
        await store.ensure_collections()
        store.path_for(Collections.USERS).write_text('{"users": []}')

        with pytest.raises(RecordParseError):
            await store.load_all(Collections.USERS)

    @pytest.mark.asyncio
    async def test_missing_file_is_a_persistence_error(self, store):
        with pytest.raises(PersistenceError) as exc_info:
            await store.load_all(Collections.ROOMS)

        assert not isinstance(exc_info.value, RecordParseError)
        assert exc_info.value.status_code == 500

    @pytest.mark.asyncio
    async def test_no_caching_between_loads(self, store):
        await store.ensure_collections()
        assert await store.load_all(Collections.ROOMS) == []

        # Written behind the store's back
        store.path_for(Collections.ROOMS).write_text('[{"roomNumber": "7"}]')

        assert await store.load_all(Collections.ROOMS) == [{"roomNumber": "7"}]

    def test_one_lock_per_collection(self, store):
        assert store.locked(Collections.ROOMS) is store.locked(Collections.ROOMS)
        assert store.locked(Collections.ROOMS) is not store.locked(Collections.FINES)


# =============================================================================
# CollectionRepository Tests
# =============================================================================


class TestCollectionRepository:
    @pytest.mark.asyncio
    async def test_saves_camel_case_and_keeps_unknown_fields(self, store):
        await store.ensure_collections()
        await store.save_all(Collections.FINES, [{
            "id": "f1",
            "studentId": "1",
            "amount": 250,
            "reason": "Late return",
            "status": "pending",
            "date": "2024-01-01T00:00:00.000Z",
            "paidVia": "cash",
        }])
        repo = CollectionRepository(store, Collections.FINES, Fine)

        fines = await repo.load()
        assert fines[0].student_id == "1"
        await repo.save(fines)

        saved = await store.load_all(Collections.FINES)
        assert saved[0]["studentId"] == "1"
        assert saved[0]["paidVia"] == "cash"
        assert "student_id" not in saved[0]


# =============================================================================
# Concurrency
# =============================================================================


class TestCollectionLocking:
    @pytest.mark.asyncio
    async def test_concurrent_appends_are_not_lost(self, store):
        await store.ensure_collections()
        fines = FineService(store)

        await asyncio.gather(*(
            fines.add(student_id="1", amount=i, reason=f"fine {i}")
            for i in range(20)
        ))

        stored = await store.load_all(Collections.FINES)
        assert len(stored) == 20
        assert len({f["id"] for f in stored}) == 20


# =============================================================================
# InMemorySessionStore Tests
# =============================================================================


class TestInMemorySessionStore:
    @pytest.mark.asyncio
    async def test_set_get_delete(self):
        sessions = InMemorySessionStore()

        await sessions.set("abc", {"id": "1"}, ttl=60)
        assert await sessions.get("abc") == {"id": "1"}
        assert await sessions.exists("abc")

        assert await sessions.delete("abc") is True
        assert await sessions.get("abc") is None
        assert await sessions.delete("abc") is False

    @pytest.mark.asyncio
    async def test_expired_entries_are_dropped(self):
        sessions = InMemorySessionStore()
        await sessions.set("abc", {"id": "1"}, ttl=-1)

        assert await sessions.get("abc") is None
        assert not await sessions.exists("abc")

    @pytest.mark.asyncio
    async def test_set_sweeps_expired_entries(self):
        sessions = InMemorySessionStore()
        await sessions.set("abandoned", {"id": "1"}, ttl=-1)
        await sessions.set("forever", {"id": "2"})

        await sessions.set("fresh", {"id": "3"}, ttl=60)

        assert set(sessions._sessions) == {"forever", "fresh"}


def test_create_local_storage(tmp_path):
    storage = create_local_storage(tmp_path)

    assert isinstance(storage.records, JsonFileRecordStore)
    assert isinstance(storage.sessions, InMemorySessionStore)
    assert storage.records.data_dir == tmp_path
