"""Tests for WorkoutStore and the blob stores behind it."""

from __future__ import annotations

import json
from datetime import date, datetime, timezone

import pytest

from coach_engine.models.enums import COMPLETION_MARKER
from coach_engine.serialization import entries_to_list
from coach_engine.store import (
    SEED_WORKOUTS,
    STORAGE_KEY,
    InMemoryBlobStore,
    JsonFileBlobStore,
    WorkoutStore,
)
from coach_engine.store.workout_store import append_completion_marker


def _store_with_ids(make_entry, ids) -> WorkoutStore:
    entries = [make_entry(id=i) for i in ids]
    return WorkoutStore(InMemoryBlobStore({STORAGE_KEY: entries_to_list(entries)}))


# ---------------------------------------------------------------------------
# Loading & ids
# ---------------------------------------------------------------------------


class TestLoading:
    def test_seed_used_when_blob_absent(self) -> None:
        store = WorkoutStore(InMemoryBlobStore(), seed=SEED_WORKOUTS)
        assert len(store) == 3
        assert store.next_id() == 4

    def test_saved_blob_wins_over_seed(self, make_entry) -> None:
        blob = InMemoryBlobStore({STORAGE_KEY: entries_to_list([make_entry(id=5)])})
        store = WorkoutStore(blob, seed=SEED_WORKOUTS)
        assert [e.id for e in store.all()] == [5]

    def test_next_id_is_max_plus_one(self, make_entry) -> None:
        assert _store_with_ids(make_entry, [3, 7, 2]).next_id() == 8

    def test_next_id_empty_store(self, store) -> None:
        assert store.next_id() == 1

    def test_get_unknown_id_raises(self, store) -> None:
        with pytest.raises(KeyError):
            store.get(42)


# ---------------------------------------------------------------------------
# Mutations
# ---------------------------------------------------------------------------


class TestMutations:
    def test_add_assigns_id_and_prepends(self, store, make_entry) -> None:
        first = store.add(make_entry(exercise="DB Curl", id=99))
        second = store.add(make_entry(exercise="Cable Curl"))
        assert (first.id, second.id) == (1, 2)
        assert [e.exercise for e in store.all()] == ["Cable Curl", "DB Curl"]

    def test_add_many_keeps_order(self, store, make_entry) -> None:
        added = store.add_many([make_entry(set_number=n) for n in (1, 2, 3)])
        assert [e.id for e in added] == [1, 2, 3]
        assert [e.set_number for e in store.all()] == [1, 2, 3]

    def test_update_keeps_id(self, store, make_entry) -> None:
        entry = store.add(make_entry(weight=20.0))
        store.update(entry.id, make_entry(weight=25.0, id=500))
        updated = store.get(entry.id)
        assert updated.weight_lbs == 25.0
        assert updated.id == entry.id

    def test_delete(self, store, make_entry) -> None:
        entry = store.add(make_entry())
        store.delete(entry.id)
        assert len(store) == 0
        with pytest.raises(KeyError):
            store.delete(entry.id)

    def test_deleted_ids_not_reissued(self, store, make_entry) -> None:
        store.add(make_entry())
        second = store.add(make_entry())
        store.delete(second.id)
        assert store.add(make_entry()).id == 3

    def test_mutations_persist(self, make_entry) -> None:
        blob = InMemoryBlobStore()
        store = WorkoutStore(blob)
        store.add(make_entry(exercise="DB Curl"))
        saved = blob.load(STORAGE_KEY)
        assert [item["exercise"] for item in saved] == ["DB Curl"]


# ---------------------------------------------------------------------------
# mark_done
# ---------------------------------------------------------------------------


class TestMarkDone:
    def test_marker_helper(self) -> None:
        assert append_completion_marker("") == COMPLETION_MARKER
        assert append_completion_marker("felt heavy") == f"felt heavy | {COMPLETION_MARKER}"
        assert append_completion_marker(COMPLETION_MARKER) == COMPLETION_MARKER

    def test_mark_done_sets_fields(self, store, make_entry) -> None:
        entry = store.add(make_entry(notes="(planned)"))
        at = datetime(2025, 11, 10, 9, 30, tzinfo=timezone.utc)
        done = store.mark_done(entry.id, at=at)
        assert done.done is True
        assert done.done_at == at.isoformat()
        assert done.notes == f"(planned) | {COMPLETION_MARKER}"
        assert store.get(entry.id).is_completed

    def test_mark_done_twice_is_idempotent(self, store, make_entry) -> None:
        entry = store.add(make_entry())
        first = store.mark_done(entry.id, at=datetime(2025, 11, 10, tzinfo=timezone.utc))
        second = store.mark_done(entry.id, at=datetime(2025, 11, 11, tzinfo=timezone.utc))
        assert second.notes.count(COMPLETION_MARKER) == 1
        assert second.done_at == first.done_at


# ---------------------------------------------------------------------------
# Blob stores
# ---------------------------------------------------------------------------


class TestJsonFileBlobStore:
    def test_missing_file_loads_none(self, tmp_path) -> None:
        assert JsonFileBlobStore(tmp_path / "nope.json").load(STORAGE_KEY) is None

    def test_round_trip_through_store(self, tmp_path, make_entry) -> None:
        path = tmp_path / "data" / "workouts.json"
        store = WorkoutStore(JsonFileBlobStore(path))
        store.add(make_entry(date(2025, 11, 8), "DB Curl", weight=17.5, done=True))

        reopened = WorkoutStore(JsonFileBlobStore(path))
        (entry,) = reopened.all()
        assert entry.weight_lbs == 17.5
        assert entry.date == date(2025, 11, 8)
        assert entry.done is True
        assert list(path.parent.glob("*.tmp")) == []

    def test_keeps_other_keys(self, tmp_path) -> None:
        path = tmp_path / "blobs.json"
        blob = JsonFileBlobStore(path)
        blob.save("a", [1])
        blob.save("b", {"x": 2})
        assert json.loads(path.read_text(encoding="utf-8")) == {"a": [1], "b": {"x": 2}}

    def test_rejects_non_object_document(self, tmp_path) -> None:
        path = tmp_path / "bad.json"
        path.write_text("[1, 2]", encoding="utf-8")
        with pytest.raises(ValueError, match="not a JSON object"):
            JsonFileBlobStore(path).load(STORAGE_KEY)
