"""WorkoutStore — the logged set collection with whole-blob persistence.

The full entry list is loaded once when the store is created and written
back as one unit after every mutating call. Entries are kept newest-added
first; views sort them as they need.
"""

from __future__ import annotations

import dataclasses
import logging
from datetime import datetime, timezone
from typing import Sequence

from coach_engine.models.enums import COMPLETION_MARKER, NOTES_SEPARATOR
from coach_engine.models.workout_entry import WorkoutEntry
from coach_engine.serialization.json_codec import entries_from_list, entries_to_list
from coach_engine.store.blob_store import BlobStore

logger = logging.getLogger(__name__)

STORAGE_KEY = "workoutTrackerData"


def append_completion_marker(notes: str) -> str:
    """Append the completion marker to *notes* unless already present."""
    notes = notes or ""
    if COMPLETION_MARKER in notes:
        return notes
    if notes:
        return f"{notes}{NOTES_SEPARATOR}{COMPLETION_MARKER}"
    return COMPLETION_MARKER


class WorkoutStore:
    """Append/update/delete/mark-done over the set log.

    Usage::

        store = WorkoutStore(JsonFileBlobStore("data/workouts.json"))
        entry = store.add(draft)
        store.mark_done(entry.id)
    """

    def __init__(
        self,
        blob_store: BlobStore,
        key: str = STORAGE_KEY,
        seed: Sequence[WorkoutEntry] = (),
    ) -> None:
        self._blob_store = blob_store
        self._key = key

        saved = blob_store.load(key)
        if saved is None:
            self._entries: list[WorkoutEntry] = list(seed)
            logger.info("No saved workouts under %r, starting from %d seed entries", key, len(seed))
        else:
            self._entries = entries_from_list(saved)
            logger.info("Loaded %d workouts from %r", len(self._entries), key)

        # Highest id handed out in this process; deleted ids are not reissued
        self._last_id = max((e.id for e in self._entries), default=0)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def all(self) -> tuple[WorkoutEntry, ...]:
        return tuple(self._entries)

    def get(self, entry_id: int) -> WorkoutEntry:
        return self._entries[self._index_of(entry_id)]

    def next_id(self) -> int:
        """1 + the largest id present (or handed out), 1 for an empty store."""
        current = max((e.id for e in self._entries), default=0)
        return max(current, self._last_id) + 1

    def __len__(self) -> int:
        return len(self._entries)

    # ------------------------------------------------------------------
    # Mutations (each one persists the whole collection)
    # ------------------------------------------------------------------

    def add(self, draft: WorkoutEntry) -> WorkoutEntry:
        """Store *draft* under a fresh id and return the stored entry.

        Any id on the draft is ignored. New entries go to the front.
        """
        entry = dataclasses.replace(draft, id=self.next_id())
        self._last_id = entry.id
        self._entries.insert(0, entry)
        self._persist()
        return entry

    def add_many(self, drafts: Sequence[WorkoutEntry]) -> list[WorkoutEntry]:
        """Add several drafts in one write, keeping their relative order."""
        start = self.next_id()
        added = [
            dataclasses.replace(d, id=start + i) for i, d in enumerate(drafts)
        ]
        if added:
            self._last_id = added[-1].id
        self._entries[:0] = added
        self._persist()
        return added

    def update(self, entry_id: int, entry: WorkoutEntry) -> None:
        """Replace the entry with *entry_id* by *entry* (the id is kept)."""
        index = self._index_of(entry_id)
        self._entries[index] = dataclasses.replace(entry, id=entry_id)
        self._persist()

    def delete(self, entry_id: int) -> None:
        index = self._index_of(entry_id)
        del self._entries[index]
        self._persist()

    def mark_done(self, entry_id: int, at: datetime | None = None) -> WorkoutEntry:
        """Flag an entry as completed.

        Sets ``done`` and ``done_at`` and appends the completion marker to
        the notes. Marking twice never duplicates the marker.
        """
        index = self._index_of(entry_id)
        current = self._entries[index]
        stamp = (at or datetime.now(timezone.utc)).isoformat()
        updated = dataclasses.replace(
            current,
            done=True,
            done_at=current.done_at or stamp,
            notes=append_completion_marker(current.notes),
        )
        self._entries[index] = updated
        self._persist()
        return updated

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _index_of(self, entry_id: int) -> int:
        for i, entry in enumerate(self._entries):
            if entry.id == entry_id:
                return i
        raise KeyError(f"No workout entry with id {entry_id}")

    def _persist(self) -> None:
        self._blob_store.save(self._key, entries_to_list(self._entries))
