"""Persistence for the set log."""

from coach_engine.store.blob_store import BlobStore, InMemoryBlobStore, JsonFileBlobStore
from coach_engine.store.seed import SEED_WORKOUTS
from coach_engine.store.workout_store import STORAGE_KEY, WorkoutStore

__all__ = [
    "BlobStore",
    "InMemoryBlobStore",
    "JsonFileBlobStore",
    "SEED_WORKOUTS",
    "STORAGE_KEY",
    "WorkoutStore",
]
