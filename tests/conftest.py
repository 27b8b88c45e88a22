"""Shared test fixtures: workout histories and entry factories."""

from __future__ import annotations

from datetime import date
from typing import Callable

import pytest

from coach_engine.models.workout_entry import WorkoutEntry
from coach_engine.store import InMemoryBlobStore, WorkoutStore

TODAY = date(2025, 11, 10)


@pytest.fixture
def today() -> date:
    """Fixed reference date (Monday 2025-11-10)."""
    return TODAY


@pytest.fixture
def make_entry() -> Callable[..., WorkoutEntry]:
    """Factory for WorkoutEntry with sensible defaults."""

    def _make(
        day: date = TODAY,
        exercise: str = "DB Curl",
        group: str = "Biceps",
        weight: float = 20.0,
        reps: int = 10,
        set_number: int = 1,
        **kwargs,
    ) -> WorkoutEntry:
        return WorkoutEntry(
            date=day,
            exercise=exercise,
            set_number=set_number,
            weight_lbs=weight,
            reps=reps,
            muscle_group=group,
            **kwargs,
        )

    return _make


@pytest.fixture
def split_history(make_entry) -> list[WorkoutEntry]:
    """Chest yesterday, Back three days ago, Legs five days ago (newest first)."""
    return [
        make_entry(date(2025, 11, 9), "Dumbbell Bench Press", "Chest", 135.0, 8, done=True),
        make_entry(date(2025, 11, 9), "Incline DB Press", "Chest", 50.0, 10, done=True),
        make_entry(date(2025, 11, 7), "Lat Pulldown", "Back", 120.0, 10, done=True),
        make_entry(date(2025, 11, 5), "Goblet Squat", "Legs", 60.0, 12, done=True),
    ]


@pytest.fixture
def store() -> WorkoutStore:
    """Empty in-memory WorkoutStore."""
    return WorkoutStore(InMemoryBlobStore())
