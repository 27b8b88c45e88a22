"""Starter history used when no saved log exists yet."""

from __future__ import annotations

from datetime import date

from coach_engine.models.workout_entry import WorkoutEntry

SEED_WORKOUTS: tuple[WorkoutEntry, ...] = (
    WorkoutEntry(
        id=1,
        date=date(2025, 11, 8),
        exercise="Dumbbell Single Biceps Curl",
        set_number=1,
        weight_lbs=15.0,
        reps=10,
        muscle_group="Biceps",
        done=True,
        done_at="2025-11-08T14:30:00Z",
    ),
    WorkoutEntry(
        id=2,
        date=date(2025, 11, 8),
        exercise="Dumbbell Single Biceps Curl",
        set_number=2,
        weight_lbs=17.5,
        reps=10,
        muscle_group="Biceps",
        done=True,
        done_at="2025-11-08T14:34:00Z",
    ),
    WorkoutEntry(
        id=3,
        date=date(2025, 11, 8),
        exercise="Dumbbell Single Biceps Curl",
        set_number=3,
        weight_lbs=17.5,
        reps=10,
        muscle_group="Biceps",
        done=True,
        done_at="2025-11-08T14:37:00Z",
    ),
)
