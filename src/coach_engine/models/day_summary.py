"""Per-day history summaries used for narration and the remote coach."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date

from coach_engine.models.workout_entry import WorkoutEntry


@dataclass(frozen=True)
class DaySummary:
    """What was trained on the most recent (completed) training day.

    ``date`` is None when there is no history at all.
    """

    date: date | None = None
    muscle_groups: tuple[str, ...] = field(default_factory=tuple)
    exercises: tuple[str, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class SessionSummary:
    """Compact summary of one training day, raw sets included."""

    date: date
    muscle_groups: tuple[str, ...]
    exercises: tuple[str, ...]
    total_sets: int
    total_reps: int
    entries: tuple[WorkoutEntry, ...] = field(default_factory=tuple)
