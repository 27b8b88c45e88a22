"""History summarisation for the remote coach.

Collapses the flat set log into one summary per training day so the
reasoning service sees sessions rather than hundreds of individual sets.
"""

from __future__ import annotations

from datetime import date
from typing import Sequence

from coach_engine.models.day_summary import SessionSummary
from coach_engine.models.enums import HISTORY_CAP
from coach_engine.models.workout_entry import WorkoutEntry


def cap_history(
    history: Sequence[WorkoutEntry], cap: int = HISTORY_CAP,
) -> list[WorkoutEntry]:
    """Keep the first *cap* entries (the store keeps newest first)."""
    return list(history[:cap])


def summarize_history(
    history: Sequence[WorkoutEntry], cap: int = HISTORY_CAP,
) -> tuple[SessionSummary, ...]:
    """Group history by date, most recent date first.

    Each day reports its distinct muscle groups and exercises (first-seen
    order), the number of sets, the total reps and the raw sets.
    """
    by_date: dict[date, list[WorkoutEntry]] = {}
    for entry in cap_history(history, cap):
        by_date.setdefault(entry.date, []).append(entry)

    summaries: list[SessionSummary] = []
    for day in sorted(by_date, reverse=True):
        entries = by_date[day]
        summaries.append(SessionSummary(
            date=day,
            muscle_groups=tuple(dict.fromkeys(e.muscle_group for e in entries)),
            exercises=tuple(dict.fromkeys(e.exercise for e in entries)),
            total_sets=len(entries),
            total_reps=sum(e.reps or 0 for e in entries),
            entries=tuple(entries),
        ))
    return tuple(summaries)
