"""Narration — the spoken morning check-in.

Summarises the last training day and turns it into a short script for the
voice coach: greeting, what was trained last, today's focus, sign-off.
"""

from __future__ import annotations

from typing import Sequence

from coach_engine.models.day_summary import DaySummary
from coach_engine.models.workout_entry import WorkoutEntry


def summarize_last_day(history: Sequence[WorkoutEntry]) -> DaySummary:
    """Summarise the most recent training day.

    Completed sets take priority: if any set is completed, only completed
    sets are considered, even when later incomplete sets exist. Otherwise
    every set is considered.

    Returns:
        The latest date with its distinct muscle groups and exercises in
        first-seen order, or an empty DaySummary for empty history.
    """
    if not history:
        return DaySummary()

    completed = [e for e in history if e.is_completed]
    source = completed or list(history)

    latest = max(e.date for e in source)
    same_day = [e for e in source if e.date == latest]

    return DaySummary(
        date=latest,
        muscle_groups=tuple(dict.fromkeys(e.muscle_group for e in same_day)),
        exercises=tuple(dict.fromkeys(e.exercise for e in same_day)),
    )


def build_morning_script(
    name: str,
    last_day: DaySummary,
    todays_group: str | None = None,
) -> str:
    """Compose the spoken check-in.

    Order: greeting, last session (or "no history"), today's recommendation
    when one is known, closing line.
    """
    pieces: list[str] = [f"Good morning, {name}."]

    if last_day.date is not None:
        groups = " and ".join(last_day.muscle_groups)
        exercises = ", ".join(last_day.exercises)
        pieces.append(
            f"Yesterday, on {last_day.date.isoformat()}, you trained {groups} "
            f"with exercises like {exercises}."
        )
    else:
        pieces.append("We don't have any logged workouts yet.")

    if todays_group:
        pieces.append(
            f"Based on your recent training, I recommend focusing on "
            f"{todays_group} today."
        )

    pieces.append("Let's have a great workout.")
    return " ".join(pieces)


def build_why_line(last_day: DaySummary, todays_group: str | None = None) -> str:
    """One-line explanation shown next to the play button."""
    if last_day.date is None:
        return "No workout history yet. Let's start building it today."

    groups = " and ".join(last_day.muscle_groups)
    day = last_day.date.isoformat()
    if todays_group:
        return (
            f"Because you trained {groups} on {day}, I'm steering you toward "
            f"{todays_group} today to keep your recovery and volume balanced."
        )
    return f"Your last session on {day} focused on {groups}."
