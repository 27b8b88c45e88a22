"""Utility helpers bridging the Streamlit UI and the coach engine.

Pure functions for formatting, sorting, table building and dashboard
stats, plus construction of the persisted WorkoutStore.
"""

from __future__ import annotations

from datetime import date
from pathlib import Path
from typing import Sequence

import pandas as pd

from coach_engine.models.enums import SortDirection
from coach_engine.models.workout_entry import WorkoutEntry
from coach_engine.store import JsonFileBlobStore, SEED_WORKOUTS, WorkoutStore

# ---------------------------------------------------------------------------
# Formatting helpers
# ---------------------------------------------------------------------------


def format_weight(lbs: float | None) -> str:
    """Format a weight in lbs. e.g. 17.5 -> '17.5 lbs', 135.0 -> '135 lbs'."""
    if lbs is None:
        return "—"
    if float(lbs).is_integer():
        return f"{int(lbs)} lbs"
    return f"{lbs:g} lbs"


def format_volume(volume: float) -> str:
    """Format lb-reps with thousands separators. e.g. 12345.0 -> '12,345'."""
    return f"{volume:,.0f}"


def format_groups(groups: Sequence[str]) -> str:
    return " and ".join(groups) if groups else "—"


# ---------------------------------------------------------------------------
# Table columns & sorting
# ---------------------------------------------------------------------------

COLUMN_LABELS: dict[str, str] = {
    "id": "ID",
    "date": "Date",
    "exercise": "Exercise",
    "set_number": "Set",
    "weight_lbs": "Weight (lbs)",
    "reps": "Reps",
    "muscle_group": "Muscle Group",
    "notes": "Notes",
    "done": "Done",
}

SORT_KEYS = ("date", "exercise", "set_number", "weight_lbs", "reps", "muscle_group", "notes", "id")

MUSCLE_GROUP_SUGGESTIONS = (
    "Chest", "Back", "Shoulders", "Biceps", "Triceps", "Legs",
    "Quads", "Hamstrings", "Glutes", "Abs",
)


def sort_entries(
    entries: Sequence[WorkoutEntry],
    key: str = "date",
    direction: SortDirection = SortDirection.DESC,
) -> list[WorkoutEntry]:
    """Sort entries for display.

    Dates sort chronologically with same-day rows ordered by exercise name
    (A-Z in both directions). Other text columns sort case-insensitively.
    """
    if key not in SORT_KEYS:
        raise ValueError(f"Cannot sort by {key!r}")
    reverse = direction == SortDirection.DESC

    if key == "date":
        by_exercise = sorted(entries, key=lambda e: e.exercise.lower())
        return sorted(by_exercise, key=lambda e: e.date, reverse=reverse)

    def _value(entry: WorkoutEntry):
        value = getattr(entry, key)
        return value.lower() if isinstance(value, str) else value

    return sorted(entries, key=_value, reverse=reverse)


def entries_to_frame(entries: Sequence[WorkoutEntry]) -> pd.DataFrame:
    """Tabular view of the log with display column names."""
    rows = [
        {
            "id": e.id,
            "date": e.date,
            "exercise": e.exercise,
            "set_number": e.set_number,
            "weight_lbs": e.weight_lbs,
            "reps": e.reps,
            "muscle_group": e.muscle_group,
            "notes": e.notes,
            "done": e.is_completed,
        }
        for e in entries
    ]
    frame = pd.DataFrame(rows, columns=list(COLUMN_LABELS))
    return frame.rename(columns=COLUMN_LABELS)


# ---------------------------------------------------------------------------
# Dashboard stats
# ---------------------------------------------------------------------------


def dashboard_stats(entries: Sequence[WorkoutEntry], today: date | None = None) -> dict[str, str]:
    """Headline numbers for the stat cards."""
    today = today or date.today()
    completed = [e for e in entries if e.is_completed]
    last_date = max((e.date for e in entries), default=None)
    week_volume = sum(e.volume for e in entries if 0 <= (today - e.date).days <= 7)
    return {
        "Total sets": str(len(entries)),
        "Completed sets": str(len(completed)),
        "7-day volume": format_volume(week_volume),
        "Last session": last_date.isoformat() if last_date else "—",
    }


# ---------------------------------------------------------------------------
# Store construction
# ---------------------------------------------------------------------------


def open_store(path: Path | str) -> WorkoutStore:
    """Open the JSON-backed log at *path*, seeding it on first run."""
    return WorkoutStore(JsonFileBlobStore(path), seed=SEED_WORKOUTS)
