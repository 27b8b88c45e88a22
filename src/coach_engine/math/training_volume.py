"""Training history lookups: recency and trailing-window volume.

All date arithmetic is on calendar dates: a set logged "yesterday" is one
day old whatever the time of day of the reference.
"""

from __future__ import annotations

from datetime import date, datetime, timedelta
from typing import Iterable, Sequence

import pandas as pd

from coach_engine.models.enums import NO_HISTORY_DAYS, VOLUME_WINDOW_DAYS
from coach_engine.models.workout_entry import WorkoutEntry


def as_calendar_date(reference: date | datetime | None) -> date:
    """Reduce a reference date/datetime (default: today) to a calendar date."""
    if reference is None:
        return date.today()
    if isinstance(reference, datetime):
        return reference.date()
    return reference


def last_entry_for_group(
    entries: Iterable[WorkoutEntry], group: str,
) -> WorkoutEntry | None:
    """Return the most recent entry for *group* (first in order on date ties)."""
    matches = [e for e in entries if e.muscle_group == group]
    if not matches:
        return None
    return max(matches, key=lambda e: e.date)


def days_since(last: date | None, reference: date) -> int:
    """Whole days from *last* to *reference*, floored at 0.

    Returns NO_HISTORY_DAYS (99) when *last* is None.
    """
    if last is None:
        return NO_HISTORY_DAYS
    return max(0, (reference - last).days)


def window_volume(
    entries: Iterable[WorkoutEntry],
    group: str,
    reference: date,
    days: int = VOLUME_WINDOW_DAYS,
) -> float:
    """Sum of weight x reps for *group* within [reference - days, reference].

    Both window ends are inclusive; sets dated after *reference* are ignored.
    """
    start = reference - timedelta(days=days)
    return float(sum(
        e.volume
        for e in entries
        if e.muscle_group == group and start <= e.date <= reference
    ))


def daily_volume_frame(entries: Sequence[WorkoutEntry]) -> pd.DataFrame:
    """Pivot history into a date x muscle-group table of summed volume.

    Used by the dashboard charts. Empty history yields an empty frame.
    """
    if not entries:
        return pd.DataFrame()
    frame = pd.DataFrame(
        {
            "date": [pd.Timestamp(e.date) for e in entries],
            "muscle_group": [e.muscle_group for e in entries],
            "volume": [e.volume for e in entries],
        }
    )
    return frame.pivot_table(
        index="date",
        columns="muscle_group",
        values="volume",
        aggfunc="sum",
        fill_value=0.0,
    ).sort_index()
