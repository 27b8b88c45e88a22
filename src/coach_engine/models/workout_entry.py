"""Workout entry — one logged set, the unit of the training history."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime

from coach_engine.models.enums import COMPLETION_MARKER


def parse_entry_date(value: date | str) -> date:
    """Parse a "YYYY-MM-DD" string (or ISO timestamp) into a date.

    Two-digit-year strings such as "25-11-08" are rejected instead of being
    guessed at, since they do not order correctly against ISO dates.

    Raises:
        ValueError: If *value* is not an ISO calendar date.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str) or len(value) < 10 or value[4] != "-":
        raise ValueError(f"Expected a YYYY-MM-DD date, got {value!r}")
    return date.fromisoformat(value[:10])


@dataclass(frozen=True)
class WorkoutEntry:
    """A single logged exercise set.

    ``id`` is 0 for drafts that have not been added to a WorkoutStore yet;
    the store assigns the real id on ``add``.
    """

    date: date
    exercise: str
    set_number: int
    weight_lbs: float
    reps: int
    muscle_group: str
    notes: str = ""
    done: bool | None = None
    done_at: str | None = None  # ISO timestamp, informational only
    id: int = 0

    @property
    def is_completed(self) -> bool:
        """True if flagged done or the notes carry the completion marker."""
        return self.done is True or COMPLETION_MARKER in (self.notes or "")

    @property
    def volume(self) -> float:
        """Set volume in lb-reps (weight x reps)."""
        return (self.weight_lbs or 0.0) * (self.reps or 0)
