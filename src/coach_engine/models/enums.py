"""Enumerations and training constants for the coach engine.

Rest-day minimums follow the common 48-72h recovery guidance for large
muscle groups and ~24h for small ones.
"""

from enum import Enum, IntEnum, auto


class RecommendationSource(str, Enum):
    """Which group-selection strategy produced a recommendation."""

    HEURISTIC = "heuristic"
    REMOTE = "remote"


class SortDirection(IntEnum):
    """Ordering for history views."""

    ASC = auto()
    DESC = auto()


# ---------------------------------------------------------------------------
# Completion tracking
# ---------------------------------------------------------------------------

COMPLETION_MARKER = "✓ Done"
PLANNED_MARKER = "(planned)"
NOTES_SEPARATOR = " | "

# ---------------------------------------------------------------------------
# Readiness heuristic
# ---------------------------------------------------------------------------

# Sentinel for "never trained this group"
NO_HISTORY_DAYS = 99

# Trailing volume window, inclusive on both ends
VOLUME_WINDOW_DAYS = 7

# Group is "not overloaded" while its 7-day volume stays under 1.25x median
READY_VOLUME_FACTOR = 1.25

# Volume is scaled into [0, 2 x median]
VOLUME_NORM_MEDIAN_MULTIPLE = 2.0

# Rep normalisation range and the fallback for groups with no history
REPS_NORM_LOW = 5
REPS_NORM_HIGH = 15
DEFAULT_REPS = 10

DEFAULT_MIN_REST_DAYS = 2

MIN_REST_DAYS: dict[str, int] = {
    "Chest": 2,
    "Back": 2,
    "Shoulders": 2,
    "Legs": 3,
    "Biceps": 1,
    "Triceps": 1,
    "Quads": 3,
    "Hamstrings": 3,
    "Glutes": 2,
    "Abs": 1,
}

# ---------------------------------------------------------------------------
# Remote recommendation
# ---------------------------------------------------------------------------

# Upper bound on entries forwarded to the reasoning service
HISTORY_CAP = 200

# Score attached to the single group the remote service picks
REMOTE_READY_SCORE = 0.95

DEFAULT_PLAN_SETS = 3
DEFAULT_PLAN_REPS = "8–12"
DEFAULT_PLAN_REPS_LOW = 8

REP_RANGE_SEPARATOR = "–"
