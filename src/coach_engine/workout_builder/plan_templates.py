"""Plan templates — the exercise blocks for each muscle group.

Each template is an ordered list of exercise blocks. The PlanBuilder expands
a template into concrete PlanItems, attaching a target weight from history.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ExerciseBlock:
    """Template for a single exercise within a group session.

    Attributes:
        name: Exercise name, also used to look up past sets in history.
        sets: Number of working sets.
        rep_range: Inclusive (low, high) rep target.
        emphasis: Optional technique cue shown with the exercise.
    """

    name: str
    sets: int
    rep_range: tuple[int, int]
    emphasis: str | None = None


# ---------------------------------------------------------------------------
# Template definitions for the six core groups
# ---------------------------------------------------------------------------

PLAN_LIBRARY: dict[str, tuple[ExerciseBlock, ...]] = {
    "Chest": (
        ExerciseBlock("Dumbbell Bench Press", 3, (8, 12), emphasis="3s down, drive up"),
        ExerciseBlock("Incline DB Press", 3, (8, 12)),
        ExerciseBlock("DB/Cable Fly", 3, (12, 15), emphasis="slow stretch, squeeze"),
    ),
    "Back": (
        ExerciseBlock("Lat Pulldown", 3, (8, 12)),
        ExerciseBlock("Seated Cable Row", 3, (8, 12)),
        ExerciseBlock("Face Pull", 3, (12, 15)),
    ),
    "Shoulders": (
        ExerciseBlock("DB Overhead Press", 3, (6, 10)),
        ExerciseBlock("Lateral Raise", 4, (12, 15)),
        ExerciseBlock("Rear Delt Fly", 3, (12, 15)),
    ),
    "Biceps": (
        ExerciseBlock("DB Curl", 3, (8, 12)),
        ExerciseBlock("Incline DB Curl", 3, (10, 12)),
        ExerciseBlock("Cable Curl", 3, (12, 15)),
    ),
    "Triceps": (
        ExerciseBlock("Cable Pressdown", 3, (10, 12)),
        ExerciseBlock("Overhead Rope Ext", 3, (10, 12)),
        ExerciseBlock("Bench Dips", 3, (12, 15)),
    ),
    "Legs": (
        ExerciseBlock("Goblet Squat", 4, (8, 12)),
        ExerciseBlock("Romanian Deadlift", 3, (6, 10)),
        ExerciseBlock("Walking Lunge", 3, (10, 12)),
    ),
}


def get_template(group: str) -> tuple[ExerciseBlock, ...]:
    """Look up the exercise blocks for a muscle group.

    Unknown groups have no template and return an empty tuple.
    """
    return PLAN_LIBRARY.get(group, ())
