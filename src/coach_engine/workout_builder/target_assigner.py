"""Target assigner — suggests a working weight per exercise from history.

Progression is deliberately light: the suggestion is the weight last used
for the exercise. The plan cue tells the lifter when to add 2.5-5%.
"""

from __future__ import annotations

from typing import Sequence

from coach_engine.models.workout_entry import WorkoutEntry
from coach_engine.workout_builder.exercise_matching import (
    DEFAULT_MATCHER,
    ExerciseMatcher,
)


def last_weight_for(
    exercise_name: str,
    history: Sequence[WorkoutEntry],
    matcher: ExerciseMatcher = DEFAULT_MATCHER,
) -> float | None:
    """Weight of the most recent set whose exercise matches *exercise_name*.

    Sets on the same date keep their history order; the first one wins.

    Returns:
        The weight in lbs, or None if no logged set matches.
    """
    hits = [e for e in history if matcher.matches(exercise_name, e.exercise)]
    if not hits:
        return None
    return max(hits, key=lambda e: e.date).weight_lbs


def suggested_weight(
    exercise_name: str,
    history: Sequence[WorkoutEntry],
    matcher: ExerciseMatcher = DEFAULT_MATCHER,
) -> float | None:
    """Target weight for the next session (currently: repeat the last one)."""
    return last_weight_for(exercise_name, history, matcher)
