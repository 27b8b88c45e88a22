"""Workout builder — expands muscle-group templates into session plans."""

from coach_engine.workout_builder.builder import (
    PlanBuilder,
    build_plan_for_group,
    plan_to_entries,
)
from coach_engine.workout_builder.exercise_matching import (
    ExactMatcher,
    ExerciseMatcher,
    SubstringMatcher,
)

__all__ = [
    "ExactMatcher",
    "ExerciseMatcher",
    "PlanBuilder",
    "SubstringMatcher",
    "build_plan_for_group",
    "plan_to_entries",
]
