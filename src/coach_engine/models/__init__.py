"""Data models for the coach engine."""

from coach_engine.models.day_summary import DaySummary, SessionSummary
from coach_engine.models.enums import RecommendationSource, SortDirection
from coach_engine.models.features import GroupFeatures
from coach_engine.models.plan import Plan, PlanItem
from coach_engine.models.recommendation import (
    GroupRecommendation,
    RecommendationResult,
)
from coach_engine.models.workout_entry import WorkoutEntry, parse_entry_date

__all__ = [
    "DaySummary",
    "GroupFeatures",
    "GroupRecommendation",
    "Plan",
    "PlanItem",
    "RecommendationResult",
    "RecommendationSource",
    "SessionSummary",
    "SortDirection",
    "WorkoutEntry",
    "parse_entry_date",
]
