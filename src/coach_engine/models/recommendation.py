"""Recommendation output — which group to train today and the plan for it."""

from __future__ import annotations

from dataclasses import dataclass, field

from coach_engine.models.enums import RecommendationSource
from coach_engine.models.plan import Plan


@dataclass(frozen=True)
class GroupRecommendation:
    """Readiness verdict for a single muscle group."""

    muscle_group: str
    ready_score: float
    ready: bool


@dataclass(frozen=True)
class RecommendationResult:
    """Everything a recommendation call returns to the UI.

    ``chosen`` is None only when there is nothing to recommend (no groups
    known to the selector).
    """

    recommendations: tuple[GroupRecommendation, ...]
    chosen: GroupRecommendation | None
    plan: Plan
    source: RecommendationSource = RecommendationSource.HEURISTIC
