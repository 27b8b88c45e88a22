"""Readiness heuristic selector — picks today's group from feature rows.

Scoring:
    ready_score = 0.5 x min(days_since_last / min_rest_days, 1)
                + 0.5 x (1 - volume_norm)

The chosen group is the highest-scoring ready group; if nothing is ready,
the highest-scoring group overall (reported with ``ready=False``). Ties
keep group order.
"""

from __future__ import annotations

from datetime import date, datetime
from typing import Sequence

from coach_engine.feature_builder import (
    build_today_features,
    distinct_groups,
    minimum_rest_days,
)
from coach_engine.models.enums import RecommendationSource
from coach_engine.models.features import GroupFeatures
from coach_engine.models.recommendation import (
    GroupRecommendation,
    RecommendationResult,
)
from coach_engine.models.workout_entry import WorkoutEntry
from coach_engine.selection.base import GroupSelector
from coach_engine.workout_builder.builder import PlanBuilder
from coach_engine.workout_builder.plan_templates import PLAN_LIBRARY


def ready_score(features: GroupFeatures) -> float:
    """Blend of recovery (rest vs. minimum) and freshness (low volume), in [0, 1]."""
    rest_ratio = min(features.days_since_last / minimum_rest_days(features.group), 1.0)
    return round(0.5 * rest_ratio + 0.5 * (1.0 - features.volume_norm), 2)


def to_recommendation(features: GroupFeatures) -> GroupRecommendation:
    return GroupRecommendation(
        muscle_group=features.group,
        ready_score=ready_score(features),
        ready=features.is_ready,
    )


def choose(
    recommendations: Sequence[GroupRecommendation],
) -> GroupRecommendation | None:
    """Best ready group, else best group overall, else None."""
    if not recommendations:
        return None
    ready = [r for r in recommendations if r.ready]
    pool = ready or list(recommendations)
    return max(pool, key=lambda r: r.ready_score)


class HeuristicGroupSelector(GroupSelector):
    """Selects today's group locally from readiness features.

    Candidate groups default to the groups seen in history; with no history
    the template groups are used so a first session can still be planned.
    """

    selector_id = "readiness_heuristic"
    source = RecommendationSource.HEURISTIC

    def __init__(
        self,
        candidate_groups: Sequence[str] = (),
        plan_builder: PlanBuilder | None = None,
    ) -> None:
        self.candidate_groups = tuple(candidate_groups)
        self.plan_builder = plan_builder or PlanBuilder()

    def select(
        self,
        history: Sequence[WorkoutEntry],
        today: date | datetime | None = None,
    ) -> RecommendationResult:
        groups = (
            self.candidate_groups
            or distinct_groups(history)
            or tuple(PLAN_LIBRARY)
        )
        rows = build_today_features(history, groups, today)
        recommendations = tuple(to_recommendation(row) for row in rows)
        chosen = choose(recommendations)

        plan_group = chosen.muscle_group if chosen is not None else ""
        return RecommendationResult(
            recommendations=recommendations,
            chosen=chosen,
            plan=self.plan_builder.build(plan_group, history),
            source=self.source,
        )
