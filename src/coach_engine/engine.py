"""CoachEngine — the orchestrator behind the dashboard and the HTTP routes."""

from __future__ import annotations

from datetime import date, datetime
from typing import Sequence

from coach_engine.feature_builder import build_today_features
from coach_engine.models.day_summary import DaySummary
from coach_engine.models.features import GroupFeatures
from coach_engine.models.plan import Plan
from coach_engine.models.recommendation import RecommendationResult
from coach_engine.models.workout_entry import WorkoutEntry
from coach_engine.narration import build_morning_script, build_why_line, summarize_last_day
from coach_engine.selection.base import GroupSelector
from coach_engine.selection.heuristic import HeuristicGroupSelector
from coach_engine.workout_builder.builder import PlanBuilder


class CoachEngine:
    """Ties readiness features, group selection, plans and narration together.

    Usage:
        engine = CoachEngine()                      # local heuristic
        engine = CoachEngine(RemoteGroupSelector(client, "Sam"))
        result = engine.recommend(history)
        script = engine.morning_script("Sam", history, result.plan.group)
    """

    def __init__(
        self,
        selector: GroupSelector | None = None,
        plan_builder: PlanBuilder | None = None,
    ) -> None:
        self.plan_builder = plan_builder or PlanBuilder()
        self.selector = selector or HeuristicGroupSelector(
            plan_builder=self.plan_builder,
        )

    def features(
        self,
        history: Sequence[WorkoutEntry],
        today: date | datetime | None = None,
    ) -> tuple[GroupFeatures, ...]:
        return build_today_features(history, today=today)

    def recommend(
        self,
        history: Sequence[WorkoutEntry],
        today: date | datetime | None = None,
    ) -> RecommendationResult:
        """Run the configured selector. Selector errors propagate."""
        return self.selector.select(history, today)

    def plan_for(self, group: str, history: Sequence[WorkoutEntry]) -> Plan:
        return self.plan_builder.build(group, history)

    def last_day(self, history: Sequence[WorkoutEntry]) -> DaySummary:
        return summarize_last_day(history)

    def morning_script(
        self,
        name: str,
        history: Sequence[WorkoutEntry],
        todays_group: str | None = None,
    ) -> str:
        return build_morning_script(name, summarize_last_day(history), todays_group)

    def why_line(
        self,
        history: Sequence[WorkoutEntry],
        todays_group: str | None = None,
    ) -> str:
        return build_why_line(summarize_last_day(history), todays_group)
