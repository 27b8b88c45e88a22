"""Remote selector — delegates group choice and plan design to a coach service.

The service sees day-level summaries of the recent history and replies with
a plan; its group becomes the single recommendation.
"""

from __future__ import annotations

from datetime import date, datetime
from typing import Protocol, Sequence

from coach_engine.models.day_summary import SessionSummary
from coach_engine.models.enums import HISTORY_CAP, REMOTE_READY_SCORE, RecommendationSource
from coach_engine.models.plan import Plan
from coach_engine.models.recommendation import (
    GroupRecommendation,
    RecommendationResult,
)
from coach_engine.models.workout_entry import WorkoutEntry
from coach_engine.selection.base import GroupSelector
from coach_engine.serialization.history import summarize_history


class PlanAdvisor(Protocol):
    """Anything that can turn session summaries into a plan (e.g. CoachClient)."""

    def recommend_plan(
        self, sessions: Sequence[SessionSummary], athlete_name: str,
    ) -> Plan:
        ...


class RemoteGroupSelector(GroupSelector):
    """Asks a PlanAdvisor for today's plan.

    Errors raised by the advisor propagate unchanged; no state is touched.
    """

    selector_id = "remote_coach"
    source = RecommendationSource.REMOTE

    def __init__(
        self,
        advisor: PlanAdvisor,
        athlete_name: str,
        history_cap: int = HISTORY_CAP,
    ) -> None:
        self.advisor = advisor
        self.athlete_name = athlete_name
        self.history_cap = history_cap

    def select(
        self,
        history: Sequence[WorkoutEntry],
        today: date | datetime | None = None,
    ) -> RecommendationResult:
        sessions = summarize_history(history, self.history_cap)
        plan = self.advisor.recommend_plan(sessions, self.athlete_name)

        chosen = GroupRecommendation(
            muscle_group=plan.group,
            ready_score=REMOTE_READY_SCORE,
            ready=True,
        )
        return RecommendationResult(
            recommendations=(chosen,),
            chosen=chosen,
            plan=plan,
            source=self.source,
        )
