"""Abstract base class for group-selection strategies."""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import date, datetime
from typing import Sequence

from coach_engine.models.enums import RecommendationSource
from coach_engine.models.recommendation import RecommendationResult
from coach_engine.models.workout_entry import WorkoutEntry


class GroupSelector(ABC):
    """Decides which muscle group to train today and what the session is.

    Strategies are independent: the local readiness heuristic and the
    remote coach each produce a complete RecommendationResult, and the
    caller picks which one to run.

    Subclasses must define:
        selector_id: unique identifier (e.g. "readiness_heuristic")
        source: RecommendationSource reported on results
        select(): the selection logic
    """

    selector_id: str
    source: RecommendationSource

    @abstractmethod
    def select(
        self,
        history: Sequence[WorkoutEntry],
        today: date | datetime | None = None,
    ) -> RecommendationResult:
        """Recommend today's group and plan from *history*."""
        ...
