"""Tests for group selection: readiness heuristic, remote coach, and the engine."""

from __future__ import annotations

from datetime import date
from unittest.mock import MagicMock

import pytest

from coach_engine.engine import CoachEngine
from coach_engine.models.enums import RecommendationSource
from coach_engine.models.features import GroupFeatures
from coach_engine.models.plan import Plan, PlanItem
from coach_engine.models.recommendation import GroupRecommendation
from coach_engine.selection import HeuristicGroupSelector, RemoteGroupSelector
from coach_engine.selection.heuristic import choose, ready_score


def _features(group: str, days: int, volume_norm: float, ready: int = 1) -> GroupFeatures:
    return GroupFeatures(group, days, 0.0, volume_norm, 0.5, ready)


# ---------------------------------------------------------------------------
# Scoring
# ---------------------------------------------------------------------------


class TestReadyScore:
    def test_fully_rested_and_fresh(self) -> None:
        assert ready_score(_features("Chest", 99, 0.0)) == 1.0

    def test_partial_rest(self) -> None:
        # 1 of 2 rest days, half the volume budget used
        assert ready_score(_features("Chest", 1, 0.5)) == 0.5

    def test_rounded_to_two_places(self) -> None:
        assert ready_score(_features("Legs", 1, 0.0)) == 0.67

    def test_choose_prefers_ready(self) -> None:
        recs = [
            GroupRecommendation("Chest", 0.9, False),
            GroupRecommendation("Back", 0.6, True),
        ]
        assert choose(recs).muscle_group == "Back"

    def test_choose_falls_back_to_best_overall(self) -> None:
        recs = [
            GroupRecommendation("Chest", 0.4, False),
            GroupRecommendation("Back", 0.6, False),
        ]
        assert choose(recs).muscle_group == "Back"

    def test_choose_ties_keep_order(self) -> None:
        recs = [
            GroupRecommendation("Chest", 0.8, True),
            GroupRecommendation("Back", 0.8, True),
        ]
        assert choose(recs).muscle_group == "Chest"

    def test_choose_empty(self) -> None:
        assert choose([]) is None


# ---------------------------------------------------------------------------
# HeuristicGroupSelector
# ---------------------------------------------------------------------------


class TestHeuristicGroupSelector:
    def test_split_history(self, split_history, today) -> None:
        result = HeuristicGroupSelector().select(split_history, today)
        scores = {r.muscle_group: r.ready_score for r in result.recommendations}
        assert scores == {"Chest": 0.42, "Back": 0.75, "Legs": 0.85}
        assert result.chosen.muscle_group == "Legs"
        assert result.chosen.ready
        assert result.plan.group == "Legs"
        assert result.plan.items[0].target_weight_lbs == 60.0
        assert result.source is RecommendationSource.HEURISTIC

    def test_empty_history_uses_template_groups(self, today) -> None:
        result = HeuristicGroupSelector().select([], today)
        assert len(result.recommendations) == 6
        assert result.chosen.muscle_group == "Chest"
        assert len(result.plan.items) == 3

    def test_candidate_groups(self, split_history, today) -> None:
        result = HeuristicGroupSelector(["Chest", "Shoulders"]).select(split_history, today)
        assert [r.muscle_group for r in result.recommendations] == ["Chest", "Shoulders"]
        assert result.chosen.muscle_group == "Shoulders"

    def test_nothing_ready_still_chooses(self, make_entry, today) -> None:
        history = [make_entry(today, "Goblet Squat", "Legs", 50.0, 10)]
        result = HeuristicGroupSelector().select(history, today)
        assert result.chosen.muscle_group == "Legs"
        assert result.chosen.ready is False


# ---------------------------------------------------------------------------
# RemoteGroupSelector
# ---------------------------------------------------------------------------


class TestRemoteGroupSelector:
    def test_single_recommendation_from_advisor(self, split_history) -> None:
        advisor = MagicMock()
        advisor.recommend_plan.return_value = Plan(
            "Back", (PlanItem("Lat Pulldown", 3, "8–12", 120.0),), "Stay tall."
        )
        result = RemoteGroupSelector(advisor, "Sam").select(split_history)

        assert len(result.recommendations) == 1
        assert result.chosen.muscle_group == "Back"
        assert result.chosen.ready_score == 0.95
        assert result.chosen.ready is True
        assert result.plan.cue == "Stay tall."
        assert result.source is RecommendationSource.REMOTE

        sessions, name = advisor.recommend_plan.call_args.args
        assert name == "Sam"
        assert [s.date for s in sessions][0] == date(2025, 11, 9)

    def test_history_cap_applied(self, split_history) -> None:
        advisor = MagicMock()
        advisor.recommend_plan.return_value = Plan("Back")
        RemoteGroupSelector(advisor, "Sam", history_cap=1).select(split_history)
        sessions, _ = advisor.recommend_plan.call_args.args
        assert sum(s.total_sets for s in sessions) == 1

    def test_advisor_errors_propagate(self, split_history) -> None:
        advisor = MagicMock()
        advisor.recommend_plan.side_effect = RuntimeError("coach down")
        with pytest.raises(RuntimeError, match="coach down"):
            RemoteGroupSelector(advisor, "Sam").select(split_history)


# ---------------------------------------------------------------------------
# CoachEngine
# ---------------------------------------------------------------------------


class TestCoachEngine:
    def test_defaults_to_heuristic(self, split_history, today) -> None:
        result = CoachEngine().recommend(split_history, today)
        assert result.plan.group == "Legs"

    def test_features_and_plan(self, split_history, today) -> None:
        engine = CoachEngine()
        assert [f.group for f in engine.features(split_history, today)] == ["Chest", "Back", "Legs"]
        assert engine.plan_for("Chest", split_history).items[0].target_weight_lbs == 135.0

    def test_morning_script_and_why(self, split_history) -> None:
        engine = CoachEngine()
        assert engine.last_day(split_history).date == date(2025, 11, 9)
        assert engine.morning_script("Sam", split_history, "Legs").startswith("Good morning, Sam.")
        assert "Legs" in engine.why_line(split_history, "Legs")

    def test_uses_injected_selector(self, split_history) -> None:
        selector = MagicMock()
        CoachEngine(selector).recommend(split_history)
        selector.select.assert_called_once_with(split_history, None)
