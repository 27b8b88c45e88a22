"""Group-selection strategies: local readiness heuristic and remote coach."""

from coach_engine.selection.base import GroupSelector
from coach_engine.selection.heuristic import HeuristicGroupSelector
from coach_engine.selection.remote import PlanAdvisor, RemoteGroupSelector

__all__ = [
    "GroupSelector",
    "HeuristicGroupSelector",
    "PlanAdvisor",
    "RemoteGroupSelector",
]
