"""PlanBuilder — expands a muscle-group template into a session plan.

Looks up the group's exercise blocks, renders rep ranges, attaches a target
weight per exercise from the lifter's history, and adds the session cue.
"""

from __future__ import annotations

from datetime import date
from typing import Sequence

from coach_engine.models.enums import (
    COMPLETION_MARKER,
    DEFAULT_PLAN_REPS_LOW,
    PLANNED_MARKER,
    REP_RANGE_SEPARATOR,
)
from coach_engine.models.plan import Plan, PlanItem
from coach_engine.models.workout_entry import WorkoutEntry
from coach_engine.workout_builder.coaching_cues import PLAN_CUE
from coach_engine.workout_builder.exercise_matching import (
    DEFAULT_MATCHER,
    ExerciseMatcher,
)
from coach_engine.workout_builder.plan_templates import ExerciseBlock, get_template
from coach_engine.workout_builder.target_assigner import suggested_weight


def format_rep_range(rep_range: tuple[int, int]) -> str:
    """Render (8, 12) as "8–12"."""
    low, high = rep_range
    return f"{low}{REP_RANGE_SEPARATOR}{high}"


def rep_range_low(reps: str) -> int:
    """Low end of a rendered rep range ("8–12" -> 8).

    Accepts an en dash or a plain hyphen; falls back to 8 when the text
    does not start with a positive number.
    """
    head = reps.replace("-", REP_RANGE_SEPARATOR).split(REP_RANGE_SEPARATOR)[0]
    try:
        value = int(head.strip())
    except ValueError:
        return DEFAULT_PLAN_REPS_LOW
    return value if value > 0 else DEFAULT_PLAN_REPS_LOW


class PlanBuilder:
    """Builds session plans from the static template library.

    Usage::

        builder = PlanBuilder()
        plan = builder.build("Chest", history)
    """

    def __init__(self, matcher: ExerciseMatcher = DEFAULT_MATCHER) -> None:
        self.matcher = matcher

    def build(self, group: str, history: Sequence[WorkoutEntry] = ()) -> Plan:
        """Build the plan for *group*.

        Unknown groups produce a plan with no items (the cue is still set).
        """
        items = tuple(
            self._build_item(block, history) for block in get_template(group)
        )
        return Plan(group=group, items=items, cue=PLAN_CUE)

    def _build_item(
        self, block: ExerciseBlock, history: Sequence[WorkoutEntry],
    ) -> PlanItem:
        return PlanItem(
            exercise=block.name,
            sets=block.sets,
            reps=format_rep_range(block.rep_range),
            target_weight_lbs=suggested_weight(block.name, history, self.matcher),
            notes=block.emphasis or "",
        )


def build_plan_for_group(
    group: str,
    history: Sequence[WorkoutEntry] = (),
    matcher: ExerciseMatcher = DEFAULT_MATCHER,
) -> Plan:
    """Functional shortcut for ``PlanBuilder(matcher).build(group, history)``."""
    return PlanBuilder(matcher).build(group, history)


def plan_to_entries(
    plan: Plan, on_date: date, mark_done: bool = False,
) -> list[WorkoutEntry]:
    """Expand a plan into draft entries, one per set.

    Drafts have ``id == 0`` and are meant to be passed to
    ``WorkoutStore.add``. Reps use the low end of each range; weight uses
    the target (0 when unknown).

    Args:
        plan: The plan to log.
        on_date: Date to stamp on every set.
        mark_done: Log the sets as completed instead of planned.
    """
    notes = COMPLETION_MARKER if mark_done else PLANNED_MARKER
    drafts: list[WorkoutEntry] = []
    for item in plan.items:
        for set_number in range(1, item.sets + 1):
            drafts.append(WorkoutEntry(
                date=on_date,
                exercise=item.exercise,
                set_number=set_number,
                weight_lbs=item.target_weight_lbs or 0.0,
                reps=rep_range_low(item.reps),
                muscle_group=plan.group,
                notes=notes,
                done=True if mark_done else None,
            ))
    return drafts
