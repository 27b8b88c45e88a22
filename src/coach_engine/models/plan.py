"""Session plan — the output of the plan builder and the remote coach."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class PlanItem:
    """One exercise in a session plan.

    ``reps`` is a display range such as "8–12".
    """

    exercise: str
    sets: int
    reps: str
    target_weight_lbs: float | None = None
    notes: str = ""


@dataclass(frozen=True)
class Plan:
    """Concrete session plan for a single muscle group."""

    group: str
    items: tuple[PlanItem, ...] = field(default_factory=tuple)
    cue: str = ""
