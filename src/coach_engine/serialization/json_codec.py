"""JSON codec for entries, plans and recommendation results.

The wire format keeps the camelCase keys the browser client stores
(``weightLbs``, ``muscleGroup``, ``doneAt`` ...). All functions are pure.
"""

from __future__ import annotations

import math
from typing import Any, Iterable, Mapping

from coach_engine.models.day_summary import SessionSummary
from coach_engine.models.enums import DEFAULT_PLAN_REPS, DEFAULT_PLAN_SETS
from coach_engine.models.plan import Plan, PlanItem
from coach_engine.models.recommendation import (
    GroupRecommendation,
    RecommendationResult,
)
from coach_engine.models.workout_entry import WorkoutEntry, parse_entry_date

_REQUIRED_ENTRY_KEYS = ("date", "exercise", "weightLbs", "reps", "muscleGroup")


# ---------------------------------------------------------------------------
# Workout entries
# ---------------------------------------------------------------------------


def entry_to_dict(entry: WorkoutEntry) -> dict[str, Any]:
    """Convert a WorkoutEntry to its JSON dict. Optional fields are omitted when unset."""
    out: dict[str, Any] = {
        "id": entry.id,
        "date": entry.date.isoformat(),
        "exercise": entry.exercise,
        "set": entry.set_number,
        "weightLbs": entry.weight_lbs,
        "reps": entry.reps,
        "muscleGroup": entry.muscle_group,
        "notes": entry.notes,
    }
    if entry.done is not None:
        out["done"] = entry.done
    if entry.done_at is not None:
        out["doneAt"] = entry.done_at
    return out


def entry_from_dict(data: Mapping[str, Any]) -> WorkoutEntry:
    """Parse a JSON dict into a WorkoutEntry.

    Raises:
        ValueError: If a required key is missing or a value has the wrong
            type (e.g. a non-numeric or non-finite weight, fractional reps,
            a set below 1, or a non-ISO date).
    """
    if not isinstance(data, Mapping):
        raise ValueError(f"Workout entry must be an object, got {type(data).__name__}")
    missing = [k for k in _REQUIRED_ENTRY_KEYS if k not in data]
    if missing:
        raise ValueError(f"Workout entry is missing {', '.join(missing)}")

    try:
        weight = float(data["weightLbs"] or 0)
        reps = float(data["reps"] or 0)
        raw_set = data.get("set")
        set_number = float(raw_set) if raw_set is not None else 1.0
        entry_id = int(data.get("id") or 0)
    except (TypeError, ValueError, OverflowError) as exc:
        raise ValueError(f"Invalid numeric field in workout entry: {exc}") from exc

    if not all(math.isfinite(v) for v in (weight, reps, set_number)):
        raise ValueError("weightLbs, reps and set must be finite numbers")
    if weight < 0 or reps < 0:
        raise ValueError("weightLbs and reps must be non-negative")
    if not reps.is_integer():
        raise ValueError("reps must be a whole number")
    if not set_number.is_integer() or set_number < 1:
        raise ValueError("set must be a positive whole number")

    done = data.get("done")
    return WorkoutEntry(
        id=entry_id,
        date=parse_entry_date(data["date"]),
        exercise=str(data["exercise"]),
        set_number=int(set_number),
        weight_lbs=weight,
        reps=int(reps),
        muscle_group=str(data["muscleGroup"]),
        notes=str(data.get("notes") or ""),
        done=bool(done) if done is not None else None,
        done_at=data.get("doneAt"),
    )


def entries_from_list(items: Iterable[Mapping[str, Any]]) -> list[WorkoutEntry]:
    """Parse a list of entry dicts, failing on the first invalid one."""
    return [entry_from_dict(item) for item in items]


def entries_to_list(entries: Iterable[WorkoutEntry]) -> list[dict[str, Any]]:
    return [entry_to_dict(e) for e in entries]


# ---------------------------------------------------------------------------
# Plans
# ---------------------------------------------------------------------------


def plan_to_dict(plan: Plan) -> dict[str, Any]:
    return {
        "group": plan.group,
        "items": [
            {
                "exercise": item.exercise,
                "sets": item.sets,
                "reps": item.reps,
                "targetWeightLbs": item.target_weight_lbs,
                "notes": item.notes,
            }
            for item in plan.items
        ],
        "cue": plan.cue,
    }


def plan_item_from_dict(data: Mapping[str, Any]) -> PlanItem:
    """Parse a loosely-shaped plan item, filling defaults for missing fields.

    ``sets`` falls back to 3 when absent or non-numeric, ``reps`` to "8–12".
    """
    try:
        sets = int(data.get("sets") or 0)
    except (TypeError, ValueError):
        sets = 0
    reps = data.get("reps")
    weight = data.get("targetWeightLbs")
    try:
        target = float(weight) if weight is not None else None
    except (TypeError, ValueError):
        target = None

    return PlanItem(
        exercise=str(data.get("exercise") or ""),
        sets=sets if sets > 0 else DEFAULT_PLAN_SETS,
        reps=str(reps) if reps is not None else DEFAULT_PLAN_REPS,
        target_weight_lbs=target,
        notes=str(data.get("notes") or ""),
    )


# ---------------------------------------------------------------------------
# Recommendations
# ---------------------------------------------------------------------------


def recommendation_to_dict(rec: GroupRecommendation) -> dict[str, Any]:
    return {
        "muscleGroup": rec.muscle_group,
        "readyScore": rec.ready_score,
        "ready": rec.ready,
    }


def result_to_dict(result: RecommendationResult) -> dict[str, Any]:
    """Convert a RecommendationResult to the ``/api/recommend`` response body."""
    return {
        "recommendations": [recommendation_to_dict(r) for r in result.recommendations],
        "chosen": (
            recommendation_to_dict(result.chosen)
            if result.chosen is not None else None
        ),
        "plan": plan_to_dict(result.plan),
    }


# ---------------------------------------------------------------------------
# History summaries
# ---------------------------------------------------------------------------


def session_summary_to_dict(summary: SessionSummary) -> dict[str, Any]:
    return {
        "date": summary.date.isoformat(),
        "muscleGroups": list(summary.muscle_groups),
        "exercises": list(summary.exercises),
        "totalSets": summary.total_sets,
        "totalReps": summary.total_reps,
        "entries": entries_to_list(summary.entries),
    }
