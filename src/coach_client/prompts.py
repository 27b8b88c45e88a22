"""Prompt text for the remote strength coach."""

from __future__ import annotations

import json
from typing import Sequence

from coach_engine.models.day_summary import SessionSummary
from coach_engine.serialization.json_codec import session_summary_to_dict

SYSTEM_PROMPT = (
    "You are a concise, positive lifting coach who writes short, practical "
    "instructions."
)

_REPLY_SHAPE = {
    "plan": {
        "group": "Chest",
        "items": [
            {
                "exercise": "Dumbbell Bench Press",
                "sets": 3,
                "reps": "8–12",
                "targetWeightLbs": None,
                "notes": "Controlled tempo, brief pause at the bottom.",
            },
        ],
        "cue": "Aim for RPE 7–8 on your hardest set.",
    }
}

_USER_TEMPLATE = """\
You are an upbeat, evidence-based strength coach planning today's workout
for a lifter named {name}.

Recent training sessions, most recent first:

{sessions}

Each session lists the muscle groups and exercises trained that day, the
set and rep totals, and the raw sets (date, exercise, set, weightLbs, reps,
muscleGroup, notes, and done/doneAt when present).

Rules:
- Weigh recency and balance between muscle groups across days.
- Do not train the same primary group two days running unless the last
  session for it was clearly low volume.
- Pick ONE primary muscle group for today (e.g. Chest, Back, Legs,
  Shoulders, Biceps).
- Prescribe 3 gym-realistic exercises with practical rep ranges.
- With no history, start with a beginner-friendly upper-body or full-body day.
- Keep wording short; it will be read aloud.

Reply with JSON only, in exactly this shape:

{shape}

"targetWeightLbs" may be null. No extra keys and no text outside the JSON.
"""


def build_messages(
    sessions: Sequence[SessionSummary], athlete_name: str,
) -> list[dict[str, str]]:
    """Chat messages for a plan request."""
    payload = [session_summary_to_dict(s) for s in sessions]
    user = _USER_TEMPLATE.format(
        name=athlete_name,
        sessions=json.dumps(payload, indent=2, ensure_ascii=False),
        shape=json.dumps(_REPLY_SHAPE, indent=2, ensure_ascii=False),
    )
    return [
        {"role": "system", "content": SYSTEM_PROMPT},
        {"role": "user", "content": user.strip()},
    ]
