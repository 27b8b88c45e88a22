"""Maps raw coach replies and SDK errors onto engine types.

The model is asked for a fixed JSON shape but is not trusted to follow it:
missing fields get defaults, a missing plan is an error.
"""

from __future__ import annotations

import json
from typing import Any, Mapping

from coach_engine.models.plan import Plan
from coach_engine.serialization.json_codec import plan_item_from_dict

from coach_client.exceptions import CoachResponseError


def parse_json_reply(content: str | None) -> dict[str, Any]:
    """Decode the completion text into a JSON object.

    Raises:
        CoachResponseError: If the content is empty, not JSON, or not an
            object.
    """
    if not content:
        raise CoachResponseError("Empty completion from coach")
    try:
        reply = json.loads(content)
    except json.JSONDecodeError as exc:
        raise CoachResponseError(f"Coach reply is not valid JSON: {exc}") from exc
    if not isinstance(reply, dict):
        raise CoachResponseError("Coach reply is not a JSON object")
    return reply


def map_plan_reply(reply: Mapping[str, Any]) -> Plan:
    """Normalise a ``{"plan": {...}}`` reply into a Plan.

    Items get ``sets`` 3 and ``reps`` "8–12" when missing, a null target
    weight when absent, and empty notes by default.

    Raises:
        CoachResponseError: If the plan or its group is missing.
    """
    raw_plan = reply.get("plan")
    if not isinstance(raw_plan, Mapping):
        raise CoachResponseError("Coach reply is missing a plan")
    group = raw_plan.get("group")
    if not isinstance(group, str) or not group.strip():
        raise CoachResponseError("Coach plan is missing a muscle group")

    raw_items = raw_plan.get("items") or []
    if not isinstance(raw_items, list):
        raise CoachResponseError("Coach plan items must be a list")

    items = tuple(
        plan_item_from_dict(it) for it in raw_items if isinstance(it, Mapping)
    )
    return Plan(group=group.strip(), items=items, cue=str(raw_plan.get("cue") or ""))


def extract_error_message(exc: BaseException, fallback: str) -> str:
    """Best human-readable message for *exc*.

    Looks for a structured ``error.message`` in the SDK error body first,
    then the exception's own message, then *fallback*.
    """
    body = getattr(exc, "body", None)
    if isinstance(body, Mapping):
        err = body.get("error", body)
        if isinstance(err, Mapping) and err.get("message"):
            return str(err["message"])
        if isinstance(err, str) and err:
            return err

    message = getattr(exc, "message", None) or str(exc)
    return message or fallback
