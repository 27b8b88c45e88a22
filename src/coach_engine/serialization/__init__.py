"""Serialization module — JSON wire format and history summaries."""

from coach_engine.serialization.history import cap_history, summarize_history
from coach_engine.serialization.json_codec import (
    entries_from_list,
    entries_to_list,
    entry_from_dict,
    entry_to_dict,
    plan_item_from_dict,
    plan_to_dict,
    result_to_dict,
    session_summary_to_dict,
)

__all__ = [
    "cap_history",
    "entries_from_list",
    "entries_to_list",
    "entry_from_dict",
    "entry_to_dict",
    "plan_item_from_dict",
    "plan_to_dict",
    "result_to_dict",
    "session_summary_to_dict",
    "summarize_history",
]
