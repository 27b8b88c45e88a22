"""Coaching cues — session-level guidance attached to every plan."""

from __future__ import annotations

# RPE-based autoregulation with double progression on the top set
PLAN_CUE = (
    "Aim RPE ~7 on your top set. If you hit the high rep target with solid "
    "form, go +2.5–5% next time."
)
