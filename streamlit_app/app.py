"""Lift Coach — Streamlit workout dashboard.

Run with:
    streamlit run streamlit_app/app.py

Reads the same COACH_* / OPENAI_API_KEY environment as the API server.
"""

from __future__ import annotations

import dataclasses
from datetime import date

import streamlit as st

from coach_client import CoachClientError, SpeechOptions
from coach_client.speech import CLOUD_VOICES, CloudSpeechService
from coach_engine.engine import CoachEngine
from coach_engine.math.training_volume import daily_volume_frame
from coach_engine.models.enums import SortDirection
from coach_engine.models.workout_entry import WorkoutEntry
from coach_engine.store import WorkoutStore
from coach_engine.workout_builder import plan_to_entries
from coach_server.app import build_engine, default_client_factory
from coach_server.config import Settings

from helpers import (
    COLUMN_LABELS,
    MUSCLE_GROUP_SUGGESTIONS,
    SORT_KEYS,
    dashboard_stats,
    entries_to_frame,
    format_weight,
    open_store,
    sort_entries,
)

# ---------------------------------------------------------------------------
# Page config
# ---------------------------------------------------------------------------

st.set_page_config(
    page_title="Lift Coach",
    page_icon="🏋️",
    layout="wide",
)


# ---------------------------------------------------------------------------
# Cached resources
# ---------------------------------------------------------------------------


@st.cache_resource
def get_settings() -> Settings:
    return Settings.from_env()


@st.cache_resource
def get_store() -> WorkoutStore:
    return open_store(get_settings().store_path)


settings = get_settings()
store = get_store()


def _set_error(message: str | None) -> None:
    if message:
        st.session_state["coach_error"] = message
    else:
        st.session_state.pop("coach_error", None)


# ---------------------------------------------------------------------------
# Header & stat cards
# ---------------------------------------------------------------------------

st.title("Lift Coach")
st.caption("Log your sets, get today's muscle group, hear your morning check-in.")

entries = store.all()
stats = dashboard_stats(entries)
for col, (label, value) in zip(st.columns(len(stats)), stats.items()):
    col.metric(label, value)


# ---------------------------------------------------------------------------
# Recommendation
# ---------------------------------------------------------------------------

st.divider()
st.subheader("Today's recommendation")

if st.button("Get recommendation", type="primary"):
    try:
        engine = build_engine(settings, default_client_factory)
        with st.spinner("Asking the coach..."):
            result = engine.recommend(entries[: settings.history_cap])
    except CoachClientError as exc:
        _set_error(str(exc) or "Recommendation failed")
    else:
        st.session_state["coach_result"] = result
        _set_error(None)

if "flash" in st.session_state:
    st.success(st.session_state.pop("flash"))
if st.session_state.get("coach_error"):
    st.error(st.session_state["coach_error"])

result = st.session_state.get("coach_result")
if result is not None:
    plan = result.plan
    st.markdown(f"**Focus: {plan.group}** ({result.source.value})")
    if len(result.recommendations) > 1:
        st.dataframe(
            [
                {"Group": r.muscle_group, "Ready score": r.ready_score, "Ready": r.ready}
                for r in result.recommendations
            ],
            hide_index=True,
        )
    st.dataframe(
        [
            {
                "Exercise": item.exercise,
                "Sets": item.sets,
                "Reps": item.reps,
                "Target": format_weight(item.target_weight_lbs),
                "Notes": item.notes,
            }
            for item in plan.items
        ],
        hide_index=True,
    )
    if plan.cue:
        st.info(plan.cue)

    add_col, done_col = st.columns(2)
    if add_col.button("Add Plan", disabled=not plan.items):
        added = store.add_many(plan_to_entries(plan, date.today()))
        st.session_state["flash"] = f"Added {len(added)} planned sets for {plan.group}."
        st.rerun()
    if done_col.button("Add & Mark Done", disabled=not plan.items):
        added = store.add_many(plan_to_entries(plan, date.today(), mark_done=True))
        st.session_state["flash"] = f"Logged {len(added)} completed sets for {plan.group}."
        st.rerun()


# ---------------------------------------------------------------------------
# Morning greeter
# ---------------------------------------------------------------------------

st.divider()
st.subheader("Morning check-in")

greeter_engine = CoachEngine()
todays_group = result.plan.group if result is not None else None
script = greeter_engine.morning_script(settings.athlete_name, entries, todays_group)
st.write(script)
st.caption(greeter_engine.why_line(entries, todays_group))

if settings.openai_api_key:
    voice_ids = [v.id for v in CLOUD_VOICES]
    voice_labels = {v.id: v.label for v in CLOUD_VOICES}
    default_index = voice_ids.index(settings.default_voice) if settings.default_voice in voice_ids else 0
    voice = st.selectbox(
        "Voice",
        voice_ids,
        index=default_index,
        format_func=lambda v: voice_labels[v],
    )
    play_col, stop_col = st.columns(2)
    if play_col.button("Play check-in"):
        speech = st.session_state.get("speech_service")
        if speech is None:
            speech = CloudSpeechService(default_client_factory(settings))
            st.session_state["speech_service"] = speech
        try:
            handle = speech.speak(script, SpeechOptions(voice=voice))
        except (CoachClientError, ValueError) as exc:
            st.error(str(exc) or "TTS failed")
        else:
            st.session_state["speech_audio"] = handle.audio
    if stop_col.button("Stop"):
        speech = st.session_state.get("speech_service")
        if speech is not None:
            speech.stop()
        st.session_state.pop("speech_audio", None)
    if st.session_state.get("speech_audio"):
        st.audio(st.session_state["speech_audio"], format="audio/mpeg", autoplay=True)
else:
    st.caption("Set OPENAI_API_KEY to hear the check-in read aloud.")


# ---------------------------------------------------------------------------
# Log a set
# ---------------------------------------------------------------------------

st.divider()
st.subheader("Log a set")

with st.form("log_set", clear_on_submit=True):
    c1, c2, c3 = st.columns(3)
    log_date = c1.date_input("Date", value=date.today())
    exercise = c2.text_input("Exercise")
    group = c3.selectbox("Muscle group", MUSCLE_GROUP_SUGGESTIONS)
    c4, c5, c6 = st.columns(3)
    set_number = c4.number_input("Set", min_value=1, value=1, step=1)
    weight = c5.number_input("Weight (lbs)", min_value=0.0, value=0.0, step=2.5)
    reps = c6.number_input("Reps", min_value=0, value=10, step=1)
    notes = st.text_input("Notes")
    if st.form_submit_button("Add set"):
        if not exercise.strip():
            st.error("Exercise is required.")
        else:
            store.add(WorkoutEntry(
                date=log_date,
                exercise=exercise.strip(),
                set_number=int(set_number),
                weight_lbs=float(weight),
                reps=int(reps),
                muscle_group=group,
                notes=notes,
            ))
            st.rerun()


# ---------------------------------------------------------------------------
# History table
# ---------------------------------------------------------------------------

st.divider()
st.subheader("History")

if not entries:
    st.info("No sets logged yet.")
else:
    s1, s2 = st.columns(2)
    sort_key = s1.selectbox("Sort by", SORT_KEYS, format_func=lambda k: COLUMN_LABELS[k])
    direction = s2.radio("Order", ["Descending", "Ascending"], horizontal=True)
    ordered = sort_entries(
        entries,
        sort_key,
        SortDirection.DESC if direction == "Descending" else SortDirection.ASC,
    )
    st.dataframe(entries_to_frame(ordered), hide_index=True, use_container_width=True)

    with st.expander("Edit, delete or complete a set"):
        labels = {
            e.id: f"#{e.id} {e.date.isoformat()} {e.exercise} set {e.set_number}"
            for e in ordered
        }
        selected_id = st.selectbox("Set", list(labels), format_func=lambda i: labels[i])
        selected = store.get(selected_id)

        e1, e2, e3 = st.columns(3)
        new_weight = e1.number_input("Weight (lbs)", min_value=0.0, value=float(selected.weight_lbs), step=2.5, key=f"w{selected_id}")
        new_reps = e2.number_input("Reps", min_value=0, value=int(selected.reps), step=1, key=f"r{selected_id}")
        new_notes = e3.text_input("Notes", value=selected.notes, key=f"n{selected_id}")

        b1, b2, b3 = st.columns(3)
        if b1.button("Save changes"):
            store.update(selected_id, dataclasses.replace(
                selected, weight_lbs=float(new_weight), reps=int(new_reps), notes=new_notes,
            ))
            st.rerun()
        if b2.button("Mark done", disabled=selected.is_completed):
            store.mark_done(selected_id)
            st.rerun()
        if b3.button("Delete"):
            store.delete(selected_id)
            st.rerun()


# ---------------------------------------------------------------------------
# Volume chart
# ---------------------------------------------------------------------------

volume = daily_volume_frame(entries)
if not volume.empty:
    st.divider()
    st.subheader("Daily volume by muscle group (lb-reps)")
    st.bar_chart(volume)
