"""Tests for coach_client.client — mock-based, no real network calls."""

from __future__ import annotations

import json
from datetime import date
from unittest.mock import MagicMock, patch

import pytest

from coach_client.client import DEFAULT_CHAT_MODEL, CoachClient
from coach_client.exceptions import CoachAPIError, CoachConfigError, CoachResponseError
from coach_engine.models.day_summary import SessionSummary
from coach_engine.models.plan import PlanItem

SESSIONS = (
    SessionSummary(date(2025, 11, 9), ("Chest",), ("Dumbbell Bench Press",), 3, 24),
)


class _StatusError(Exception):
    def __init__(self, message: str, status_code: int, body=None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.body = body


# ---------------------------------------------------------------------------
# Construction
# ---------------------------------------------------------------------------


class TestConstruction:
    def test_missing_key_raises_config_error(self, monkeypatch) -> None:
        monkeypatch.delenv("OPENAI_API_KEY", raising=False)
        with pytest.raises(CoachConfigError, match="OPENAI_API_KEY"):
            CoachClient()

    @patch("coach_client.credentials.OpenAI")
    def test_sdk_built_without_retries(self, MockOpenAI, monkeypatch) -> None:
        monkeypatch.setenv("OPENAI_API_KEY", "sk-test")
        client = CoachClient(chat_model="gpt-test")
        MockOpenAI.assert_called_once_with(api_key="sk-test", max_retries=0, timeout=60.0)
        assert client.chat_model == "gpt-test"


# ---------------------------------------------------------------------------
# recommend_plan
# ---------------------------------------------------------------------------


class TestRecommendPlan:
    def test_returns_mapped_plan(self, coach) -> None:
        plan = coach.recommend_plan(SESSIONS, "Sam")
        assert plan.group == "Back"
        assert plan.items == (PlanItem("Lat Pulldown", 4, "8–10", 120.0, ""),)
        assert plan.cue == "Stay tall."

    def test_request_shape(self, coach, mock_openai) -> None:
        coach.recommend_plan(SESSIONS, "Sam")
        kwargs = mock_openai.chat.completions.create.call_args.kwargs
        assert kwargs["model"] == DEFAULT_CHAT_MODEL
        assert kwargs["response_format"] == {"type": "json_object"}
        system, user = kwargs["messages"]
        assert system["role"] == "system"
        assert "Sam" in user["content"]
        assert "2025-11-09" in user["content"]

    def test_called_exactly_once_on_failure(self, coach, mock_openai) -> None:
        mock_openai.chat.completions.create.side_effect = _StatusError("Rate limited", 429)
        with pytest.raises(CoachAPIError) as exc_info:
            coach.recommend_plan(SESSIONS, "Sam")
        assert exc_info.value.status_code == 429
        assert str(exc_info.value) == "Rate limited"
        assert mock_openai.chat.completions.create.call_count == 1

    def test_structured_error_message_preferred(self, coach, mock_openai) -> None:
        mock_openai.chat.completions.create.side_effect = _StatusError(
            "Error code: 401", 401, body={"error": {"message": "Incorrect API key"}},
        )
        with pytest.raises(CoachAPIError, match="Incorrect API key"):
            coach.recommend_plan(SESSIONS, "Sam")

    def test_empty_completion(self, coach, mock_openai, make_completion) -> None:
        mock_openai.chat.completions.create.return_value = make_completion("")
        with pytest.raises(CoachResponseError, match="Empty completion"):
            coach.recommend_plan(SESSIONS, "Sam")

    def test_no_choices(self, coach, mock_openai) -> None:
        completion = MagicMock()
        completion.choices = []
        mock_openai.chat.completions.create.return_value = completion
        with pytest.raises(CoachResponseError, match="no choices"):
            coach.recommend_plan(SESSIONS, "Sam")

    def test_reply_without_plan(self, coach, mock_openai, make_completion) -> None:
        mock_openai.chat.completions.create.return_value = make_completion(json.dumps({"ok": 1}))
        with pytest.raises(CoachResponseError, match="missing a plan"):
            coach.recommend_plan(SESSIONS, "Sam")


# ---------------------------------------------------------------------------
# synthesize_speech
# ---------------------------------------------------------------------------


class TestSynthesizeSpeech:
    def test_returns_audio_bytes(self, coach, mock_openai) -> None:
        audio = coach.synthesize_speech("Good morning", "nova")
        assert audio == b"ID3fake-mp3"
        mock_openai.audio.speech.create.assert_called_once_with(
            model="gpt-4o-mini-tts", voice="nova", input="Good morning",
        )

    def test_missing_text(self, coach, mock_openai) -> None:
        with pytest.raises(ValueError, match="Missing text"):
            coach.synthesize_speech("")
        mock_openai.audio.speech.create.assert_not_called()

    def test_failure_wrapped(self, coach, mock_openai) -> None:
        mock_openai.audio.speech.create.side_effect = RuntimeError("socket closed")
        with pytest.raises(CoachAPIError, match="socket closed") as exc_info:
            coach.synthesize_speech("hi")
        assert exc_info.value.status_code is None
