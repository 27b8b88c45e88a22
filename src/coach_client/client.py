"""High-level coach client facade.

All language-model network I/O lives here. Calls are made once: failures
are wrapped in the coach_client exception hierarchy and raised to the
caller, never retried.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Sequence

from openai import OpenAI

from coach_engine.models.day_summary import SessionSummary
from coach_engine.models.plan import Plan

from coach_client.credentials import create_openai_client
from coach_client.exceptions import CoachAPIError, CoachClientError, CoachResponseError
from coach_client.plan_mapper import extract_error_message, map_plan_reply, parse_json_reply
from coach_client.prompts import build_messages

logger = logging.getLogger(__name__)

DEFAULT_CHAT_MODEL = "gpt-4o-mini"
DEFAULT_TTS_MODEL = "gpt-4o-mini-tts"
DEFAULT_VOICE = "alloy"


class CoachClient:
    """Facade for plan recommendation and speech synthesis."""

    def __init__(
        self,
        api_key: str | None = None,
        chat_model: str = DEFAULT_CHAT_MODEL,
        tts_model: str = DEFAULT_TTS_MODEL,
    ) -> None:
        self._openai = create_openai_client(api_key)
        self.chat_model = chat_model
        self.tts_model = tts_model

    @classmethod
    def from_openai(
        cls,
        openai_client: OpenAI,
        chat_model: str = DEFAULT_CHAT_MODEL,
        tts_model: str = DEFAULT_TTS_MODEL,
    ) -> "CoachClient":
        """Construct around an existing SDK client (or a test double)."""
        obj = cls.__new__(cls)
        obj._openai = openai_client
        obj.chat_model = chat_model
        obj.tts_model = tts_model
        return obj

    # ------------------------------------------------------------------
    # Plan recommendation
    # ------------------------------------------------------------------

    def recommend_plan(
        self, sessions: Sequence[SessionSummary], athlete_name: str,
    ) -> Plan:
        """Ask the coach model for today's plan.

        Raises:
            CoachAPIError: The API call failed.
            CoachResponseError: The reply was empty or mis-shaped.
        """
        completion = self._safe_call(
            self._openai.chat.completions.create,
            model=self.chat_model,
            response_format={"type": "json_object"},
            messages=build_messages(sessions, athlete_name),
        )
        try:
            content = completion.choices[0].message.content
        except (AttributeError, IndexError, TypeError) as exc:
            raise CoachResponseError("Coach returned no choices") from exc

        plan = map_plan_reply(parse_json_reply(content))
        logger.info(
            "Coach recommended %s with %d exercises from %d sessions",
            plan.group,
            len(plan.items),
            len(sessions),
        )
        return plan

    # ------------------------------------------------------------------
    # Speech
    # ------------------------------------------------------------------

    def synthesize_speech(self, text: str, voice: str = DEFAULT_VOICE) -> bytes:
        """Render *text* to MP3 audio bytes with the given voice."""
        if not text:
            raise ValueError("Missing text")
        response = self._safe_call(
            self._openai.audio.speech.create,
            model=self.tts_model,
            voice=voice,
            input=text,
        )
        audio = response.content
        logger.info("Synthesized %d bytes of speech with voice %s", len(audio), voice)
        return audio

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _safe_call(self, fn: Callable, *args: Any, **kwargs: Any) -> Any:
        """Call *fn* once, wrapping SDK failures in CoachAPIError."""
        try:
            return fn(*args, **kwargs)
        except CoachClientError:
            raise
        except Exception as exc:
            status = getattr(exc, "status_code", None) or getattr(exc, "status", None)
            message = extract_error_message(exc, "Coach request failed")
            logger.error("Coach API call failed (status=%s): %s", status, message)
            raise CoachAPIError(message, status_code=status) from exc
