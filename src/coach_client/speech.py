"""Speech capability — an injectable text-to-speech service.

UI code talks to a SpeechService instead of a global audio player so the
voice coach can be swapped for a test double.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Protocol

from coach_client.client import DEFAULT_VOICE, CoachClient

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Voice:
    id: str
    label: str


CLOUD_VOICES: tuple[Voice, ...] = (
    Voice("alloy", "Alloy (balanced)"),
    Voice("nova", "Nova (energetic)"),
    Voice("echo", "Echo (calm)"),
    Voice("fable", "Fable (storyteller)"),
    Voice("onyx", "Onyx (deep)"),
    Voice("shimmer", "Shimmer (light)"),
)


@dataclass(frozen=True)
class SpeechOptions:
    voice: str = DEFAULT_VOICE


@dataclass
class SpeechHandle:
    """A rendered utterance. ``cancel`` stops playback on the UI side."""

    text: str
    voice: str
    audio: bytes = b""
    mime_type: str = "audio/mpeg"
    cancelled: bool = field(default=False)

    def cancel(self) -> None:
        self.cancelled = True


class SpeechService(Protocol):
    def list_voices(self) -> tuple[Voice, ...]:
        ...

    def speak(self, text: str, options: SpeechOptions | None = None) -> SpeechHandle:
        ...


class CloudSpeechService:
    """SpeechService backed by the coach client's TTS endpoint.

    Only one utterance is live at a time: a successfully rendered new one
    cancels the previous handle. A failed render leaves it playing.
    """

    def __init__(self, client: CoachClient) -> None:
        self._client = client
        self._current: SpeechHandle | None = None

    @property
    def current(self) -> SpeechHandle | None:
        return self._current

    def list_voices(self) -> tuple[Voice, ...]:
        return CLOUD_VOICES

    def speak(self, text: str, options: SpeechOptions | None = None) -> SpeechHandle:
        options = options or SpeechOptions()
        if options.voice not in {v.id for v in CLOUD_VOICES}:
            raise ValueError(f"Unknown voice {options.voice!r}")

        audio = self._client.synthesize_speech(text, options.voice)
        self.stop()
        self._current = SpeechHandle(text=text, voice=options.voice, audio=audio)
        return self._current

    def stop(self) -> None:
        if self._current is not None and not self._current.cancelled:
            self._current.cancel()
            logger.debug("Cancelled speech with voice %s", self._current.voice)
