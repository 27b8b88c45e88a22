"""Shared fixtures for coach_client tests — a mocked OpenAI SDK client."""

from __future__ import annotations

import json
from unittest.mock import MagicMock

import pytest

from coach_client.client import CoachClient


def _completion_with(content: str | None) -> MagicMock:
    """Fake chat completion whose first choice carries *content*."""
    completion = MagicMock()
    completion.choices = [MagicMock()]
    completion.choices[0].message.content = content
    return completion


@pytest.fixture
def mock_openai() -> MagicMock:
    """SDK double answering with a one-exercise Back plan and fake audio."""
    sdk = MagicMock()
    sdk.chat.completions.create.return_value = _completion_with(json.dumps({
        "plan": {
            "group": "Back",
            "items": [{"exercise": "Lat Pulldown", "sets": 4, "reps": "8–10", "targetWeightLbs": 120}],
            "cue": "Stay tall.",
        }
    }))
    sdk.audio.speech.create.return_value.content = b"ID3fake-mp3"
    return sdk


@pytest.fixture
def coach(mock_openai) -> CoachClient:
    return CoachClient.from_openai(mock_openai)


@pytest.fixture
def make_completion():
    """Factory for fake chat completions with the given content."""
    return _completion_with
