"""Tests for coach_server.config — env-driven Settings."""

from __future__ import annotations

from pathlib import Path

import pytest

from coach_server.config import STRATEGY_HEURISTIC, STRATEGY_REMOTE, Settings

_ENV_VARS = (
    "OPENAI_API_KEY", "COACH_CHAT_MODEL", "COACH_TTS_MODEL", "COACH_DEFAULT_VOICE",
    "COACH_ATHLETE_NAME", "COACH_HISTORY_CAP", "COACH_STRATEGY", "COACH_STORE_PATH",
    "COACH_HOST", "COACH_PORT",
)


@pytest.fixture
def clean_env(monkeypatch):
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


class TestSettings:
    def test_defaults(self, clean_env) -> None:
        settings = Settings.from_env()
        assert settings.openai_api_key == ""
        assert settings.strategy == STRATEGY_REMOTE
        assert settings.history_cap == 200
        assert settings.default_voice == "alloy"
        assert settings.port == 8000

    def test_overrides(self, clean_env) -> None:
        clean_env.setenv("OPENAI_API_KEY", "sk-x")
        clean_env.setenv("COACH_STRATEGY", "Heuristic")
        clean_env.setenv("COACH_HISTORY_CAP", "50")
        clean_env.setenv("COACH_STORE_PATH", "/tmp/lifts.json")
        clean_env.setenv("COACH_PORT", "9000")
        settings = Settings.from_env()
        assert settings.openai_api_key == "sk-x"
        assert settings.strategy == STRATEGY_HEURISTIC
        assert settings.history_cap == 50
        assert settings.store_path == Path("/tmp/lifts.json")
        assert settings.port == 9000

    def test_unknown_strategy(self, clean_env) -> None:
        clean_env.setenv("COACH_STRATEGY", "magic")
        with pytest.raises(ValueError, match="COACH_STRATEGY"):
            Settings.from_env()

    def test_non_positive_cap(self) -> None:
        with pytest.raises(ValueError, match="COACH_HISTORY_CAP"):
            Settings(history_cap=0)
