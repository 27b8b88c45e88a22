"""Environment-variable-based configuration for the coach server and dashboard."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from coach_engine.models.enums import HISTORY_CAP

STRATEGY_REMOTE = "remote"
STRATEGY_HEURISTIC = "heuristic"
_STRATEGIES = (STRATEGY_REMOTE, STRATEGY_HEURISTIC)


@dataclass(frozen=True)
class Settings:
    """Runtime settings. Build with :meth:`from_env` in entry points."""

    openai_api_key: str = ""
    chat_model: str = "gpt-4o-mini"
    tts_model: str = "gpt-4o-mini-tts"
    default_voice: str = "alloy"
    athlete_name: str = "Viradeth"
    history_cap: int = HISTORY_CAP
    strategy: str = STRATEGY_REMOTE
    store_path: Path = Path("data/workouts.json")
    host: str = "127.0.0.1"
    port: int = 8000

    def __post_init__(self) -> None:
        if self.strategy not in _STRATEGIES:
            raise ValueError(
                f"COACH_STRATEGY must be one of {', '.join(_STRATEGIES)}, got {self.strategy!r}"
            )
        if self.history_cap <= 0:
            raise ValueError("COACH_HISTORY_CAP must be positive")

    @classmethod
    def from_env(cls) -> "Settings":
        env = os.environ
        return cls(
            openai_api_key=env.get("OPENAI_API_KEY", ""),
            chat_model=env.get("COACH_CHAT_MODEL", "gpt-4o-mini"),
            tts_model=env.get("COACH_TTS_MODEL", "gpt-4o-mini-tts"),
            default_voice=env.get("COACH_DEFAULT_VOICE", "alloy"),
            athlete_name=env.get("COACH_ATHLETE_NAME", "Viradeth"),
            history_cap=int(env.get("COACH_HISTORY_CAP", str(HISTORY_CAP))),
            strategy=env.get("COACH_STRATEGY", STRATEGY_REMOTE).lower(),
            store_path=Path(env.get("COACH_STORE_PATH", "data/workouts.json")).expanduser(),
            host=env.get("COACH_HOST", "127.0.0.1"),
            port=int(env.get("COACH_PORT", "8000")),
        )
