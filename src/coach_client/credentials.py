"""API credential handling for the coach client.

The key is read from the environment at call time so a server can start
without one and report the problem per request instead of crashing.
"""

from __future__ import annotations

import logging
import os

from openai import OpenAI

from coach_client.exceptions import CoachConfigError

logger = logging.getLogger(__name__)

API_KEY_ENV = "OPENAI_API_KEY"
MISSING_KEY_MESSAGE = f"Server is missing {API_KEY_ENV} env var"

_DEFAULT_TIMEOUT_S = 60.0


def resolve_api_key(api_key: str | None = None) -> str:
    """Return *api_key*, or the key from the environment.

    Raises:
        CoachConfigError: If neither is set.
    """
    key = api_key or os.environ.get(API_KEY_ENV, "")
    if not key:
        logger.error("%s is missing", API_KEY_ENV)
        raise CoachConfigError(MISSING_KEY_MESSAGE)
    return key


def has_api_key(api_key: str | None = None) -> bool:
    """Return True if a key is configured."""
    try:
        resolve_api_key(api_key)
        return True
    except CoachConfigError:
        return False


def create_openai_client(
    api_key: str | None = None,
    timeout: float = _DEFAULT_TIMEOUT_S,
) -> OpenAI:
    """Build an OpenAI SDK client with SDK-level retries disabled.

    Failures surface once to the caller; nothing is retried.
    """
    return OpenAI(api_key=resolve_api_key(api_key), max_retries=0, timeout=timeout)
