"""Language-model coach client — all remote coach network I/O lives here."""

from coach_client.client import CoachClient
from coach_client.credentials import has_api_key, resolve_api_key
from coach_client.exceptions import (
    CoachAPIError,
    CoachClientError,
    CoachConfigError,
    CoachResponseError,
)
from coach_client.plan_mapper import extract_error_message, map_plan_reply
from coach_client.speech import CloudSpeechService, SpeechHandle, SpeechOptions, SpeechService

__all__ = [
    "CloudSpeechService",
    "CoachAPIError",
    "CoachClient",
    "CoachClientError",
    "CoachConfigError",
    "CoachResponseError",
    "SpeechHandle",
    "SpeechOptions",
    "SpeechService",
    "extract_error_message",
    "has_api_key",
    "map_plan_reply",
    "resolve_api_key",
]
