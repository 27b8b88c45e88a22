"""Custom exception hierarchy for the coach client."""

from __future__ import annotations


class CoachClientError(Exception):
    """Base exception for all coach_client errors."""


class CoachConfigError(CoachClientError):
    """Required configuration (e.g. the API key) is missing."""


class CoachAPIError(CoachClientError):
    """A call to the language-model API failed."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class CoachResponseError(CoachClientError):
    """The API answered, but the reply was empty, not JSON, or mis-shaped."""
