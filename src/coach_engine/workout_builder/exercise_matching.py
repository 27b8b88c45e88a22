"""Exercise-name matching strategies.

Logged exercise names are free text ("Dumbbell Bench Press (flat)"), so
template blocks are matched to history through a swappable strategy.
"""

from __future__ import annotations

from typing import Protocol


class ExerciseMatcher(Protocol):
    """Decides whether a logged exercise counts as a template exercise."""

    def matches(self, template_name: str, logged_name: str) -> bool:
        ...


class SubstringMatcher:
    """Case-insensitive "template name contained in logged name".

    Only this direction is checked: "DB Curl" matches "Incline DB Curl",
    but "Incline DB Curl" does not match a logged "DB Curl".
    """

    def matches(self, template_name: str, logged_name: str) -> bool:
        return template_name.lower() in logged_name.lower()


class ExactMatcher:
    """Case- and whitespace-insensitive exact name match."""

    def matches(self, template_name: str, logged_name: str) -> bool:
        return template_name.strip().lower() == logged_name.strip().lower()


DEFAULT_MATCHER: ExerciseMatcher = SubstringMatcher()
