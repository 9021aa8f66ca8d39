"""
Matchers component port definitions.
"""

from __future__ import annotations

from typing import Protocol

from tailwindify.core.entities import MatchingContext

from .models import MatchResult


class MatcherPort(Protocol):
    """Value matcher for one CSS property. Must be total and side-effect free."""

    def __call__(self, value: str, ctx: MatchingContext) -> MatchResult:
        """Classes for the value; an empty result means no handler."""
        ...
