"""
Background matchers: background-image and the `background` shorthand.
"""

from __future__ import annotations

from tailwindify.components.normalize import normalize_value, split_values, to_arbitrary
from tailwindify.core.entities import MatchingContext

from ._colors import match_color
from .models import NO_MATCH, MatchResult

IMAGE_FUNCTIONS = ("linear-gradient(", "radial-gradient(", "conic-gradient(", "url(")


def match_background_image(value: str, ctx: MatchingContext) -> MatchResult:
    normalized = normalize_value(value)
    if not normalized:
        return NO_MATCH
    if normalized == "none":
        return MatchResult.single("bg-none")
    return MatchResult.single(to_arbitrary("bg", normalized))


def match_background(value: str, ctx: MatchingContext) -> MatchResult:
    """
    A single colour or image goes through the matching longhand.

    Layered shorthands (`#fff url(a.png) no-repeat`) render as one arbitrary
    value.
    """
    parts = split_values(value)
    if not parts:
        return NO_MATCH
    if len(parts) > 1:
        return MatchResult.single(to_arbitrary("bg", normalize_value(value)))

    part = parts[0]
    if part == "none" or part.startswith(IMAGE_FUNCTIONS):
        return match_background_image(part, ctx)
    return match_color("bg", part, ctx)
