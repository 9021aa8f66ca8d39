"""
Colour matchers (text, background, border, outline, decoration, fill, stroke).
"""

from __future__ import annotations

from tailwindify.components.normalize import normalize_color, normalize_value, to_arbitrary
from tailwindify.components.resolve import resolve_color_token
from tailwindify.core.entities import MatchingContext

from .models import NO_MATCH, MatchResult

# Always available regardless of theme.
BUILTIN_COLORS: dict[str, str] = {
    "black": "black",
    "white": "white",
    "transparent": "transparent",
    "currentcolor": "current",
    "current": "current",
    "inherit": "inherit",
}


def match_color(prefix: str, value: str, ctx: MatchingContext) -> MatchResult:
    raw = normalize_value(value)
    if not raw:
        return NO_MATCH

    # Custom properties never resolve against the theme
    if raw.startswith("var("):
        return MatchResult.single(to_arbitrary(prefix, raw))

    color = normalize_color(raw)
    if color in BUILTIN_COLORS:
        return MatchResult.single(f"{prefix}-{BUILTIN_COLORS[color]}")

    result = resolve_color_token(color, ctx)
    if result.token is not None:
        return MatchResult.single(f"{prefix}-{result.token}", result.warning)
    return MatchResult.single(to_arbitrary(prefix, color), result.warning)
