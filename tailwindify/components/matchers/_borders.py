"""
Border matchers: radius, width, style and the `border` shorthand.
"""

from __future__ import annotations

from tailwindify.components.normalize import (
    is_em,
    is_pct,
    is_px,
    is_rem,
    normalize_value,
    split_values,
    to_arbitrary,
)
from tailwindify.components.resolve import resolve_radius_token
from tailwindify.core.entities import MatchingContext

from ._colors import match_color
from .models import NO_MATCH, MatchResult

BORDER_WIDTHS: dict[str, str] = {
    "0": "border-0",
    "0px": "border-0",
    "1px": "border",
    "2px": "border-2",
    "4px": "border-4",
    "8px": "border-8",
}

BORDER_STYLES = frozenset({"solid", "dashed", "dotted", "double", "hidden", "none"})


def _radius_class(token: str) -> str:
    return "rounded" if token == "DEFAULT" else f"rounded-{token}"


def match_border_radius(value: str, ctx: MatchingContext) -> MatchResult:
    normalized = normalize_value(value)
    if not normalized:
        return NO_MATCH
    if normalized in ("0", "0px"):
        return MatchResult.single("rounded-none")

    result = resolve_radius_token(normalized, ctx)
    if result.token is not None:
        return MatchResult.single(_radius_class(result.token), result.warning)

    # Circles and pill shapes
    if is_pct(normalized) and 45 <= float(normalized[:-1]) <= 55:
        return MatchResult.single("rounded-full")
    if is_px(normalized) and float(normalized[:-2]) >= 1000:
        return MatchResult.single("rounded-full")

    return MatchResult.single(to_arbitrary("rounded", normalized), result.warning)


def match_border_width(value: str, ctx: MatchingContext) -> MatchResult:
    normalized = normalize_value(value)
    if normalized in BORDER_WIDTHS:
        return MatchResult.single(BORDER_WIDTHS[normalized])
    return MatchResult.single(to_arbitrary("border", normalized))


def match_border_style(value: str, ctx: MatchingContext) -> MatchResult:
    normalized = normalize_value(value)
    if normalized in BORDER_STYLES:
        return MatchResult.single(f"border-{normalized}")
    return NO_MATCH


def _is_width(part: str) -> bool:
    return part in BORDER_WIDTHS or is_px(part) or is_rem(part) or is_em(part)


def match_border(value: str, ctx: MatchingContext) -> MatchResult:
    """`border: <width> <style> <color>` in any order; each part is optional."""
    parts = split_values(value)
    if not parts:
        return NO_MATCH
    if parts == ["none"]:
        return MatchResult.single("border-0")

    result = NO_MATCH
    for part in parts:
        if part in BORDER_STYLES:
            result += match_border_style(part, ctx)
        elif _is_width(part):
            result += match_border_width(part, ctx)
        else:
            result += match_color("border", part, ctx)
    return result
