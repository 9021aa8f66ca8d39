"""
Spacing, sizing and offset matchers.

margin/padding/inset shorthands are decomposed into sides and axes:
- all four sides equal: one class (m-4)
- top == bottom and right == left: axis classes (my-4 mx-2)
- only right == left: mt/mx/mb
- otherwise one class per side
"""

from __future__ import annotations

from tailwindify.components.normalize import normalize_value, parse_box_shorthand, to_arbitrary
from tailwindify.components.resolve import resolve_spacing_token
from tailwindify.core.entities import MatchingContext

from .models import NO_MATCH, MatchResult

# (all, x, y, top, right, bottom, left)
BOX_DIRECTIONS: dict[str, tuple[str, str, str, str, str, str, str]] = {
    "m": ("m", "mx", "my", "mt", "mr", "mb", "ml"),
    "p": ("p", "px", "py", "pt", "pr", "pb", "pl"),
    "inset": ("inset", "inset-x", "inset-y", "top", "right", "bottom", "left"),
}

SIZING_PREFIXES = frozenset({"w", "h", "min-w", "min-h", "max-w", "max-h"})
NEGATABLE_PREFIXES = frozenset(
    {"m", "mx", "my", "mt", "mr", "mb", "ml", "inset", "inset-x", "inset-y", "top", "right", "bottom", "left"}
)

FRACTIONS: dict[str, str] = {
    "100%": "full",
    "50%": "1/2",
    "33.333333%": "1/3",
    "33.333333333%": "1/3",
    "66.666667%": "2/3",
    "66.666666667%": "2/3",
    "25%": "1/4",
    "75%": "3/4",
    "20%": "1/5",
    "40%": "2/5",
    "60%": "3/5",
    "80%": "4/5",
}

SIZING_KEYWORDS: dict[str, str] = {
    "min-content": "min",
    "max-content": "max",
    "fit-content": "fit",
}

SCREEN_UNITS: dict[str, str] = {"w": "100vw", "h": "100vh", "min-h": "100vh", "max-h": "100vh"}


def spacing_class(prefix: str, value: str, ctx: MatchingContext) -> MatchResult:
    """One class for one spacing value: token, keyword, fraction or arbitrary."""
    normalized = normalize_value(value)
    if not normalized or not prefix:
        return NO_MATCH

    if normalized in ("0", "0px"):
        return MatchResult.single(f"{prefix}-0")
    if normalized == "auto":
        return MatchResult.single(f"{prefix}-auto")

    if prefix in SIZING_PREFIXES:
        if normalized in FRACTIONS:
            return MatchResult.single(f"{prefix}-{FRACTIONS[normalized]}")
        if normalized in SIZING_KEYWORDS:
            return MatchResult.single(f"{prefix}-{SIZING_KEYWORDS[normalized]}")
        if SCREEN_UNITS.get(prefix) == normalized:
            return MatchResult.single(f"{prefix}-screen")

    negative = normalized.startswith("-") and prefix in NEGATABLE_PREFIXES
    lookup = normalized[1:] if negative else normalized

    result = resolve_spacing_token(lookup, ctx)
    if result.token is not None:
        sign = "-" if negative else ""
        return MatchResult.single(f"{sign}{prefix}-{result.token}", result.warning)

    return MatchResult.single(to_arbitrary(prefix, normalized), result.warning)


def box_shorthand(kind: str, value: str, ctx: MatchingContext) -> MatchResult:
    """Decompose a 1-4 value shorthand into the fewest side/axis classes."""
    values = parse_box_shorthand(value)
    if not values:
        return NO_MATCH

    all_sides, x_axis, y_axis, top, right, bottom, left = BOX_DIRECTIONS[kind]
    t, r, b, lft = values

    if t == r == b == lft:
        return spacing_class(all_sides, t, ctx)
    if t == b and r == lft:
        return spacing_class(y_axis, t, ctx) + spacing_class(x_axis, r, ctx)
    if r == lft:
        return spacing_class(top, t, ctx) + spacing_class(x_axis, r, ctx) + spacing_class(bottom, b, ctx)
    return (
        spacing_class(top, t, ctx)
        + spacing_class(right, r, ctx)
        + spacing_class(bottom, b, ctx)
        + spacing_class(left, lft, ctx)
    )


def gap_shorthand(value: str, ctx: MatchingContext) -> MatchResult:
    """gap: <row> [<column>]."""
    parts = normalize_value(value).split()
    if not parts:
        return NO_MATCH
    if len(parts) == 1 or parts[0] == parts[1]:
        return spacing_class("gap", parts[0], ctx)
    return spacing_class("gap-y", parts[0], ctx) + spacing_class("gap-x", parts[1], ctx)
