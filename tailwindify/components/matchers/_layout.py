"""
Layout, flexbox and effect keyword matchers.

These properties have a closed keyword space, so they are plain lookups;
an unknown keyword yields no class.
"""

from __future__ import annotations

from collections.abc import Mapping

from tailwindify.components.normalize import is_number, is_pct, normalize_value, to_arbitrary
from tailwindify.core.entities import MatchingContext

from .models import NO_MATCH, MatchResult
from .ports import MatcherPort

DISPLAY: dict[str, str] = {
    "block": "block",
    "inline": "inline",
    "inline-block": "inline-block",
    "flex": "flex",
    "inline-flex": "inline-flex",
    "grid": "grid",
    "inline-grid": "inline-grid",
    "table": "table",
    "table-row": "table-row",
    "table-cell": "table-cell",
    "contents": "contents",
    "list-item": "list-item",
    "flow-root": "flow-root",
    "none": "hidden",
}

POSITION: dict[str, str] = {
    name: name for name in ("static", "relative", "absolute", "fixed", "sticky")
}

OBJECT_FIT: dict[str, str] = {
    name: f"object-{name}" for name in ("contain", "cover", "fill", "none", "scale-down")
}

OVERFLOW_VALUES = ("auto", "hidden", "clip", "visible", "scroll")

VISIBILITY: dict[str, str] = {"visible": "visible", "hidden": "invisible", "collapse": "collapse"}

FLEX_DIRECTION: dict[str, str] = {
    "row": "flex-row",
    "row-reverse": "flex-row-reverse",
    "column": "flex-col",
    "column-reverse": "flex-col-reverse",
}

FLEX_WRAP: dict[str, str] = {
    "wrap": "flex-wrap",
    "nowrap": "flex-nowrap",
    "wrap-reverse": "flex-wrap-reverse",
}

JUSTIFY_CONTENT: dict[str, str] = {
    "normal": "justify-normal",
    "flex-start": "justify-start",
    "start": "justify-start",
    "flex-end": "justify-end",
    "end": "justify-end",
    "center": "justify-center",
    "space-between": "justify-between",
    "space-around": "justify-around",
    "space-evenly": "justify-evenly",
    "stretch": "justify-stretch",
}

ALIGN_ITEMS: dict[str, str] = {
    "flex-start": "items-start",
    "start": "items-start",
    "flex-end": "items-end",
    "end": "items-end",
    "center": "items-center",
    "baseline": "items-baseline",
    "stretch": "items-stretch",
}

Z_INDEX = frozenset({"0", "10", "20", "30", "40", "50", "auto"})

OPACITY_STEPS = frozenset({0, 5, 10, 15, 20, 25, 30, 35, 40, 45, 50, 55, 60, 65, 70, 75, 80, 85, 90, 95, 100})


def keyword_matcher(table: Mapping[str, str]) -> MatcherPort:
    """Matcher over a fixed keyword table."""

    def match(value: str, ctx: MatchingContext) -> MatchResult:
        return MatchResult.single(table.get(normalize_value(value), ""))

    return match


def overflow_matcher(prefix: str) -> MatcherPort:
    def match(value: str, ctx: MatchingContext) -> MatchResult:
        normalized = normalize_value(value)
        if normalized in OVERFLOW_VALUES:
            return MatchResult.single(f"{prefix}-{normalized}")
        return NO_MATCH

    return match


def match_z_index(value: str, ctx: MatchingContext) -> MatchResult:
    normalized = normalize_value(value)
    if normalized in Z_INDEX:
        return MatchResult.single(f"z-{normalized}")
    if normalized.lstrip("-").isdigit():
        if normalized.startswith("-") and normalized[1:] in Z_INDEX:
            return MatchResult.single(f"-z-{normalized[1:]}")
        return MatchResult.single(to_arbitrary("z", normalized))
    return NO_MATCH


def match_opacity(value: str, ctx: MatchingContext) -> MatchResult:
    normalized = normalize_value(value)
    if is_pct(normalized):
        percent = float(normalized[:-1])
    elif is_number(normalized):
        percent = float(normalized) * 100
    else:
        return NO_MATCH

    step = round(percent, 6)
    if step.is_integer() and int(step) in OPACITY_STEPS:
        return MatchResult.single(f"opacity-{int(step)}")
    return MatchResult.single(to_arbitrary("opacity", normalized))
