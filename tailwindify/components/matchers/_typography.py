"""
Typography matchers.
"""

from __future__ import annotations

from tailwindify.components.normalize import normalize_value, to_arbitrary
from tailwindify.components.resolve import resolve_font_size_token, resolve_line_height_token
from tailwindify.core.entities import MatchingContext

from .models import NO_MATCH, MatchResult

LETTER_SPACING: dict[str, str] = {
    "-0.05em": "tighter",
    "-0.025em": "tight",
    "0": "normal",
    "0px": "normal",
    "0em": "normal",
    "normal": "normal",
    "0.025em": "wide",
    "0.05em": "wider",
    "0.1em": "widest",
}

FONT_WEIGHTS: dict[str, str] = {
    "100": "thin",
    "200": "extralight",
    "300": "light",
    "400": "normal",
    "normal": "normal",
    "500": "medium",
    "600": "semibold",
    "700": "bold",
    "bold": "bold",
    "800": "extrabold",
    "900": "black",
}

TEXT_ALIGN = frozenset({"left", "center", "right", "justify", "start", "end"})

FONT_STYLES: dict[str, str] = {"italic": "italic", "oblique": "italic", "normal": "not-italic"}

TEXT_TRANSFORMS: dict[str, str] = {
    "uppercase": "uppercase",
    "lowercase": "lowercase",
    "capitalize": "capitalize",
    "none": "normal-case",
}

TEXT_DECORATIONS: dict[str, str] = {
    "underline": "underline",
    "overline": "overline",
    "line-through": "line-through",
    "none": "no-underline",
}


def match_font_size(value: str, ctx: MatchingContext) -> MatchResult:
    normalized = normalize_value(value)
    if not normalized:
        return NO_MATCH
    result = resolve_font_size_token(normalized, ctx)
    if result.token is not None:
        return MatchResult.single(f"text-{result.token}", result.warning)
    return MatchResult.single(to_arbitrary("text", normalized), result.warning)


def match_line_height(value: str, ctx: MatchingContext) -> MatchResult:
    normalized = normalize_value(value)
    if not normalized:
        return NO_MATCH
    result = resolve_line_height_token(normalized, ctx)
    if result.token is not None:
        return MatchResult.single(f"leading-{result.token}", result.warning)
    return MatchResult.single(to_arbitrary("leading", normalized), result.warning)


def match_letter_spacing(value: str, ctx: MatchingContext) -> MatchResult:
    normalized = normalize_value(value)
    if normalized in LETTER_SPACING:
        return MatchResult.single(f"tracking-{LETTER_SPACING[normalized]}")
    return MatchResult.single(to_arbitrary("tracking", normalized))


def match_font_weight(value: str, ctx: MatchingContext) -> MatchResult:
    normalized = normalize_value(value)
    if normalized in FONT_WEIGHTS:
        return MatchResult.single(f"font-{FONT_WEIGHTS[normalized]}")
    return MatchResult.single(to_arbitrary("font", normalized))


def match_text_align(value: str, ctx: MatchingContext) -> MatchResult:
    normalized = normalize_value(value)
    if normalized in TEXT_ALIGN:
        return MatchResult.single(f"text-{normalized}")
    return NO_MATCH


def match_font_style(value: str, ctx: MatchingContext) -> MatchResult:
    return MatchResult.single(FONT_STYLES.get(normalize_value(value), ""))


def match_text_transform(value: str, ctx: MatchingContext) -> MatchResult:
    return MatchResult.single(TEXT_TRANSFORMS.get(normalize_value(value), ""))


def match_text_decoration(value: str, ctx: MatchingContext) -> MatchResult:
    return MatchResult.single(TEXT_DECORATIONS.get(normalize_value(value), ""))
