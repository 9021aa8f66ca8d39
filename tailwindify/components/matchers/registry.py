"""
Property dispatch table.

A closed mapping from CSS property name to matcher, built once at import.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from functools import partial
from types import MappingProxyType

from tailwindify.components.normalize import is_arbitrary
from tailwindify.core.entities import MatchingContext

from . import _backgrounds, _borders, _colors, _layout, _spacing, _typography
from .models import NO_MATCH, MatchResult
from .ports import MatcherPort

logger = logging.getLogger(__name__)

MatcherRegistry = Mapping[str, MatcherPort]

_BOX_PROPERTIES = {"margin": "m", "padding": "p"}

_SIDE_PROPERTIES = {
    "margin-top": "mt",
    "margin-right": "mr",
    "margin-bottom": "mb",
    "margin-left": "ml",
    "padding-top": "pt",
    "padding-right": "pr",
    "padding-bottom": "pb",
    "padding-left": "pl",
    "width": "w",
    "height": "h",
    "min-width": "min-w",
    "min-height": "min-h",
    "max-width": "max-w",
    "max-height": "max-h",
    "top": "top",
    "right": "right",
    "bottom": "bottom",
    "left": "left",
    "row-gap": "gap-y",
    "column-gap": "gap-x",
}

_COLOR_PROPERTIES = {
    "color": "text",
    "background-color": "bg",
    "border-color": "border",
    "outline-color": "outline",
    "text-decoration-color": "decoration",
    "fill": "fill",
    "stroke": "stroke",
}


def build_registry() -> MatcherRegistry:
    """Read-only property -> matcher table."""
    table: dict[str, MatcherPort] = {}

    for prop, kind in _BOX_PROPERTIES.items():
        table[prop] = partial(_spacing.box_shorthand, kind)
    table["inset"] = partial(_spacing.box_shorthand, "inset")
    for prop, prefix in _SIDE_PROPERTIES.items():
        table[prop] = partial(_spacing.spacing_class, prefix)
    table["gap"] = _spacing.gap_shorthand

    for prop, prefix in _COLOR_PROPERTIES.items():
        table[prop] = partial(_colors.match_color, prefix)

    table["font-size"] = _typography.match_font_size
    table["line-height"] = _typography.match_line_height
    table["letter-spacing"] = _typography.match_letter_spacing
    table["font-weight"] = _typography.match_font_weight
    table["font-style"] = _typography.match_font_style
    table["text-align"] = _typography.match_text_align
    table["text-transform"] = _typography.match_text_transform
    table["text-decoration-line"] = _typography.match_text_decoration

    table["border"] = _borders.match_border
    table["border-radius"] = _borders.match_border_radius
    table["border-width"] = _borders.match_border_width
    table["border-style"] = _borders.match_border_style

    table["background"] = _backgrounds.match_background
    table["background-image"] = _backgrounds.match_background_image

    table["display"] = _layout.keyword_matcher(_layout.DISPLAY)
    table["position"] = _layout.keyword_matcher(_layout.POSITION)
    table["object-fit"] = _layout.keyword_matcher(_layout.OBJECT_FIT)
    table["visibility"] = _layout.keyword_matcher(_layout.VISIBILITY)
    table["overflow"] = _layout.overflow_matcher("overflow")
    table["overflow-x"] = _layout.overflow_matcher("overflow-x")
    table["overflow-y"] = _layout.overflow_matcher("overflow-y")
    table["z-index"] = _layout.match_z_index
    table["opacity"] = _layout.match_opacity
    table["flex-direction"] = _layout.keyword_matcher(_layout.FLEX_DIRECTION)
    table["flex-wrap"] = _layout.keyword_matcher(_layout.FLEX_WRAP)
    table["justify-content"] = _layout.keyword_matcher(_layout.JUSTIFY_CONTENT)
    table["align-items"] = _layout.keyword_matcher(_layout.ALIGN_ITEMS)

    return MappingProxyType(table)


DEFAULT_REGISTRY: MatcherRegistry = build_registry()


def arbitrary_value_warning(prop: str, value: str) -> str:
    return f"Used arbitrary value for '{prop}: {value}'"


def match_property(
    prop: str,
    value: str,
    ctx: MatchingContext,
    registry: MatcherRegistry | None = None,
) -> MatchResult:
    """
    Run the matcher registered for a property.

    Unknown properties and empty values give an empty result. Resolver
    warnings are passed through; one arbitrary-value warning is added when
    any produced class embeds a raw value.
    """
    table = DEFAULT_REGISTRY if registry is None else registry
    name = prop.strip().lower()
    raw = value.strip()
    matcher = table.get(name)
    if matcher is None or not raw:
        return NO_MATCH

    result = matcher(raw, ctx)
    if any(is_arbitrary(cls_name) for cls_name in result.classes):
        logger.debug("Arbitrary value for %s: %s", name, raw)
        return MatchResult(
            classes=result.classes,
            warnings=result.warnings + (arbitrary_value_warning(name, raw),),
        )
    return result
