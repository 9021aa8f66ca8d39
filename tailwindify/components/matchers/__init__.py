"""
Matchers component - Per-property CSS value to utility class tables.
"""

from ._backgrounds import match_background, match_background_image
from ._borders import match_border, match_border_radius, match_border_style, match_border_width
from ._colors import BUILTIN_COLORS, match_color
from ._spacing import box_shorthand, gap_shorthand, spacing_class
from ._typography import (
    match_font_size,
    match_font_weight,
    match_letter_spacing,
    match_line_height,
    match_text_align,
)
from .models import NO_MATCH, MatchResult
from .ports import MatcherPort
from .registry import (
    DEFAULT_REGISTRY,
    MatcherRegistry,
    arbitrary_value_warning,
    build_registry,
    match_property,
)

__all__ = [
    # Dispatch
    "DEFAULT_REGISTRY",
    "MatcherRegistry",
    "arbitrary_value_warning",
    "build_registry",
    "match_property",
    # Matchers
    "BUILTIN_COLORS",
    "box_shorthand",
    "gap_shorthand",
    "match_background",
    "match_background_image",
    "match_border",
    "match_border_radius",
    "match_border_style",
    "match_border_width",
    "match_color",
    "match_font_size",
    "match_font_weight",
    "match_letter_spacing",
    "match_line_height",
    "match_text_align",
    "spacing_class",
    # Models / ports
    "NO_MATCH",
    "MatchResult",
    "MatcherPort",
]
