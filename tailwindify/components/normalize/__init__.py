"""
Normalize component - CSS value canonicalization.
"""

from ._impl import (
    DEFAULT_BASE_FONT_PX,
    is_arbitrary,
    is_em,
    is_number,
    is_pct,
    is_px,
    is_rem,
    normalize_color,
    normalize_value,
    parse_box_shorthand,
    split_values,
    to_arbitrary,
    to_number,
    to_px,
)

__all__ = [
    "DEFAULT_BASE_FONT_PX",
    "is_arbitrary",
    "is_em",
    "is_number",
    "is_pct",
    "is_px",
    "is_rem",
    "normalize_color",
    "normalize_value",
    "parse_box_shorthand",
    "split_values",
    "to_arbitrary",
    "to_number",
    "to_px",
]
