"""
Resolve component - CSS value to design token resolution.
"""

from ._impl import (
    PROFILES,
    CacheStats,
    NearestToken,
    ResolverCache,
    ScaleProfile,
    find_nearest,
    resolve_color_token,
    resolve_font_size_token,
    resolve_line_height_token,
    resolve_radius_token,
    resolve_spacing_token,
    resolve_token,
)

__all__ = [
    "PROFILES",
    "CacheStats",
    "NearestToken",
    "ResolverCache",
    "ScaleProfile",
    "find_nearest",
    "resolve_color_token",
    "resolve_font_size_token",
    "resolve_line_height_token",
    "resolve_radius_token",
    "resolve_spacing_token",
    "resolve_token",
]
