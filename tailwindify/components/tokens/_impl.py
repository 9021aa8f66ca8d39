"""
Token source - design token layers for the resolver.

Loading tokens from a Tailwind config or CSS custom properties happens
outside this package; here the layers are plain immutable structures.

Key behaviors:
- Built-in default Tailwind theme used as the legacy layer
- Static source wrapping pre-built layers
- Context construction from a source plus matching policy
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from tailwindify.core.entities import (
    DEFAULT_SCREENS,
    FrameworkVersion,
    MatchingContext,
    Thresholds,
    TokenLayer,
)

from .ports import TokenSourcePort

# --- Default Theme ---

DEFAULT_THEME: dict[str, Any] = {
    "spacing": {
        "0": "0px",
        "px": "1px",
        "0.5": "0.125rem",
        "1": "0.25rem",
        "1.5": "0.375rem",
        "2": "0.5rem",
        "2.5": "0.625rem",
        "3": "0.75rem",
        "3.5": "0.875rem",
        "4": "1rem",
        "5": "1.25rem",
        "6": "1.5rem",
        "7": "1.75rem",
        "8": "2rem",
        "9": "2.25rem",
        "10": "2.5rem",
        "11": "2.75rem",
        "12": "3rem",
        "14": "3.5rem",
        "16": "4rem",
        "20": "5rem",
        "24": "6rem",
        "28": "7rem",
        "32": "8rem",
        "36": "9rem",
        "40": "10rem",
        "44": "11rem",
        "48": "12rem",
        "52": "13rem",
        "56": "14rem",
        "60": "15rem",
        "64": "16rem",
        "72": "18rem",
        "80": "20rem",
        "96": "24rem",
    },
    "colors": {
        "black": "#000000",
        "white": "#ffffff",
        "slate": {"100": "#f1f5f9", "500": "#64748b", "900": "#0f172a"},
        "gray": {
            "100": "#f3f4f6",
            "200": "#e5e7eb",
            "500": "#6b7280",
            "700": "#374151",
            "800": "#1f2937",
            "900": "#111827",
        },
        "red": {"500": "#ef4444", "600": "#dc2626"},
        "green": {"500": "#22c55e", "600": "#16a34a"},
        "blue": {"500": "#3b82f6", "600": "#2563eb", "700": "#1d4ed8"},
    },
    "font_size": {
        "xs": ["0.75rem", {"lineHeight": "1rem"}],
        "sm": ["0.875rem", {"lineHeight": "1.25rem"}],
        "base": ["1rem", {"lineHeight": "1.5rem"}],
        "lg": ["1.125rem", {"lineHeight": "1.75rem"}],
        "xl": ["1.25rem", {"lineHeight": "1.75rem"}],
        "2xl": ["1.5rem", {"lineHeight": "2rem"}],
        "3xl": ["1.875rem", {"lineHeight": "2.25rem"}],
        "4xl": ["2.25rem", {"lineHeight": "2.5rem"}],
        "5xl": ["3rem", {"lineHeight": "1"}],
        "6xl": ["3.75rem", {"lineHeight": "1"}],
        "7xl": ["4.5rem", {"lineHeight": "1"}],
        "8xl": ["6rem", {"lineHeight": "1"}],
        "9xl": ["8rem", {"lineHeight": "1"}],
    },
    "line_height": {
        "none": "1",
        "tight": "1.25",
        "snug": "1.375",
        "normal": "1.5",
        "relaxed": "1.625",
        "loose": "2",
    },
    "radius": {
        "none": "0px",
        "sm": "0.125rem",
        "DEFAULT": "0.25rem",
        "md": "0.375rem",
        "lg": "0.5rem",
        "xl": "0.75rem",
        "2xl": "1rem",
        "3xl": "1.5rem",
        "full": "9999px",
    },
    "screens": {name: f"{px}px" for name, px in DEFAULT_SCREENS.items()},
}

DEFAULT_LEGACY_LAYER = TokenLayer.from_mapping(DEFAULT_THEME)


# --- Static Source ---


@dataclass(frozen=True)
class StaticTokenSource:
    """Token source over already-built layers."""

    legacy: TokenLayer | None = None
    current: TokenLayer | None = None
    declared_version: FrameworkVersion = "current"

    @property
    def version(self) -> FrameworkVersion:
        return self.declared_version

    def legacy_layer(self) -> TokenLayer | None:
        return self.legacy

    def current_layer(self) -> TokenLayer | None:
        return self.current

    @classmethod
    def from_mappings(
        cls,
        legacy: Mapping[str, Any] | None = None,
        current: Mapping[str, Any] | None = None,
        version: FrameworkVersion = "current",
    ) -> StaticTokenSource:
        return cls(
            legacy=TokenLayer.from_mapping(legacy) if legacy is not None else None,
            current=TokenLayer.from_mapping(current) if current is not None else None,
            declared_version=version,
        )


def default_token_source(version: FrameworkVersion = "legacy") -> StaticTokenSource:
    """Source backed only by the built-in default theme."""
    return StaticTokenSource(legacy=DEFAULT_LEGACY_LAYER, declared_version=version)


# --- Context Construction ---


def screens_from_layer(layer: TokenLayer | None) -> dict[str, int]:
    """Breakpoint px values from a layer's screens scale (unparsable ones skipped)."""
    if layer is None:
        return {}
    screens: dict[str, int] = {}
    for name, value in layer.screens:
        digits = value.strip().lower().removesuffix("px")
        try:
            screens[name] = int(float(digits))
        except ValueError:
            continue
    return screens


def context_from_source(
    source: TokenSourcePort,
    *,
    strict: bool = False,
    approximate: bool = False,
    thresholds: Thresholds | None = None,
    screens: Mapping[str, int] | None = None,
    cache: Any = None,
) -> MatchingContext:
    """
    Build the read-only matching context for one transformation run.

    Screens come from the explicit argument, else the current layer, else
    the legacy layer, else the Tailwind defaults.
    """
    legacy = source.legacy_layer()
    current = source.current_layer()

    resolved_screens = dict(screens) if screens else {}
    if not resolved_screens:
        resolved_screens = screens_from_layer(current) or screens_from_layer(legacy)
    if not resolved_screens:
        resolved_screens = dict(DEFAULT_SCREENS)

    return MatchingContext(
        current=current,
        legacy=legacy,
        version=source.version,
        strict=strict,
        approximate=approximate,
        thresholds=thresholds or Thresholds(),
        screens=resolved_screens,
        cache=cache,
    )
