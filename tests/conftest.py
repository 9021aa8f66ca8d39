from __future__ import annotations

from pathlib import Path

import pytest

from tailwindify.components.resolve import ResolverCache
from tailwindify.components.tokens import DEFAULT_LEGACY_LAYER
from tailwindify.core.entities import MatchingContext, Thresholds, TokenLayer, TokenScale

PROJECT_ROOT = Path(__file__).resolve().parents[1]


@pytest.fixture
def spacing_layer() -> TokenLayer:
    """Small spacing scale: 4 -> 1rem, 8 -> 2rem."""
    return TokenLayer(spacing=TokenScale.from_mapping({"4": "1rem", "8": "2rem"}))


@pytest.fixture
def current_ctx(spacing_layer: TokenLayer) -> MatchingContext:
    """Exact-only context with the spacing scale as the current layer."""
    return MatchingContext(current=spacing_layer, version="current")


@pytest.fixture
def approx_ctx(spacing_layer: TokenLayer) -> MatchingContext:
    """Approximate matching with the default 2px spacing threshold."""
    return MatchingContext(
        current=spacing_layer,
        version="current",
        approximate=True,
        thresholds=Thresholds(spacing_px=2.0),
    )


@pytest.fixture
def fallback_ctx(spacing_layer: TokenLayer) -> MatchingContext:
    """Empty current layer; spacing only available from the legacy layer."""
    return MatchingContext(current=TokenLayer(), legacy=spacing_layer, version="current")


@pytest.fixture
def theme_ctx() -> MatchingContext:
    """Default Tailwind theme as the legacy layer, legacy version."""
    return MatchingContext(legacy=DEFAULT_LEGACY_LAYER, version="legacy")


@pytest.fixture
def cache() -> ResolverCache:
    return ResolverCache()


@pytest.fixture
def sample_settings_path() -> Path:
    """The sample tailwindify.yaml shipped at the project root."""
    return PROJECT_ROOT / "tailwindify.yaml"
