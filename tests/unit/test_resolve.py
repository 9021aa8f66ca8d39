"""
Tests for the token resolver.

Covers exact/approximate/miss tiering, strict-mode token-miss, legacy
fallback annotations and the memoization cache.
"""

from __future__ import annotations

import threading
from dataclasses import replace

import pytest

from tailwindify.components.resolve import (
    ResolverCache,
    find_nearest,
    resolve_color_token,
    resolve_font_size_token,
    resolve_line_height_token,
    resolve_radius_token,
    resolve_spacing_token,
    resolve_token,
)
from tailwindify.core.entities import (
    MatchingContext,
    MatchKind,
    Thresholds,
    TokenLayer,
    TokenScale,
)

# --- Tiering ---


class TestSpacingTiering:
    """Exact, approximate and miss outcomes on one layer."""

    def test_exact_match_any_policy(self, current_ctx: MatchingContext) -> None:
        for ctx in (
            current_ctx,
            replace(current_ctx, approximate=True),
            replace(current_ctx, strict=True),
            replace(current_ctx, approximate=True, strict=True),
        ):
            result = resolve_spacing_token("1rem", ctx)
            assert result.kind is MatchKind.EXACT
            assert result.token == "4"
            assert result.warning is None

    def test_exact_is_string_equality(self, current_ctx: MatchingContext) -> None:
        # 16px is numerically 1rem, but not the stored string
        result = resolve_spacing_token("16px", current_ctx)
        assert result.is_miss

    def test_exact_after_normalization(self, current_ctx: MatchingContext) -> None:
        assert resolve_spacing_token("  1REM ", current_ctx).token == "4"

    def test_approximate_within_threshold(self, approx_ctx: MatchingContext) -> None:
        result = resolve_spacing_token("15px", approx_ctx)
        assert result.kind is MatchKind.APPROXIMATE
        assert result.token == "4"
        assert result.distance == 1.0
        assert result.warning == "approximate: spacing 15px → 4 (1.0px difference)"

    def test_approximate_beyond_threshold_misses(self, approx_ctx: MatchingContext) -> None:
        result = resolve_spacing_token("20px", approx_ctx)
        assert result.is_miss
        assert result.warning is None

    def test_approximate_disabled_by_flag(self, current_ctx: MatchingContext) -> None:
        assert resolve_spacing_token("15px", current_ctx).is_miss

    def test_zero_threshold_disables_approximate(self, approx_ctx: MatchingContext) -> None:
        ctx = replace(approx_ctx, thresholds=Thresholds(spacing_px=0))
        assert resolve_spacing_token("15px", ctx).is_miss

    def test_unconvertible_value_misses(self, approx_ctx: MatchingContext) -> None:
        assert resolve_spacing_token("50%", approx_ctx).is_miss

    def test_empty_value_misses_without_warning(self, approx_ctx: MatchingContext) -> None:
        for value in ("", "   ", None):
            result = resolve_spacing_token(value, approx_ctx)
            assert result.is_miss
            assert result.warning is None


class TestStrictMode:
    """Strict mode surfaces misses as token-miss warnings."""

    def test_strict_rejects_approximate(self, approx_ctx: MatchingContext) -> None:
        ctx = replace(approx_ctx, strict=True)
        result = resolve_spacing_token("15px", ctx)
        assert result.is_miss
        assert result.warning is not None
        assert "token-miss" in result.warning
        assert "15px" in result.warning

    def test_strict_does_not_fall_back_to_legacy(self, spacing_layer: TokenLayer) -> None:
        current = TokenLayer(spacing=TokenScale.from_mapping({"2": "0.5rem"}))
        ctx = MatchingContext(current=current, legacy=spacing_layer, strict=True)
        result = resolve_spacing_token("1rem", ctx)
        assert result.is_miss
        assert "token-miss" in (result.warning or "")

    def test_strict_with_no_layers_is_silent(self) -> None:
        result = resolve_spacing_token("1rem", MatchingContext(strict=True))
        assert result.is_miss
        assert result.warning is None


# --- Legacy Fallback ---


class TestLegacyFallback:
    """Verdicts from the legacy layer under version current."""

    def test_exact_fallback_annotated(self, fallback_ctx: MatchingContext) -> None:
        result = resolve_spacing_token("1rem", fallback_ctx)
        assert result.kind is MatchKind.EXACT
        assert result.token == "4"
        assert result.layer == "legacy"
        assert result.fallback is True
        assert "v3-fallback" in (result.warning or "")

    def test_approximate_fallback_annotated(self, fallback_ctx: MatchingContext) -> None:
        ctx = replace(fallback_ctx, approximate=True)
        result = resolve_spacing_token("15px", ctx)
        assert result.kind is MatchKind.APPROXIMATE
        assert result.warning == "v3-fallback approximate: spacing 15px → 4 (1.0px difference)"

    def test_current_layer_wins(self, spacing_layer: TokenLayer) -> None:
        current = TokenLayer(spacing=TokenScale.from_mapping({"base": "1rem"}))
        ctx = MatchingContext(current=current, legacy=spacing_layer)
        result = resolve_spacing_token("1rem", ctx)
        assert result.token == "base"
        assert result.layer == "current"
        assert result.warning is None

    def test_current_miss_falls_through(self, spacing_layer: TokenLayer) -> None:
        current = TokenLayer(spacing=TokenScale.from_mapping({"2": "0.5rem"}))
        ctx = MatchingContext(current=current, legacy=spacing_layer)
        result = resolve_spacing_token("2rem", ctx)
        assert result.token == "8"
        assert result.fallback is True

    def test_legacy_version_has_no_fallback_warning(self, spacing_layer: TokenLayer) -> None:
        ctx = MatchingContext(legacy=spacing_layer, version="legacy")
        result = resolve_spacing_token("1rem", ctx)
        assert result.token == "4"
        assert result.warning is None
        assert result.fallback is False

    def test_legacy_version_ignores_current_layer(self, spacing_layer: TokenLayer) -> None:
        current = TokenLayer(spacing=TokenScale.from_mapping({"base": "1rem"}))
        ctx = MatchingContext(current=current, legacy=spacing_layer, version="legacy")
        assert resolve_spacing_token("1rem", ctx).token == "4"

    def test_no_layers_miss_without_warning(self) -> None:
        result = resolve_spacing_token("1rem", MatchingContext())
        assert result.is_miss
        assert result.warning is None


# --- Other Scales ---


class TestOtherScales:
    """Font size, line height, radius and colour resolution."""

    def test_font_size_exact(self, theme_ctx: MatchingContext) -> None:
        assert resolve_font_size_token("1rem", theme_ctx).token == "base"

    def test_font_size_approximate(self, theme_ctx: MatchingContext) -> None:
        result = resolve_font_size_token("15.5px", replace(theme_ctx, approximate=True))
        assert result.token == "base"
        assert result.warning == "approximate: font-size 15.5px → base (0.5px difference)"

    def test_line_height_two_decimals(self, theme_ctx: MatchingContext) -> None:
        result = resolve_line_height_token("1.45", replace(theme_ctx, approximate=True))
        assert result.token == "normal"
        assert result.warning == "approximate: line-height 1.45 → normal (0.05 difference)"

    def test_radius_default_token(self, theme_ctx: MatchingContext) -> None:
        assert resolve_radius_token("0.25rem", theme_ctx).token == "DEFAULT"

    def test_nested_colour(self, theme_ctx: MatchingContext) -> None:
        assert resolve_color_token("#3B82F6", theme_ctx).token == "blue-500"

    def test_short_hex_colour(self, theme_ctx: MatchingContext) -> None:
        assert resolve_color_token("#fff", theme_ctx).token == "white"

    def test_colour_has_no_approximate_mode(self, theme_ctx: MatchingContext) -> None:
        result = resolve_color_token("#3b82f7", replace(theme_ctx, approximate=True))
        assert result.is_miss

    def test_unknown_scale_is_miss(self, theme_ctx: MatchingContext) -> None:
        assert resolve_token("1rem", "shadows", theme_ctx).is_miss


class TestFindNearest:
    """Test nearest-candidate search."""

    def test_picks_minimum(self) -> None:
        nearest = find_nearest(15.0, {"2": 8.0, "4": 16.0, "8": 32.0})
        assert nearest is not None
        assert nearest.token == "4"
        assert nearest.diff == 1.0

    def test_first_wins_ties(self) -> None:
        nearest = find_nearest(12.0, {"a": 8.0, "b": 16.0})
        assert nearest is not None
        assert nearest.token == "a"

    def test_no_candidates(self) -> None:
        assert find_nearest(1.0, {}) is None


# --- Cache ---


class TestResolverCache:
    """The cache is a pure memoization layer."""

    @pytest.mark.parametrize("value", ["1rem", "15px", "20px", "", "2rem"])
    def test_same_results_with_and_without_cache(
        self, approx_ctx: MatchingContext, cache: ResolverCache, value: str
    ) -> None:
        cached_ctx = replace(approx_ctx, cache=cache)
        first = resolve_spacing_token(value, cached_ctx)
        second = resolve_spacing_token(value, cached_ctx)
        assert first == second == resolve_spacing_token(value, approx_ctx)

    def test_hits_counted(self, approx_ctx: MatchingContext, cache: ResolverCache) -> None:
        ctx = replace(approx_ctx, cache=cache)
        resolve_spacing_token("15px", ctx)
        resolve_spacing_token("15px", ctx)
        stats = cache.stats()
        assert stats.size == 1
        assert stats.hits == 1
        assert stats.misses == 1
        assert stats.hit_rate == 0.5

    def test_clear_is_safe(self, approx_ctx: MatchingContext, cache: ResolverCache) -> None:
        ctx = replace(approx_ctx, cache=cache)
        before = resolve_spacing_token("15px", ctx)
        cache.clear()
        assert len(cache) == 0
        assert resolve_spacing_token("15px", ctx) == before

    def test_policy_is_part_of_key(self, approx_ctx: MatchingContext, cache: ResolverCache) -> None:
        lenient = replace(approx_ctx, cache=cache)
        strict = replace(approx_ctx, cache=cache, strict=True)
        assert resolve_spacing_token("15px", lenient).is_approximate
        assert resolve_spacing_token("15px", strict).is_miss

    def test_thresholds_are_part_of_key(self, approx_ctx: MatchingContext, cache: ResolverCache) -> None:
        loose = replace(approx_ctx, cache=cache)
        exact_only = replace(approx_ctx, cache=cache, thresholds=Thresholds(spacing_px=0))
        assert resolve_spacing_token("15px", loose).is_approximate
        assert resolve_spacing_token("15px", exact_only).is_miss
        assert resolve_spacing_token("15px", exact_only) == resolve_spacing_token(
            "15px", replace(exact_only, cache=None)
        )

    def test_layers_are_part_of_key(self, cache: ResolverCache) -> None:
        first = MatchingContext(
            current=TokenLayer(spacing=TokenScale.from_mapping({"4": "1rem"})),
            version="current",
            cache=cache,
        )
        second = replace(first, current=TokenLayer(spacing=TokenScale.from_mapping({"big": "1rem"})))
        assert resolve_spacing_token("1rem", first).token == "4"
        assert resolve_spacing_token("1rem", second).token == "big"

    def test_legacy_layer_is_part_of_key(self, fallback_ctx: MatchingContext, cache: ResolverCache) -> None:
        with_legacy = replace(fallback_ctx, cache=cache)
        without_legacy = replace(fallback_ctx, cache=cache, legacy=None)
        assert resolve_spacing_token("1rem", with_legacy).token == "4"
        assert resolve_spacing_token("1rem", without_legacy).is_miss

    def test_equal_contexts_share_entries(self, approx_ctx: MatchingContext, cache: ResolverCache) -> None:
        resolve_spacing_token("15px", replace(approx_ctx, cache=cache))
        rebuilt = MatchingContext(
            current=TokenLayer(spacing=TokenScale.from_mapping({"4": "1rem", "8": "2rem"})),
            version="current",
            approximate=True,
            thresholds=Thresholds(spacing_px=2.0),
            cache=cache,
        )
        resolve_spacing_token("15px", rebuilt)
        assert cache.stats().hits == 1

    def test_disabled_cache_stores_nothing(self, approx_ctx: MatchingContext) -> None:
        cache = ResolverCache(enabled=False)
        resolve_spacing_token("15px", replace(approx_ctx, cache=cache))
        assert len(cache) == 0

    def test_cache_excluded_from_context_equality(
        self, approx_ctx: MatchingContext, cache: ResolverCache
    ) -> None:
        assert replace(approx_ctx, cache=cache) == approx_ctx

    def test_concurrent_use(self, approx_ctx: MatchingContext, cache: ResolverCache) -> None:
        ctx = replace(approx_ctx, cache=cache)
        results: list[str | None] = []

        def worker() -> None:
            for _ in range(50):
                results.append(resolve_spacing_token("15px", ctx).token)

        threads = [threading.Thread(target=worker) for _ in range(4)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert results == ["4"] * 200
