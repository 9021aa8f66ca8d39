"""
Token resolver - value-to-token decision procedure.

Resolves a CSS value against a named token scale of the current layer,
falling back to the legacy layer, and reports how the verdict was reached.

Key behaviors:
- Exact matches are string equality after normalization, never numeric
- Approximate matches need approximate=True, strict=False, and a distance
  within the category threshold (a threshold of 0 disables them)
- Strict mode turns a miss into a token-miss warning
- A verdict from the legacy layer under version "current" is annotated
  with a v3-fallback warning
- Colours resolve by exact normalized equality only
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable, Hashable, Mapping
from dataclasses import dataclass

from tailwindify.components.normalize import normalize_color, normalize_value, to_number, to_px
from tailwindify.core.entities import (
    LayerName,
    MatchingContext,
    ResolutionResult,
    Thresholds,
    TokenScale,
)

logger = logging.getLogger(__name__)

# --- Cache ---


@dataclass(frozen=True)
class CacheStats:
    """Resolver cache counters."""

    size: int
    hits: int
    misses: int

    @property
    def hit_rate(self) -> float:
        lookups = self.hits + self.misses
        return self.hits / lookups if lookups else 0.0


class ResolverCache:
    """
    Memoization layer over the (deterministic) resolvers.

    Thread-safe. Clearing is always safe; a disabled cache stores nothing.
    """

    def __init__(self, enabled: bool = True) -> None:
        self.enabled = enabled
        self._entries: dict[Hashable, ResolutionResult] = {}
        self._hits = 0
        self._misses = 0
        self._lock = threading.Lock()

    def get(self, key: Hashable) -> ResolutionResult | None:
        if not self.enabled:
            return None
        with self._lock:
            result = self._entries.get(key)
            if result is None:
                self._misses += 1
            else:
                self._hits += 1
            return result

    def put(self, key: Hashable, result: ResolutionResult) -> None:
        if not self.enabled:
            return
        with self._lock:
            self._entries[key] = result

    def clear(self) -> None:
        with self._lock:
            size = len(self._entries)
            self._entries.clear()
            self._hits = 0
            self._misses = 0
        logger.debug("Resolver cache cleared (%d entries)", size)

    def stats(self) -> CacheStats:
        with self._lock:
            return CacheStats(size=len(self._entries), hits=self._hits, misses=self._misses)

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)


# --- Nearest Token ---


@dataclass(frozen=True)
class NearestToken:
    """Closest scale entry to a numeric value."""

    token: str
    token_value: float
    diff: float


def find_nearest(value: float, candidates: Mapping[str, float]) -> NearestToken | None:
    """Closest candidate by absolute difference; first one wins ties."""
    nearest: NearestToken | None = None
    for token, token_value in candidates.items():
        diff = abs(value - token_value)
        if nearest is None or diff < nearest.diff:
            nearest = NearestToken(token=token, token_value=token_value, diff=diff)
    return nearest


# --- Scale Profiles ---


@dataclass(frozen=True)
class ScaleProfile:
    """How one scale is normalized, measured and reported."""

    scale: str
    label: str
    normalize: Callable[[str], str]
    measure: Callable[[str], float | None] | None = None
    threshold: Callable[[Thresholds], float] | None = None
    precision: int = 1
    unit: str = "px"


PROFILES: dict[str, ScaleProfile] = {
    "spacing": ScaleProfile(
        scale="spacing",
        label="spacing",
        normalize=normalize_value,
        measure=to_px,
        threshold=lambda t: t.spacing_px,
    ),
    "font_size": ScaleProfile(
        scale="font_size",
        label="font-size",
        normalize=normalize_value,
        measure=to_px,
        threshold=lambda t: t.font_px,
    ),
    "line_height": ScaleProfile(
        scale="line_height",
        label="line-height",
        normalize=normalize_value,
        measure=to_number,
        threshold=lambda t: t.font_px,
        precision=2,
        unit="",
    ),
    "radius": ScaleProfile(
        scale="radius",
        label="border-radius",
        normalize=normalize_value,
        measure=to_px,
        threshold=lambda t: t.radius_px,
    ),
    "colors": ScaleProfile(
        scale="colors",
        label="color",
        normalize=normalize_color,
    ),
}


# --- Warnings ---


def _approximate_warning(profile: ScaleProfile, raw: str, token: str, diff: float) -> str:
    return (
        f"approximate: {profile.label} {raw} → {token} "
        f"({diff:.{profile.precision}f}{profile.unit} difference)"
    )


def _fallback_warning(profile: ScaleProfile, raw: str, token: str) -> str:
    return f"v3-fallback: using legacy theme for {profile.label} value {raw} → {token}"


def _token_miss_warning(profile: ScaleProfile, raw: str) -> str:
    return f"token-miss: no exact match for {profile.label} value {raw}"


# --- Resolution ---


def _search(
    raw: str,
    normalized: str,
    scale: TokenScale,
    profile: ScaleProfile,
    ctx: MatchingContext,
    layer: LayerName,
) -> ResolutionResult | None:
    """Exact then approximate search of one scale; None when it has no opinion."""
    for token, value in scale:
        if profile.normalize(value) == normalized:
            return ResolutionResult.exact(token, layer=layer)

    if not ctx.approximate or ctx.strict:
        return None
    if profile.measure is None or profile.threshold is None:
        return None

    threshold = profile.threshold(ctx.thresholds)
    if threshold <= 0:
        return None

    measured = profile.measure(raw)
    if measured is None:
        return None

    candidates: dict[str, float] = {}
    for token, value in scale:
        token_measure = profile.measure(value)
        if token_measure is not None:
            candidates[token] = token_measure

    nearest = find_nearest(measured, candidates)
    if nearest is None or nearest.diff > threshold:
        return None

    return ResolutionResult.approximate(
        nearest.token,
        nearest.diff,
        warning=_approximate_warning(profile, raw, nearest.token, nearest.diff),
        layer=layer,
    )


def _as_fallback(result: ResolutionResult, profile: ScaleProfile, raw: str) -> ResolutionResult:
    token = result.token or ""
    if result.is_approximate:
        return ResolutionResult.approximate(
            token,
            result.distance or 0.0,
            warning=f"v3-fallback {result.warning}",
            layer="legacy",
            fallback=True,
        )
    return ResolutionResult.exact(
        token,
        layer="legacy",
        fallback=True,
        warning=_fallback_warning(profile, raw, token),
    )


def _resolve(raw: str, profile: ScaleProfile, ctx: MatchingContext) -> ResolutionResult:
    normalized = profile.normalize(raw)
    consulted = False

    if ctx.version == "current":
        current = ctx.scale("current", profile.scale)
        if current:
            consulted = True
            verdict = _search(raw, normalized, current, profile, ctx, "current")
            if verdict is not None:
                return verdict
            if ctx.strict:
                return ResolutionResult.miss(_token_miss_warning(profile, raw))

    legacy = ctx.scale("legacy", profile.scale)
    if legacy:
        consulted = True
        verdict = _search(raw, normalized, legacy, profile, ctx, "legacy")
        if verdict is not None:
            if ctx.version == "current":
                return _as_fallback(verdict, profile, raw)
            return verdict

    if ctx.strict and consulted:
        return ResolutionResult.miss(_token_miss_warning(profile, raw))
    return ResolutionResult.miss()


def _cache_key(raw: str, profile: ScaleProfile, ctx: MatchingContext) -> Hashable:
    # Scales hash by value: entries are shared only between equal inputs.
    return (
        profile.scale,
        raw,
        ctx.approximate,
        ctx.strict,
        ctx.version,
        ctx.thresholds,
        ctx.scale("current", profile.scale),
        ctx.scale("legacy", profile.scale),
    )


def resolve_token(value: str | None, scale: str, ctx: MatchingContext) -> ResolutionResult:
    """
    Resolve a raw CSS value against a named scale.

    Unknown scale names and empty values are a Miss with no warning.
    """
    if not value or not value.strip():
        return ResolutionResult.miss()

    profile = PROFILES.get(scale)
    if profile is None:
        return ResolutionResult.miss()

    raw = value.strip()
    cache = ctx.cache
    key = _cache_key(raw, profile, ctx)
    if cache is not None:
        cached = cache.get(key)
        if cached is not None:
            return cached

    result = _resolve(raw, profile, ctx)
    if cache is not None:
        cache.put(key, result)
    return result


def resolve_spacing_token(value: str | None, ctx: MatchingContext) -> ResolutionResult:
    return resolve_token(value, "spacing", ctx)


def resolve_font_size_token(value: str | None, ctx: MatchingContext) -> ResolutionResult:
    return resolve_token(value, "font_size", ctx)


def resolve_line_height_token(value: str | None, ctx: MatchingContext) -> ResolutionResult:
    return resolve_token(value, "line_height", ctx)


def resolve_radius_token(value: str | None, ctx: MatchingContext) -> ResolutionResult:
    return resolve_token(value, "radius", ctx)


def resolve_color_token(value: str | None, ctx: MatchingContext) -> ResolutionResult:
    """Colour lookup; token is the class suffix ("blue-500", "white")."""
    return resolve_token(value, "colors", ctx)
