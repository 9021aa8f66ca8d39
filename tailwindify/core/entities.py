"""
Core entities shared by every tailwindify component.

Token scales, matching context, resolution results and the class token
representation. All models are immutable once constructed.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any, Literal

if TYPE_CHECKING:
    from tailwindify.components.resolve import ResolverCache

# --- Enums / Literals ---

FrameworkVersion = Literal["legacy", "current"]
LayerName = Literal["legacy", "current"]
ScaleName = Literal["spacing", "colors", "font_size", "line_height", "radius", "screens"]

SCALE_NAMES: tuple[ScaleName, ...] = (
    "spacing",
    "colors",
    "font_size",
    "line_height",
    "radius",
    "screens",
)

DEFAULT_SCREENS: dict[str, int] = {
    "sm": 640,
    "md": 768,
    "lg": 1024,
    "xl": 1280,
    "2xl": 1536,
}


class MatchKind(str, Enum):
    """Outcome of resolving a value against a token scale."""

    EXACT = "exact"
    APPROXIMATE = "approximate"
    MISS = "miss"


class SemanticGroup(int, Enum):
    """Ordering buckets for utility classes."""

    LAYOUT = 1
    FLEX_GRID = 2
    SIZING = 3
    SPACING = 4
    TYPOGRAPHY = 5
    BACKGROUND = 6
    BORDER = 7
    EFFECTS = 8
    MISC = 9

    @property
    def label(self) -> str:
        return self.name.lower().replace("_", "-")


# --- Token Scales ---


@dataclass(frozen=True)
class TokenScale:
    """Ordered token key -> canonical value mapping."""

    entries: tuple[tuple[str, str], ...] = ()

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any] | None, *, nested: bool = False) -> TokenScale:
        """
        Build a scale from a plain mapping.

        Nested colour maps ({"blue": {"500": "#3b82f6"}}) are flattened into
        "blue-500" keys when ``nested`` is set. A list/tuple value keeps its
        first element (font-size entries carry a line-height companion).
        """
        if not data:
            return cls()

        entries: list[tuple[str, str]] = []
        for key, value in data.items():
            if nested and isinstance(value, Mapping):
                for shade, shade_value in value.items():
                    if isinstance(shade_value, str):
                        entries.append((f"{key}-{shade}", shade_value))
                continue
            if isinstance(value, list | tuple):
                if not value:
                    continue
                value = value[0]
            if value is None or isinstance(value, Mapping):
                continue
            entries.append((str(key), str(value)))
        return cls(entries=tuple(entries))

    def __iter__(self) -> Iterator[tuple[str, str]]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    def __bool__(self) -> bool:
        return bool(self.entries)

    def get(self, key: str) -> str | None:
        for entry_key, value in self.entries:
            if entry_key == key:
                return value
        return None

    def keys(self) -> tuple[str, ...]:
        return tuple(key for key, _ in self.entries)


EMPTY_SCALE = TokenScale()


@dataclass(frozen=True)
class TokenLayer:
    """One layer of design tokens (legacy theme or current tokens)."""

    spacing: TokenScale = EMPTY_SCALE
    colors: TokenScale = EMPTY_SCALE
    font_size: TokenScale = EMPTY_SCALE
    line_height: TokenScale = EMPTY_SCALE
    radius: TokenScale = EMPTY_SCALE
    screens: TokenScale = EMPTY_SCALE

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any] | None) -> TokenLayer:
        """Build a layer from plain scale mappings; unknown keys are ignored."""
        if not data:
            return cls()
        return cls(
            spacing=TokenScale.from_mapping(data.get("spacing")),
            colors=TokenScale.from_mapping(data.get("colors"), nested=True),
            font_size=TokenScale.from_mapping(data.get("font_size")),
            line_height=TokenScale.from_mapping(data.get("line_height")),
            radius=TokenScale.from_mapping(data.get("radius")),
            screens=TokenScale.from_mapping(data.get("screens")),
        )

    def scale(self, name: str) -> TokenScale:
        """Scale by name; unknown names behave as an absent (empty) scale."""
        if name not in SCALE_NAMES:
            return EMPTY_SCALE
        scale = getattr(self, name, EMPTY_SCALE)
        return scale if isinstance(scale, TokenScale) else EMPTY_SCALE

    def is_empty(self) -> bool:
        return not any(self.scale(name) for name in SCALE_NAMES)


# --- Matching Context ---


@dataclass(frozen=True)
class Thresholds:
    """Per-category bounds for approximate matches."""

    spacing_px: float = 2.0
    font_px: float = 1.0
    radius_px: float = 2.0


@dataclass(frozen=True)
class MatchingContext:
    """
    Read-only input for one transformation run.

    The current layer takes precedence; the legacy layer is consulted when
    the current layer has no opinion (or when ``version`` is "legacy").
    """

    current: TokenLayer | None = None
    legacy: TokenLayer | None = None
    version: FrameworkVersion = "current"
    strict: bool = False
    approximate: bool = False
    thresholds: Thresholds = field(default_factory=Thresholds)
    screens: Mapping[str, int] = field(default_factory=lambda: dict(DEFAULT_SCREENS))
    cache: ResolverCache | None = field(default=None, compare=False, repr=False)

    def layer(self, name: LayerName) -> TokenLayer | None:
        return self.current if name == "current" else self.legacy

    def scale(self, layer: LayerName, name: str) -> TokenScale:
        token_layer = self.layer(layer)
        if token_layer is None:
            return EMPTY_SCALE
        return token_layer.scale(name)


# --- Resolution Result ---


@dataclass(frozen=True)
class ResolutionResult:
    """Exact / Approximate / Miss verdict with provenance."""

    kind: MatchKind
    token: str | None = None
    distance: float | None = None
    warning: str | None = None
    layer: LayerName | None = None
    fallback: bool = False

    @classmethod
    def exact(
        cls,
        token: str,
        *,
        layer: LayerName | None = None,
        fallback: bool = False,
        warning: str | None = None,
    ) -> ResolutionResult:
        return cls(MatchKind.EXACT, token, 0.0, warning, layer, fallback)

    @classmethod
    def approximate(
        cls,
        token: str,
        distance: float,
        *,
        warning: str,
        layer: LayerName | None = None,
        fallback: bool = False,
    ) -> ResolutionResult:
        return cls(MatchKind.APPROXIMATE, token, distance, warning, layer, fallback)

    @classmethod
    def miss(cls, warning: str | None = None) -> ResolutionResult:
        return cls(MatchKind.MISS, warning=warning)

    @property
    def is_exact(self) -> bool:
        return self.kind is MatchKind.EXACT

    @property
    def is_approximate(self) -> bool:
        return self.kind is MatchKind.APPROXIMATE

    @property
    def is_miss(self) -> bool:
        return self.kind is MatchKind.MISS


# --- Class Tokens ---


def split_variants(cls_name: str) -> list[str]:
    """
    Split a rendered class on ':' separators.

    Colons inside [...] or (...) belong to an arbitrary value and are kept.
    """
    parts: list[str] = []
    depth = 0
    current: list[str] = []
    for char in cls_name:
        if char in "[(":
            depth += 1
        elif char in "])" and depth > 0:
            depth -= 1
        if char == ":" and depth == 0:
            parts.append("".join(current))
            current = []
            continue
        current.append(char)
    parts.append("".join(current))
    return parts


@dataclass(frozen=True)
class ClassToken:
    """A utility class with its variant chain and semantic group."""

    base: str
    variants: tuple[str, ...] = ()
    group: SemanticGroup = SemanticGroup.MISC

    @classmethod
    def parse(cls, cls_name: str) -> ClassToken:
        # Imported lazily: ordering depends on this module.
        from tailwindify.components.ordering import get_class_group

        parts = split_variants(cls_name)
        base = parts[-1]
        return cls(base=base, variants=tuple(parts[:-1]), group=get_class_group(base))

    @property
    def prefix(self) -> str:
        return "".join(f"{variant}:" for variant in self.variants)

    def __str__(self) -> str:
        return f"{self.prefix}{self.base}"


# --- CSS Input ---


@dataclass(frozen=True)
class CssDeclaration:
    """One property/value pair, with the variants it was authored under."""

    prop: str
    value: str
    variants: tuple[str, ...] = ()


@dataclass(frozen=True)
class CssRule:
    """A selector with its declarations."""

    selector: str
    declarations: tuple[CssDeclaration, ...] = ()
