"""
Class orderer - deterministic sort and dedupe of utility classes.

The output depends only on the multiset of input classes, never on their
order, and sorting an already sorted list is a no-op.

Sort levels (most significant first):
1. Number of variant segments (0 before 1 before 2 ...)
2. Variant chain: breakpoints, then pseudo/state (fixed priority), then
   group-*, then peer-*, then anything else
3. Full variant prefix, lexicographically
4. Semantic group of the base class
5. Class key (prefix without value), then natural order of the base class
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Sequence

from tailwindify.components.variants import (
    GROUP_VARIANTS,
    PEER_VARIANTS,
    PSEUDO_VARIANTS,
    RESPONSIVE_VARIANTS,
    collapse_variants,
    split_class,
)
from tailwindify.core.entities import SemanticGroup

# --- Semantic Groups ---

_LAYOUT_EXACT = frozenset(
    {
        "block",
        "inline",
        "inline-block",
        "flex",
        "inline-flex",
        "grid",
        "inline-grid",
        "hidden",
        "table",
        "table-row",
        "table-cell",
        "contents",
        "list-item",
        "flow-root",
        "container",
        "static",
        "fixed",
        "absolute",
        "relative",
        "sticky",
    }
)
_LAYOUT_PREFIXES = ("inset-", "top-", "right-", "bottom-", "left-", "overflow-", "object-", "aspect-")

_FLEX_GRID_EXACT = frozenset({"grow", "shrink", "grow-0", "shrink-0"})
_FLEX_GRID_PREFIXES = (
    "flex-",
    "items-",
    "justify-",
    "grid-",
    "gap-",
    "place-",
    "content-",
    "col-",
    "row-",
    "self-",
    "order-",
    "basis-",
)

_SIZING_PREFIXES = ("w-", "h-", "min-w-", "min-h-", "max-w-", "max-h-", "size-")

_SPACING_RE = re.compile(r"^(?:[mp][xytrblse]?-|space-[xy]-)")

_TYPOGRAPHY_EXACT = frozenset(
    {
        "underline",
        "overline",
        "line-through",
        "no-underline",
        "uppercase",
        "lowercase",
        "capitalize",
        "normal-case",
        "italic",
        "not-italic",
        "truncate",
    }
)
_TYPOGRAPHY_PREFIXES = ("font-", "text-", "leading-", "tracking-", "decoration-", "whitespace-", "underline-")

_BORDER_EXACT = frozenset({"border", "rounded", "outline"})
_BORDER_PREFIXES = ("border-", "rounded-", "outline-")

_EFFECTS_EXACT = frozenset({"shadow", "filter", "isolate", "isolation-auto"})
_EFFECTS_PREFIXES = ("shadow-", "opacity-", "filter-", "mix-blend-")


def _strip_modifiers(base: str) -> str:
    """Drop the important marker and negative-value sign."""
    return base.lstrip("!").lstrip("-")


def get_class_group(cls_name: str) -> SemanticGroup:
    """
    Semantic group of a class, from its base class's literal prefix.

    Variants are ignored; arbitrary values group with their prefix
    (`w-[240px]` is sizing like `w-4`).
    """
    _, base = split_class(cls_name)
    base = _strip_modifiers(base)

    if base in _LAYOUT_EXACT or base.startswith(_LAYOUT_PREFIXES):
        return SemanticGroup.LAYOUT
    if base in _FLEX_GRID_EXACT or base.startswith(_FLEX_GRID_PREFIXES):
        return SemanticGroup.FLEX_GRID
    if base.startswith(_SIZING_PREFIXES):
        return SemanticGroup.SIZING
    if _SPACING_RE.match(base):
        return SemanticGroup.SPACING
    if base in _TYPOGRAPHY_EXACT or base.startswith(_TYPOGRAPHY_PREFIXES):
        return SemanticGroup.TYPOGRAPHY
    if base.startswith("bg-"):
        return SemanticGroup.BACKGROUND
    if base in _BORDER_EXACT or base.startswith(_BORDER_PREFIXES):
        return SemanticGroup.BORDER
    if base in _EFFECTS_EXACT or base.startswith(_EFFECTS_PREFIXES):
        return SemanticGroup.EFFECTS
    return SemanticGroup.MISC


# --- Sort Keys ---

_CLASS_KEY_RE = re.compile(r"^([a-z-]+?-?)(\d+(?:\.\d+)?)")
_DIGITS_RE = re.compile(r"(\d+)")


def get_class_key(cls_name: str) -> str:
    """Class prefix without its value: `w-[240px]` -> `w-`, `p-4` -> `p-`."""
    _, base = split_class(cls_name)
    base = _strip_modifiers(base)
    bracket = base.find("[")
    if bracket > 0:
        return base[:bracket]
    match = _CLASS_KEY_RE.match(base)
    if match:
        return match.group(1)
    return base


def _natural_key(text: str) -> tuple[tuple[int, int | str], ...]:
    return tuple(
        (0, int(part)) if part.isdigit() else (1, part)
        for part in _DIGITS_RE.split(text)
        if part
    )


def _variant_rank(variant: str, screens: Sequence[str]) -> tuple[int, int]:
    if variant in screens:
        return (0, screens.index(variant))
    if variant in PSEUDO_VARIANTS:
        return (1, PSEUDO_VARIANTS.index(variant))
    for rank, marker, known in ((2, "group-", GROUP_VARIANTS), (3, "peer-", PEER_VARIANTS)):
        if variant.startswith(marker):
            if variant in known:
                return (rank, known.index(variant))
            return (rank, len(known))
    return (4, 0)


def _sort_key(cls_name: str, screens: Sequence[str]) -> tuple[object, ...]:
    variants, base = split_class(cls_name)
    prefix = "".join(f"{variant}:" for variant in variants)
    return (
        len(variants),
        tuple(_variant_rank(variant, screens) for variant in variants),
        prefix,
        get_class_group(base).value,
        get_class_key(base),
        _natural_key(base),
        base,
    )


# --- Public API ---


def dedupe_classes(classes: Iterable[str]) -> list[str]:
    """Collapse repeated variant segments, then drop exact duplicates (first wins)."""
    seen: set[str] = set()
    result: list[str] = []
    for cls_name in classes:
        if not cls_name:
            continue
        collapsed = collapse_variants(cls_name.strip())
        if collapsed and collapsed not in seen:
            seen.add(collapsed)
            result.append(collapsed)
    return result


def sort_classes(classes: Iterable[str], screens: Iterable[str] | None = None) -> list[str]:
    """
    Deduplicate and sort classes deterministically.

    ``screens`` lists breakpoint names smallest first; defaults to the
    Tailwind breakpoints (sm, md, lg, xl, 2xl).
    """
    screen_order = tuple(screens) if screens is not None else RESPONSIVE_VARIANTS
    unique = dedupe_classes(classes)
    return sorted(unique, key=lambda cls_name: _sort_key(cls_name, screen_order))
