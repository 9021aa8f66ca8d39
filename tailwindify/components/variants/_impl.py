"""
Variant composer - conditional prefixes for utility classes.

Responsive breakpoints, pseudo-class/state variants and group/peer
variants are rendered as a colon-joined prefix in the order given.

Key behaviors:
- apply_variants keeps the caller's order (responsive before pseudo-state
  is the caller's job)
- Repeated segments are collapsed by the orderer via dedupe_variants
- Empty variant or class lists are returned unchanged
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from tailwindify.core.entities import DEFAULT_SCREENS, split_variants

# --- Known Variants ---

RESPONSIVE_VARIANTS: tuple[str, ...] = tuple(DEFAULT_SCREENS)

PSEUDO_VARIANTS: tuple[str, ...] = (
    "first",
    "last",
    "odd",
    "even",
    "visited",
    "hover",
    "focus",
    "focus-visible",
    "focus-within",
    "active",
    "disabled",
    "checked",
    "required",
    "invalid",
    "placeholder",
)

GROUP_VARIANTS: tuple[str, ...] = (
    "group-hover",
    "group-focus",
    "group-active",
    "group-focus-visible",
    "group-focus-within",
)

PEER_VARIANTS: tuple[str, ...] = (
    "peer-focus",
    "peer-hover",
    "peer-active",
    "peer-checked",
    "peer-focus-visible",
    "peer-focus-within",
)


def with_variant(prefix: str, classes: Sequence[str]) -> list[str]:
    """Prefix every class with a single variant."""
    if not prefix or not classes:
        return list(classes)
    return [f"{prefix}:{cls_name}" for cls_name in classes]


def apply_variants(variants: Sequence[str], classes: Sequence[str]) -> list[str]:
    """
    Prefix every class with `v1:v2:...:`, preserving variant order.

    ['md', 'hover'] + ['p-4'] -> ['md:hover:p-4'].
    """
    segments = [variant.strip() for variant in variants if variant and variant.strip()]
    if not segments or not classes:
        return list(classes)
    prefix = "".join(f"{segment}:" for segment in segments)
    return [f"{prefix}{cls_name}" for cls_name in classes]


def dedupe_variants(variants: Iterable[str]) -> list[str]:
    """First occurrence of each variant, relative order preserved."""
    seen: set[str] = set()
    result: list[str] = []
    for variant in variants:
        if variant not in seen:
            seen.add(variant)
            result.append(variant)
    return result


def split_class(cls_name: str) -> tuple[tuple[str, ...], str]:
    """Separate a rendered class into (variant segments, base class)."""
    parts = split_variants(cls_name)
    return tuple(parts[:-1]), parts[-1]


def collapse_variants(cls_name: str) -> str:
    """
    Collapse repeated variant segments of one class.

    hover:hover:text-x -> hover:text-x; hover:focus:hover:bg-y -> hover:focus:bg-y.
    """
    variants, base = split_class(cls_name)
    if not variants:
        return cls_name
    return "".join(f"{variant}:" for variant in dedupe_variants(variants)) + base
