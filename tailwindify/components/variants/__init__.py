"""
Variants component - Responsive, state, group and peer prefixes.
"""

from ._impl import (
    GROUP_VARIANTS,
    PEER_VARIANTS,
    PSEUDO_VARIANTS,
    RESPONSIVE_VARIANTS,
    apply_variants,
    collapse_variants,
    dedupe_variants,
    split_class,
    with_variant,
)

__all__ = [
    "GROUP_VARIANTS",
    "PEER_VARIANTS",
    "PSEUDO_VARIANTS",
    "RESPONSIVE_VARIANTS",
    "apply_variants",
    "collapse_variants",
    "dedupe_variants",
    "split_class",
    "with_variant",
]
