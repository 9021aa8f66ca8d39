"""
Ordering component - Deterministic class sorting and deduplication.
"""

from ._impl import (
    dedupe_classes,
    get_class_group,
    get_class_key,
    sort_classes,
)

__all__ = [
    "dedupe_classes",
    "get_class_group",
    "get_class_key",
    "sort_classes",
]
