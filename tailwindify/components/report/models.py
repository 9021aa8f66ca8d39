"""
Report component models.

Coverage counters, warning aggregates and the rendered summary.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Literal

# --- Enums ---

PropertyCategory = Literal[
    "spacing",
    "color",
    "typography",
    "layout",
    "border",
    "background",
    "effects",
    "flex-grid",
    "sizing",
    "other",
]

PROPERTY_CATEGORIES: tuple[PropertyCategory, ...] = (
    "spacing",
    "color",
    "typography",
    "layout",
    "border",
    "background",
    "effects",
    "flex-grid",
    "sizing",
    "other",
)

WarningCategory = Literal[
    "arbitrary-value",
    "no-handler",
    "approximate",
    "token-miss",
    "v3-fallback",
    "other",
]

WARNING_CATEGORIES: tuple[WarningCategory, ...] = (
    "arbitrary-value",
    "no-handler",
    "approximate",
    "token-miss",
    "v3-fallback",
    "other",
)


# --- Coverage ---


@dataclass(frozen=True)
class CategoryStats:
    """Matched/total counters for one property category."""

    matched: int
    total: int
    percentage: int


@dataclass(frozen=True)
class CoverageStats:
    """Coverage of a rule or stylesheet."""

    matched: int
    total: int
    percentage: int
    non_arbitrary: int = 0
    categories: Mapping[str, CategoryStats] | None = None
    warnings_by_category: Mapping[str, int] | None = None


@dataclass(frozen=True)
class WarningAggregate:
    """Deduplicated warnings plus per-category counts (before dedupe)."""

    warnings: tuple[str, ...]
    by_category: Mapping[str, int]


# --- Transform Output ---


@dataclass(frozen=True)
class TransformResult:
    """Classes, warnings and coverage for one rule."""

    classes: tuple[str, ...] = ()
    warnings: tuple[str, ...] = ()
    coverage: CoverageStats = field(
        default_factory=lambda: CoverageStats(matched=0, total=0, percentage=0)
    )


# --- Summary ---


@dataclass(frozen=True)
class SummaryTotals:
    matched: int
    total: int
    percentage: int
    non_arbitrary: int


@dataclass(frozen=True)
class SummarySamples:
    classes: tuple[str, ...]
    warnings: tuple[str, ...]


@dataclass(frozen=True)
class SummaryStats:
    """Structured counterpart of the rendered summary."""

    totals: SummaryTotals
    by_category: Mapping[str, CategoryStats]
    warnings_by_category: Mapping[str, int]
    samples: SummarySamples


@dataclass(frozen=True)
class Summary:
    """Rendered text report plus the stats it was built from."""

    text: str
    stats: SummaryStats


# --- Comparison ---


@dataclass(frozen=True)
class SelectorComparison:
    selector: str
    strict_classes: tuple[str, ...]
    approximate_classes: tuple[str, ...]
    classes_diff: int
    strict_coverage: float
    approximate_coverage: float


@dataclass(frozen=True)
class Comparison:
    """Strict vs. approximate run of the same stylesheet."""

    strict_coverage: float
    approximate_coverage: float
    coverage_diff: float
    strict_warnings: int
    approximate_warnings: int
    selector_comparison: tuple[SelectorComparison, ...]


@dataclass(frozen=True)
class Diff:
    """Side-by-side rendering of CSS declarations and generated classes."""

    css_lines: tuple[str, ...]
    tailwind_lines: tuple[str, ...]
    diff: str
