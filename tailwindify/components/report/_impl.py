"""
Coverage and warning reporter.

Computes match statistics per property category, classifies and dedupes
warnings, and renders a stylesheet-wide Markdown summary.

Key behaviors:
- Percentages round half up; a zero total is 0%, never a division error
- Every warning lands in exactly one of six categories
- Identical warnings collapse to one entry with an "(N occurrences)" suffix
- Merging results sums every counter (associative and commutative)
"""

from __future__ import annotations

import math
from collections import Counter
from collections.abc import Iterable, Mapping

from tailwindify.components.normalize import is_arbitrary
from tailwindify.core.entities import CssDeclaration

from .models import (
    PROPERTY_CATEGORIES,
    WARNING_CATEGORIES,
    CategoryStats,
    Comparison,
    CoverageStats,
    Diff,
    PropertyCategory,
    SelectorComparison,
    Summary,
    SummarySamples,
    SummaryStats,
    SummaryTotals,
    TransformResult,
    WarningAggregate,
    WarningCategory,
)

SAMPLE_CLASS_LIMIT = 10
SAMPLE_WARNING_LIMIT = 5

# Checked in order; first hit wins.
WARNING_MARKERS: tuple[tuple[WarningCategory, tuple[str, ...]], ...] = (
    ("arbitrary-value", ("arbitrary value",)),
    ("no-handler", ("no direct", "could not transform")),
    ("approximate", ("approximate",)),
    ("token-miss", ("token-miss", "token not found")),
    ("v3-fallback", ("v3-fallback", "falling back to v3")),
)

# --- Property Categories ---

_CATEGORY_EXACT: dict[str, PropertyCategory] = {
    "color": "color",
    "width": "sizing",
    "height": "sizing",
    "min-width": "sizing",
    "min-height": "sizing",
    "max-width": "sizing",
    "max-height": "sizing",
    "display": "layout",
    "position": "layout",
    "top": "layout",
    "right": "layout",
    "bottom": "layout",
    "left": "layout",
    "inset": "layout",
    "z-index": "layout",
    "object-fit": "layout",
    "line-height": "typography",
    "letter-spacing": "typography",
    "opacity": "effects",
    "box-shadow": "effects",
    "filter": "effects",
    "mix-blend-mode": "effects",
    "gap": "flex-grid",
    "row-gap": "flex-grid",
    "column-gap": "flex-grid",
    "order": "flex-grid",
}

_CATEGORY_PREFIXES: tuple[tuple[str, PropertyCategory], ...] = (
    ("margin", "spacing"),
    ("padding", "spacing"),
    ("font-", "typography"),
    ("text-", "typography"),
    ("overflow", "layout"),
    ("border", "border"),
    ("outline", "border"),
    ("background", "background"),
    ("flex", "flex-grid"),
    ("justify-", "flex-grid"),
    ("align-", "flex-grid"),
    ("grid", "flex-grid"),
    ("place-", "flex-grid"),
)


def property_category(prop: str) -> PropertyCategory:
    """Coverage category of a CSS property."""
    name = prop.strip().lower()
    if name in _CATEGORY_EXACT:
        return _CATEGORY_EXACT[name]
    for prefix, category in _CATEGORY_PREFIXES:
        if name.startswith(prefix):
            return category
    return "other"


# --- Coverage ---


def percentage(matched: int, total: int) -> int:
    if total <= 0:
        return 0
    return math.floor(matched / total * 100 + 0.5)


def calculate_coverage(
    matched: int,
    total: int,
    non_arbitrary: int = 0,
    categories: Mapping[str, CategoryStats] | None = None,
    warnings_by_category: Mapping[str, int] | None = None,
) -> CoverageStats:
    return CoverageStats(
        matched=matched,
        total=total,
        percentage=percentage(matched, total),
        non_arbitrary=non_arbitrary,
        categories=categories,
        warnings_by_category=warnings_by_category,
    )


def count_non_arbitrary(classes: Iterable[str]) -> int:
    return sum(1 for cls_name in classes if not is_arbitrary(cls_name))


def calculate_category_stats(
    declarations: Iterable[CssDeclaration],
    matched_props: set[str],
) -> dict[str, CategoryStats]:
    """Matched/total per property category; every category is present."""
    totals: Counter[str] = Counter()
    matched: Counter[str] = Counter()
    for decl in declarations:
        category = property_category(decl.prop)
        totals[category] += 1
        if decl.prop.strip().lower() in matched_props:
            matched[category] += 1
    return {
        category: CategoryStats(
            matched=matched[category],
            total=totals[category],
            percentage=percentage(matched[category], totals[category]),
        )
        for category in PROPERTY_CATEGORIES
    }


def merge_categories(
    tables: Iterable[Mapping[str, CategoryStats] | None],
) -> dict[str, CategoryStats]:
    matched: Counter[str] = Counter()
    totals: Counter[str] = Counter()
    for table in tables:
        if not table:
            continue
        for category, stats in table.items():
            matched[category] += stats.matched
            totals[category] += stats.total
    return {
        category: CategoryStats(
            matched=matched[category],
            total=totals[category],
            percentage=percentage(matched[category], totals[category]),
        )
        for category in PROPERTY_CATEGORIES
    }


def merge_coverage(stats: Iterable[CoverageStats]) -> CoverageStats:
    """Sum coverage counters and category tables of several results."""
    items = list(stats)
    matched = sum(item.matched for item in items)
    total = sum(item.total for item in items)
    warning_counts: Counter[str] = Counter()
    for item in items:
        if item.warnings_by_category:
            warning_counts.update(item.warnings_by_category)
    return calculate_coverage(
        matched,
        total,
        sum(item.non_arbitrary for item in items),
        merge_categories(item.categories for item in items),
        {category: warning_counts[category] for category in WARNING_CATEGORIES},
    )


# --- Warnings ---


def categorize_warning(warning: str) -> WarningCategory:
    """Classify a warning by its fixed marker phrase."""
    lowered = warning.lower()
    for category, markers in WARNING_MARKERS:
        if any(marker in lowered for marker in markers):
            return category
    return "other"


def aggregate_warnings(warnings: Iterable[str]) -> WarningAggregate:
    """Dedupe warnings (first-seen order) and count them per category."""
    items = list(warnings)
    counts = Counter(items)
    by_category: dict[str, int] = {category: 0 for category in WARNING_CATEGORIES}
    for warning in items:
        by_category[categorize_warning(warning)] += 1

    deduped: list[str] = []
    for warning in dict.fromkeys(items):
        count = counts[warning]
        deduped.append(f"{warning} ({count} occurrences)" if count > 1 else warning)
    return WarningAggregate(warnings=tuple(deduped), by_category=by_category)


# --- Summary ---


def _warning_counts(result: TransformResult) -> Mapping[str, int]:
    if result.coverage.warnings_by_category is not None:
        return result.coverage.warnings_by_category
    return aggregate_warnings(result.warnings).by_category


def _render(stats: SummaryStats) -> str:
    totals = stats.totals
    lines = [
        "# Tailwind Conversion Summary",
        "",
        f"Overall Coverage: {totals.percentage}% ({totals.matched}/{totals.total})",
        f"Non-arbitrary classes: {totals.non_arbitrary}",
        "",
        "## Coverage by Category",
    ]
    category_lines = [
        f"- {category}: {item.percentage}% ({item.matched}/{item.total})"
        for category, item in stats.by_category.items()
        if item.total > 0
    ]
    lines.extend(category_lines or ["- none"])

    lines.extend(["", "## Warnings by Category"])
    warning_lines = [
        f"- {category}: {count}"
        for category, count in stats.warnings_by_category.items()
        if count > 0
    ]
    lines.extend(warning_lines or ["- none"])

    lines.extend(["", "## Sample Classes", " ".join(stats.samples.classes) or "(none)"])

    lines.extend(["", "## Sample Warnings"])
    lines.extend(f"- {warning}" for warning in stats.samples.warnings)
    if not stats.samples.warnings:
        lines.append("- none")
    return "\n".join(lines) + "\n"


def summarize(results: TransformResult | Iterable[TransformResult]) -> Summary:
    """Merge one or more results and render the text report."""
    items = [results] if isinstance(results, TransformResult) else list(results)

    coverage = merge_coverage(item.coverage for item in items)
    warning_counts: Counter[str] = Counter()
    for item in items:
        warning_counts.update(_warning_counts(item))

    classes = [cls_name for item in items for cls_name in item.classes]
    warnings = [warning for item in items for warning in item.warnings]

    stats = SummaryStats(
        totals=SummaryTotals(
            matched=coverage.matched,
            total=coverage.total,
            percentage=coverage.percentage,
            non_arbitrary=coverage.non_arbitrary,
        ),
        by_category=coverage.categories or merge_categories([]),
        warnings_by_category={
            category: warning_counts[category] for category in WARNING_CATEGORIES
        },
        samples=SummarySamples(
            classes=tuple(classes[:SAMPLE_CLASS_LIMIT]),
            warnings=tuple(warnings[:SAMPLE_WARNING_LIMIT]),
        ),
    )
    return Summary(text=_render(stats), stats=stats)


# --- Comparison ---


def _average_coverage(by_selector: Mapping[str, TransformResult]) -> float:
    if not by_selector:
        return 0.0
    return sum(result.coverage.percentage for result in by_selector.values()) / len(by_selector)


def compare_results(
    strict: Mapping[str, TransformResult],
    approximate: Mapping[str, TransformResult],
) -> Comparison:
    """Compare strict-mode and approximate-mode results keyed by selector."""
    strict_coverage = _average_coverage(strict)
    approximate_coverage = _average_coverage(approximate)

    selectors = list(dict.fromkeys([*strict, *approximate]))
    empty = TransformResult()
    rows = []
    for selector in selectors:
        strict_result = strict.get(selector, empty)
        approx_result = approximate.get(selector, empty)
        rows.append(
            SelectorComparison(
                selector=selector,
                strict_classes=strict_result.classes,
                approximate_classes=approx_result.classes,
                classes_diff=len(approx_result.classes) - len(strict_result.classes),
                strict_coverage=strict_result.coverage.percentage,
                approximate_coverage=approx_result.coverage.percentage,
            )
        )

    return Comparison(
        strict_coverage=strict_coverage,
        approximate_coverage=approximate_coverage,
        coverage_diff=approximate_coverage - strict_coverage,
        strict_warnings=sum(len(result.warnings) for result in strict.values()),
        approximate_warnings=sum(len(result.warnings) for result in approximate.values()),
        selector_comparison=tuple(rows),
    )


def generate_diff(declarations: Iterable[CssDeclaration], classes: Iterable[str]) -> Diff:
    """Two-column "CSS | Tailwind" rendering."""
    css_lines = tuple(f"{decl.prop}: {decl.value};" for decl in declarations)
    tailwind_lines = tuple(classes)

    width = max([len("CSS"), *(len(line) for line in css_lines)])
    rows = [f"{'CSS'.ljust(width)} | Tailwind", f"{'-' * width}-+-{'-' * 8}"]
    for index in range(max(len(css_lines), len(tailwind_lines))):
        left = css_lines[index] if index < len(css_lines) else ""
        right = tailwind_lines[index] if index < len(tailwind_lines) else ""
        rows.append(f"{left.ljust(width)} | {right}".rstrip())

    return Diff(css_lines=css_lines, tailwind_lines=tailwind_lines, diff="\n".join(rows))
