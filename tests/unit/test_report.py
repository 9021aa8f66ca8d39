"""
Tests for coverage and warning reporting.
"""

from __future__ import annotations

import pytest

from tailwindify.components.report import (
    PROPERTY_CATEGORIES,
    WARNING_CATEGORIES,
    TransformResult,
    aggregate_warnings,
    calculate_category_stats,
    calculate_coverage,
    categorize_warning,
    compare_results,
    count_non_arbitrary,
    generate_diff,
    merge_coverage,
    property_category,
    summarize,
)
from tailwindify.core.entities import CssDeclaration

# --- Helpers ---


def _result(
    classes: tuple[str, ...],
    warnings: tuple[str, ...],
    matched: int,
    total: int,
) -> TransformResult:
    aggregate = aggregate_warnings(warnings)
    return TransformResult(
        classes=classes,
        warnings=aggregate.warnings,
        coverage=calculate_coverage(
            matched,
            total,
            count_non_arbitrary(classes),
            warnings_by_category=aggregate.by_category,
        ),
    )


# --- Coverage ---


class TestCalculateCoverage:
    """Test coverage arithmetic."""

    def test_percentage(self) -> None:
        stats = calculate_coverage(8, 10, 6)
        assert stats.percentage == 80
        assert stats.non_arbitrary == 6

    def test_zero_total(self) -> None:
        assert calculate_coverage(0, 0).percentage == 0

    def test_rounds_half_up(self) -> None:
        assert calculate_coverage(1, 8).percentage == 13
        assert calculate_coverage(2, 3).percentage == 67
        assert calculate_coverage(1, 3).percentage == 33

    def test_count_non_arbitrary(self) -> None:
        assert count_non_arbitrary(["m-4", "w-[123px]", "md:p-2"]) == 2


class TestPropertyCategory:
    """Test declaration categories."""

    @pytest.mark.parametrize(
        ("prop", "category"),
        [
            ("margin-top", "spacing"),
            ("padding", "spacing"),
            ("color", "color"),
            ("font-size", "typography"),
            ("text-align", "typography"),
            ("line-height", "typography"),
            ("display", "layout"),
            ("z-index", "layout"),
            ("border-radius", "border"),
            ("background-color", "background"),
            ("opacity", "effects"),
            ("gap", "flex-grid"),
            ("justify-content", "flex-grid"),
            ("width", "sizing"),
            ("max-height", "sizing"),
            ("cursor", "other"),
        ],
    )
    def test_category(self, prop: str, category: str) -> None:
        assert property_category(prop) == category

    def test_category_stats(self) -> None:
        declarations = [
            CssDeclaration("margin", "1rem"),
            CssDeclaration("padding", "2rem"),
            CssDeclaration("color", "#fff"),
            CssDeclaration("cursor", "pointer"),
        ]
        stats = calculate_category_stats(declarations, {"margin", "color"})
        assert set(stats) == set(PROPERTY_CATEGORIES)
        assert stats["spacing"].matched == 1
        assert stats["spacing"].total == 2
        assert stats["spacing"].percentage == 50
        assert stats["color"].percentage == 100
        assert stats["other"].matched == 0
        assert stats["sizing"].total == 0
        assert stats["sizing"].percentage == 0


# --- Warnings ---


class TestCategorizeWarning:
    """Test marker-phrase classification."""

    @pytest.mark.parametrize(
        ("warning", "category"),
        [
            ("Used arbitrary value for 'width: 123px'", "arbitrary-value"),
            ("No direct Tailwind equivalent for 'custom-prop: value'", "no-handler"),
            ("Could not transform: display: weird", "no-handler"),
            ("approximate: spacing 15px → 4 (1.0px difference)", "approximate"),
            ("token-miss: no exact match for spacing value 15px", "token-miss"),
            ("Token not found in scale", "token-miss"),
            ("v3-fallback: using legacy theme for spacing value 1rem → 4", "v3-fallback"),
            ("Falling back to v3 theme", "v3-fallback"),
            ("v3-fallback approximate: spacing 15px → 4 (1.0px difference)", "approximate"),
            ("Selector '.card' was converted but may need manual adjustment", "other"),
            ("", "other"),
        ],
    )
    def test_category(self, warning: str, category: str) -> None:
        assert categorize_warning(warning) == category


class TestAggregateWarnings:
    """Test dedupe and counting."""

    def test_three_occurrences(self) -> None:
        aggregate = aggregate_warnings(["same warning"] * 3)
        assert aggregate.warnings == ("same warning (3 occurrences)",)

    def test_single_has_no_suffix(self) -> None:
        aggregate = aggregate_warnings(["once", "twice", "twice"])
        assert aggregate.warnings == ("once", "twice (2 occurrences)")

    def test_category_counts_sum_to_total(self) -> None:
        warnings = [
            "Used arbitrary value for 'width: 123px'",
            "Used arbitrary value for 'width: 123px'",
            "No direct Tailwind equivalent for 'x: y'",
            "token-miss: no exact match for spacing value 3px",
            "something else",
        ]
        aggregate = aggregate_warnings(warnings)
        assert set(aggregate.by_category) == set(WARNING_CATEGORIES)
        assert sum(aggregate.by_category.values()) == len(warnings)
        assert aggregate.by_category["arbitrary-value"] == 2

    def test_empty(self) -> None:
        aggregate = aggregate_warnings([])
        assert aggregate.warnings == ()
        assert sum(aggregate.by_category.values()) == 0


# --- Merge / Summary ---


class TestMergeCoverage:
    """Merging sums every counter."""

    def test_commutative(self) -> None:
        a = calculate_coverage(1, 2, 1, warnings_by_category={"other": 1})
        b = calculate_coverage(3, 3, 2, warnings_by_category={"approximate": 2})
        assert merge_coverage([a, b]) == merge_coverage([b, a])

    def test_associative(self) -> None:
        a = calculate_coverage(1, 2)
        b = calculate_coverage(3, 3)
        c = calculate_coverage(0, 5)
        left = merge_coverage([merge_coverage([a, b]), c])
        right = merge_coverage([a, merge_coverage([b, c])])
        assert (left.matched, left.total, left.percentage) == (right.matched, right.total, right.percentage)
        assert left.categories == right.categories

    def test_sums(self) -> None:
        merged = merge_coverage([calculate_coverage(1, 2, 1), calculate_coverage(2, 2, 2)])
        assert (merged.matched, merged.total, merged.percentage, merged.non_arbitrary) == (3, 4, 75, 3)


class TestSummarize:
    """Test the rendered summary."""

    def test_merges_results(self) -> None:
        first = _result(("m-4", "w-[123px]"), ("Used arbitrary value for 'width: 123px'",), 2, 2)
        second = _result((), ("No direct Tailwind equivalent for 'x: y'",), 0, 1)
        summary = summarize([first, second])

        assert summary.stats.totals.matched == 2
        assert summary.stats.totals.total == 3
        assert summary.stats.totals.percentage == 67
        assert summary.stats.totals.non_arbitrary == 1
        assert summary.stats.warnings_by_category["arbitrary-value"] == 1
        assert summary.stats.warnings_by_category["no-handler"] == 1
        assert "Overall Coverage: 67% (2/3)" in summary.text
        assert "Non-arbitrary classes: 1" in summary.text
        assert "- arbitrary-value: 1" in summary.text
        assert "m-4 w-[123px]" in summary.text

    def test_single_result(self) -> None:
        summary = summarize(_result(("m-4",), (), 1, 1))
        assert summary.stats.totals.percentage == 100
        assert summary.text.startswith("# Tailwind Conversion Summary")

    def test_samples_truncated(self) -> None:
        classes = tuple(f"p-{n}" for n in range(15))
        warnings = tuple(f"warning {n}" for n in range(8))
        summary = summarize(_result(classes, warnings, 15, 15))
        assert len(summary.stats.samples.classes) == 10
        assert len(summary.stats.samples.warnings) == 5

    def test_all_categories_present(self) -> None:
        summary = summarize([])
        assert set(summary.stats.by_category) == set(PROPERTY_CATEGORIES)
        assert set(summary.stats.warnings_by_category) == set(WARNING_CATEGORIES)
        assert summary.stats.totals.percentage == 0


# --- Comparison / Diff ---


class TestCompareResults:
    """Strict vs approximate comparison."""

    def test_compare(self) -> None:
        strict = {".a": _result(("m-[15px]",), ("token-miss: x",), 1, 2)}
        approximate = {".a": _result(("m-4", "p-4"), ("approximate: x",), 2, 2)}
        comparison = compare_results(strict, approximate)

        assert comparison.strict_coverage == 50
        assert comparison.approximate_coverage == 100
        assert comparison.coverage_diff == 50
        assert comparison.strict_warnings == 1
        assert comparison.approximate_warnings == 1
        row = comparison.selector_comparison[0]
        assert row.selector == ".a"
        assert row.classes_diff == 1

    def test_empty(self) -> None:
        comparison = compare_results({}, {})
        assert comparison.coverage_diff == 0
        assert comparison.selector_comparison == ()


class TestGenerateDiff:
    """Two-column rendering."""

    def test_columns(self) -> None:
        diff = generate_diff([CssDeclaration("margin", "1rem")], ["m-4", "p-8"])
        lines = diff.diff.splitlines()
        assert lines[0].startswith("CSS")
        assert lines[0].endswith("| Tailwind")
        assert "margin: 1rem;" in lines[2]
        assert lines[2].endswith("m-4")
        assert lines[3].endswith("| p-8")
        assert diff.css_lines == ("margin: 1rem;",)
        assert diff.tailwind_lines == ("m-4", "p-8")
