"""
Report component - Coverage statistics and warning aggregation.
"""

from ._impl import (
    SAMPLE_CLASS_LIMIT,
    SAMPLE_WARNING_LIMIT,
    WARNING_MARKERS,
    aggregate_warnings,
    calculate_category_stats,
    calculate_coverage,
    categorize_warning,
    compare_results,
    count_non_arbitrary,
    generate_diff,
    merge_categories,
    merge_coverage,
    percentage,
    property_category,
    summarize,
)
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

__all__ = [
    # Operations
    "aggregate_warnings",
    "calculate_category_stats",
    "calculate_coverage",
    "categorize_warning",
    "compare_results",
    "count_non_arbitrary",
    "generate_diff",
    "merge_categories",
    "merge_coverage",
    "percentage",
    "property_category",
    "summarize",
    # Constants
    "PROPERTY_CATEGORIES",
    "SAMPLE_CLASS_LIMIT",
    "SAMPLE_WARNING_LIMIT",
    "WARNING_CATEGORIES",
    "WARNING_MARKERS",
    # Models
    "CategoryStats",
    "Comparison",
    "CoverageStats",
    "Diff",
    "PropertyCategory",
    "SelectorComparison",
    "Summary",
    "SummarySamples",
    "SummaryStats",
    "SummaryTotals",
    "TransformResult",
    "WarningAggregate",
    "WarningCategory",
]
