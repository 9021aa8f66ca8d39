"""
tailwindify - CSS declarations to Tailwind utility classes.

Resolves CSS values against design-token layers, assembles ordered class
lists per rule and reports coverage and warnings.
"""

from tailwindify.components.engine import (
    StylesheetResult,
    transform_declarations,
    transform_rule,
    transform_stylesheet,
)
from tailwindify.components.matchers import match_property
from tailwindify.components.ordering import sort_classes
from tailwindify.components.report import (
    Summary,
    TransformResult,
    aggregate_warnings,
    calculate_coverage,
    categorize_warning,
    compare_results,
    generate_diff,
    summarize,
)
from tailwindify.components.resolve import ResolverCache, resolve_token
from tailwindify.components.tokens import DEFAULT_LEGACY_LAYER, StaticTokenSource
from tailwindify.config import TransformSettings, build_context, load_settings
from tailwindify.core.entities import (
    CssDeclaration,
    CssRule,
    MatchingContext,
    ResolutionResult,
    Thresholds,
    TokenLayer,
    TokenScale,
)

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_LEGACY_LAYER",
    "CssDeclaration",
    "CssRule",
    "MatchingContext",
    "ResolutionResult",
    "ResolverCache",
    "StaticTokenSource",
    "StylesheetResult",
    "Summary",
    "Thresholds",
    "TokenLayer",
    "TokenScale",
    "TransformResult",
    "TransformSettings",
    "aggregate_warnings",
    "build_context",
    "calculate_coverage",
    "categorize_warning",
    "compare_results",
    "generate_diff",
    "load_settings",
    "match_property",
    "resolve_token",
    "sort_classes",
    "summarize",
    "transform_declarations",
    "transform_rule",
    "transform_stylesheet",
]
