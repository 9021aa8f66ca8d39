"""
Engine component - CSS rule to utility class assembly.

Drives each declaration of a rule through the matcher registry, applies
its variants, then orders the classes and aggregates warnings and
coverage.

Invariants:
- Never raises for unmatched or malformed input; misses become warnings
- Every declaration counts towards total; one that produced classes
  counts towards matched
- Output classes are deduplicated and deterministically ordered
- Selectors other than "" and "*" get one advisory warning per rule
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

from tailwindify.components.matchers import DEFAULT_REGISTRY, MatcherRegistry, match_property
from tailwindify.components.ordering import sort_classes
from tailwindify.components.report import (
    TransformResult,
    aggregate_warnings,
    calculate_category_stats,
    calculate_coverage,
    count_non_arbitrary,
)
from tailwindify.components.variants import apply_variants
from tailwindify.core.entities import CssDeclaration, CssRule, MatchingContext

from .models import StylesheetResult

logger = logging.getLogger(__name__)

UNIVERSAL_SELECTORS = frozenset({"", "*"})


def no_handler_warning(prop: str, value: str) -> str:
    return f"No direct Tailwind equivalent for '{prop}: {value}'"


def not_transformed_warning(prop: str, value: str) -> str:
    return f"Could not transform: {prop}: {value}"


def selector_warning(selector: str) -> str:
    return f"Selector '{selector}' was converted but may need manual adjustment"


@dataclass
class _Collected:
    classes: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
    matched_props: set[str] = field(default_factory=set)
    matched: int = 0


def _collect(
    declarations: Sequence[CssDeclaration],
    ctx: MatchingContext,
    registry: MatcherRegistry,
) -> _Collected:
    collected = _Collected()
    for decl in declarations:
        prop = decl.prop.strip().lower()
        value = decl.value.strip()

        if prop not in registry:
            logger.debug("No handler for %s: %s", prop, value)
            collected.warnings.append(no_handler_warning(prop, value))
            continue

        result = match_property(prop, value, ctx, registry)
        collected.warnings.extend(result.warnings)
        if not result.classes:
            logger.debug("Handler returned nothing for %s: %s", prop, value)
            collected.warnings.append(not_transformed_warning(prop, value))
            continue

        collected.classes.extend(apply_variants(decl.variants, result.classes))
        collected.matched += 1
        collected.matched_props.add(prop)
    return collected


def _screen_order(ctx: MatchingContext) -> tuple[str, ...] | None:
    if not ctx.screens:
        return None
    return tuple(sorted(ctx.screens, key=lambda name: (ctx.screens[name], name)))


def _assemble(
    declarations: Sequence[CssDeclaration],
    collected: _Collected,
    ctx: MatchingContext,
) -> TransformResult:
    aggregate = aggregate_warnings(collected.warnings)
    classes = sort_classes(collected.classes, _screen_order(ctx))
    coverage = calculate_coverage(
        collected.matched,
        len(declarations),
        count_non_arbitrary(classes),
        calculate_category_stats(declarations, collected.matched_props),
        aggregate.by_category,
    )
    return TransformResult(
        classes=tuple(classes),
        warnings=aggregate.warnings,
        coverage=coverage,
    )


def transform_declarations(
    declarations: Iterable[CssDeclaration],
    ctx: MatchingContext,
    registry: MatcherRegistry | None = None,
) -> TransformResult:
    """Classes, warnings and coverage for a bare list of declarations."""
    decls = tuple(declarations)
    collected = _collect(decls, ctx, registry if registry is not None else DEFAULT_REGISTRY)
    return _assemble(decls, collected, ctx)


def transform_rule(
    rule: CssRule,
    ctx: MatchingContext,
    registry: MatcherRegistry | None = None,
) -> TransformResult:
    """
    Transform one CSS rule.

    Same as transform_declarations, plus the selector advisory for any
    selector that is not empty or universal.
    """
    decls = tuple(rule.declarations)
    collected = _collect(decls, ctx, registry if registry is not None else DEFAULT_REGISTRY)
    if rule.selector.strip() not in UNIVERSAL_SELECTORS:
        collected.warnings.append(selector_warning(rule.selector.strip()))

    result = _assemble(decls, collected, ctx)
    logger.debug(
        "Rule %r: %d/%d declarations matched, %d classes",
        rule.selector,
        result.coverage.matched,
        result.coverage.total,
        len(result.classes),
    )
    return result


def transform_stylesheet(
    rules: Iterable[CssRule],
    ctx: MatchingContext,
    registry: MatcherRegistry | None = None,
) -> StylesheetResult:
    """Transform every rule; a repeated selector keeps the last rule's result."""
    by_selector: dict[str, TransformResult] = {}
    for rule in rules:
        by_selector[rule.selector] = transform_rule(rule, ctx, registry)
    return StylesheetResult(by_selector=by_selector)
