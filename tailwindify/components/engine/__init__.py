"""
Engine component - Rule and stylesheet transformation.
"""

from .component import (
    UNIVERSAL_SELECTORS,
    no_handler_warning,
    not_transformed_warning,
    selector_warning,
    transform_declarations,
    transform_rule,
    transform_stylesheet,
)
from .models import StylesheetResult

__all__ = [
    "UNIVERSAL_SELECTORS",
    "StylesheetResult",
    "no_handler_warning",
    "not_transformed_warning",
    "selector_warning",
    "transform_declarations",
    "transform_rule",
    "transform_stylesheet",
]
