"""
Tokens component - Design token layers and matching context construction.
"""

from ._impl import (
    DEFAULT_LEGACY_LAYER,
    DEFAULT_THEME,
    StaticTokenSource,
    context_from_source,
    default_token_source,
    screens_from_layer,
)
from .ports import TokenSourcePort

__all__ = [
    "DEFAULT_LEGACY_LAYER",
    "DEFAULT_THEME",
    "StaticTokenSource",
    "TokenSourcePort",
    "context_from_source",
    "default_token_source",
    "screens_from_layer",
]
