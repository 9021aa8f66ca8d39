"""
Tokens component port definitions.
"""

from __future__ import annotations

from typing import Protocol

from tailwindify.core.entities import FrameworkVersion, TokenLayer


class TokenSourcePort(Protocol):
    """Provider of the legacy (theme) and current (tokens) layers."""

    @property
    def version(self) -> FrameworkVersion:
        """Declared framework version."""
        ...

    def legacy_layer(self) -> TokenLayer | None:
        """Legacy theme layer, or None when absent."""
        ...

    def current_layer(self) -> TokenLayer | None:
        """Current tokens layer, or None when absent."""
        ...
