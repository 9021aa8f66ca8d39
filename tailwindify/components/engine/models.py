"""
Engine component models.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field

from tailwindify.components.report import Summary, TransformResult, summarize


@dataclass(frozen=True)
class StylesheetResult:
    """Per-selector results of one stylesheet."""

    by_selector: Mapping[str, TransformResult] = field(default_factory=dict)

    def __len__(self) -> int:
        return len(self.by_selector)

    def __getitem__(self, selector: str) -> TransformResult:
        return self.by_selector[selector]

    def summary(self) -> Summary:
        """Stylesheet-wide coverage report."""
        return summarize(self.by_selector.values())
