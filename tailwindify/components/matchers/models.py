"""
Matchers component models.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class MatchResult:
    """Classes produced for one declaration plus resolver warnings."""

    classes: tuple[str, ...] = ()
    warnings: tuple[str, ...] = ()

    @classmethod
    def single(cls, class_name: str, warning: str | None = None) -> MatchResult:
        if not class_name:
            return NO_MATCH
        return cls(classes=(class_name,), warnings=(warning,) if warning else ())

    def __bool__(self) -> bool:
        return bool(self.classes)

    def __add__(self, other: MatchResult) -> MatchResult:
        return MatchResult(
            classes=self.classes + other.classes,
            warnings=self.warnings + other.warnings,
        )


NO_MATCH = MatchResult()
