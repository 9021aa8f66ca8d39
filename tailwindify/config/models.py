"""
Settings schema for tailwindify.yaml.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

VERSION_ALIASES: dict[str, str] = {
    "v3": "legacy",
    "3": "legacy",
    "legacy": "legacy",
    "v4": "current",
    "4": "current",
    "current": "current",
}


def _stringify(value: Any) -> Any:
    if isinstance(value, dict):
        return {str(key): _stringify(item) for key, item in value.items()}
    if isinstance(value, list):
        return [_stringify(item) for item in value]
    if isinstance(value, bool) or value is None:
        return value
    if isinstance(value, int | float):
        return str(value)
    return value


class ThresholdSettings(BaseModel):
    model_config = ConfigDict(extra="forbid")

    spacing_px: float = Field(default=2.0, ge=0)
    font_px: float = Field(default=1.0, ge=0)
    radius_px: float = Field(default=2.0, ge=0)


class ScaleSettings(BaseModel):
    """Token scales of one layer. Colours may nest one level (name -> shade)."""

    model_config = ConfigDict(extra="forbid")

    spacing: dict[str, str] = Field(default_factory=dict)
    colors: dict[str, str | dict[str, str]] = Field(default_factory=dict)
    font_size: dict[str, str | list[Any]] = Field(default_factory=dict)
    line_height: dict[str, str] = Field(default_factory=dict)
    radius: dict[str, str] = Field(default_factory=dict)
    screens: dict[str, str] = Field(default_factory=dict)

    @field_validator("*", mode="before")
    @classmethod
    def stringify_values(cls, v: Any) -> Any:
        """YAML reads `4: 1` and `500: ...` as ints; scales are compared as strings."""
        return _stringify(v)

    def as_mapping(self) -> dict[str, Any]:
        return self.model_dump()


class TransformSettings(BaseModel):
    """Top-level configuration of a transformation run."""

    model_config = ConfigDict(extra="forbid")

    version: Literal["legacy", "current"] = "current"
    strict: bool = False
    approximate: bool = False
    thresholds: ThresholdSettings = Field(default_factory=ThresholdSettings)
    screens: dict[str, int] = Field(default_factory=dict)
    cache: bool = True
    legacy: ScaleSettings | None = None
    current: ScaleSettings | None = None

    @field_validator("version", mode="before")
    @classmethod
    def resolve_version_alias(cls, v: Any) -> Any:
        key = str(v).strip().lower()
        if key in VERSION_ALIASES:
            return VERSION_ALIASES[key]
        raise ValueError(f"Unknown version '{v}': expected one of {sorted(VERSION_ALIASES)}")
