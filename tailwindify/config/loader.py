"""
Settings loader.

Loading is an I/O boundary and fails fast: a missing file, broken YAML or
a schema violation raises. Everything downstream is total.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from pathlib import Path

import yaml
from pydantic import ValidationError

from tailwindify.components.resolve import ResolverCache
from tailwindify.components.tokens import DEFAULT_LEGACY_LAYER, StaticTokenSource, context_from_source
from tailwindify.core.entities import MatchingContext, Thresholds, TokenLayer

from .models import TransformSettings

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "TAILWINDIFY_CONFIG"
DEFAULT_CONFIG_NAME = "tailwindify.yaml"


class SettingsValidationError(ValueError):
    """Raised when a settings file fails schema validation."""

    def __init__(self, errors: list[str]) -> None:
        self.errors = errors
        super().__init__(f"Settings validation failed: {'; '.join(errors)}")


def _find_project_root(start: Path | None = None) -> Path:
    """Nearest directory holding pyproject.toml or .git."""
    current = (start or Path.cwd()).resolve()

    for parent in [current, *current.parents]:
        if (parent / "pyproject.toml").exists() or (parent / ".git").exists():
            return parent

    return current


def resolve_settings_path(
    explicit: str | Path | None = None,
    env: Mapping[str, str] | None = None,
    start: Path | None = None,
) -> Path:
    """
    Settings file location.

    Order: explicit argument, then $TAILWINDIFY_CONFIG, then
    tailwindify.yaml at the project root.
    """
    if explicit:
        return Path(explicit)

    environ = os.environ if env is None else env
    from_env = environ.get(CONFIG_ENV_VAR)
    if from_env:
        return Path(from_env)

    return _find_project_root(start) / DEFAULT_CONFIG_NAME


def _format_errors(exc: ValidationError) -> list[str]:
    errors: list[str] = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error["loc"]) or "<root>"
        errors.append(f"{location}: {error['msg']}")
    return errors


def parse_settings(data: object) -> TransformSettings:
    """Validate already-parsed YAML data. None means an empty file."""
    if data is None:
        return TransformSettings()
    if not isinstance(data, dict):
        raise SettingsValidationError([f"<root>: expected a mapping, got {type(data).__name__}"])
    try:
        return TransformSettings.model_validate(data)
    except ValidationError as e:
        raise SettingsValidationError(_format_errors(e)) from e


def load_settings(path: str | Path) -> TransformSettings:
    """
    Load and validate a settings file.

    Raises FileNotFoundError if the file is missing, ValueError on invalid
    YAML and SettingsValidationError on schema violations.
    """
    settings_path = Path(path)
    if not settings_path.exists():
        raise FileNotFoundError(f"Settings file not found: {settings_path}")

    content = settings_path.read_text()
    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML syntax in settings file: {e}") from e

    settings = parse_settings(data)
    logger.info(
        "Loaded settings from %s (version=%s, strict=%s, approximate=%s)",
        settings_path,
        settings.version,
        settings.strict,
        settings.approximate,
    )
    return settings


def build_context(settings: TransformSettings | None = None) -> MatchingContext:
    """
    Matching context for a run.

    A missing legacy section falls back to the default Tailwind theme; a
    missing current section leaves that layer absent.
    """
    settings = settings or TransformSettings()

    source = StaticTokenSource(
        legacy=(
            TokenLayer.from_mapping(settings.legacy.as_mapping())
            if settings.legacy is not None
            else DEFAULT_LEGACY_LAYER
        ),
        current=(
            TokenLayer.from_mapping(settings.current.as_mapping())
            if settings.current is not None
            else None
        ),
        declared_version=settings.version,
    )
    return context_from_source(
        source,
        strict=settings.strict,
        approximate=settings.approximate,
        thresholds=Thresholds(
            spacing_px=settings.thresholds.spacing_px,
            font_px=settings.thresholds.font_px,
            radius_px=settings.thresholds.radius_px,
        ),
        screens=settings.screens,
        cache=ResolverCache() if settings.cache else None,
    )
