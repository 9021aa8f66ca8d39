"""
Configuration - tailwindify.yaml loading and context construction.
"""

from .loader import (
    CONFIG_ENV_VAR,
    DEFAULT_CONFIG_NAME,
    SettingsValidationError,
    build_context,
    load_settings,
    parse_settings,
    resolve_settings_path,
)
from .models import ScaleSettings, ThresholdSettings, TransformSettings

__all__ = [
    "CONFIG_ENV_VAR",
    "DEFAULT_CONFIG_NAME",
    "ScaleSettings",
    "SettingsValidationError",
    "ThresholdSettings",
    "TransformSettings",
    "build_context",
    "load_settings",
    "parse_settings",
    "resolve_settings_path",
]
