"""Configuration domain exports."""

from .config_scaffold_builder import (
    DEFAULT_SETTINGS_FILENAME,
    build_placeholder_settings,
    write_placeholder_settings,
)
from .loader import ConfigurationError, load_scaffold_settings
from .scaffold_settings import BUNDLED_TEMPLATES_DIR, ScaffoldSettings

__all__ = [
    "BUNDLED_TEMPLATES_DIR",
    "ScaffoldSettings",
    "ConfigurationError",
    "load_scaffold_settings",
    "DEFAULT_SETTINGS_FILENAME",
    "build_placeholder_settings",
    "write_placeholder_settings",
]
