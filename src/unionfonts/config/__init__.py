"""Configuration management for union-fonts.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- BackendChoice: Which native toolkit backs font construction
- LoggingConfig: Logging settings
- UnionFontsSettings: Main application settings
"""

from unionfonts.config.settings import (
    BackendChoice,
    LoggingConfig,
    UnionFontsSettings,
    get_default_settings,
)

__all__ = [
    "BackendChoice",
    "LoggingConfig",
    "UnionFontsSettings",
    "get_default_settings",
]
