"""Configuration management for pathsketch.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- GeometryConfig: Curve projection and number formatting settings
- EditorConfig: Editing session settings
- LoggingConfig: Logging settings
- PathsketchSettings: Main application settings
"""

from pathsketch.config.settings import (
    AttachDirection,
    EditorConfig,
    GeometryConfig,
    LoggingConfig,
    PathsketchSettings,
    get_default_settings,
)

__all__ = [
    "AttachDirection",
    "EditorConfig",
    "GeometryConfig",
    "LoggingConfig",
    "PathsketchSettings",
    "get_default_settings",
]
