"""Configuration management for AlphaQuest.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- FillLevelConfig: Fill-in level grid and brush settings
- TraceLevelConfig: Tracing level grid, tolerance and brush settings
- FreeDrawLevelConfig: Shape recognition sampling settings
- GeometryConfig: Curve approximation settings
- LoggingConfig: Logging settings
- Thresholds, UserSettings: Persisted pass thresholds and progress
- AlphaQuestSettings: Main application settings
"""

from alphaquest.config.settings import (
    AlphaQuestSettings,
    CurveMode,
    FillLevelConfig,
    FreeDrawLevelConfig,
    GeometryConfig,
    LoggingConfig,
    LogLevel,
    Thresholds,
    TraceLevelConfig,
    UserSettings,
    get_default_settings,
)

__all__ = [
    "AlphaQuestSettings",
    "CurveMode",
    "FillLevelConfig",
    "FreeDrawLevelConfig",
    "GeometryConfig",
    "LoggingConfig",
    "LogLevel",
    "Thresholds",
    "TraceLevelConfig",
    "UserSettings",
    "get_default_settings",
]
