"""Module de configuration."""

from script_python_utils.config.loader import (
    ConfigLoader,
    FileConfigLoader,
    validate_with_schema,
)
from script_python_utils.config.settings import (
    CommandSettings,
    JsonSettings,
    LoggingSettings,
    PathSettings,
    ScriptSettings,
    load_settings,
)

__all__ = [
    "ConfigLoader",
    "FileConfigLoader",
    "validate_with_schema",
    "CommandSettings",
    "JsonSettings",
    "LoggingSettings",
    "PathSettings",
    "ScriptSettings",
    "load_settings",
]
