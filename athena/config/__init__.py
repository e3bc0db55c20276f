"""
Configuration Management Module.

Handles loading and validation of:
- Athena settings files (YAML/JSON).
- The bundled JSON schemas the settings are validated against.
"""

from athena.config.loader import SettingsLoader
from athena.config.schema_registry import SchemaRegistry, SchemaValidationError
from athena.config.settings import ConfigurationError, Settings

__all__ = [
    "ConfigurationError",
    "SchemaRegistry",
    "SchemaValidationError",
    "Settings",
    "SettingsLoader",
]
