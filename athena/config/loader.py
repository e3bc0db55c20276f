"""
Settings Loader Module.

Loads Athena settings files and turns them into Settings instances:
- Reading YAML and JSON settings files.
- Merging the file over the default values.
- Schema validation using JSON Schema.
- Resolving a relative tests directory against the settings file location.
"""

from __future__ import annotations

import json
from dataclasses import replace
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml
from loguru import logger

from athena.config.schema_registry import SchemaRegistry, SchemaValidationError
from athena.config.settings import ConfigurationError, DEFAULT_TEST_FILE_PATTERNS, Settings

SETTINGS_SCHEMA = "settings_schema"

DEFAULT_SETTINGS: Dict[str, Any] = {
    "testFilePatterns": list(DEFAULT_TEST_FILE_PATTERNS),
    "includeIndependentTests": False,
}


class SettingsLoader:
    """
    Loader for Athena settings files with schema validation.

    Usage::

        loader = SettingsLoader()
        settings = loader.load("athena.yaml")
        manager = EntityManager(settings)
    """

    SUPPORTED_EXTENSIONS = {".yaml", ".yml", ".json"}

    def __init__(self, schema_registry: Optional[SchemaRegistry] = None) -> None:
        self.schema_registry = schema_registry or SchemaRegistry()

    def load(self, path: str | Path, *, validate: bool = True) -> Settings:
        """
        Load a settings file.

        Args:
            path: Path to the settings file.
            validate: Whether to validate against the settings schema.

        Returns:
            Settings instance.

        Raises:
            ConfigurationError: If the file cannot be read, parsed or validated.
            FileNotFoundError: If the settings file does not exist.
        """
        file_path = Path(path)
        if not file_path.is_file():
            raise FileNotFoundError(f"Settings file not found: {file_path}")

        logger.info(f"Loading settings: {file_path}")
        data = self._read_file(file_path)
        settings = self.from_mapping(data, base_dir=file_path.parent, validate=validate)

        logger.info(f"Settings loaded — testsDirPath={settings.tests_dir_path}")
        return settings

    def from_mapping(
        self,
        data: Mapping[str, Any],
        *,
        base_dir: str | Path | None = None,
        validate: bool = True,
    ) -> Settings:
        """
        Merge a raw settings mapping over the defaults and build Settings.

        A relative ``testsDirPath`` is resolved against ``base_dir`` when given.
        """
        merged = {**DEFAULT_SETTINGS, **dict(data)}

        if validate:
            try:
                self.schema_registry.validate(merged, SETTINGS_SCHEMA)
            except SchemaValidationError as e:
                raise ConfigurationError(f"Settings validation failed: {e}") from e

        settings = Settings.from_mapping(merged)
        if base_dir is not None and not settings.tests_dir_path.is_absolute():
            tests_dir = (Path(base_dir) / settings.tests_dir_path).resolve()
            settings = replace(settings, tests_dir_path=tests_dir)
        return settings

    def _read_file(self, file_path: Path) -> Dict[str, Any]:
        """Read and parse a YAML or JSON file."""
        suffix = file_path.suffix.lower()
        if suffix not in self.SUPPORTED_EXTENSIONS:
            raise ConfigurationError(
                f"Unsupported file format '{suffix}'. "
                f"Supported: {sorted(self.SUPPORTED_EXTENSIONS)}"
            )

        try:
            content = file_path.read_text(encoding="utf-8")
        except OSError as e:
            raise ConfigurationError(f"Failed to read file {file_path}: {e}") from e

        try:
            if suffix in {".yaml", ".yml"}:
                data = yaml.safe_load(content)
            else:
                data = json.loads(content)
        except (yaml.YAMLError, json.JSONDecodeError) as e:
            raise ConfigurationError(f"Failed to parse {file_path}: {e}") from e

        if not isinstance(data, dict):
            raise ConfigurationError(
                f"Settings file must contain a mapping (dict), "
                f"got {type(data).__name__}: {file_path}"
            )

        return data
