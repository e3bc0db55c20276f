"""
Schema Registry Module.

Manages the JSON schemas that Athena settings files are validated against.
Schemas ship inside the package (athena/config/schemas/) and are loaded
lazily, then cached for subsequent validations.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional

import jsonschema
from loguru import logger

BUNDLED_SCHEMA_DIR = Path(__file__).parent / "schemas"


class SchemaValidationError(Exception):
    """Raised when a settings mapping fails schema validation."""

    def __init__(self, message: str, errors: Optional[List[str]] = None) -> None:
        super().__init__(message)
        self.errors = errors or []


class SchemaRegistry:
    """
    Registry for JSON schemas used to validate settings files.

    Attributes:
        schema_dir: Directory containing JSON schema files.
    """

    def __init__(self, schema_dir: str | Path | None = None) -> None:
        self.schema_dir = Path(schema_dir) if schema_dir else BUNDLED_SCHEMA_DIR
        self._schemas: Dict[str, Dict[str, Any]] = {}
        logger.debug(f"SchemaRegistry initialized — schema_dir={self.schema_dir}")

    def get_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Retrieve a JSON schema by name, loading from disk if not cached.

        Args:
            schema_name: Schema identifier (filename without .json extension).

        Returns:
            Parsed JSON schema as a dictionary.

        Raises:
            FileNotFoundError: If the schema file does not exist.
            SchemaValidationError: If the schema file cannot be parsed.
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_path = self.schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(
                f"Schema not found: {schema_name} (expected at {schema_path})"
            )

        try:
            schema = json.loads(schema_path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as e:
            raise SchemaValidationError(f"Failed to load schema {schema_name}: {e}") from e

        self._schemas[schema_name] = schema
        logger.debug(f"Schema loaded: {schema_name}")
        return schema

    def validate(self, data: Dict[str, Any], schema_name: str) -> None:
        """
        Validate a mapping against a named schema.

        Every violation is reported against the settings key it concerns,
        e.g. ``testFilePatterns[0]: 5 is not of type 'string'``. Violations
        of the mapping as a whole (missing required keys) are reported
        against ``(settings)``.

        Raises:
            SchemaValidationError: If validation fails, with details of all errors.
        """
        validator = jsonschema.Draft7Validator(self.get_schema(schema_name))
        error_messages = sorted(
            f"{_settings_key(error.absolute_path)}: {error.message}"
            for error in validator.iter_errors(data)
        )

        if error_messages:
            details = "\n".join(f"  {message}" for message in error_messages)
            raise SchemaValidationError(
                f"{len(error_messages)} invalid settings key(s) for '{schema_name}':\n{details}",
                errors=error_messages,
            )

        logger.debug(f"Settings validated against {schema_name}: {sorted(data)}")

    def list_schemas(self) -> List[str]:
        """List all available schema names in the schema directory."""
        if not self.schema_dir.exists():
            return []
        return sorted(f.stem for f in self.schema_dir.glob("*.json") if f.is_file())


def _settings_key(path: Iterable[Any]) -> str:
    """Render a validation error path as a settings key, e.g. ``testFilePatterns[1]``."""
    key = ""
    for part in path:
        key += f"[{part}]" if isinstance(part, int) else (f".{part}" if key else str(part))
    return key or "(settings)"
