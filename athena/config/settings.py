"""
Athena Settings.

Runtime settings consumed by the EntityManager. Settings files use the
camelCase keys of the Athena configuration format (``testsDirPath``, ...);
the dataclass exposes them as snake_case fields.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Mapping, Tuple


class ConfigurationError(Exception):
    """Raised when settings are invalid or cannot be loaded."""

    pass


# Settings file key -> dataclass field
SETTINGS_KEYS: Dict[str, str] = {
    "testsDirPath": "tests_dir_path",
    "testFilePatterns": "test_file_patterns",
    "includeIndependentTests": "include_independent_tests",
}

DEFAULT_TEST_FILE_PATTERNS: Tuple[str, ...] = ("*.yaml",)


@dataclass(frozen=True)
class Settings:
    """
    Settings for a single entity graph construction.

    Attributes:
        tests_dir_path: Root directory searched recursively for definition files.
        test_file_patterns: Glob patterns selecting definition files.
        include_independent_tests: Also append functional tests without suite
            references to the top-level entity collection.
    """

    tests_dir_path: Path
    test_file_patterns: Tuple[str, ...] = DEFAULT_TEST_FILE_PATTERNS
    include_independent_tests: bool = False

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "Settings":
        """
        Build settings from a mapping using either camelCase or snake_case keys.

        Raises:
            ConfigurationError: If no tests directory is given, or the
                independent-tests flag is not a boolean.
        """
        values: Dict[str, Any] = {}
        for key, value in data.items():
            field_name = SETTINGS_KEYS.get(key, key)
            if field_name in SETTINGS_KEYS.values():
                values[field_name] = value

        if not values.get("tests_dir_path"):
            raise ConfigurationError("Settings must define 'testsDirPath'")

        values["tests_dir_path"] = Path(values["tests_dir_path"])
        patterns = values.get("test_file_patterns")
        if patterns is None:
            values.pop("test_file_patterns", None)
        elif isinstance(patterns, str):
            values["test_file_patterns"] = (patterns,)
        else:
            values["test_file_patterns"] = tuple(patterns)
        include_independent = values.get("include_independent_tests", False)
        if not isinstance(include_independent, bool):
            raise ConfigurationError(
                f"'includeIndependentTests' must be true or false, got {include_independent!r}"
            )

        return cls(**values)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize back to the settings file format."""
        return {
            "testsDirPath": str(self.tests_dir_path),
            "testFilePatterns": list(self.test_file_patterns),
            "includeIndependentTests": self.include_independent_tests,
        }
