"""
Tests for the Configuration Management Module.

Covers:
- Settings: mapping conversion and defaults.
- SettingsLoader: file loading, schema validation, path resolution.
- SchemaRegistry: bundled schema loading and validation.
"""

from __future__ import annotations

import json
from pathlib import Path

import pytest
import yaml

from athena.config.loader import SettingsLoader
from athena.config.schema_registry import SchemaRegistry, SchemaValidationError
from athena.config.settings import ConfigurationError, Settings


# ---------------------------------------------------------------------------
# Settings Tests
# ---------------------------------------------------------------------------


class TestSettings:
    """Tests for the Settings dataclass."""

    def test_from_mapping_camel_case(self) -> None:
        """Test building settings from settings-file keys."""
        settings = Settings.from_mapping({
            "testsDirPath": "/srv/tests",
            "testFilePatterns": ["*.yaml", "*.yml"],
            "includeIndependentTests": True,
        })

        assert settings.tests_dir_path == Path("/srv/tests")
        assert settings.test_file_patterns == ("*.yaml", "*.yml")
        assert settings.include_independent_tests is True

    def test_from_mapping_snake_case(self) -> None:
        """Test that dataclass field names are accepted as well."""
        settings = Settings.from_mapping({"tests_dir_path": "/srv/tests"})
        assert settings.tests_dir_path == Path("/srv/tests")

    def test_from_mapping_defaults(self) -> None:
        """Test default patterns and independent-test behaviour."""
        settings = Settings.from_mapping({"testsDirPath": "/srv/tests"})

        assert settings.test_file_patterns == ("*.yaml",)
        assert settings.include_independent_tests is False

    def test_from_mapping_single_pattern_string(self) -> None:
        """Test that a single pattern string becomes a one-element tuple."""
        settings = Settings.from_mapping({"testsDirPath": "/t", "testFilePatterns": "*.json"})
        assert settings.test_file_patterns == ("*.json",)

    def test_from_mapping_ignores_unknown_keys(self) -> None:
        """Test that unrelated settings keys are ignored."""
        settings = Settings.from_mapping({"testsDirPath": "/t", "storageUrl": "http://es:9200"})
        assert settings.tests_dir_path == Path("/t")

    def test_from_mapping_requires_tests_dir(self) -> None:
        """Test that a missing testsDirPath is a configuration error."""
        with pytest.raises(ConfigurationError, match="testsDirPath"):
            Settings.from_mapping({"testFilePatterns": ["*.yaml"]})

    @pytest.mark.parametrize("flag", ["false", "no", 0, 1, None])
    def test_from_mapping_rejects_non_bool_independent_flag(self, flag) -> None:
        """Test that the independent-tests flag must be a real boolean."""
        with pytest.raises(ConfigurationError, match="includeIndependentTests"):
            Settings.from_mapping({"testsDirPath": "/t", "includeIndependentTests": flag})

    def test_to_dict(self) -> None:
        """Test serialization back to settings-file keys."""
        settings = Settings(tests_dir_path=Path("/t"), include_independent_tests=True)
        assert settings.to_dict() == {
            "testsDirPath": "/t",
            "testFilePatterns": ["*.yaml"],
            "includeIndependentTests": True,
        }


# ---------------------------------------------------------------------------
# SettingsLoader Tests
# ---------------------------------------------------------------------------


class TestSettingsLoader:
    """Tests for the SettingsLoader class."""

    def test_load_yaml_file(self, tmp_path: Path) -> None:
        """Test loading a valid YAML settings file."""
        settings_file = tmp_path / "athena.yaml"
        settings_file.write_text(
            yaml.dump({"testsDirPath": "/srv/tests", "includeIndependentTests": True}),
            encoding="utf-8",
        )

        settings = SettingsLoader().load(settings_file)

        assert settings.tests_dir_path == Path("/srv/tests")
        assert settings.include_independent_tests is True
        assert settings.test_file_patterns == ("*.yaml",)

    def test_load_json_file(self, tmp_path: Path) -> None:
        """Test loading a valid JSON settings file."""
        settings_file = tmp_path / "athena.json"
        settings_file.write_text(json.dumps({"testsDirPath": "/srv/tests"}), encoding="utf-8")

        settings = SettingsLoader().load(settings_file)
        assert settings.tests_dir_path == Path("/srv/tests")

    def test_relative_tests_dir_resolved_against_file(self, data_dir: Path) -> None:
        """Test that a relative testsDirPath is resolved next to the settings file."""
        settings = SettingsLoader().load(data_dir / "athena.yaml")
        assert settings.tests_dir_path == (data_dir / "definitions").resolve()

    def test_load_file_not_found(self, tmp_path: Path) -> None:
        """Test that FileNotFoundError is raised for missing files."""
        with pytest.raises(FileNotFoundError, match="Settings file not found"):
            SettingsLoader().load(tmp_path / "missing.yaml")

    def test_load_unsupported_format(self, tmp_path: Path) -> None:
        """Test that ConfigurationError is raised for unsupported formats."""
        bad_file = tmp_path / "athena.txt"
        bad_file.write_text("testsDirPath: /t", encoding="utf-8")

        with pytest.raises(ConfigurationError, match="Unsupported file format"):
            SettingsLoader().load(bad_file)

    def test_load_invalid_yaml(self, tmp_path: Path) -> None:
        """Test that ConfigurationError is raised for malformed YAML."""
        bad_file = tmp_path / "athena.yaml"
        bad_file.write_text("key: [invalid yaml{", encoding="utf-8")

        with pytest.raises(ConfigurationError, match="Failed to parse"):
            SettingsLoader().load(bad_file)

    def test_load_non_mapping(self, tmp_path: Path) -> None:
        """Test that a YAML list is rejected."""
        bad_file = tmp_path / "athena.yaml"
        bad_file.write_text("- a\n- b\n", encoding="utf-8")

        with pytest.raises(ConfigurationError, match="must contain a mapping"):
            SettingsLoader().load(bad_file)

    def test_schema_violation(self, tmp_path: Path) -> None:
        """Test that a schema violation surfaces as ConfigurationError."""
        bad_file = tmp_path / "athena.yaml"
        bad_file.write_text(yaml.dump({"testsDirPath": 42}), encoding="utf-8")

        with pytest.raises(ConfigurationError, match="Settings validation failed"):
            SettingsLoader().load(bad_file)

    def test_string_independent_flag_rejected(self, tmp_path: Path) -> None:
        """Test that a quoted "false" flag fails instead of enabling the option."""
        bad_file = tmp_path / "athena.yaml"
        bad_file.write_text('testsDirPath: /t\nincludeIndependentTests: "false"\n', encoding="utf-8")

        with pytest.raises(ConfigurationError, match="includeIndependentTests"):
            SettingsLoader().load(bad_file)
        with pytest.raises(ConfigurationError, match="must be true or false"):
            SettingsLoader().load(bad_file, validate=False)

    def test_missing_tests_dir_without_validation(self, tmp_path: Path) -> None:
        """Test that skipping validation still requires a tests directory."""
        with pytest.raises(ConfigurationError, match="testsDirPath"):
            SettingsLoader().from_mapping({}, validate=False)

    def test_from_mapping_merges_defaults(self) -> None:
        """Test that defaults fill in missing keys."""
        settings = SettingsLoader().from_mapping({"testsDirPath": "/t"})
        assert settings.test_file_patterns == ("*.yaml",)
        assert settings.include_independent_tests is False


# ---------------------------------------------------------------------------
# SchemaRegistry Tests
# ---------------------------------------------------------------------------


class TestSchemaRegistry:
    """Tests for the SchemaRegistry class."""

    def test_bundled_schemas(self) -> None:
        """Test that the settings schema ships with the package."""
        assert "settings_schema" in SchemaRegistry().list_schemas()

    def test_get_schema_cached(self) -> None:
        """Test that a loaded schema is cached."""
        registry = SchemaRegistry()
        assert registry.get_schema("settings_schema") is registry.get_schema("settings_schema")

    def test_get_schema_not_found(self, tmp_path: Path) -> None:
        """Test that a missing schema raises FileNotFoundError."""
        registry = SchemaRegistry(tmp_path)
        with pytest.raises(FileNotFoundError, match="Schema not found"):
            registry.get_schema("nonexistent")

    def test_get_schema_malformed(self, tmp_path: Path) -> None:
        """Test that an unparsable schema raises SchemaValidationError."""
        (tmp_path / "broken.json").write_text("{not json", encoding="utf-8")
        with pytest.raises(SchemaValidationError, match="Failed to load schema"):
            SchemaRegistry(tmp_path).get_schema("broken")

    def test_validate_valid_settings(self) -> None:
        """Test validation passes for valid settings."""
        SchemaRegistry().validate({"testsDirPath": "/t"}, "settings_schema")

    def test_validate_collects_all_errors(self) -> None:
        """Test validation reports every violation."""
        with pytest.raises(SchemaValidationError) as exc_info:
            SchemaRegistry().validate(
                {"testFilePatterns": [], "includeIndependentTests": "yes"},
                "settings_schema",
            )

        assert len(exc_info.value.errors) == 3

    def test_validate_names_settings_keys(self) -> None:
        """Test that every error message starts with the offending settings key."""
        with pytest.raises(SchemaValidationError) as exc_info:
            SchemaRegistry().validate(
                {"testFilePatterns": ["*.yaml", 5], "includeIndependentTests": "yes"},
                "settings_schema",
            )

        errors = exc_info.value.errors
        assert errors[0].startswith("(settings): 'testsDirPath'")
        assert any(e.startswith("includeIndependentTests: 'yes'") for e in errors)
        assert any(e.startswith("testFilePatterns[1]: 5") for e in errors)
        assert "3 invalid settings key(s)" in str(exc_info.value)

    def test_list_schemas_missing_dir(self, tmp_path: Path) -> None:
        """Test that a missing schema directory lists nothing."""
        assert SchemaRegistry(tmp_path / "nope").list_schemas() == []
