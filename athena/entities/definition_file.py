"""
Test File Module.

A DefinitionFile is the raw record produced for every definition file found on
disk, before classification: its name, absolute path and parsed contents.
"""

from __future__ import annotations

import json
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, Mapping

import yaml


class DefinitionFileError(Exception):
    """Raised when a definition file or the tests directory cannot be loaded."""

    pass


class DefinitionFile:
    """
    Raw, immutable record of a parsed definition file.

    The record name is the ``name`` declared in the file, falling back to
    the file stem when the file declares none.

    Attributes:
        name: Record name used for reference resolution.
        path: Absolute path of the definition file.
        config: Parsed mapping (read-only view).
    """

    def __init__(self, path: str | Path, config: Mapping[str, Any]) -> None:
        self._path = Path(path).resolve()
        self._config = dict(config)
        declared_name = self._config.get("name")
        self._name = str(declared_name) if declared_name else self._path.stem

    @classmethod
    def load(cls, path: str | Path) -> "DefinitionFile":
        """
        Read and parse a definition file.

        Raises:
            DefinitionFileError: If the file cannot be read, is malformed
                or does not contain a mapping.
        """
        file_path = Path(path)

        try:
            content = file_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise DefinitionFileError(f"Failed to read definition file {file_path}: {e}") from e

        try:
            if file_path.suffix.lower() == ".json":
                data = json.loads(content)
            else:
                data = yaml.safe_load(content)
        except (yaml.YAMLError, json.JSONDecodeError) as e:
            raise DefinitionFileError(f"Failed to parse definition file {file_path}: {e}") from e

        if not isinstance(data, dict):
            raise DefinitionFileError(
                f"Definition file must contain a mapping (dict), "
                f"got {type(data).__name__}: {file_path}"
            )

        return cls(file_path, data)

    @property
    def name(self) -> str:
        return self._name

    @property
    def path(self) -> Path:
        return self._path

    @property
    def config(self) -> Mapping[str, Any]:
        return MappingProxyType(self._config)

    def get_name(self) -> str:
        return self._name

    def get_path(self) -> Path:
        return self._path

    def get_config(self) -> Dict[str, Any]:
        """Return a shallow copy of the parsed contents for entity construction."""
        return dict(self._config)

    def __repr__(self) -> str:
        return f"DefinitionFile(name={self._name!r}, path={str(self._path)!r})"
