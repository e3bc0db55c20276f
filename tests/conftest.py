"""
Root conftest.py — Shared Pytest fixtures.

Provides fixtures for:
- The static definition corpus under tests/data/.
- Writing ad-hoc definition files into a temporary tests directory.
- Collecting diagnostics emitted by the EntityManager.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Callable

import pytest
import yaml

from athena.config.settings import Settings
from athena.diagnostics import CollectingSink


# ---------------------------------------------------------------------------
# Static Corpus Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture(scope="session")
def data_dir() -> Path:
    """Return the path to the static test data directory."""
    return Path(__file__).parent / "data"


@pytest.fixture(scope="session")
def definitions_dir(data_dir: Path) -> Path:
    """Return the path to the static definition corpus."""
    return data_dir / "definitions"


@pytest.fixture
def corpus_settings(definitions_dir: Path) -> Settings:
    """Settings pointing at the static definition corpus."""
    return Settings(tests_dir_path=definitions_dir)


# ---------------------------------------------------------------------------
# Temporary Corpus Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def tests_dir(tmp_path: Path) -> Path:
    """Create an empty temporary tests directory."""
    directory = tmp_path / "definitions"
    directory.mkdir()
    return directory


@pytest.fixture
def write_definition(tests_dir: Path) -> Callable[..., Path]:
    """
    Factory writing a YAML definition file into the temporary tests directory.

    Usage::

        write_definition("suites/auth.yaml", name="auth", type="suite", tests=["a"])
    """

    def _write(relative_path: str, **config: Any) -> Path:
        path = tests_dir / relative_path
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(yaml.safe_dump(config, sort_keys=False), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def tmp_settings(tests_dir: Path) -> Settings:
    """Settings pointing at the temporary tests directory."""
    return Settings(tests_dir_path=tests_dir)


@pytest.fixture
def sink() -> CollectingSink:
    """Diagnostics sink recording every event in memory."""
    return CollectingSink()
