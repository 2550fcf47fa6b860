"""Shared pytest fixtures for workspace-based tests."""

from __future__ import annotations

import textwrap
from collections.abc import Callable
from pathlib import Path
from typing import TypeAlias

import pytest

from cairn.config import CairnSettings
from cairn.constants.config import DEFAULT_CONFIG_SUFFIX, DEFAULT_FEATURE_SUFFIX
from cairn.host import Host

FileWriter: TypeAlias = Callable[[str, str], Path]


@pytest.fixture(scope="session")
def fixtures_root() -> Path:
    """Return root directory for test fixtures."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture(scope="session")
def sample_workspace(fixtures_root: Path) -> Path:
    """Return the bundled sample workspace (settings, features and configuration)."""
    return fixtures_root / "workspace"


@pytest.fixture
def workspace(tmp_path: Path) -> Path:
    """Empty workspace with ``lib`` and ``conf`` directories."""
    (tmp_path / "lib").mkdir()
    (tmp_path / "conf").mkdir()
    return tmp_path


@pytest.fixture
def write_feature(workspace: Path) -> FileWriter:
    """Write ``lib/<name>.feature.py`` with dedented source."""

    def _write(name: str, source: str) -> Path:
        path = workspace / "lib" / f"{name}{DEFAULT_FEATURE_SUFFIX}"
        path.write_text(textwrap.dedent(source), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def write_config(workspace: Path) -> FileWriter:
    """Write ``conf/<name>.conf.py`` with dedented source."""

    def _write(name: str, source: str) -> Path:
        path = workspace / "conf" / f"{name}{DEFAULT_CONFIG_SUFFIX}"
        path.write_text(textwrap.dedent(source), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def host(workspace: Path) -> Host:
    """Host over the temporary workspace with default settings."""
    return Host(CairnSettings.for_root(workspace))
