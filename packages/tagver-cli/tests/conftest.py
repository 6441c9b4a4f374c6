# SPDX-License-Identifier: MIT
"""Pytest configuration and fixtures for CLI tests."""

from __future__ import annotations

from pathlib import Path
from typing import Generator

import pytest
from click.testing import CliRunner


@pytest.fixture
def cli_runner() -> CliRunner:
    """Create a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def temp_project(tmp_path: Path) -> Generator[Path, None, None]:
    """Create a temporary project directory with pyproject.toml."""
    project_dir = tmp_path / "test_project"
    project_dir.mkdir()

    pyproject = project_dir / "pyproject.toml"
    pyproject.write_text(
        """[build-system]
requires = ["setuptools>=61"]
build-backend = "setuptools.build_meta"

[project]
name = "test-project"
version = "1.2.3-rc.1"

[tool.tagver]
tag-prefix = true
default-bump = "minor"
"""
    )

    yield project_dir


@pytest.fixture
def plain_project(tmp_path: Path) -> Path:
    """Create a project with no [tool.tagver] table."""
    project_dir = tmp_path / "plain_project"
    project_dir.mkdir()
    (project_dir / "pyproject.toml").write_text(
        """[project]
name = "plain-project"
version = "0.4.1"
"""
    )
    return project_dir
