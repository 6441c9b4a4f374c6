# SPDX-License-Identifier: MIT
"""Tests for CLI configuration loading."""

from __future__ import annotations

from pathlib import Path

import pytest

from tagver_cli.config import CLIConfig, ConfigError, find_project_root, load_config
from tagver_version import VersionIncrementType


class TestCLIConfig:
    """Tests for CLIConfig."""

    def test_from_pyproject(self, temp_project: Path) -> None:
        config = CLIConfig.from_pyproject(temp_project)

        assert config.project_dir == temp_project
        assert config.name == "test-project"
        assert config.version == "1.2.3-rc.1"
        assert config.tag_prefix is True
        assert config.default_bump is VersionIncrementType.MINOR
        assert config.source == temp_project / "pyproject.toml"
        assert config.has_pyproject()

    def test_defaults_without_tool_table(self, plain_project: Path) -> None:
        config = CLIConfig.from_pyproject(plain_project)

        assert config.version == "0.4.1"
        assert config.tag_prefix is False
        assert config.default_bump is VersionIncrementType.PATCH

    def test_missing_pyproject(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            CLIConfig.from_pyproject(tmp_path)

    def test_invalid_toml(self, tmp_path: Path) -> None:
        (tmp_path / "pyproject.toml").write_text("[project\nname = ")
        with pytest.raises(ConfigError, match="Invalid TOML"):
            CLIConfig.from_pyproject(tmp_path)

    def test_invalid_default_bump(self, tmp_path: Path) -> None:
        pyproject = {"tool": {"tagver": {"default-bump": "micro"}}}
        with pytest.raises(ConfigError, match="default-bump"):
            CLIConfig.from_pyproject_dict(pyproject, tmp_path)

    def test_invalid_tag_prefix(self, tmp_path: Path) -> None:
        pyproject = {"tool": {"tagver": {"tag-prefix": "yes"}}}
        with pytest.raises(ConfigError, match="tag-prefix"):
            CLIConfig.from_pyproject_dict(pyproject, tmp_path)

    def test_non_string_version(self, tmp_path: Path) -> None:
        pyproject = {"project": {"version": 1}}
        with pytest.raises(ConfigError, match="version"):
            CLIConfig.from_pyproject_dict(pyproject, tmp_path)


class TestFindProjectRoot:
    """Tests for find_project_root and load_config."""

    def test_finds_parent(self, temp_project: Path) -> None:
        nested = temp_project / "src" / "pkg"
        nested.mkdir(parents=True)
        assert find_project_root(nested) == temp_project.resolve()

    def test_load_config_from_directory(self, temp_project: Path) -> None:
        assert load_config(temp_project).version == "1.2.3-rc.1"

    def test_load_config_without_pyproject(self, tmp_path: Path) -> None:
        config = load_config(tmp_path)
        assert config.project_dir == tmp_path
        assert config.version == ""
        assert config.source is None
