# SPDX-License-Identifier: MIT
"""CLI configuration loading from pyproject.toml."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

from tagver_version import VersionError, VersionIncrementType


class ConfigError(Exception):
    """Raised when configuration loading fails."""

    pass


@dataclass
class CLIConfig:
    """CLI configuration loaded from pyproject.toml.

    Attributes:
        project_dir: Directory containing pyproject.toml
        name: Project name from [project]
        version: Project version from [project]
        tag_prefix: Render the project version as a v-prefixed tag name
        default_bump: Increment used when no --kind is given
        source: pyproject.toml the values came from, None for defaults
    """

    project_dir: Path
    name: str = ""
    version: str = ""
    tag_prefix: bool = False
    default_bump: VersionIncrementType = VersionIncrementType.PATCH
    source: Optional[Path] = None

    @classmethod
    def from_pyproject(cls, project_dir: str | Path) -> "CLIConfig":
        """Load configuration from pyproject.toml.

        Args:
            project_dir: Directory containing pyproject.toml

        Returns:
            CLIConfig instance

        Raises:
            ConfigError: If the file is invalid
            FileNotFoundError: If pyproject.toml doesn't exist
        """
        project_path = Path(project_dir)
        pyproject_path = project_path / "pyproject.toml"

        if not pyproject_path.exists():
            raise FileNotFoundError(f"pyproject.toml not found in {project_path}")

        try:
            with open(pyproject_path, "rb") as f:
                pyproject = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise ConfigError(f"Invalid TOML syntax: {e}") from e

        config = cls.from_pyproject_dict(pyproject, project_path)
        config.source = pyproject_path
        return config

    @classmethod
    def from_pyproject_dict(
        cls,
        pyproject: dict[str, Any],
        project_dir: Path,
    ) -> "CLIConfig":
        """Create CLIConfig from a parsed pyproject.toml dictionary.

        Args:
            pyproject: Parsed pyproject.toml as a dictionary
            project_dir: Directory containing pyproject.toml

        Returns:
            CLIConfig instance

        Raises:
            ConfigError: If [tool.tagver] holds values of the wrong type
        """
        project = pyproject.get("project", {})
        tool_tagver = pyproject.get("tool", {}).get("tagver", {})

        tag_prefix = tool_tagver.get("tag-prefix", False)
        if not isinstance(tag_prefix, bool):
            raise ConfigError(
                f"[tool.tagver] tag-prefix must be true or false, got {tag_prefix!r}"
            )

        default_bump = VersionIncrementType.PATCH
        if "default-bump" in tool_tagver:
            try:
                default_bump = VersionIncrementType.from_name(tool_tagver["default-bump"])
            except VersionError as e:
                raise ConfigError(f"[tool.tagver] default-bump: {e}") from e

        version = project.get("version", "")
        if not isinstance(version, str):
            raise ConfigError(f"[project] version must be a string, got {version!r}")

        return cls(
            project_dir=project_dir,
            name=project.get("name", ""),
            version=version,
            tag_prefix=tag_prefix,
            default_bump=default_bump,
        )

    def has_pyproject(self) -> bool:
        """Check if pyproject.toml exists in the project directory."""
        return (self.project_dir / "pyproject.toml").exists()


def find_project_root(start_dir: Optional[str | Path] = None) -> Path:
    """Find the project root by looking for pyproject.toml.

    Args:
        start_dir: Directory to start searching from (defaults to cwd)

    Returns:
        Path to the project root directory

    Raises:
        ConfigError: If no project root is found
    """
    current = Path(start_dir) if start_dir else Path.cwd()
    current = current.resolve()

    while current != current.parent:
        if (current / "pyproject.toml").exists():
            return current
        current = current.parent

    raise ConfigError("Could not find project root (no pyproject.toml found)")


def load_config(project_dir: Optional[str | Path] = None) -> CLIConfig:
    """Load CLI configuration from the project directory.

    Args:
        project_dir: Project directory (defaults to finding project root)

    Returns:
        CLIConfig instance; defaults when no pyproject.toml exists

    Raises:
        ConfigError: If configuration cannot be loaded
    """
    if project_dir is None:
        try:
            project_dir = find_project_root()
        except ConfigError:
            return CLIConfig(project_dir=Path.cwd())

    project_path = Path(project_dir)

    if (project_path / "pyproject.toml").exists():
        return CLIConfig.from_pyproject(project_path)

    return CLIConfig(project_dir=project_path)
