# SPDX-License-Identifier: MIT
"""Integration test: end-to-end release tagging flow.

Tests the complete flow of:
1. Reading the current release tag from a tag ref
2. Bumping it from the command line using project configuration
3. Turning the bumped version into a new tag ref
4. Recording the annotated tag metadata for the new tag
"""

from datetime import datetime, timezone
from pathlib import Path

import pytest
from click.testing import CliRunner

from tagver_cli.main import cli
from tagver_tag import (
    AnnotatedTag,
    next_tag_name,
    tag_name_from_ref,
    tag_name_matches,
    tag_ref_for,
    version_from_ref,
)
from tagver_version import VersionIncrementType, bump_version


@pytest.fixture
def release_project(tmp_path: Path) -> Path:
    """Create a project configured to tag releases with a v prefix."""
    project_dir = tmp_path / "release_project"
    project_dir.mkdir()
    (project_dir / "pyproject.toml").write_text(
        """[project]
name = "release-project"
version = "0.3.9-rc.2+sha899d8g79f87"

[tool.tagver]
tag-prefix = true
default-bump = "patch"
"""
    )
    return project_dir


def test_cli_bump_matches_library(release_project: Path) -> None:
    """The CLI and the library agree on the next tag name."""
    runner = CliRunner()
    result = runner.invoke(cli, ["-C", str(release_project), "bump"])

    assert result.exit_code == 0
    new_tag = result.output.strip()
    assert new_tag == "v0.3.10"
    assert new_tag == bump_version("v0.3.9-rc.2+sha899d8g79f87", VersionIncrementType.PATCH)


def test_tag_ref_round_trip(release_project: Path) -> None:
    """A bumped tag name survives ref conversion and annotation."""
    current_ref = "refs/tags/v0.3.9"
    assert version_from_ref(current_ref).include_v_prefix is True

    runner = CliRunner()
    result = runner.invoke(
        cli, ["-C", str(release_project), "bump", tag_name_from_ref(current_ref), "-k", "minor"]
    )
    assert result.exit_code == 0
    new_name = result.output.strip()
    assert new_name == next_tag_name(current_ref, VersionIncrementType.MINOR)

    new_ref = tag_ref_for(new_name)
    assert new_ref == "refs/tags/v0.4.9"
    assert tag_name_matches(new_ref, new_name)

    tag = (
        AnnotatedTag.builder()
        .ts(datetime(2024, 3, 5, tzinfo=timezone.utc))
        .short_name(tag_name_from_ref(new_ref))
        .full_message(f"Release {new_name}\n")
        .short_message(f"Release {new_name}")
        .tagger("Release Bot")
        .tagger_email("release@example.com")
        .build()
    )
    assert tag.short_name == "v0.4.9"
    assert tag.full_message == "Release v0.4.9"
    assert str(version_from_ref(tag.short_name)) == new_name
