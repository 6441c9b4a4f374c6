# SPDX-License-Identifier: MIT
"""Unit tests for tag ref helpers."""

import pytest

from tagver_tag import (
    TAG_REF_PREFIX,
    next_tag_name,
    tag_name_from_ref,
    tag_name_matches,
    tag_ref_for,
    version_from_ref,
)
from tagver_version import (
    InvalidFormatError,
    MissingValueError,
    Version,
    VersionIncrementType,
)


class TestTagNameFromRef:
    """Tests for tag_name_from_ref."""

    def test_strips_prefix(self):
        assert tag_name_from_ref("refs/tags/v0.0.4") == "v0.0.4"

    def test_bare_name_unchanged(self):
        assert tag_name_from_ref("0.0.4") == "0.0.4"

    @pytest.mark.parametrize("ref", [None, "", "  "])
    def test_blank(self, ref):
        with pytest.raises(MissingValueError):
            tag_name_from_ref(ref)


class TestTagRefFor:
    """Tests for tag_ref_for."""

    def test_builds_ref(self):
        assert tag_ref_for("v1.2.3") == TAG_REF_PREFIX + "v1.2.3"

    def test_rejects_non_version(self):
        with pytest.raises(InvalidFormatError):
            tag_ref_for("release-1")

    def test_blank(self):
        with pytest.raises(MissingValueError):
            tag_ref_for("")


class TestTagNameMatches:
    """Tests for tag_name_matches."""

    @pytest.mark.parametrize("ref", ["v0.0.3", "refs/tags/v0.0.3", "refs/tagsv0.0.3"])
    def test_matching_forms(self, ref):
        assert tag_name_matches(ref, "v0.0.3") is True

    @pytest.mark.parametrize("ref", ["0.0.3", "refs/tags/v0.0.30", "refs/heads/v0.0.3", None])
    def test_non_matching(self, ref):
        assert tag_name_matches(ref, "v0.0.3") is False

    def test_blank_tag_name(self):
        with pytest.raises(MissingValueError):
            tag_name_matches("refs/tags/v0.0.3", " ")


class TestVersionFromRef:
    """Tests for version_from_ref and next_tag_name."""

    def test_version_from_ref(self):
        assert version_from_ref("refs/tags/v3.4.5-beta.3") == Version(
            3, 4, 5, prerelease="beta.3", include_v_prefix=True
        )

    def test_next_tag_name_from_ref(self):
        assert next_tag_name("refs/tags/v0.0.3", VersionIncrementType.PATCH) == "v0.0.4"

    def test_next_tag_name_clears_labels(self):
        assert next_tag_name("1.2.3-rc.1", VersionIncrementType.MINOR, amount=2) == "1.4.3"

    def test_next_tag_name_missing_kind(self):
        with pytest.raises(MissingValueError):
            next_tag_name("v1.0.0", None)  # type: ignore
