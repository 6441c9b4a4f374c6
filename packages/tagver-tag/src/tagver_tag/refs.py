# SPDX-License-Identifier: MIT
"""Conversions between version-control tag refs and version tag names.

A tag ref looks like ``refs/tags/v1.2.3``; the tag name is the part after
``refs/tags/`` and must be a valid version.
"""

from __future__ import annotations

from tagver_version import (
    MissingValueError,
    Version,
    VersionIncrementType,
    parse_version,
)

TAG_REF_PREFIX = "refs/tags/"


def _require(value: str, name: str) -> str:
    if value is None or not str(value).strip():
        raise MissingValueError(value, f"{name} is required")
    return value


def tag_name_from_ref(ref: str) -> str:
    """Return the short tag name of a ref.

    Names without the ``refs/tags/`` prefix are returned unchanged.

    Examples:
        >>> tag_name_from_ref("refs/tags/v0.0.4")
        'v0.0.4'
        >>> tag_name_from_ref("v0.0.4")
        'v0.0.4'
    """
    _require(ref, "Tag ref")
    if ref.startswith(TAG_REF_PREFIX):
        return ref[len(TAG_REF_PREFIX):]
    return ref


def tag_ref_for(tag_name: str) -> str:
    """Return the full ref for a tag name, validating it as a version.

    Raises:
        MissingValueError: If tag_name is blank
        InvalidFormatError: If tag_name is not a version
    """
    _require(tag_name, "Tag name")
    parse_version(tag_name)
    return f"{TAG_REF_PREFIX}{tag_name}"


def tag_name_matches(ref: str, tag_name: str) -> bool:
    """Check whether a ref names the given tag.

    Accepts the bare name, ``refs/tags/<name>``, and the slash-less
    ``refs/tags<name>`` form some tools emit.
    """
    _require(tag_name, "Tag name")
    if ref is None:
        return False
    return ref in (tag_name, f"{TAG_REF_PREFIX}{tag_name}", f"refs/tags{tag_name}")


def version_from_ref(ref: str) -> Version:
    """Parse the version a tag ref points at."""
    return parse_version(tag_name_from_ref(ref))


def next_tag_name(current: str, kind: VersionIncrementType, *, amount: int = 1) -> str:
    """Return the tag name that follows current.

    Args:
        current: Tag name or tag ref, e.g. "v0.0.3" or "refs/tags/v0.0.3"
        kind: Component to bump
        amount: How much to add

    Returns:
        Bumped tag name with the prefix of current, e.g. "v0.0.4"
    """
    if kind is None:
        raise MissingValueError(kind, "Increment type is required")
    return str(version_from_ref(current).with_increment(kind, amount))
