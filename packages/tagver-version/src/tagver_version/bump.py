# SPDX-License-Identifier: MIT
"""Text-in, text-out version bumps for callers that only hold tag names."""

from __future__ import annotations

from typing import Optional

from .errors import MissingValueError
from .semver import VersionIncrementType, parse_version


def bump_version(
    old_version: Optional[str],
    kind: VersionIncrementType,
    amount: int = 1,
) -> str:
    """Return the next version after old_version.

    Args:
        old_version: Current version text, e.g. "0.1.2" or "v0.1.2"
        kind: Component to bump
        amount: How much to add (defaults to 1)

    Returns:
        Canonical text of the bumped version, pre-release and build metadata
        dropped, ``v`` prefix kept (e.g. "0.1.3" or "v0.1.3")

    Raises:
        MissingValueError: If old_version is blank or kind is None
        InvalidFormatError: If old_version is not a valid version
        IllegalValueError: If the bump would make a component negative

    Examples:
        >>> bump_version("v0.1.2", VersionIncrementType.MINOR)
        'v0.2.2'
        >>> bump_version("1.2.3-beta.4+sha899d8g79f87", VersionIncrementType.MAJOR)
        '2.2.3'
    """
    if kind is None:
        raise MissingValueError(kind, "Increment type is required")
    if old_version is None or not str(old_version).strip():
        raise MissingValueError(old_version, "Old version is required")

    return str(parse_version(old_version).with_increment(kind, amount))
