# SPDX-License-Identifier: MIT
"""Semantic version values for release tags.

This package parses, validates, formats and bumps versions of the form
``[v]MAJOR.MINOR.PATCH[-prerelease][+build]``. Bumping any component clears
the pre-release label and build metadata and keeps the ``v`` prefix.

Example:
    >>> from tagver_version import parse_version, bump_version, VersionIncrementType
    >>>
    >>> version = parse_version("v3.4.5-beta.3")
    >>> version.prerelease
    'beta.3'
    >>> str(version.with_increment(VersionIncrementType.MAJOR))
    'v4.4.5'
    >>>
    >>> bump_version("1.2.3", VersionIncrementType.PATCH)
    '1.2.4'
"""

__version__ = "0.1.0"

from .errors import (
    VersionError,
    MissingValueError,
    InvalidFormatError,
    IllegalValueError,
)
from .semver import (
    Version,
    VersionBuilder,
    VersionIncrementType,
    parse_version,
    format_version,
    is_valid_semver,
    SEMVER_PATTERN,
    LABEL_PATTERN,
    MAX_VERSION_LENGTH,
    MAX_LABEL_LENGTH,
)
from .bump import bump_version

__all__ = [
    # Errors
    "VersionError",
    "MissingValueError",
    "InvalidFormatError",
    "IllegalValueError",
    # Version values
    "Version",
    "VersionBuilder",
    "VersionIncrementType",
    "parse_version",
    "format_version",
    "is_valid_semver",
    "SEMVER_PATTERN",
    "LABEL_PATTERN",
    "MAX_VERSION_LENGTH",
    "MAX_LABEL_LENGTH",
    # Bumping
    "bump_version",
]
