# SPDX-License-Identifier: MIT
"""Semantic version parsing, formatting and bumping for release tags.

Supports an optional ``v`` prefix, MAJOR.MINOR.PATCH, and optional labels:
- Pre-release: -alpha, -beta.3, -rc.1
- Build metadata: +sha809d8g42f87, +build.123

Labels are limited to letters, digits and periods.
"""

from __future__ import annotations

import enum
import re
from dataclasses import dataclass
from typing import Any, Optional

from .errors import IllegalValueError, InvalidFormatError, MissingValueError

MAX_VERSION_LENGTH = 128
MAX_LABEL_LENGTH = 48

# ASCII classes only: ``\d`` would also accept other Unicode digits
SEMVER_PATTERN = re.compile(
    r"v?(?P<major>[0-9]+)"
    r"\.(?P<minor>[0-9]+)"
    r"\.(?P<patch>[0-9]+)"
    r"(?:-(?P<prerelease>[0-9A-Za-z.]+))?"
    r"(?:\+(?P<build>[0-9A-Za-z.]+))?"
)

LABEL_PATTERN = re.compile(r"[0-9A-Za-z.]+")


class VersionIncrementType(enum.Enum):
    """Which component a bump applies to."""

    #: incompatible API change
    MAJOR = "major"
    #: new features, backward compatible
    MINOR = "minor"
    #: backward compatible bug fix
    PATCH = "patch"

    @classmethod
    def from_name(cls, name: str) -> "VersionIncrementType":
        """Resolve a member from its name, case-insensitively.

        Raises:
            MissingValueError: If name is None or blank
            InvalidFormatError: If name is not major, minor or patch
        """
        if name is None or not str(name).strip():
            raise MissingValueError(name, "Increment type is required")
        try:
            return cls(str(name).strip().lower())
        except ValueError:
            choices = ", ".join(member.value for member in cls)
            raise InvalidFormatError(
                name, f"Unknown increment type {name!r}, expected one of: {choices}"
            ) from None


def _normalize_label(value: Any, field_name: str) -> str:
    """Collapse blank labels to "" and strip the rest."""
    if value is None:
        return ""
    if not isinstance(value, str):
        raise IllegalValueError(
            value, f"{field_name} must be a string, got {type(value).__name__}"
        )
    return value.strip()


def _check_label(label: str, field_name: str) -> None:
    if len(label) > MAX_LABEL_LENGTH:
        raise IllegalValueError(
            label,
            f"{field_name} is too long: length={len(label)} max={MAX_LABEL_LENGTH}",
        )
    if label and LABEL_PATTERN.fullmatch(label) is None:
        raise IllegalValueError(
            label,
            f"{field_name} must contain only letters, numbers, and periods: {label}",
        )


def _check_component(value: Any, field_name: str) -> None:
    # bool is an int subclass but never a meaningful version number
    if isinstance(value, bool) or not isinstance(value, int):
        raise IllegalValueError(
            value, f"{field_name} must be an integer, got {type(value).__name__}"
        )
    if value < 0:
        raise IllegalValueError(value, f"{field_name} must be >= 0, got {value}")


@dataclass(frozen=True, slots=True)
class Version:
    """An immutable semantic version.

    Instances are validated on construction, so every Version in circulation
    satisfies the grammar's invariants. Bumps return new instances.

    Attributes:
        major: Major version number (breaking changes)
        minor: Minor version number (new features, backward compatible)
        patch: Patch version number (bug fixes, backward compatible)
        prerelease: Pre-release label (e.g., "beta.3"), "" when absent
        build: Build metadata (e.g., "sha809d8g42f87"), "" when absent
        include_v_prefix: Whether the text form starts with ``v``
    """

    major: int
    minor: int
    patch: int
    prerelease: str = ""
    build: str = ""
    include_v_prefix: bool = False

    def __post_init__(self) -> None:
        _check_component(self.major, "major")
        _check_component(self.minor, "minor")
        _check_component(self.patch, "patch")

        prerelease = _normalize_label(self.prerelease, "prerelease")
        build = _normalize_label(self.build, "build")
        _check_label(prerelease, "prerelease")
        _check_label(build, "build")

        # frozen dataclass: normalized values have to be written past __setattr__
        object.__setattr__(self, "prerelease", prerelease)
        object.__setattr__(self, "build", build)
        object.__setattr__(self, "include_v_prefix", bool(self.include_v_prefix))

    def __str__(self) -> str:
        """Return the canonical string representation of the version."""
        return format_version(self)

    @classmethod
    def from_parts(cls, major: int, minor: int, patch: int) -> "Version":
        """Create a plain version with no labels and no prefix."""
        return cls(major, minor, patch)

    @staticmethod
    def builder() -> "VersionBuilder":
        """Start a fluent VersionBuilder."""
        return VersionBuilder()

    @property
    def is_prerelease(self) -> bool:
        """Return True if this version carries a pre-release label."""
        return bool(self.prerelease)

    @property
    def base_version(self) -> str:
        """Return MAJOR.MINOR.PATCH without prefix or labels."""
        return f"{self.major}.{self.minor}.{self.patch}"

    def with_prefix(self, include: bool = True) -> "Version":
        """Return a copy with the ``v`` prefix switched on or off."""
        return Version(
            self.major, self.minor, self.patch, self.prerelease, self.build, include
        )

    def with_increment(self, kind: VersionIncrementType, amount: int = 1) -> "Version":
        """Bump the component selected by kind.

        Args:
            kind: MAJOR, MINOR or PATCH
            amount: How much to add; may be negative as long as the result
                stays >= 0

        Returns:
            A new Version with both labels cleared and the prefix kept

        Raises:
            MissingValueError: If kind is None
            InvalidFormatError: If kind is not a VersionIncrementType
            IllegalValueError: If the bumped component would be negative
        """
        if kind is None:
            raise MissingValueError(kind, "Increment type is required")
        if not isinstance(kind, VersionIncrementType):
            raise InvalidFormatError(
                kind, f"Increment type must be a VersionIncrementType, got {kind!r}"
            )

        if kind is VersionIncrementType.MAJOR:
            return self.with_major_inc(amount)
        if kind is VersionIncrementType.MINOR:
            return self.with_minor_inc(amount)
        if kind is VersionIncrementType.PATCH:
            return self.with_patch_inc(amount)
        raise InvalidFormatError(kind, f"Unhandled increment type: {kind}")

    def with_major_inc(self, amount: int = 1) -> "Version":
        """Bump major, drop pre-release and build metadata, keep the prefix."""
        _check_amount(amount)
        return Version(self.major + amount, self.minor, self.patch, "", "", self.include_v_prefix)

    def with_minor_inc(self, amount: int = 1) -> "Version":
        """Bump minor, drop pre-release and build metadata, keep the prefix."""
        _check_amount(amount)
        return Version(self.major, self.minor + amount, self.patch, "", "", self.include_v_prefix)

    def with_patch_inc(self, amount: int = 1) -> "Version":
        """Bump patch, drop pre-release and build metadata, keep the prefix."""
        _check_amount(amount)
        return Version(self.major, self.minor, self.patch + amount, "", "", self.include_v_prefix)


def _check_amount(amount: Any) -> None:
    if isinstance(amount, bool) or not isinstance(amount, int):
        raise IllegalValueError(
            amount, f"Increment amount must be an integer, got {type(amount).__name__}"
        )


class VersionBuilder:
    """Fluent assembly of a Version.

    Example:
        >>> Version.builder().major(1).minor(4).prerelease("rc.1").build_version()
        Version(major=1, minor=4, patch=0, prerelease='rc.1', build='', include_v_prefix=False)
    """

    def __init__(self) -> None:
        self._major = 0
        self._minor = 0
        self._patch = 0
        self._prerelease: Optional[str] = None
        self._build: Optional[str] = None
        self._include_v_prefix = False

    def major(self, value: int) -> "VersionBuilder":
        self._major = value
        return self

    def minor(self, value: int) -> "VersionBuilder":
        self._minor = value
        return self

    def patch(self, value: int) -> "VersionBuilder":
        self._patch = value
        return self

    def prerelease(self, value: Optional[str]) -> "VersionBuilder":
        self._prerelease = value
        return self

    def build(self, value: Optional[str]) -> "VersionBuilder":
        self._build = value
        return self

    def include_v_prefix(self, value: bool = True) -> "VersionBuilder":
        self._include_v_prefix = value
        return self

    def build_version(self) -> Version:
        """Validate and return the assembled Version."""
        return Version(
            major=self._major,
            minor=self._minor,
            patch=self._patch,
            prerelease=self._prerelease,  # type: ignore[arg-type]
            build=self._build,  # type: ignore[arg-type]
            include_v_prefix=self._include_v_prefix,
        )


def parse_version(version_string: str) -> Version:
    """Parse a semantic version string into a Version object.

    The whole string must match; surrounding whitespace is not trimmed.

    Args:
        version_string: Text of the form
            ``[v]MAJOR.MINOR.PATCH[-prerelease][+build]``

    Returns:
        A Version object with parsed components

    Raises:
        MissingValueError: If the string is None, empty, or blank
        InvalidFormatError: If the input is not a string, is longer than
            128 characters, or does not match the grammar
        IllegalValueError: If a captured label is longer than 48 characters

    Examples:
        >>> parse_version("v1.2.3")
        Version(major=1, minor=2, patch=3, prerelease='', build='', include_v_prefix=True)

        >>> parse_version("3.4.5-beta.3+sha809d8g42f87")
        Version(major=3, minor=4, patch=5, prerelease='beta.3', build='sha809d8g42f87', include_v_prefix=False)
    """
    if version_string is None:
        raise MissingValueError(version_string, "Version string is required")

    if not isinstance(version_string, str):
        raise InvalidFormatError(
            version_string,
            f"Version must be a string, got {type(version_string).__name__}",
        )

    if not version_string.strip():
        raise MissingValueError(version_string, "Version string cannot be empty")

    if len(version_string) > MAX_VERSION_LENGTH:
        raise InvalidFormatError(
            version_string,
            f"Version string is too long: length={len(version_string)} max={MAX_VERSION_LENGTH}",
        )

    match = SEMVER_PATTERN.fullmatch(version_string)
    if not match:
        raise InvalidFormatError(version_string, f"Invalid semantic version: {version_string}")

    return Version(
        major=int(match.group("major")),
        minor=int(match.group("minor")),
        patch=int(match.group("patch")),
        prerelease=match.group("prerelease") or "",
        build=match.group("build") or "",
        include_v_prefix=version_string.startswith("v"),
    )


def format_version(version: Version) -> str:
    """Render the canonical text of a version.

    ``v`` when the prefix is set, then MAJOR.MINOR.PATCH, then ``-prerelease``
    and ``+build`` for whichever labels are non-empty.
    """
    text = f"{version.major}.{version.minor}.{version.patch}"
    if version.include_v_prefix:
        text = "v" + text
    if version.prerelease:
        text += f"-{version.prerelease}"
    if version.build:
        text += f"+{version.build}"
    return text


def is_valid_semver(version_string: str) -> bool:
    """Check if a string parses as a version.

    Examples:
        >>> is_valid_semver("v1.0.0")
        True
        >>> is_valid_semver("1.0")
        False
    """
    try:
        parse_version(version_string)
    except (MissingValueError, InvalidFormatError, IllegalValueError):
        return False
    return True
