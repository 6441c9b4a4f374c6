# SPDX-License-Identifier: MIT
"""Exceptions raised while parsing, building, or bumping versions."""

from __future__ import annotations

from typing import Any


class VersionError(ValueError):
    """Base class for every version failure.

    Attributes:
        value: The offending input, as given by the caller
        message: Human readable description of the failure
    """

    def __init__(self, value: Any, message: str = ""):
        self.value = value
        self.message = message or f"Invalid version value: {value!r}"
        super().__init__(self.message)


class MissingValueError(VersionError):
    """Raised when a required argument is None, empty, or blank."""


class InvalidFormatError(VersionError):
    """Raised when text does not follow the version grammar."""


class IllegalValueError(VersionError):
    """Raised when a well-formed value is semantically invalid.

    Covers negative components, overlong labels, and labels with characters
    outside ``[0-9A-Za-z.]``.
    """
