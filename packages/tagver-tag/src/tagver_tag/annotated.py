# SPDX-License-Identifier: MIT
"""Metadata of an annotated tag.

The record is independent of the version type: a tag's short name is kept as
given and never parsed here.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Optional

from tagver_version import IllegalValueError, MissingValueError


def _normalize(value: Any) -> str:
    if value is None:
        return ""
    if not isinstance(value, str):
        raise IllegalValueError(value, f"Expected a string, got {type(value).__name__}")
    return value.strip()


@dataclass(frozen=True, slots=True)
class AnnotatedTag:
    """An annotated tag as reported by the version-control system.

    Attributes:
        ts: When the tag was created (timezone-aware)
        short_name: Tag name without ``refs/tags/``, e.g. "v0.0.4"
        full_message: Whole tag message
        short_message: First line of the tag message
        tagger: Tagger display name
        tagger_email: Tagger email address
    """

    ts: datetime
    short_name: str
    full_message: str = ""
    short_message: str = ""
    tagger: str = ""
    tagger_email: str = ""

    def __post_init__(self) -> None:
        if self.ts is None:
            raise MissingValueError(self.ts, "ts is required")
        if not isinstance(self.ts, datetime):
            raise IllegalValueError(self.ts, f"ts must be a datetime, got {type(self.ts).__name__}")
        if self.ts.tzinfo is None or self.ts.utcoffset() is None:
            raise IllegalValueError(self.ts, "ts must be timezone-aware")

        short_name = _normalize(self.short_name)
        if not short_name:
            raise MissingValueError(self.short_name, "short_name is required")

        object.__setattr__(self, "short_name", short_name)
        for name in ("full_message", "short_message", "tagger", "tagger_email"):
            object.__setattr__(self, name, _normalize(getattr(self, name)))

    @staticmethod
    def builder() -> "AnnotatedTagBuilder":
        """Start a fluent AnnotatedTagBuilder."""
        return AnnotatedTagBuilder()


class AnnotatedTagBuilder:
    """Fluent assembly of an AnnotatedTag."""

    def __init__(self) -> None:
        self._ts: Optional[datetime] = None
        self._short_name: Optional[str] = None
        self._full_message: Optional[str] = None
        self._short_message: Optional[str] = None
        self._tagger: Optional[str] = None
        self._tagger_email: Optional[str] = None

    def ts(self, value: datetime) -> "AnnotatedTagBuilder":
        self._ts = value
        return self

    def short_name(self, value: str) -> "AnnotatedTagBuilder":
        self._short_name = value
        return self

    def full_message(self, value: str) -> "AnnotatedTagBuilder":
        self._full_message = value
        return self

    def short_message(self, value: str) -> "AnnotatedTagBuilder":
        self._short_message = value
        return self

    def tagger(self, value: str) -> "AnnotatedTagBuilder":
        self._tagger = value
        return self

    def tagger_email(self, value: str) -> "AnnotatedTagBuilder":
        self._tagger_email = value
        return self

    def build(self) -> AnnotatedTag:
        """Validate and return the assembled AnnotatedTag."""
        return AnnotatedTag(
            ts=self._ts,  # type: ignore[arg-type]
            short_name=self._short_name,  # type: ignore[arg-type]
            full_message=self._full_message,  # type: ignore[arg-type]
            short_message=self._short_message,  # type: ignore[arg-type]
            tagger=self._tagger,  # type: ignore[arg-type]
            tagger_email=self._tagger_email,  # type: ignore[arg-type]
        )
