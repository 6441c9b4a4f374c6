# SPDX-License-Identifier: MIT
"""Tag-side helpers for version tags.

This package holds the pure pieces of tag handling: mapping tag refs to
version tag names and back, and the annotated-tag metadata record.

Example:
    >>> from tagver_tag import next_tag_name, tag_ref_for
    >>> from tagver_version import VersionIncrementType
    >>>
    >>> next_tag_name("refs/tags/v0.0.3", VersionIncrementType.PATCH)
    'v0.0.4'
    >>> tag_ref_for("v0.0.4")
    'refs/tags/v0.0.4'
"""

__version__ = "0.1.0"

from .annotated import (
    AnnotatedTag,
    AnnotatedTagBuilder,
)
from .refs import (
    TAG_REF_PREFIX,
    next_tag_name,
    tag_name_from_ref,
    tag_name_matches,
    tag_ref_for,
    version_from_ref,
)

__all__ = [
    # Annotated tags
    "AnnotatedTag",
    "AnnotatedTagBuilder",
    # Tag refs
    "TAG_REF_PREFIX",
    "next_tag_name",
    "tag_name_from_ref",
    "tag_name_matches",
    "tag_ref_for",
    "version_from_ref",
]
