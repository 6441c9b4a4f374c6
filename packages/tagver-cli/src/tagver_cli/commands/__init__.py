# SPDX-License-Identifier: MIT
"""CLI command implementations."""

from . import bump, validate, show

__all__ = ["bump", "validate", "show"]
