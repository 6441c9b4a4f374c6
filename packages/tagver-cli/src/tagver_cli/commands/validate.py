# SPDX-License-Identifier: MIT
"""Validate version strings."""

from __future__ import annotations

import click

from tagver_version import VersionError, parse_version

from ..main import echo_error, echo_success, echo_verbose, pass_context, Context


@click.command()
@click.argument("versions", nargs=-1, required=True)
@pass_context
def validate(ctx: Context, versions: tuple[str, ...]) -> None:
    """Check that each VERSION is a valid version string.

    Exits with status 1 if any value is invalid.

    \b
    Examples:
        tagver validate 1.0.0
        tagver validate v1.2.3-beta.1 v1.2.3+sha1
    """
    failures = 0

    for raw in versions:
        try:
            version = parse_version(raw)
        except VersionError as e:
            echo_error(f"{raw!r}: {e.message}")
            failures += 1
            continue

        echo_verbose(ctx, f"{raw}: {version!r}")
        echo_success(f"{raw}: valid")

    if failures:
        echo_error(f"{failures} of {len(versions)} version(s) invalid")
        raise SystemExit(1)
