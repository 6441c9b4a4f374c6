# SPDX-License-Identifier: MIT
"""Bump a version or the project version."""

from __future__ import annotations

from typing import Optional

import click

from tagver_version import Version, VersionError, VersionIncrementType, parse_version

from ..config import ConfigError
from ..main import echo_error, echo_info, echo_verbose, pass_context, Context


def _project_version(ctx: Context) -> Version:
    """Return the configured project version, prefixed when tag-prefix is set."""
    config = ctx.load_config()
    if not config.version:
        raise ConfigError(
            "No version given and no [project] version found in pyproject.toml"
        )

    echo_verbose(ctx, f"Using project version {config.version} from {config.source}")
    version = parse_version(config.version)
    if config.tag_prefix:
        version = version.with_prefix(True)
    return version


@click.command()
@click.argument("version", required=False)
@click.option(
    "--kind",
    "-k",
    type=click.Choice([member.value for member in VersionIncrementType], case_sensitive=False),
    help="Component to bump. Defaults to [tool.tagver] default-bump, else patch.",
)
@click.option(
    "--amount",
    "-n",
    type=int,
    default=1,
    show_default=True,
    help="How much to add to the component.",
)
@click.option(
    "--prefix/--no-prefix",
    default=None,
    help="Force or drop the leading 'v' on the result.",
)
@pass_context
def bump(
    ctx: Context,
    version: Optional[str],
    kind: Optional[str],
    amount: int,
    prefix: Optional[bool],
) -> None:
    """Print the version that follows VERSION.

    Pre-release and build metadata are always dropped. Without VERSION the
    [project] version from pyproject.toml is bumped.

    \b
    Examples:
        tagver bump v1.2.3                  # v1.2.4
        tagver bump 1.2.3-rc.1 -k major     # 2.2.3
        tagver bump v0.9.0 -k minor -n 2    # v0.11.0
        tagver bump --prefix                # project version as a tag name
    """
    try:
        if version is None:
            current = _project_version(ctx)
        else:
            current = parse_version(version)

        if kind is None:
            increment = ctx.load_config().default_bump
        else:
            increment = VersionIncrementType.from_name(kind)

        echo_verbose(ctx, f"Bumping {current} by {amount} ({increment.value})")
        bumped = current.with_increment(increment, amount)
    except (ConfigError, VersionError) as e:
        echo_error(str(e))
        raise SystemExit(1)

    if prefix is not None:
        bumped = bumped.with_prefix(prefix)

    echo_info(str(bumped))
