# SPDX-License-Identifier: MIT
"""Show the parsed fields of a version."""

from __future__ import annotations

import json
from dataclasses import asdict

import click

from tagver_version import VersionError, parse_version

from ..main import echo_error, echo_info, pass_context, Context


@click.command()
@click.argument("version")
@click.option(
    "--json",
    "as_json",
    is_flag=True,
    help="Print the fields as a JSON object.",
)
@pass_context
def show(ctx: Context, version: str, as_json: bool) -> None:
    """Print the components of VERSION.

    \b
    Examples:
        tagver show v3.4.5-beta.3
        tagver show 1.2.3+sha1 --json
    """
    try:
        parsed = parse_version(version)
    except VersionError as e:
        echo_error(str(e))
        raise SystemExit(1)

    fields = asdict(parsed)
    fields["canonical"] = str(parsed)

    if as_json:
        echo_info(json.dumps(fields, indent=2))
        return

    for key, value in fields.items():
        echo_info(f"{key}: {value}")
