# SPDX-License-Identifier: MIT
"""CLI entry point for tagver command."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional

import click

from tagver_version import VersionError

from .config import CLIConfig, ConfigError, load_config


class Context:
    """CLI context object passed to commands."""

    def __init__(self) -> None:
        self.config: Optional[CLIConfig] = None
        self.verbose: bool = False
        self.project_dir: Optional[Path] = None

    def load_config(self) -> CLIConfig:
        """Load configuration, caching the result."""
        if self.config is None:
            self.config = load_config(self.project_dir)
        return self.config


pass_context = click.make_pass_decorator(Context, ensure=True)


def echo_error(message: str) -> None:
    """Print an error message to stderr."""
    click.secho(f"Error: {message}", fg="red", err=True)


def echo_success(message: str) -> None:
    """Print a success message."""
    click.secho(message, fg="green")


def echo_info(message: str) -> None:
    """Print an info message."""
    click.echo(message)


def echo_verbose(ctx: Context, message: str) -> None:
    """Print an info message to stderr when --verbose is set."""
    if ctx.verbose:
        click.echo(message, err=True)


def echo_warning(message: str) -> None:
    """Print a warning message."""
    click.secho(f"Warning: {message}", fg="yellow", err=True)


@click.group()
@click.version_option(package_name="tagver")
@click.option(
    "-v",
    "--verbose",
    is_flag=True,
    help="Enable verbose output.",
)
@click.option(
    "-C",
    "--directory",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    help="Change to directory before running command.",
)
@pass_context
def cli(ctx: Context, verbose: bool, directory: Optional[Path]) -> None:
    """Semantic version tool for release tags.

    Parse, validate and bump versions of the form
    [v]MAJOR.MINOR.PATCH[-prerelease][+build].

    \b
    Examples:
        tagver bump v1.2.3 --kind minor
        tagver bump                      # bump the project version
        tagver validate 1.0.0 v2.0.0-rc.1
        tagver show v3.4.5-beta.3 --json
    """
    ctx.verbose = verbose
    ctx.project_dir = directory


# Import and register commands
from .commands import bump, validate, show

cli.add_command(bump.bump)
cli.add_command(validate.validate)
cli.add_command(show.show)


def main() -> None:
    """Main entry point for the CLI."""
    try:
        cli()
    except ConfigError as e:
        echo_error(str(e))
        sys.exit(1)
    except VersionError as e:
        echo_error(str(e))
        sys.exit(1)
    except Exception as e:
        echo_error(f"Unexpected error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
