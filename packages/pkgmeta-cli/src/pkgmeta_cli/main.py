# SPDX-License-Identifier: MIT
"""CLI entry point for the pkgmeta command."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional

import click

from . import __version__
from .config import CLIConfig, ConfigError, load_config
from .metadata import MetadataError, load_package_info

logger = logging.getLogger(__name__)


class Context:
    """CLI context object passed to commands."""

    def __init__(self) -> None:
        self.config: Optional[CLIConfig] = None
        self.project_dir: Optional[Path] = None

    def load_config(self) -> CLIConfig:
        """Load configuration, caching the result."""
        if self.config is None:
            self.config = load_config(self.project_dir)
        return self.config


pass_context = click.make_pass_decorator(Context, ensure=True)


def setup_logging(verbose: bool) -> None:
    """Configure logging for the command line."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="[%(levelname)s] %(message)s",
    )


def echo_error(message: str) -> None:
    """Print an error message to stderr."""
    click.secho(f"Error: {message}", fg="red", err=True)


def echo_success(message: str) -> None:
    """Print a success message."""
    click.secho(message, fg="green")


def echo_info(message: str) -> None:
    """Print an info message."""
    click.echo(message)


def echo_warning(message: str) -> None:
    """Print a warning message."""
    click.secho(f"Warning: {message}", fg="yellow", err=True)


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="pkgmeta")
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
    """Package metadata utility.

    Collect project metadata into a pkg.info file, validate it, bump its
    version and generate a README from it.

    \b
    Examples:
        pkgmeta init
        pkgmeta validate
        pkgmeta bump minor
        pkgmeta readme --silent
        pkgmeta compare 1.0.0-rc.1 1.0.0
    """
    setup_logging(verbose)
    ctx.project_dir = directory

    if click.get_current_context().invoked_subcommand is not None:
        return

    echo_info("pkgmeta - package info utility")
    try:
        config = ctx.load_config()
        info = load_package_info(config.pkg_info_path)
    except (ConfigError, MetadataError, FileNotFoundError) as e:
        logger.debug("No usable pkg.info: %s", e)
        info = None

    if info is not None and info.repo:
        echo_info(f"No command selected, please visit {info.repo} for usage information.")
    else:
        echo_info("No command selected, run 'pkgmeta --help' for usage information.")


# Import and register commands
from .commands import bump, compare, init, readme, validate

cli.add_command(init.init)
cli.add_command(readme.readme)
cli.add_command(validate.validate)
cli.add_command(bump.bump)
cli.add_command(compare.compare)


def main() -> None:
    """Main entry point for the CLI."""
    try:
        cli()
    except ConfigError as e:
        echo_error(str(e))
        sys.exit(1)
    except MetadataError as e:
        echo_error(str(e))
        sys.exit(1)
    except FileNotFoundError as e:
        echo_error(str(e))
        sys.exit(1)
    except Exception as e:
        echo_error(f"Unexpected error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
