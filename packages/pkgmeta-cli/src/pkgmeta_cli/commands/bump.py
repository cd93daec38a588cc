# SPDX-License-Identifier: MIT
"""Bump the version stored in pkg.info."""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Optional

import click

from pkgmeta_version import InvalidVersionError, Version

from ..config import ConfigError
from ..metadata import MetadataError, load_package_info, save_package_info
from ..main import echo_error, echo_info, echo_success, pass_context, Context

logger = logging.getLogger(__name__)

PARTS = ("major", "minor", "patch")


def bump_version(
    version: Version,
    part: Optional[str] = None,
    prerelease: Optional[str] = None,
    metadata: Optional[str] = None,
) -> Version:
    """Derive the next version.

    The increment is applied first, then the prerelease and metadata (an
    empty string clears them).

    Raises:
        ValueError: If ``part`` is not major, minor or patch
        InvalidVersionError: If the prerelease or metadata is malformed

    Examples:
        >>> str(bump_version(Version(1, 2, 3), "minor", prerelease="rc.1"))
        '1.3.0-rc.1'
    """
    if part == "major":
        version = version.inc_major()
    elif part == "minor":
        version = version.inc_minor()
    elif part == "patch":
        version = version.inc_patch()
    elif part is not None:
        raise ValueError(f"Unknown version part: {part}")

    if prerelease is not None:
        version = version.with_prerelease(prerelease)
    if metadata is not None:
        version = version.with_metadata(metadata)
    return version


@click.command()
@click.argument("part", type=click.Choice(PARTS), required=False)
@click.option(
    "--pre",
    "prerelease",
    help="Set the pre-release identifiers (e.g. rc.1); an empty value clears them.",
)
@click.option(
    "--meta",
    "metadata",
    help="Set the build metadata (e.g. build.42); an empty value clears it.",
)
@click.option(
    "--dry-run",
    is_flag=True,
    help="Show the new version without writing pkg.info.",
)
@pass_context
def bump(
    ctx: Context,
    part: Optional[str],
    prerelease: Optional[str],
    metadata: Optional[str],
    dry_run: bool,
) -> None:
    """Bump the version in pkg.info.

    PART is major, minor or patch. Bumping patch on a pre-release releases
    it (1.2.3-rc.1 becomes 1.2.3).

    \b
    Examples:
        pkgmeta bump patch
        pkgmeta bump minor --pre rc.1
        pkgmeta bump --pre ""
        pkgmeta bump major --dry-run
    """
    if part is None and prerelease is None and metadata is None:
        raise click.UsageError("Nothing to bump: give PART, --pre or --meta.")

    try:
        config = ctx.load_config()
        info = load_package_info(config.pkg_info_path)
    except (ConfigError, MetadataError, FileNotFoundError) as e:
        echo_error(str(e))
        raise SystemExit(1)

    try:
        new_version = bump_version(info.version, part, prerelease, metadata)
    except InvalidVersionError as e:
        echo_error(str(e))
        raise SystemExit(1)

    echo_info(f"{info.name}: {info.version} -> {new_version}")

    if dry_run:
        echo_info("Dry run, pkg.info not written.")
        return

    save_package_info(replace(info, version=new_version), config.pkg_info_path)
    logger.debug("Saved %s", config.pkg_info_path)
    echo_success(f"Bumped version to {new_version}")
