# SPDX-License-Identifier: MIT
"""Compare two semantic versions."""

from __future__ import annotations

import click

from pkgmeta_version import InvalidVersionError, parse_version, parse_version_strict

from ..main import echo_error


@click.command()
@click.argument("version1")
@click.argument("version2")
@click.option(
    "--strict",
    is_flag=True,
    help="Require full MAJOR.MINOR.PATCH versions.",
)
def compare(version1: str, version2: str, strict: bool) -> None:
    """Compare VERSION1 with VERSION2.

    Prints -1, 0 or 1 when VERSION1 is lower than, equal to or higher than
    VERSION2. Build metadata is ignored.

    \b
    Examples:
        pkgmeta compare 1.0.0-rc.1 1.0.0      # -1
        pkgmeta compare v1.2 1.2.0+build.7    # 0
    """
    parser = parse_version_strict if strict else parse_version
    try:
        v1 = parser(version1)
        v2 = parser(version2)
    except InvalidVersionError as e:
        echo_error(str(e))
        raise SystemExit(1)

    click.echo(str(v1.compare(v2)))
