# SPDX-License-Identifier: MIT
"""Validate a pkg.info file."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import click

from ..config import ConfigError
from ..metadata import MetadataError, read_package_info_data
from ..main import echo_error, echo_info, echo_success, pass_context, Context
from ..validator import validate_package_info


@click.command()
@click.option(
    "--file",
    "-f",
    "pkg_info",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Path to the pkg.info file (defaults to the configured one).",
)
@pass_context
def validate(ctx: Context, pkg_info: Optional[Path]) -> None:
    """Validate pkg.info against the metadata schema.

    Checks required fields, the semantic version format and that every
    architecture is in the configured allow-list.

    \b
    Examples:
        pkgmeta validate
        pkgmeta validate -f other/pkg.info
    """
    try:
        config = ctx.load_config()
        path = pkg_info or config.pkg_info_path
        data = read_package_info_data(path)
    except (ConfigError, MetadataError, FileNotFoundError) as e:
        echo_error(str(e))
        raise SystemExit(1)

    echo_info(f"Validating {path}...")
    result = validate_package_info(data, config.arch_list)

    if not result.valid:
        for error in result.errors:
            echo_error(f"  {error.field}: {error.message}")
        echo_error(f"Validation failed with {len(result.errors)} error(s)")
        raise SystemExit(1)

    echo_success("Validation passed!")
