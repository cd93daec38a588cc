# SPDX-License-Identifier: MIT
"""Interactively create a pkg.info file."""

from __future__ import annotations

import logging

import click

from ..config import ConfigError
from ..metadata import PackageInfo, save_package_info
from ..main import echo_error, echo_info, echo_success, echo_warning, pass_context, Context
from ..prompts import (
    confirm_overwrite,
    parse_arch_list,
    prompt_optional,
    prompt_required,
    prompt_version,
)

logger = logging.getLogger(__name__)


@click.command()
@click.option(
    "--force",
    "-f",
    is_flag=True,
    help="Overwrite an existing pkg.info without asking.",
)
@pass_context
def init(ctx: Context, force: bool) -> None:
    """Interactively create a pkg.info file.

    \b
    Asks for:
      - project name (required)
      - version (required, semantic version)
      - description
      - tenant (required)
      - repository URL
      - build architectures (comma separated, Enter for local only)

    \b
    Examples:
        pkgmeta init
        pkgmeta -C path/to/project init --force
    """
    try:
        config = ctx.load_config()
    except ConfigError as e:
        echo_error(str(e))
        raise SystemExit(1)

    echo_info(f"{config.pkg_info_file} initializer:")
    name = prompt_required("Project name (required)")
    version = prompt_version("Project version (required, semver)")
    description = prompt_optional("Description of the project (Enter for blank)")
    tenant = prompt_required("Tenant the project belongs to (required)")
    repo = prompt_optional("Repository url of the project (Enter for blank)")
    arch_text = prompt_optional(
        f"Architectures to build on [{', '.join(config.arch_list)}] (Enter for local only)"
    )

    arch, rejected = parse_arch_list(arch_text, config.arch_list)
    for entry in rejected:
        echo_warning(f"Invalid architecture specification: {entry}. It will be ignored.")
    if not arch:
        echo_info("No build architecture specified. Assuming local platform.")

    info = PackageInfo(
        name=name,
        version=version,
        description=description,
        tenant=tenant,
        repo=repo,
        arch=arch,
    )

    pkg_info_path = config.pkg_info_path
    if pkg_info_path.exists() and not force:
        message = (
            f"A {config.pkg_info_file} file already exists in the "
            f"{config.project_dir} directory. Overwrite?"
        )
        if not confirm_overwrite(message):
            echo_info(f"Kept the existing {config.pkg_info_file}.")
            return

    save_package_info(info, pkg_info_path)
    logger.debug("Saved metadata for %s %s", info.name, info.version)
    echo_success(f"Created {pkg_info_path}")
