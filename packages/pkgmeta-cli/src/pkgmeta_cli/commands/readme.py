# SPDX-License-Identifier: MIT
"""Generate a README from the pkg.info metadata."""

from __future__ import annotations

import logging
from typing import Optional

import click

from ..config import ConfigError
from ..metadata import MetadataError, PackageInfo, read_package_info_data
from ..main import echo_error, echo_info, echo_success, pass_context, Context
from ..prompts import prompt_optional
from ..template_engine import TemplateEngine, TemplateError
from ..validator import PackageInfoValidationError, validate_package_info_strict

logger = logging.getLogger(__name__)


def _badge_escape(text: str) -> str:
    """Escape text for a shields.io static badge path segment."""
    return text.replace("-", "--").replace("_", "__").replace(" ", "_")


def readme_variables(info: PackageInfo, icon: str) -> dict[str, str]:
    """Return the template variables for a README.

    The project name is upper-cased, as in the generated title.
    """
    return {
        "name": info.name.upper(),
        "version": str(info.version),
        "badge_version": _badge_escape(str(info.version)),
        "description": info.description,
        "icon": icon,
        "tenant": info.tenant,
        "repo": info.repo,
        "arch": ", ".join(info.arch) if info.arch else "local platform",
    }


@click.command()
@click.option(
    "--silent",
    "-s",
    is_flag=True,
    help="Do not prompt; use the configured icon path.",
)
@click.option(
    "--icon",
    help="Icon path to embed in the README (skips the prompt).",
)
@pass_context
def readme(ctx: Context, silent: bool, icon: Optional[str]) -> None:
    """Validate pkg.info and generate the README from it.

    The README is written to the configured readme file (README.md by
    default), replacing any existing one.

    \b
    Examples:
        pkgmeta readme
        pkgmeta readme --silent
        pkgmeta readme --icon docs/logo.svg
    """
    try:
        config = ctx.load_config()
        data = read_package_info_data(config.pkg_info_path)
        validate_package_info_strict(data, config.arch_list)
        info = PackageInfo.from_dict(data)
    except PackageInfoValidationError as e:
        echo_error(f"Invalid {config.pkg_info_file}:")
        for error in e.errors:
            echo_error(f"  {error.field}: {error.message}")
        raise SystemExit(1)
    except (ConfigError, MetadataError, FileNotFoundError) as e:
        echo_error(str(e))
        raise SystemExit(1)

    if icon is None and not silent:
        icon = prompt_optional(
            f"Repo icon file. Defaults to: {config.icon_path} (Enter for default)"
        )
    if not icon:
        icon = config.icon_path

    variables = readme_variables(info, icon)
    try:
        engine = TemplateEngine.from_path(config.readme_template)
        unknown = sorted(engine.variables() - variables.keys())
        if unknown:
            raise TemplateError(
                f"Unknown variable(s) in {config.readme_template.name}: {', '.join(unknown)}"
            )
        written = engine.render(config.readme_path, variables)
    except TemplateError as e:
        echo_error(f"Template error: {e}")
        raise SystemExit(1) from e

    logger.debug("Rendered %s with template %s", written, config.readme_template)
    echo_info(f"  Version: {info.version}")
    echo_success(f"Created {written}")
