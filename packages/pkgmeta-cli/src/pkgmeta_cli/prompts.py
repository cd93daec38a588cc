# SPDX-License-Identifier: MIT
"""Interactive prompts used to collect package metadata.

Each prompt re-asks until the answer is acceptable; click prints the reason
for every rejected answer.
"""

from __future__ import annotations

import click

from pkgmeta_version import InvalidVersionError, Version, parse_version_strict


def _required(value: str) -> str:
    value = value.strip()
    if not value:
        raise click.BadParameter("a value is required.")
    return value


def _semver(value: str) -> Version:
    try:
        return parse_version_strict(value.strip())
    except InvalidVersionError as e:
        raise click.BadParameter(f"{e} (expected MAJOR.MINOR.PATCH[-prerelease][+build])") from e


def prompt_required(label: str) -> str:
    """Ask for a non-empty value."""
    return click.prompt(label, value_proc=_required)


def prompt_optional(label: str, default: str = "") -> str:
    """Ask for a value; Enter accepts ``default``."""
    value = click.prompt(label, default=default, show_default=bool(default), type=str)
    return value.strip()


def prompt_version(label: str) -> Version:
    """Ask for a strict semantic version."""
    return click.prompt(label, value_proc=_semver)


def confirm_overwrite(label: str) -> bool:
    """Ask for a yes/no confirmation, defaulting to no."""
    return click.confirm(label, default=False)


def parse_arch_list(text: str, allowed: list[str]) -> tuple[list[str], list[str]]:
    """Split a comma-separated architecture list against an allow-list.

    Args:
        text: User input, e.g. "linux_amd64, darwin_arm64"
        allowed: Architectures accepted by the configuration

    Returns:
        A tuple of (accepted, rejected). Accepted entries keep their input
        order without duplicates; an empty accepted list means the local
        platform only.

    Examples:
        >>> parse_arch_list("linux_amd64, darwin_arm64,not-found", ["linux_amd64", "darwin_arm64"])
        (['linux_amd64', 'darwin_arm64'], ['not-found'])
    """
    accepted: list[str] = []
    rejected: list[str] = []

    for entry in text.split(","):
        entry = entry.strip()
        if not entry:
            continue
        if entry in allowed:
            if entry not in accepted:
                accepted.append(entry)
        else:
            rejected.append(entry)

    return accepted, rejected
