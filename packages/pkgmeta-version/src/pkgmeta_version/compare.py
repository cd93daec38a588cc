# SPDX-License-Identifier: MIT
"""Version comparison following SemVer 2.0.0 precedence.

Pre-release versions sort below their release (1.0.0-rc.1 < 1.0.0).
Build metadata is ignored in comparisons.
"""

from __future__ import annotations

from functools import cmp_to_key
from typing import Any, Iterable, Union

from .semver import Version, parse_version

VersionLike = Union[str, Version]


def _coerce(version: VersionLike) -> Version:
    return parse_version(version) if isinstance(version, str) else version


def compare_versions(version1: VersionLike, version2: VersionLike) -> int:
    """Compare two semantic versions.

    Args:
        version1: First version (string or Version object)
        version2: Second version (string or Version object)

    Returns:
        -1 if version1 < version2
        0 if version1 == version2
        1 if version1 > version2

    Raises:
        InvalidVersionError: If either version string is invalid

    Examples:
        >>> compare_versions("1.0.0", "2.0.0")
        -1
        >>> compare_versions("1.0.0+build.1", "1.0.0")
        0
        >>> compare_versions("1.0.0-rc.1", "1.0.0")
        -1
    """
    return _coerce(version1).compare(_coerce(version2))


_key = cmp_to_key(Version.compare)


def version_key(version: VersionLike) -> Any:
    """Return a sort key for a version, suitable for ``sorted``.

    Examples:
        >>> sorted(["1.0.0", "2.0.0", "1.0.0-alpha"], key=version_key)
        ['1.0.0-alpha', '1.0.0', '2.0.0']
    """
    return _key(_coerce(version))


def sort_versions(
    versions: Iterable[VersionLike], reverse: bool = False
) -> list[Version]:
    """Parse and sort versions by precedence.

    Versions with equal precedence keep their input order.
    """
    parsed = [_coerce(v) for v in versions]
    return sorted(parsed, key=_key, reverse=reverse)


def max_version(versions: Iterable[VersionLike]) -> Version:
    """Return the highest-precedence version.

    Raises:
        ValueError: If ``versions`` is empty
    """
    sorted_versions = sort_versions(versions)
    if not sorted_versions:
        raise ValueError("max_version() arg is an empty sequence")
    return sorted_versions[-1]

