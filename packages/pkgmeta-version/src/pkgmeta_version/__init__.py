# SPDX-License-Identifier: MIT
"""Semantic version parsing and comparison for package metadata.

This package parses, compares and derives semantic versions following
SemVer 2.0.0 (https://semver.org). Values are immutable; increments return new
versions.

Example:
    >>> from pkgmeta_version import parse_version, compare_versions
    >>>
    >>> version = parse_version("v1.2.3-alpha.1+build.456")
    >>> str(version)
    '1.2.3-alpha.1+build.456'
    >>> version.original
    'v1.2.3-alpha.1+build.456'
    >>> str(version.inc_patch())
    '1.2.3'
    >>>
    >>> compare_versions("1.0.0", "2.0.0")
    -1
"""

__version__ = "0.1.0"

from .semver import (
    Version,
    parse_version,
    parse_version_strict,
    version_from_parts,
    is_valid_semver,
    validate_prerelease,
    validate_metadata,
    InvalidVersionError,
    EmptyStringError,
    InvalidCharactersError,
    SegmentStartsZeroError,
    InvalidPrereleaseError,
    InvalidMetadataError,
    SEMVER_PATTERN,
)
from .compare import (
    compare_versions,
    version_key,
    sort_versions,
    max_version,
)

__all__ = [
    # Version parsing
    "Version",
    "parse_version",
    "parse_version_strict",
    "version_from_parts",
    "is_valid_semver",
    "validate_prerelease",
    "validate_metadata",
    "SEMVER_PATTERN",
    # Errors
    "InvalidVersionError",
    "EmptyStringError",
    "InvalidCharactersError",
    "SegmentStartsZeroError",
    "InvalidPrereleaseError",
    "InvalidMetadataError",
    # Version comparison
    "compare_versions",
    "version_key",
    "sort_versions",
    "max_version",
]
