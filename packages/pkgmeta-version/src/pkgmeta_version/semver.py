# SPDX-License-Identifier: MIT
"""Semantic version parsing, formatting and derivation.

Two parsers are provided:

- ``parse_version`` is lenient: it accepts an optional leading ``v`` and
  defaults a missing minor or patch segment to 0 (``v1.2`` -> ``1.2.0``).
- ``parse_version_strict`` only accepts full ``MAJOR.MINOR.PATCH`` versions
  and reports which rule was broken through a specific error class.

Both validate prerelease identifiers (``-alpha.1``) and build metadata
(``+build.5``) following SemVer 2.0.0.
"""

from __future__ import annotations

import json
import re
from dataclasses import dataclass, field
from typing import Any

from .precedence import compare_prerelease, compare_segment, parse_uint

# Strict SemVer 2.0.0 pattern, suitable for JSON Schema "pattern" keywords
# https://semver.org/#is-there-a-suggested-regular-expression-regex-to-check-a-semver-string
SEMVER_PATTERN = (
    r"^(0|[1-9][0-9]*)\.(0|[1-9][0-9]*)\.(0|[1-9][0-9]*)"
    r"(?:-((?:0|[1-9][0-9]*|[0-9]*[a-zA-Z-][0-9a-zA-Z-]*)"
    r"(?:\.(?:0|[1-9][0-9]*|[0-9]*[a-zA-Z-][0-9a-zA-Z-]*))*))?"
    r"(?:\+([0-9a-zA-Z-]+(?:\.[0-9a-zA-Z-]+)*))?$"
)

# Grammar used by the lenient parser; matched against the whole input
LENIENT_PATTERN = re.compile(
    r"v?(?P<major>[0-9]+)"
    r"(?:\.(?P<minor>[0-9]+))?"
    r"(?:\.(?P<patch>[0-9]+))?"
    r"(?:-(?P<prerelease>[0-9A-Za-z-]+(?:\.[0-9A-Za-z-]+)*))?"
    r"(?:\+(?P<metadata>[0-9A-Za-z-]+(?:\.[0-9A-Za-z-]+)*))?"
)

_IDENTIFIER = re.compile(r"[0-9A-Za-z-]+")
_NUMERIC = re.compile(r"[0-9]+")


class InvalidVersionError(Exception):
    """Raised when a version string does not follow semantic versioning.

    Every more specific parsing error derives from this class, so callers
    that do not care about the exact rule can catch it alone.
    """

    default_message = "Invalid semantic version"

    def __init__(self, version: str, message: str = ""):
        self.version = version
        self.message = message or f"{self.default_message}: {version}"
        super().__init__(self.message)


class EmptyStringError(InvalidVersionError):
    """Raised when an empty string is given to the strict parser."""

    default_message = "Version string cannot be empty"

    def __init__(self, version: str = "", message: str = ""):
        super().__init__(version, message or self.default_message)


class InvalidCharactersError(InvalidVersionError):
    """Raised when a numeric segment contains anything but digits."""

    default_message = "Invalid characters in version"


class SegmentStartsZeroError(InvalidVersionError):
    """Raised when a numeric segment or identifier has a leading zero."""

    default_message = "Version segment starts with 0"


class InvalidPrereleaseError(InvalidVersionError):
    """Raised when a prerelease identifier is malformed."""

    default_message = "Invalid prerelease string"


class InvalidMetadataError(InvalidVersionError):
    """Raised when a build metadata identifier is malformed."""

    default_message = "Invalid metadata string"


def validate_prerelease(prerelease: str) -> None:
    """Validate a dot-separated prerelease string (without the ``-``).

    Raises:
        SegmentStartsZeroError: If a numeric identifier has a leading zero
        InvalidPrereleaseError: If an identifier is empty or has characters
            outside ``[0-9A-Za-z-]``
    """
    for identifier in prerelease.split("."):
        if _NUMERIC.fullmatch(identifier):
            if len(identifier) > 1 and identifier[0] == "0":
                raise SegmentStartsZeroError(prerelease)
        elif not _IDENTIFIER.fullmatch(identifier):
            raise InvalidPrereleaseError(prerelease)


def validate_metadata(metadata: str) -> None:
    """Validate a dot-separated build metadata string (without the ``+``).

    Raises:
        InvalidMetadataError: If an identifier is empty or has characters
            outside ``[0-9A-Za-z-]``
    """
    for identifier in metadata.split("."):
        if not _IDENTIFIER.fullmatch(identifier):
            raise InvalidMetadataError(metadata)


def _format(major: int, minor: int, patch: int, prerelease: str, metadata: str) -> str:
    version = f"{major}.{minor}.{patch}"
    if prerelease:
        version += f"-{prerelease}"
    if metadata:
        version += f"+{metadata}"
    return version


@dataclass(frozen=True, slots=True, eq=False)
class Version:
    """Represents a single semantic version.

    Instances are immutable; the ``inc_*`` and ``with_*`` methods return new
    values. Equality and ordering follow SemVer precedence, so build
    metadata and the original text never take part in comparisons.

    Attributes:
        major: Major version number (breaking changes)
        minor: Minor version number (new features, backward compatible)
        patch: Patch version number (bug fixes, backward compatible)
        prerelease: Pre-release identifiers (e.g., "alpha.1"), "" if none
        metadata: Build metadata identifiers (e.g., "build.123"), "" if none
        original: The text this version was parsed from, including any
            leading "v". Computed from the fields when not given.
    """

    major: int
    minor: int = 0
    patch: int = 0
    prerelease: str = ""
    metadata: str = ""
    original: str = field(default="", repr=False)

    def __post_init__(self) -> None:
        if not self.original:
            object.__setattr__(self, "original", str(self))

    def __str__(self) -> str:
        """Return the canonical string, never prefixed with "v"."""
        return _format(self.major, self.minor, self.patch, self.prerelease, self.metadata)

    @property
    def is_prerelease(self) -> bool:
        """Return True if this is a pre-release version."""
        return self.prerelease != ""

    @property
    def base_version(self) -> str:
        """Return the base version without pre-release or build metadata."""
        return f"{self.major}.{self.minor}.{self.patch}"

    @property
    def has_v_prefix(self) -> bool:
        """Return True if the original text started with a lowercase "v"."""
        return self.original.startswith("v")

    # -- comparison --------------------------------------------------------

    def compare(self, other: Version) -> int:
        """Compare with another version.

        Returns:
            -1 if self < other, 0 if equal, 1 if self > other
        """
        for mine, theirs in (
            (self.major, other.major),
            (self.minor, other.minor),
            (self.patch, other.patch),
        ):
            d = compare_segment(mine, theirs)
            if d != 0:
                return d

        if not self.prerelease and not other.prerelease:
            return 0
        if not self.prerelease:
            return 1  # Release > pre-release
        if not other.prerelease:
            return -1

        return compare_prerelease(self.prerelease, other.prerelease)

    def less_than(self, other: Version) -> bool:
        return self.compare(other) < 0

    def greater_than(self, other: Version) -> bool:
        return self.compare(other) > 0

    def equal(self, other: Version) -> bool:
        return self.compare(other) == 0

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare(other) == 0

    def __hash__(self) -> int:
        return hash((self.major, self.minor, self.patch, self.prerelease))

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare(other) < 0

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare(other) <= 0

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare(other) > 0

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare(other) >= 0

    # -- derivation --------------------------------------------------------

    def _derive(self, **changes: Any) -> Version:
        fields: dict[str, Any] = {
            "major": self.major,
            "minor": self.minor,
            "patch": self.patch,
            "prerelease": self.prerelease,
            "metadata": self.metadata,
        }
        fields.update(changes)
        prefix = "v" if self.has_v_prefix else ""
        return Version(**fields, original=prefix + _format(**fields))

    def inc_patch(self) -> Version:
        """Return the next patch version.

        A pre-release becomes its release (``1.2.3-rc.1`` -> ``1.2.3``);
        otherwise the patch number is incremented. Metadata is dropped.
        """
        if self.prerelease:
            return self._derive(prerelease="", metadata="")
        return self._derive(prerelease="", metadata="", patch=self.patch + 1)

    def inc_minor(self) -> Version:
        """Return the next minor version, resetting patch."""
        return self._derive(prerelease="", metadata="", patch=0, minor=self.minor + 1)

    def inc_major(self) -> Version:
        """Return the next major version, resetting minor and patch."""
        return self._derive(
            prerelease="", metadata="", patch=0, minor=0, major=self.major + 1
        )

    def with_prerelease(self, prerelease: str) -> Version:
        """Return a copy with the given pre-release ("" clears it).

        Raises:
            SegmentStartsZeroError: If a numeric identifier has a leading zero
            InvalidPrereleaseError: If an identifier is malformed
        """
        if prerelease:
            validate_prerelease(prerelease)
        return self._derive(prerelease=prerelease)

    def with_metadata(self, metadata: str) -> Version:
        """Return a copy with the given build metadata ("" clears it).

        Raises:
            InvalidMetadataError: If an identifier is malformed
        """
        if metadata:
            validate_metadata(metadata)
        return self._derive(metadata=metadata)

    # -- serialization -----------------------------------------------------

    def to_json(self) -> str:
        """Encode as a JSON string literal, e.g. ``"1.2.3-rc.1"``."""
        return json.dumps(str(self))

    @classmethod
    def from_json(cls, data: str | bytes) -> Version:
        """Decode a JSON string literal produced by ``to_json``.

        Raises:
            json.JSONDecodeError: If ``data`` is not valid JSON
            InvalidVersionError: If the JSON value is not a valid version string
        """
        value = json.loads(data)
        if not isinstance(value, str):
            raise InvalidVersionError(
                str(value), f"Version must be a JSON string, got {type(value).__name__}"
            )
        return parse_version(value)


def _parse_segment(segment: str, version: str) -> int:
    if len(segment) > 1 and segment[0] == "0":
        raise SegmentStartsZeroError(version)
    value = parse_uint(segment)
    if value is None:
        raise InvalidVersionError(version, f"Error parsing version segment: {segment!r}")
    return value


def parse_version(version_string: str) -> Version:
    """Parse a version string, coercing SemVer-ish input.

    Accepts an optional leading "v" and missing minor/patch segments.

    Args:
        version_string: e.g. "1.2.3", "v1.2", "1.0.0-alpha.1+build.5"

    Returns:
        A Version whose ``original`` is ``version_string`` verbatim

    Raises:
        InvalidVersionError: If the string does not match the grammar or a
            segment does not fit in 64 bits (subclasses for leading zeros
            and malformed prerelease or metadata)

    Examples:
        >>> str(parse_version("v1.2"))
        '1.2.0'
        >>> parse_version("1.0.0-rc.1").prerelease
        'rc.1'
    """
    if not isinstance(version_string, str):
        raise InvalidVersionError(
            str(version_string), f"Version must be a string, got {type(version_string).__name__}"
        )

    match = LENIENT_PATTERN.fullmatch(version_string)
    if not match:
        raise InvalidVersionError(version_string)

    major = _parse_segment(match.group("major"), version_string)
    minor = _parse_segment(match.group("minor") or "0", version_string)
    patch = _parse_segment(match.group("patch") or "0", version_string)

    prerelease = match.group("prerelease") or ""
    metadata = match.group("metadata") or ""

    if prerelease:
        validate_prerelease(prerelease)
    if metadata:
        validate_metadata(metadata)

    return Version(major, minor, patch, prerelease, metadata, original=version_string)


def parse_version_strict(version_string: str) -> Version:
    """Parse a version string that must be exactly MAJOR.MINOR.PATCH[-pre][+meta].

    Raises:
        EmptyStringError: If the string is empty
        InvalidVersionError: If there are not three segments or a segment
            cannot be converted to a 64-bit integer
        InvalidCharactersError: If a numeric segment contains non-digits
        SegmentStartsZeroError: If a numeric segment has a leading zero
        InvalidPrereleaseError: If the prerelease is malformed
        InvalidMetadataError: If the build metadata is malformed
    """
    if not isinstance(version_string, str):
        raise InvalidVersionError(
            str(version_string), f"Version must be a string, got {type(version_string).__name__}"
        )
    if not version_string:
        raise EmptyStringError()

    parts = version_string.split(".", 2)
    if len(parts) != 3:
        raise InvalidVersionError(version_string)

    prerelease = ""
    metadata = ""
    has_prerelease = has_metadata = False

    # Build metadata sits on the right, so split it off first
    rest, plus, meta = parts[2].partition("+")
    if plus:
        has_metadata = True
        metadata = meta
    rest, dash, pre = rest.partition("-")
    if dash:
        has_prerelease = True
        prerelease = pre
    parts[2] = rest

    for part in parts:
        if part and not _NUMERIC.fullmatch(part):
            raise InvalidCharactersError(version_string)
        if len(part) > 1 and part[0] == "0":
            raise SegmentStartsZeroError(version_string)

    major, minor, patch = (_parse_segment(part, version_string) for part in parts)

    if has_prerelease:
        validate_prerelease(prerelease)
    if has_metadata:
        validate_metadata(metadata)

    return Version(major, minor, patch, prerelease, metadata, original=version_string)


def version_from_parts(
    major: int,
    minor: int = 0,
    patch: int = 0,
    prerelease: str = "",
    metadata: str = "",
    *,
    v_prefix: bool = False,
) -> Version:
    """Build a Version from its fields without validating them.

    The caller is responsible for well-formed values; use the parsers when
    the input is untrusted. ``original`` is the formatted version, prefixed
    with "v" when ``v_prefix`` is set.
    """
    text = _format(major, minor, patch, prerelease, metadata)
    prefix = "v" if v_prefix else ""
    return Version(major, minor, patch, prerelease, metadata, original=prefix + text)


def is_valid_semver(version_string: str, *, strict: bool = True) -> bool:
    """Check if a string is a valid semantic version.

    Args:
        version_string: The string to validate
        strict: Require the full MAJOR.MINOR.PATCH form (default). When
            False, the lenient grammar of ``parse_version`` is used.

    Examples:
        >>> is_valid_semver("1.0.0")
        True
        >>> is_valid_semver("1.0")
        False
        >>> is_valid_semver("v1.0", strict=False)
        True
    """
    parser = parse_version_strict if strict else parse_version
    try:
        parser(version_string)
    except InvalidVersionError:
        return False
    return True
