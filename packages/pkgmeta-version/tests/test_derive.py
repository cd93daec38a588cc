# SPDX-License-Identifier: MIT
"""Unit tests for version increments and field replacement."""

import pytest

from pkgmeta_version import (
    parse_version,
    version_from_parts,
    InvalidMetadataError,
    InvalidPrereleaseError,
    SegmentStartsZeroError,
)


class TestIncrements:
    """Tests for inc_patch, inc_minor and inc_major."""

    def test_inc_patch(self):
        assert str(parse_version("1.2.3").inc_patch()) == "1.2.4"

    def test_inc_patch_releases_prerelease(self):
        """A pre-release becomes its release without bumping patch."""
        assert str(parse_version("1.2.3-alpha").inc_patch()) == "1.2.3"

    def test_inc_patch_drops_metadata(self):
        assert str(parse_version("1.2.3+build.9").inc_patch()) == "1.2.4"
        assert str(parse_version("1.2.3-rc.1+build.9").inc_patch()) == "1.2.3"

    def test_inc_minor(self):
        assert str(parse_version("1.2.3").inc_minor()) == "1.3.0"
        assert str(parse_version("1.2.3-beta+b").inc_minor()) == "1.3.0"

    def test_inc_major(self):
        assert str(parse_version("1.2.3").inc_major()) == "2.0.0"
        assert str(parse_version("1.2.3-beta+b").inc_major()) == "2.0.0"

    def test_receiver_is_unchanged(self):
        v = parse_version("1.2.3-rc.1+b")
        v.inc_patch()
        v.inc_minor()
        v.inc_major()
        assert str(v) == "1.2.3-rc.1+b"
        assert v.original == "1.2.3-rc.1+b"

    def test_original_keeps_v_prefix(self):
        v = parse_version("v1.2.3")
        assert v.inc_patch().original == "v1.2.4"
        assert v.inc_minor().original == "v1.3.0"
        assert v.inc_major().original == "v2.0.0"
        assert str(v.inc_major()) == "2.0.0"

    def test_original_without_v_prefix(self):
        v = parse_version("1.2")
        assert v.inc_patch().original == "1.2.1"

    def test_constructed_with_v_prefix(self):
        v = version_from_parts(0, 9, 0, v_prefix=True)
        assert v.inc_minor().original == "v0.10.0"


class TestWithPrerelease:
    """Tests for with_prerelease."""

    def test_sets_prerelease(self):
        v = parse_version("1.2.3").with_prerelease("rc.1")
        assert str(v) == "1.2.3-rc.1"
        assert v.original == "1.2.3-rc.1"

    def test_keeps_metadata(self):
        v = parse_version("v1.2.3+build.1").with_prerelease("beta")
        assert str(v) == "1.2.3-beta+build.1"
        assert v.original == "v1.2.3-beta+build.1"

    def test_empty_clears(self):
        v = parse_version("1.2.3-alpha").with_prerelease("")
        assert v.prerelease == ""
        assert str(v) == "1.2.3"

    def test_leading_zero_rejected(self):
        v = parse_version("1.2.3-alpha")
        with pytest.raises(SegmentStartsZeroError):
            v.with_prerelease("01")
        assert v.prerelease == "alpha"

    def test_invalid_characters_rejected(self):
        with pytest.raises(InvalidPrereleaseError):
            parse_version("1.2.3").with_prerelease("rc 1")


class TestWithMetadata:
    """Tests for with_metadata."""

    def test_sets_metadata(self):
        v = parse_version("1.2.3-rc.1").with_metadata("sha.5114f85")
        assert str(v) == "1.2.3-rc.1+sha.5114f85"

    def test_metadata_does_not_change_precedence(self):
        v = parse_version("1.2.3")
        assert v.with_metadata("build.7") == v

    def test_empty_clears(self):
        assert str(parse_version("1.2.3+b").with_metadata("")) == "1.2.3"

    def test_invalid_rejected(self):
        v = parse_version("1.2.3+ok")
        with pytest.raises(InvalidMetadataError):
            v.with_metadata("not..ok")
        assert v.metadata == "ok"
