# SPDX-License-Identifier: MIT
"""Tests for the pkg.info record."""

from __future__ import annotations

from pathlib import Path

import pytest
import yaml

from pkgmeta_cli.metadata import (
    MetadataError,
    PackageInfo,
    dump_package_info,
    load_package_info,
    read_package_info_data,
    save_package_info,
)
from pkgmeta_version import parse_version


def make_info(**overrides) -> PackageInfo:
    values = dict(
        name="demo",
        version=parse_version("1.2.3-rc.1"),
        description="A demo project",
        tenant="acme",
        repo="https://example.com/acme/demo",
        arch=["linux_amd64"],
    )
    values.update(overrides)
    return PackageInfo(**values)


class TestDump:
    """Tests for pkg.info serialization."""

    def test_header_and_key_order(self) -> None:
        text = dump_package_info(make_info())

        assert text.startswith("# demo pkg.info file\n\n")
        keys = [line.split(":")[0] for line in text.splitlines()[2:] if not line.startswith("-")]
        assert keys == ["name", "version", "description", "tenant", "repo", "arch"]

    def test_version_written_as_text(self) -> None:
        data = yaml.safe_load(dump_package_info(make_info()))
        assert data["version"] == "1.2.3-rc.1"

    def test_empty_arch(self) -> None:
        data = yaml.safe_load(dump_package_info(make_info(arch=[])))
        assert data["arch"] == []


class TestSaveLoad:
    """Tests for writing and reading pkg.info."""

    def test_round_trip(self, tmp_path: Path) -> None:
        path = tmp_path / "pkg.info"
        info = make_info()

        save_package_info(info, path)
        loaded = load_package_info(path)

        assert loaded == info
        assert loaded.version.prerelease == "rc.1"

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError, match="pkg.info not found"):
            read_package_info_data(tmp_path / "pkg.info")

    def test_invalid_yaml(self, tmp_path: Path) -> None:
        path = tmp_path / "pkg.info"
        path.write_text("name: [unclosed\n")

        with pytest.raises(MetadataError, match="Invalid YAML syntax"):
            read_package_info_data(path)

    def test_not_a_mapping(self, tmp_path: Path) -> None:
        path = tmp_path / "pkg.info"
        path.write_text("just text\n")

        with pytest.raises(MetadataError, match="must contain a mapping"):
            read_package_info_data(path)


class TestFromDict:
    """Tests for building a record from loaded data."""

    def test_optional_fields_default(self) -> None:
        info = PackageInfo.from_dict({"name": "demo", "version": "1.0.0"})

        assert info.description == ""
        assert info.tenant == ""
        assert info.repo == ""
        assert info.arch == []

    def test_null_fields(self) -> None:
        info = PackageInfo.from_dict(
            {"name": "demo", "version": "1.0.0", "description": None, "arch": None}
        )
        assert info.description == ""
        assert info.arch == []

    def test_lenient_version(self) -> None:
        info = PackageInfo.from_dict({"name": "demo", "version": "v2.1"})
        assert str(info.version) == "2.1.0"
        assert info.version.original == "v2.1"

    def test_missing_name(self) -> None:
        with pytest.raises(MetadataError, match="name"):
            PackageInfo.from_dict({"version": "1.0.0"})

    def test_missing_version(self) -> None:
        with pytest.raises(MetadataError, match="version"):
            PackageInfo.from_dict({"name": "demo"})

    def test_unquoted_numeric_version(self) -> None:
        # YAML reads 1.2 as a float
        with pytest.raises(MetadataError, match="must be a string"):
            PackageInfo.from_dict({"name": "demo", "version": 1.2})

    def test_invalid_version(self) -> None:
        with pytest.raises(MetadataError, match="Field 'version'"):
            PackageInfo.from_dict({"name": "demo", "version": "1.02.3"})

    def test_arch_wrong_type(self) -> None:
        with pytest.raises(MetadataError, match="arch"):
            PackageInfo.from_dict({"name": "demo", "version": "1.0.0", "arch": "windows"})

    def test_string_field_wrong_type(self) -> None:
        with pytest.raises(MetadataError, match="tenant"):
            PackageInfo.from_dict({"name": "demo", "version": "1.0.0", "tenant": 7})
