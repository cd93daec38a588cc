# SPDX-License-Identifier: MIT
"""Tests for pkg.info schema validation."""

from __future__ import annotations

import pytest

from pkgmeta_cli.schema import PKG_INFO_SCHEMA, build_schema
from pkgmeta_cli.validator import (
    PackageInfoValidationError,
    validate_package_info,
    validate_package_info_strict,
)

ARCHS = ["linux_amd64", "darwin_arm64", "windows"]


def valid_data() -> dict:
    return {
        "name": "demo",
        "version": "1.2.3-rc.1+build.5",
        "description": "A demo project",
        "tenant": "acme",
        "repo": "https://example.com/acme/demo",
        "arch": ["linux_amd64", "windows"],
    }


class TestSchema:
    """Tests for schema construction."""

    def test_build_schema_sets_enum(self) -> None:
        schema = build_schema(ARCHS)
        assert schema["properties"]["arch"]["items"]["enum"] == ARCHS

    def test_build_schema_does_not_modify_base(self) -> None:
        build_schema(ARCHS)
        assert "enum" not in PKG_INFO_SCHEMA["properties"]["arch"]["items"]


class TestValidatePackageInfo:
    """Tests for validate_package_info."""

    def test_valid(self) -> None:
        result = validate_package_info(valid_data(), ARCHS)
        assert result.valid
        assert result.errors == []

    def test_minimal(self) -> None:
        data = {"name": "demo", "version": "0.1.0", "tenant": "acme"}
        assert validate_package_info(data, ARCHS).valid

    def test_null_optional_fields(self) -> None:
        data = valid_data()
        data.update(description=None, repo=None, arch=None)
        assert validate_package_info(data, ARCHS).valid

    def test_missing_required_fields_reported_once(self) -> None:
        result = validate_package_info({"version": "1.0.0"}, ARCHS)

        assert not result.valid
        assert len(result.errors) == 1
        assert result.errors[0].field == "<root>"
        assert result.errors[0].message == "Missing required fields: name, tenant"

    def test_missing_single_field(self) -> None:
        data = valid_data()
        del data["tenant"]

        result = validate_package_info(data, ARCHS)

        assert [e.message for e in result.errors] == ["Missing required field: tenant"]

    @pytest.mark.parametrize("version", ["1.2", "v1.2.3", "01.2.3", "1.2.3-", "1.2.3-01"])
    def test_invalid_version(self, version: str) -> None:
        data = valid_data()
        data["version"] = version

        result = validate_package_info(data, ARCHS)

        assert not result.valid
        assert result.errors[0].field == "version"
        assert "not a valid semantic version" in result.errors[0].message
        assert result.errors[0].value == version

    def test_unknown_architecture(self) -> None:
        data = valid_data()
        data["arch"] = ["linux_amd64", "solaris"]

        result = validate_package_info(data, ARCHS)

        assert not result.valid
        assert result.errors[0].field == "arch[1]"
        assert "Value must be one of" in result.errors[0].message

    def test_duplicate_architecture(self) -> None:
        data = valid_data()
        data["arch"] = ["windows", "windows"]

        result = validate_package_info(data, ARCHS)

        assert [e.message for e in result.errors] == ["Values must be unique"]

    def test_wrong_type(self) -> None:
        data = valid_data()
        data["name"] = 42

        result = validate_package_info(data, ARCHS)

        assert result.errors[0].field == "name"
        assert result.errors[0].message == "Expected string, got int"

    def test_empty_name(self) -> None:
        data = valid_data()
        data["name"] = ""

        result = validate_package_info(data, ARCHS)

        assert [e.message for e in result.errors] == ["Value cannot be empty"]

    def test_unknown_field(self) -> None:
        data = valid_data()
        data["license"] = "MIT"

        result = validate_package_info(data, ARCHS)

        assert not result.valid
        assert "license" in result.errors[0].message

    def test_not_a_mapping(self) -> None:
        result = validate_package_info(["name"], ARCHS)

        assert not result.valid
        assert result.errors[0].message == "pkg.info must be a mapping, got list"

    def test_multiple_errors_collected(self) -> None:
        data = valid_data()
        data["version"] = "1.2"
        data["arch"] = ["solaris"]

        result = validate_package_info(data, ARCHS)

        assert {e.field for e in result.errors} == {"version", "arch[0]"}


class TestValidatePackageInfoStrict:
    """Tests for validate_package_info_strict."""

    def test_valid_passes(self) -> None:
        validate_package_info_strict(valid_data(), ARCHS)

    def test_invalid_raises(self) -> None:
        data = valid_data()
        data["version"] = "1.2"

        with pytest.raises(PackageInfoValidationError) as exc_info:
            validate_package_info_strict(data, ARCHS)

        assert len(exc_info.value.errors) == 1
        assert "version" in str(exc_info.value)
