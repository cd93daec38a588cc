# SPDX-License-Identifier: MIT
"""The package metadata record and its pkg.info YAML file."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from pkgmeta_version import InvalidVersionError, Version, parse_version

logger = logging.getLogger(__name__)


class MetadataError(Exception):
    """Raised when a pkg.info file cannot be read or is malformed."""

    pass


@dataclass
class PackageInfo:
    """Metadata describing a project.

    Attributes:
        name: Project name
        version: Project version
        description: Free-form description
        tenant: Tenant the project belongs to
        repo: Repository URL
        arch: Architectures the project is built for (empty means local only)
    """

    name: str
    version: Version
    description: str = ""
    tenant: str = ""
    repo: str = ""
    arch: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """Return a YAML-ready mapping, with the version as text."""
        return {
            "name": self.name,
            "version": str(self.version),
            "description": self.description,
            "tenant": self.tenant,
            "repo": self.repo,
            "arch": list(self.arch),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> PackageInfo:
        """Build a PackageInfo from a loaded pkg.info mapping.

        Raises:
            MetadataError: If name or version is missing, or a field has the
                wrong type
        """
        name = data.get("name")
        if not isinstance(name, str) or not name:
            raise MetadataError("Missing required field: name")

        raw_version = data.get("version")
        if raw_version is None:
            raise MetadataError("Missing required field: version")
        if not isinstance(raw_version, str):
            raise MetadataError(
                f"Field 'version' must be a string, got {type(raw_version).__name__} "
                "(quote the value in the file)"
            )
        try:
            version = parse_version(raw_version)
        except InvalidVersionError as e:
            raise MetadataError(f"Field 'version': {e}") from e

        strings: dict[str, str] = {}
        for key in ("description", "tenant", "repo"):
            value = data.get(key)
            if value is None:
                value = ""
            if not isinstance(value, str):
                raise MetadataError(f"Field '{key}' must be a string")
            strings[key] = value

        arch = data.get("arch") or []
        if not isinstance(arch, list) or not all(isinstance(a, str) for a in arch):
            raise MetadataError("Field 'arch' must be a list of strings")

        return cls(name=name, version=version, arch=list(arch), **strings)


def dump_package_info(info: PackageInfo) -> str:
    """Serialize a PackageInfo to pkg.info text."""
    header = f"# {info.name} pkg.info file\n\n"
    return header + yaml.safe_dump(
        info.to_dict(), sort_keys=False, allow_unicode=True, default_flow_style=False
    )


def save_package_info(info: PackageInfo, path: Path) -> None:
    """Write a PackageInfo to ``path``."""
    path.write_text(dump_package_info(info), encoding="utf-8")
    logger.debug("Wrote %s", path)


def read_package_info_data(path: Path) -> dict[str, Any]:
    """Read the raw mapping stored in a pkg.info file.

    Raises:
        FileNotFoundError: If the file does not exist
        MetadataError: If the file is not valid YAML or not a mapping
    """
    if not path.exists():
        raise FileNotFoundError(f"{path.name} not found in {path.parent}")

    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise MetadataError(f"Invalid YAML syntax in {path.name}: {e}") from e

    if not isinstance(data, dict):
        raise MetadataError(f"{path.name} must contain a mapping")

    logger.debug("Read %s", path)
    return data


def load_package_info(path: Path) -> PackageInfo:
    """Load a PackageInfo from a pkg.info file.

    Raises:
        FileNotFoundError: If the file does not exist
        MetadataError: If the file is malformed
    """
    return PackageInfo.from_dict(read_package_info_data(path))
