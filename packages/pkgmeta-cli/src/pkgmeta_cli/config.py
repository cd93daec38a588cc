# SPDX-License-Identifier: MIT
"""CLI configuration: bundled YAML defaults plus pyproject.toml overrides."""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

import yaml

logger = logging.getLogger(__name__)

DEFAULTS_FILE = Path(__file__).parent / "config.yaml"
DEFAULT_README_TEMPLATE = Path(__file__).parent / "templates" / "readme.md.tpl"

# Keys accepted in config.yaml (camelCase) and [tool.pkgmeta] (snake_case)
_YAML_KEYS = {
    "pkgInfoFile": "pkg_info_file",
    "iconPath": "icon_path",
    "archList": "arch_list",
    "readmeFile": "readme_file",
    "readmeTemplate": "template_path",
}
_TOML_KEYS = {
    "pkg_info_file": "pkg_info_file",
    "icon_path": "icon_path",
    "arch_list": "arch_list",
    "readme_file": "readme_file",
    "readme_template": "template_path",
}


class ConfigError(Exception):
    """Raised when configuration loading fails."""

    pass


@dataclass
class CLIConfig:
    """Configuration for the pkgmeta commands.

    Attributes:
        project_dir: Directory the commands operate on
        pkg_info_file: Name of the metadata file inside project_dir
        icon_path: Default icon path offered when generating the README
        arch_list: Architectures accepted in the metadata file
        readme_file: Name of the generated README inside project_dir
        template_path: Custom README template (bundled template when None)
    """

    project_dir: Path
    pkg_info_file: str = "pkg.info"
    icon_path: str = "assets/icon.png"
    arch_list: list[str] = field(default_factory=list)
    readme_file: str = "README.md"
    template_path: Optional[Path] = None

    @property
    def pkg_info_path(self) -> Path:
        return self.project_dir / self.pkg_info_file

    @property
    def readme_path(self) -> Path:
        return self.project_dir / self.readme_file

    @property
    def readme_template(self) -> Path:
        """Template used to render the README."""
        if self.template_path is None:
            return DEFAULT_README_TEMPLATE
        if self.template_path.is_absolute():
            return self.template_path
        return self.project_dir / self.template_path

    def apply(self, values: dict[str, Any], key_map: dict[str, str], source: str) -> None:
        """Apply raw configuration values, checking their types.

        Args:
            values: Mapping read from a configuration file
            key_map: Maps file keys to attribute names
            source: Name of the file, used in error messages

        Raises:
            ConfigError: If a value has the wrong type
        """
        for key, value in values.items():
            attr = key_map.get(key)
            if attr is None:
                logger.debug("Ignoring unknown key %r in %s", key, source)
                continue

            if attr == "arch_list":
                if not isinstance(value, list) or not all(isinstance(a, str) for a in value):
                    raise ConfigError(f"{source}: '{key}' must be a list of strings")
                setattr(self, attr, list(value))
            elif attr == "template_path":
                if not isinstance(value, str) or not value:
                    raise ConfigError(f"{source}: '{key}' must be a non-empty string")
                self.template_path = Path(value)
            else:
                if not isinstance(value, str) or not value:
                    raise ConfigError(f"{source}: '{key}' must be a non-empty string")
                setattr(self, attr, value)


def load_defaults(path: Path = DEFAULTS_FILE) -> dict[str, Any]:
    """Read the YAML defaults file.

    Raises:
        ConfigError: If the file is not valid YAML or not a mapping
    """
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML syntax in {path.name}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"{path.name} must contain a mapping")
    return data


def load_pyproject_overrides(project_dir: Path) -> dict[str, Any]:
    """Read the [tool.pkgmeta] table from pyproject.toml, if any.

    Raises:
        ConfigError: If pyproject.toml is not valid TOML, or ``tool`` or
            ``tool.pkgmeta`` is not a table
    """
    pyproject_path = project_dir / "pyproject.toml"
    if not pyproject_path.exists():
        return {}

    try:
        with open(pyproject_path, "rb") as f:
            pyproject = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML syntax: {e}") from e

    tool = pyproject.get("tool", {})
    if not isinstance(tool, dict):
        raise ConfigError("[tool] in pyproject.toml must be a table")

    section = tool.get("pkgmeta", {})
    if not isinstance(section, dict):
        raise ConfigError("[tool.pkgmeta] in pyproject.toml must be a table")
    return section


def load_config(
    project_dir: Optional[str | Path] = None,
    defaults_file: Path = DEFAULTS_FILE,
) -> CLIConfig:
    """Load CLI configuration for a project directory.

    Args:
        project_dir: Project directory (defaults to the current directory)
        defaults_file: YAML file holding the default values

    Returns:
        CLIConfig instance

    Raises:
        ConfigError: If a configuration file cannot be parsed
    """
    project_path = Path(project_dir) if project_dir is not None else Path.cwd()

    config = CLIConfig(project_dir=project_path)
    config.apply(load_defaults(defaults_file), _YAML_KEYS, defaults_file.name)

    overrides = load_pyproject_overrides(project_path)
    if overrides:
        logger.debug("Applying [tool.pkgmeta] overrides from %s", project_path / "pyproject.toml")
        config.apply(overrides, _TOML_KEYS, "pyproject.toml")

    return config
