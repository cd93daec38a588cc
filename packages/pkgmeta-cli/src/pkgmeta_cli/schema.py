# SPDX-License-Identifier: MIT
"""JSON Schema definition for pkg.info metadata files.

The architecture allow-list is configurable, so the schema is built per
configuration by ``build_schema``.
"""

from __future__ import annotations

import copy

from pkgmeta_version import SEMVER_PATTERN

PKG_INFO_SCHEMA: dict = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "title": "Package info",
    "description": "Project metadata stored in pkg.info",
    "type": "object",
    "required": ["name", "version", "tenant"],
    "properties": {
        "name": {
            "type": "string",
            "description": "Project name",
            "minLength": 1,
        },
        "version": {
            "type": "string",
            "description": "Project version following semantic versioning",
            "pattern": SEMVER_PATTERN,
        },
        "description": {
            "type": ["string", "null"],
            "description": "Free-form project description",
        },
        "tenant": {
            "type": "string",
            "description": "Tenant the project belongs to",
            "minLength": 1,
        },
        "repo": {
            "type": ["string", "null"],
            "description": "Repository URL",
        },
        "arch": {
            "type": ["array", "null"],
            "description": "Build architectures (empty for the local platform)",
            "items": {"type": "string"},
            "uniqueItems": True,
        },
    },
    "additionalProperties": False,
}


def build_schema(arch_list: list[str]) -> dict:
    """Return the pkg.info schema restricted to the given architectures."""
    schema = copy.deepcopy(PKG_INFO_SCHEMA)
    schema["properties"]["arch"]["items"]["enum"] = list(arch_list)
    return schema
