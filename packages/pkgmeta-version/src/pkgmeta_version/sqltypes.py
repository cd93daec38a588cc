# SPDX-License-Identifier: MIT
"""SQLAlchemy column type storing a Version as text."""

from __future__ import annotations

from typing import Any, Optional

from sqlalchemy import String
from sqlalchemy.engine import Dialect
from sqlalchemy.types import TypeDecorator

from .semver import InvalidVersionError, Version, parse_version


class VersionType(TypeDecorator[Version]):
    """Persist ``Version`` values in a VARCHAR column.

    Values are written with ``str(version)`` (no "v" prefix) and read back
    through ``parse_version``. Plain strings are accepted on bind and are
    validated before they reach the database; any other type is rejected.

    Example:
        >>> class Release(Base):
        ...     __tablename__ = "releases"
        ...     id: Mapped[int] = mapped_column(primary_key=True)
        ...     version: Mapped[Version] = mapped_column(VersionType())
    """

    impl = String(255)
    cache_ok = True

    def process_bind_param(self, value: Any, dialect: Dialect) -> Optional[str]:
        if value is None:
            return None
        if isinstance(value, str):
            value = parse_version(value)
        elif not isinstance(value, Version):
            raise InvalidVersionError(
                repr(value), f"Version must be a Version or string, got {type(value).__name__}"
            )
        return str(value)

    def process_result_value(self, value: Optional[str], dialect: Dialect) -> Optional[Version]:
        if value is None:
            return None
        return parse_version(value)

    @property
    def python_type(self) -> type:
        return Version
