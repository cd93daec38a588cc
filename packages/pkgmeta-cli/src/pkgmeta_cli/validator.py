# SPDX-License-Identifier: MIT
"""Validation of pkg.info metadata against its schema.

Errors are reported with the field path and a human-readable message so the
CLI can list every problem at once.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from jsonschema import Draft202012Validator, ValidationError

from .schema import build_schema


class PackageInfoValidationError(Exception):
    """Raised when pkg.info validation fails.

    Attributes:
        errors: List of validation errors with field paths and messages
    """

    def __init__(self, errors: list[ValidationErrorDetail]):
        self.errors = errors
        message = f"pkg.info validation failed with {len(errors)} error(s)"
        if errors:
            message += f": {errors[0].field}: {errors[0].message}"
        super().__init__(message)


@dataclass(frozen=True, slots=True)
class ValidationErrorDetail:
    """Details about a single validation error.

    Attributes:
        field: Path to the invalid field (e.g., "version" or "arch[1]")
        message: Human-readable error message
        value: The invalid value that caused the error (if available)
    """

    field: str
    message: str
    value: Any = None


@dataclass
class ValidationResult:
    """Result of pkg.info validation."""

    valid: bool
    errors: list[ValidationErrorDetail] = field(default_factory=list)


def _json_path_from_error(error: ValidationError) -> str:
    """Convert a jsonschema error path to a readable field path."""
    if not error.absolute_path:
        return "<root>"
    parts = []
    for part in error.absolute_path:
        if isinstance(part, int):
            parts.append(f"[{part}]")
        elif parts:
            parts.append(f".{part}")
        else:
            parts.append(str(part))
    return "".join(parts)


def _format_error_message(error: ValidationError) -> str:
    """Format a jsonschema error into a human-readable message."""
    if error.validator == "required":
        missing = [name for name in error.validator_value if name not in error.instance]
        if len(missing) == 1:
            return f"Missing required field: {missing[0]}"
        return f"Missing required fields: {', '.join(missing)}"

    if error.validator == "type":
        expected = error.validator_value
        if isinstance(expected, list):
            expected = " or ".join(expected)
        actual = type(error.instance).__name__
        return f"Expected {expected}, got {actual}"

    if error.validator == "pattern":
        return f"'{error.instance}' is not a valid semantic version (MAJOR.MINOR.PATCH)"

    if error.validator == "enum":
        allowed = ", ".join(repr(v) for v in error.validator_value)
        return f"Value must be one of: {allowed}"

    if error.validator == "minLength":
        return "Value cannot be empty"

    if error.validator == "uniqueItems":
        return "Values must be unique"

    return error.message


def validate_package_info(data: Any, arch_list: list[str]) -> ValidationResult:
    """Validate a pkg.info mapping.

    Args:
        data: The mapping loaded from pkg.info
        arch_list: Architectures allowed in the ``arch`` field

    Returns:
        ValidationResult with validation status and errors

    Example:
        >>> result = validate_package_info(
        ...     {"name": "demo", "version": "1.0.0", "tenant": "acme"}, ["windows"]
        ... )
        >>> result.valid
        True
    """
    if not isinstance(data, dict):
        return ValidationResult(
            valid=False,
            errors=[
                ValidationErrorDetail(
                    field="<root>",
                    message=f"pkg.info must be a mapping, got {type(data).__name__}",
                    value=data,
                )
            ],
        )

    validator = Draft202012Validator(build_schema(arch_list))
    errors: list[ValidationErrorDetail] = []
    seen: set[tuple[str, str]] = set()

    for error in validator.iter_errors(data):
        detail = ValidationErrorDetail(
            field=_json_path_from_error(error),
            message=_format_error_message(error),
            value=error.instance if error.absolute_path else None,
        )
        # One "required" error is raised per missing field, all with the same message
        if (detail.field, detail.message) in seen:
            continue
        seen.add((detail.field, detail.message))
        errors.append(detail)

    return ValidationResult(valid=not errors, errors=errors)


def validate_package_info_strict(data: Any, arch_list: list[str]) -> None:
    """Validate a pkg.info mapping and raise if it is invalid.

    Raises:
        PackageInfoValidationError: If the mapping is invalid
    """
    result = validate_package_info(data, arch_list)
    if not result.valid:
        raise PackageInfoValidationError(result.errors)
