# SPDX-License-Identifier: MIT
"""Validation of the JSON form of a version.

Documents are checked against :data:`~semver_value.schema.VERSION_SCHEMA`.
The first problem found, in field order, is reported as an
:class:`~semver_value.errors.InvalidArgument` naming the offending field.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from jsonschema import Draft202012Validator, ValidationError, validators

from .errors import InvalidArgument
from .schema import VERSION_FIELDS, VERSION_SCHEMA


def _is_integer(checker, instance: Any) -> bool:
    # JSON integers only: no booleans and no integral floats such as 1.0
    return isinstance(instance, int) and not isinstance(instance, bool)


_VersionValidator = validators.extend(
    Draft202012Validator,
    type_checker=Draft202012Validator.TYPE_CHECKER.redefine("integer", _is_integer),
)

_VALIDATOR = _VersionValidator(VERSION_SCHEMA)


@dataclass(frozen=True, slots=True)
class ValidationErrorDetail:
    """Details about a single validation error.

    Attributes:
        field: Path to the invalid field (e.g., "minor" or "build[0]")
        message: Human-readable error message
        value: The invalid value that caused the error (if available)
    """

    field: str
    message: str
    value: Any = None


def _json_path(path) -> str:
    """Convert a jsonschema error path to a readable field path."""
    parts = []
    for part in path:
        if isinstance(part, int):
            parts.append(f"[{part}]")
        elif parts:
            parts.append(f".{part}")
        else:
            parts.append(str(part))
    return "".join(parts) or "<root>"


def _format_error_message(error: ValidationError) -> str:
    """Format a jsonschema error into a human-readable message."""
    if error.validator == "type":
        expected = error.validator_value
        if expected == "integer":
            expected = "non-negative integer"
        return f"Expected {expected}, got {type(error.instance).__name__}"

    if error.validator == "minimum":
        return f"Value must be at least {error.validator_value}"

    if error.validator == "minLength":
        return "Identifier may not be empty"

    return error.message


def _details(error: ValidationError) -> list[ValidationErrorDetail]:
    if error.validator == "required":
        # One error is produced per missing property; report each by name
        return [
            ValidationErrorDetail(field=name, message=f"Missing required field: {name}")
            for name in error.validator_value
            if name not in error.instance
        ]
    return [
        ValidationErrorDetail(
            field=_json_path(error.absolute_path),
            message=_format_error_message(error),
            value=error.instance,
        )
    ]


def _sort_key(detail: ValidationErrorDetail) -> tuple[int, int]:
    name, _, index = detail.field.partition("[")
    rank = VERSION_FIELDS.index(name) if name in VERSION_FIELDS else len(VERSION_FIELDS)
    return (rank, int(index.rstrip("]")) if index else -1)


def collect_errors(document: Any) -> list[ValidationErrorDetail]:
    """Return every problem with a JSON version document, in field order.

    Args:
        document: A decoded JSON value

    Returns:
        List of validation errors (empty if the document is valid)
    """
    if not isinstance(document, dict):
        return [
            ValidationErrorDetail(
                field="<root>",
                message=f"Version JSON must be an object, got {type(document).__name__}",
                value=document,
            )
        ]

    details: dict[str, ValidationErrorDetail] = {}
    for error in _VALIDATOR.iter_errors(document):
        for detail in _details(error):
            details.setdefault(detail.field, detail)
    return sorted(details.values(), key=_sort_key)


def validate_version_document(document: Any) -> dict[str, Any]:
    """Validate a JSON version document and return its components.

    Args:
        document: A decoded JSON value, normally a dictionary

    Returns:
        A dictionary with ``major``, ``minor``, ``patch``, ``prerelease`` and
        ``build`` keys; the identifier lists are returned as tuples

    Raises:
        InvalidArgument: If the document is not a valid version object
    """
    errors = collect_errors(document)
    if errors:
        first = errors[0]
        raise InvalidArgument(
            f"Invalid version JSON at '{first.field}': {first.message}",
            field=first.field,
            value=first.value,
        )

    return {
        "major": document["major"],
        "minor": document["minor"],
        "patch": document["patch"],
        "prerelease": tuple(document.get("prerelease", ())),
        "build": tuple(document.get("build", ())),
    }
