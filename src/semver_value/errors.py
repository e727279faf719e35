# SPDX-License-Identifier: MIT
"""Exceptions raised while constructing versions."""

from __future__ import annotations

from typing import Any, Optional


class VersionError(ValueError):
    """Base exception for version-related errors."""

    pass


class InvalidArgument(VersionError):
    """Raised when explicit fields or a JSON document describe an invalid version.

    Attributes:
        field: Path to the invalid field (e.g. "major" or "prerelease[1]"),
            "<root>" for the document itself, or None when not applicable
        message: Human-readable error message
        value: The invalid value that caused the error (if available)
    """

    def __init__(self, message: str, field: Optional[str] = None, value: Any = None):
        self.field = field
        self.message = message
        self.value = value
        super().__init__(message)


class ParseError(VersionError):
    """Raised when a version string is syntactically malformed.

    Attributes:
        text: The string being parsed
        position: Index of the offending character
        message: Human-readable error message
    """

    def __init__(self, text: str, position: int, message: str):
        self.text = text
        self.position = position
        self.message = message
        super().__init__(f"{message} at position {position} in version string {text!r}")
