# SPDX-License-Identifier: MIT
"""Conversion between versions and JSON."""

from __future__ import annotations

import json
from typing import Any

from .errors import InvalidArgument
from .semver import Version


def version_from_json(document: Any) -> Version:
    """Create a Version from a decoded JSON object.

    Raises:
        InvalidArgument: If the document is not a valid version object
    """
    return Version.from_json(document)


def version_to_json(version: Version) -> dict[str, Any]:
    """Return the JSON form of ``version``; empty identifier lists are omitted."""
    return version.to_json()


def loads(text: str | bytes) -> Version:
    """Decode a Version from JSON text.

    Args:
        text: JSON text containing a version object

    Returns:
        The decoded Version

    Raises:
        InvalidArgument: If the text is not valid JSON or does not describe
            a valid version

    Example:
        >>> loads('{"major": 1, "minor": 2, "patch": 3, "build": ["42"]}')
        Version(major=1, minor=2, patch=3, prerelease=(), build=('42',))
    """
    try:
        document = json.loads(text)
    except ValueError as e:
        # Also covers undecodable bytes and over-long integer literals
        raise InvalidArgument(f"Invalid JSON text: {e}", field="<root>", value=text) from e
    return Version.from_json(document)


def dumps(version: Version, **kwargs: Any) -> str:
    """Encode a Version as JSON text.

    Keyword arguments are passed through to :func:`json.dumps`.
    """
    return json.dumps(version.to_json(), **kwargs)
