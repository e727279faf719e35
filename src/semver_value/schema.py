# SPDX-License-Identifier: MIT
"""JSON Schema definition for the JSON form of a version.

The JSON form is an object with integer ``major``, ``minor`` and ``patch``
fields and optional ``prerelease`` and ``build`` arrays of identifiers.
Empty arrays are omitted when serializing.
"""

from __future__ import annotations

import copy

# Field order used when serializing and when reporting validation errors
VERSION_FIELDS = ("major", "minor", "patch", "prerelease", "build")

_IDENTIFIER_LIST: dict = {
    "type": "array",
    "items": {"type": "string", "minLength": 1},
}

# JSON Schema for a serialized Version
VERSION_SCHEMA: dict = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "title": "Version",
    "description": "Semantic version split into its components",
    "type": "object",
    "required": ["major", "minor", "patch"],
    "properties": {
        "major": {
            "type": "integer",
            "description": "Major version, for incompatible API changes",
            "minimum": 0,
        },
        "minor": {
            "type": "integer",
            "description": "Minor version, for backwards-compatible additions",
            "minimum": 0,
        },
        "patch": {
            "type": "integer",
            "description": "Patch version, for backwards-compatible bug fixes",
            "minimum": 0,
        },
        "prerelease": {
            **_IDENTIFIER_LIST,
            "description": "Pre-release identifiers, compared lexicographically",
        },
        "build": {
            **_IDENTIFIER_LIST,
            "description": "Build identifiers, ignored in comparisons",
        },
    },
}


def get_version_schema() -> dict:
    """Return a copy of the version JSON schema.

    Returns:
        A dictionary containing the JSON Schema for a serialized Version
    """
    return copy.deepcopy(VERSION_SCHEMA)
