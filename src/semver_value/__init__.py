# SPDX-License-Identifier: MIT
"""Semantic version value type with text and JSON forms.

This package provides an immutable, comparable Version with parsing from
MAJOR.MINOR.PATCH[-prerelease] text, a validated JSON representation, and
ordering that ignores build metadata.

Example:
    >>> from semver_value import Version, parse_version, compare_versions
    >>>
    >>> version = parse_version("1.2.3-alpha.1")
    >>> version.prerelease
    ('alpha', '1')
    >>> str(version)
    '1.2.3-alpha.1'
    >>>
    >>> Version(1, 2, 3, build=["001"]) == Version(1, 2, 3, build=["002"])
    True
    >>>
    >>> compare_versions("1.0.0", "2.0.0")
    -1
"""

__version__ = "0.1.0"

from .errors import (
    VersionError,
    InvalidArgument,
    ParseError,
)
from .semver import (
    Version,
    parse_version,
    scan_version,
    is_valid_version,
)
from .schema import (
    VERSION_FIELDS,
    VERSION_SCHEMA,
    get_version_schema,
)
from .validator import (
    ValidationErrorDetail,
    collect_errors,
    validate_version_document,
)
from .jsonio import (
    version_from_json,
    version_to_json,
    loads,
    dumps,
)
from .compare import (
    compare_versions,
    version_key,
    sort_versions,
    max_version,
)

__all__ = [
    # Errors
    "VersionError",
    "InvalidArgument",
    "ParseError",
    # Version parsing
    "Version",
    "parse_version",
    "scan_version",
    "is_valid_version",
    # JSON form
    "VERSION_FIELDS",
    "VERSION_SCHEMA",
    "get_version_schema",
    "ValidationErrorDetail",
    "collect_errors",
    "validate_version_document",
    "version_from_json",
    "version_to_json",
    "loads",
    "dumps",
    # Version comparison
    "compare_versions",
    "version_key",
    "sort_versions",
    "max_version",
]
