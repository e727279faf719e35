# SPDX-License-Identifier: MIT
"""Version comparison helpers.

Ordering: major, minor and patch numerically, then pre-release identifiers
as a plain tuple of strings. Build metadata is ignored.
"""

from __future__ import annotations

from typing import Iterable, Union

from .errors import InvalidArgument
from .semver import Version, parse_version

VersionLike = Union[str, Version]


def _coerce(version: VersionLike) -> Version:
    return parse_version(version) if isinstance(version, str) else version


def compare_versions(version1: VersionLike, version2: VersionLike) -> int:
    """Compare two versions.

    Args:
        version1: First version (string or Version object)
        version2: Second version (string or Version object)

    Returns:
        -1 if version1 < version2
        0 if version1 == version2
        1 if version1 > version2

    Raises:
        ParseError: If either version string is invalid

    Examples:
        >>> compare_versions("1.0.0", "2.0.0")
        -1
        >>> compare_versions("1.0.0-alpha", "1.0.0-beta")
        -1
        >>> compare_versions("1.0.0", "1.0.0-alpha")
        -1
    """
    v1 = _coerce(version1)
    v2 = _coerce(version2)

    if v1 == v2:
        return 0
    return -1 if v1 < v2 else 1


def version_key(version: VersionLike) -> tuple:
    """Return a sort key for a version, suitable for sorting.

    Examples:
        >>> sorted(["1.0.0-beta", "2.0.0", "1.0.0-alpha"], key=version_key)
        ['1.0.0-alpha', '1.0.0-beta', '2.0.0']
    """
    v = _coerce(version)
    return (v.major, v.minor, v.patch, v.prerelease)


def sort_versions(versions: Iterable[VersionLike], reverse: bool = False) -> list[Version]:
    """Parse and sort versions.

    The sort is stable, so versions that differ only in build metadata keep
    their input order.
    """
    return sorted((_coerce(v) for v in versions), reverse=reverse)


def max_version(versions: Iterable[VersionLike]) -> Version:
    """Return the greatest version.

    Raises:
        InvalidArgument: If ``versions`` is empty
    """
    parsed = [_coerce(v) for v in versions]
    if not parsed:
        raise InvalidArgument("max_version() requires at least one version")
    return max(parsed)
