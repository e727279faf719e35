# SPDX-License-Identifier: MIT
"""Semantic version value type.

Text form: MAJOR.MINOR.PATCH[-prerelease]

- Pre-release: dot-separated alphanumeric identifiers, e.g. -alpha, -alpha.1, -rc.2

Leading whitespace is skipped. Anything after the pre-release section is
left unconsumed, a +build suffix included. Build identifiers are set only
through explicit fields or the JSON form.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from functools import total_ordering
from typing import Any, Iterable

from .errors import InvalidArgument, ParseError
from .validator import validate_version_document

_WHITESPACE = re.compile(r"\s*")
_NUMBER = re.compile(r"[0-9]+")
_IDENTIFIER = re.compile(r"[0-9A-Za-z]+")


def _check_number(name: str, value: Any) -> None:
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise InvalidArgument(
            f"semver {name} must be a non-negative integer, got {value!r}",
            field=name,
            value=value,
        )


def _identifiers(name: str, values: Iterable[str]) -> tuple[str, ...]:
    if isinstance(values, (str, bytes)):
        raise InvalidArgument(
            f"semver {name} must be a sequence of strings, not a single string",
            field=name,
            value=values,
        )
    try:
        result = tuple(values)
    except TypeError as e:
        raise InvalidArgument(
            f"semver {name} must be a sequence of strings, got {type(values).__name__}",
            field=name,
            value=values,
        ) from e
    for index, element in enumerate(result):
        if not isinstance(element, str):
            raise InvalidArgument(
                f"semver {name} element must be a string, got {type(element).__name__}",
                field=f"{name}[{index}]",
                value=element,
            )
        if not element:
            raise InvalidArgument(
                f"semver {name} element may not be empty",
                field=f"{name}[{index}]",
                value=element,
            )
    return result


@total_ordering
@dataclass(frozen=True, slots=True, eq=False)
class Version:
    """Comparable software version, modeled after https://semver.org/.

    Two versions that differ only in build metadata are equal, hash alike
    and neither sorts before the other. Pre-release identifiers are compared
    as a plain tuple of strings, so ``1.0.0`` sorts before ``1.0.0-alpha``
    and ``1.0.0-10`` sorts before ``1.0.0-2``.

    Attributes:
        major: Major version, for incompatible API changes
        minor: Minor version, for backwards-compatible additions
        patch: Patch version, for backwards-compatible bug fixes
        prerelease: Pre-release identifiers (e.g. ("alpha", "1"))
        build: Build identifiers (e.g. ("build", "123")), ignored in comparisons
    """

    major: int = 0
    minor: int = 0
    patch: int = 0
    prerelease: tuple[str, ...] = ()
    build: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        for name in ("major", "minor", "patch"):
            _check_number(name, getattr(self, name))
        # Frozen dataclass: normalize the identifier sequences in place
        object.__setattr__(self, "prerelease", _identifiers("prerelease", self.prerelease))
        object.__setattr__(self, "build", _identifiers("build", self.build))

    @classmethod
    def parse(cls, text: str) -> Version:
        """Parse a version string. See :func:`parse_version`."""
        return parse_version(text)

    @classmethod
    def from_json(cls, document: Any) -> Version:
        """Create a version from its decoded JSON form.

        Args:
            document: A dictionary with ``major``, ``minor``, ``patch`` and
                optional ``prerelease`` / ``build`` lists

        Raises:
            InvalidArgument: If the document is not a valid version object
        """
        return cls(**validate_version_document(document))

    def to_json(self) -> dict[str, Any]:
        """Return the JSON form of the version.

        Empty ``prerelease`` and ``build`` lists are omitted.
        """
        document: dict[str, Any] = {
            "major": self.major,
            "minor": self.minor,
            "patch": self.patch,
        }
        if self.prerelease:
            document["prerelease"] = list(self.prerelease)
        if self.build:
            document["build"] = list(self.build)
        return document

    def to_string(self) -> str:
        return str(self)

    def __str__(self) -> str:
        """Return the canonical string representation of the version."""
        version = f"{self.major}.{self.minor}.{self.patch}"
        if self.prerelease:
            version += "-" + ".".join(self.prerelease)
        if self.build:
            version += "+" + ".".join(self.build)
        return version

    def __format__(self, format_spec: str) -> str:
        return format(str(self), format_spec)

    def _key(self) -> tuple:
        return (self.major, self.minor, self.patch, self.prerelease)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self._key() == other._key()

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self._key() < other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    @property
    def is_prerelease(self) -> bool:
        """Return True if this is a pre-release version."""
        return bool(self.prerelease)

    @property
    def base_version(self) -> str:
        """Return the base version without pre-release or build metadata."""
        return f"{self.major}.{self.minor}.{self.patch}"


def _scan_number(text: str, pos: int) -> tuple[int, int]:
    match = _NUMBER.match(text, pos)
    if match is None:
        raise ParseError(text, pos, "expected a decimal number")
    try:
        value = int(match.group())
    except ValueError as e:
        # Digit runs longer than sys.get_int_max_str_digits()
        raise ParseError(text, pos, "number too large") from e
    return value, match.end()


def _expect_separator(text: str, pos: int) -> int:
    if pos >= len(text) or text[pos] != ".":
        raise ParseError(text, pos, "unexpected character")
    return pos + 1


def scan_version(text: str, pos: int = 0) -> tuple[Version, int]:
    """Parse a version starting at ``pos`` and report where it ended.

    Parsing stops after the pre-release section (or after PATCH when there
    is none). The remainder of the string is left for the caller, which
    makes this suitable for versions embedded in larger text. Whitespace
    at ``pos`` is skipped before the version.

    Args:
        text: String containing a version
        pos: Index at which the version starts

    Returns:
        A tuple of the parsed Version and the index of the first
        unconsumed character

    Raises:
        ParseError: If the text at ``pos`` is not a valid version

    Examples:
        >>> scan_version("1.2.3-rc.1 (stable)")
        (Version(major=1, minor=2, patch=3, prerelease=('rc', '1'), build=()), 10)
    """
    if not isinstance(text, str):
        raise ParseError(repr(text), 0, f"version must be a string, got {type(text).__name__}")

    pos = _WHITESPACE.match(text, pos).end()
    major, pos = _scan_number(text, pos)
    pos = _expect_separator(text, pos)
    minor, pos = _scan_number(text, pos)
    pos = _expect_separator(text, pos)
    patch, pos = _scan_number(text, pos)

    prerelease: list[str] = []
    if text.startswith("-", pos):
        pos += 1
        while True:
            match = _IDENTIFIER.match(text, pos)
            if match is None:
                raise ParseError(text, pos, "empty prerelease identifier")
            prerelease.append(match.group())
            pos = match.end()
            if not text.startswith(".", pos):
                break
            pos += 1

    return Version(major, minor, patch, tuple(prerelease)), pos


def parse_version(version_string: str) -> Version:
    """Parse a semantic version string into a Version object.

    Args:
        version_string: A string of the form MAJOR.MINOR.PATCH[-prerelease]

    Returns:
        A Version object with parsed components

    Raises:
        ParseError: If the string does not start with a valid version

    Examples:
        >>> parse_version("1.2.3")
        Version(major=1, minor=2, patch=3, prerelease=(), build=())

        >>> parse_version("1.0.0-alpha.1")
        Version(major=1, minor=0, patch=0, prerelease=('alpha', '1'), build=())
    """
    version, _ = scan_version(version_string)
    return version


def is_valid_version(version_string: str) -> bool:
    """Check if a whole string is a version the text parser accepts.

    Surrounding whitespace is ignored. Build metadata is not part of the
    text grammar, so ``"1.0.0+build"`` is rejected here even though
    :func:`parse_version` reads its leading ``1.0.0``.

    Examples:
        >>> is_valid_version("1.0.0-alpha")
        True
        >>> is_valid_version("1.0")
        False
    """
    if not isinstance(version_string, str):
        return False
    stripped = version_string.strip()
    try:
        _, end = scan_version(stripped)
    except ParseError:
        return False
    return end == len(stripped)
