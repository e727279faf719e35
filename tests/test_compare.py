# SPDX-License-Identifier: MIT
"""Unit tests for version comparison."""

import pytest

from semver_value import (
    Version,
    InvalidArgument,
    ParseError,
    parse_version,
    compare_versions,
    version_key,
    sort_versions,
    max_version,
)


class TestOperators:
    """Tests for comparison operators on Version."""

    def test_major_less(self):
        """Test that a smaller major version sorts first."""
        assert Version(1, 0, 0) < Version(2, 0, 0)
        assert Version(2, 0, 0) > Version(1, 0, 0)

    def test_numeric_not_textual(self):
        """Test that numeric fields compare as numbers."""
        assert Version(1, 10, 0) > Version(1, 9, 0)
        assert Version(1, 0, 10) > Version(1, 0, 2)

    def test_prerelease_lexicographic(self):
        """Test that pre-release identifiers compare as strings."""
        assert Version(1, 2, 3, ["alpha"]) < Version(1, 2, 3, ["beta"])

    def test_numeric_identifiers_compare_as_strings(self):
        """Test that numeric identifiers are not compared numerically."""
        assert Version(1, 0, 0, ["10"]) < Version(1, 0, 0, ["2"])

    def test_release_sorts_before_prerelease(self):
        """Test that an empty pre-release is a prefix of any other."""
        assert Version(1, 0, 0) < Version(1, 0, 0, ["alpha"])

    def test_shorter_prefix_sorts_first(self):
        """Test tuple ordering on a shared prefix."""
        assert Version(1, 0, 0, ["alpha"]) < Version(1, 0, 0, ["alpha", "1"])

    def test_build_ignored(self):
        """Test that build identifiers do not affect ordering."""
        a = Version(1, 2, 3, [], ["001"])
        b = Version(1, 2, 3, [], ["002"])
        assert a == b
        assert a <= b and a >= b
        assert not a < b and not a > b

    def test_other_types(self):
        """Test that ordering against other types is unsupported."""
        with pytest.raises(TypeError):
            Version(1, 0, 0) < "2.0.0"  # type: ignore


class TestCompareVersions:
    """Tests for compare_versions function."""

    def test_equal_versions(self):
        """Test that equal versions compare as equal."""
        assert compare_versions("1.0.0", "1.0.0") == 0

    def test_major_difference(self):
        """Test comparison with different major versions."""
        assert compare_versions("1.0.0", "2.0.0") == -1
        assert compare_versions("2.0.0", "1.0.0") == 1

    def test_minor_difference(self):
        """Test comparison with different minor versions."""
        assert compare_versions("1.0.0", "1.1.0") == -1
        assert compare_versions("1.1.0", "1.0.0") == 1

    def test_patch_difference(self):
        """Test comparison with different patch versions."""
        assert compare_versions("1.0.0", "1.0.1") == -1
        assert compare_versions("1.0.1", "1.0.0") == 1

    def test_alpha_vs_beta(self):
        """Test that alpha < beta."""
        assert compare_versions("1.0.0-alpha", "1.0.0-beta") == -1
        assert compare_versions("1.0.0-beta", "1.0.0-alpha") == 1

    def test_release_vs_prerelease(self):
        """Test that a release sorts before its pre-releases."""
        assert compare_versions("1.0.0", "1.0.0-rc") == -1

    def test_build_suffix_ignored(self):
        """Test that text build suffixes play no part."""
        assert compare_versions("1.0.0+build1", "1.0.0+build2") == 0

    def test_version_objects(self):
        """Test comparison with Version objects."""
        assert compare_versions(Version(1, 0, 0), Version(2, 0, 0)) == -1

    def test_mixed_string_and_version(self):
        """Test comparison with mixed string and Version."""
        v = parse_version("1.0.0")
        assert compare_versions(v, "2.0.0") == -1
        assert compare_versions("1.0.0", v) == 0

    def test_invalid_string(self):
        """Test that invalid strings raise ParseError."""
        with pytest.raises(ParseError):
            compare_versions("1.0", "1.0.0")


class TestSorting:
    """Tests for version_key, sort_versions and max_version."""

    def test_sorting_basic(self):
        """Test sorting basic version strings."""
        versions = ["2.0.0", "1.0.0", "1.10.0", "1.0.1"]
        assert sorted(versions, key=version_key) == ["1.0.0", "1.0.1", "1.10.0", "2.0.0"]

    def test_sorting_with_prerelease(self):
        """Test sorting versions with pre-releases."""
        versions = ["1.0.0-rc", "1.0.0-alpha", "1.0.0", "1.0.0-beta"]
        assert sorted(versions, key=version_key) == [
            "1.0.0",
            "1.0.0-alpha",
            "1.0.0-beta",
            "1.0.0-rc",
        ]

    def test_sort_versions(self):
        """Test parsing and sorting mixed input."""
        result = sort_versions(["2.0.0", Version(1, 0, 0), "1.5.0-x"])
        assert [str(v) for v in result] == ["1.0.0", "1.5.0-x", "2.0.0"]

    def test_sort_versions_reverse(self):
        """Test sorting in descending order."""
        result = sort_versions(["1.0.0", "3.0.0", "2.0.0"], reverse=True)
        assert [str(v) for v in result] == ["3.0.0", "2.0.0", "1.0.0"]

    def test_sort_is_stable_for_build(self):
        """Test that build-only differences keep input order."""
        a = Version(1, 0, 0, build=["b"])
        b = Version(1, 0, 0, build=["a"])
        assert [v.build for v in sort_versions([a, b])] == [("b",), ("a",)]

    def test_max_version(self):
        """Test selecting the greatest version."""
        assert max_version(["1.0.0", "1.2.0", "1.1.9"]) == Version(1, 2, 0)

    def test_max_version_empty(self):
        """Test that an empty input raises InvalidArgument."""
        with pytest.raises(InvalidArgument):
            max_version([])
