"""
Unit tests for version constraint resolution.
"""

import pytest

from juliakit.core.exceptions import InvalidVersionError, NoMatchingVersionError
from juliakit.toolchain.resolver import (
    NIGHTLY,
    is_exact_version,
    max_satisfying,
    resolve_version,
    sort_versions,
    strip_tag_prefix,
)

TAGGED = ["v1.2.0", "v1.3.0", "v1.3.1"]


class TestIsExactVersion:
    """Test exact version detection."""

    @pytest.mark.parametrize("value", ["1.6.7", "1.3.0-rc3", "1.0.0"])
    def test_exact(self, value):
        assert is_exact_version(value)

    @pytest.mark.parametrize("value", ["1", "1.6", "^1.6", "1.x", "nightly", "v1.6.7"])
    def test_not_exact(self, value):
        assert not is_exact_version(value)


def test_strip_tag_prefix():
    """Test tag prefix removal."""
    assert strip_tag_prefix("v1.3.0") == "1.3.0"
    assert strip_tag_prefix("1.3.0") == "1.3.0"


class TestResolveVersion:
    """Test resolve_version."""

    def test_caret_range(self):
        """Test ^1.3 picks the newest 1.x release."""
        assert resolve_version(TAGGED, "^1.3") == "1.3.1"

    def test_exact_version_is_returned_unchanged(self):
        """Test exact versions bypass the catalog."""
        assert resolve_version(TAGGED, "1.0.5") == "1.0.5"
        assert resolve_version([], "1.9.0-rc2") == "1.9.0-rc2"

    def test_nightly(self):
        """Test nightly is returned as-is."""
        assert resolve_version(TAGGED, "nightly") == NIGHTLY

    def test_major_only(self, sample_catalog):
        """Test '1' picks the highest stable 1.x."""
        assert resolve_version(sample_catalog.versions(), "1") == "1.6.7"

    def test_tilde_range(self, sample_catalog):
        """Test ~1.3 stays within 1.3.x."""
        assert resolve_version(sample_catalog.versions(), "~1.3") == "1.3.1"

    def test_x_range(self, sample_catalog):
        """Test 1.4.x skips the prerelease."""
        assert resolve_version(sample_catalog.versions(), "1.4.x") == "1.4.2"

    def test_compound_range(self, sample_catalog):
        """Test an intersection range."""
        assert resolve_version(sample_catalog.versions(), ">=1.0 <1.3") == "1.2.0"

    def test_no_match(self):
        """Test a range outside the catalog raises."""
        with pytest.raises(NoMatchingVersionError, match=r"matches \^2.0") as exc_info:
            resolve_version(TAGGED, "^2.0")

        assert exc_info.value.constraint == "^2.0"

    def test_invalid_constraint(self):
        """Test garbage constraints are reported as invalid."""
        with pytest.raises(InvalidVersionError):
            resolve_version(TAGGED, "latest-please")

    def test_invalid_is_a_no_match(self):
        """Test invalid constraints can be handled as no-match."""
        with pytest.raises(NoMatchingVersionError):
            resolve_version(TAGGED, "latest-please")

    def test_non_version_keys_are_ignored(self):
        """Test catalog keys that are not versions do not break ranges."""
        assert resolve_version(["latest", "v1.3.0"], "^1") == "1.3.0"


class TestMaxSatisfying:
    """Test max_satisfying."""

    def test_none_when_empty(self):
        assert max_satisfying([], "^1") is None


class TestSortVersions:
    """Test sort_versions."""

    def test_newest_first(self):
        """Test semantic ordering, not lexical."""
        assert sort_versions(["1.10.0", "1.9.4", "v1.2.0", "1.10.0-rc1"]) == [
            "1.10.0",
            "1.10.0-rc1",
            "1.9.4",
            "v1.2.0",
        ]

    def test_ascending(self):
        assert sort_versions(["1.3.0", "1.2.0"], reverse=False) == ["1.2.0", "1.3.0"]

    def test_invalid_keys_last(self):
        assert sort_versions(["latest", "1.0.0"]) == ["1.0.0", "latest"]
