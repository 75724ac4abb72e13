"""
Unit tests for platform detection and catalog name translation.
"""

import pytest
from unittest.mock import patch

from juliakit.core.exceptions import PlatformTranslationError
from juliakit.core.platform import (
    HostPlatform,
    clear_platform_cache,
    detect_platform,
    to_catalog_arch,
    to_catalog_os,
)


class TestTranslation:
    """Test host-to-catalog name translation."""

    @pytest.mark.parametrize(
        "host_os,catalog_os",
        [("win32", "winnt"), ("darwin", "mac"), ("linux", "linux")],
    )
    def test_os_names(self, host_os, catalog_os):
        """Test every supported OS translates."""
        assert to_catalog_os(host_os) == catalog_os

    @pytest.mark.parametrize(
        "host_arch,catalog_arch", [("x86", "i686"), ("x64", "x86_64")]
    )
    def test_arch_names(self, host_arch, catalog_arch):
        """Test every supported architecture translates."""
        assert to_catalog_arch(host_arch) == catalog_arch

    def test_unknown_os(self):
        """Test unknown OS is rejected."""
        with pytest.raises(PlatformTranslationError, match="Platform freebsd"):
            to_catalog_os("freebsd")

    def test_unknown_arch(self):
        """Test unknown architecture is rejected."""
        with pytest.raises(PlatformTranslationError, match="Architecture arm64"):
            to_catalog_arch("arm64")


class TestHostPlatform:
    """Test HostPlatform dataclass."""

    def test_catalog_properties(self):
        """Test catalog names are derived from host names."""
        host = HostPlatform("win32", "x86")
        assert host.catalog_os == "winnt"
        assert host.catalog_arch == "i686"

    def test_with_arch_replaces(self):
        """Test with_arch returns a copy with the new architecture."""
        host = HostPlatform("linux", "x64")
        other = host.with_arch("x86")

        assert other == HostPlatform("linux", "x86")
        assert host.arch == "x64"

    def test_with_arch_none_keeps(self):
        """Test with_arch(None) keeps the host architecture."""
        host = HostPlatform("linux", "x64")
        assert host.with_arch(None) is host

    def test_str(self):
        """Test string form."""
        assert str(HostPlatform("darwin", "x64")) == "darwin-x64"

    def test_frozen(self):
        """Test HostPlatform is immutable."""
        host = HostPlatform("linux", "x64")
        with pytest.raises(Exception):
            host.os = "win32"


class TestDetectPlatform:
    """Test detect_platform function."""

    @pytest.mark.parametrize(
        "system,machine,expected",
        [
            ("Windows", "AMD64", HostPlatform("win32", "x64")),
            ("Windows", "x86", HostPlatform("win32", "x86")),
            ("Darwin", "x86_64", HostPlatform("darwin", "x64")),
            ("Linux", "x86_64", HostPlatform("linux", "x64")),
            ("Linux", "i686", HostPlatform("linux", "x86")),
        ],
    )
    def test_detection(self, system, machine, expected):
        """Test OS and architecture normalization."""
        with patch("platform.system", return_value=system), patch(
            "platform.machine", return_value=machine
        ):
            assert detect_platform() == expected

    def test_unknown_machine_is_passed_through(self):
        """Test unknown machines are kept for translation to reject."""
        with patch("platform.system", return_value="Linux"), patch(
            "platform.machine", return_value="aarch64"
        ):
            host = detect_platform()

        assert host.arch == "aarch64"
        with pytest.raises(PlatformTranslationError):
            host.catalog_arch

    def test_detection_is_cached(self):
        """Test detection runs once until the cache is cleared."""
        with patch("platform.system", return_value="Linux") as system, patch(
            "platform.machine", return_value="x86_64"
        ):
            first = detect_platform()
            second = detect_platform()
            assert first is second
            assert system.call_count == 1

            clear_platform_cache()
            detect_platform()
            assert system.call_count == 2
