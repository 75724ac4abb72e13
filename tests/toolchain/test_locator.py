"""
Unit tests for download URL resolution.
"""

import pytest

from juliakit.core.exceptions import (
    NoMatchingBinariesError,
    PlatformTranslationError,
    UnsupportedPlatformError,
)
from juliakit.core.platform import HostPlatform
from juliakit.toolchain.catalog import FileEntry, Release, VersionCatalog
from juliakit.toolchain.locator import (
    find_file,
    get_download_url,
    get_nightly_file_name,
    get_nightly_url,
)

BASE = "https://julialang-s3.julialang.org/bin"


class TestNightly:
    """Test nightly build naming."""

    @pytest.mark.parametrize(
        "host,file_name",
        [
            (HostPlatform("win32", "x64"), "julia-latest-win64.exe"),
            (HostPlatform("win32", "x86"), "julia-latest-win32.exe"),
            (HostPlatform("darwin", "x64"), "julia-latest-mac64.dmg"),
            (HostPlatform("linux", "x64"), "julia-latest-linux64.tar.gz"),
            (HostPlatform("linux", "x86"), "julia-latest-linux32.tar.gz"),
        ],
    )
    def test_file_names(self, host, file_name):
        """Test file name per platform."""
        assert get_nightly_file_name(host) == file_name

    def test_32bit_macos(self):
        """Test 32-bit macOS has no nightly."""
        with pytest.raises(UnsupportedPlatformError, match="32-bit Julia"):
            get_nightly_file_name(HostPlatform("darwin", "x86"))

    def test_unknown_os(self):
        """Test unknown OS has no nightly."""
        with pytest.raises(UnsupportedPlatformError, match="Platform sunos"):
            get_nightly_file_name(HostPlatform("sunos", "x64"))

    def test_url(self):
        """Test the URL uses the catalog OS and the host arch."""
        url = get_nightly_url(HostPlatform("win32", "x64"))
        assert url == (
            "https://julialangnightlies-s3.julialang.org/bin/winnt/x64/"
            "julia-latest-win64.exe"
        )

    def test_custom_base_url(self):
        """Test a mirror base URL."""
        url = get_nightly_url(HostPlatform("linux", "x86"), "https://mirror.example/")
        assert url == "https://mirror.example/linux/x86/julia-latest-linux32.tar.gz"


class TestFindFile:
    """Test find_file."""

    def test_first_match_wins(self):
        """Test the first matching entry is returned."""
        release = Release(
            files=(
                FileEntry("linux", "x86_64", "first"),
                FileEntry("linux", "x86_64", "second"),
            )
        )
        assert find_file(release, "linux", "x86_64").url == "first"

    def test_extension_filter(self, sample_catalog):
        """Test the installer format is preferred over archives."""
        release = sample_catalog.get_release("1.6.7")

        entry = find_file(release, "winnt", "x86_64", "exe")

        assert entry.url.endswith("julia-1.6.7-win64.exe")

    def test_entries_without_extension_match(self):
        """Test entries without an extension match on os/arch alone."""
        release = Release(files=(FileEntry("winnt", "x86_64", "plain"),))
        assert find_file(release, "winnt", "x86_64", "exe").url == "plain"

    def test_no_match(self, sample_catalog):
        """Test None when nothing matches."""
        release = sample_catalog.get_release("1.6.7")
        assert find_file(release, "mac", "i686") is None


class TestGetDownloadUrl:
    """Test get_download_url."""

    @pytest.mark.parametrize(
        "host,url",
        [
            (
                HostPlatform("linux", "x64"),
                f"{BASE}/linux/x64/1.3/julia-1.3.1-linux-x86_64.tar.gz",
            ),
            (
                HostPlatform("linux", "x86"),
                f"{BASE}/linux/x86/1.3/julia-1.3.1-linux-i686.tar.gz",
            ),
            (HostPlatform("darwin", "x64"), f"{BASE}/mac/x64/1.3/julia-1.3.1-mac64.dmg"),
            (HostPlatform("win32", "x64"), f"{BASE}/winnt/x64/1.3/julia-1.3.1-win64.exe"),
            (HostPlatform("win32", "x86"), f"{BASE}/winnt/x86/1.3/julia-1.3.1-win32.exe"),
        ],
    )
    def test_stable_release(self, sample_catalog, host, url):
        """Test catalog lookup per platform."""
        assert get_download_url(sample_catalog, "1.3.1", host) == url

    def test_repeated_lookup_is_stable(self, sample_catalog):
        """Test looking up the same version twice gives the same URL."""
        host = HostPlatform("win32", "x64")

        first = get_download_url(sample_catalog, "1.4.2", host)
        second = get_download_url(sample_catalog, "1.4.2", host)

        assert first == second == f"{BASE}/winnt/x64/1.4/julia-1.4.2-win64.exe"

    def test_nightly(self, sample_catalog):
        """Test nightly does not use the catalog."""
        url = get_download_url(sample_catalog, "nightly", HostPlatform("win32", "x64"))
        assert url.endswith("/winnt/x64/julia-latest-win64.exe")

    def test_tag_prefixed_key(self):
        """Test a resolved version finds a 'v' prefixed catalog key."""
        catalog = VersionCatalog.from_dict(
            {
                "v1.3.1": {
                    "files": [{"os": "linux", "arch": "x86_64", "url": "https://x/j.tar.gz"}]
                }
            }
        )
        assert get_download_url(catalog, "1.3.1", HostPlatform("linux", "x64")) == (
            "https://x/j.tar.gz"
        )

    def test_unknown_version(self, sample_catalog):
        """Test a version missing from the catalog."""
        with pytest.raises(NoMatchingBinariesError, match="x86_64/9.9.9"):
            get_download_url(sample_catalog, "9.9.9", HostPlatform("linux", "x64"))

    def test_missing_binaries(self, sample_catalog):
        """Test a release without files for the host."""
        with pytest.raises(NoMatchingBinariesError) as exc_info:
            get_download_url(sample_catalog, "1.6.7", HostPlatform("darwin", "x86"))

        assert str(exc_info.value) == "Could not find i686/1.6.7 binaries"
        assert exc_info.value.arch == "i686"

    def test_unknown_arch(self, sample_catalog):
        """Test an architecture without a catalog name."""
        with pytest.raises(PlatformTranslationError):
            get_download_url(sample_catalog, "1.6.7", HostPlatform("linux", "arm64"))
