"""
Download URL resolution for a resolved Julia version.

Nightly builds live at fixed, predictable URLs; stable releases are looked up
in the version catalog by host os/arch.
"""

import logging
from typing import Optional

from juliakit.core.exceptions import NoMatchingBinariesError, UnsupportedPlatformError
from juliakit.core.platform import HostPlatform
from juliakit.toolchain.catalog import FileEntry, Release, VersionCatalog
from juliakit.toolchain.resolver import NIGHTLY

logger = logging.getLogger(__name__)

NIGHTLY_BASE_URL = "https://julialangnightlies-s3.julialang.org/bin"

# File format each platform's installer consumes
INSTALLER_EXTENSIONS = {
    "win32": "exe",
    "darwin": "dmg",
    "linux": "tar.gz",
}


def get_nightly_file_name(host: HostPlatform) -> str:
    """
    File name of the latest nightly build for host.

    Raises:
        UnsupportedPlatformError: For 32-bit macOS or an unknown OS

    Example:
        >>> get_nightly_file_name(HostPlatform("linux", "x64"))
        'julia-latest-linux64.tar.gz'
    """
    if host.os == "win32":
        version_ext = "-win64" if host.arch == "x64" else "-win32"
        ext = "exe"
    elif host.os == "darwin":
        if host.arch == "x86":
            raise UnsupportedPlatformError("32-bit Julia is not available on macOS")
        version_ext = "-mac64"
        ext = "dmg"
    elif host.os == "linux":
        version_ext = "-linux64" if host.arch == "x64" else "-linux32"
        ext = "tar.gz"
    else:
        raise UnsupportedPlatformError(f"Platform {host.os} is not supported")

    return f"julia-latest{version_ext}.{ext}"


def get_nightly_url(host: HostPlatform, base_url: str = NIGHTLY_BASE_URL) -> str:
    """Full URL of the latest nightly build for host."""
    file_name = get_nightly_file_name(host)
    return f"{base_url.rstrip('/')}/{host.catalog_os}/{host.arch}/{file_name}"


def find_file(
    release: Release,
    catalog_os: str,
    catalog_arch: str,
    extension: Optional[str] = None,
) -> Optional[FileEntry]:
    """
    First file of release published for catalog_os/catalog_arch.

    Entries that declare an extension must also match extension (when
    given); entries without one match on os/arch alone.

    Returns:
        The matching FileEntry, or None
    """
    for entry in release.files:
        if entry.os != catalog_os or entry.arch != catalog_arch:
            continue
        if extension and entry.extension and entry.extension != extension:
            continue
        return entry
    return None


def get_download_url(
    catalog: VersionCatalog,
    version: str,
    host: HostPlatform,
    nightly_base_url: str = NIGHTLY_BASE_URL,
) -> str:
    """
    Download URL for version on host.

    Args:
        catalog: Loaded version catalog
        version: Resolved version or 'nightly'
        host: Host platform
        nightly_base_url: Root of the nightly build bucket

    Returns:
        Download URL

    Raises:
        NoMatchingBinariesError: If the release or a matching file is missing
        UnsupportedPlatformError: For platforms without nightly builds
        PlatformTranslationError: If host os/arch has no catalog name

    Example:
        >>> get_download_url(catalog, "nightly", HostPlatform("win32", "x64"))
        'https://julialangnightlies-s3.julialang.org/bin/winnt/x64/julia-latest-win64.exe'
    """
    if version == NIGHTLY:
        return get_nightly_url(host, nightly_base_url)

    catalog_os = host.catalog_os
    catalog_arch = host.catalog_arch

    release = catalog.get_release(version)
    if release is None:
        logger.debug(f"Version {version} is not in the catalog")
        raise NoMatchingBinariesError(catalog_arch, version)

    entry = find_file(
        release, catalog_os, catalog_arch, INSTALLER_EXTENSIONS.get(host.os)
    )
    if entry is None:
        raise NoMatchingBinariesError(catalog_arch, version)

    return entry.url
