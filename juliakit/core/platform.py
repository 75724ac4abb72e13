"""
Host platform detection and catalog name translation.

The host is described with the names used by the user-facing inputs
('win32', 'darwin', 'linux' and 'x64', 'x86'). The Julia version catalog
uses its own vocabulary ('winnt', 'mac', 'linux' and 'x86_64', 'i686'), so
every lookup goes through the fixed translation tables below.

Usage:
    from juliakit.core.platform import detect_platform

    host = detect_platform()
    print(f"OS: {host.os} ({host.catalog_os})")
    print(f"Architecture: {host.arch} ({host.catalog_arch})")
"""

import functools
import platform
import sys
from dataclasses import dataclass, replace
from typing import Optional

from juliakit.core.exceptions import PlatformTranslationError

# Translations between host names and Julia catalog names
OS_MAP = {
    "win32": "winnt",
    "darwin": "mac",
    "linux": "linux",
}

ARCH_MAP = {
    "x86": "i686",
    "x64": "x86_64",
}


@dataclass(frozen=True)
class HostPlatform:
    """
    Host operating system family and CPU architecture.

    Attributes:
        os: Host OS ('win32', 'darwin', 'linux')
        arch: Host architecture ('x64', 'x86')
    """

    os: str
    arch: str

    @property
    def catalog_os(self) -> str:
        """OS name as spelled in the version catalog."""
        return to_catalog_os(self.os)

    @property
    def catalog_arch(self) -> str:
        """Architecture name as spelled in the version catalog."""
        return to_catalog_arch(self.arch)

    def with_arch(self, arch: Optional[str]) -> "HostPlatform":
        """Return a copy with the architecture replaced (None keeps it)."""
        if not arch:
            return self
        return replace(self, arch=arch)

    def __str__(self) -> str:
        return f"{self.os}-{self.arch}"


def to_catalog_os(os_name: str) -> str:
    """
    Translate a host OS name into the catalog vocabulary.

    Raises:
        PlatformTranslationError: If the OS has no catalog equivalent
    """
    try:
        return OS_MAP[os_name]
    except KeyError:
        raise PlatformTranslationError(
            f"Platform {os_name} is not supported. "
            f"Supported: {', '.join(sorted(OS_MAP))}"
        ) from None


def to_catalog_arch(arch: str) -> str:
    """
    Translate a host architecture into the catalog vocabulary.

    Raises:
        PlatformTranslationError: If the architecture has no catalog equivalent
    """
    try:
        return ARCH_MAP[arch]
    except KeyError:
        raise PlatformTranslationError(
            f"Architecture {arch} is not supported. "
            f"Supported: {', '.join(sorted(ARCH_MAP))}"
        ) from None


@functools.lru_cache(maxsize=1)
def detect_platform() -> HostPlatform:
    """
    Detect the host platform.

    This function is cached - it only runs detection once per process.
    The result is meant to be passed explicitly to resolution code.

    Returns:
        HostPlatform for the running interpreter
    """
    return HostPlatform(os=_detect_os(), arch=_detect_architecture())


def _detect_os() -> str:
    """
    Detect operating system.

    Returns:
        'win32', 'darwin', 'linux', or sys.platform for anything else
    """
    system = platform.system().lower()

    if system == "windows":
        return "win32"
    elif system == "darwin":
        return "darwin"
    elif system == "linux":
        return "linux"
    else:
        # Left for the translation tables to reject
        return sys.platform


def _detect_architecture() -> str:
    """
    Detect CPU architecture.

    Returns:
        'x64', 'x86', or the lowercased machine name
    """
    machine = platform.machine().lower()

    if machine in ("x86_64", "amd64", "x64"):
        return "x64"
    elif machine in ("i386", "i686", "x86"):
        return "x86"
    else:
        return machine


def clear_platform_cache():
    """
    Clear the platform detection cache.

    Forces the next call to detect_platform() to re-detect.
    """
    detect_platform.cache_clear()


__all__ = [
    "OS_MAP",
    "ARCH_MAP",
    "HostPlatform",
    "to_catalog_os",
    "to_catalog_arch",
    "detect_platform",
    "clear_platform_cache",
]
