"""
Core functionality for juliakit.

This package contains the foundational modules that other components depend on.
"""

from .directory import (
    get_home_dir,
    get_global_cache_dir,
    DirectoryError,
)

from .platform import (
    HostPlatform,
    detect_platform,
    clear_platform_cache,
    to_catalog_os,
    to_catalog_arch,
)

from .process import ProcessRunner

from .tool_cache import ToolCache

from .exceptions import (
    JuliaKitError,
    ConfigError,
    CatalogError,
    CatalogFetchError,
    CatalogFormatError,
    NoMatchingVersionError,
    InvalidVersionError,
    NoMatchingBinariesError,
    UnsupportedPlatformError,
    PlatformTranslationError,
    DownloadError,
    ToolCacheError,
    CacheLockTimeout,
    InstallError,
    ProcessExecutionError,
    ArchiveExtractionError,
    InsecureArchiveError,
)

__all__ = [
    "get_home_dir",
    "get_global_cache_dir",
    "DirectoryError",
    "HostPlatform",
    "detect_platform",
    "clear_platform_cache",
    "to_catalog_os",
    "to_catalog_arch",
    "ProcessRunner",
    "ToolCache",
    "JuliaKitError",
    "ConfigError",
    "CatalogError",
    "CatalogFetchError",
    "CatalogFormatError",
    "NoMatchingVersionError",
    "InvalidVersionError",
    "NoMatchingBinariesError",
    "UnsupportedPlatformError",
    "PlatformTranslationError",
    "DownloadError",
    "ToolCacheError",
    "CacheLockTimeout",
    "InstallError",
    "ProcessExecutionError",
    "ArchiveExtractionError",
    "InsecureArchiveError",
]
