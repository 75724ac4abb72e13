"""
Julia version resolution, asset lookup and installation.
"""

from .catalog import (
    FileEntry,
    Release,
    VersionCatalog,
    CatalogLoader,
    parse_catalog,
    get_julia_versions,
)
from .resolver import (
    NIGHTLY,
    is_exact_version,
    resolve_version,
)
from .locator import (
    find_file,
    get_download_url,
    get_nightly_file_name,
)
from .installer import (
    JuliaInstaller,
    uses_modern_windows_installer,
)
from .downloader import (
    JuliaDownloader,
    SetupResult,
)

__all__ = [
    "FileEntry",
    "Release",
    "VersionCatalog",
    "CatalogLoader",
    "parse_catalog",
    "get_julia_versions",
    "NIGHTLY",
    "is_exact_version",
    "resolve_version",
    "find_file",
    "get_download_url",
    "get_nightly_file_name",
    "JuliaInstaller",
    "uses_modern_windows_installer",
    "JuliaDownloader",
    "SetupResult",
]
