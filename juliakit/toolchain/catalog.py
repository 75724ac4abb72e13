"""
Julia version catalog.

The catalog is the published versions.json document mapping each Julia
version to its release files. It is fetched once, kept in the tool cache
under julia-versions/latest with no expiry, and validated into frozen
dataclasses so a malformed document fails at load time rather than during
lookup.
"""

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional, Tuple

from juliakit.core.exceptions import CatalogFetchError, CatalogFormatError, DownloadError
from juliakit.core.tool_cache import ToolCache

logger = logging.getLogger(__name__)

VERSIONS_URL = "https://julialang-s3.julialang.org/bin/versions.json"
CATALOG_CACHE_KEY = "julia-versions"
CATALOG_CACHE_VERSION = "latest"
CATALOG_FILE_NAME = "versions.json"


@dataclass(frozen=True)
class FileEntry:
    """One downloadable file of a release."""

    os: str
    """Catalog OS name ('winnt', 'mac', 'linux', ...)"""

    arch: str
    """Catalog architecture name ('x86_64', 'i686', 'aarch64', ...)"""

    url: str
    """Download URL"""

    kind: Optional[str] = None
    """'archive' or 'installer' when published"""

    extension: Optional[str] = None
    """File extension without leading dot ('tar.gz', 'dmg', 'exe', 'zip')"""

    triplet: Optional[str] = None
    sha256: Optional[str] = None
    size: Optional[int] = None
    version: Optional[str] = None


@dataclass(frozen=True)
class Release:
    """Release record: the files published for one version."""

    files: Tuple[FileEntry, ...] = ()
    stable: bool = True


@dataclass(frozen=True)
class VersionCatalog:
    """
    Mapping of version key to Release.

    Keys are kept as published; they may or may not carry a 'v' prefix and
    are not sorted.
    """

    releases: Mapping[str, Release] = field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(self, "releases", MappingProxyType(dict(self.releases)))

    def versions(self) -> List[str]:
        """All version keys as published."""
        return list(self.releases.keys())

    def get_release(self, version: str) -> Optional[Release]:
        """
        Look up a release by version, accepting a 'v' prefixed key.

        Returns:
            Release if present, None otherwise
        """
        release = self.releases.get(version)
        if release is None and not version.startswith("v"):
            release = self.releases.get(f"v{version}")
        return release

    def __contains__(self, version: object) -> bool:
        return isinstance(version, str) and self.get_release(version) is not None

    def __len__(self) -> int:
        return len(self.releases)

    @classmethod
    def from_dict(cls, data: Any) -> "VersionCatalog":
        """
        Build a catalog from parsed versions.json content.

        Raises:
            CatalogFormatError: If the document does not have the catalog shape
        """
        if not isinstance(data, dict):
            raise CatalogFormatError(
                f"Invalid catalog: expected an object, got {type(data).__name__}"
            )

        releases = {}
        for version, release_data in data.items():
            releases[version] = _parse_release(version, release_data)

        return cls(releases=releases)


def _parse_release(version: str, data: Any) -> Release:
    if not isinstance(data, dict):
        raise CatalogFormatError(f"Invalid release {version}: expected an object")

    files = data.get("files")
    if not isinstance(files, list):
        raise CatalogFormatError(f"Invalid release {version}: missing 'files' list")

    stable = data.get("stable", True)
    if not isinstance(stable, bool):
        raise CatalogFormatError(f"Invalid release {version}: 'stable' must be a boolean")

    return Release(
        files=tuple(_parse_file(version, i, item) for i, item in enumerate(files)),
        stable=stable,
    )


def _parse_file(version: str, index: int, data: Any) -> FileEntry:
    where = f"release {version} file #{index}"
    if not isinstance(data, dict):
        raise CatalogFormatError(f"Invalid {where}: expected an object")

    for key in ("os", "arch", "url"):
        value = data.get(key)
        if not isinstance(value, str) or not value:
            raise CatalogFormatError(f"Invalid {where}: '{key}' must be a non-empty string")

    size = data.get("size")
    if size is not None and not isinstance(size, int):
        raise CatalogFormatError(f"Invalid {where}: 'size' must be an integer")

    return FileEntry(
        os=data["os"],
        arch=data["arch"],
        url=data["url"],
        kind=_optional_str(data, "kind", where),
        extension=_optional_str(data, "extension", where),
        triplet=_optional_str(data, "triplet", where),
        sha256=_optional_str(data, "sha256", where),
        size=size,
        version=_optional_str(data, "version", where),
    )


def _optional_str(data: Dict[str, Any], key: str, where: str) -> Optional[str]:
    value = data.get(key)
    if value is not None and not isinstance(value, str):
        raise CatalogFormatError(f"Invalid {where}: '{key}' must be a string")
    return value


def parse_catalog(content: bytes) -> VersionCatalog:
    """
    Parse versions.json bytes into a VersionCatalog.

    Raises:
        CatalogFormatError: If content is not JSON or not a catalog
    """
    try:
        data = json.loads(content)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise CatalogFormatError(f"Invalid JSON in version catalog: {e}") from e

    return VersionCatalog.from_dict(data)


class CatalogLoader:
    """
    Loads the version catalog through the tool cache.

    Example:
        >>> loader = CatalogLoader(ToolCache())
        >>> catalog = loader.load()
        >>> "1.6.7" in catalog
        True
    """

    def __init__(self, tool_cache: ToolCache, url: str = VERSIONS_URL):
        self.tool_cache = tool_cache
        self.url = url

    def load(self) -> VersionCatalog:
        """
        Return the catalog, downloading and caching it on first use.

        Raises:
            CatalogFetchError: If the catalog cannot be downloaded or read
            CatalogFormatError: If the catalog is malformed
        """
        cached_dir = self.tool_cache.find(CATALOG_CACHE_KEY, CATALOG_CACHE_VERSION)

        if cached_dir is None:
            logger.info(f"Fetching Julia version catalog from {self.url}")
            try:
                downloaded = self.tool_cache.download_tool(self.url)
            except DownloadError as e:
                raise CatalogFetchError(
                    f"Failed to fetch version catalog from {self.url}: {e}"
                ) from e
            try:
                cached_dir = self.tool_cache.cache_file(
                    downloaded, CATALOG_FILE_NAME, CATALOG_CACHE_KEY, CATALOG_CACHE_VERSION
                )
            finally:
                self.tool_cache.remove_download(downloaded)
        else:
            logger.debug(f"Using cached version catalog: {cached_dir}")

        catalog_file = Path(cached_dir) / CATALOG_FILE_NAME
        try:
            content = catalog_file.read_bytes()
        except OSError as e:
            raise CatalogFetchError(
                f"Cached version catalog is unreadable: {catalog_file}: {e}"
            ) from e

        catalog = parse_catalog(content)
        logger.debug(f"Loaded catalog with {len(catalog)} versions")
        return catalog


def get_julia_versions(catalog: VersionCatalog) -> List[str]:
    """
    List every version available for download.

    Returns:
        Catalog keys, in catalog order
    """
    return catalog.versions()
