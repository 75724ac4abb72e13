"""
Julia setup pipeline.

Runs the strictly sequential resolve-then-install workflow:

1. Load the version catalog (tool cache, fetched once)
2. Resolve the version constraint
3. Locate the download URL for the host
4. Download the artifact
5. Install it and remove the downloaded artifact

Every step blocks until it finishes and any error aborts the pipeline.
"""

import logging
import time
from dataclasses import dataclass
from pathlib import Path, PurePath
from typing import TYPE_CHECKING, Callable, Optional

from juliakit.core.download import DownloadProgress
from juliakit.core.platform import HostPlatform
from juliakit.core.process import ProcessRunner
from juliakit.core.tool_cache import ToolCache
from juliakit.toolchain.catalog import VERSIONS_URL, CatalogLoader, VersionCatalog
from juliakit.toolchain.installer import JuliaInstaller
from juliakit.toolchain.locator import NIGHTLY_BASE_URL, get_download_url
from juliakit.toolchain.resolver import resolve_version

if TYPE_CHECKING:
    from juliakit.config.parser import JuliaKitConfig

logger = logging.getLogger(__name__)


@dataclass
class SetupResult:
    """Result of a Julia setup."""

    version: str
    """Resolved version or 'nightly'"""

    download_url: str
    """URL the artifact was downloaded from"""

    artifact_path: Path
    """Downloaded artifact (removed once installed)"""

    install_path: PurePath
    """Installation directory"""

    elapsed_seconds: float
    """Wall time of download and install"""


class JuliaDownloader:
    """
    Resolves, downloads and installs Julia.

    Example:
        >>> downloader = JuliaDownloader()
        >>> result = downloader.setup("^1.6", detect_platform())
        >>> print(f"Installed at: {result.install_path}")
    """

    def __init__(
        self,
        tool_cache: Optional[ToolCache] = None,
        runner: Optional[ProcessRunner] = None,
        home_dir: Optional[Path] = None,
        versions_url: str = VERSIONS_URL,
        nightly_url: str = NIGHTLY_BASE_URL,
    ):
        """
        Initialize downloader.

        Args:
            tool_cache: Tool cache. If None, uses the global cache.
            runner: Runs install commands. If None, creates a new one.
            home_dir: Install root for linux/macOS. If None, uses $HOME.
            versions_url: Location of versions.json
            nightly_url: Root of the nightly build bucket
        """
        self.tool_cache = tool_cache or ToolCache()
        self.installer = JuliaInstaller(runner=runner, home_dir=home_dir)
        self.catalog_loader = CatalogLoader(self.tool_cache, versions_url)
        self.nightly_url = nightly_url
        self._catalog: Optional[VersionCatalog] = None

    @classmethod
    def from_config(
        cls, config: "JuliaKitConfig", runner: Optional[ProcessRunner] = None
    ) -> "JuliaDownloader":
        """Create a downloader from the effective configuration."""
        return cls(
            tool_cache=ToolCache(config.cache_path, timeout=config.timeout),
            runner=runner,
            versions_url=config.versions_url,
            nightly_url=config.nightly_url,
        )

    @property
    def catalog(self) -> VersionCatalog:
        """The version catalog, loaded on first access."""
        if self._catalog is None:
            self._catalog = self.catalog_loader.load()
        return self._catalog

    def resolve(self, constraint: str) -> str:
        """Resolve constraint against the catalog."""
        version = resolve_version(self.catalog.versions(), constraint)
        logger.info(f"Resolved Julia version {constraint} -> {version}")
        return version

    def locate(self, version: str, host: HostPlatform) -> str:
        """Download URL of a resolved version for host."""
        return get_download_url(self.catalog, version, host, self.nightly_url)

    def setup(
        self,
        constraint: str,
        host: HostPlatform,
        progress_callback: Optional[Callable[[DownloadProgress], None]] = None,
    ) -> SetupResult:
        """
        Resolve, download and install Julia for host.

        Args:
            constraint: Exact version, range or 'nightly'
            host: Host platform (os and requested architecture)
            progress_callback: Optional download progress callback

        Returns:
            SetupResult with installation details

        Raises:
            JuliaKitError: Any failure along the pipeline
        """
        start = time.time()

        version = self.resolve(constraint)
        download_url = self.locate(version, host)

        logger.info(f"Downloading Julia from {download_url}")
        artifact_path = self.tool_cache.download_tool(download_url, progress_callback)

        logger.info(f"Installing Julia {version} for {host}")
        try:
            install_path = self.installer.install(artifact_path, host, version)
        finally:
            self.tool_cache.remove_download(artifact_path)
        logger.info(f"Julia installed at {install_path}")

        return SetupResult(
            version=version,
            download_url=download_url,
            artifact_path=artifact_path,
            install_path=install_path,
            elapsed_seconds=time.time() - start,
        )
