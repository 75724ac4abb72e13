"""
On-disk tool cache.

Provides the three collaborators the setup pipeline is written against:

- download_tool(url) -> path of a freshly downloaded file
- find(tool, version) -> cached directory, or None
- cache_file(source, target_name, tool, version) -> cached directory

Layout under the cache root::

    tools/<tool>/<version>/<file>
    tools/<tool>/<version>.complete     # written last, marks a usable entry
    downloads/<random>/<url basename>   # removed once consumed
    lock/<tool>.lock

Entries never expire.
"""

import logging
import shutil
import uuid
from contextlib import contextmanager
from pathlib import Path
from typing import Callable, Optional
from urllib.parse import unquote, urlparse

from filelock import FileLock, Timeout

from juliakit.core.directory import get_global_cache_dir
from juliakit.core.download import DownloadProgress, download_file
from juliakit.core.exceptions import CacheLockTimeout, DownloadError
from juliakit.core.filesystem import atomic_copy

logger = logging.getLogger(__name__)


class ToolCache:
    """
    Tool cache rooted at a directory (default: the global juliakit cache).

    Example:
        >>> cache = ToolCache()
        >>> cached = cache.find("julia-versions", "latest")
        >>> if cached is None:
        ...     path = cache.download_tool("https://julialang-s3.julialang.org/bin/versions.json")
        ...     cached = cache.cache_file(path, "versions.json", "julia-versions", "latest")
    """

    def __init__(
        self,
        cache_dir: Optional[Path] = None,
        timeout: Optional[float] = None,
        lock_timeout: int = 30,
    ):
        """
        Initialize tool cache.

        Args:
            cache_dir: Cache root. If None, uses the global cache.
            timeout: HTTP timeout for download_tool (None waits indefinitely)
            lock_timeout: Seconds to wait for the cache write lock
        """
        self.cache_dir = get_global_cache_dir(cache_dir)
        self.tools_dir = self.cache_dir / "tools"
        self.downloads_dir = self.cache_dir / "downloads"
        self.lock_dir = self.cache_dir / "lock"
        self.timeout = timeout
        self.lock_timeout = lock_timeout

        logger.debug(f"Initialized tool cache at {self.cache_dir}")

    def _entry_dir(self, tool: str, version: str) -> Path:
        if not tool:
            raise ValueError("Tool name cannot be empty")
        if not version:
            raise ValueError("Tool version cannot be empty")
        return self.tools_dir / tool / version

    @staticmethod
    def _marker(entry_dir: Path) -> Path:
        return entry_dir.parent / f"{entry_dir.name}.complete"

    @contextmanager
    def _lock(self, tool: str):
        """
        Exclusive lock for writes to one tool's entries.

        Raises:
            CacheLockTimeout: If lock cannot be acquired within timeout
        """
        self.lock_dir.mkdir(parents=True, exist_ok=True)
        lock = FileLock(self.lock_dir / f"{tool}.lock", timeout=self.lock_timeout)

        try:
            with lock:
                yield
        except Timeout as e:
            raise CacheLockTimeout(
                f"Could not acquire tool cache lock for {tool} "
                f"within {self.lock_timeout} seconds"
            ) from e

    def find(self, tool: str, version: str) -> Optional[Path]:
        """
        Look up a cached tool entry.

        Args:
            tool: Cache key (e.g. 'julia-versions')
            version: Entry version (e.g. 'latest')

        Returns:
            Directory holding the cached files, or None if absent/incomplete
        """
        entry_dir = self._entry_dir(tool, version)
        if entry_dir.is_dir() and self._marker(entry_dir).exists():
            logger.debug(f"Found in cache: {tool} {version}")
            return entry_dir

        logger.debug(f"Not in cache: {tool} {version}")
        return None

    def cache_file(
        self, source: Path, target_name: str, tool: str, version: str
    ) -> Path:
        """
        Copy a file into the cache under tool/version.

        Args:
            source: File to cache
            target_name: File name inside the cache entry
            tool: Cache key
            version: Entry version

        Returns:
            The cache entry directory
        """
        source = Path(source)
        if not source.is_file():
            raise FileNotFoundError(f"File to cache not found: {source}")

        entry_dir = self._entry_dir(tool, version)

        with self._lock(tool):
            entry_dir.mkdir(parents=True, exist_ok=True)
            atomic_copy(source, entry_dir / target_name)
            self._marker(entry_dir).touch()

        logger.debug(f"Cached {source} as {tool}/{version}/{target_name}")
        return entry_dir

    def download_tool(
        self,
        url: str,
        progress_callback: Optional[Callable[[DownloadProgress], None]] = None,
    ) -> Path:
        """
        Download url into a fresh directory under downloads/.

        The file keeps the URL's base name so installers see the right
        extension.

        Returns:
            Path to the downloaded file

        Raises:
            DownloadError: If the download fails
        """
        file_name = unquote(Path(urlparse(url).path).name) or "download"
        destination = self.downloads_dir / uuid.uuid4().hex / file_name

        try:
            return download_file(
                url,
                destination,
                progress_callback=progress_callback,
                timeout=self.timeout,
            )
        except DownloadError:
            shutil.rmtree(destination.parent, ignore_errors=True)
            raise

    def remove_download(self, path: Path) -> None:
        """
        Delete a file returned by download_tool along with its directory.

        Paths outside downloads/ are left alone.
        """
        download_dir = Path(path).parent
        if download_dir.parent != self.downloads_dir:
            logger.debug(f"Not a tool cache download, keeping: {path}")
            return

        shutil.rmtree(download_dir, ignore_errors=True)
        logger.debug(f"Removed download {download_dir}")
