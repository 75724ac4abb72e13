"""
juliakit - resolve, download and install Julia.

Resolves a version constraint (exact version, semantic-version range or
'nightly') against the published Julia version catalog, picks the release
file for the host platform and installs it.

Example:
    >>> from juliakit import JuliaDownloader, detect_platform
    >>> result = JuliaDownloader().setup("^1.6", detect_platform())
    >>> print(result.install_path)
"""

__version__ = "0.1.0"

from juliakit.core.platform import HostPlatform, detect_platform
from juliakit.toolchain.downloader import JuliaDownloader, SetupResult
from juliakit.toolchain.resolver import resolve_version
from juliakit.toolchain.locator import get_download_url

__all__ = [
    "__version__",
    "HostPlatform",
    "detect_platform",
    "JuliaDownloader",
    "SetupResult",
    "resolve_version",
    "get_download_url",
]
