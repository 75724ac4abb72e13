"""
Julia installation per host OS.

- linux: extract the tarball into ~/julia, dropping its top-level directory
- win32: run the installer silently into C:\\Julia
- darwin: mount the disk image and copy the Julia tree into ~/julia

Nothing is rolled back if a step fails.
"""

import logging
import shlex
from pathlib import Path, PurePath, PureWindowsPath
from typing import Optional

import semantic_version

from juliakit.core.directory import get_home_dir
from juliakit.core.exceptions import UnsupportedPlatformError
from juliakit.core.filesystem import extract_tarball
from juliakit.core.platform import HostPlatform
from juliakit.core.process import ProcessRunner
from juliakit.toolchain.resolver import NIGHTLY

logger = logging.getLogger(__name__)

WINDOWS_INSTALL_DIR = PureWindowsPath("C:/Julia")

# The installer changed in 1.4 (Inno Setup replaced NSIS); this is the
# lowest 1.4 version, prereleases included.
MODERN_INSTALLER_SINCE = semantic_version.Version("1.4.0-0")


def uses_modern_windows_installer(version: str) -> bool:
    """
    True if the Windows installer for version takes '/SILENT /dir=' arguments.

    Nightlies and everything newer than the 1.3 series do; older releases
    take the legacy '/S /D=' form.
    """
    if version == NIGHTLY:
        return True
    return semantic_version.Version(version) >= MODERN_INSTALLER_SINCE


class JuliaInstaller:
    """
    Installs a downloaded Julia artifact.

    Example:
        >>> installer = JuliaInstaller()
        >>> installer.install(Path("/tmp/julia-1.6.7-linux-x86_64.tar.gz"),
        ...                   HostPlatform("linux", "x64"), "1.6.7")
        PosixPath('/home/user/julia')
    """

    def __init__(
        self,
        runner: Optional[ProcessRunner] = None,
        home_dir: Optional[Path] = None,
    ):
        """
        Args:
            runner: Runs external commands. If None, creates a new one.
            home_dir: Install root for linux/macOS. If None, uses $HOME.
        """
        self.runner = runner or ProcessRunner()
        self._home_dir = home_dir

    @property
    def home_dir(self) -> Path:
        return self._home_dir or get_home_dir()

    def install(
        self, artifact_path: Path, host: HostPlatform, version: str
    ) -> PurePath:
        """
        Install artifact_path and return the installation directory.

        Raises:
            UnsupportedPlatformError: If host.os has no install procedure
            ProcessExecutionError: If an install command fails
            ArchiveExtractionError: If the tarball cannot be extracted
        """
        if host.os == "linux":
            return self._install_linux(Path(artifact_path))
        elif host.os == "win32":
            return self._install_windows(artifact_path, version)
        elif host.os == "darwin":
            return self._install_macos(artifact_path)
        else:
            raise UnsupportedPlatformError(f"Platform {host.os} is not supported")

    def _install_linux(self, artifact_path: Path) -> Path:
        install_dir = self.home_dir / "julia"
        install_dir.mkdir(parents=True, exist_ok=True)

        logger.info(f"Extracting {artifact_path} to {install_dir}")
        extract_tarball(artifact_path, install_dir, strip_components=1)
        return install_dir

    def _install_windows(self, artifact_path: Path, version: str) -> PureWindowsPath:
        install_dir = WINDOWS_INSTALL_DIR

        if uses_modern_windows_installer(version):
            installer_args = f"/SILENT /dir={install_dir}"
        else:
            installer_args = f"/S /D={install_dir}"

        self.runner.exec(
            "powershell",
            [
                "-Command",
                f'Start-Process -FilePath "{artifact_path}" '
                f'-ArgumentList "{installer_args}" '
                "-NoNewWindow -Wait",
            ],
        )
        return install_dir

    def _install_macos(self, artifact_path: Path) -> Path:
        home = self.home_dir
        install_dir = home / "julia"

        self.runner.exec("hdiutil", ["attach", str(artifact_path)])
        install_dir.mkdir(parents=True, exist_ok=True)
        self.runner.exec(
            "/bin/bash",
            [
                "-c",
                "cp -a /Volumes/Julia-*/Julia-*.app/Contents/Resources/julia "
                + shlex.quote(str(home)),
            ],
        )
        return install_dir
