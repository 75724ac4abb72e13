"""
Shared utilities for CLI commands.
"""

import logging
import os
from pathlib import PurePath

from juliakit.config.parser import JuliaKitConfig, load_config
from juliakit.core.platform import HostPlatform, detect_platform
from juliakit.toolchain.downloader import JuliaDownloader

logger = logging.getLogger(__name__)


def get_config(args) -> JuliaKitConfig:
    """
    Effective configuration for a command: config file plus CLI overrides.

    Args:
        args: Parsed arguments (config, and optionally julia_version/arch)
    """
    overrides = {
        "version": getattr(args, "julia_version", None),
        "arch": getattr(args, "arch", None),
    }
    return load_config(getattr(args, "config", None), overrides)


def get_host(config: JuliaKitConfig) -> HostPlatform:
    """Host platform with the configured architecture applied."""
    host = detect_platform().with_arch(config.arch)
    logger.debug(f"Host platform: {host}")
    return host


def get_downloader(config: JuliaKitConfig) -> JuliaDownloader:
    """Downloader wired to the configured cache and URLs."""
    return JuliaDownloader.from_config(config)


# ============================================================================
# GitHub Actions Integration
# ============================================================================


def _append_line(file_path: str, line: str):
    with open(file_path, "a", encoding="utf-8") as f:
        f.write(f"{line}\n")


def export_github_outputs(version: str, install_path: PurePath) -> bool:
    """
    Publish the installation to the running GitHub Actions job.

    Writes the julia-version and julia-path step outputs to $GITHUB_OUTPUT
    and adds the bin directory to $GITHUB_PATH. Does nothing outside
    GitHub Actions.

    Returns:
        True if anything was written
    """
    output_file = os.environ.get("GITHUB_OUTPUT")
    path_file = os.environ.get("GITHUB_PATH")

    if output_file:
        _append_line(output_file, f"julia-version={version}")
        _append_line(output_file, f"julia-path={install_path}")
        logger.debug(f"Wrote step outputs to {output_file}")

    if path_file:
        bin_dir = install_path / "bin"
        _append_line(path_file, str(bin_dir))
        logger.debug(f"Added {bin_dir} to {path_file}")

    return bool(output_file or path_file)

