"""
Install command implementation.

Resolves a Julia version, downloads it and installs it.
"""

import logging

from juliakit.cli.utils import (
    export_github_outputs,
    get_config,
    get_downloader,
    get_host,
)
from juliakit.core.download import DownloadProgress

logger = logging.getLogger(__name__)


def _log_progress(progress: DownloadProgress):
    logger.debug(f"  {progress}")


def run(args) -> int:
    """
    Run the install command.

    Args:
        args: Parsed command-line arguments with:
            - julia_version: Version constraint override
            - arch: Architecture override
            - no_github_env: Skip GitHub Actions outputs

    Returns:
        Exit code (0 for success)
    """
    config = get_config(args)
    host = get_host(config)
    downloader = get_downloader(config)

    result = downloader.setup(config.version, host, progress_callback=_log_progress)

    if not args.no_github_env and export_github_outputs(
        result.version, result.install_path
    ):
        logger.info("Exported Julia path to the GitHub Actions job")

    logger.info(
        f"Installed Julia {result.version} in {result.elapsed_seconds:.1f}s"
    )
    print(result.install_path)
    return 0
