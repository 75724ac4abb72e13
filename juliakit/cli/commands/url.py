"""
URL command implementation.

Prints the download URL of the resolved version for this platform.
"""

from juliakit.cli.utils import get_config, get_downloader, get_host


def run(args) -> int:
    """
    Run the url command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success)
    """
    config = get_config(args)
    host = get_host(config)
    downloader = get_downloader(config)

    version = downloader.resolve(config.version)
    print(downloader.locate(version, host))
    return 0
