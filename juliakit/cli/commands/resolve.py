"""
Resolve command implementation.

Prints the version a constraint resolves to without downloading anything.
"""

from juliakit.cli.utils import get_config, get_downloader


def run(args) -> int:
    """
    Run the resolve command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success)
    """
    config = get_config(args)
    downloader = get_downloader(config)

    print(downloader.resolve(config.version))
    return 0
