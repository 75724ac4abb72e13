"""
Versions command implementation.

Lists the Julia versions published in the version catalog.
"""

from juliakit.cli.utils import get_config, get_downloader
from juliakit.toolchain.catalog import get_julia_versions
from juliakit.toolchain.resolver import sort_versions


def run(args) -> int:
    """
    Run the versions command.

    Args:
        args: Parsed command-line arguments with:
            - stable_only: Hide prereleases and unstable releases

    Returns:
        Exit code (0 for success)
    """
    config = get_config(args)
    catalog = get_downloader(config).catalog

    versions = get_julia_versions(catalog)
    if args.stable_only:
        versions = [
            v for v in versions if catalog.get_release(v).stable and "-" not in v
        ]

    for version in sort_versions(versions):
        print(version)
    return 0
