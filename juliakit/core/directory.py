"""
Directory locations used by juliakit.

Directory Structure:
    Global Cache (~/.juliakit/ or %USERPROFILE%\\.juliakit\\):
        - tools/      : Tool cache entries (<tool>/<version>/ + .complete marker)
        - downloads/  : Downloaded release artifacts
        - lock/       : Lock files guarding tool cache writes

The cache root can be moved with the JULIAKIT_CACHE_DIR environment variable.
"""

import os
from pathlib import Path
from typing import Optional

from juliakit.core.exceptions import JuliaKitError

CACHE_DIR_ENV = "JULIAKIT_CACHE_DIR"


class DirectoryError(JuliaKitError):
    """Base exception for directory-related errors."""

    pass


def get_home_dir() -> Path:
    """
    Get the user-writable home directory.

    Returns:
        Path: %USERPROFILE% on Windows, $HOME elsewhere

    Raises:
        DirectoryError: If the home directory cannot be determined
    """
    if os.name == "nt":  # Windows
        user_profile = os.environ.get("USERPROFILE")
        if not user_profile:
            raise DirectoryError(
                "USERPROFILE environment variable is not set. "
                "Cannot determine home directory."
            )
        return Path(user_profile)

    home = os.environ.get("HOME")
    if home:
        return Path(home)
    return Path.home()


def get_global_cache_dir(override: Optional[Path] = None) -> Path:
    """
    Get the global cache directory path.

    Args:
        override: Explicit directory (e.g. from configuration); wins over
                  the environment and the default.

    Returns:
        Path: override, $JULIAKIT_CACHE_DIR, or <home>/.juliakit

    Example:
        >>> cache_dir = get_global_cache_dir()
        >>> print(cache_dir)
        /home/user/.juliakit  # on Linux
    """
    if override:
        return Path(override)

    env_dir = os.environ.get(CACHE_DIR_ENV)
    if env_dir:
        return Path(env_dir)

    return get_home_dir() / ".juliakit"
