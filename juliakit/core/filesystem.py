"""
File system utilities for juliakit.

- Tarball extraction with leading path components stripped
- Member path validation against directory traversal
- Atomic file copies for the tool cache
"""

import os
import shutil
import sys
import tarfile
import tempfile
from pathlib import Path, PurePosixPath
from typing import Optional, Union

from juliakit.core.exceptions import ArchiveExtractionError, InsecureArchiveError


def is_relative_to(path: Path, parent: Path) -> bool:
    """
    Check if path is relative to parent.

    Args:
        path: Path to check
        parent: Potential parent path

    Returns:
        True if path is under parent (or equal to it)
    """
    try:
        path.relative_to(parent)
        return True
    except ValueError:
        return False


def _validate_archive_path(path: str, destination: Path) -> None:
    """
    Validate that an archive member path is safe to extract.

    Raises:
        InsecureArchiveError: If path attempts directory traversal
    """
    member_path = (destination / path).resolve()

    if not is_relative_to(member_path, destination.resolve()):
        raise InsecureArchiveError(
            f"Archive member '{path}' attempts directory traversal. "
            "This is a security risk and extraction has been blocked."
        )


def _strip_member_name(name: str, strip_components: int) -> Optional[str]:
    """Drop the first strip_components path parts; None if nothing is left."""
    parts = PurePosixPath(name).parts
    if parts and parts[0] == "/":
        parts = parts[1:]
    if len(parts) <= strip_components:
        return None
    return str(PurePosixPath(*parts[strip_components:]))


def extract_tarball(
    archive_path: Union[str, Path],
    destination: Union[str, Path],
    strip_components: int = 0,
) -> Path:
    """
    Extract a (possibly compressed) tar archive.

    Equivalent to ``tar xf ARCHIVE --strip-components=N -C DESTINATION``:
    the first strip_components parts of every member path are removed and
    members that vanish entirely (the stripped directories) are skipped.

    Args:
        archive_path: Path to the .tar/.tar.gz/.tar.xz/.tar.bz2 archive
        destination: Directory to extract into (must exist)
        strip_components: Number of leading path components to remove

    Returns:
        The destination directory

    Raises:
        ArchiveExtractionError: If the archive is missing or unreadable
        InsecureArchiveError: If a member escapes the destination

    Example:
        >>> extract_tarball('julia-1.6.7-linux-x86_64.tar.gz', '/home/user/julia', 1)
    """
    archive_path = Path(archive_path)
    destination = Path(destination)

    if not archive_path.exists():
        raise ArchiveExtractionError(f"Archive not found: {archive_path}")

    try:
        with tarfile.open(archive_path, "r:*") as tar:
            members = []
            for member in tar.getmembers():
                name = _strip_member_name(member.name, strip_components)
                if name is None:
                    continue
                _validate_archive_path(name, destination)
                if member.islnk():
                    linkname = _strip_member_name(member.linkname, strip_components)
                    if linkname is None:
                        continue
                    member.linkname = linkname
                member.name = name
                members.append(member)

            # Extract with filter for security (Python 3.12+)
            if sys.version_info >= (3, 12):
                tar.extractall(destination, members=members, filter="data")
            else:
                tar.extractall(destination, members=members)
    except InsecureArchiveError:
        raise
    except (tarfile.TarError, OSError) as e:
        raise ArchiveExtractionError(f"Failed to extract {archive_path}: {e}") from e

    return destination


def atomic_copy(source: Union[str, Path], target: Union[str, Path]) -> Path:
    """
    Copy a file so the target is never observed partially written.

    The data goes to a temp file in the target directory which is then
    renamed over the target.

    Args:
        source: File to copy
        target: Destination file path

    Returns:
        The target path
    """
    source = Path(source)
    target = Path(target)
    target.parent.mkdir(parents=True, exist_ok=True)

    temp_fd, temp_path_str = tempfile.mkstemp(
        dir=target.parent, prefix=f".{target.name}.", suffix=".tmp"
    )
    os.close(temp_fd)
    temp_path = Path(temp_path_str)

    try:
        shutil.copyfile(source, temp_path)
        temp_path.replace(target)
    except Exception:
        temp_path.unlink(missing_ok=True)
        raise

    return target
