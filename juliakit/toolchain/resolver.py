"""
Version constraint resolution.

A constraint is one of:

- an exact semantic version ('1.6.7', '1.9.0-rc2'): returned unchanged,
  without checking the catalog. A version that does not exist fails later
  when its binaries are looked up.
- 'nightly': returned as-is.
- an npm-style range ('1', '^1.6', '~1.5.2', '1.x', '>=1.0 <1.5'):
  resolved to the highest catalog version satisfying it.
"""

import logging
import re
from typing import Iterable, List, Optional

import semantic_version

from juliakit.core.exceptions import InvalidVersionError, NoMatchingVersionError

logger = logging.getLogger(__name__)

NIGHTLY = "nightly"

_TAG_PREFIX = re.compile(r"^v")


def is_exact_version(constraint: str) -> bool:
    """True if constraint is a strict semantic version (no 'v', not a range)."""
    return semantic_version.validate(constraint)


def strip_tag_prefix(version: str) -> str:
    """Remove the leading 'v' of a tag-style version ('v1.3.0' -> '1.3.0')."""
    return _TAG_PREFIX.sub("", version)


def _parse_versions(available_releases: Iterable[str]) -> List[semantic_version.Version]:
    versions = []
    for key in available_releases:
        try:
            versions.append(semantic_version.Version(strip_tag_prefix(key)))
        except ValueError:
            logger.debug(f"Ignoring catalog key that is not a version: {key}")
    return versions


def max_satisfying(
    available_releases: Iterable[str], constraint: str
) -> Optional[str]:
    """
    Highest version in available_releases satisfying the range constraint.

    Returns:
        Matching version without tag prefix, or None

    Raises:
        InvalidVersionError: If constraint is not a valid range
    """
    try:
        spec = semantic_version.NpmSpec(constraint)
    except ValueError as e:
        raise InvalidVersionError(constraint) from e

    best = spec.select(_parse_versions(available_releases))
    return str(best) if best is not None else None


def resolve_version(available_releases: Iterable[str], constraint: str) -> str:
    """
    Resolve a version constraint against the catalog keys.

    Args:
        available_releases: Catalog version keys
        constraint: Exact version, range, or 'nightly'

    Returns:
        Version string (without 'v' prefix) or 'nightly'

    Raises:
        NoMatchingVersionError: If no catalog version satisfies the range
        InvalidVersionError: If constraint is neither a version nor a range

    Example:
        >>> resolve_version(["v1.2.0", "v1.3.0", "v1.3.1"], "^1.3")
        '1.3.1'
    """
    if is_exact_version(constraint):
        # Valid version, use it directly
        return constraint

    if constraint == NIGHTLY:
        return NIGHTLY

    version = max_satisfying(available_releases, constraint)
    if version is None:
        raise NoMatchingVersionError(constraint)

    logger.debug(f"Resolved {constraint} to {version}")
    return version


def sort_versions(available_releases: Iterable[str], reverse: bool = True) -> List[str]:
    """
    Sort version keys by semantic-version precedence, newest first by default.

    Keys that are not versions keep their relative order at the end.
    """
    parsed = []
    invalid = []
    for key in available_releases:
        try:
            parsed.append((semantic_version.Version(strip_tag_prefix(key)), key))
        except ValueError:
            invalid.append(key)

    parsed.sort(key=lambda item: item[0], reverse=reverse)
    return [key for _, key in parsed] + invalid
