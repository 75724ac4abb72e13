"""
Centralized exception hierarchy for juliakit.

Every error raised by the resolve-then-install pipeline derives from
JuliaKitError so the CLI can report it verbatim and exit non-zero.
"""


# ============================================================================
# Base Exceptions
# ============================================================================


class JuliaKitError(Exception):
    """Base exception for all juliakit errors."""

    pass


class ConfigError(JuliaKitError):
    """Configuration parsing or validation error."""

    pass


# ============================================================================
# Catalog Exceptions
# ============================================================================


class CatalogError(JuliaKitError):
    """Base exception for version catalog errors."""

    pass


class CatalogFetchError(CatalogError):
    """Raised when the version catalog cannot be downloaded."""

    pass


class CatalogFormatError(CatalogError):
    """Raised when the version catalog is not valid JSON or has an unknown shape."""

    pass


# ============================================================================
# Resolution Exceptions
# ============================================================================


class NoMatchingVersionError(JuliaKitError):
    """Raised when a version constraint matches no catalog version."""

    def __init__(self, constraint: str, message: str = ""):
        self.constraint = constraint
        super().__init__(
            message or f"Could not find a Julia version that matches {constraint}"
        )


class InvalidVersionError(NoMatchingVersionError):
    """Raised when a version constraint is neither a version nor a valid range."""

    def __init__(self, constraint: str):
        super().__init__(
            constraint,
            f"Invalid version constraint: {constraint}\n"
            f"Expected an exact version (1.6.7), a range (^1.6, ~1.5, 1.x) or 'nightly'",
        )


class NoMatchingBinariesError(JuliaKitError):
    """Raised when a release has no file for the host os/arch."""

    def __init__(self, arch: str, version: str):
        self.arch = arch
        self.version = version
        super().__init__(f"Could not find {arch}/{version} binaries")


# ============================================================================
# Platform Exceptions
# ============================================================================


class UnsupportedPlatformError(JuliaKitError):
    """Raised for OS/architecture combinations Julia is not published for."""

    pass


class PlatformTranslationError(JuliaKitError):
    """Raised when a host os/arch has no catalog equivalent."""

    pass


# ============================================================================
# Download Exceptions
# ============================================================================


class DownloadError(JuliaKitError):
    """Exception raised when a download fails."""

    pass


# ============================================================================
# Tool Cache Exceptions
# ============================================================================


class ToolCacheError(JuliaKitError):
    """Base exception for tool cache errors."""

    pass


class CacheLockTimeout(ToolCacheError):
    """Raised when the tool cache lock cannot be acquired within timeout."""

    pass


# ============================================================================
# Installation Exceptions
# ============================================================================


class InstallError(JuliaKitError):
    """Base exception for installation errors."""

    pass


class ProcessExecutionError(InstallError):
    """Raised when an install command exits with a non-zero status."""

    def __init__(self, command: str, returncode: int, output: str = ""):
        self.command = command
        self.returncode = returncode
        self.output = output
        msg = f"Command failed with exit code {returncode}: {command}"
        if output:
            msg += f"\n{output}"
        super().__init__(msg)


class ArchiveExtractionError(InstallError):
    """Failed to extract an archive."""

    pass


class InsecureArchiveError(ArchiveExtractionError):
    """Archive contains insecure paths (directory traversal attempt)."""

    pass
