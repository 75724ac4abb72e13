"""
juliakit CLI argument parser.

This module implements the command-line interface for juliakit using argparse.
"""

import argparse
import importlib
import logging
import sys
from pathlib import Path
from typing import List, Optional

from juliakit import __version__
from juliakit.core.exceptions import JuliaKitError

logger = logging.getLogger(__name__)


class CLI:
    """juliakit command-line interface."""

    def __init__(self):
        """Initialize CLI with argument parser."""
        self.parser = self._create_parser()

    def _create_parser(self) -> argparse.ArgumentParser:
        """
        Create argument parser with all subcommands.

        Returns:
            Configured ArgumentParser instance
        """
        parser = argparse.ArgumentParser(
            prog="jlkit",
            description="juliakit - resolve, download and install Julia",
            epilog='Use "jlkit COMMAND --help" for command-specific help',
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )

        # Global options
        parser.add_argument(
            "--version", action="version", version=f"juliakit {__version__}"
        )
        parser.add_argument(
            "--verbose", "-v", action="store_true", help="Enable verbose output"
        )
        parser.add_argument(
            "--quiet",
            "-q",
            action="store_true",
            help="Enable minimal output (errors only)",
        )
        parser.add_argument(
            "--config",
            type=Path,
            metavar="PATH",
            help="Path to configuration file (default: ./juliakit.yaml)",
        )

        # Subcommands
        subparsers = parser.add_subparsers(
            dest="command", help="Available commands", metavar="COMMAND"
        )

        self._add_install_command(subparsers)
        self._add_resolve_command(subparsers)
        self._add_url_command(subparsers)
        self._add_versions_command(subparsers)

        return parser

    @staticmethod
    def _add_version_option(parser):
        parser.add_argument(
            "--julia-version",
            dest="julia_version",
            metavar="SPEC",
            help="Version to use: exact (1.6.7), range (^1.6, 1.x) or 'nightly' "
            "[default: config or 1]",
        )

    @staticmethod
    def _add_arch_option(parser):
        parser.add_argument(
            "--arch",
            choices=["x64", "x86"],
            metavar="ARCH",
            help="Architecture of the Julia binaries (x64|x86) [default: host]",
        )

    def _add_install_command(self, subparsers):
        """Add 'install' subcommand."""
        parser = subparsers.add_parser(
            "install",
            help="Download and install Julia",
            description="Resolve a Julia version, download it and install it",
        )
        self._add_version_option(parser)
        self._add_arch_option(parser)
        parser.add_argument(
            "--no-github-env",
            action="store_true",
            help="Do not write GitHub Actions outputs/path even when available",
        )

    def _add_resolve_command(self, subparsers):
        """Add 'resolve' subcommand."""
        parser = subparsers.add_parser(
            "resolve",
            help="Print the Julia version a constraint resolves to",
            description="Resolve a version constraint against the version catalog",
        )
        self._add_version_option(parser)

    def _add_url_command(self, subparsers):
        """Add 'url' subcommand."""
        parser = subparsers.add_parser(
            "url",
            help="Print the download URL for this platform",
            description="Resolve a version and print its download URL",
        )
        self._add_version_option(parser)
        self._add_arch_option(parser)

    def _add_versions_command(self, subparsers):
        """Add 'versions' subcommand."""
        parser = subparsers.add_parser(
            "versions",
            help="List available Julia versions",
            description="List the versions published in the version catalog",
        )
        parser.add_argument(
            "--stable-only",
            action="store_true",
            help="Hide prereleases and releases not marked stable",
        )

    def parse_args(self, args: Optional[List[str]] = None):
        """
        Parse command-line arguments.

        Args:
            args: Arguments to parse (uses sys.argv if None)

        Returns:
            Parsed arguments namespace
        """
        return self.parser.parse_args(args)

    def run(self, args: Optional[List[str]] = None) -> int:
        """
        Run CLI with given arguments.

        Args:
            args: Arguments to parse (uses sys.argv if None)

        Returns:
            Exit code (0 for success, non-zero for error)
        """
        parsed_args = self.parse_args(args)

        self._configure_logging(parsed_args)

        if not parsed_args.command:
            self.parser.print_help()
            return 1

        try:
            return self._dispatch_command(parsed_args)
        except KeyboardInterrupt:
            logger.info("Operation cancelled by user")
            return 130  # Standard exit code for SIGINT
        except JuliaKitError as e:
            logger.error(f"Error: {e}")
            if parsed_args.verbose:
                import traceback

                traceback.print_exc()
            return 1

    def _configure_logging(self, args):
        """
        Configure logging based on verbose/quiet flags.

        Args:
            args: Parsed arguments with verbose/quiet flags
        """
        if args.verbose:
            level = logging.DEBUG
            format_str = "%(levelname)s [%(name)s] %(message)s"
        elif args.quiet:
            level = logging.ERROR
            format_str = "%(levelname)s: %(message)s"
        else:
            level = logging.INFO
            format_str = "%(message)s"

        logging.basicConfig(
            level=level,
            format=format_str,
            force=True,  # Reconfigure if already configured
        )

    def _dispatch_command(self, args) -> int:
        """
        Dispatch to appropriate command handler.

        Args:
            args: Parsed arguments with command field

        Returns:
            Exit code from command handler
        """
        command_map = {
            "install": "juliakit.cli.commands.install",
            "resolve": "juliakit.cli.commands.resolve",
            "url": "juliakit.cli.commands.url",
            "versions": "juliakit.cli.commands.versions",
        }

        module_name = command_map.get(args.command)
        if not module_name:
            logger.error(f"Unknown command: {args.command}")
            return 1

        module = importlib.import_module(module_name)
        return module.run(args)


def main():
    """Main entry point for CLI."""
    cli = CLI()
    sys.exit(cli.run())


if __name__ == "__main__":
    main()
