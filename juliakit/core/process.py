"""
Synchronous external command execution.

Install steps shell out to platform tools (powershell, hdiutil, cp). Each
call blocks until the process exits; a non-zero status raises.
"""

import logging
import subprocess
from typing import Sequence

from juliakit.core.exceptions import ProcessExecutionError

logger = logging.getLogger(__name__)


class ProcessRunner:
    """
    Runs external commands.

    Example:
        >>> runner = ProcessRunner()
        >>> runner.exec("hdiutil", ["attach", "/tmp/julia.dmg"])
        0
    """

    def exec(self, command: str, args: Sequence[str] = ()) -> int:
        """
        Run command with args and wait for it to finish.

        Output is passed through to the console.

        Args:
            command: Executable name or path
            args: Arguments passed verbatim (no shell expansion)

        Returns:
            Exit status (always 0; failures raise)

        Raises:
            ProcessExecutionError: If the command is missing or exits non-zero
        """
        argv = [command, *args]
        display = subprocess.list2cmdline(argv)
        logger.info(f"[command]{display}")

        try:
            result = subprocess.run(argv, check=False)
        except OSError as e:
            raise ProcessExecutionError(display, -1, str(e)) from e

        if result.returncode != 0:
            raise ProcessExecutionError(display, result.returncode)

        return result.returncode
