"""
Runs the external downloader as a child process with inherited standard streams.
"""

import logging
import subprocess
from collections.abc import Sequence

from rich.markup import escape

from md_cli.exceptions import DownloaderNotFoundError
from md_cli.utils.formatting import format_command

log = logging.getLogger(__name__)

# Seconds to let the child finish on its own after Ctrl-C before terminating it
INTERRUPT_GRACE_PERIOD = 5.0


class CommandRunner:
    """Spawns a command, waits for it and reports its exit code."""

    def __init__(self, interrupt_grace_period: float = INTERRUPT_GRACE_PERIOD):
        self.interrupt_grace_period = interrupt_grace_period

    def run(self, command: Sequence[str]) -> int:
        """
        Runs the command in the foreground and returns its exit code.

        The child shares the terminal and its process group, so Ctrl-C reaches
        it directly. KeyboardInterrupt is re-raised once the child is gone.

        Raises:
            DownloaderNotFoundError: If the executable does not exist.
        """
        args = [str(arg) for arg in command]
        log.info(f" -> executing: {escape(format_command(args))}")
        try:
            process = subprocess.Popen(args)
        except FileNotFoundError as e:
            raise DownloaderNotFoundError(args[0]) from e

        try:
            returncode = process.wait()
        except KeyboardInterrupt:
            self._stop(process)
            raise

        log.debug(f"'{escape(args[0])}' exited with status {returncode}")
        return returncode

    def _stop(self, process: subprocess.Popen) -> None:
        try:
            process.wait(timeout=self.interrupt_grace_period)
        except subprocess.TimeoutExpired:
            log.debug(f"Process {process.pid} outlived the grace period")
        finally:
            if process.poll() is None:
                log.debug(f"Terminating process {process.pid}")
                process.terminate()
                process.wait()
