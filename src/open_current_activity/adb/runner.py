"""adb process runner.

Launches adb with stderr merged into stdout and hands its output back one
line at a time. The process is owned by the line generator: it is stopped
whenever the generator finishes, for whatever reason.
"""

import logging
import subprocess
from collections.abc import Iterator, Sequence
from pathlib import Path

from open_current_activity.config.messages import LOG_MESSAGES
from open_current_activity.config.settings import AdbSettings
from open_current_activity.constants import (
    ADB_FLAG_SERIAL,
    ADB_OUTPUT_ENCODING,
    ADB_OUTPUT_ENCODING_ERRORS,
)
from open_current_activity.exceptions import AdbExecutionError
from open_current_activity.utils.platform import get_no_window_kwargs

logger = logging.getLogger(__name__)


class AdbRunner:
    """Run adb commands and stream their merged output.

    Args:
        adb_path: Path to the adb executable.
        settings: Process settings (defaults read from the environment).
    """

    def __init__(self, adb_path: str | Path, settings: AdbSettings | None = None) -> None:
        self.adb_path = str(adb_path)
        self._kill_timeout = (settings or AdbSettings()).kill_timeout_seconds

    def build_command(self, args: Sequence[str], device_id: str | None = None) -> list[str]:
        """Build the full adb command line.

        Args:
            args: adb arguments, e.g. ``("devices",)``.
            device_id: Restrict the command to this device (``-s <id>``).

        Returns:
            Command line suitable for subprocess.
        """
        command = [self.adb_path]
        if device_id is not None:
            command += [ADB_FLAG_SERIAL, device_id]
        command += list(args)
        return command

    def run(self, *args: str, device_id: str | None = None) -> Iterator[str]:
        """Run adb and yield its output lines lazily.

        adb is started on the first ``next()``. Closing the generator early
        (``break``, ``return``, ``close()``) terminates adb before control
        returns to the caller; so does reaching the end of the output or a
        read error.

        Args:
            *args: adb arguments.
            device_id: Restrict the command to this device.

        Yields:
            Output lines (stdout and stderr interleaved) without line terminators.

        Raises:
            AdbExecutionError: If adb cannot be started or its output cannot be read.
        """
        command = self.build_command(args, device_id)
        logger.info(LOG_MESSAGES["adb_start"].format(command=" ".join(command)))

        try:
            process = subprocess.Popen(  # noqa: S603
                command,
                stdin=subprocess.DEVNULL,
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT,
                text=True,
                encoding=ADB_OUTPUT_ENCODING,
                errors=ADB_OUTPUT_ENCODING_ERRORS,
                **get_no_window_kwargs(),
            )
        except (OSError, ValueError) as e:
            logger.error(LOG_MESSAGES["adb_exec_failed"].format(error=e))
            raise AdbExecutionError(e, command) from e

        try:
            if process.stdout is None:
                raise AdbExecutionError(OSError(LOG_MESSAGES["adb_no_stdout"]), command)
            try:
                for raw_line in process.stdout:
                    line = raw_line.rstrip("\r\n")
                    logger.debug(LOG_MESSAGES["adb_line"].format(line=line))
                    yield line
            except (OSError, ValueError) as e:
                logger.error(LOG_MESSAGES["adb_exec_failed"].format(error=e))
                raise AdbExecutionError(e, command) from e
        finally:
            self._stop(process)

    def _stop(self, process: subprocess.Popen) -> None:  # type: ignore[type-arg]
        """Terminate adb if it is still running, killing it if it lingers."""
        try:
            if process.poll() is None:
                logger.debug(LOG_MESSAGES["adb_stop"].format(pid=process.pid))
                process.terminate()
                try:
                    process.wait(timeout=self._kill_timeout)
                except subprocess.TimeoutExpired:
                    logger.warning(LOG_MESSAGES["adb_kill"].format(pid=process.pid))
                    process.kill()
                    process.wait(timeout=self._kill_timeout)
        except (OSError, subprocess.TimeoutExpired) as e:
            logger.warning(f"Failed to stop adb cleanly: {e}")
        finally:
            if process.stdout is not None:
                process.stdout.close()
