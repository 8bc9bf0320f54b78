"""Tests for the adb process runner."""

import subprocess
from contextlib import closing
from unittest.mock import MagicMock, patch

import pytest

from open_current_activity.adb.runner import AdbRunner
from open_current_activity.config.settings import AdbSettings
from open_current_activity.exceptions import AdbExecutionError
from open_current_activity.models.enums import ErrorKind

ADB = "/sdk/platform-tools/adb"
POPEN = "open_current_activity.adb.runner.subprocess.Popen"


def make_process(lines, running=True):
    """Build a Popen mock whose stdout yields ``lines``."""
    process = MagicMock()
    process.pid = 4242
    process.stdout.__iter__.return_value = iter(lines)
    process.poll.return_value = None if running else 0
    return process


@pytest.fixture
def runner():
    return AdbRunner(ADB, AdbSettings(kill_timeout_seconds=0.5))


class TestBuildCommand:
    def test_unscoped(self, runner):
        assert runner.build_command(("devices",)) == [ADB, "devices"]

    def test_scoped_to_device(self, runner):
        command = runner.build_command(("shell", "dumpsys"), "emulator-5554")

        assert command == [ADB, "-s", "emulator-5554", "shell", "dumpsys"]

    def test_accepts_path(self, tmp_path):
        adb_path = tmp_path / "adb"

        assert AdbRunner(adb_path).build_command(("devices",)) == [str(adb_path), "devices"]


class TestRun:
    @patch(POPEN)
    def test_yields_lines_without_terminators(self, mock_popen, runner):
        mock_popen.return_value = make_process(
            ["List of devices attached\r\n", "emulator-5554\tdevice\n"], running=False
        )

        lines = list(runner.run("devices"))

        assert lines == ["List of devices attached", "emulator-5554\tdevice"]

    @patch(POPEN)
    def test_merges_stderr_into_stdout(self, mock_popen, runner):
        mock_popen.return_value = make_process([], running=False)

        list(runner.run("shell", "dumpsys", device_id="emulator-5554"))

        args, kwargs = mock_popen.call_args
        assert args[0] == [ADB, "-s", "emulator-5554", "shell", "dumpsys"]
        assert kwargs["stdout"] is subprocess.PIPE
        assert kwargs["stderr"] is subprocess.STDOUT
        assert kwargs["stdin"] is subprocess.DEVNULL
        assert kwargs["text"] is True

    @patch(POPEN)
    def test_process_started_lazily(self, mock_popen, runner):
        lines = runner.run("devices")

        mock_popen.assert_not_called()
        lines.close()
        mock_popen.assert_not_called()

    @patch(POPEN)
    def test_exhausted_process_is_not_terminated(self, mock_popen, runner):
        process = make_process(["done\n"], running=False)
        mock_popen.return_value = process

        list(runner.run("devices"))

        process.terminate.assert_not_called()
        process.stdout.close.assert_called_once()

    @patch(POPEN)
    def test_closing_early_terminates_adb(self, mock_popen, runner):
        process = make_process(["first\n", "second\n", "third\n"])
        mock_popen.return_value = process

        with closing(runner.run("shell", "dumpsys")) as lines:
            assert next(lines) == "first"

        process.terminate.assert_called_once()
        process.wait.assert_called_once_with(timeout=0.5)
        process.kill.assert_not_called()

    @patch(POPEN)
    def test_kills_adb_that_ignores_terminate(self, mock_popen, runner):
        process = make_process(["first\n"])
        process.wait.side_effect = [subprocess.TimeoutExpired(ADB, 0.5), 0]
        mock_popen.return_value = process

        with closing(runner.run("devices")) as lines:
            next(lines)

        process.terminate.assert_called_once()
        process.kill.assert_called_once()

    @patch(POPEN)
    def test_stop_failure_does_not_mask_result(self, mock_popen, runner):
        process = make_process(["first\n"])
        process.terminate.side_effect = ProcessLookupError("gone")
        mock_popen.return_value = process

        with closing(runner.run("devices")) as lines:
            assert next(lines) == "first"

        process.stdout.close.assert_called_once()


class TestRunErrors:
    @patch(POPEN)
    def test_missing_binary(self, mock_popen, runner):
        mock_popen.side_effect = FileNotFoundError(2, "No such file or directory")

        with pytest.raises(AdbExecutionError) as exc_info:
            next(runner.run("devices"))

        error = exc_info.value
        assert error.kind is ErrorKind.EXECUTION_FAILURE
        assert isinstance(error.cause, FileNotFoundError)
        assert error.__cause__ is error.cause
        assert error.command == [ADB, "devices"]
        assert "No such file or directory" in str(error)

    @patch(POPEN)
    def test_permission_denied(self, mock_popen, runner):
        mock_popen.side_effect = PermissionError(13, "Permission denied")

        with pytest.raises(AdbExecutionError, match="Permission denied"):
            list(runner.run("devices"))

    @patch(POPEN)
    def test_read_error_is_wrapped_and_stops_adb(self, mock_popen, runner):
        def broken_stdout():
            yield "first\n"
            raise OSError("pipe closed")

        process = make_process([])
        process.stdout.__iter__.return_value = broken_stdout()
        mock_popen.return_value = process

        lines = runner.run("devices")
        assert next(lines) == "first"
        with pytest.raises(AdbExecutionError, match="pipe closed"):
            next(lines)

        process.terminate.assert_called_once()


def test_kill_timeout_defaults_from_settings(monkeypatch):
    monkeypatch.setenv("OCA_ADB_KILL_TIMEOUT_SECONDS", "7")

    with patch(POPEN) as mock_popen:
        process = make_process(["line\n"])
        mock_popen.return_value = process
        with closing(AdbRunner(ADB).run("devices")) as lines:
            next(lines)

    process.wait.assert_called_once_with(timeout=7.0)


@patch(POPEN)
def test_missing_output_pipe(mock_popen, runner):
    process = make_process([])
    process.stdout = None
    mock_popen.return_value = process

    with pytest.raises(AdbExecutionError, match="not connected to a pipe"):
        next(runner.run("devices"))

    process.terminate.assert_called_once()
