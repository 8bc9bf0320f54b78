"""Pytest configuration and fixtures for open-current-activity tests."""

import logging
import os
import shutil
import tempfile
from collections.abc import Iterable, Iterator
from pathlib import Path

import pytest

from open_current_activity.constants import ADB_CMD_DEVICES
from open_current_activity.utils.console import PACKAGE_LOGGER
from open_current_activity.utils.platform import get_adb_binary_name

DEVICES_KEY = "devices"


class FakeAdbRunner:
    """Stand-in for AdbRunner replaying canned output.

    ``outputs`` maps a device id (None for unscoped) to the lines of
    ``dumpsys activity activities``; the special key "devices" holds the
    ``adb devices`` output. An exception instead of lines is raised on the
    first ``next()``, like a launch failure of the real runner.
    """

    def __init__(self, outputs: dict[str | None, Iterable[str] | BaseException]):
        self.outputs = outputs
        self.calls: list[tuple[tuple[str, ...], str | None]] = []
        self.consumed: list[str] = []
        self.closed = 0

    def run(self, *args: str, device_id: str | None = None) -> Iterator[str]:
        self.calls.append((args, device_id))
        key = DEVICES_KEY if args == ADB_CMD_DEVICES else device_id
        return self._lines(self.outputs[key])

    def _lines(self, output: Iterable[str] | BaseException) -> Iterator[str]:
        if isinstance(output, BaseException):
            raise output
        try:
            for line in output:
                self.consumed.append(line)
                yield line
        finally:
            self.closed += 1


@pytest.fixture(autouse=True)
def clean_sdk_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the host's SDK configuration out of every test."""
    for var in ("OCA_SDK_ROOT", "ANDROID_HOME", "ANDROID_SDK_ROOT", "OCA_SOURCE_EXTENSIONS"):
        monkeypatch.delenv(var, raising=False)


@pytest.fixture(autouse=True)
def reset_package_logger() -> Iterator[None]:
    """Undo configure_logging so caplog sees package records in every test."""
    yield
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


@pytest.fixture
def temp_project_dir() -> Iterator[Path]:
    """Create a temporary project directory for testing.

    Yields:
        Path to temporary directory
    """
    temp_dir = Path(tempfile.mkdtemp(prefix="open-current-activity-test-"))
    original_cwd = Path.cwd()
    try:
        os.chdir(temp_dir)
        yield temp_dir
    finally:
        os.chdir(original_cwd)
        shutil.rmtree(temp_dir, ignore_errors=True)


@pytest.fixture
def android_project(temp_project_dir: Path) -> Path:
    """Create a small Android project with one Java and one Kotlin activity.

    Returns:
        Path to the project root
    """
    java_dir = temp_project_dir / "app" / "src" / "main" / "java" / "com" / "example" / "app"
    java_dir.mkdir(parents=True)
    (java_dir / "MainActivity.java").write_text("class MainActivity {}\n", encoding="utf-8")
    (java_dir / "SettingsActivity.kt").write_text("class SettingsActivity\n", encoding="utf-8")
    return temp_project_dir


@pytest.fixture
def fake_sdk(tmp_path: Path) -> Path:
    """Create an Android SDK directory with a platform-tools/adb placeholder.

    Returns:
        Path to the SDK root
    """
    sdk_root = tmp_path / "android-sdk"
    platform_tools = sdk_root / "platform-tools"
    platform_tools.mkdir(parents=True)
    (platform_tools / get_adb_binary_name()).write_text("", encoding="utf-8")
    return sdk_root


@pytest.fixture
def make_runner() -> type[FakeAdbRunner]:
    """Factory building FakeAdbRunner instances from canned outputs."""
    return FakeAdbRunner
