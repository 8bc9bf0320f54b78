"""Cross-platform abstractions for Windows and POSIX systems.

This module provides platform-agnostic helpers for:
- Selecting the adb binary name
- Subprocess creation flags for console-less child processes
"""

import sys
from typing import Any, Final

from open_current_activity.config.paths import ADB_BINARY_POSIX, ADB_BINARY_WINDOWS

# Platform detection
IS_WINDOWS: Final[bool] = sys.platform == "win32"


def get_adb_binary_name() -> str:
    """Get the adb executable name for the host OS.

    Returns:
        ``adb.exe`` on Windows, ``adb`` everywhere else.
    """
    return ADB_BINARY_WINDOWS if IS_WINDOWS else ADB_BINARY_POSIX


def get_no_window_kwargs() -> dict[str, Any]:
    """Get subprocess.Popen kwargs that keep a child from opening a console.

    Returns:
        ``creationflags`` with CREATE_NO_WINDOW on Windows, empty dict on POSIX.
    """
    if IS_WINDOWS:
        CREATE_NO_WINDOW = 0x08000000
        return {"creationflags": CREATE_NO_WINDOW}
    return {}
