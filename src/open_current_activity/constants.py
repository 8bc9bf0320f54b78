"""Constants for open-current-activity (OCA).

This module contains:
- VERSION: Package version
- adb command words
- Markers and patterns used to classify adb output
- Source file lookup defaults

For paths, messages, and runtime settings, import from:
- open_current_activity.config.paths
- open_current_activity.config.messages
- open_current_activity.config.settings

For type-safe enums, import from:
- open_current_activity.models.enums
"""

import re

from open_current_activity import __version__

# =============================================================================
# Version
# =============================================================================

VERSION = __version__

# =============================================================================
# adb Commands
# =============================================================================

ADB_FLAG_SERIAL = "-s"
ADB_CMD_DEVICES: tuple[str, ...] = ("devices",)
ADB_CMD_DUMPSYS_ACTIVITIES: tuple[str, ...] = ("shell", "dumpsys", "activity", "activities")

ADB_OUTPUT_ENCODING = "utf-8"
ADB_OUTPUT_ENCODING_ERRORS = "replace"

# =============================================================================
# adb Output Classification
# =============================================================================
# Checked in this order; the first match wins.

MARKER_MULTIPLE_DEVICES = "more than one device"
# Current adb prints "no devices/emulators found" when nothing is attached
MARKERS_DEVICE_NOT_FOUND: tuple[str, ...] = ("device not found", "no devices/emulators found")
# Newer adb prints "error: device 'emulator-5554' not found"
PATTERN_DEVICE_NOT_FOUND_QUOTED = re.compile(r"device '[^']*' not found")

# "ResumedActivity" also covers mResumedActivity and topResumedActivity
MARKERS_FOCUSED_ACTIVITY: tuple[str, ...] = ("ResumedActivity", "mFocusedActivity")
PATTERN_ACTIVITY_NAME = re.compile(r".* ([A-Za-z0-9_.$]+)/([A-Za-z0-9_.$]+).*")

MARKER_DEVICE_LIST_HEADER = "List of devices"
PATTERN_DEVICE_LIST_ITEM = re.compile(r"(\S+)\s+(\S+)")

# =============================================================================
# Source Lookup
# =============================================================================

# Tried in order: Java first, then Kotlin
DEFAULT_SOURCE_EXTENSIONS: tuple[str, ...] = (".java", ".kt")

# Directories to skip while searching the project for source files
SKIP_DIRECTORIES: tuple[str, ...] = (
    ".git",
    ".gradle",
    ".idea",
    ".cxx",
    "build",
    "node_modules",
    "__pycache__",
    ".venv",
    "venv",
)
