"""adb pipeline: run adb, classify its output, resolve devices and activities."""

from open_current_activity.adb.activity import resolve_activity
from open_current_activity.adb.classifier import classify
from open_current_activity.adb.devices import list_devices
from open_current_activity.adb.runner import AdbRunner

__all__ = [
    "AdbRunner",
    "classify",
    "list_devices",
    "resolve_activity",
]
