"""Classification of single adb output lines.

`adb devices` and `adb shell dumpsys activity activities` both go through
the same classifier; each caller decides which signals it cares about.
"""

from open_current_activity.constants import (
    MARKER_DEVICE_LIST_HEADER,
    MARKERS_DEVICE_NOT_FOUND,
    MARKER_MULTIPLE_DEVICES,
    MARKERS_FOCUSED_ACTIVITY,
    PATTERN_ACTIVITY_NAME,
    PATTERN_DEVICE_LIST_ITEM,
    PATTERN_DEVICE_NOT_FOUND_QUOTED,
)
from open_current_activity.models.activity import ActivityIdentifier, ClassificationSignal
from open_current_activity.models.enums import SignalKind


def classify(line: str) -> ClassificationSignal:
    """Map one line of adb output to the signal it carries.

    Checks run in a fixed order and the first match wins:

    1. "more than one device" -> MULTIPLE_DEVICES
    2. "device not found" or "no devices/emulators found" -> DEVICE_NOT_FOUND
    3. a focused activity marker -> FOCUSED_ACTIVITY, or MALFORMED_ACTIVITY
       when the line has no ``package/class`` pair
    4. the ``adb devices`` header -> DEVICE_LIST_HEADER
    5. two whitespace separated tokens -> DEVICE_LIST_ENTRY
    6. anything else -> NO_SIGNAL

    Args:
        line: A single output line, with or without its line terminator.

    Returns:
        The classification. Never raises.
    """
    line = line.rstrip("\r\n")

    if MARKER_MULTIPLE_DEVICES in line:
        return ClassificationSignal(SignalKind.MULTIPLE_DEVICES, line=line)

    not_found = any(marker in line for marker in MARKERS_DEVICE_NOT_FOUND)
    if not_found or PATTERN_DEVICE_NOT_FOUND_QUOTED.search(line):
        return ClassificationSignal(SignalKind.DEVICE_NOT_FOUND, line=line)

    if any(marker in line for marker in MARKERS_FOCUSED_ACTIVITY):
        return _classify_activity_line(line)

    if MARKER_DEVICE_LIST_HEADER in line:
        return ClassificationSignal(SignalKind.DEVICE_LIST_HEADER, line=line)

    match = PATTERN_DEVICE_LIST_ITEM.fullmatch(line.strip())
    if match:
        return ClassificationSignal(
            SignalKind.DEVICE_LIST_ENTRY, device_id=match.group(1), line=line
        )

    return ClassificationSignal(SignalKind.NO_SIGNAL, line=line)


def _classify_activity_line(line: str) -> ClassificationSignal:
    match = PATTERN_ACTIVITY_NAME.fullmatch(line)
    if match:
        try:
            activity = ActivityIdentifier(match.group(1), match.group(2))
        except ValueError:
            # e.g. "com.example/." has no usable class name
            pass
        else:
            return ClassificationSignal(SignalKind.FOCUSED_ACTIVITY, activity=activity, line=line)
    return ClassificationSignal(SignalKind.MALFORMED_ACTIVITY, line=line)
