"""Foreground activity lookup via `adb shell dumpsys activity activities`."""

import logging
from contextlib import closing

from open_current_activity.adb.classifier import classify
from open_current_activity.adb.runner import AdbRunner
from open_current_activity.config.messages import LOG_MESSAGES
from open_current_activity.constants import ADB_CMD_DUMPSYS_ACTIVITIES
from open_current_activity.exceptions import AdbParseError, MultipleDevicesError, NoDevicesError
from open_current_activity.models.activity import ActivityIdentifier, DeviceId
from open_current_activity.models.enums import SignalKind

logger = logging.getLogger(__name__)


def resolve_activity(runner: AdbRunner, device_id: DeviceId | None = None) -> ActivityIdentifier:
    """Find the activity currently in the foreground.

    Output is scanned line by line and adb is stopped as soon as a line
    settles the result; later lines are never read.

    Args:
        runner: Runner bound to the adb executable.
        device_id: Device to ask; None lets adb pick the only attached one.

    Returns:
        The first focused activity found in the output.

    Raises:
        AdbExecutionError: If adb cannot be run.
        MultipleDevicesError: If device_id is None and several devices are attached.
        NoDevicesError: If no device is attached (or device_id is unknown).
        AdbParseError: If the focused activity line is malformed or missing.
    """
    with closing(runner.run(*ADB_CMD_DUMPSYS_ACTIVITIES, device_id=device_id)) as lines:
        for line in lines:
            signal = classify(line)
            if signal.kind is SignalKind.MULTIPLE_DEVICES:
                raise MultipleDevicesError(line.strip())
            if signal.kind is SignalKind.DEVICE_NOT_FOUND:
                raise NoDevicesError(line.strip(), device_id=device_id)
            if signal.kind is SignalKind.MALFORMED_ACTIVITY:
                logger.error(LOG_MESSAGES["malformed_activity"])
                raise AdbParseError(LOG_MESSAGES["malformed_activity"], line=line)
            if signal.kind is SignalKind.FOCUSED_ACTIVITY and signal.activity is not None:
                logger.info(f"Focused activity: {signal.activity}")
                return signal.activity

    # Reached the end of the output without any focused activity line
    logger.error(LOG_MESSAGES["no_activity_in_output"])
    raise AdbParseError(LOG_MESSAGES["no_activity_in_output"])
