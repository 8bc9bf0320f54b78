"""Device enumeration via `adb devices`."""

import logging
from contextlib import closing

from open_current_activity.adb.classifier import classify
from open_current_activity.adb.runner import AdbRunner
from open_current_activity.config.messages import LOG_MESSAGES
from open_current_activity.constants import ADB_CMD_DEVICES
from open_current_activity.exceptions import NoDevicesError
from open_current_activity.models.activity import DeviceId
from open_current_activity.models.enums import SignalKind

logger = logging.getLogger(__name__)


def list_devices(runner: AdbRunner) -> list[DeviceId]:
    """Run `adb devices` and return the attached device ids.

    Only device list entries count; the header and every other line are
    skipped, including lines the activity scan would treat as terminal.

    Args:
        runner: Runner bound to the adb executable.

    Returns:
        Device ids in the order adb printed them.

    Raises:
        AdbExecutionError: If adb cannot be run.
        NoDevicesError: If adb listed no devices.
    """
    device_ids: list[DeviceId] = []
    with closing(runner.run(*ADB_CMD_DEVICES)) as lines:
        for line in lines:
            signal = classify(line)
            if signal.kind is SignalKind.DEVICE_LIST_ENTRY and signal.device_id:
                device_ids.append(signal.device_id)

    if not device_ids:
        logger.warning(LOG_MESSAGES["no_devices_in_output"])
        raise NoDevicesError(LOG_MESSAGES["no_devices_in_output"])

    logger.info(f"Found {len(device_ids)} device(s): {', '.join(device_ids)}")
    return device_ids
