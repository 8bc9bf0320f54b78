"""Current activity service.

Ties the adb pipeline to the host: finds adb through the SDK provider,
resolves the foreground activity (falling back to one lookup per device when
several are attached), hands each result to the source opener and reports
every failure. This is the only place where errors become user-facing text.
"""

import logging
from collections.abc import Callable
from pathlib import Path

from open_current_activity.adb.activity import resolve_activity
from open_current_activity.adb.devices import list_devices
from open_current_activity.adb.runner import AdbRunner
from open_current_activity.config.messages import ERROR_MESSAGES, INFO_MESSAGES, LOG_MESSAGES
from open_current_activity.exceptions import (
    AdbError,
    AdbExecutionError,
    MultipleDevicesError,
    NoDevicesError,
)
from open_current_activity.models.activity import DeviceId, ResolutionOutcome
from open_current_activity.models.enums import ErrorKind
from open_current_activity.services.collaborators import (
    SdkPathProvider,
    SourceFileOpener,
    StatusReporter,
)
from open_current_activity.services.sdk_service import get_adb_path

logger = logging.getLogger(__name__)

# ErrorKind -> message key; covers every ErrorKind
ERROR_MESSAGE_KEYS: dict[ErrorKind, str] = {
    ErrorKind.EXECUTION_FAILURE: "adb_execution",
    ErrorKind.AMBIGUOUS_DEVICE: "internal_error",
    ErrorKind.NO_DEVICES_FOUND: "no_devices",
    ErrorKind.PARSE_FAILURE: "adb_parse",
    ErrorKind.INTERNAL_ERROR: "internal_error",
}


def error_message(kind: ErrorKind, cause: BaseException | None = None) -> str:
    """Translate an error kind to the message shown to the user.

    Args:
        kind: Failure category
        cause: Underlying exception, quoted for execution failures

    Returns:
        User-facing message
    """
    template = ERROR_MESSAGES[ERROR_MESSAGE_KEYS[kind]]
    if kind is ErrorKind.EXECUTION_FAILURE:
        return template.format(cause=cause or "unknown error")
    return template


class CurrentActivityService:
    """Resolve the foreground activity and open its source."""

    def __init__(
        self,
        sdk_provider: SdkPathProvider,
        file_opener: SourceFileOpener,
        reporter: StatusReporter,
        runner_factory: Callable[[Path], AdbRunner] = AdbRunner,
    ):
        """Initialize current activity service.

        Args:
            sdk_provider: Supplies the Android SDK root
            file_opener: Opens the source of each resolved activity
            reporter: Receives every user-facing failure message
            runner_factory: Builds a runner from the adb path
        """
        self.sdk_provider = sdk_provider
        self.file_opener = file_opener
        self.reporter = reporter
        self.runner_factory = runner_factory

    def _get_runner(self) -> AdbRunner | None:
        sdk_root = self.sdk_provider.get_sdk_root()
        if sdk_root is None:
            self.reporter.report(ERROR_MESSAGES["no_sdk"])
            return None
        return self.runner_factory(get_adb_path(sdk_root))

    def open_current_activity(self) -> list[ResolutionOutcome]:
        """Find the current activity and open its source.

        Tries the unscoped lookup first. When adb reports several devices,
        lists them and resolves each one in order; a failure on one device
        never stops the others.

        Returns:
            One outcome per final resolution, in the order they happened.
            Empty when no SDK is configured.
        """
        runner = self._get_runner()
        if runner is None:
            return []

        try:
            outcome = self._resolve(runner, None)
        except MultipleDevicesError:
            logger.info(INFO_MESSAGES["multiple_devices"])
            return self._resolve_each_device(runner)
        return [outcome]

    def list_devices(self) -> list[DeviceId]:
        """List attached devices, reporting failures.

        Returns:
            Device ids, or an empty list if none could be listed.
        """
        runner = self._get_runner()
        if runner is None:
            return []
        try:
            return list_devices(runner)
        except AdbError as e:
            self.reporter.report(error_message(e.kind, _cause_of(e)))
            return []

    def _resolve_each_device(self, runner: AdbRunner) -> list[ResolutionOutcome]:
        try:
            device_ids = list_devices(runner)
        except NoDevicesError as e:
            # adb claimed several devices a moment ago
            logger.error(LOG_MESSAGES["enumerated_no_devices"], exc_info=e)
            return [self._fail(None, ErrorKind.INTERNAL_ERROR)]
        except AdbError as e:
            return [self._fail(None, e.kind, _cause_of(e))]

        outcomes: list[ResolutionOutcome] = []
        for device_id in device_ids:
            try:
                outcomes.append(self._resolve(runner, device_id))
            except MultipleDevicesError as e:
                # Cannot happen with -s <id>
                logger.error(
                    LOG_MESSAGES["scoped_multiple_devices"].format(device_id=device_id),
                    exc_info=e,
                )
                outcomes.append(self._fail(device_id, ErrorKind.INTERNAL_ERROR))
        return outcomes

    def _resolve(self, runner: AdbRunner, device_id: DeviceId | None) -> ResolutionOutcome:
        """Resolve one scope and act on the result.

        Raises:
            MultipleDevicesError: Passed through for the caller's fallback.
        """
        try:
            activity = resolve_activity(runner, device_id)
        except MultipleDevicesError:
            raise
        except AdbError as e:
            return self._fail(device_id, e.kind, _cause_of(e))

        self.file_opener.open_source_for(activity)
        return ResolutionOutcome(device_id=device_id, activity=activity)

    def _fail(
        self,
        device_id: DeviceId | None,
        kind: ErrorKind,
        cause: BaseException | None = None,
    ) -> ResolutionOutcome:
        message = error_message(kind, cause)
        if device_id is not None:
            message = ERROR_MESSAGES["device_prefix"].format(device_id=device_id, message=message)
        self.reporter.report(message)
        return ResolutionOutcome(device_id=device_id, error=kind, message=message)


def _cause_of(error: AdbError) -> BaseException | None:
    if isinstance(error, AdbExecutionError):
        return error.cause
    return None
