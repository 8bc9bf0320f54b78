"""Custom exceptions for the adb pipeline.

All exceptions inherit from AdbError, allowing callers to catch every
adb-related failure with a single except clause. Each class carries the
ErrorKind it stands for, so the service layer can translate any of them
to a user-facing message with one lookup.

Exception hierarchy:
    AdbError (base)
    ├── AdbExecutionError     adb could not be launched or read
    ├── MultipleDevicesError  unscoped command hit more than one device
    ├── NoDevicesError        no device or emulator matched
    └── AdbParseError         output did not have the expected shape
"""

from typing import Any, ClassVar

from open_current_activity.models.enums import ErrorKind


class AdbError(Exception):
    """Base exception for all adb pipeline errors.

    Attributes:
        message: Human-readable error description.
        details: Optional dictionary with additional context.
    """

    kind: ClassVar[ErrorKind] = ErrorKind.INTERNAL_ERROR

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        """Initialize adb error.

        Args:
            message: Error description.
            details: Optional dictionary with additional context.
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        """Return string representation."""
        if self.details:
            detail_str = ", ".join(f"{k}={v}" for k, v in self.details.items())
            return f"{self.message} ({detail_str})"
        return self.message


class AdbExecutionError(AdbError):
    """Raised when adb cannot be executed or its output cannot be read.

    Examples:
        - adb binary missing from platform-tools
        - Permission denied on the binary
        - Output pipe closed while reading

    The underlying OSError is available as ``cause`` (and ``__cause__``).
    """

    kind = ErrorKind.EXECUTION_FAILURE

    def __init__(self, cause: BaseException, command: list[str] | None = None):
        """Initialize execution error.

        Args:
            cause: The exception raised while launching or reading adb.
            command: The command line that failed.
        """
        details = {}
        if command:
            details["command"] = " ".join(command)
        super().__init__(str(cause) or type(cause).__name__, details)
        self.cause = cause
        self.command = command


class MultipleDevicesError(AdbError):
    """Raised when adb refuses an unscoped command because several devices are attached."""

    kind = ErrorKind.AMBIGUOUS_DEVICE

    def __init__(self, message: str = "More than one device/emulator attached"):
        super().__init__(message)


class NoDevicesError(AdbError):
    """Raised when no attached device or emulator matched."""

    kind = ErrorKind.NO_DEVICES_FOUND

    def __init__(
        self, message: str = "No devices or emulators found", device_id: str | None = None
    ):
        details = {"device_id": device_id} if device_id else None
        super().__init__(message, details)
        self.device_id = device_id


class AdbParseError(AdbError):
    """Raised when adb output does not have the expected structure.

    Examples:
        - A focused activity line without a package/class pair
        - Output ended before any focused activity line
    """

    kind = ErrorKind.PARSE_FAILURE

    def __init__(self, message: str, line: str | None = None):
        """Initialize parse error.

        Args:
            message: Error description.
            line: The offending output line, when there is one.
        """
        details = {}
        if line is not None:
            details["line"] = line[:100] + "..." if len(line) > 100 else line
        super().__init__(message, details)
        self.line = line
