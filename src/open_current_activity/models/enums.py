"""Enum types for open-current-activity.

Type-safe discriminants for the two tagged variants that flow through the
adb pipeline:
- SignalKind: what a single line of adb output means
- ErrorKind: why resolving the current activity failed
"""

from enum import Enum


class SignalKind(str, Enum):
    """Semantic signal carried by one line of adb output."""

    MULTIPLE_DEVICES = "multiple_devices"
    DEVICE_NOT_FOUND = "device_not_found"
    FOCUSED_ACTIVITY = "focused_activity"
    MALFORMED_ACTIVITY = "malformed_activity"  # Marker present, pkg/class missing
    DEVICE_LIST_HEADER = "device_list_header"
    DEVICE_LIST_ENTRY = "device_list_entry"
    NO_SIGNAL = "no_signal"

    @classmethod
    def values(cls) -> list[str]:
        """Return list of all signal values."""
        return [s.value for s in cls]

    @property
    def is_terminal(self) -> bool:
        """Whether this signal ends a `dumpsys activity` scan."""
        return self in _TERMINAL_SIGNALS


_TERMINAL_SIGNALS = frozenset(
    {
        SignalKind.MULTIPLE_DEVICES,
        SignalKind.DEVICE_NOT_FOUND,
        SignalKind.FOCUSED_ACTIVITY,
        SignalKind.MALFORMED_ACTIVITY,
    }
)


class ErrorKind(str, Enum):
    """Failure categories for one activity resolution."""

    EXECUTION_FAILURE = "execution_failure"
    AMBIGUOUS_DEVICE = "ambiguous_device"
    NO_DEVICES_FOUND = "no_devices_found"
    PARSE_FAILURE = "parse_failure"
    INTERNAL_ERROR = "internal_error"

    @classmethod
    def values(cls) -> list[str]:
        """Return list of all error kinds."""
        return [k.value for k in cls]
