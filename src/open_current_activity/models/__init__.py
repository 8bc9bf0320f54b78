"""Data models for open-current-activity"""

from .activity import ActivityIdentifier, ClassificationSignal, DeviceId, ResolutionOutcome
from .enums import ErrorKind, SignalKind
from .results import OpenResult

__all__ = [
    "ActivityIdentifier",
    "ClassificationSignal",
    "DeviceId",
    "ErrorKind",
    "OpenResult",
    "ResolutionOutcome",
    "SignalKind",
]
