"""Services: the activity workflow and its host-side collaborators."""

from open_current_activity.services.collaborators import (
    ConsoleReporter,
    SdkPathProvider,
    SourceFileOpener,
    StatusReporter,
)
from open_current_activity.services.current_activity_service import (
    CurrentActivityService,
    error_message,
)
from open_current_activity.services.sdk_service import EnvironmentSdkProvider, get_adb_path
from open_current_activity.services.source_service import ProjectSourceOpener

__all__ = [
    "ConsoleReporter",
    "CurrentActivityService",
    "EnvironmentSdkProvider",
    "ProjectSourceOpener",
    "SdkPathProvider",
    "SourceFileOpener",
    "StatusReporter",
    "error_message",
    "get_adb_path",
]
