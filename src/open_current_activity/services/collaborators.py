"""Interfaces the activity service uses to talk to its host.

The service never prints, reads configuration or touches the file system
itself. It goes through these three narrow interfaces instead, so a CLI,
an editor plugin or a test can plug in its own implementation.
"""

from typing import Protocol

from rich.markup import escape

from open_current_activity.models.activity import ActivityIdentifier
from open_current_activity.utils.console import print_info


class SdkPathProvider(Protocol):
    """Supplies the Android SDK root directory."""

    def get_sdk_root(self) -> str | None:
        """Return the SDK root, or None if no SDK is configured."""
        ...


class SourceFileOpener(Protocol):
    """Locates and opens the source file declaring an activity."""

    def open_source_for(self, activity: ActivityIdentifier) -> None:
        """Open the source of ``activity``.

        Implementations report "not found" and "multiple matches" themselves.
        """
        ...


class StatusReporter(Protocol):
    """Fire-and-forget user-visible status messages."""

    def report(self, message: str) -> None: ...


class ConsoleReporter:
    """StatusReporter printing plain text to the terminal."""

    def report(self, message: str) -> None:
        # Messages contain device ids like "[emulator-5554]" that rich
        # would otherwise swallow as markup
        print_info(escape(message))
