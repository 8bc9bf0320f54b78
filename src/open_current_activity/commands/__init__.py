"""CLI commands for open-current-activity."""

from open_current_activity.commands.devices_cmd import devices_command
from open_current_activity.commands.open_cmd import open_command

__all__ = [
    "devices_command",
    "open_command",
]
