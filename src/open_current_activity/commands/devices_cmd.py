"""Devices command: list what adb can reach."""

from pathlib import Path

import typer
from rich.markup import escape
from rich.table import Table

from open_current_activity.commands.open_cmd import build_service
from open_current_activity.config.messages import INFO_MESSAGES
from open_current_activity.utils import get_console
from open_current_activity.utils.command_decorators import require_project_dir


@require_project_dir
def devices_command(sdk: str | None = None, project: Path | None = None) -> list[str]:
    """List attached devices and emulators.

    Raises:
        typer.Exit: With code 1 when no device is attached
    """
    assert project is not None
    device_ids = build_service(project, sdk=sdk).list_devices()
    if not device_ids:
        raise typer.Exit(code=1)

    table = Table(title=INFO_MESSAGES["devices_header"])
    table.add_column("#", justify="right", style="dim")
    table.add_column("Device", style="cyan")
    for index, device_id in enumerate(device_ids, start=1):
        table.add_row(str(index), escape(device_id))
    get_console().print(table)
    return device_ids
