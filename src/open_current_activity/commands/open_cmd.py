"""Open command: find the foreground activity and locate its source."""

from pathlib import Path

import typer
from rich.markup import escape
from rich.table import Table

from open_current_activity.adb.runner import AdbRunner
from open_current_activity.config.messages import INFO_MESSAGES, SUCCESS_MESSAGES
from open_current_activity.config.settings import AdbSettings, ProjectSettings
from open_current_activity.models.activity import ResolutionOutcome
from open_current_activity.services.collaborators import ConsoleReporter
from open_current_activity.services.current_activity_service import CurrentActivityService
from open_current_activity.services.sdk_service import EnvironmentSdkProvider
from open_current_activity.services.source_service import ProjectSourceOpener
from open_current_activity.utils import get_console, print_success
from open_current_activity.utils.command_decorators import require_project_dir


@require_project_dir
def open_command(
    sdk: str | None = None,
    project: Path | None = None,
    launch: bool = False,
) -> list[ResolutionOutcome]:
    """Resolve the current activity on every reachable device and find its source.

    Args:
        sdk: Explicit Android SDK root
        project: Project directory to search (validated by the decorator)
        launch: Open found files with the system default application

    Returns:
        One outcome per resolved scope

    Raises:
        typer.Exit: With code 1 when no activity could be resolved
    """
    assert project is not None
    service = build_service(project, sdk=sdk, launch=launch)
    outcomes = service.open_current_activity()
    _print_outcomes(outcomes)

    if not any(outcome.succeeded for outcome in outcomes):
        raise typer.Exit(code=1)
    return outcomes


def build_service(
    project: Path, sdk: str | None = None, launch: bool = False
) -> CurrentActivityService:
    """Wire the activity service to the console, the environment and the project tree."""
    project_settings = ProjectSettings()
    adb_settings = AdbSettings()
    reporter = ConsoleReporter()
    return CurrentActivityService(
        sdk_provider=EnvironmentSdkProvider(project, sdk_root=sdk, settings=project_settings),
        file_opener=ProjectSourceOpener(project, reporter, project_settings, launch=launch),
        reporter=reporter,
        runner_factory=lambda adb_path: AdbRunner(adb_path, adb_settings),
    )


def _print_outcomes(outcomes: list[ResolutionOutcome]) -> None:
    if len(outcomes) == 1:
        activity = outcomes[0].activity
        if activity is not None:
            print_success(
                SUCCESS_MESSAGES["activity_found"].format(activity=escape(str(activity)))
            )
        return
    if not outcomes:
        return

    table = Table(title="Current Activities")
    table.add_column("Device", style="cyan")
    table.add_column("Activity")
    for outcome in outcomes:
        device = escape(outcome.device_id or "-")
        if outcome.activity is not None:
            table.add_row(device, f"[green]{escape(outcome.activity.qualified_name)}[/green]")
        else:
            # Failures were already reported in full
            kind = outcome.error.value.replace("_", " ") if outcome.error else "unknown"
            status = INFO_MESSAGES["outcome_failed"].format(kind=kind)
            table.add_row(device, f"[red]{escape(status)}[/red]")
    get_console().print(table)
