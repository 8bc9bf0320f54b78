"""Source file lookup for resolved activities."""

import logging
from collections.abc import Callable
from pathlib import Path

import typer
from rich.markup import escape

from open_current_activity.config.messages import (
    ERROR_MESSAGES,
    SUCCESS_MESSAGES,
    WARNING_MESSAGES,
)
from open_current_activity.config.settings import ProjectSettings
from open_current_activity.models.activity import ActivityIdentifier
from open_current_activity.models.results import OpenResult
from open_current_activity.services.collaborators import StatusReporter
from open_current_activity.utils.console import print_success, print_warning
from open_current_activity.utils.file_utils import find_files_by_name

logger = logging.getLogger(__name__)


class ProjectSourceOpener:
    """SourceFileOpener searching the project tree by file name.

    The activity's simple class name is combined with each configured
    extension in turn (``.java`` then ``.kt`` by default); the first
    extension with any match wins. Every match is opened.
    """

    def __init__(
        self,
        project_root: Path,
        reporter: StatusReporter,
        settings: ProjectSettings | None = None,
        launch: bool = False,
        launcher: Callable[[str], int] | None = None,
    ):
        """Initialize source opener.

        Args:
            project_root: Directory searched for sources
            reporter: Where "not found" is reported
            settings: Project settings (defaults read from the environment)
            launch: Open matches with the system default application
            launcher: Function used to open a file when launch is set
                (defaults to typer.launch)
        """
        self.project_root = project_root
        self.reporter = reporter
        self.settings = settings or ProjectSettings()
        self.launch = launch
        self.launcher = launcher or typer.launch
        self.results: list[OpenResult] = []

    def file_names_for(self, activity: ActivityIdentifier) -> list[str]:
        """Candidate source file names, in lookup order."""
        return [activity.short_name + ext for ext in self.settings.source_extensions]

    def find_sources(self, activity: ActivityIdentifier) -> tuple[list[str], list[Path]]:
        """Find the source files declaring an activity.

        Returns:
            Candidate file names and the matches for the first name that had any
        """
        file_names = self.file_names_for(activity)
        for file_name in file_names:
            matches = find_files_by_name(
                self.project_root, file_name, self.settings.skip_directories
            )
            if matches:
                return file_names, matches
            logger.info(f"No file with name {file_name} found")
        return file_names, []

    def open_source_for(self, activity: ActivityIdentifier) -> None:
        """Locate and open the source file of an activity."""
        file_names, matches = self.find_sources(activity)
        result = OpenResult(
            activity=str(activity), file_names=file_names, matches=matches, opened=False
        )
        self.results.append(result)

        if not matches:
            self.reporter.report(
                ERROR_MESSAGES["source_not_found"].format(file_names=" or ".join(file_names))
            )
            return

        if len(matches) > 1:
            logger.warning(f"Found more than one file with name {' or '.join(file_names)}")
            print_warning(
                escape(WARNING_MESSAGES["multiple_sources"].format(file_names=matches[0].name))
            )

        # Opens every match when several are found
        for path in matches:
            display = escape(str(self._display_path(path)))
            if self.launch:
                logger.info(f"Opening file {path}")
                self.launcher(str(path))
                print_success(SUCCESS_MESSAGES["source_opened"].format(path=display))
            else:
                print_success(SUCCESS_MESSAGES["source_found"].format(path=display))
        result["opened"] = self.launch

    def _display_path(self, path: Path) -> Path:
        try:
            return path.relative_to(self.project_root)
        except ValueError:
            return path
