"""Command decorators shared by the CLI commands.

Decorators handle common patterns like project validation, ensuring
consistent error handling across command implementations.
"""

from collections.abc import Callable
from functools import wraps
from pathlib import Path
from typing import Any, TypeVar

import typer

from open_current_activity.config.messages import ERROR_MESSAGES
from open_current_activity.utils.console import print_error
from open_current_activity.utils.file_utils import dir_exists


F = TypeVar("F", bound=Callable[..., Any])


def require_project_dir(func: F) -> F:
    """Decorator to resolve and validate the ``project`` keyword argument.

    A missing ``project`` defaults to the current directory. The resolved,
    absolute path replaces the original value before the wrapped function
    runs:
        @require_project_dir
        def my_command(project: Path | None = None) -> None:
            assert project is not None
            ...

    Raises:
        typer.Exit: With code 1 if the project directory does not exist
    """

    @wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        project = kwargs.get("project") or Path.cwd()
        project_root = Path(project).expanduser().resolve()
        if not dir_exists(project_root):
            print_error(ERROR_MESSAGES["project_not_found"].format(path=project_root))
            raise typer.Exit(code=1)
        kwargs["project"] = project_root
        return func(*args, **kwargs)

    return wrapper  # type: ignore[return-value]
