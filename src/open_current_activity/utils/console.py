"""Console output helpers built on rich.

All user-facing output goes through these helpers so tests can capture it
and styles stay consistent across commands.
"""

import logging

from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel

from open_current_activity.config.messages import BANNER

_console = Console()
_err_console = Console(stderr=True)

PACKAGE_LOGGER = "open_current_activity"


def get_console() -> Console:
    """Return the shared stdout console."""
    return _console


def print_info(message: str) -> None:
    """Print an informational message."""
    _console.print(message)


def print_success(message: str) -> None:
    """Print a success message with a check mark."""
    _console.print(f"[green]✓[/green] {message}")


def print_warning(message: str) -> None:
    """Print a warning message."""
    _console.print(f"[yellow]⚠[/yellow] [yellow]{message}[/yellow]")


def print_error(message: str) -> None:
    """Print an error message to stderr."""
    _err_console.print(f"[red]✗[/red] [red]{message}[/red]")


def print_panel(content: str, title: str | None = None, style: str = "cyan") -> None:
    """Print content inside a bordered panel.

    Args:
        content: Rich markup to display
        title: Optional panel title
        style: Border style
    """
    _console.print(Panel(content, title=title, border_style=style))


def print_banner() -> None:
    """Print the ASCII banner."""
    _console.print(f"[cyan]{BANNER}[/cyan]")


def configure_logging(debug: bool = False) -> None:
    """Route package logs to stderr through rich.

    Args:
        debug: Log everything at DEBUG (including each adb output line)
            instead of warnings and errors only.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(logging.DEBUG if debug else logging.WARNING)
    # Avoid duplicate handlers when invoked repeatedly (e.g. in tests)
    logger.handlers.clear()
    logger.addHandler(RichHandler(console=_err_console, show_path=debug, markup=False))
    logger.propagate = False
