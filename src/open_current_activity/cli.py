"""Main CLI entry point for open-current-activity."""

import sys
from pathlib import Path

import typer
from dotenv import load_dotenv

from open_current_activity.commands.devices_cmd import devices_command
from open_current_activity.commands.open_cmd import open_command
from open_current_activity.config.messages import (
    ERROR_MESSAGES,
    HELP_TEXT,
    PROJECT_TAGLINE,
    PROJECT_URL,
)
from open_current_activity.config.paths import DOTENV_FILE
from open_current_activity.constants import VERSION
from open_current_activity.utils import (
    configure_logging,
    get_console,
    print_banner,
    print_error,
    print_panel,
)

# Load .env file from current directory if it exists
load_dotenv(Path.cwd() / DOTENV_FILE, verbose=False)

# Create main Typer app
app = typer.Typer(
    name="oca",
    help=PROJECT_TAGLINE,
    no_args_is_help=True,
    add_completion=False,
    rich_markup_mode="rich",
)

# Create console for output
console = get_console()

SDK_OPTION_HELP = "Android SDK root (overrides OCA_SDK_ROOT, ANDROID_HOME and local.properties)"
PROJECT_OPTION_HELP = "Android project directory to search (defaults to current directory)"


@app.command("open")
def open_activity(
    sdk: str | None = typer.Option(None, "--sdk", "-s", help=SDK_OPTION_HELP),
    project: Path | None = typer.Option(None, "--project", "-p", help=PROJECT_OPTION_HELP),
    launch: bool = typer.Option(
        False,
        "--launch",
        "-l",
        help="Open the source file with the system default application",
    ),
) -> None:
    """Find the Activity in the foreground and locate its source file.

    Asks adb for the resumed Activity. When several devices or emulators are
    attached, every one of them is checked in turn.
    """
    open_command(sdk=sdk, project=project, launch=launch)


@app.command("devices")
def devices(
    sdk: str | None = typer.Option(None, "--sdk", "-s", help=SDK_OPTION_HELP),
    project: Path | None = typer.Option(None, "--project", "-p", help=PROJECT_OPTION_HELP),
) -> None:
    """List attached devices and emulators."""
    devices_command(sdk=sdk, project=project)


@app.command("version")
def version() -> None:
    """Show version information."""
    print_panel(
        f"[bold cyan]open-current-activity[/bold cyan] version [green]{VERSION}[/green]\n\n"
        f"{PROJECT_TAGLINE}\n\n"
        f"[dim]{PROJECT_URL}[/dim]",
        title="Version",
        style="cyan",
    )


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    version_flag: bool | None = typer.Option(
        None,
        "--version",
        "-v",
        help="Show version information",
        is_eager=True,
    ),
    debug: bool = typer.Option(
        False,
        "--debug",
        "-d",
        help="Log adb commands and output to stderr",
    ),
) -> None:
    """open-current-activity - jump from the running app to its source.

    Get started:
        oca open              # Locate the Activity on screen
        oca devices           # List attached devices
    """
    configure_logging(debug=debug)

    # Handle version flag
    if version_flag:
        version()
        raise typer.Exit()

    # No command: show banner and help
    if ctx.invoked_subcommand is None:
        print_banner()
        console.print(HELP_TEXT)
        raise typer.Exit()


def cli_main() -> None:
    """Main entry point for the CLI.

    This is the function that gets called when running the 'oca' command.
    It handles exceptions and provides user-friendly error messages.
    """
    try:
        app()
    except KeyboardInterrupt:
        console.print("\n[yellow]Cancelled by user[/yellow]")
        sys.exit(130)
    except Exception as e:
        # Check if it's a typer.Exit with code
        if isinstance(e, typer.Exit):
            sys.exit(e.exit_code)

        print_error(ERROR_MESSAGES["generic_error"].format(error=str(e)))

        # Show traceback in debug mode
        if "--debug" in sys.argv or "-d" in sys.argv:
            import traceback

            console.print("\n[dim]Traceback:[/dim]")
            traceback.print_exc()

        sys.exit(1)


# Allow running as `python -m open_current_activity.cli`
if __name__ == "__main__":
    cli_main()
