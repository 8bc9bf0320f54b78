"""Allow running as `python -m open_current_activity`."""

from open_current_activity.cli import cli_main

cli_main()
