"""UI messages and strings for open-current-activity.

This module consolidates all user-facing messages including:
- Success/error/info/warning messages
- Banner and help text
"""

# =============================================================================
# Project Metadata
# =============================================================================

PROJECT_TAGLINE = "Open the source of the Activity currently on screen"
PROJECT_URL = "https://github.com/open-current-activity/open-current-activity"

# =============================================================================
# Banner and Help
# =============================================================================

BANNER = """
╭─────────────────────────────────────────────────────────╮
│                                                         │
│              ██████╗  ██████╗ █████╗                    │
│             ██╔═══██╗██╔════╝██╔══██╗                   │
│             ██║   ██║██║     ███████║                   │
│             ██║   ██║██║     ██╔══██║                   │
│             ╚██████╔╝╚██████╗██║  ██║                   │
│              ╚═════╝  ╚═════╝╚═╝  ╚═╝                   │
│                                                         │
│      Open Current Activity - adb to source, fast        │
│                                                         │
╰─────────────────────────────────────────────────────────╯
"""

HELP_TEXT = f"""
[bold cyan]oca[/bold cyan] - Open Current Activity: {PROJECT_TAGLINE}

[bold]Commands:[/bold]
  [cyan]open[/cyan]        Find the foreground Activity and locate its source file
  [cyan]devices[/cyan]     List attached devices and emulators
  [cyan]version[/cyan]     Show version information

[bold]Examples:[/bold]
  [dim]# Find the source of the Activity on screen[/dim]
  [dim]$ oca open[/dim]

  [dim]# Use an explicit SDK and open the file in the default editor[/dim]
  [dim]$ oca open --sdk ~/Android/Sdk --launch[/dim]

  [dim]# See which devices adb can reach[/dim]
  [dim]$ oca devices[/dim]

[bold]SDK lookup order:[/bold]
  --sdk, OCA_SDK_ROOT, ANDROID_HOME, ANDROID_SDK_ROOT, sdk.dir in local.properties

For more information, visit: {PROJECT_URL}
"""

# =============================================================================
# Success Messages
# =============================================================================

SUCCESS_MESSAGES = {
    "activity_found": "Current activity: {activity}",
    "source_found": "Found {path}",
    "source_opened": "Opened {path}",
}

# =============================================================================
# Error Messages
# =============================================================================

ERROR_MESSAGES = {
    "no_sdk": "Could not find the path for the Android SDK.  Have you configured it?",
    "adb_execution": "Could not execute adb ({cause})",
    "adb_parse": "Could not parse adb output",
    "no_devices": "Could not find any devices or emulators",
    "internal_error": "Something went wrong!",
    "device_prefix": "[{device_id}] {message}",
    "source_not_found": "Could not find {file_names} in project",
    "project_not_found": "Project directory not found: {path}",
    "generic_error": "An error occurred: {error}",
}

# =============================================================================
# Info Messages
# =============================================================================

INFO_MESSAGES = {
    "multiple_devices": "Multiple devices detected, checking each one...",
    "devices_header": "Attached devices",
    "outcome_failed": "failed ({kind})",
}

# =============================================================================
# Warning Messages
# =============================================================================

WARNING_MESSAGES = {
    "multiple_sources": "Found more than one file named {file_names}",
}

# =============================================================================
# Log Messages
# =============================================================================

LOG_MESSAGES = {
    "adb_start": "Running adb: {command}",
    "adb_line": "line='{line}'",
    "adb_stop": "Stopping adb (pid {pid})",
    "adb_kill": "adb did not exit after terminate, killing (pid {pid})",
    "adb_exec_failed": "Could not exec adb or read from its process: {error}",
    "adb_no_stdout": "adb output is not connected to a pipe",
    "malformed_activity": "Could not find the focused activity in the line",
    "no_activity_in_output": "Could not find the focused activity in the output",
    "no_devices_in_output": "Could not find devices in the output",
    "scoped_multiple_devices": (
        "Got a multiple devices message when passing a device id: {device_id}"
    ),
    "enumerated_no_devices": "Got a no devices message right after adb reported multiple devices",
}
