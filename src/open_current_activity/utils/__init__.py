"""Utility helpers for open-current-activity."""

from .console import (
    configure_logging,
    get_console,
    print_banner,
    print_error,
    print_info,
    print_panel,
    print_success,
    print_warning,
)
from .file_utils import dir_exists, find_files_by_name, read_properties
from .platform import IS_WINDOWS, get_adb_binary_name, get_no_window_kwargs

__all__ = [
    "IS_WINDOWS",
    "configure_logging",
    "dir_exists",
    "find_files_by_name",
    "get_adb_binary_name",
    "get_console",
    "get_no_window_kwargs",
    "print_banner",
    "print_error",
    "print_info",
    "print_panel",
    "print_success",
    "print_warning",
    "read_properties",
]
