"""Utility modules for dver.

This module exports commonly used utility functions.
"""

from dver.utils.formatting import (
    console,
    create_sdk_table,
    err_console,
    print_error,
    print_info,
    print_success,
    print_warning,
)
from dver.utils.shell import CommandResult, command_exists, run_command

__all__ = [
    "CommandResult",
    "command_exists",
    "console",
    "create_sdk_table",
    "err_console",
    "print_error",
    "print_info",
    "print_success",
    "print_warning",
    "run_command",
]
