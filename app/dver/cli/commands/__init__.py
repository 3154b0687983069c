"""CLI commands for dver.

This package contains all subcommand implementations.
"""

from dver.cli.commands import (
    config_cmd,
    current,
    doctor,
    install,
    list_cmd,
    remote,
    uninstall,
    use,
)

__all__ = [
    "config_cmd",
    "current",
    "doctor",
    "install",
    "list_cmd",
    "remote",
    "uninstall",
    "use",
]
