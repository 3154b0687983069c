"""Console output for dver.

Results go to stdout through `console`; warnings, errors and log records
go to stderr through `err_console`. User-supplied text is escaped before
it reaches Rich markup.
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from dver.core.theme import get_rich_theme

if TYPE_CHECKING:
    from dver.core.theme import ThemeColors


def _detect_color_system() -> str | None:
    """Use truecolor on a TTY so hex theme colors render exactly."""
    if sys.stdout.isatty():
        return "truecolor"
    return None


console = Console(theme=get_rich_theme(), color_system=_detect_color_system())
err_console = Console(theme=get_rich_theme(), stderr=True, color_system=_detect_color_system())


def apply_theme(colors: ThemeColors) -> None:
    """Switch both consoles to the configured colors."""
    theme = get_rich_theme(colors)
    console.push_theme(theme)
    err_console.push_theme(theme)


def configure_logging(verbose: bool = False) -> None:
    """Route log records to stderr through Rich.

    Args:
        verbose: If True, log at DEBUG level, otherwise WARNING.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


def create_sdk_table(title: str = "Installed .NET SDKs") -> Table:
    """Create a pre-configured table for displaying installed SDKs.

    Args:
        title: Table title.

    Returns:
        Rich Table with Version and Location columns.
    """
    table = Table(
        title=title,
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("Version", style="sdk.version", no_wrap=True)
    table.add_column("Location", style="sdk.path", overflow="fold")
    return table


def print_info(message: str) -> None:
    """Print a neutral status line to stdout."""
    console.print(f"[info]{escape(message)}[/]")


def print_warning(message: str) -> None:
    """Print a "Warning:" line to stderr."""
    err_console.print(f"[warning]Warning:[/] {escape(message)}")


def print_error(message: str) -> None:
    """Print an "Error:" line to stderr."""
    err_console.print(f"[error]Error:[/] {escape(message)}")


def print_success(message: str) -> None:
    """Print a completed-action line to stdout."""
    console.print(f"[success]{escape(message)}[/]")
