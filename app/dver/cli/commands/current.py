"""Current command implementation.

Shows the SDK version the dotnet host resolves for the working
directory, plus the global.json pin when there is one.
"""

from pathlib import Path

import typer
from rich.markup import escape

from dver.cli.types import get_scanner, is_quiet
from dver.core.pin import PinError, read_pin
from dver.utils.formatting import console, print_error, print_info, print_warning


def show_current(ctx: typer.Context) -> None:
    """Show the active .NET SDK version."""
    scanner = get_scanner(ctx)

    try:
        version = scanner.current_version()
    except RuntimeError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    console.print(f"Current dotnet version: [sdk.version]{escape(version)}[/]")

    try:
        pin = read_pin(Path.cwd())
    except PinError as e:
        print_warning(str(e))
        return

    if pin is not None and not is_quiet(ctx):
        print_info(f"Pinned by global.json: {pin.sdk.version}")
