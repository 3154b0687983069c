"""List command implementation.

Lists the SDK versions installed on this machine.
"""

from typing import Annotated

import typer

from dver.cli.types import get_scanner, is_quiet
from dver.scanners.base import sorted_versions, version_sort_key
from dver.utils.formatting import console, create_sdk_table, print_error, print_info


def list_sdks(
    ctx: typer.Context,
    show_paths: Annotated[
        bool,
        typer.Option(
            "--paths",
            "-p",
            help="Show installation directories.",
        ),
    ] = False,
) -> None:
    """List installed SDK versions.

    Examples:
        dver list             # One version per line
        dver list --paths     # Table with install locations
    """
    scanner = get_scanner(ctx)

    try:
        sdks = scanner.scan()
    except RuntimeError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    if not sdks:
        if not is_quiet(ctx):
            print_info("No .NET SDKs installed.")
        return

    if show_paths:
        table = create_sdk_table()
        for sdk in sorted(sdks, key=lambda s: version_sort_key(s.version)):
            table.add_row(sdk.version, str(sdk.install_path))
        console.print(table)
        return

    for version in sorted_versions(sdks):
        console.print(version, style="sdk.version", highlight=False)
