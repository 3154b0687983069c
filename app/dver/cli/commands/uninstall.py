"""Uninstall command implementation.

Removes installed SDK versions selected by full version, major
version, or --all.
"""

from typing import Annotated

import typer

from dver.cli.types import get_scanner, is_quiet
from dver.models.sdk import RemovalResult, RemovalStatus, VersionSelector
from dver.operators.uninstall import SdkRemover
from dver.utils.formatting import print_error, print_info, print_success, print_warning


def _print_result(result: RemovalResult) -> None:
    """Print one removal outcome on the matching stream."""
    if result.status == RemovalStatus.REMOVED:
        print_success(result.message)
    elif result.status == RemovalStatus.NOT_FOUND:
        print_info(result.message)
    elif result.status == RemovalStatus.SKIPPED_UNSAFE:
        print_warning(result.message)
    else:
        print_error(result.message)


def uninstall_sdks(
    ctx: typer.Context,
    version: Annotated[
        str | None,
        typer.Argument(help="Version to uninstall: full (8.0.406) or major (8)."),
    ] = None,
    all_versions: Annotated[
        bool,
        typer.Option(
            "--all",
            help="Remove all installed SDKs.",
        ),
    ] = False,
) -> None:
    """Uninstall SDK versions.

    Only directories under the SDK roots reported by dotnet are deleted.
    Individual failures are reported and do not stop the batch.

    Examples:
        dver uninstall 8.0.406     # Exact version
        dver uninstall 8           # Every 8.x SDK
        dver uninstall --all       # Everything
    """
    scanner = get_scanner(ctx)

    try:
        inventory = scanner.scan()
    except RuntimeError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    selector = VersionSelector.from_args(version, all_versions)
    if selector is None:
        print_warning("Provide a version or --all to uninstall.")
        return

    results = SdkRemover(inventory).remove(selector)
    if not results:
        if not is_quiet(ctx):
            print_info("No matching SDKs found.")
        return

    for result in results:
        _print_result(result)
