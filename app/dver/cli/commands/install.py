"""Install command implementation.

Installs the .NET SDK with the official dotnet-install script when
dotnet is not already available.
"""

from typing import Annotated

import typer

from dver.cli.types import get_scanner, is_quiet, require_config
from dver.operators.installer import (
    InstallerError,
    InstallerExecutionError,
    InstallerOperator,
    InstallRequest,
)
from dver.utils.formatting import console, err_console, print_error, print_info, print_success
from dver.utils.http import create_client


def install_sdk(
    ctx: typer.Context,
    lts: Annotated[
        bool,
        typer.Option(
            "--lts",
            help="Install the latest LTS version.",
        ),
    ] = False,
    version: Annotated[
        str | None,
        typer.Option(
            "--version",
            help="Specific SDK version to install (ignored with --lts).",
        ),
    ] = None,
    install_path: Annotated[
        str | None,
        typer.Option(
            "--install-path",
            help="Directory to install the SDK into.",
        ),
    ] = None,
) -> None:
    """Install dotnet if it is not already installed.

    Examples:
        dver install                         # Latest version of the default channel
        dver install --lts                   # Latest LTS
        dver install --version 8.0.406       # Specific SDK
        dver install --install-path ~/.dotnet
    """
    config = require_config(ctx)
    scanner = get_scanner(ctx)

    if scanner.is_available():
        print_info("dotnet is already installed.")
        try:
            console.print(f"Current version: {scanner.current_version()}", highlight=False)
        except RuntimeError as e:
            print_error(str(e))
            raise typer.Exit(code=1) from e
        return

    if not is_quiet(ctx):
        print_info("Installing dotnet...")

    request = InstallRequest(lts=lts, version=version, install_dir=install_path)
    with create_client(config.network) as client:
        operator = InstallerOperator(client)
        try:
            result = operator.install(request)
        except InstallerExecutionError as e:
            print_error(f"dotnet-install script failed with status: {e.result.returncode}")
            for output in (e.result.stderr.strip(), e.result.stdout.strip()):
                if output:
                    err_console.print(output, markup=False, highlight=False)
            raise typer.Exit(code=1) from e
        except InstallerError as e:
            print_error(str(e))
            raise typer.Exit(code=1) from e

    if result.stdout.strip() and not is_quiet(ctx):
        console.print(result.stdout.strip(), markup=False, highlight=False)
    print_success("dotnet installation completed.")
