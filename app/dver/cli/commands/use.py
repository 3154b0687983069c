"""Use command implementation.

Pins the working directory to an SDK version via global.json.
"""

from pathlib import Path
from typing import Annotated

import typer

from dver.core.pin import PinError, write_pin
from dver.utils.formatting import print_error, print_success


def use_version(
    version: Annotated[
        str,
        typer.Argument(help="SDK version to pin (e.g. 9.0.100)."),
    ],
) -> None:
    """Set the SDK version via global.json in the current directory.

    An existing global.json is kept as global.json.bak.
    """
    try:
        path = write_pin(version, Path.cwd())
    except PinError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    print_success(f"SDK version set to {version} in {path}")
