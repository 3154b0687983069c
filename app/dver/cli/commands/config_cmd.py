"""Configuration commands.

Shows the effective configuration and writes a default config file.
"""

from pathlib import Path
from typing import Annotated

import typer

from dver.cli.types import is_quiet, require_config
from dver.core.config import ConfigError, DverConfig, dump_config, save_config
from dver.core.paths import get_config_path
from dver.utils.formatting import console, print_error, print_info, print_success

app = typer.Typer(
    help="Show or initialize the dver configuration.",
    no_args_is_help=True,
)


def _config_path(ctx: typer.Context) -> Path:
    path: Path | None = ctx.ensure_object(dict).get("config_path")
    return path or get_config_path()


@app.command()
def show(ctx: typer.Context) -> None:
    """Print the effective configuration as TOML."""
    config = require_config(ctx)
    path = _config_path(ctx)
    if not path.exists() and not is_quiet(ctx):
        print_info(f"No config file at {path}; showing defaults.")
    console.print(dump_config(config), markup=False, highlight=False)


@app.command()
def init(
    ctx: typer.Context,
    force: Annotated[
        bool,
        typer.Option(
            "--force",
            "-f",
            help="Overwrite an existing config file.",
        ),
    ] = False,
) -> None:
    """Write a config file with default settings."""
    path = _config_path(ctx)
    if path.exists() and not force:
        print_error(f"Config already exists: {path} (use --force to overwrite)")
        raise typer.Exit(code=1)

    try:
        saved = save_config(DverConfig(), path)
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    print_success(f"Wrote default configuration to {saved}")
