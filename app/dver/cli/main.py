"""dver command line.

The root callback handles global options (logging, quiet mode, config
file) and every subcommand reads them back from ctx.obj.
"""

import logging
from pathlib import Path
from typing import Annotated

import typer

from dver import __version__
from dver.cli.commands import config_cmd, current, doctor, install, list_cmd, remote, uninstall, use
from dver.core.config import ConfigError, load_config_or_default
from dver.utils.formatting import apply_theme, configure_logging

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="dver",
    help="Manage installed .NET SDK versions.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def version_callback(value: bool) -> None:
    """Handle --version: print it and stop before any command runs."""
    if value:
        typer.echo(f"dver version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Enable verbose output.",
        ),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Suppress non-essential output.",
        ),
    ] = False,
    config_path: Annotated[
        Path | None,
        typer.Option(
            "--config",
            help="Configuration file (default: ~/.config/dver/config.toml).",
            dir_okay=False,
        ),
    ] = None,
) -> None:
    """dver - .NET SDK version manager.

    Inspect, pin, install and remove .NET SDK versions.
    """
    configure_logging(verbose)

    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet
    ctx.obj["config_path"] = config_path
    ctx.obj["config"] = None

    try:
        config = load_config_or_default(config_path)
    except ConfigError as e:
        # Reported by the commands that need the configuration
        logger.debug("Configuration not loaded: %s", e)
    else:
        ctx.obj["config"] = config
        apply_theme(config.theme)


# Register commands
app.command("current")(current.show_current)
app.command("list")(list_cmd.list_sdks)
app.command("use")(use.use_version)
app.command("install")(install.install_sdk)
app.command("uninstall")(uninstall.uninstall_sdks)
app.command("doctor")(doctor.run_doctor)
app.command("remote")(remote.list_remote)
app.add_typer(config_cmd.app, name="config")


if __name__ == "__main__":
    app()
