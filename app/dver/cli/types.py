"""Shared helpers for CLI commands.

Commands read the effective configuration from the Typer context
populated by the root callback.
"""

from pathlib import Path

import typer

from dver.core.config import ConfigError, DverConfig, load_config_or_default
from dver.scanners.dotnet import DotnetScanner
from dver.utils.formatting import print_error


def require_config(ctx: typer.Context) -> DverConfig:
    """Load the configuration once per invocation or exit with an error.

    Args:
        ctx: Typer context carrying the --config path.

    Returns:
        Effective DverConfig (defaults when no file exists).

    Raises:
        typer.Exit: If the configuration file is invalid.
    """
    obj = ctx.ensure_object(dict)
    if obj.get("config") is None:
        config_path: Path | None = obj.get("config_path")
        try:
            obj["config"] = load_config_or_default(config_path)
        except ConfigError as e:
            print_error(str(e))
            raise typer.Exit(code=1) from e
    return obj["config"]


def get_scanner(ctx: typer.Context) -> DotnetScanner:
    """Create the SDK scanner for the configured dotnet command."""
    return DotnetScanner(require_config(ctx).dotnet_command)


def is_quiet(ctx: typer.Context) -> bool:
    """Check if --quiet was given."""
    return bool(ctx.ensure_object(dict).get("quiet", False))
