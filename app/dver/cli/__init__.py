"""CLI package for dver.

This package contains the Typer application and all subcommands.
"""

from dver.cli.main import app

__all__ = ["app"]
