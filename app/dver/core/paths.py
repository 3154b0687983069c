"""Filesystem locations used by dver.

The config file lives under $XDG_CONFIG_HOME. Project files (global.json)
live in the working directory passed in by the caller, never in an
implicit global location.
"""

import os
from pathlib import Path

APP_NAME = "dver"
CONFIG_FILENAME = "config.toml"

# SDK pin document read by the dotnet host
PIN_FILENAME = "global.json"
PIN_BACKUP_SUFFIX = ".bak"


def get_config_dir() -> Path:
    """Directory holding config.toml.

    $XDG_CONFIG_HOME/dver when the variable is set and non-empty,
    otherwise ~/.config/dver.
    """
    xdg_config_home = os.environ.get("XDG_CONFIG_HOME")
    base = Path(xdg_config_home) if xdg_config_home else Path.home() / ".config"
    return base / APP_NAME


def get_config_path() -> Path:
    """Default location of config.toml (overridden by --config)."""
    return get_config_dir() / CONFIG_FILENAME


def get_pin_path(cwd: Path) -> Path:
    """global.json in the given working directory."""
    return cwd / PIN_FILENAME


def get_pin_backup_path(cwd: Path) -> Path:
    """global.json.bak in the given working directory."""
    return cwd / f"{PIN_FILENAME}{PIN_BACKUP_SUFFIX}"


def get_user_dotnet_dir(home: Path | None = None) -> Path:
    """Per-user .NET directory that dotnet-install uses by default.

    Args:
        home: Home directory. If None, uses the current user's home.

    Returns:
        Path to ~/.dotnet.
    """
    return (home or Path.home()) / ".dotnet"
