"""dver configuration and settings.

Configuration is stored in ~/.config/dver/config.toml. Every field has
a default, so a missing file is equivalent to an empty one.
"""

import logging
import tomllib
from pathlib import Path
from typing import Annotated, Any

import tomli_w
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from dver.core.paths import get_config_path
from dver.core.theme import ThemeColors

logger = logging.getLogger(__name__)

DEFAULT_USER_AGENT = "dver/0.1 (dotnet-version-manager)"
DEFAULT_RELEASES_INDEX_URL = (
    "https://dotnetcli.blob.core.windows.net/dotnet/release-metadata/releases-index.json"
)


class NetworkConfig(BaseModel):
    """HTTP settings shared by the installer download and remote listing.

    Attributes:
        timeout_seconds: Bound on every HTTP request.
        user_agent: Value of the User-Agent header.
        releases_index_url: Location of the .NET releases-index.json.
    """

    model_config = ConfigDict(extra="forbid")

    timeout_seconds: Annotated[
        float,
        Field(ge=1, le=600, description="HTTP timeout in seconds (1-600)"),
    ] = 30.0
    user_agent: Annotated[
        str,
        Field(min_length=1, description="User-Agent header for HTTP requests"),
    ] = DEFAULT_USER_AGENT
    releases_index_url: Annotated[
        str,
        Field(min_length=1, description="URL of releases-index.json"),
    ] = DEFAULT_RELEASES_INDEX_URL


class DverConfig(BaseModel):
    """Top-level dver configuration.

    Attributes:
        dotnet_command: Executable used to query installed SDKs.
        network: HTTP settings.
        theme: Console colors.
    """

    model_config = ConfigDict(extra="forbid")

    dotnet_command: Annotated[
        str,
        Field(min_length=1, description="dotnet executable name or path"),
    ] = "dotnet"
    network: NetworkConfig = Field(default_factory=NetworkConfig)
    theme: ThemeColors = Field(default_factory=ThemeColors)


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigNotFoundError(ConfigError):
    """Raised when the config file is not found."""


class ConfigParseError(ConfigError):
    """Raised when the config file cannot be parsed."""


class ConfigValidationError(ConfigError):
    """Raised when config content is invalid."""


def load_config(path: Path | None = None) -> DverConfig:
    """Load configuration from a TOML file.

    Args:
        path: Path to the config file. If None, uses the default config path.

    Returns:
        Validated DverConfig object.

    Raises:
        ConfigNotFoundError: If the config file doesn't exist.
        ConfigParseError: If the TOML syntax is invalid.
        ConfigValidationError: If the content doesn't match the schema.
    """
    config_path = path or get_config_path()

    if not config_path.exists():
        raise ConfigNotFoundError(f"Config not found: {config_path}")

    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigParseError(f"Invalid TOML syntax in {config_path}: {e}") from e
    except OSError as e:
        raise ConfigError(f"Failed to read config: {e}") from e

    try:
        return DverConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigValidationError(f"Invalid config content in {config_path}: {e}") from e


def load_config_or_default(path: Path | None = None) -> DverConfig:
    """Load configuration, falling back to defaults when no file exists.

    Parse and validation errors still propagate.

    Args:
        path: Path to the config file. If None, uses the default config path.

    Returns:
        Loaded or default DverConfig.

    Raises:
        ConfigError: If an existing file cannot be read or validated.
    """
    try:
        return load_config(path)
    except ConfigNotFoundError:
        logger.debug("No config file at %s, using defaults", path or get_config_path())
        return DverConfig()


def config_to_dict(config: DverConfig) -> dict[str, Any]:
    """Convert a DverConfig to a dictionary suitable for TOML serialization."""
    return config.model_dump(mode="json")


def dump_config(config: DverConfig) -> str:
    """Render a DverConfig as TOML text."""
    return tomli_w.dumps(config_to_dict(config))


def save_config(config: DverConfig, path: Path | None = None) -> Path:
    """Save configuration to a TOML file.

    Args:
        config: The configuration to save.
        path: Destination path. If None, uses the default config path.

    Returns:
        Path where the configuration was saved.

    Raises:
        ConfigError: If the file cannot be written.
    """
    config_path = path or get_config_path()

    try:
        config_path.parent.mkdir(parents=True, exist_ok=True)
        with open(config_path, "wb") as f:
            tomli_w.dump(config_to_dict(config), f)
    except OSError as e:
        raise ConfigError(f"Failed to write config: {e}") from e

    return config_path
