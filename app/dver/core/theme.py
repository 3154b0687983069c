"""Console colors for the dver CLI.

The [theme] table of config.toml overrides any of the ThemeColors
defaults; get_rich_theme maps them onto the style names used by the
commands (info, warning, sdk.version, ...).
"""

import string
from typing import Annotated

from pydantic import BaseModel, BeforeValidator, ConfigDict
from rich.theme import Theme


def _parse_hex_color(value: object) -> str:
    if not isinstance(value, str):
        msg = "color must be a string"
        raise ValueError(msg)
    color = value.strip()
    digits = color.removeprefix("#")
    if digits == color:
        msg = f"color {color!r} must start with '#'"
        raise ValueError(msg)
    if len(digits) not in (3, 6) or not all(c in string.hexdigits for c in digits):
        msg = f"color {color!r} is not #RGB or #RRGGBB"
        raise ValueError(msg)
    return color.lower()


HexColor = Annotated[str, BeforeValidator(_parse_hex_color)]


class ThemeColors(BaseModel):
    """Hex colors for CLI output, one per semantic role."""

    model_config = ConfigDict(extra="forbid")

    text: HexColor = "#ffffff"
    muted: HexColor = "#b2bec3"
    header: HexColor = "#512bd4"
    border: HexColor = "#29526d"

    success: HexColor = "#03b971"
    warning: HexColor = "#f5b332"
    error: HexColor = "#f53263"
    info: HexColor = "#0ec1c8"

    version: HexColor = "#9b7bf0"
    path: HexColor = "#b2bec3"


# Rich style name -> (ThemeColors field, extra style attributes)
_STYLE_MAP: dict[str, tuple[str, str]] = {
    "text": ("text", ""),
    "muted": ("muted", ""),
    "header": ("header", ""),
    "bold_header": ("header", "bold"),
    "border": ("border", ""),
    "success": ("success", ""),
    "warning": ("warning", ""),
    "error": ("error", "bold"),
    "info": ("info", ""),
    "sdk.version": ("version", "bold"),
    "sdk.path": ("path", ""),
}


def get_rich_theme(colors: ThemeColors | None = None) -> Theme:
    """Build the Rich theme for the consoles.

    Args:
        colors: Configured colors. If None, uses defaults.

    Returns:
        Theme defining every style name the CLI prints with.
    """
    colors = colors or ThemeColors()
    styles = {
        name: f"{attrs} {getattr(colors, field)}".strip()
        for name, (field, attrs) in _STYLE_MAP.items()
    }
    return Theme(styles)
