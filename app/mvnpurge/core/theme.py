"""Console theme for sweep output.

The bundled palette lives in ``mvnpurge/data/theme.toml``. Any subset of
its ``[colors]`` table can be overridden in ~/.config/mvnpurge/theme.toml.
"""

import logging
import tomllib
from functools import cache
from importlib import resources
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator
from rich.theme import Theme

from mvnpurge.core.paths import get_user_theme_path

logger = logging.getLogger(__name__)

# Extra style attributes layered on top of a palette color
_EMPHASIS = {"error": "bold"}

# Derived style name -> (attributes, palette color)
_DERIVED = {
    "bold_header": ("bold", "header"),
    "dim": ("", "muted"),
}


def _check_hex(name: str, value: object) -> str:
    """Return a normalized #RGB or #RRGGBB color, or raise ValueError."""
    if not isinstance(value, str):
        raise ValueError(f"{name}: color must be a string")
    color = value.strip()
    if not color.startswith("#"):
        raise ValueError(f"{name}: color must start with '#'")
    digits = color[1:]
    if len(digits) not in (3, 6):
        raise ValueError(f"{name}: color must be #RGB or #RRGGBB format")
    try:
        int(digits, 16)
    except ValueError:
        raise ValueError(f"{name}: invalid hex color '{color}'") from None
    return color


class ThemeColors(BaseModel):
    """Palette used by the sweep report.

    ``deleted`` colors removed markers and ``pending`` colors markers
    that a dry run would remove.
    """

    model_config = ConfigDict(extra="forbid")

    text: str = "#ffffff"
    muted: str = "#b2bec3"
    header: str = "#69B9A1"
    border: str = "#29526d"

    success: str = "#03b971"
    warning: str = "#f5b332"
    error: str = "#f53263"
    info: str = "#0ec1c8"

    deleted: str = "#c1ff62"
    pending: str = "#0e8ac8"

    @field_validator("*", mode="before")
    @classmethod
    def validate_hex_color(cls, v: object, info: Any) -> str:
        return _check_hex(info.field_name, v)


def get_bundled_theme_path() -> Path:
    """Get the path of the palette shipped with the package."""
    return Path(str(resources.files("mvnpurge.data").joinpath("theme.toml")))


def _load_toml_colors(path: Path) -> dict[str, str] | None:
    """Read the ``[colors]`` table of a theme file.

    Non-string values are dropped.

    Args:
        path: Path to the TOML file.

    Returns:
        Mapping of color name to value, or None if the file is missing,
        unreadable or malformed.
    """
    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except FileNotFoundError:
        return None
    except (tomllib.TOMLDecodeError, OSError) as e:
        logger.warning("Ignoring theme file %s: %s", path, e)
        return None

    colors = data.get("colors", {})
    if not isinstance(colors, dict):
        logger.warning("Ignoring theme file %s: 'colors' is not a table", path)
        return None
    return {key: value for key, value in colors.items() if isinstance(value, str)}


def load_theme(user_path: Path | None = None) -> ThemeColors:
    """Load the palette, applying user overrides on top of the bundled one.

    Args:
        user_path: Override file. Defaults to ~/.config/mvnpurge/theme.toml.

    Returns:
        Validated palette. Falls back to the built-in defaults when the
        merged colors do not validate.
    """
    colors = _load_toml_colors(get_bundled_theme_path())
    if colors is None:
        logger.error("Bundled theme is missing; installation may be corrupted")
        colors = {}

    override_path = user_path or get_user_theme_path()
    overrides = _load_toml_colors(override_path)
    if overrides:
        logger.debug("Applying theme overrides from %s", override_path)
        colors.update(overrides)

    try:
        return ThemeColors.model_validate(colors)
    except ValidationError as e:
        logger.warning("Invalid theme colors, using defaults: %s", e)
        return ThemeColors()


def get_rich_theme(colors: ThemeColors | None = None) -> Theme:
    """Build the Rich theme for a palette.

    Every palette color becomes a style of the same name, plus the
    derived ``bold_header`` and ``dim`` styles.

    Args:
        colors: Palette to use. Loaded with load_theme() if None.

    Returns:
        Rich Theme instance.
    """
    palette = (colors or load_theme()).model_dump()

    styles = {
        name: f"{_EMPHASIS[name]} {color}" if name in _EMPHASIS else color
        for name, color in palette.items()
    }
    for name, (attributes, source) in _DERIVED.items():
        styles[name] = f"{attributes} {palette[source]}".strip()

    return Theme(styles)


@cache
def get_theme() -> Theme:
    """Get the Rich theme, loading it on first use."""
    return get_rich_theme()
