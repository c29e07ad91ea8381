"""Theme management for the ocflwalk CLI.

Provides color theming with user override support via
``~/.config/ocflwalk/theme.toml``::

    [colors]
    entity_object = "#69B9A1"
"""

import logging
import re
import tomllib
from pathlib import Path
from typing import Any, cast

from pydantic import BaseModel, ConfigDict, field_validator
from rich.theme import Theme

from ocflwalk.core.paths import get_user_theme_path
from ocflwalk.models.entity import EntityType

logger = logging.getLogger(__name__)

_HEX_DIGITS = re.compile(r"[0-9a-fA-F]+")


class ThemeColors(BaseModel):
    """Color configuration for the ocflwalk CLI.

    All colors must be valid hex codes (#RRGGBB or #RGB). The
    ``entity_*`` colors are keyed by EntityType label.
    """

    model_config = ConfigDict(extra="forbid")

    text: str = "#ffffff"
    muted: str = "#b2bec3"
    header: str = "#69B9A1"
    border: str = "#29526d"
    error: str = "#f53263"
    info: str = "#0ec1c8"

    entity_root: str = "#f5b332"
    entity_intermediate: str = "#b2bec3"
    entity_object: str = "#69B9A1"
    entity_version: str = "#0e8ac8"
    entity_file: str = "#c1ff62"

    @field_validator("*", mode="before")
    @classmethod
    def validate_hex_color(cls, v: object, info: Any) -> str:
        """Validate that all color values are valid hex codes."""
        name = info.field_name
        if not isinstance(v, str):
            msg = f"{name}: color must be a string"
            raise ValueError(msg)

        color = v.strip()
        if color[:1] != "#":
            msg = f"{name}: color must start with '#'"
            raise ValueError(msg)
        if len(color) not in (4, 7):
            msg = f"{name}: color must be #RGB or #RRGGBB format"
            raise ValueError(msg)
        if not _HEX_DIGITS.fullmatch(color[1:]):
            msg = f"{name}: invalid hex color '{color}'"
            raise ValueError(msg)
        return color

    def entity_color(self, entity_type: EntityType) -> str:
        """Color of an entity type (ANY has none and falls back to text)."""
        return getattr(self, f"entity_{entity_type.label}", self.text)


def _load_toml_colors(path: Path) -> dict[str, str] | None:
    """Load the colors section from a TOML file.

    Args:
        path: Path to the TOML file.

    Returns:
        Dictionary of color name to hex value, or None if loading failed.
    """
    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except FileNotFoundError:
        return None
    except tomllib.TOMLDecodeError as e:
        logger.warning("Failed to parse theme file %s: %s", path, e)
        return None
    except OSError as e:
        logger.warning("Failed to read theme file %s: %s", path, e)
        return None

    colors_raw: object = data.get("colors", {})
    if not isinstance(colors_raw, dict):
        logger.warning("Invalid 'colors' section in %s", path)
        return None
    # TOML tables have string keys, keep string values only
    return {
        key: value
        for key, value in cast(dict[str, object], colors_raw).items()
        if isinstance(value, str)
    }


def load_theme(path: Path | None = None) -> ThemeColors:
    """Load theme colors, merging user overrides over the defaults.

    Args:
        path: Theme file. If None, uses ~/.config/ocflwalk/theme.toml.

    Returns:
        ThemeColors instance. Invalid overrides fall back to defaults.
    """
    theme_path = path or get_user_theme_path()
    user_colors = _load_toml_colors(theme_path)
    if user_colors is None:
        return ThemeColors()

    logger.debug("Loaded user theme overrides from %s", theme_path)
    try:
        return ThemeColors(**user_colors)
    except ValueError as e:
        logger.warning("Theme validation failed, using defaults: %s", e)
        return ThemeColors()


def get_rich_theme(colors: ThemeColors | None = None) -> Theme:
    """Convert ThemeColors to a Rich Theme.

    Besides the base styles, the theme defines one ``entity.<label>``
    style per entity type. Roots and objects are shown in bold.

    Args:
        colors: ThemeColors instance to convert. If None, loads theme automatically.
    """
    if colors is None:
        colors = load_theme()

    styles: dict[str, str] = {
        "text": colors.text,
        "muted": colors.muted,
        "dim": colors.muted,
        "header": colors.header,
        "bold_header": f"bold {colors.header}",
        "border": colors.border,
        "error": f"bold {colors.error}",
        "info": colors.info,
    }
    for entity_type in EntityType:
        if entity_type == EntityType.ANY:
            continue
        color = colors.entity_color(entity_type)
        bold = entity_type in (EntityType.ROOT, EntityType.OBJECT)
        styles[f"entity.{entity_type.label}"] = f"bold {color}" if bold else color

    return Theme(styles)


# Module-level cached theme instance
_cached_theme: Theme | None = None


def get_theme() -> Theme:
    """Get the Rich theme, loading and caching it if necessary.

    Returns:
        Cached Rich Theme instance.
    """
    global _cached_theme
    if _cached_theme is None:
        _cached_theme = get_rich_theme()
    return _cached_theme
