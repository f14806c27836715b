from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
import tomllib
from typing import Any, Mapping

from .layout import DEFAULT_DIMENSIONS, SlideMenuDimensions, validate_dimensions
from .style.theme import DEFAULT_THEME, SlideMenuTheme, validate_theme_tokens


@dataclass
class SlideMenuConfig:
    """Display strings for the two landing zones."""

    left_text: str | None = None
    right_text: str | None = None


@dataclass(frozen=True)
class SlideMenuSettings:
    config: SlideMenuConfig = field(default_factory=SlideMenuConfig)
    dimensions: SlideMenuDimensions = DEFAULT_DIMENSIONS
    theme: SlideMenuTheme = DEFAULT_THEME


def parse_slide_menu_attrs(attrs: Mapping[str, Any] | None) -> SlideMenuConfig:
    """Read `left_text`/`right_text` from a declarative attribute set.

    Missing attributes stay `None`; other keys belong to the host and are ignored.
    """

    if attrs is None:
        return SlideMenuConfig()
    if not isinstance(attrs, Mapping):
        raise ValueError("slide menu attributes must be a mapping")
    return SlideMenuConfig(
        left_text=_optional_text(attrs, "left_text"),
        right_text=_optional_text(attrs, "right_text"),
    )


def load_slide_menu_config(path: str | Path) -> SlideMenuSettings:
    """Load a `[slide_menu]` table (with optional dimensions/theme subtables) from TOML."""

    with Path(path).open("rb") as fh:
        data = tomllib.load(fh)
    return parse_slide_menu_settings(data)


def parse_slide_menu_settings(data: Mapping[str, Any]) -> SlideMenuSettings:
    section = data.get("slide_menu")
    if section is None:
        return SlideMenuSettings()
    if not isinstance(section, Mapping):
        raise ValueError("`slide_menu` must be a table")
    dimensions = section.get("dimensions")
    theme = section.get("theme")
    if dimensions is not None and not isinstance(dimensions, Mapping):
        raise ValueError("`slide_menu.dimensions` must be a table")
    if theme is not None and not isinstance(theme, Mapping):
        raise ValueError("`slide_menu.theme` must be a table")
    attrs = {k: v for k, v in section.items() if k not in ("dimensions", "theme")}
    return SlideMenuSettings(
        config=parse_slide_menu_attrs(attrs),
        dimensions=validate_dimensions(dimensions),
        theme=validate_theme_tokens(theme),
    )


def _optional_text(attrs: Mapping[str, Any], key: str) -> str | None:
    value = attrs.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        raise ValueError(f"Attribute `{key}` must be a string")
    return value
