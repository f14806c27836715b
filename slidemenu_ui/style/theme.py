from __future__ import annotations

from dataclasses import asdict, dataclass
import re
from typing import Any, Mapping

_HEX_COLOR = re.compile(r"^#[0-9a-fA-F]{6}([0-9a-fA-F]{2})?$")

_COLOR_TOKENS = (
    "background",
    "circle_stroke",
    "left_zone",
    "right_zone",
    "label_text",
)


@dataclass(frozen=True)
class SlideMenuTheme:
    """Immutable paint values for the slide menu; the draw step never mutates them."""

    # `#RRGGBB` or `#RRGGBBAA`, alpha last.
    background: str = "#408133FF"
    circle_stroke: str = "#3F51B5"
    left_zone: str = "#4CAF50"
    right_zone: str = "#F44336"
    label_text: str = "#FFFFFF"
    font_family: str = "System"
    font_size_px: float = 14.0


DEFAULT_THEME = SlideMenuTheme()


def validate_theme_tokens(overrides: Mapping[str, Any] | None = None) -> SlideMenuTheme:
    """Validate and merge user token overrides against the default theme."""

    raw: dict[str, Any] = asdict(DEFAULT_THEME)
    if overrides:
        for key, value in overrides.items():
            if key not in raw:
                raise ValueError(f"Unknown theme token: {key}")
            raw[key] = value

    for key in _COLOR_TOKENS:
        if not isinstance(raw[key], str) or not _HEX_COLOR.match(raw[key]):
            raise ValueError(f"Token `{key}` must be a hex color (#RRGGBB or #RRGGBBAA)")

    if not isinstance(raw["font_family"], str) or not raw["font_family"].strip():
        raise ValueError("Token `font_family` must be a non-empty string")

    if (
        isinstance(raw["font_size_px"], bool)
        or not isinstance(raw["font_size_px"], (int, float))
        or float(raw["font_size_px"]) <= 0
    ):
        raise ValueError("Token `font_size_px` must be a positive number")

    return SlideMenuTheme(
        background=str(raw["background"]),
        circle_stroke=str(raw["circle_stroke"]),
        left_zone=str(raw["left_zone"]),
        right_zone=str(raw["right_zone"]),
        label_text=str(raw["label_text"]),
        font_family=str(raw["font_family"]),
        font_size_px=float(raw["font_size_px"]),
    )


def parse_hex_color(value: str) -> tuple[int, int, int, int]:
    if not isinstance(value, str) or not _HEX_COLOR.match(value.strip()):
        raise ValueError(f"color must be #RRGGBB or #RRGGBBAA, got `{value}`")
    raw = value.strip()[1:]
    alpha = int(raw[6:8], 16) if len(raw) == 8 else 255
    return (int(raw[0:2], 16), int(raw[2:4], 16), int(raw[4:6], 16), alpha)
