from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, Union

from slidemenu_ui.config import SlideMenuConfig
from slidemenu_ui.geometry import Rect, mm_to_pixels
from slidemenu_ui.layout import LayoutSnapshot
from slidemenu_ui.style.theme import SlideMenuTheme

from .touch import TouchState


@dataclass(frozen=True)
class FillRectCommand:
    rect: Rect
    color_hex: str


@dataclass(frozen=True)
class StrokeCircleCommand:
    cx: float
    cy: float
    radius: float
    stroke_width: float
    color_hex: str


@dataclass(frozen=True)
class LabelCommand:
    """Text centered inside `rect`."""

    text: str
    rect: Rect
    color_hex: str
    font_family: str
    font_size_px: float


PaintCommand = Union[FillRectCommand, StrokeCircleCommand, LabelCommand]


@dataclass(frozen=True)
class SlideMenuRenderBatch:
    """Render list for one pass, in widget-local coordinates.

    `origin` is where the widget's (0, 0) lands on the target surface. Backends
    must clip every command to `clip`.
    """

    clip: Rect
    origin: tuple[int, int]
    commands: tuple[PaintCommand, ...]


class SlideMenuRenderer(Protocol):
    """Backend-agnostic renderer for slide menu paint calls."""

    def draw_slide_menu_batch(self, batch: SlideMenuRenderBatch) -> None:
        ...


def build_slide_menu_batch(
    snapshot: LayoutSnapshot,
    state: TouchState,
    config: SlideMenuConfig,
    theme: SlideMenuTheme,
    *,
    stroke_width_mm: float = 1.0,
) -> SlideMenuRenderBatch:
    if not snapshot.ready:
        return SlideMenuRenderBatch(clip=Rect.EMPTY, origin=snapshot.origin, commands=())

    own = snapshot.own
    stroke_px = float(max(1, mm_to_pixels(stroke_width_mm, snapshot.density)))
    # Keep the stroke inside the square.
    radius = max(0.0, own.width / 2.0 - stroke_px / 2.0)
    commands: list[PaintCommand] = [
        FillRectCommand(rect=snapshot.clip, color_hex=theme.background),
        StrokeCircleCommand(
            cx=own.left + own.width / 2.0,
            cy=own.top + own.height / 2.0,
            radius=radius,
            stroke_width=stroke_px,
            color_hex=theme.circle_stroke,
        ),
    ]
    if state == "left_pending":
        commands.extend(_zone_commands(snapshot.left_zone, theme.left_zone, config.left_text, theme))
    elif state == "right_pending":
        commands.extend(_zone_commands(snapshot.right_zone, theme.right_zone, config.right_text, theme))
    return SlideMenuRenderBatch(clip=snapshot.clip, origin=snapshot.origin, commands=tuple(commands))


def _zone_commands(zone: Rect, color_hex: str, text: str | None, theme: SlideMenuTheme) -> list[PaintCommand]:
    if zone.is_empty():
        return []
    out: list[PaintCommand] = [FillRectCommand(rect=zone, color_hex=color_hex)]
    if text:
        out.append(
            LabelCommand(
                text=text,
                rect=zone,
                color_hex=theme.label_text,
                font_family=theme.font_family,
                font_size_px=theme.font_size_px,
            )
        )
    return out
