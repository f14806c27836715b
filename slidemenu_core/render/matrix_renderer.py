from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache

import numpy as np
import torch

from PIL import Image, ImageDraw, ImageFont

from slidemenu_ui.controls.paint import (
    FillRectCommand,
    LabelCommand,
    SlideMenuRenderBatch,
    StrokeCircleCommand,
)
from slidemenu_ui.geometry import Rect
from slidemenu_ui.style.theme import parse_hex_color


@dataclass
class MatrixSlideMenuRenderer:
    """Torch-first renderer that rasterizes slide menu batches into an RGBA matrix."""

    _frame: torch.Tensor | None = None
    _grid_x: torch.Tensor | None = None
    _grid_y: torch.Tensor | None = None
    _clip: tuple[int, int, int, int] | None = None

    def begin_frame(self, width: int, height: int, clear_color: tuple[int, int, int, int] = (0, 0, 0, 255)) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("frame dimensions must be > 0")
        self._frame = torch.zeros((height, width, 4), dtype=torch.uint8)
        self._frame[:, :, 0] = clear_color[0]
        self._frame[:, :, 1] = clear_color[1]
        self._frame[:, :, 2] = clear_color[2]
        self._frame[:, :, 3] = clear_color[3]
        self._grid_x = torch.arange(width, dtype=torch.float32).unsqueeze(0).expand(height, width)
        self._grid_y = torch.arange(height, dtype=torch.float32).unsqueeze(1).expand(height, width)

    def draw_slide_menu_batch(self, batch: SlideMenuRenderBatch) -> None:
        if self._frame is None:
            raise RuntimeError("begin_frame must be called before draw_slide_menu_batch")
        if batch.clip.is_empty() or not batch.commands:
            return
        ox, oy = batch.origin
        clip = batch.clip.offset(ox, oy)
        height, width = self._frame.shape[0], self._frame.shape[1]
        x0 = max(0, clip.left)
        y0 = max(0, clip.top)
        x1 = min(width, clip.right)
        y1 = min(height, clip.bottom)
        if x1 <= x0 or y1 <= y0:
            return
        self._clip = (x0, y0, x1, y1)
        try:
            for command in batch.commands:
                if isinstance(command, FillRectCommand):
                    rect = command.rect.offset(ox, oy)
                    self._blend_rect(rect, parse_hex_color(command.color_hex))
                elif isinstance(command, StrokeCircleCommand):
                    self._stroke_circle(command, ox, oy)
                elif isinstance(command, LabelCommand):
                    self._draw_label(command, ox, oy)
                else:
                    raise ValueError(f"unsupported paint command: {type(command).__name__}")
        finally:
            self._clip = None

    def end_frame(self) -> torch.Tensor:
        if self._frame is None:
            raise RuntimeError("begin_frame must be called before end_frame")
        out = self._frame.clone()
        self._frame = None
        self._grid_x = None
        self._grid_y = None
        return out

    def _clip_bounds(self, x0: int, y0: int, x1: int, y1: int) -> tuple[int, int, int, int] | None:
        if self._frame is None:
            return None
        cx0, cy0, cx1, cy1 = self._clip or (0, 0, self._frame.shape[1], self._frame.shape[0])
        x0 = max(x0, cx0)
        y0 = max(y0, cy0)
        x1 = min(x1, cx1)
        y1 = min(y1, cy1)
        if x1 <= x0 or y1 <= y0:
            return None
        return (x0, y0, x1, y1)

    def _blend_rect(self, rect: Rect, color: tuple[int, int, int, int]) -> None:
        if self._frame is None or rect.is_empty():
            return
        bounds = self._clip_bounds(rect.left, rect.top, rect.right, rect.bottom)
        if bounds is None:
            return
        x0, y0, x1, y1 = bounds
        alpha = color[3] / 255.0
        if alpha <= 0:
            return
        dst = self._frame[y0:y1, x0:x1, :3].to(torch.float32)
        src = torch.tensor(color[:3], dtype=torch.float32).view(1, 1, 3)
        out = torch.clamp(src * alpha + dst * (1.0 - alpha), 0, 255).to(torch.uint8)
        self._frame[y0:y1, x0:x1, :3] = out
        self._frame[y0:y1, x0:x1, 3] = 255

    def _stroke_circle(self, command: StrokeCircleCommand, ox: int, oy: int) -> None:
        if self._frame is None or self._grid_x is None or self._grid_y is None:
            return
        r = float(command.radius)
        if r <= 0:
            return
        cx = float(command.cx) + ox
        cy = float(command.cy) + oy
        bounds = self._clip_bounds(int(cx - r - 1), int(cy - r - 1), int(cx + r + 2), int(cy + r + 2))
        if bounds is None:
            return
        x0, y0, x1, y1 = bounds
        gx = self._grid_x[y0:y1, x0:x1] + 0.5
        gy = self._grid_y[y0:y1, x0:x1] + 0.5
        dist_sq = (gx - cx) ** 2 + (gy - cy) ** 2
        half = max(0.5, float(command.stroke_width) / 2.0)
        outer = r + half
        inner = max(0.0, r - half)
        mask = (dist_sq <= outer * outer) & (dist_sq >= inner * inner)
        self._blend_mask(mask, x=x0, y=y0, color=parse_hex_color(command.color_hex))

    def _draw_label(self, command: LabelCommand, ox: int, oy: int) -> None:
        if not command.text:
            return
        font = self._font(command.font_family, command.font_size_px)
        left, top, right, bottom = font.getbbox(command.text)
        width = max(1, int(right - left))
        height = max(1, int(bottom - top))
        image = Image.new("L", (width, height), 0)
        ImageDraw.Draw(image).text((-left, -top), command.text, fill=255, font=font)
        mask = np.asarray(image, dtype=np.uint8)
        rect = command.rect.offset(ox, oy)
        x = rect.left + (rect.width - width) // 2
        y = rect.top + (rect.height - height) // 2
        self._blend_alpha_mask(mask, x=x, y=y, color=parse_hex_color(command.color_hex))

    def _font(self, family: str, size_px: float) -> ImageFont.FreeTypeFont | ImageFont.ImageFont:
        return _load_font(family, max(1, int(round(size_px))))

    def _blend_mask(self, mask: torch.Tensor, *, x: int, y: int, color: tuple[int, int, int, int]) -> None:
        if self._frame is None:
            return
        h, w = mask.shape
        if h <= 0 or w <= 0 or not bool(mask.any()):
            return
        alpha = color[3] / 255.0
        if alpha <= 0:
            return
        dst = self._frame[y : y + h, x : x + w, :3].to(torch.float32)
        src = torch.tensor(color[:3], dtype=torch.float32).view(1, 1, 3)
        blended = torch.clamp(src * alpha + dst * (1.0 - alpha), 0, 255).to(torch.uint8)
        self._frame[y : y + h, x : x + w, :3] = torch.where(
            mask.unsqueeze(-1),
            blended,
            self._frame[y : y + h, x : x + w, :3],
        )
        self._frame[y : y + h, x : x + w, 3] = torch.where(
            mask,
            torch.full_like(self._frame[y : y + h, x : x + w, 3], 255),
            self._frame[y : y + h, x : x + w, 3],
        )

    def _blend_alpha_mask(self, mask: np.ndarray, *, x: int, y: int, color: tuple[int, int, int, int]) -> None:
        if self._frame is None:
            return
        h, w = mask.shape
        bounds = self._clip_bounds(x, y, x + w, y + h)
        if bounds is None:
            return
        x0, y0, x1, y1 = bounds
        coverage = torch.from_numpy(mask[y0 - y : y1 - y, x0 - x : x1 - x].copy()).to(torch.float32)
        coverage *= color[3] / (255.0 * 255.0)
        if not bool((coverage > 0).any()):
            return
        patch = self._frame[y0:y1, x0:x1]
        src = torch.tensor(color[:3], dtype=torch.float32).view(1, 1, 3)
        rgb = torch.lerp(patch[:, :, :3].to(torch.float32), src, coverage.unsqueeze(-1))
        patch[:, :, :3] = torch.clamp(rgb.round(), 0, 255).to(torch.uint8)
        patch[:, :, 3] = torch.maximum(patch[:, :, 3], (coverage * 255.0).round().to(torch.uint8))


# Looked up by file name; Pillow searches the platform font directories.
_FALLBACK_FONT_FILES = ("DejaVuSans.ttf", "Arial.ttf", "Helvetica.ttc")


@lru_cache(maxsize=64)
def _load_font(family: str, size: int) -> ImageFont.FreeTypeFont | ImageFont.ImageFont:
    names = (f"{family.strip()}.ttf",) if family.strip() else ()
    for name in names + _FALLBACK_FONT_FILES:
        try:
            return ImageFont.truetype(name, size=size)
        except OSError:
            continue
    return ImageFont.load_default(size=size)
