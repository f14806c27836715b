from __future__ import annotations

from dataclasses import dataclass
import math
from typing import ClassVar, Literal


# Density-independent pixels per millimeter.
DP_PER_MM = 6.299
# Density-independent pixels per inch on the reference (density 1.0) screen.
BASELINE_DPI = 160.0

ZoneSide = Literal["left", "right"]


@dataclass(frozen=True)
class PhysicalSize:
    width_mm: float
    height_mm: float

    def __post_init__(self) -> None:
        if not (math.isfinite(self.width_mm) and math.isfinite(self.height_mm)):
            raise ValueError("PhysicalSize width/height must be finite")
        if self.width_mm < 0 or self.height_mm < 0:
            raise ValueError("PhysicalSize width/height must be >= 0")


@dataclass(frozen=True)
class DensityContext:
    """Pixel density reported by the host (Android-style: 1.0 at 160 dpi)."""

    density: float

    def __post_init__(self) -> None:
        if not math.isfinite(self.density):
            raise ValueError("density must be finite")

    @classmethod
    def from_dpi(cls, dpi: float) -> "DensityContext":
        return cls(density=float(dpi) / BASELINE_DPI)

    def to_pixels(self, mm: float) -> int:
        return mm_to_pixels(mm, self.density)


@dataclass(frozen=True)
class Rect:
    """Integer pixel rectangle with half-open containment.

    A point is inside when `left <= x < right` and `top <= y < bottom`, so two
    rectangles sharing an edge never both claim a point on it.
    """

    left: int
    top: int
    right: int
    bottom: int

    EMPTY: ClassVar["Rect"]

    @classmethod
    def from_size(cls, x: int, y: int, width: int, height: int) -> "Rect":
        return cls(left=x, top=y, right=x + width, bottom=y + height)

    @property
    def width(self) -> int:
        return self.right - self.left

    @property
    def height(self) -> int:
        return self.bottom - self.top

    def is_empty(self) -> bool:
        return self.right <= self.left or self.bottom <= self.top

    def contains(self, x: float, y: float) -> bool:
        return self.left <= x < self.right and self.top <= y < self.bottom

    def contains_rect(self, other: "Rect") -> bool:
        if other.is_empty():
            return True
        if self.is_empty():
            return False
        return (
            self.left <= other.left
            and self.top <= other.top
            and other.right <= self.right
            and other.bottom <= self.bottom
        )

    def intersects(self, other: "Rect") -> bool:
        if self.is_empty() or other.is_empty():
            return False
        return (
            self.left < other.right
            and other.left < self.right
            and self.top < other.bottom
            and other.top < self.bottom
        )

    def offset(self, dx: int, dy: int) -> "Rect":
        return Rect(self.left + dx, self.top + dy, self.right + dx, self.bottom + dy)

    def union(self, other: "Rect") -> "Rect":
        """Smallest rectangle covering both; an empty side contributes nothing."""

        if other.is_empty():
            return self
        if self.is_empty():
            return other
        return Rect(
            min(self.left, other.left),
            min(self.top, other.top),
            max(self.right, other.right),
            max(self.bottom, other.bottom),
        )


Rect.EMPTY = Rect(0, 0, 0, 0)


def mm_to_pixels(mm: float, density: float) -> int:
    """Convert millimeters to device pixels.

    Every layout computation goes through this one conversion so that
    neighbouring rectangles round identically.
    """

    return int(round(float(mm) * DP_PER_MM * float(density)))


def compute_own_size(side_mm: float, density: float) -> tuple[int, int]:
    side_px = max(0, mm_to_pixels(side_mm, density))
    return (side_px, side_px)


def compute_clip_rect(
    own_rect: Rect,
    additional_top_mm: float,
    additional_left_mm: float,
    additional_right_mm: float,
    density: float,
) -> Rect:
    """Grow `own_rect` upward and sideways; the bottom edge stays put.

    An empty `own_rect` means the host has not positioned the widget yet, and the
    clip is empty as well.
    """

    if own_rect.is_empty():
        return Rect.EMPTY
    top_px = max(0, mm_to_pixels(additional_top_mm, density))
    left_px = max(0, mm_to_pixels(additional_left_mm, density))
    right_px = max(0, mm_to_pixels(additional_right_mm, density))
    return Rect(
        left=own_rect.left - left_px,
        top=own_rect.top - top_px,
        right=own_rect.right + right_px,
        bottom=own_rect.bottom,
    )


def compute_landing_zone(
    own_rect: Rect,
    zone_width_mm: float,
    zone_height_mm: float,
    density: float,
    side: ZoneSide,
) -> Rect:
    if own_rect.is_empty():
        return Rect.EMPTY
    width_px = mm_to_pixels(zone_width_mm, density)
    height_px = mm_to_pixels(zone_height_mm, density)
    if width_px <= 0 or height_px <= 0:
        return Rect.EMPTY
    top = own_rect.bottom - height_px
    if side == "left":
        return Rect(left=own_rect.left - width_px, top=top, right=own_rect.left, bottom=own_rect.bottom)
    if side == "right":
        return Rect(left=own_rect.right, top=top, right=own_rect.right + width_px, bottom=own_rect.bottom)
    raise ValueError(f"unknown landing zone side: {side}")
