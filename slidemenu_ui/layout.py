from __future__ import annotations

from dataclasses import asdict, dataclass, fields
import logging
import math
from typing import Any, Literal, Mapping

from .geometry import (
    PhysicalSize,
    Rect,
    compute_clip_rect,
    compute_landing_zone,
    compute_own_size,
)

LOGGER = logging.getLogger(__name__)

MeasureMode = Literal["exactly", "at_most", "unspecified"]


@dataclass(frozen=True)
class SlideMenuDimensions:
    """Physical (millimeter) constants describing the widget and its menus."""

    side_mm: float = 9.0
    additional_top_mm: float = 9.0
    additional_left_mm: float = 11.0
    additional_right_mm: float = 11.0
    zone_width_mm: float = 9.0
    zone_height_mm: float = 9.0
    stroke_width_mm: float = 1.0

    def __post_init__(self) -> None:
        for item in fields(self):
            value = getattr(self, item.name)
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise ValueError(f"Dimension `{item.name}` must be a number of millimeters")
            if not math.isfinite(value) or value < 0:
                raise ValueError(f"Dimension `{item.name}` must be a finite number >= 0")
        if self.side_mm <= 0:
            raise ValueError("Dimension `side_mm` must be > 0")
        # Landing zones must fit inside the clip area at every density.
        if self.zone_width_mm > min(self.additional_left_mm, self.additional_right_mm):
            raise ValueError("Dimension `zone_width_mm` must not exceed the left/right margins")
        if self.zone_height_mm > max(self.side_mm, self.additional_top_mm):
            raise ValueError("Dimension `zone_height_mm` must not exceed max(side_mm, additional_top_mm)")

    @property
    def own_size(self) -> PhysicalSize:
        return PhysicalSize(self.side_mm, self.side_mm)

    @property
    def zone_size(self) -> PhysicalSize:
        return PhysicalSize(self.zone_width_mm, self.zone_height_mm)

    @property
    def full_size(self) -> PhysicalSize:
        return PhysicalSize(
            self.side_mm + self.additional_left_mm + self.additional_right_mm,
            self.side_mm + self.additional_top_mm,
        )


DEFAULT_DIMENSIONS = SlideMenuDimensions()


def validate_dimensions(overrides: Mapping[str, Any] | None = None) -> SlideMenuDimensions:
    """Merge millimeter overrides with the defaults.

    Range and containment rules live on `SlideMenuDimensions` itself, so a
    directly constructed instance is held to the same checks.
    """

    raw: dict[str, Any] = asdict(DEFAULT_DIMENSIONS)
    if overrides:
        for key, value in overrides.items():
            if key not in raw:
                raise ValueError(f"Unknown dimension: {key}")
            raw[key] = value

    for key, value in raw.items():
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ValueError(f"Dimension `{key}` must be a number of millimeters")
        raw[key] = float(value)
    return SlideMenuDimensions(**raw)


@dataclass(frozen=True)
class MeasureSpec:
    mode: MeasureMode = "unspecified"
    size: int = 0

    def __post_init__(self) -> None:
        if self.mode not in ("exactly", "at_most", "unspecified"):
            raise ValueError(f"unknown measure mode: {self.mode}")
        if self.size < 0:
            raise ValueError("MeasureSpec size must be >= 0")


def resolve_size(desired: int, spec: MeasureSpec) -> int:
    if spec.mode == "exactly":
        return spec.size
    if spec.mode == "at_most":
        return min(desired, spec.size)
    return desired


@dataclass(frozen=True)
class LayoutSnapshot:
    """The four layout rectangles, in coordinates relative to the widget origin.

    `origin` is the widget's last known on-screen top-left corner; it is kept for
    translating host input, never baked into the rectangles.
    """

    own: Rect
    clip: Rect
    left_zone: Rect
    right_zone: Rect
    density: float = 0.0
    origin: tuple[int, int] = (0, 0)

    @property
    def ready(self) -> bool:
        return not self.own.is_empty()


NOT_READY = LayoutSnapshot(own=Rect.EMPTY, clip=Rect.EMPTY, left_zone=Rect.EMPTY, right_zone=Rect.EMPTY)


def compute_snapshot(
    dimensions: SlideMenuDimensions,
    bounds: Rect,
    density: float,
) -> LayoutSnapshot:
    """Build all four rectangles from the host-reported on-screen bounds."""

    own = Rect.from_size(0, 0, bounds.width, bounds.height)
    if own.is_empty() or density <= 0:
        return NOT_READY
    left_zone = compute_landing_zone(own, dimensions.zone_width_mm, dimensions.zone_height_mm, density, "left")
    right_zone = compute_landing_zone(own, dimensions.zone_width_mm, dimensions.zone_height_mm, density, "right")
    clip = compute_clip_rect(
        own,
        dimensions.additional_top_mm,
        dimensions.additional_left_mm,
        dimensions.additional_right_mm,
        density,
    )
    # Host bounds may be shorter than the zones, so the clip grows to cover them.
    clip = clip.union(left_zone).union(right_zone)
    return LayoutSnapshot(
        own=own,
        clip=clip,
        left_zone=left_zone,
        right_zone=right_zone,
        density=float(density),
        origin=(bounds.left, bounds.top),
    )


class SlideMenuLayout:
    """Lazily computed layout state for one widget instance."""

    def __init__(self, dimensions: SlideMenuDimensions = DEFAULT_DIMENSIONS) -> None:
        self._dimensions = dimensions
        self._snapshot = NOT_READY

    @property
    def dimensions(self) -> SlideMenuDimensions:
        return self._dimensions

    @property
    def snapshot(self) -> LayoutSnapshot:
        return self._snapshot

    @property
    def ready(self) -> bool:
        return self._snapshot.ready

    def measure(self, width_spec: MeasureSpec, height_spec: MeasureSpec, density: float) -> tuple[int, int]:
        width, height = compute_own_size(self._dimensions.side_mm, density)
        return (resolve_size(width, width_spec), resolve_size(height, height_spec))

    def ensure_ready(self, bounds: Rect | None, density: float) -> LayoutSnapshot:
        if self._snapshot.ready:
            return self._snapshot
        return self.recompute(bounds, density)

    def recompute(self, bounds: Rect | None, density: float) -> LayoutSnapshot:
        if bounds is None or bounds.is_empty():
            LOGGER.warning("layout pass skipped: widget bounds unavailable (%s)", bounds)
            self._snapshot = NOT_READY
            return self._snapshot
        if density <= 0:
            LOGGER.warning("layout pass skipped: non-positive density %s", density)
            self._snapshot = NOT_READY
            return self._snapshot
        self._snapshot = compute_snapshot(self._dimensions, bounds, density)
        return self._snapshot

    def reset(self) -> None:
        self._snapshot = NOT_READY
