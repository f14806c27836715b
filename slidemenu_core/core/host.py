from __future__ import annotations

import logging

import torch

from slidemenu_core.render.matrix_renderer import MatrixSlideMenuRenderer
from slidemenu_ui.controls.interaction import PointerAction, PointerEvent
from slidemenu_ui.controls.slide_menu import SlideMenu
from slidemenu_ui.geometry import DensityContext, Rect
from slidemenu_ui.layout import MeasureSpec

from .events import InputEvent

LOGGER = logging.getLogger(__name__)

_POINTER_ACTIONS: dict[str, PointerAction] = {
    "pointer_down": "down",
    "pointer_move": "move",
    "pointer_up": "up",
}


class SlideMenuHost:
    """Minimal host view for a single slide menu on a screen-sized surface.

    Plays the platform's part: measures and positions the widget, reports focus
    and size changes, converts screen-space input into widget-local pointer
    events and paints the widget on request.
    """

    def __init__(
        self,
        widget: SlideMenu,
        density: DensityContext,
        *,
        screen_size: tuple[int, int],
        clear_color: tuple[int, int, int, int] = (255, 255, 255, 255),
    ) -> None:
        if screen_size[0] <= 0 or screen_size[1] <= 0:
            raise ValueError("screen_size must be > 0")
        self._widget = widget
        self._density = density
        self._screen_size = screen_size
        self._clear_color = clear_color
        self._bounds: Rect | None = None
        self.redraw_requests = 0

    @property
    def widget(self) -> SlideMenu:
        return self._widget

    @property
    def bounds(self) -> Rect | None:
        return self._bounds

    @property
    def density(self) -> DensityContext:
        return self._density

    def layout_pass(
        self,
        x: int,
        y: int,
        *,
        width_spec: MeasureSpec = MeasureSpec(),
        height_spec: MeasureSpec = MeasureSpec(),
    ) -> Rect:
        """Measure the widget and place its top-left corner at (x, y) on screen.

        Once the widget has a layout, a move or resize recomputes it so the
        snapshot origin follows the new position.
        """

        width, height = self._widget.measure(width_spec, height_spec, self._density.density)
        previous = self._bounds
        self._bounds = Rect.from_size(x, y, width, height)
        if self._widget.layout_ready and self._bounds != previous:
            self._widget.compute_layout(self._bounds, self._density.density, force=True)
        return self._bounds

    def window_focus_changed(self, has_focus: bool) -> None:
        LOGGER.debug("window focus changed: %s", has_focus)
        self._widget.compute_layout(self._bounds, self._density.density, force=True)

    def size_changed(self, width: int, height: int) -> None:
        if self._bounds is None:
            self._bounds = Rect.from_size(0, 0, width, height)
        else:
            self._bounds = Rect.from_size(self._bounds.left, self._bounds.top, width, height)
        self._widget.compute_layout(self._bounds, self._density.density, force=True)

    def set_density(self, density: DensityContext) -> None:
        self._density = density
        self._widget.compute_layout(self._bounds, density.density, force=True)

    def dispatch(self, event: InputEvent) -> bool:
        """Route one screen-space input event to the widget.

        Returns whether the widget handled it; unhandled events fall back to the
        host's default handling.
        """

        if event.x is None or event.y is None:
            return False
        origin_x, origin_y = (self._bounds.left, self._bounds.top) if self._bounds is not None else (0, 0)
        pointer = PointerEvent(
            action=_POINTER_ACTIONS.get(event.event_type, "other"),
            x=event.x - origin_x,
            y=event.y - origin_y,
            pointer_id=event.pointer_id,
        )
        result = self._widget.dispatch_pointer_event(pointer)
        if result.redraw_requested:
            self.redraw_requests += 1
        return result.handled

    def draw(self, renderer: MatrixSlideMenuRenderer | None = None) -> torch.Tensor:
        """Paint the widget onto a fresh screen-sized frame.

        The first draw also runs the one-time layout initialization.
        """

        self._widget.compute_layout(self._bounds, self._density.density)
        target = renderer or MatrixSlideMenuRenderer()
        width, height = self._screen_size
        target.begin_frame(width, height, self._clear_color)
        self._widget.render(target)
        return target.end_frame()
