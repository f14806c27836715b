from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import Callable

from slidemenu_ui.config import SlideMenuConfig
from slidemenu_ui.geometry import Rect
from slidemenu_ui.layout import DEFAULT_DIMENSIONS, LayoutSnapshot, MeasureSpec, SlideMenuDimensions, SlideMenuLayout
from slidemenu_ui.style.theme import DEFAULT_THEME, SlideMenuTheme

from .interaction import PointerEvent
from .paint import SlideMenuRenderBatch, SlideMenuRenderer, build_slide_menu_batch
from .touch import SlideMenuListener, TouchResult, TouchState, TouchStateMachine

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class CallbackSlideMenuListener:
    """Adapts a pair of plain callables to the listener protocol."""

    on_left: Callable[[], None] | None = None
    on_right: Callable[[], None] | None = None

    def on_slide_left(self) -> None:
        if self.on_left is not None:
            self.on_left()

    def on_slide_right(self) -> None:
        if self.on_right is not None:
            self.on_right()


class SlideMenu:
    """Slide button with a left and a right landing zone.

    The widget owns its layout rectangles and touch state. A host supplies the
    density, the on-screen bounds and widget-local pointer events, and paints
    whatever `render` hands to its renderer.

    - Rectangles are relative to the widget's top-left corner.
    - Geometry is computed on the first layout/draw pass and again on every
      forced pass (window focus or size change).
    - Releasing over a pending zone calls the registered listener, if any.
    """

    def __init__(
        self,
        config: SlideMenuConfig | None = None,
        *,
        dimensions: SlideMenuDimensions = DEFAULT_DIMENSIONS,
        theme: SlideMenuTheme = DEFAULT_THEME,
        component_id: str = "slide_menu",
    ) -> None:
        self.component_id = component_id
        self._config = config if config is not None else SlideMenuConfig()
        self._theme = theme
        self._layout = SlideMenuLayout(dimensions)
        self._touch = TouchStateMachine()
        self._listener: SlideMenuListener | None = None
        self._redraw_pending = True

    @property
    def left_text(self) -> str | None:
        return self._config.left_text

    def set_left_text(self, text: str | None) -> None:
        self._config.left_text = text
        self._redraw_pending = True

    @property
    def right_text(self) -> str | None:
        return self._config.right_text

    def set_right_text(self, text: str | None) -> None:
        self._config.right_text = text
        self._redraw_pending = True

    @property
    def config(self) -> SlideMenuConfig:
        return self._config

    @property
    def theme(self) -> SlideMenuTheme:
        return self._theme

    def set_theme(self, theme: SlideMenuTheme) -> None:
        self._theme = theme
        self._redraw_pending = True

    @property
    def listener(self) -> SlideMenuListener | None:
        return self._listener

    def set_on_slide_menu_listener(self, listener: SlideMenuListener | None) -> None:
        self._listener = listener

    @property
    def touch_state(self) -> TouchState:
        return self._touch.state

    @property
    def touch_start(self) -> tuple[float, float] | None:
        return self._touch.start_position

    @property
    def layout_snapshot(self) -> LayoutSnapshot:
        return self._layout.snapshot

    @property
    def own_rect(self) -> Rect:
        return self._layout.snapshot.own

    @property
    def clip_rect(self) -> Rect:
        return self._layout.snapshot.clip

    @property
    def left_zone_rect(self) -> Rect:
        return self._layout.snapshot.left_zone

    @property
    def right_zone_rect(self) -> Rect:
        return self._layout.snapshot.right_zone

    @property
    def layout_ready(self) -> bool:
        return self._layout.ready

    @property
    def redraw_pending(self) -> bool:
        return self._redraw_pending

    def consume_redraw(self) -> bool:
        pending = self._redraw_pending
        self._redraw_pending = False
        return pending

    def measure(self, width_spec: MeasureSpec, height_spec: MeasureSpec, density: float) -> tuple[int, int]:
        return self._layout.measure(width_spec, height_spec, density)

    def compute_layout(self, bounds: Rect | None, density: float, *, force: bool = False) -> LayoutSnapshot:
        """Compute the layout rectangles from host-reported on-screen bounds.

        Without `force` this only runs until the first successful pass.
        """

        before = self._layout.snapshot
        if force:
            snapshot = self._layout.recompute(bounds, density)
        else:
            snapshot = self._layout.ensure_ready(bounds, density)
        if snapshot != before:
            self._redraw_pending = True
        return snapshot

    def handle_pointer_event(self, event: PointerEvent) -> bool:
        """Feed one widget-local pointer event; returns False when not handled."""

        result = self.dispatch_pointer_event(event)
        return result.handled

    def dispatch_pointer_event(self, event: PointerEvent) -> TouchResult:
        snapshot = self._layout.snapshot
        try:
            result = self._touch.handle(
                event,
                left_zone=snapshot.left_zone,
                right_zone=snapshot.right_zone,
                listener=self._listener,
            )
        except Exception:
            # Listener failed after the machine already went back to idle.
            self._redraw_pending = True
            raise
        if result.redraw_requested:
            self._redraw_pending = True
        return result

    def render_batch(self) -> SlideMenuRenderBatch:
        return build_slide_menu_batch(
            self._layout.snapshot,
            self._touch.state,
            self._config,
            self._theme,
            stroke_width_mm=self._layout.dimensions.stroke_width_mm,
        )

    def render(self, renderer: SlideMenuRenderer) -> SlideMenuRenderBatch:
        batch = self.render_batch()
        renderer.draw_slide_menu_batch(batch)
        self._redraw_pending = False
        return batch
