from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import Literal, Protocol

from slidemenu_ui.geometry import Rect

from .interaction import PointerEvent

LOGGER = logging.getLogger(__name__)

TouchState = Literal["idle", "left_pending", "right_pending"]
SlideDirection = Literal["left", "right"]


class SlideMenuListener(Protocol):
    def on_slide_left(self) -> None:
        ...

    def on_slide_right(self) -> None:
        ...


@dataclass(frozen=True)
class TouchResult:
    handled: bool
    state: TouchState
    redraw_requested: bool = False
    fired: SlideDirection | None = None


@dataclass
class TouchStateMachine:
    """Idle/left/right pending machine driven by single-pointer events.

    Only a release while a zone is pending fires. Touching down inside a zone and
    lifting elsewhere does not.
    """

    state: TouchState = "idle"
    start_position: tuple[float, float] | None = None

    def handle(
        self,
        event: PointerEvent,
        *,
        left_zone: Rect,
        right_zone: Rect,
        listener: SlideMenuListener | None = None,
    ) -> TouchResult:
        if event.action == "down":
            return self._on_down(event)
        if event.action == "move":
            return self._on_move(event, left_zone=left_zone, right_zone=right_zone)
        if event.action == "up":
            return self._on_up(listener)
        return TouchResult(handled=False, state=self.state)

    def reset(self) -> None:
        self.state = "idle"
        self.start_position = None

    def _on_down(self, event: PointerEvent) -> TouchResult:
        was_pending = self.state != "idle"
        self.state = "idle"
        self.start_position = (event.x, event.y)
        LOGGER.debug("touch down at x=%s, y=%s", event.x, event.y)
        return TouchResult(handled=True, state=self.state, redraw_requested=was_pending)

    def _on_move(self, event: PointerEvent, *, left_zone: Rect, right_zone: Rect) -> TouchResult:
        if left_zone.contains(event.x, event.y):
            target: TouchState = "left_pending"
        elif right_zone.contains(event.x, event.y):
            target = "right_pending"
        else:
            target = "idle"
        changed = target != self.state
        self.state = target
        return TouchResult(handled=True, state=self.state, redraw_requested=changed)

    def _on_up(self, listener: SlideMenuListener | None) -> TouchResult:
        pending = self.state
        self.state = "idle"
        self.start_position = None
        fired: SlideDirection | None = None
        if pending == "left_pending":
            fired = "left"
        elif pending == "right_pending":
            fired = "right"
        if fired is not None:
            if listener is None:
                LOGGER.debug("slide %s released with no listener registered", fired)
            elif fired == "left":
                LOGGER.debug("dispatching slide left")
                listener.on_slide_left()
            else:
                LOGGER.debug("dispatching slide right")
                listener.on_slide_right()
        return TouchResult(handled=True, state=self.state, redraw_requested=True, fired=fired)
