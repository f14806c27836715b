"""Control components and interaction contracts for the slide menu."""

from .interaction import PointerAction, PointerEvent, parse_pointer_event
from .paint import (
    FillRectCommand,
    LabelCommand,
    PaintCommand,
    SlideMenuRenderBatch,
    SlideMenuRenderer,
    StrokeCircleCommand,
    build_slide_menu_batch,
)
from .slide_menu import CallbackSlideMenuListener, SlideMenu
from .touch import SlideDirection, SlideMenuListener, TouchResult, TouchState, TouchStateMachine

__all__ = [
    "CallbackSlideMenuListener",
    "FillRectCommand",
    "LabelCommand",
    "PaintCommand",
    "PointerAction",
    "PointerEvent",
    "SlideDirection",
    "SlideMenu",
    "SlideMenuListener",
    "SlideMenuRenderBatch",
    "SlideMenuRenderer",
    "StrokeCircleCommand",
    "TouchResult",
    "TouchState",
    "TouchStateMachine",
    "build_slide_menu_batch",
    "parse_pointer_event",
]
