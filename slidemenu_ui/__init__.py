"""Slide menu widget: layout model, touch state machine and paint contracts."""

from .config import (
    SlideMenuConfig,
    SlideMenuSettings,
    load_slide_menu_config,
    parse_slide_menu_attrs,
    parse_slide_menu_settings,
)
from .controls.interaction import PointerAction, PointerEvent, parse_pointer_event
from .controls.paint import SlideMenuRenderBatch, SlideMenuRenderer, build_slide_menu_batch
from .controls.slide_menu import CallbackSlideMenuListener, SlideMenu
from .controls.touch import SlideMenuListener, TouchResult, TouchState, TouchStateMachine
from .geometry import (
    DP_PER_MM,
    DensityContext,
    PhysicalSize,
    Rect,
    compute_clip_rect,
    compute_landing_zone,
    compute_own_size,
    mm_to_pixels,
)
from .layout import (
    DEFAULT_DIMENSIONS,
    LayoutSnapshot,
    MeasureSpec,
    SlideMenuDimensions,
    SlideMenuLayout,
    resolve_size,
    validate_dimensions,
)
from .style.theme import DEFAULT_THEME, SlideMenuTheme, validate_theme_tokens

__all__ = [
    "CallbackSlideMenuListener",
    "DEFAULT_DIMENSIONS",
    "DEFAULT_THEME",
    "DP_PER_MM",
    "DensityContext",
    "LayoutSnapshot",
    "MeasureSpec",
    "PhysicalSize",
    "PointerAction",
    "PointerEvent",
    "Rect",
    "SlideMenu",
    "SlideMenuConfig",
    "SlideMenuDimensions",
    "SlideMenuLayout",
    "SlideMenuListener",
    "SlideMenuRenderBatch",
    "SlideMenuRenderer",
    "SlideMenuSettings",
    "SlideMenuTheme",
    "TouchResult",
    "TouchState",
    "TouchStateMachine",
    "build_slide_menu_batch",
    "compute_clip_rect",
    "compute_landing_zone",
    "compute_own_size",
    "load_slide_menu_config",
    "mm_to_pixels",
    "parse_pointer_event",
    "parse_slide_menu_attrs",
    "parse_slide_menu_settings",
    "resolve_size",
    "validate_dimensions",
    "validate_theme_tokens",
]
