from .events import EventType, InputEvent
from .host import SlideMenuHost

__all__ = [
    "EventType",
    "InputEvent",
    "SlideMenuHost",
]
