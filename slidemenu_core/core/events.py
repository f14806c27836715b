from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Optional


EventType = Literal[
    "pointer_down",
    "pointer_move",
    "pointer_up",
    "pointer_cancel",
    "wheel",
    "key_down",
    "key_up",
]


@dataclass(frozen=True)
class InputEvent:
    """Raw host input in screen coordinates."""

    event_type: EventType
    timestamp: float
    x: Optional[float] = None
    y: Optional[float] = None
    pointer_id: int = 0
    key: Optional[str] = None
