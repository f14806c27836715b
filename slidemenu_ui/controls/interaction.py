from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Mapping


PointerAction = Literal["down", "move", "up", "other"]


@dataclass(frozen=True)
class PointerEvent:
    """Single-pointer event in widget-local coordinates."""

    action: PointerAction
    x: float
    y: float
    pointer_id: int = 0


def parse_pointer_event(event_type: str, payload: object) -> PointerEvent | None:
    """Parse a normalized `pointer` event into a typed control interaction event.

    Unknown actions are kept as `other` so the widget can report them unhandled
    instead of having them silently dropped here.
    """

    if event_type != "pointer" or not isinstance(payload, Mapping):
        return None
    x = payload.get("x")
    y = payload.get("y")
    if isinstance(x, bool) or isinstance(y, bool):
        return None
    if not isinstance(x, (int, float)) or not isinstance(y, (int, float)):
        return None
    action = payload.get("action")
    if action not in {"down", "move", "up"}:
        action = "other"
    raw_pointer_id = payload.get("pointer_id", 0)
    pointer_id = raw_pointer_id if isinstance(raw_pointer_id, int) and not isinstance(raw_pointer_id, bool) else 0
    return PointerEvent(action=action, x=float(x), y=float(y), pointer_id=pointer_id)
