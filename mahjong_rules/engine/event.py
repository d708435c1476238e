"""Event system for decoupling engine from UI and logging."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Dict, List


class EventType(Enum):
    ROUND_START = "round_start"
    ROUND_END = "round_end"
    DEAL = "deal"
    DRAW = "draw"
    DISCARD = "discard"
    CLAIMS_OPEN = "claims_open"
    CHI = "chi"
    PON = "pon"
    KAN = "kan"
    WALL_EXHAUSTED = "wall_exhausted"


@dataclass
class GameEvent:
    """An event emitted by the engine."""
    event_type: EventType
    data: Dict[str, Any] = field(default_factory=dict)


class EventBus:
    """Simple publish/subscribe event bus."""

    def __init__(self):
        self._listeners: Dict[EventType, List[Callable]] = {}

    def subscribe(self, event_type: EventType, callback: Callable):
        """Register a callback for an event type."""
        self._listeners.setdefault(event_type, []).append(callback)

    def emit(self, event: GameEvent):
        """Emit an event to all registered listeners."""
        for callback in self._listeners.get(event.event_type, []):
            callback(event)

    def clear(self):
        """Remove all listeners."""
        self._listeners.clear()
