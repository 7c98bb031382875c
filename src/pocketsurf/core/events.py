"""
Event bus for Pocket Surf.

Connects the input layer, the ride session and the window with synchronous
pub/sub. Every handler runs inside the frame that emitted the event.
"""

from dataclasses import dataclass, field
from typing import Any, Callable
from enum import Enum, auto
from collections import defaultdict
import logging
import time

logger = logging.getLogger(__name__)


class EventType(Enum):
    """Built-in event types."""
    # Input events
    ACTION = auto()  # Start / pump / retry, depending on status

    # Ride events
    STATUS_CHANGED = auto()
    LEVEL_STARTED = auto()
    LEVEL_CLEARED = auto()
    WIPEOUT = auto()
    PUMP = auto()

    # System events
    TICK = auto()  # Frame tick
    SHUTDOWN = auto()


@dataclass
class Event:
    """
    Event data container.

    Attributes:
        type: Event type
        data: Event payload
        source: Component that emitted the event
        timestamp: When event was created
    """
    type: EventType
    data: dict[str, Any] = field(default_factory=dict)
    source: str = "system"
    timestamp: float = field(default_factory=time.monotonic)


Handler = Callable[[Event], None]


class EventBus:
    """
    Central event bus for component communication.

    Keeps a short history of emitted events for the debug panel. TICK
    fires every frame and is left out so it cannot push ride events out.
    """

    # Per-frame events are never kept in the history
    UNRECORDED = frozenset({EventType.TICK})

    def __init__(self, history_limit: int = 100) -> None:
        self._handlers: dict[EventType, list[Handler]] = defaultdict(list)
        self._global_handlers: list[Handler] = []
        self._event_history: list[Event] = []
        self._history_limit = history_limit

    def subscribe(self, event_type: EventType, handler: Handler) -> Callable[[], None]:
        """
        Subscribe to an event type.

        Args:
            event_type: Type of event to listen for
            handler: Callback function

        Returns:
            Unsubscribe function
        """
        self._handlers[event_type].append(handler)
        logger.debug(f"Handler subscribed to {event_type.name}")

        def unsubscribe() -> None:
            if handler in self._handlers[event_type]:
                self._handlers[event_type].remove(handler)
                logger.debug(f"Handler unsubscribed from {event_type.name}")

        return unsubscribe

    def subscribe_all(self, handler: Handler) -> Callable[[], None]:
        """Subscribe to every event type."""
        self._global_handlers.append(handler)

        def unsubscribe() -> None:
            if handler in self._global_handlers:
                self._global_handlers.remove(handler)

        return unsubscribe

    def emit(self, event: Event) -> None:
        """Emit an event to all matching handlers immediately."""
        self._add_to_history(event)

        handlers = self._handlers.get(event.type, []) + self._global_handlers
        for handler in handlers:
            try:
                handler(event)
            except Exception:
                logger.exception(f"Error in handler for {event.type.name}")

    def _add_to_history(self, event: Event) -> None:
        """Add event to history, maintaining limit."""
        if event.type in self.UNRECORDED:
            return
        self._event_history.append(event)
        if len(self._event_history) > self._history_limit:
            self._event_history.pop(0)

    def get_history(
        self,
        event_type: EventType | None = None,
        limit: int = 10
    ) -> list[Event]:
        """Get recent events from history."""
        history = self._event_history
        if event_type is not None:
            history = [e for e in history if e.type == event_type]
        return history[-limit:]

    def clear_history(self) -> None:
        """Clear event history."""
        self._event_history.clear()


def action_event(source: str = "input") -> Event:
    """Create a player action event."""
    return Event(EventType.ACTION, source=source)


def tick_event(timestamp_ms: float, frame: int) -> Event:
    """Create a frame tick event."""
    return Event(EventType.TICK, data={"timestamp": timestamp_ms, "frame": frame})
