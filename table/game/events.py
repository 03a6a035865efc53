"""Game events for the event system."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum, auto
from typing import Any, Callable


class EventType(Enum):
    """Types of table events."""

    # Round flow events
    ROUND_STARTED = auto()
    ROUND_ABORTED = auto()

    # Betting events
    BET_PLACED = auto()
    BET_COERCED = auto()
    BETTING_COMPLETE = auto()

    # Card events
    SHOE_BUILT = auto()
    CARD_DEALT = auto()
    DEALING_STARTED = auto()
    DEALING_STOPPED = auto()
    DEALING_COMPLETE = auto()

    # Seat action events
    SEAT_HIT = auto()
    SEAT_STOOD = auto()
    SEAT_DOUBLED = auto()
    SEAT_BUSTED = auto()
    SEAT_BLACKJACK = auto()
    TURN_ADVANCED = auto()
    DECISIONS_COMPLETE = auto()

    # Automated play events
    AUTO_PLAY_STARTED = auto()
    AUTO_PLAY_STOPPED = auto()

    # Error events
    INVALID_SEAT_TURN = auto()
    SHOE_EXHAUSTED = auto()


@dataclass(frozen=True)
class GameEvent:
    """
    Immutable table event.

    Events are the primary communication mechanism between the core engine
    and the presentation layer.
    """

    event_type: EventType
    data: dict[str, Any] = field(default_factory=dict)
    timestamp: datetime = field(default_factory=datetime.now)

    def __str__(self) -> str:
        return f"{self.event_type.name}: {self.data}"


# Type alias for event handlers
EventHandler = Callable[[GameEvent], None]


class EventEmitter:
    """
    Simple event emitter for table events.

    Allows subscribing to specific event types or all events.
    """

    def __init__(self) -> None:
        self._handlers: dict[EventType | None, list[EventHandler]] = {}
        self._event_history: list[GameEvent] = []

    def subscribe(
        self,
        handler: EventHandler,
        event_type: EventType | None = None,
    ) -> None:
        """
        Subscribe to events.

        Args:
            handler: Function to call when event occurs
            event_type: Specific event type to subscribe to, or None for all events
        """
        self._handlers.setdefault(event_type, []).append(handler)

    def unsubscribe(
        self,
        handler: EventHandler,
        event_type: EventType | None = None,
    ) -> None:
        """Remove a handler; unknown handlers are ignored."""
        handlers = self._handlers.get(event_type, [])
        if handler in handlers:
            handlers.remove(handler)

    def emit(self, event: GameEvent) -> None:
        """Record an event and call type-specific then catch-all handlers."""
        self._event_history.append(event)

        for handler in list(self._handlers.get(event.event_type, [])):
            handler(event)

        for handler in list(self._handlers.get(None, [])):
            handler(event)

    def emit_new(
        self,
        event_type: EventType,
        **data: Any,
    ) -> GameEvent:
        """
        Create and emit a new event.

        Args:
            event_type: Type of event
            **data: Event data

        Returns:
            The created event
        """
        event = GameEvent(event_type=event_type, data=data)
        self.emit(event)
        return event

    @property
    def history(self) -> list[GameEvent]:
        """Return the event history."""
        return self._event_history.copy()

    def of_type(self, event_type: EventType) -> list[GameEvent]:
        """Return the recorded events of one type, oldest first."""
        return [e for e in self._event_history if e.event_type == event_type]

    def clear_history(self) -> None:
        self._event_history.clear()
