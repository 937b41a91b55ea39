# ABOUTME: Event bus for notifying owners about resource cost payments
# ABOUTME: Lets UI and turn controllers react to spending without coupling to the core

from enum import Enum
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Any
import logging


logger = logging.getLogger(__name__)


class EventType(Enum):
    """
    Notifications emitted when a cost is applied to a resource.

    The core only emits these when the caller hands it an EventBus;
    pure queries never emit anything.
    """
    COST_APPLIED = "cost_applied"
    COST_PARTIALLY_PAID = "cost_partially_paid"
    COST_REJECTED = "cost_rejected"
    RESOURCE_DEPLETED = "resource_depleted"


@dataclass
class Event:
    """A resource event with associated data"""
    type: EventType
    data: Dict[str, Any] = field(default_factory=dict)

    def __str__(self) -> str:
        return f"Event({self.type.name}, data={self.data})"


# Type alias for event handler functions
EventHandler = Callable[[Event], None]


class EventBus:
    """
    Pub/sub dispatcher for resource events.

    Handlers are called in subscription order. A failing handler is logged
    and skipped so the remaining handlers still run.
    """

    def __init__(self):
        self._subscribers: Dict[EventType, List[EventHandler]] = {}

    def subscribe(self, event_type: EventType, handler: EventHandler) -> None:
        """
        Subscribe to an event type.

        Args:
            event_type: The type of event to subscribe to
            handler: Function to call when event is emitted
        """
        self._subscribers.setdefault(event_type, []).append(handler)

    def unsubscribe(self, event_type: EventType, handler: EventHandler) -> None:
        """Remove a handler; unknown handlers are ignored."""
        handlers = self._subscribers.get(event_type, [])
        if handler in handlers:
            handlers.remove(handler)

    def emit(self, event: Event) -> None:
        """
        Deliver an event to every subscriber of its type.

        Args:
            event: The event to emit
        """
        from resource_engine.utils.logging_config import get_logging_config
        logging_config = get_logging_config()
        if logging_config and logging_config.debug_enabled:
            logging_config.log_event(event.type.name, event.data)

        for handler in list(self._subscribers.get(event.type, [])):
            try:
                handler(event)
            except Exception as e:
                logger.error(
                    f"Error in event handler for {event.type.value}: {e}",
                    exc_info=True
                )

    def subscriber_count(self, event_type: EventType) -> int:
        """Number of handlers subscribed to an event type"""
        return len(self._subscribers.get(event_type, []))

    def clear_all(self) -> None:
        """Remove all subscribers from all event types."""
        self._subscribers.clear()
