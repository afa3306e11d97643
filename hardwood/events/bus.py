"""Event bus for pub/sub communication."""

import logging
from collections import defaultdict
from typing import Callable, Optional, TypeVar

from hardwood.events.types import FranchiseEvent


logger = logging.getLogger(__name__)

T = TypeVar("T", bound=FranchiseEvent)
EventHandler = Callable[[FranchiseEvent], None]


class EventBus:
    """
    Pub/sub bus that lets reports, the API and tests follow a session.

    The session emits one event per committed transaction (trade,
    signing, draft pick, season, phase change) without knowing who is
    listening.

    Example:
        bus = EventBus()

        def on_trade(event: TradeCompletedEvent):
            print(f"{event.from_team_id} traded with {event.to_team_id}")

        bus.subscribe(TradeCompletedEvent, on_trade)
    """

    def __init__(self) -> None:
        self._handlers: dict[type[FranchiseEvent], list[EventHandler]] = defaultdict(list)
        self._wildcard_handlers: list[EventHandler] = []

    def subscribe(self, event_type: type[T], handler: Callable[[T], None]) -> None:
        """
        Register a handler for one event type.

        Args:
            event_type: The event class to listen for
            handler: Called with each matching event
        """
        self._handlers[event_type].append(handler)

    def subscribe_all(self, handler: EventHandler) -> None:
        """Register a handler that receives every event."""
        self._wildcard_handlers.append(handler)

    def unsubscribe(self, event_type: type[T], handler: Callable[[T], None]) -> None:
        handlers = self._handlers.get(event_type, [])
        if handler in handlers:
            handlers.remove(handler)

    def unsubscribe_all(self, handler: EventHandler) -> None:
        if handler in self._wildcard_handlers:
            self._wildcard_handlers.remove(handler)

    def emit(self, event: FranchiseEvent) -> None:
        """
        Deliver an event.

        Type-specific handlers run before wildcard handlers. A handler
        that raises stops delivery and the exception reaches the caller.
        """
        logger.debug("Emitting %s", type(event).__name__)
        for handler in list(self._handlers.get(type(event), [])):
            handler(event)
        for handler in list(self._wildcard_handlers):
            handler(event)

    def clear(self) -> None:
        """Remove all handlers."""
        self._handlers.clear()
        self._wildcard_handlers.clear()

    def handler_count(self, event_type: Optional[type[FranchiseEvent]] = None) -> int:
        """
        Number of registered handlers.

        Args:
            event_type: Count only this type's handlers; None counts
                every handler including wildcards
        """
        if event_type is None:
            typed = sum(len(handlers) for handlers in self._handlers.values())
            return typed + len(self._wildcard_handlers)
        return len(self._handlers.get(event_type, []))
