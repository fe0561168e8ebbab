"""Synchronous event bus for ecosystem domain events.

Rules code (predation, reproduction, registration) publishes frozen event
records here; achievement and narration layers subscribe by event class.
Dispatch happens inline on the emitting call, so observers see events in
the same order the tick produced them.
"""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Callable
from typing import TypeVar

E = TypeVar("E")
Handler = Callable[[E], None]


class EventBus:
    """Per-context publish/subscribe hub keyed by exact event class.

    Example:
        bus = EventBus()
        bus.subscribe(PreyConsumedEvent, achievements.on_prey_consumed)
        bus.emit(PreyConsumedEvent(...))
    """

    def __init__(self) -> None:
        self._subscribers: dict[type, list[Callable]] = defaultdict(list)

    def subscribe(self, event_type: type[E], handler: Handler) -> Callable[[], bool]:
        """Add *handler* for *event_type*; returns a callable that removes it."""
        self._subscribers[event_type].append(handler)
        return lambda: self.unsubscribe(event_type, handler)

    def unsubscribe(self, event_type: type[E], handler: Handler) -> bool:
        """Remove *handler*; False when it was not subscribed."""
        handlers = self._subscribers.get(event_type, [])
        try:
            handlers.remove(handler)
        except ValueError:
            return False
        return True

    def emit(self, event: object) -> int:
        """Deliver *event* to its subscribers in subscription order.

        Handlers added or removed while the event is in flight take effect
        from the next emit. A handler exception reaches the caller.

        Returns:
            Number of handlers the event was delivered to
        """
        subscribers = self._subscribers.get(type(event))
        if not subscribers:
            return 0
        delivered = 0
        for handler in tuple(subscribers):
            handler(event)
            delivered += 1
        return delivered

    def has_subscribers(self, event_type: type) -> bool:
        return bool(self._subscribers.get(event_type))

    def subscriber_count(self, event_type: type) -> int:
        return len(self._subscribers.get(event_type, ()))

    def clear_subscribers(self) -> None:
        self._subscribers.clear()
