"""Publish-subscribe bus for chart events.

Handlers subscribe to an event class and also receive its subclasses, so a
subscription to ``Event`` observes everything the controller publishes.
"""

from typing import TypeVar, Callable, Type
import logging
import threading
from collections import defaultdict

from graphscout.application.events import Event

T = TypeVar('T', bound=Event)

logger = logging.getLogger(__name__)


class EventBus:
    """Type-keyed publish-subscribe bus, safe to publish from worker threads."""

    def __init__(self) -> None:
        self._subscribers: dict[Type[Event], list[Callable[[Event], None]]] = defaultdict(list)
        self._lock = threading.Lock()

    def subscribe(self, event_type: Type[T], handler: Callable[[T], None]) -> None:
        with self._lock:
            self._subscribers[event_type].append(handler)  # type: ignore[arg-type]

    def unsubscribe(self, event_type: Type[T], handler: Callable[[T], None]) -> None:
        with self._lock:
            handlers = self._subscribers.get(event_type)
            if handlers and handler in handlers:
                handlers.remove(handler)  # type: ignore[arg-type]

    def subscriber_count(self, event_type: Type[Event]) -> int:
        with self._lock:
            return len(self._subscribers.get(event_type, []))

    def publish(self, event: Event) -> None:
        """Deliver event to handlers of its class and of every base event class."""
        with self._lock:
            handlers = [
                handler
                for cls in type(event).__mro__
                if isinstance(cls, type) and issubclass(cls, Event)
                for handler in self._subscribers.get(cls, [])
            ]
        for handler in handlers:
            try:
                handler(event)
            except Exception:
                logger.exception("Handler error for %s", type(event).__name__)
                if __debug__:
                    raise

    def clear(self) -> None:
        with self._lock:
            self._subscribers.clear()
