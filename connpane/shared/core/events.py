"""Synchronous event bus used to deliver backend and UI notifications.

Handlers are keyed by event class and run on the caller's thread, in
registration order. Everything in connpane runs on the Textual event loop,
so no locking is needed; callers on other threads must hop onto the loop
(``App.call_from_thread``) before publishing.
"""

from __future__ import annotations

import logging
from collections import defaultdict
from collections.abc import Callable
from typing import Any, TypeVar

logger = logging.getLogger(__name__)

E = TypeVar("E")


class HandlerRegistration:
    """Handle returned by :meth:`EventBus.subscribe`; call ``remove()`` to unsubscribe."""

    def __init__(self, bus: EventBus, event_type: type, handler: Callable[[Any], None]):
        self._bus = bus
        self._event_type = event_type
        self._handler = handler
        self._removed = False

    @property
    def removed(self) -> bool:
        return self._removed

    def remove(self) -> None:
        if self._removed:
            return
        self._bus._unsubscribe(self._event_type, self._handler)
        self._removed = True


class EventBus:
    """Publish/subscribe dispatcher keyed by event class."""

    def __init__(self) -> None:
        self._handlers: dict[type, list[Callable[[Any], None]]] = defaultdict(list)

    def subscribe(self, event_type: type[E], handler: Callable[[E], None]) -> HandlerRegistration:
        """Register a handler for an event class."""
        self._handlers[event_type].append(handler)
        return HandlerRegistration(self, event_type, handler)

    def _unsubscribe(self, event_type: type, handler: Callable[[Any], None]) -> None:
        handlers = self._handlers.get(event_type)
        if handlers and handler in handlers:
            handlers.remove(handler)

    def publish(self, event: Any) -> int:
        """Deliver an event to every handler registered for its exact class.

        Returns:
            Number of handlers the event was delivered to.
        """
        handlers = list(self._handlers.get(type(event), ()))
        logger.debug("Publishing %s to %d handler(s)", type(event).__name__, len(handlers))
        for handler in handlers:
            handler(event)
        return len(handlers)

    def handler_count(self, event_type: type) -> int:
        return len(self._handlers.get(event_type, ()))
