"""Generic publish/subscribe dispatcher.

The hub knows nothing about tracks or items; it maps event names to ordered
handler lists. Delivery is synchronous and in registration order.

Handler failures are not isolated: the first handler that raises aborts the
remaining deliveries for that ``publish`` call and the exception reaches the
caller.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Callable, Dict, List, Optional

Handler = Callable[..., Any]


class Events(str, Enum):
    CHANGE = "change"


def _event_key(event: str | Events) -> str:
    return event.value if isinstance(event, Events) else str(event)


class NotificationHub:
    """Name -> handlers registry with chaining API.

    Usage:
        hub = NotificationHub()
        hub.subscribe("change", on_change).subscribe("change", log_change)
        hub.publish("change", item)
    """

    def __init__(self):
        self._handlers: Dict[str, List[Handler]] = {}

    def subscribe(self, event: str | Events, handler: Handler) -> "NotificationHub":
        handlers = self._handlers.setdefault(_event_key(event), [])
        if handler not in handlers:
            handlers.append(handler)
        return self

    def publish(self, event: str | Events, *payload: Any) -> "NotificationHub":
        # Snapshot so handlers may (un)subscribe without affecting this delivery.
        for handler in tuple(self._handlers.get(_event_key(event), ())):
            handler(*payload)
        return self

    def unsubscribe(
        self, event: str | Events, handler: Optional[Handler] = None
    ) -> "NotificationHub":
        handlers = self._handlers.get(_event_key(event))
        if not handlers:
            return self
        if handler is None:
            handlers.clear()
        elif handler in handlers:
            handlers.remove(handler)
        return self

    def handlers(self, event: str | Events) -> tuple[Handler, ...]:
        return tuple(self._handlers.get(_event_key(event), ()))


__all__ = ["Events", "Handler", "NotificationHub"]
