"""Explicit broadcast channel for router events.

Callers subscribe to the notification center owned by (or handed to) a
router instead of relying on any process-wide registry::

    center = NotificationCenter()
    router = NetworkRouter(notifications=center)

    center.on(
        ReachabilityNotification.NOT_REACHABLE,
        lambda name: print("offline"),
    )

    # or as a decorator, for every event
    @center.on("*")
    def log_event(name):
        ...
"""

from logging import getLogger
from typing import Callable

NotificationHandler = Callable[[str], None]

WILDCARD = "*"


def _event_name(name: str) -> str:
    # enum members post under their value
    return str(getattr(name, "value", name))


class NotificationCenter:
    """Delivers named events to their subscribers.

    Events carry no payload; handlers receive the event name only. Delivery
    is synchronous, in subscription order, with wildcard subscribers called
    after the specific ones.
    """

    def __init__(self) -> None:
        self._logger = getLogger("routekit")
        self._handlers: dict[str, list[NotificationHandler]] = {}

    def on(
        self, name: str, handler: NotificationHandler | None = None
    ) -> Callable:
        """Subscribe to ``name`` (or ``"*"`` for every event).

        Returns the handler, or a decorator when ``handler`` is omitted.
        """
        name = _event_name(name)
        handlers = self._handlers.setdefault(name, [])

        if handler is None:

            def decorator(fn: NotificationHandler) -> NotificationHandler:
                handlers.append(fn)
                return fn

            return decorator

        handlers.append(handler)
        return handler

    def off(self, name: str, handler: NotificationHandler | None = None) -> None:
        """Unsubscribe one handler, or every handler of ``name``."""
        name = _event_name(name)
        if name not in self._handlers:
            return
        if handler is None:
            self._handlers[name] = []
        else:
            self._handlers[name] = [h for h in self._handlers[name] if h != handler]

    def once(self, name: str, handler: NotificationHandler) -> NotificationHandler:
        def wrapper(event: str) -> None:
            self.off(name, wrapper)
            handler(event)

        return self.on(name, wrapper)

    def post(self, name: str) -> None:
        """Deliver ``name`` to its subscribers and to wildcard subscribers.

        A failing handler is logged and does not prevent delivery to the
        others.
        """
        name = _event_name(name)
        handlers = [
            *self._handlers.get(name, []),
            *self._handlers.get(WILDCARD, []),
        ]
        for handler in handlers:
            try:
                handler(name)
            except Exception:
                self._logger.exception(f"Notification handler failed for {name}")
