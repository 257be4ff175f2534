"""In-process delivery of session events."""

from __future__ import annotations

import logging
from collections.abc import Callable

from spatialui.api.events import PointerIgnored, SceneRebuilt, SessionEvent, Subscription

_LOG = logging.getLogger(__name__)


class SceneEventBus:
    """Per-event-kind handler tables; handlers run in subscription order.

    Handler exceptions propagate to the publisher.
    """

    def __init__(self) -> None:
        self._next_id = 1
        self._rebuilt: dict[int, Callable[[SceneRebuilt], None]] = {}
        self._ignored: dict[int, Callable[[PointerIgnored], None]] = {}

    def on_rebuilt(self, handler: Callable[[SceneRebuilt], None]) -> Subscription:
        subscription = self._token()
        self._rebuilt[subscription.id] = handler
        return subscription

    def on_pointer_ignored(self, handler: Callable[[PointerIgnored], None]) -> Subscription:
        subscription = self._token()
        self._ignored[subscription.id] = handler
        return subscription

    def unsubscribe(self, subscription: Subscription) -> None:
        self._rebuilt.pop(subscription.id, None)
        self._ignored.pop(subscription.id, None)

    def publish(self, event: SessionEvent) -> int:
        if isinstance(event, SceneRebuilt):
            handlers = tuple(self._rebuilt.values())
            _LOG.debug(
                "scene_rebuilt_published handlers=%d",
                len(handlers),
                extra={"revision": event.revision, "category": event.category.value},
            )
            for rebuilt_handler in handlers:
                rebuilt_handler(event)
            return len(handlers)
        if isinstance(event, PointerIgnored):
            ignored_handlers = tuple(self._ignored.values())
            for ignored_handler in ignored_handlers:
                ignored_handler(event)
            return len(ignored_handlers)
        raise TypeError(f"Unsupported session event: {type(event).__name__}")

    def _token(self) -> Subscription:
        sub_id = self._next_id
        self._next_id += 1
        return Subscription(sub_id)


__all__ = ["SceneEventBus"]
