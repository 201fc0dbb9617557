"""Typed pub/sub channel carrying backend events to the client."""

import logging
from typing import Callable, Optional, Set

from pubsub import pub

from ..models.events import BackendEvent

logger = logging.getLogger(__name__)


class EventBus:
    """Publishes and dispatches backend events using pubsub.

    Each ``BackendEvent`` maps to its own topic. Payload events deliver the
    payload as the ``payload`` keyword; lifecycle events deliver nothing.
    Listeners are held weakly by pubsub, so subscribers must stay alive for
    as long as they want to receive events.
    """

    def __init__(self, publisher: Optional[object] = None):
        """Initialize event bus.

        Args:
            publisher: pubsub Publisher to use. Defaults to the process-wide
                publisher behind ``pubsub.pub``.
        """
        self.publisher = publisher or pub.getDefaultPublisher()
        self._dispatching: Set[BackendEvent] = set()
        logger.debug("EventBus initialized")

    def subscribe(self, event: BackendEvent, listener: Callable[..., None]) -> None:
        """Subscribe a listener to one event kind.

        Args:
            event: Event kind to listen for
            listener: Callable taking ``payload`` for payload events, no
                arguments otherwise
        """
        self.publisher.subscribe(listener, event.topic)
        logger.debug(f"Subscribed {getattr(listener, '__qualname__', listener)} to {event.topic}")

    def unsubscribe(self, event: BackendEvent, listener: Callable[..., None]) -> None:
        self.publisher.unsubscribe(listener, event.topic)

    def publish(self, event: BackendEvent, payload: Optional[str] = None) -> bool:
        """Deliver an event to all subscribers synchronously.

        An event kind that is already being dispatched is not delivered
        again from inside one of its own handlers.

        Args:
            event: Event kind to publish
            payload: String payload, required for payload events

        Returns:
            True if the event was dispatched, False if it was dropped

        Raises:
            ValueError: If a payload event is published without a payload
        """
        if event.has_payload and payload is None:
            raise ValueError(f"Event {event.value} requires a payload")

        if event in self._dispatching:
            logger.warning(f"Dropping re-entrant {event.value} event published from its own handler")
            return False

        self._dispatching.add(event)
        try:
            if event.has_payload:
                self.publisher.sendMessage(event.topic, payload=payload)
            else:
                self.publisher.sendMessage(event.topic)
        finally:
            self._dispatching.discard(event)

        logger.debug(f"Published {event.value} event")
        return True
