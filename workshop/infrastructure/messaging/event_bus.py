"""Event Bus - in-process domain events infrastructure.

Event Bus enables the event-driven parts of the workflow:
- Aggregates and use cases produce events (ServiceOrderReceived, BudgetApproved)
- Reactions subscribe by event kind
- Decoupling: the domain does not know its subscribers

Delivery is synchronous and at-most-once. Nothing is persisted or replayed.
"""

import logging
from collections import defaultdict
from typing import Iterable

from workshop.application.shared import EventHandler
from workshop.config.logging import event_log_context
from workshop.domain.shared import DomainEvent, EventType

logger = logging.getLogger(__name__)


class EventBus:
    """Event Bus for domain events.

    Constructed explicitly by the composition root and passed to whoever
    publishes. Handlers for one event kind run sequentially, in registration
    order. The first handler that raises stops the dispatch: the error is
    logged and re-raised to the publisher, later handlers are not invoked.

    Example:
        >>> event_bus = EventBus()
        >>> event_bus.subscribe(EventType.SERVICE_ORDER_RECEIVED, ServiceOrderReceivedReaction(...))
        >>> await event_bus.publish(ServiceOrderReceivedEvent(aggregate_id="so-1", ...))
        >>> # ServiceOrderReceivedReaction.handle() awaited before publish returns
    """

    def __init__(self) -> None:
        """Initialize event bus."""
        # Map: event kind → handlers in registration order
        self._subscribers: dict[EventType, list[EventHandler]] = defaultdict(list)
        logger.info("event_bus.initialized")

    def subscribe(self, event_type: EventType, handler: EventHandler) -> None:
        """Subscribe handler to an event kind.

        Args:
            event_type: Event kind (e.g., EventType.BUDGET_APPROVED).
            handler: Reaction declaring the same event kind.

        Raises:
            ValueError: If the handler declares a different event kind.
        """
        if handler.get_event_type() != event_type:
            raise ValueError(
                f"{type(handler).__name__} handles {handler.get_event_type().value}, "
                f"cannot subscribe it to {event_type.value}"
            )

        if handler in self._subscribers[event_type]:
            logger.warning(
                "event_bus.duplicate_subscription",
                extra={
                    "event_type": event_type.value,
                    "handler": type(handler).__name__,
                },
            )
            return

        self._subscribers[event_type].append(handler)
        logger.info(
            "event_bus.subscription_added",
            extra={
                "event_type": event_type.value,
                "handler": type(handler).__name__,
            },
        )

    def unsubscribe(self, event_type: EventType, handler: EventHandler) -> None:
        """Unsubscribe handler from an event kind.

        Args:
            event_type: Event kind.
            handler: Handler to remove.
        """
        if handler in self._subscribers[event_type]:
            self._subscribers[event_type].remove(handler)
            logger.info(
                "event_bus.subscription_removed",
                extra={
                    "event_type": event_type.value,
                    "handler": type(handler).__name__,
                },
            )

    async def publish(self, event: DomainEvent) -> None:
        """Publish single domain event.

        Awaits every handler subscribed to `event.event_type`, one after another.

        Args:
            event: Domain event to publish.

        Raises:
            Exception: Whatever the first failing handler raised, unchanged.
        """
        event_type = event.event_type
        handlers = list(self._subscribers.get(event_type, []))

        if not handlers:
            logger.debug(
                "event_bus.no_subscribers",
                extra={"event_type": event_type.value},
            )
            return

        logger.info(
            "event_bus.publishing",
            extra={
                "event_type": event_type.value,
                "handlers_count": len(handlers),
                "event_id": str(event.event_id),
                "aggregate_id": event.aggregate_id,
            },
        )

        with event_log_context(event_type.value, str(event.event_id), event.aggregate_id):
            for handler in handlers:
                try:
                    await handler.handle(event)
                except Exception as e:
                    logger.error(
                        "event_bus.handler_failed",
                        extra={
                            "event_type": event_type.value,
                            "handler": type(handler).__name__,
                            "event_id": str(event.event_id),
                            "error": str(e),
                        },
                        exc_info=True,
                    )
                    raise

                logger.debug(
                    "event_bus.handler_success",
                    extra={
                        "event_type": event_type.value,
                        "handler": type(handler).__name__,
                    },
                )

    async def publish_all(self, events: Iterable[DomainEvent]) -> None:
        """Publish multiple domain events in order, stopping at the first failure.

        Example:
            >>> await event_bus.publish_all(order.get_domain_events())
            >>> order.clear_domain_events()
        """
        events = list(events)
        if not events:
            return

        logger.info(
            "event_bus.publishing_batch",
            extra={"events_count": len(events)},
        )

        for event in events:
            await self.publish(event)

    def clear_subscribers(self) -> None:
        """Clear all subscribers (useful for testing)."""
        self._subscribers.clear()
        logger.info("event_bus.cleared")

    def get_subscribers_count(self, event_type: EventType) -> int:
        """Get number of subscribers for an event kind."""
        return len(self._subscribers.get(event_type, []))
