"""EventHandler base - a reaction subscribed to one event kind."""

from abc import ABC, abstractmethod
from typing import ClassVar

from workshop.domain.shared import DomainEvent, EventType


class EventHandler(ABC):
    """Base class for event reactions.

    Each handler declares the single event kind it reacts to. The event bus
    refuses to register a handler under a different kind.

    A reaction that cannot do its job raises, the bus logs and re-raises so the
    publisher sees the failure.

    Example:
        >>> class AuditReaction(EventHandler):
        ...     event_type = EventType.SERVICE_ORDER_STATUS_CHANGED
        ...
        ...     async def handle(self, event: ServiceOrderStatusChangedEvent) -> None:
        ...         await audit_log.write(event.data)
    """

    event_type: ClassVar[EventType]

    def get_event_type(self) -> EventType:
        return self.event_type

    @abstractmethod
    async def handle(self, event: DomainEvent) -> None:
        """React to a published event.

        Raises:
            Exception: Any failure, propagated out of EventBus.publish.
        """
        pass

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(event_type={self.event_type.value})"
