"""Base AggregateRoot class for domain model.

AggregateRoot - the main Entity of an Aggregate. It controls access to everything
inside the aggregate and keeps it consistent.
"""

from datetime import datetime, timezone
from typing import List

from .domain_event import DomainEvent
from .entity import Entity


class AggregateRoot(Entity):
    """Base class for aggregate roots in DDD.

    AggregateRoot is:
    - **Consistency boundary**: invariants always hold inside the aggregate
    - **Transaction boundary**: loaded and saved as a whole
    - **Event producer**: records domain events about its own changes

    Events are collected on the aggregate but not published immediately.
    The application layer publishes them after the repository update succeeded.

    Example:
        >>> order = ServiceOrder.create(client_id="c-1", vehicle_id="v-1")
        >>> order.transition_to(ServiceOrderStatus.RECEIVED, UserRole.EMPLOYEE)
        >>> saved = await repo.update(order)
        >>> await event_bus.publish_all(order.get_domain_events())
        >>> order.clear_domain_events()
    """

    def __init__(
        self,
        id: str | None = None,
        created_at: datetime | None = None,
        updated_at: datetime | None = None,
    ) -> None:
        super().__init__(id)
        now = datetime.now(timezone.utc)
        self.created_at = created_at or now
        self.updated_at = updated_at or now
        self._domain_events: List[DomainEvent] = []

    def add_domain_event(self, event: DomainEvent) -> None:
        """Add domain event to pending events list.

        Args:
            event: Domain event to add.
        """
        self._domain_events.append(event)

    def get_domain_events(self) -> List[DomainEvent]:
        """Get all pending domain events.

        Returns:
            Copy of the events recorded since the last clear.
        """
        return self._domain_events.copy()

    def clear_domain_events(self) -> None:
        """Clear pending events after they were published."""
        self._domain_events.clear()

    @property
    def has_domain_events(self) -> bool:
        """Check if aggregate has pending domain events."""
        return len(self._domain_events) > 0

    def _touch(self, at: datetime | None = None) -> None:
        self.updated_at = at or datetime.now(timezone.utc)
