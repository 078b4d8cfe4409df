"""Base DomainEvent class for event-driven architecture.

DomainEvent - something important that happened to an aggregate that other
parts of the system need to know about. Event kinds form a closed enum
(EventType), so subscriptions are keyed by a known member instead of a free
string.
"""

from abc import ABC
from dataclasses import dataclass, field, fields
from datetime import datetime, timezone
from enum import Enum
from typing import Any, ClassVar
from uuid import UUID, uuid4


class EventType(str, Enum):
    """Every event kind the workflow core can publish."""

    SERVICE_ORDER_RECEIVED = "ServiceOrderReceived"
    SERVICE_ORDER_APPROVED = "ServiceOrderApproved"
    SERVICE_ORDER_STATUS_CHANGED = "ServiceOrderStatusChanged"
    BUDGET_CREATED = "BudgetCreated"
    BUDGET_SENT = "BudgetSent"
    BUDGET_APPROVED = "BudgetApproved"
    BUDGET_REJECTED = "BudgetRejected"
    BUDGET_RECEIVED = "BudgetReceived"


_ENVELOPE_FIELDS = frozenset({"aggregate_id", "event_id", "occurred_at"})


@dataclass(frozen=True)
class DomainEvent(ABC):
    """Base class for all domain events.

    Characteristics:
    - **Immutable**: frozen dataclass, never changed after creation
    - **Past tense naming**: BudgetApproved, not ApproveBudget
    - **Typed**: each subclass pins its `event_type` member
    - **Timestamped**: `occurred_at` in UTC, set at construction

    Example:
        >>> @dataclass(frozen=True)
        ... class BudgetSentEvent(DomainEvent):
        ...     event_type: ClassVar[EventType] = EventType.BUDGET_SENT
        ...     client_id: str
        ...     validity_period: int

        >>> event = BudgetSentEvent(aggregate_id="b-1", client_id="c-1", validity_period=7)
        >>> event.data
        {'client_id': 'c-1', 'validity_period': 7}
    """

    event_type: ClassVar[EventType]

    aggregate_id: str
    """ID of the aggregate the event is about."""

    event_id: UUID = field(default_factory=uuid4, init=False)
    """Unique event ID (auto-generated)."""

    occurred_at: datetime = field(
        default_factory=lambda: datetime.now(timezone.utc), init=False
    )
    """When the event happened (auto-generated, UTC)."""

    @property
    def event_name(self) -> str:
        """Event class name (e.g., "BudgetApprovedEvent")."""
        return self.__class__.__name__

    @property
    def data(self) -> dict[str, Any]:
        """Typed payload as a plain dict, without the envelope fields."""
        return {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if f.name not in _ENVELOPE_FIELDS
        }

    def __repr__(self) -> str:
        return (
            f"{self.event_name}(aggregate_id={self.aggregate_id}, "
            f"event_id={self.event_id}, occurred_at={self.occurred_at})"
        )
