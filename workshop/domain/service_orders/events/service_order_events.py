"""Domain Events for Service Orders bounded context."""

from dataclasses import dataclass
from datetime import datetime
from typing import ClassVar

from workshop.domain.shared import DomainEvent, EventType


@dataclass(frozen=True)
class ServiceOrderReceivedEvent(DomainEvent):
    """Event: vehicle received by the workshop.

    Subscribers:
    - ServiceOrderReceivedReaction generates the initial budget
    """

    event_type: ClassVar[EventType] = EventType.SERVICE_ORDER_RECEIVED

    client_id: str
    vehicle_id: str
    received_at: datetime


@dataclass(frozen=True)
class ServiceOrderApprovedEvent(DomainEvent):
    """Event: repair approved (by the client directly or via budget approval)."""

    event_type: ClassVar[EventType] = EventType.SERVICE_ORDER_APPROVED

    client_id: str
    vehicle_id: str
    approved_by: str
    approved_at: datetime


@dataclass(frozen=True)
class ServiceOrderStatusChangedEvent(DomainEvent):
    """Event: any committed status change, useful for audit subscribers."""

    event_type: ClassVar[EventType] = EventType.SERVICE_ORDER_STATUS_CHANGED

    from_status: str
    to_status: str
    changed_by: str
