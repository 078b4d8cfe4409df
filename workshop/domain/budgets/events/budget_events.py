"""Domain Events for Budgets bounded context."""

from dataclasses import dataclass
from datetime import datetime
from typing import ClassVar, Optional

from workshop.domain.shared import DomainEvent, EventType

from ..value_objects import Money


@dataclass(frozen=True)
class BudgetCreatedEvent(DomainEvent):
    """Event: budget generated for a service order."""

    event_type: ClassVar[EventType] = EventType.BUDGET_CREATED

    service_order_id: str
    client_id: str
    validity_period: int
    delivery_method: str


@dataclass(frozen=True)
class BudgetSentEvent(DomainEvent):
    """Event: budget delivered to the client.

    Subscribers:
    - notification adapters (email / SMS / WhatsApp)
    """

    event_type: ClassVar[EventType] = EventType.BUDGET_SENT

    service_order_id: str
    client_id: str
    client_name: Optional[str]
    client_email: Optional[str]
    budget_total: Money
    delivery_method: str
    expiration_date: datetime


@dataclass(frozen=True)
class BudgetApprovedEvent(DomainEvent):
    """Event: client approved the budget and stock covered its parts.

    Published only after the approved state was persisted.

    Subscribers:
    - BudgetDecisionReaction moves the service order to APPROVED
    """

    event_type: ClassVar[EventType] = EventType.BUDGET_APPROVED

    service_order_id: str
    client_id: str
    client_name: Optional[str]
    client_email: Optional[str]
    budget_total: Money
    approved_at: datetime


@dataclass(frozen=True)
class BudgetRejectedEvent(DomainEvent):
    """Event: client declined the budget.

    Subscribers:
    - BudgetDecisionReaction moves the service order to REJECTED
    """

    event_type: ClassVar[EventType] = EventType.BUDGET_REJECTED

    service_order_id: str
    client_id: str
    client_name: Optional[str]
    client_email: Optional[str]
    budget_total: Money
    rejected_at: datetime
    reason: Optional[str] = None


@dataclass(frozen=True)
class BudgetReceivedEvent(DomainEvent):
    """Event: client acknowledged receipt of the budget."""

    event_type: ClassVar[EventType] = EventType.BUDGET_RECEIVED

    service_order_id: str
    client_id: str
    received_at: datetime
