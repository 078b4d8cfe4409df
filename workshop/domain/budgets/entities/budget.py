"""Budget Aggregate Root - the priced proposal sent to the client."""

from datetime import datetime, timedelta, timezone
from typing import Iterable, Optional
from uuid import uuid4

from workshop.domain.shared import AggregateRoot, BusinessRuleViolation, UserRole

from ..events import BudgetCreatedEvent
from ..exceptions import BudgetExpiredError, BudgetNotEditableError
from ..validators import budget_transition_validator
from ..value_objects import BudgetStatus, DeliveryMethod, Money
from .budget_item import BudgetItem

_EXPIRING_TRANSITIONS = frozenset({BudgetStatus.APPROVED, BudgetStatus.REJECTED})


class Budget(AggregateRoot):
    """Budget Aggregate Root.

    Rules:
    - Created GENERATED, line items only change while GENERATED
    - `service_order_id` and `client_id` never change
    - Status changes go through the role-gated transition validator
    - Approving or rejecting an expired budget is refused
    - Expiration is derived from `generation_date + validity_period`, never stored

    Lifecycle decision events (sent / approved / rejected / received) need the
    client's contact data, so the application layer builds and publishes them.
    Only BudgetCreatedEvent is recorded here.

    Example:
        >>> budget = Budget.create(service_order_id="so-1", client_id="c-1")
        >>> budget.send(UserRole.EMPLOYEE)
        >>> budget.approve(UserRole.CLIENT)
        >>> budget.status
        <BudgetStatus.APPROVED: 'APPROVED'>
    """

    def __init__(
        self,
        *,
        id: Optional[str] = None,
        service_order_id: str,
        client_id: str,
        status: BudgetStatus,
        total_amount: Money,
        validity_period: int,
        generation_date: datetime,
        delivery_method: DeliveryMethod,
        sent_date: Optional[datetime] = None,
        approval_date: Optional[datetime] = None,
        rejection_date: Optional[datetime] = None,
        notes: Optional[str] = None,
        created_at: Optional[datetime] = None,
        updated_at: Optional[datetime] = None,
    ) -> None:
        super().__init__(id, created_at=created_at, updated_at=updated_at)
        if validity_period < 1:
            raise BusinessRuleViolation(
                "Validity period must be at least 1 day", validity_period=validity_period
            )
        self._service_order_id = service_order_id
        self._client_id = client_id
        self.status = status
        self.total_amount = total_amount
        self.validity_period = validity_period
        self.generation_date = generation_date
        self.delivery_method = delivery_method
        self.sent_date = sent_date
        self.approval_date = approval_date
        self.rejection_date = rejection_date
        self.notes = notes

    @property
    def service_order_id(self) -> str:
        return self._service_order_id

    @property
    def client_id(self) -> str:
        return self._client_id

    @classmethod
    def create(
        cls,
        service_order_id: str,
        client_id: str,
        validity_period: int = 7,
        delivery_method: DeliveryMethod = DeliveryMethod.EMAIL,
        notes: Optional[str] = None,
    ) -> "Budget":
        """Generate a new, empty budget for a service order."""
        now = datetime.now(timezone.utc)
        budget = cls(
            id=str(uuid4()),
            service_order_id=service_order_id,
            client_id=client_id,
            status=BudgetStatus.GENERATED,
            total_amount=Money.zero(),
            validity_period=validity_period,
            generation_date=now,
            delivery_method=delivery_method,
            notes=notes,
            created_at=now,
            updated_at=now,
        )
        budget.add_domain_event(
            BudgetCreatedEvent(
                aggregate_id=budget.id or "",
                service_order_id=service_order_id,
                client_id=client_id,
                validity_period=validity_period,
                delivery_method=delivery_method.value,
            )
        )
        return budget

    # ==================== Expiration ====================

    @property
    def expiration_date(self) -> datetime:
        return self.generation_date + timedelta(days=self.validity_period)

    def is_expired(self, now: Optional[datetime] = None) -> bool:
        """Check expiration against `now` (defaults to current UTC time)."""
        return (now or datetime.now(timezone.utc)) > self.expiration_date

    # ==================== Transitions ====================

    def ensure_can_transition(
        self, target: BudgetStatus, role: UserRole, now: Optional[datetime] = None
    ) -> None:
        """Run every aggregate-level check for a transition without mutating.

        Order: state graph and role gate first, then expiration.

        Raises:
            InvalidStateTransition: Edge is not in the state graph.
            UnauthorizedStatusTransition: Role may not take the edge.
            BudgetExpiredError: Approving or rejecting past the expiration date.
        """
        budget_transition_validator.assert_transition(self.status, target, role, self.id)

        if target in _EXPIRING_TRANSITIONS and self.is_expired(now):
            raise BudgetExpiredError(self.id, self.expiration_date)

    def send(self, role: UserRole, at: Optional[datetime] = None) -> None:
        at = at or datetime.now(timezone.utc)
        self.ensure_can_transition(BudgetStatus.SENT, role, at)
        self.status = BudgetStatus.SENT
        self.sent_date = at
        self._touch(at)

    def approve(self, role: UserRole, at: Optional[datetime] = None) -> None:
        """Approve the budget.

        Stock availability is not checked here, the approval workflow does it
        before calling this method.
        """
        at = at or datetime.now(timezone.utc)
        self.ensure_can_transition(BudgetStatus.APPROVED, role, at)
        self.status = BudgetStatus.APPROVED
        self.approval_date = at
        self._touch(at)

    def reject(self, role: UserRole, at: Optional[datetime] = None) -> None:
        at = at or datetime.now(timezone.utc)
        self.ensure_can_transition(BudgetStatus.REJECTED, role, at)
        self.status = BudgetStatus.REJECTED
        self.rejection_date = at
        self._touch(at)

    def mark_received(self, role: UserRole, at: Optional[datetime] = None) -> None:
        at = at or datetime.now(timezone.utc)
        self.ensure_can_transition(BudgetStatus.RECEIVED, role, at)
        self.status = BudgetStatus.RECEIVED
        self._touch(at)

    # ==================== Line items ====================

    @property
    def is_editable(self) -> bool:
        return self.status == BudgetStatus.GENERATED

    def ensure_editable(self) -> None:
        if not self.is_editable:
            raise BudgetNotEditableError(
                f"Budget items can only change while GENERATED, budget is {self.status.value}",
                budget_id=self.id,
            )

    def recalculate_total(self, items: Iterable[BudgetItem]) -> Money:
        """Set `total_amount` to the sum of the line totals and return it."""
        total = Money.zero()
        for item in items:
            total = total + item.total_price
        self.total_amount = total
        self._touch()
        return total

    def __repr__(self) -> str:
        return (
            f"Budget(id={self.id}, service_order_id={self._service_order_id}, "
            f"status={self.status.value}, total={self.total_amount})"
        )
