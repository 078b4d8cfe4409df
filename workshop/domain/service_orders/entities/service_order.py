"""ServiceOrder Aggregate Root - the repair order itself.

Every status change goes through the role-gated transition validator, the
aggregate never sets `status` on its own.
"""

from datetime import datetime, timezone
from typing import Optional
from uuid import uuid4

from workshop.domain.shared import AggregateRoot, UserRole

from ..events import (
    ServiceOrderApprovedEvent,
    ServiceOrderReceivedEvent,
    ServiceOrderStatusChangedEvent,
)
from ..exceptions import CancellationReasonRequiredError
from ..validators import service_order_transition_validator
from ..value_objects import ServiceOrderStatus


class ServiceOrder(AggregateRoot):
    """ServiceOrder Aggregate Root.

    Rules:
    - Created in REQUESTED (client intake) or RECEIVED (employee intake)
    - `client_id` and `vehicle_id` never change
    - Transitions are checked against the edge table and the actor's role
    - Cancelling requires a reason
    - Never deleted, DELIVERED and CANCELLED are terminal

    Example:
        >>> order = ServiceOrder.create(client_id="c-1", vehicle_id="v-1")
        >>> order.transition_to(ServiceOrderStatus.RECEIVED, UserRole.EMPLOYEE, changed_by="e-1")
        >>> [e.event_name for e in order.get_domain_events()]
        ['ServiceOrderStatusChangedEvent', 'ServiceOrderReceivedEvent']
    """

    def __init__(
        self,
        *,
        id: Optional[str] = None,
        client_id: str,
        vehicle_id: str,
        status: ServiceOrderStatus,
        request_date: datetime,
        delivery_date: Optional[datetime] = None,
        cancellation_reason: Optional[str] = None,
        notes: Optional[str] = None,
        created_at: Optional[datetime] = None,
        updated_at: Optional[datetime] = None,
    ) -> None:
        super().__init__(id, created_at=created_at, updated_at=updated_at)
        self._client_id = client_id
        self._vehicle_id = vehicle_id
        self.status = status
        self.request_date = request_date
        self.delivery_date = delivery_date
        self.cancellation_reason = cancellation_reason
        self.notes = notes

    @property
    def client_id(self) -> str:
        return self._client_id

    @property
    def vehicle_id(self) -> str:
        return self._vehicle_id

    @classmethod
    def create(
        cls, client_id: str, vehicle_id: str, notes: Optional[str] = None
    ) -> "ServiceOrder":
        """Client intake: new order in REQUESTED."""
        now = datetime.now(timezone.utc)
        return cls(
            id=str(uuid4()),
            client_id=client_id,
            vehicle_id=vehicle_id,
            status=ServiceOrderStatus.REQUESTED,
            request_date=now,
            notes=notes,
            created_at=now,
            updated_at=now,
        )

    @classmethod
    def create_received(
        cls, client_id: str, vehicle_id: str, notes: Optional[str] = None
    ) -> "ServiceOrder":
        """Employee intake: vehicle already in the workshop, order starts in RECEIVED.

        Records ServiceOrderReceivedEvent so the initial budget gets generated.
        """
        order = cls.create(client_id, vehicle_id, notes)
        order.status = ServiceOrderStatus.RECEIVED
        order._record_received(order.created_at)
        return order

    def transition_to(
        self,
        target: ServiceOrderStatus,
        role: UserRole,
        changed_by: str,
        reason: Optional[str] = None,
    ) -> None:
        """Move the order to `target` on behalf of an actor.

        Args:
            target: Requested status.
            role: Actor role, checked against the edge's role gate.
            changed_by: Actor user ID, recorded in events.
            reason: Required when target is CANCELLED.

        Raises:
            InvalidStateTransition: Edge is not in the state graph.
            UnauthorizedStatusTransition: Role may not take the edge.
            CancellationReasonRequiredError: Cancelling without a reason.
        """
        service_order_transition_validator.assert_transition(
            self.status, target, role, self.id
        )

        if target == ServiceOrderStatus.CANCELLED:
            if not reason or not reason.strip():
                raise CancellationReasonRequiredError(
                    "Cancellation reason is required",
                    service_order_id=self.id,
                )
            self.cancellation_reason = reason.strip()

        previous = self.status
        now = datetime.now(timezone.utc)
        self.status = target
        if target == ServiceOrderStatus.DELIVERED:
            self.delivery_date = now
        self._touch(now)

        self.add_domain_event(
            ServiceOrderStatusChangedEvent(
                aggregate_id=self.id or "",
                from_status=previous.value,
                to_status=target.value,
                changed_by=changed_by,
            )
        )
        if target == ServiceOrderStatus.RECEIVED:
            self._record_received(now)
        elif target == ServiceOrderStatus.APPROVED:
            self.add_domain_event(
                ServiceOrderApprovedEvent(
                    aggregate_id=self.id or "",
                    client_id=self._client_id,
                    vehicle_id=self._vehicle_id,
                    approved_by=changed_by,
                    approved_at=now,
                )
            )

    def cancel(self, reason: str, role: UserRole, changed_by: str) -> None:
        """Cancel the order (ADMIN only, from any non-terminal status)."""
        self.transition_to(ServiceOrderStatus.CANCELLED, role, changed_by, reason=reason)

    @property
    def is_terminal(self) -> bool:
        return self.status.is_terminal()

    def _record_received(self, at: datetime) -> None:
        self.add_domain_event(
            ServiceOrderReceivedEvent(
                aggregate_id=self.id or "",
                client_id=self._client_id,
                vehicle_id=self._vehicle_id,
                received_at=at,
            )
        )

    def __repr__(self) -> str:
        return (
            f"ServiceOrder(id={self.id}, client_id={self._client_id}, "
            f"vehicle_id={self._vehicle_id}, status={self.status.value})"
        )
