"""ServiceOrder DTO - data transfer object handed to callers."""

from dataclasses import dataclass
from datetime import datetime

from workshop.domain.service_orders.entities import ServiceOrder


@dataclass
class ServiceOrderDTO:
    """Service order data transfer object."""

    id: str
    client_id: str
    vehicle_id: str
    status: str
    request_date: datetime
    delivery_date: datetime | None
    cancellation_reason: str | None
    notes: str | None
    updated_at: datetime

    @classmethod
    def from_entity(cls, order: ServiceOrder) -> "ServiceOrderDTO":
        return cls(
            id=order.id or "",
            client_id=order.client_id,
            vehicle_id=order.vehicle_id,
            status=order.status.value,
            request_date=order.request_date,
            delivery_date=order.delivery_date,
            cancellation_reason=order.cancellation_reason,
            notes=order.notes,
            updated_at=order.updated_at,
        )
