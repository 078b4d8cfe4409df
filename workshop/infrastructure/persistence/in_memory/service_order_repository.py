"""In-memory implementation of ServiceOrderRepository."""

from typing import Optional

from workshop.domain.service_orders.entities import ServiceOrder
from workshop.domain.service_orders.exceptions import ServiceOrderNotFoundError
from workshop.domain.service_orders.repositories import ServiceOrderRepository
from workshop.domain.shared import PersistenceError

from .snapshot import snapshot


class InMemoryServiceOrderRepository(ServiceOrderRepository):
    """Dict-backed ServiceOrderRepository storing copies of the aggregates."""

    def __init__(self) -> None:
        self._orders: dict[str, ServiceOrder] = {}

    async def add(self, service_order: ServiceOrder) -> ServiceOrder:
        if service_order.id is None:
            raise PersistenceError("Cannot store a service order without an ID")
        if service_order.id in self._orders:
            raise PersistenceError(
                f"Service order {service_order.id} already exists",
                service_order_id=service_order.id,
            )
        self._orders[service_order.id] = snapshot(service_order)
        return snapshot(service_order)

    async def get_by_id(self, service_order_id: str) -> Optional[ServiceOrder]:
        stored = self._orders.get(service_order_id)
        return snapshot(stored) if stored is not None else None

    async def update(self, service_order: ServiceOrder) -> ServiceOrder:
        service_order_id = service_order.id or ""
        if service_order_id not in self._orders:
            raise ServiceOrderNotFoundError(service_order_id)
        self._orders[service_order_id] = snapshot(service_order)
        return snapshot(service_order)
