"""ServiceOrderRepository Port - persistence interface for service orders.

This is a PORT (the domain defines the interface). Storage adapters implement it.
"""

from abc import ABC, abstractmethod
from typing import Optional

from ..entities import ServiceOrder


class ServiceOrderRepository(ABC):
    """Abstract interface for service order persistence."""

    @abstractmethod
    async def add(self, service_order: ServiceOrder) -> ServiceOrder:
        """Insert a new service order and return the persisted aggregate."""
        pass

    @abstractmethod
    async def get_by_id(self, service_order_id: str) -> Optional[ServiceOrder]:
        """Get service order by ID, or None if it does not exist."""
        pass

    @abstractmethod
    async def update(self, service_order: ServiceOrder) -> ServiceOrder:
        """Store the new state and return the persisted aggregate.

        Raises:
            ServiceOrderNotFoundError: If the order was never added.
        """
        pass
