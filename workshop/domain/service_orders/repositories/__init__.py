"""Repository ports for Service Orders bounded context."""

from .service_order_repository import ServiceOrderRepository

__all__ = ["ServiceOrderRepository"]
