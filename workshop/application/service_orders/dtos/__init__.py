"""Service order DTOs."""

from .service_order_dto import ServiceOrderDTO

__all__ = ["ServiceOrderDTO"]
