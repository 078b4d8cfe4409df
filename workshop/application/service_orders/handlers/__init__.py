"""Service order use case handlers."""

from .create_service_order_handler import CreateServiceOrderHandler
from .update_service_order_status_handler import UpdateServiceOrderStatusHandler

__all__ = ["CreateServiceOrderHandler", "UpdateServiceOrderStatusHandler"]
