"""Service order commands."""

from .create_service_order import CreateServiceOrderCommand
from .update_service_order_status import UpdateServiceOrderStatusCommand

__all__ = ["CreateServiceOrderCommand", "UpdateServiceOrderStatusCommand"]
