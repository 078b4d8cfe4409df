"""Value objects for Service Orders bounded context."""

from .enums import ServiceOrderStatus

__all__ = ["ServiceOrderStatus"]
