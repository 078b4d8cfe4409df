"""Entities for Service Orders bounded context."""

from .service_order import ServiceOrder

__all__ = ["ServiceOrder"]
