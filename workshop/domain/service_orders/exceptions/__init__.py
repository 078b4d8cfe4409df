"""Exceptions for Service Orders bounded context."""

from .service_order_exceptions import (
    CancellationReasonRequiredError,
    ServiceOrderNotFoundError,
)

__all__ = ["ServiceOrderNotFoundError", "CancellationReasonRequiredError"]
