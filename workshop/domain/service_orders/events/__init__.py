"""Domain events for Service Orders bounded context."""

from .service_order_events import (
    ServiceOrderApprovedEvent,
    ServiceOrderReceivedEvent,
    ServiceOrderStatusChangedEvent,
)

__all__ = [
    "ServiceOrderReceivedEvent",
    "ServiceOrderApprovedEvent",
    "ServiceOrderStatusChangedEvent",
]
