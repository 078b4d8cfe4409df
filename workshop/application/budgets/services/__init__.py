"""Budget application services."""

from .budget_event_factory import (
    budget_approved_event,
    budget_received_event,
    budget_rejected_event,
    budget_sent_event,
)

__all__ = [
    "budget_sent_event",
    "budget_approved_event",
    "budget_rejected_event",
    "budget_received_event",
]
