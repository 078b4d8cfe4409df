"""Validators for Service Orders bounded context."""

from .status_transitions import (
    NON_TERMINAL_STATUSES,
    SERVICE_ORDER_TRANSITIONS,
    service_order_transition_validator,
)

__all__ = [
    "NON_TERMINAL_STATUSES",
    "SERVICE_ORDER_TRANSITIONS",
    "service_order_transition_validator",
]
