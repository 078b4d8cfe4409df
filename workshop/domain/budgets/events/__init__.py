"""Domain events for Budgets bounded context."""

from .budget_events import (
    BudgetApprovedEvent,
    BudgetCreatedEvent,
    BudgetReceivedEvent,
    BudgetRejectedEvent,
    BudgetSentEvent,
)

__all__ = [
    "BudgetCreatedEvent",
    "BudgetSentEvent",
    "BudgetApprovedEvent",
    "BudgetRejectedEvent",
    "BudgetReceivedEvent",
]
