"""Validators for Budgets bounded context."""

from .budget_item_validator import (
    BOTH_REFERENCES_MESSAGE,
    SERVICE_ID_MISSING_MESSAGE,
    STOCK_ITEM_ID_MISSING_MESSAGE,
    validate_budget_item_reference,
    validate_quantity,
)
from .status_transitions import BUDGET_TRANSITIONS, budget_transition_validator

__all__ = [
    "BUDGET_TRANSITIONS",
    "budget_transition_validator",
    "validate_budget_item_reference",
    "validate_quantity",
    "BOTH_REFERENCES_MESSAGE",
    "SERVICE_ID_MISSING_MESSAGE",
    "STOCK_ITEM_ID_MISSING_MESSAGE",
]
