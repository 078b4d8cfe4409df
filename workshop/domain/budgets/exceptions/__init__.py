"""Exceptions for Budgets bounded context."""

from .budget_exceptions import (
    BudgetExpiredError,
    BudgetNotEditableError,
    BudgetNotFoundError,
    InsufficientStockError,
    InvalidBudgetItemError,
)

__all__ = [
    "BudgetNotFoundError",
    "BudgetExpiredError",
    "InsufficientStockError",
    "InvalidBudgetItemError",
    "BudgetNotEditableError",
]
