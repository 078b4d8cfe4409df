"""Entities for Budgets bounded context."""

from .budget import Budget
from .budget_item import BudgetItem

__all__ = ["Budget", "BudgetItem"]
