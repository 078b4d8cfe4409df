"""Repository ports for Budgets bounded context."""

from .budget_repository import BudgetItemRepository, BudgetRepository

__all__ = ["BudgetRepository", "BudgetItemRepository"]
