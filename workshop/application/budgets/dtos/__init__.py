"""Budget DTOs."""

from .budget_dto import BudgetDTO, BudgetItemDTO

__all__ = ["BudgetDTO", "BudgetItemDTO"]
