"""Value objects for Budgets bounded context."""

from .enums import BudgetItemType, BudgetStatus, DeliveryMethod
from .money import Money

__all__ = ["BudgetStatus", "BudgetItemType", "DeliveryMethod", "Money"]
