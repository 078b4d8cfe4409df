"""Exceptions for Budgets bounded context."""

from datetime import datetime

from workshop.domain.shared import AggregateNotFound, BusinessRuleViolation


class BudgetNotFoundError(AggregateNotFound):
    """Budget does not exist."""

    def __init__(self, budget_id: str) -> None:
        super().__init__(f"Budget {budget_id} not found", budget_id=budget_id)
        self.budget_id = budget_id


class BudgetExpiredError(BusinessRuleViolation):
    """Budget validity period is over, it can no longer be approved or rejected."""

    def __init__(self, budget_id: str | None, expiration_date: datetime) -> None:
        super().__init__(
            f"Budget {budget_id} expired on {expiration_date.isoformat()}",
            budget_id=budget_id,
        )
        self.budget_id = budget_id
        self.expiration_date = expiration_date


class InsufficientStockError(BusinessRuleViolation):
    """Stock cannot cover the budget's STOCK_ITEM lines."""

    def __init__(self, budget_id: str, stock_item_ids: list[str]) -> None:
        super().__init__(
            f"Insufficient stock to approve budget {budget_id}",
            budget_id=budget_id,
            stock_item_ids=stock_item_ids,
        )
        self.budget_id = budget_id
        self.stock_item_ids = stock_item_ids


class InvalidBudgetItemError(BusinessRuleViolation):
    """Budget line violates the type / reference invariant or quantity rules."""

    pass


class BudgetNotEditableError(BusinessRuleViolation):
    """Line items can only change while the budget is GENERATED."""

    pass
