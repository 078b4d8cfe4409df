"""Budget DTOs - data transfer objects handed to callers."""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal

from workshop.domain.budgets.entities import Budget, BudgetItem


@dataclass
class BudgetDTO:
    """Budget data transfer object.

    Plain data, no business logic.
    """

    id: str
    service_order_id: str
    client_id: str
    status: str
    total_amount: Decimal
    validity_period: int
    generation_date: datetime
    expiration_date: datetime
    delivery_method: str
    sent_date: datetime | None
    approval_date: datetime | None
    rejection_date: datetime | None
    notes: str | None

    @classmethod
    def from_entity(cls, budget: Budget) -> "BudgetDTO":
        return cls(
            id=budget.id or "",
            service_order_id=budget.service_order_id,
            client_id=budget.client_id,
            status=budget.status.value,
            total_amount=budget.total_amount.to_decimal(),
            validity_period=budget.validity_period,
            generation_date=budget.generation_date,
            expiration_date=budget.expiration_date,
            delivery_method=budget.delivery_method.value,
            sent_date=budget.sent_date,
            approval_date=budget.approval_date,
            rejection_date=budget.rejection_date,
            notes=budget.notes,
        )


@dataclass
class BudgetItemDTO:
    """Budget line data transfer object."""

    id: str
    budget_id: str
    type: str
    description: str
    quantity: int
    unit_price: Decimal
    total_price: Decimal
    service_id: str | None
    stock_item_id: str | None

    @classmethod
    def from_entity(cls, item: BudgetItem) -> "BudgetItemDTO":
        return cls(
            id=item.id or "",
            budget_id=item.budget_id,
            type=item.type.value,
            description=item.description,
            quantity=item.quantity,
            unit_price=item.unit_price.to_decimal(),
            total_price=item.total_price.to_decimal(),
            service_id=item.service_id,
            stock_item_id=item.stock_item_id,
        )
