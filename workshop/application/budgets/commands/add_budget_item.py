"""AddBudgetItem Command."""

from dataclasses import dataclass
from decimal import Decimal
from typing import Optional

from workshop.application.shared import ActorContext, Command
from workshop.domain.budgets.value_objects import BudgetItemType


@dataclass(frozen=True)
class AddBudgetItemCommand(Command):
    """Add a line to a GENERATED budget.

    Example:
        >>> AddBudgetItemCommand(
        ...     budget_id="b-1",
        ...     actor=actor,
        ...     type=BudgetItemType.SERVICE,
        ...     description="Oil change",
        ...     quantity=1,
        ...     unit_price=Decimal("80.00"),
        ...     service_id="svc-1",
        ... )
    """

    budget_id: str
    actor: ActorContext
    type: BudgetItemType
    description: str
    quantity: int
    unit_price: Decimal
    service_id: Optional[str] = None
    stock_item_id: Optional[str] = None
