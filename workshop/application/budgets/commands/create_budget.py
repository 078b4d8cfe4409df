"""CreateBudget Command."""

from dataclasses import dataclass
from typing import Optional

from workshop.application.shared import ActorContext, Command
from workshop.domain.budgets.value_objects import DeliveryMethod


@dataclass(frozen=True)
class CreateBudgetCommand(Command):
    """Command to generate a budget for a service order."""

    service_order_id: str
    client_id: str
    actor: ActorContext
    validity_period: int = 7
    """Days the budget stays valid after generation."""

    delivery_method: DeliveryMethod = DeliveryMethod.EMAIL
    notes: Optional[str] = None
