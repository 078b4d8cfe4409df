"""ApproveBudget Command - client (or staff on their behalf) approves a budget."""

from dataclasses import dataclass

from workshop.application.shared import ActorContext, Command


@dataclass(frozen=True)
class ApproveBudgetCommand(Command):
    """Command to approve a SENT budget.

    Orchestrates:
    1. Transition + role check (SENT → APPROVED)
    2. Expiration check
    3. Stock availability check for STOCK_ITEM lines
    4. Persist with compare-and-set on SENT
    5. Publish BudgetApprovedEvent

    Example:
        >>> command = ApproveBudgetCommand(budget_id="b-1", actor=actor)
        >>> result = await handler.handle(command)
    """

    budget_id: str
    actor: ActorContext
