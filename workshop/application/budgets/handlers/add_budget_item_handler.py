"""AddBudgetItem Handler - add a line and recalculate the budget total."""

import logging

from workshop.application.budgets.commands import AddBudgetItemCommand
from workshop.application.budgets.dtos import BudgetItemDTO
from workshop.application.shared import CommandHandler, failure_from_exception
from workshop.domain.budgets.entities import BudgetItem
from workshop.domain.budgets.exceptions import (
    BudgetNotEditableError,
    BudgetNotFoundError,
    InvalidBudgetItemError,
)
from workshop.domain.budgets.repositories import BudgetItemRepository, BudgetRepository
from workshop.domain.budgets.value_objects import BudgetStatus, Money
from workshop.domain.shared import Failure, Result, Success, UserRole

logger = logging.getLogger(__name__)


class AddBudgetItemHandler(CommandHandler[AddBudgetItemCommand, Result[BudgetItemDTO, Exception]]):
    """Handler for AddBudgetItem command.

    Flow:
    1. Load budget, must still be GENERATED
    2. Build and validate the line (type / reference invariant)
    3. Store the line
    4. Recalculate the total and persist the budget (compare-and-set on
       GENERATED). If that write fails the stored line is removed again.
    """

    def __init__(
        self, budget_repo: BudgetRepository, budget_item_repo: BudgetItemRepository
    ) -> None:
        self.budget_repo = budget_repo
        self.budget_item_repo = budget_item_repo

    async def handle(self, command: AddBudgetItemCommand) -> Result[BudgetItemDTO, Exception]:
        logger.info(
            "add_budget_item.started",
            extra={
                "budget_id": command.budget_id,
                "type": command.type.value,
                "user_id": command.actor.user_id,
            },
        )

        try:
            if command.actor.role == UserRole.CLIENT:
                return Failure(
                    BudgetNotEditableError(
                        "Clients cannot edit budget items", budget_id=command.budget_id
                    )
                )

            budget = await self.budget_repo.get_by_id(command.budget_id)
            if budget is None:
                return Failure(BudgetNotFoundError(command.budget_id))
            budget.ensure_editable()

            try:
                unit_price = Money.from_decimal(command.unit_price)
            except ValueError as e:
                return Failure(InvalidBudgetItemError(str(e), budget_id=command.budget_id))

            item = BudgetItem.create(
                budget_id=budget.id or "",
                type=command.type,
                description=command.description,
                quantity=command.quantity,
                unit_price=unit_price,
                service_id=command.service_id,
                stock_item_id=command.stock_item_id,
            )
            saved_item = await self.budget_item_repo.add(item)

            try:
                items = await self.budget_item_repo.get_by_budget_id(budget.id or "")
                total = budget.recalculate_total(items)
                await self.budget_repo.update(budget, expected_status=BudgetStatus.GENERATED)
            except Exception:
                # Budget total was not written, the line must not outlive it
                await self.budget_item_repo.remove(saved_item.id or "")
                logger.warning(
                    "add_budget_item.line_removed",
                    extra={"budget_id": command.budget_id, "item_id": saved_item.id},
                )
                raise
        except Exception as e:
            logger.warning(
                "add_budget_item.failed",
                extra={"budget_id": command.budget_id, "error": str(e)},
            )
            return failure_from_exception(e, "Adding budget item failed")

        logger.info(
            "add_budget_item.completed",
            extra={"budget_id": command.budget_id, "item_id": saved_item.id, "total": str(total)},
        )
        return Success(BudgetItemDTO.from_entity(saved_item))
