"""MarkBudgetReceived Handler - client acknowledges a budget."""

import logging

from workshop.application.budgets.commands import MarkBudgetReceivedCommand
from workshop.application.budgets.dtos import BudgetDTO
from workshop.application.budgets.services import budget_received_event
from workshop.application.shared import CommandHandler, failure_from_exception
from workshop.domain.budgets.exceptions import BudgetNotFoundError
from workshop.domain.budgets.repositories import BudgetRepository
from workshop.domain.budgets.value_objects import BudgetStatus
from workshop.domain.shared import Failure, Result, Success
from workshop.infrastructure.messaging import EventBus

logger = logging.getLogger(__name__)


class MarkBudgetReceivedHandler(
    CommandHandler[MarkBudgetReceivedCommand, Result[BudgetDTO, Exception]]
):
    """Handler for MarkBudgetReceived command (SENT → RECEIVED)."""

    def __init__(self, budget_repo: BudgetRepository, event_bus: EventBus) -> None:
        self.budget_repo = budget_repo
        self.event_bus = event_bus

    async def handle(self, command: MarkBudgetReceivedCommand) -> Result[BudgetDTO, Exception]:
        logger.info(
            "mark_budget_received.started",
            extra={"budget_id": command.budget_id, "user_id": command.actor.user_id},
        )

        try:
            budget = await self.budget_repo.get_by_id(command.budget_id)
            if budget is None:
                return Failure(BudgetNotFoundError(command.budget_id))

            budget.mark_received(command.actor.role)
            saved = await self.budget_repo.update(budget, expected_status=BudgetStatus.SENT)

            await self.event_bus.publish(budget_received_event(saved))
        except Exception as e:
            logger.warning(
                "mark_budget_received.failed",
                extra={"budget_id": command.budget_id, "error": str(e)},
            )
            return failure_from_exception(e, "Marking budget as received failed")

        logger.info("mark_budget_received.completed", extra={"budget_id": saved.id})
        return Success(BudgetDTO.from_entity(saved))
