"""RejectBudget Handler - client declines a budget."""

import logging

from workshop.application.budgets.commands import RejectBudgetCommand
from workshop.application.budgets.dtos import BudgetDTO
from workshop.application.budgets.services import budget_rejected_event
from workshop.application.shared import CommandHandler, failure_from_exception
from workshop.domain.budgets.exceptions import BudgetNotFoundError
from workshop.domain.budgets.repositories import BudgetRepository
from workshop.domain.budgets.value_objects import BudgetStatus
from workshop.domain.clients.ports import ClientDirectory
from workshop.domain.shared import Failure, Result, Success
from workshop.infrastructure.messaging import EventBus

logger = logging.getLogger(__name__)


class RejectBudgetHandler(CommandHandler[RejectBudgetCommand, Result[BudgetDTO, Exception]]):
    """Handler for RejectBudget command.

    Flow:
    1. Load budget
    2. SENT → REJECTED, refused if the budget expired
    3. Persist with compare-and-set on SENT
    4. Publish BudgetRejectedEvent
    """

    def __init__(
        self,
        budget_repo: BudgetRepository,
        client_directory: ClientDirectory,
        event_bus: EventBus,
    ) -> None:
        self.budget_repo = budget_repo
        self.client_directory = client_directory
        self.event_bus = event_bus

    async def handle(self, command: RejectBudgetCommand) -> Result[BudgetDTO, Exception]:
        logger.info(
            "reject_budget.started",
            extra={"budget_id": command.budget_id, "user_id": command.actor.user_id},
        )

        try:
            budget = await self.budget_repo.get_by_id(command.budget_id)
            if budget is None:
                return Failure(BudgetNotFoundError(command.budget_id))

            contact = await self.client_directory.get_contact(budget.client_id)

            budget.reject(command.actor.role)
            saved = await self.budget_repo.update(budget, expected_status=BudgetStatus.SENT)

            await self.event_bus.publish(budget_rejected_event(saved, contact, command.reason))
        except Exception as e:
            logger.warning(
                "reject_budget.failed",
                extra={"budget_id": command.budget_id, "error": str(e)},
            )
            return failure_from_exception(e, "Budget rejection failed")

        logger.info("reject_budget.completed", extra={"budget_id": saved.id})
        return Success(BudgetDTO.from_entity(saved))
