"""CreateBudget Handler - generate a budget for a service order."""

import logging

from workshop.application.budgets.commands import CreateBudgetCommand
from workshop.application.budgets.dtos import BudgetDTO
from workshop.application.shared import CommandHandler, failure_from_exception
from workshop.domain.budgets.entities import Budget
from workshop.domain.budgets.repositories import BudgetRepository
from workshop.domain.shared import Result, Success
from workshop.infrastructure.messaging import EventBus

logger = logging.getLogger(__name__)


class CreateBudgetHandler(CommandHandler[CreateBudgetCommand, Result[BudgetDTO, Exception]]):
    """Handler for CreateBudget command.

    Flow:
    1. Build a GENERATED budget with zero total
    2. Persist
    3. Publish BudgetCreatedEvent
    """

    def __init__(self, budget_repo: BudgetRepository, event_bus: EventBus) -> None:
        self.budget_repo = budget_repo
        self.event_bus = event_bus

    async def handle(self, command: CreateBudgetCommand) -> Result[BudgetDTO, Exception]:
        logger.info(
            "create_budget.started",
            extra={
                "service_order_id": command.service_order_id,
                "client_id": command.client_id,
                "user_id": command.actor.user_id,
            },
        )

        try:
            budget = Budget.create(
                service_order_id=command.service_order_id,
                client_id=command.client_id,
                validity_period=command.validity_period,
                delivery_method=command.delivery_method,
                notes=command.notes,
            )
            saved = await self.budget_repo.add(budget)

            await self.event_bus.publish_all(budget.get_domain_events())
            budget.clear_domain_events()
        except Exception as e:
            logger.error(
                "create_budget.failed",
                extra={"service_order_id": command.service_order_id, "error": str(e)},
            )
            return failure_from_exception(e, "Budget creation failed")

        logger.info(
            "create_budget.completed",
            extra={"budget_id": saved.id, "service_order_id": saved.service_order_id},
        )
        return Success(BudgetDTO.from_entity(saved))
