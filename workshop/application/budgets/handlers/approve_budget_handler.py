"""ApproveBudget Handler - the approval workflow.

Reconciles the budget's state with stock availability before committing the
approval, then announces it.
"""

import logging
from datetime import datetime, timezone

from workshop.application.budgets.commands import ApproveBudgetCommand
from workshop.application.budgets.dtos import BudgetDTO
from workshop.application.budgets.services import budget_approved_event
from workshop.application.shared import ActorContext, CommandHandler, failure_from_exception
from workshop.domain.budgets.entities import Budget
from workshop.domain.budgets.exceptions import BudgetNotFoundError, InsufficientStockError
from workshop.domain.budgets.repositories import BudgetItemRepository, BudgetRepository
from workshop.domain.budgets.value_objects import BudgetStatus
from workshop.domain.clients.ports import ClientDirectory
from workshop.domain.shared import DomainException, Failure, Result, Success
from workshop.domain.stock.ports import StockAvailabilityChecker, StockLine
from workshop.infrastructure.messaging import EventBus

logger = logging.getLogger(__name__)

APPROVAL_FAILED_MESSAGE = "Budget approval failed"


class ApproveBudgetHandler(CommandHandler[ApproveBudgetCommand, Result[BudgetDTO, Exception]]):
    """Handler for ApproveBudget command.

    Flow:
    1. Load budget (not found → Failure)
    2. Check SENT → APPROVED edge and actor role
    3. Check expiration
    4. Check stock for STOCK_ITEM lines, one call to the checker
    5. Approve, persist with compare-and-set on SENT
    6. Publish BudgetApprovedEvent
    7. Return BudgetDTO

    Steps 2-4 never mutate anything. If any of them fails the budget stays
    SENT, nothing is persisted and no event is published. The transition check
    comes first, so an already APPROVED budget never reaches the stock checker.

    Example:
        >>> result = await handler.approve("b-1", ActorContext(user_id="c-1", role=UserRole.CLIENT))
        >>> if result.is_failure and isinstance(result.error, InsufficientStockError):
        ...     ...
    """

    def __init__(
        self,
        budget_repo: BudgetRepository,
        budget_item_repo: BudgetItemRepository,
        stock_checker: StockAvailabilityChecker,
        client_directory: ClientDirectory,
        event_bus: EventBus,
    ) -> None:
        """Initialize handler."""
        self.budget_repo = budget_repo
        self.budget_item_repo = budget_item_repo
        self.stock_checker = stock_checker
        self.client_directory = client_directory
        self.event_bus = event_bus

    async def handle(self, command: ApproveBudgetCommand) -> Result[BudgetDTO, Exception]:
        return await self.approve(command.budget_id, command.actor)

    async def approve(self, budget_id: str, actor: ActorContext) -> Result[BudgetDTO, Exception]:
        """Approve a budget on behalf of an actor.

        Args:
            budget_id: Budget to approve.
            actor: Acting user and role.

        Returns:
            Success(BudgetDTO) with the approved budget, or Failure with one of
            BudgetNotFoundError, InvalidStateTransition,
            UnauthorizedStatusTransition, BudgetExpiredError,
            InsufficientStockError, ConcurrencyException, PersistenceError,
            or UnexpectedDomainError wrapping anything else.
        """
        logger.info(
            "approve_budget.started",
            extra={"budget_id": budget_id, "user_id": actor.user_id, "role": actor.role.value},
        )

        try:
            result = await self._approve(budget_id, actor)
        except DomainException as e:
            logger.warning(
                "approve_budget.refused",
                extra={"budget_id": budget_id, "error": str(e), "error_type": type(e).__name__},
            )
            return Failure(e)
        except Exception as e:
            logger.error(
                "approve_budget.failed",
                extra={"budget_id": budget_id, "error": str(e)},
                exc_info=True,
            )
            return failure_from_exception(e, APPROVAL_FAILED_MESSAGE)

        if result.is_success:
            logger.info("approve_budget.completed", extra={"budget_id": budget_id})
        else:
            logger.warning(
                "approve_budget.refused",
                extra={
                    "budget_id": budget_id,
                    "error": str(result.error),
                    "error_type": type(result.error).__name__,
                },
            )
        return result

    async def _approve(self, budget_id: str, actor: ActorContext) -> Result[BudgetDTO, Exception]:
        budget = await self.budget_repo.get_by_id(budget_id)
        if budget is None:
            return Failure(BudgetNotFoundError(budget_id))

        now = datetime.now(timezone.utc)
        budget.ensure_can_transition(BudgetStatus.APPROVED, actor.role, now)

        stock_result = await self._check_stock(budget)
        if stock_result.is_failure:
            return stock_result

        contact = await self.client_directory.get_contact(budget.client_id)

        budget.approve(actor.role, now)
        saved = await self.budget_repo.update(budget, expected_status=BudgetStatus.SENT)

        await self.event_bus.publish(budget_approved_event(saved, contact))
        return Success(BudgetDTO.from_entity(saved))

    async def _check_stock(self, budget: Budget) -> Result[bool, Exception]:
        items = await self.budget_item_repo.get_by_budget_id(budget.id or "")
        stock_lines = [
            StockLine(stock_item_id=item.stock_item_id, quantity=item.quantity)
            for item in items
            if item.is_stock_item and item.stock_item_id
        ]
        if not stock_lines:
            return Success(True)

        result = await self.stock_checker.execute(stock_lines)
        if result.is_failure:
            return failure_from_exception(result.error, APPROVAL_FAILED_MESSAGE)

        if not result.value:
            logger.info(
                "approve_budget.insufficient_stock",
                extra={"budget_id": budget.id, "lines_count": len(stock_lines)},
            )
            return Failure(
                InsufficientStockError(
                    budget.id or "", sorted({line.stock_item_id for line in stock_lines})
                )
            )

        return result
