"""ServiceOrderApproved reaction - take the budget's parts out of stock."""

import logging

from workshop.application.shared import EventHandler
from workshop.domain.budgets.repositories import BudgetItemRepository, BudgetRepository
from workshop.domain.service_orders.events import ServiceOrderApprovedEvent
from workshop.domain.shared import EventType
from workshop.domain.stock.ports import StockDecreaser

logger = logging.getLogger(__name__)


class ServiceOrderApprovedReaction(EventHandler):
    """Decreases stock for every STOCK_ITEM line of the order's budget.

    An order without a budget (approved directly by staff before one was
    generated) has nothing to consume. A refused movement is logged and raised,
    movements already recorded for earlier lines stay.

    Example:
        >>> reaction = ServiceOrderApprovedReaction(budget_repo, budget_item_repo, inventory)
        >>> event_bus.subscribe(EventType.SERVICE_ORDER_APPROVED, reaction)
    """

    event_type = EventType.SERVICE_ORDER_APPROVED

    def __init__(
        self,
        budget_repo: BudgetRepository,
        budget_item_repo: BudgetItemRepository,
        stock_decreaser: StockDecreaser,
    ) -> None:
        self.budget_repo = budget_repo
        self.budget_item_repo = budget_item_repo
        self.stock_decreaser = stock_decreaser

    async def handle(self, event: ServiceOrderApprovedEvent) -> None:
        service_order_id = event.aggregate_id

        budget = await self.budget_repo.get_by_service_order_id(service_order_id)
        if budget is None:
            logger.warning(
                "service_order_approved.no_budget",
                extra={"service_order_id": service_order_id},
            )
            return

        items = await self.budget_item_repo.get_by_budget_id(budget.id or "")
        reason = f"Used for service order {service_order_id}"

        consumed = 0
        for item in items:
            if not item.is_stock_item or item.stock_item_id is None:
                continue

            result = await self.stock_decreaser.decrease(item.stock_item_id, item.quantity, reason)
            if result.is_failure:
                logger.error(
                    "service_order_approved.stock_decrease_failed",
                    extra={
                        "service_order_id": service_order_id,
                        "budget_id": budget.id,
                        "stock_item_id": item.stock_item_id,
                        "error": str(result.error),
                    },
                )
                raise result.error
            consumed += 1

        logger.info(
            "service_order_approved.stock_decreased",
            extra={
                "service_order_id": service_order_id,
                "budget_id": budget.id,
                "stock_lines": consumed,
            },
        )
