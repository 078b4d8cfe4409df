"""Budget decision reactions - carry the client's decision over to the service order."""

import logging
from typing import ClassVar, Union

from workshop.application.service_orders.commands import UpdateServiceOrderStatusCommand
from workshop.application.service_orders.handlers import UpdateServiceOrderStatusHandler
from workshop.application.shared import ActorContext, EventHandler
from workshop.domain.budgets.events import BudgetApprovedEvent, BudgetRejectedEvent
from workshop.domain.service_orders.exceptions import ServiceOrderNotFoundError
from workshop.domain.service_orders.repositories import ServiceOrderRepository
from workshop.domain.service_orders.value_objects import ServiceOrderStatus
from workshop.domain.shared import EventType

logger = logging.getLogger(__name__)


class BudgetDecisionReaction(EventHandler):
    """Moves the budget's service order to `target_status` as the system actor.

    An order already in the target status is left alone. Any other failure is
    logged and raised, so the publisher learns about it.
    """

    target_status: ClassVar[ServiceOrderStatus]

    def __init__(
        self,
        update_status_handler: UpdateServiceOrderStatusHandler,
        service_order_repo: ServiceOrderRepository,
    ) -> None:
        self.update_status_handler = update_status_handler
        self.service_order_repo = service_order_repo

    async def handle(self, event: Union[BudgetApprovedEvent, BudgetRejectedEvent]) -> None:
        service_order_id = event.service_order_id
        log_context = {
            "budget_id": event.aggregate_id,
            "service_order_id": service_order_id,
            "target_status": self.target_status.value,
        }

        order = await self.service_order_repo.get_by_id(service_order_id)
        if order is None:
            logger.error("budget_decision.service_order_missing", extra=log_context)
            raise ServiceOrderNotFoundError(service_order_id)

        if order.status == self.target_status:
            logger.info("budget_decision.already_applied", extra=log_context)
            return

        result = await self.update_status_handler.handle(
            UpdateServiceOrderStatusCommand(
                service_order_id=service_order_id,
                target_status=self.target_status,
                actor=ActorContext.system(),
            )
        )

        if result.is_failure:
            logger.error(
                "budget_decision.update_failed",
                extra={**log_context, "error": str(result.error)},
            )
            raise result.error

        logger.info("budget_decision.applied", extra=log_context)


class BudgetApprovedReaction(BudgetDecisionReaction):
    """Budget approved → service order APPROVED."""

    event_type = EventType.BUDGET_APPROVED
    target_status = ServiceOrderStatus.APPROVED


class BudgetRejectedReaction(BudgetDecisionReaction):
    """Budget rejected → service order REJECTED."""

    event_type = EventType.BUDGET_REJECTED
    target_status = ServiceOrderStatus.REJECTED
