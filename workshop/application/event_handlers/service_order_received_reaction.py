"""ServiceOrderReceived reaction - generate the initial budget."""

import logging

from workshop.application.budgets.commands import CreateBudgetCommand
from workshop.application.budgets.handlers import CreateBudgetHandler
from workshop.application.shared import ActorContext, EventHandler
from workshop.domain.budgets.repositories import BudgetRepository
from workshop.domain.budgets.value_objects import DeliveryMethod
from workshop.domain.service_orders.events import ServiceOrderReceivedEvent
from workshop.domain.shared import EventType

logger = logging.getLogger(__name__)

AUTO_GENERATED_NOTE = "Budget automatically generated when service order was received"


class ServiceOrderReceivedReaction(EventHandler):
    """Creates exactly one budget per received service order.

    The service order ID is the idempotency key: when a budget already exists
    for the order (event delivered twice, order received again), nothing is
    created.

    Example:
        >>> reaction = ServiceOrderReceivedReaction(create_budget_handler, budget_repo)
        >>> event_bus.subscribe(EventType.SERVICE_ORDER_RECEIVED, reaction)
    """

    event_type = EventType.SERVICE_ORDER_RECEIVED

    def __init__(
        self,
        create_budget_handler: CreateBudgetHandler,
        budget_repo: BudgetRepository,
        validity_period: int = 7,
        delivery_method: DeliveryMethod = DeliveryMethod.EMAIL,
        note: str = AUTO_GENERATED_NOTE,
    ) -> None:
        self.create_budget_handler = create_budget_handler
        self.budget_repo = budget_repo
        self.validity_period = validity_period
        self.delivery_method = delivery_method
        self.note = note

    async def handle(self, event: ServiceOrderReceivedEvent) -> None:
        service_order_id = event.aggregate_id

        existing = await self.budget_repo.get_by_service_order_id(service_order_id)
        if existing is not None:
            logger.info(
                "service_order_received.budget_exists",
                extra={"service_order_id": service_order_id, "budget_id": existing.id},
            )
            return

        result = await self.create_budget_handler.handle(
            CreateBudgetCommand(
                service_order_id=service_order_id,
                client_id=event.client_id,
                actor=ActorContext.system(),
                validity_period=self.validity_period,
                delivery_method=self.delivery_method,
                notes=self.note,
            )
        )

        if result.is_failure:
            logger.error(
                "service_order_received.budget_creation_failed",
                extra={"service_order_id": service_order_id, "error": str(result.error)},
            )
            raise result.error

        logger.info(
            "service_order_received.budget_created",
            extra={"service_order_id": service_order_id, "budget_id": result.value.id},
        )
