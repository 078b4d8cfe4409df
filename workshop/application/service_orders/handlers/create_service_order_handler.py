"""CreateServiceOrder Handler - vehicle intake."""

import logging

from workshop.application.service_orders.commands import CreateServiceOrderCommand
from workshop.application.service_orders.dtos import ServiceOrderDTO
from workshop.application.shared import CommandHandler, failure_from_exception
from workshop.domain.service_orders.entities import ServiceOrder
from workshop.domain.service_orders.repositories import ServiceOrderRepository
from workshop.domain.shared import Result, Success, UserRole
from workshop.infrastructure.messaging import EventBus

logger = logging.getLogger(__name__)


class CreateServiceOrderHandler(
    CommandHandler[CreateServiceOrderCommand, Result[ServiceOrderDTO, Exception]]
):
    """Handler for CreateServiceOrder command.

    Flow:
    1. CLIENT → REQUESTED order, staff → RECEIVED order
    2. Persist
    3. Publish recorded events (ServiceOrderReceived for staff intake)
    """

    def __init__(self, service_order_repo: ServiceOrderRepository, event_bus: EventBus) -> None:
        self.service_order_repo = service_order_repo
        self.event_bus = event_bus

    async def handle(
        self, command: CreateServiceOrderCommand
    ) -> Result[ServiceOrderDTO, Exception]:
        logger.info(
            "create_service_order.started",
            extra={
                "client_id": command.client_id,
                "vehicle_id": command.vehicle_id,
                "role": command.actor.role.value,
            },
        )

        try:
            if command.actor.role == UserRole.CLIENT:
                order = ServiceOrder.create(command.client_id, command.vehicle_id, command.notes)
            else:
                order = ServiceOrder.create_received(
                    command.client_id, command.vehicle_id, command.notes
                )

            saved = await self.service_order_repo.add(order)

            await self.event_bus.publish_all(order.get_domain_events())
            order.clear_domain_events()
        except Exception as e:
            logger.error(
                "create_service_order.failed",
                extra={"client_id": command.client_id, "error": str(e)},
            )
            return failure_from_exception(e, "Service order creation failed")

        logger.info(
            "create_service_order.completed",
            extra={"service_order_id": saved.id, "status": saved.status.value},
        )
        return Success(ServiceOrderDTO.from_entity(saved))
