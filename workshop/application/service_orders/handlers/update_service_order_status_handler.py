"""UpdateServiceOrderStatus Handler - role-gated status change."""

import logging

from workshop.application.service_orders.commands import UpdateServiceOrderStatusCommand
from workshop.application.service_orders.dtos import ServiceOrderDTO
from workshop.application.shared import CommandHandler, failure_from_exception
from workshop.domain.service_orders.exceptions import ServiceOrderNotFoundError
from workshop.domain.service_orders.repositories import ServiceOrderRepository
from workshop.domain.shared import Failure, Result, Success
from workshop.infrastructure.messaging import EventBus

logger = logging.getLogger(__name__)


class UpdateServiceOrderStatusHandler(
    CommandHandler[UpdateServiceOrderStatusCommand, Result[ServiceOrderDTO, Exception]]
):
    """Handler for UpdateServiceOrderStatus command.

    Flow:
    1. Load order
    2. Transition through the validator (edge + role, reason when cancelling)
    3. Persist
    4. Publish recorded events

    Example:
        >>> result = await handler.handle(
        ...     UpdateServiceOrderStatusCommand("so-1", ServiceOrderStatus.IN_DIAGNOSIS, employee)
        ... )
        >>> result.value.status
        'IN_DIAGNOSIS'
    """

    def __init__(self, service_order_repo: ServiceOrderRepository, event_bus: EventBus) -> None:
        self.service_order_repo = service_order_repo
        self.event_bus = event_bus

    async def handle(
        self, command: UpdateServiceOrderStatusCommand
    ) -> Result[ServiceOrderDTO, Exception]:
        logger.info(
            "update_service_order_status.started",
            extra={
                "service_order_id": command.service_order_id,
                "target_status": command.target_status.value,
                "user_id": command.actor.user_id,
                "role": command.actor.role.value,
            },
        )

        try:
            order = await self.service_order_repo.get_by_id(command.service_order_id)
            if order is None:
                return Failure(ServiceOrderNotFoundError(command.service_order_id))

            order.transition_to(
                command.target_status,
                command.actor.role,
                changed_by=command.actor.user_id,
                reason=command.reason,
            )
            saved = await self.service_order_repo.update(order)

            await self.event_bus.publish_all(order.get_domain_events())
            order.clear_domain_events()
        except Exception as e:
            logger.warning(
                "update_service_order_status.failed",
                extra={"service_order_id": command.service_order_id, "error": str(e)},
            )
            return failure_from_exception(e, "Service order status update failed")

        logger.info(
            "update_service_order_status.completed",
            extra={"service_order_id": saved.id, "status": saved.status.value},
        )
        return Success(ServiceOrderDTO.from_entity(saved))
