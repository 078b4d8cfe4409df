"""UpdateServiceOrderStatus Command."""

from dataclasses import dataclass
from typing import Optional

from workshop.application.shared import ActorContext, Command
from workshop.domain.service_orders.value_objects import ServiceOrderStatus


@dataclass(frozen=True)
class UpdateServiceOrderStatusCommand(Command):
    """Move a service order to another status.

    Example:
        >>> UpdateServiceOrderStatusCommand(
        ...     service_order_id="so-1",
        ...     target_status=ServiceOrderStatus.CANCELLED,
        ...     actor=admin,
        ...     reason="Client withdrew",
        ... )
    """

    service_order_id: str
    target_status: ServiceOrderStatus
    actor: ActorContext
    reason: Optional[str] = None
    """Required when cancelling."""
