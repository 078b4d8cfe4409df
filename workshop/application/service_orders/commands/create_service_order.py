"""CreateServiceOrder Command - vehicle intake."""

from dataclasses import dataclass
from typing import Optional

from workshop.application.shared import ActorContext, Command


@dataclass(frozen=True)
class CreateServiceOrderCommand(Command):
    """Open a new service order.

    A CLIENT opens it as REQUESTED. Staff (EMPLOYEE / ADMIN) register a vehicle
    already in the workshop, so the order starts RECEIVED and the initial budget
    is generated right away.
    """

    client_id: str
    vehicle_id: str
    actor: ActorContext
    notes: Optional[str] = None
