"""Budget lifecycle Commands - send, reject, mark received."""

from dataclasses import dataclass
from typing import Optional

from workshop.application.shared import ActorContext, Command


@dataclass(frozen=True)
class SendBudgetCommand(Command):
    """Deliver a GENERATED budget to the client."""

    budget_id: str
    actor: ActorContext


@dataclass(frozen=True)
class RejectBudgetCommand(Command):
    """Client declines a SENT budget."""

    budget_id: str
    actor: ActorContext
    reason: Optional[str] = None


@dataclass(frozen=True)
class MarkBudgetReceivedCommand(Command):
    """Client acknowledges a SENT budget."""

    budget_id: str
    actor: ActorContext
