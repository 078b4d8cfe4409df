"""Base Command class for the write side of the application layer.

Command - a request to change system state. Commands carry the acting user,
handlers carry the logic.
"""

from abc import ABC
from dataclasses import dataclass


@dataclass(frozen=True)
class Command(ABC):
    """Base class for all commands.

    Command characteristics:
    - **Immutable**: frozen=True
    - **Intent**: ApproveBudgetCommand, UpdateServiceOrderStatusCommand
    - **Verb-based naming**: ApproveBudget, SendBudget (not Budget)
    - **No business logic**: only data, logic lives in the handler

    Example:
        >>> @dataclass(frozen=True)
        ... class ApproveBudgetCommand(Command):
        ...     budget_id: str
        ...     actor: ActorContext

        >>> command = ApproveBudgetCommand(budget_id="b-1", actor=actor)
        >>> result = await handler.handle(command)
    """

    pass
