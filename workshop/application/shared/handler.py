"""Base Handler class for Commands."""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from .command import Command

TCommand = TypeVar("TCommand", bound=Command)
TResult = TypeVar("TResult")


class CommandHandler(ABC, Generic[TCommand, TResult]):
    """Base class for command handlers.

    Command Handler is responsible for:
    - Loading aggregates from repositories
    - Running domain logic (aggregate methods, transition validator)
    - Persisting changes
    - Publishing domain events after persistence

    Handlers return a Result. Expected business failures come back as
    Failure(DomainException), anything else as Failure(UnexpectedDomainError).

    Example:
        >>> class SendBudgetHandler(CommandHandler[SendBudgetCommand, Result[BudgetDTO, Exception]]):
        ...     def __init__(self, budget_repo: BudgetRepository, event_bus: EventBus):
        ...         self.budget_repo = budget_repo
        ...         self.event_bus = event_bus
        ...
        ...     async def handle(self, command: SendBudgetCommand) -> Result[BudgetDTO, Exception]:
        ...         budget = await self.budget_repo.get_by_id(command.budget_id)
        ...         budget.send(command.actor.role)
        ...         saved = await self.budget_repo.update(budget)
        ...         await self.event_bus.publish(...)
        ...         return Success(BudgetDTO.from_entity(saved))
    """

    @abstractmethod
    async def handle(self, command: TCommand) -> TResult:
        """Handle command and return result.

        Args:
            command: Command to handle.

        Returns:
            Result of command execution.
        """
        pass
