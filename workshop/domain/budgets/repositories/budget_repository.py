"""Budget repository ports."""

from abc import ABC, abstractmethod
from typing import List, Optional

from ..entities import Budget, BudgetItem
from ..value_objects import BudgetStatus


class BudgetRepository(ABC):
    """Abstract interface for budget persistence."""

    @abstractmethod
    async def add(self, budget: Budget) -> Budget:
        """Insert a new budget and return the persisted aggregate."""
        pass

    @abstractmethod
    async def get_by_id(self, budget_id: str) -> Optional[Budget]:
        """Get budget by ID, or None if it does not exist."""
        pass

    @abstractmethod
    async def get_by_service_order_id(self, service_order_id: str) -> Optional[Budget]:
        """Get the budget generated for a service order, if any."""
        pass

    @abstractmethod
    async def update(
        self, budget: Budget, expected_status: Optional[BudgetStatus] = None
    ) -> Budget:
        """Store the new state and return the persisted aggregate.

        Args:
            budget: Aggregate with the new state.
            expected_status: Compare-and-set guard. When given, the write only
                succeeds if the stored status still equals it.

        Raises:
            BudgetNotFoundError: Budget was never added.
            ConcurrencyException: Stored status differs from `expected_status`.
            PersistenceError: Storage failure.
        """
        pass


class BudgetItemRepository(ABC):
    """Abstract interface for budget line persistence."""

    @abstractmethod
    async def add(self, item: BudgetItem) -> BudgetItem:
        pass

    @abstractmethod
    async def get_by_budget_id(self, budget_id: str) -> List[BudgetItem]:
        """All lines of a budget, in insertion order."""
        pass

    @abstractmethod
    async def remove(self, item_id: str) -> None:
        """Delete a line. Unknown IDs are ignored."""
        pass
