"""In-memory implementation of the budget repository ports."""

import logging
from collections import defaultdict
from typing import List, Optional

from workshop.domain.budgets.entities import Budget, BudgetItem
from workshop.domain.budgets.exceptions import BudgetNotFoundError
from workshop.domain.budgets.repositories import BudgetItemRepository, BudgetRepository
from workshop.domain.budgets.value_objects import BudgetStatus
from workshop.domain.shared import ConcurrencyException, PersistenceError

from .snapshot import snapshot

logger = logging.getLogger(__name__)


class InMemoryBudgetRepository(BudgetRepository):
    """Dict-backed BudgetRepository.

    Stores copies, so `update(expected_status=...)` compares against the state
    as it was persisted, not against the caller's mutated aggregate.

    Example:
        >>> repo = InMemoryBudgetRepository()
        >>> await repo.add(budget)
        >>> budget.approve(UserRole.CLIENT)
        >>> await repo.update(budget, expected_status=BudgetStatus.SENT)
    """

    def __init__(self) -> None:
        self._budgets: dict[str, Budget] = {}

    async def add(self, budget: Budget) -> Budget:
        if budget.id is None:
            raise PersistenceError("Cannot store a budget without an ID")
        if budget.id in self._budgets:
            raise PersistenceError(f"Budget {budget.id} already exists", budget_id=budget.id)

        self._budgets[budget.id] = snapshot(budget)
        logger.debug("budget_repository.added", extra={"budget_id": budget.id})
        return snapshot(self._budgets[budget.id])

    async def get_by_id(self, budget_id: str) -> Optional[Budget]:
        stored = self._budgets.get(budget_id)
        return snapshot(stored) if stored is not None else None

    async def get_by_service_order_id(self, service_order_id: str) -> Optional[Budget]:
        for stored in self._budgets.values():
            if stored.service_order_id == service_order_id:
                return snapshot(stored)
        return None

    async def update(
        self, budget: Budget, expected_status: Optional[BudgetStatus] = None
    ) -> Budget:
        budget_id = budget.id or ""
        stored = self._budgets.get(budget_id)
        if stored is None:
            raise BudgetNotFoundError(budget_id)

        if expected_status is not None and stored.status != expected_status:
            logger.warning(
                "budget_repository.concurrent_update",
                extra={
                    "budget_id": budget_id,
                    "expected_status": expected_status.value,
                    "stored_status": stored.status.value,
                },
            )
            raise ConcurrencyException(
                f"Budget {budget_id} was modified by another request",
                budget_id=budget_id,
                expected_status=expected_status.value,
                stored_status=stored.status.value,
            )

        self._budgets[budget_id] = snapshot(budget)
        return snapshot(self._budgets[budget_id])


class InMemoryBudgetItemRepository(BudgetItemRepository):
    """Dict-backed BudgetItemRepository, lines kept in insertion order."""

    def __init__(self) -> None:
        self._items: dict[str, list[BudgetItem]] = defaultdict(list)

    async def add(self, item: BudgetItem) -> BudgetItem:
        self._items[item.budget_id].append(snapshot(item))
        return snapshot(item)

    async def get_by_budget_id(self, budget_id: str) -> List[BudgetItem]:
        return [snapshot(item) for item in self._items.get(budget_id, [])]

    async def remove(self, item_id: str) -> None:
        for budget_id, items in self._items.items():
            self._items[budget_id] = [item for item in items if item.id != item_id]
