"""In-memory adapters for the repository ports.

Back the composition root and the integration tests. Durable storage mapping
lives outside this package.
"""

from .budget_repository import InMemoryBudgetItemRepository, InMemoryBudgetRepository
from .service_order_repository import InMemoryServiceOrderRepository

__all__ = [
    "InMemoryBudgetRepository",
    "InMemoryBudgetItemRepository",
    "InMemoryServiceOrderRepository",
]
