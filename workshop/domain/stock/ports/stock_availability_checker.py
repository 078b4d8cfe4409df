"""StockAvailabilityChecker Port - read-only stock check used by budget approval.

A successful check is not a reservation. Stock only changes through the
StockDecreaser port, after the service order is approved.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Sequence

from workshop.domain.shared import Result


@dataclass(frozen=True)
class StockLine:
    """Requested quantity of one stock item."""

    stock_item_id: str
    quantity: int


@dataclass(frozen=True)
class StockLevel:
    """Stock read model exposed by the inventory context."""

    stock_item_id: str
    current_stock: int
    min_stock_level: int = 0


class StockAvailabilityChecker(ABC):
    """Abstract stock availability check.

    Example:
        >>> result = await checker.execute([StockLine("s-1", 2)])
        >>> result.value
        True
    """

    @abstractmethod
    async def execute(self, lines: Sequence[StockLine]) -> Result[bool, Exception]:
        """Check whether every line can be covered by current stock.

        Returns:
            Success(True) if all lines are available, Success(False) if any is
            short, Failure(error) if the check itself could not be performed
            (unknown item, storage error).
        """
        pass
