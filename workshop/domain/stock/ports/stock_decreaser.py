"""StockDecreaser Port - stock consumption owned by the inventory context."""

from abc import ABC, abstractmethod

from workshop.domain.shared import Result

from .stock_availability_checker import StockLevel


class StockDecreaser(ABC):
    """Takes parts out of stock once the repair they are used for is approved.

    Example:
        >>> result = await decreaser.decrease("s-1", 2, reason="Used for service order so-1")
        >>> result.value.current_stock
        3
    """

    @abstractmethod
    async def decrease(
        self, stock_item_id: str, quantity: int, reason: str
    ) -> Result[StockLevel, Exception]:
        """Record an outgoing stock movement.

        Returns:
            Success(new level), or Failure(error) when the item is unknown or
            the movement would take stock below zero.
        """
        pass
