"""In-memory stock inventory: availability check plus outgoing movements."""

import logging
from dataclasses import replace
from typing import Iterable, Optional

from workshop.domain.shared import BusinessRuleViolation, Failure, Result, Success
from workshop.domain.stock.exceptions import NegativeStockError, StockItemNotFoundError
from workshop.domain.stock.ports import StockDecreaser, StockLevel

from .in_memory_stock_checker import InMemoryStockAvailabilityChecker

logger = logging.getLogger(__name__)


class InMemoryStockInventory(InMemoryStockAvailabilityChecker, StockDecreaser):
    """One stock table serving both stock ports.

    Every accepted movement is kept in `movements` as
    `(stock_item_id, quantity, reason)`.

    Example:
        >>> inventory = InMemoryStockInventory([StockLevel("s-1", current_stock=5)])
        >>> (await inventory.decrease("s-1", 2, reason="Used for service order so-1")).value
        StockLevel(stock_item_id='s-1', current_stock=3, min_stock_level=0)
    """

    def __init__(self, levels: Iterable[StockLevel] = ()) -> None:
        super().__init__(levels)
        self.movements: list[tuple[str, int, str]] = []

    def get_level(self, stock_item_id: str) -> Optional[StockLevel]:
        return self._levels.get(stock_item_id)

    async def decrease(
        self, stock_item_id: str, quantity: int, reason: str
    ) -> Result[StockLevel, Exception]:
        if quantity <= 0:
            return Failure(
                BusinessRuleViolation(
                    "Quantity must be a positive integer",
                    stock_item_id=stock_item_id,
                    quantity=quantity,
                )
            )

        level = self._levels.get(stock_item_id)
        if level is None:
            return Failure(StockItemNotFoundError(stock_item_id))

        if level.current_stock < quantity:
            return Failure(NegativeStockError(stock_item_id, quantity, level.current_stock))

        updated = replace(level, current_stock=level.current_stock - quantity)
        self._levels[stock_item_id] = updated
        self.movements.append((stock_item_id, quantity, reason))

        extra = {
            "stock_item_id": stock_item_id,
            "quantity": quantity,
            "current_stock": updated.current_stock,
            "reason": reason,
        }
        if updated.current_stock < updated.min_stock_level:
            logger.warning("stock_inventory.below_minimum", extra=extra)
        else:
            logger.info("stock_inventory.decreased", extra=extra)
        return Success(updated)
