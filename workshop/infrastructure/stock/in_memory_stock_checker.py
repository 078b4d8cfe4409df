"""In-memory StockAvailabilityChecker backed by a stock level table."""

import logging
from collections import defaultdict
from typing import Iterable, Sequence

from workshop.domain.shared import Failure, Result, Success
from workshop.domain.stock.exceptions import StockItemNotFoundError
from workshop.domain.stock.ports import StockAvailabilityChecker, StockLevel, StockLine

logger = logging.getLogger(__name__)


class InMemoryStockAvailabilityChecker(StockAvailabilityChecker):
    """Compares requested quantities with `current_stock`.

    Lines for the same stock item are summed before the comparison. An unknown
    stock item is a Failure, not a shortage.

    Example:
        >>> checker = InMemoryStockAvailabilityChecker([StockLevel("s-1", current_stock=3)])
        >>> (await checker.execute([StockLine("s-1", 2), StockLine("s-1", 2)])).value
        False
    """

    def __init__(self, levels: Iterable[StockLevel] = ()) -> None:
        self._levels: dict[str, StockLevel] = {level.stock_item_id: level for level in levels}

    def set_level(self, level: StockLevel) -> None:
        self._levels[level.stock_item_id] = level

    async def execute(self, lines: Sequence[StockLine]) -> Result[bool, Exception]:
        requested: dict[str, int] = defaultdict(int)
        for line in lines:
            requested[line.stock_item_id] += line.quantity

        for stock_item_id, quantity in requested.items():
            level = self._levels.get(stock_item_id)
            if level is None:
                return Failure(StockItemNotFoundError(stock_item_id))

            if level.current_stock < quantity:
                logger.info(
                    "stock_checker.insufficient",
                    extra={
                        "stock_item_id": stock_item_id,
                        "requested": quantity,
                        "current_stock": level.current_stock,
                    },
                )
                return Success(False)

        return Success(True)
