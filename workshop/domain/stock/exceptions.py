"""Stock lookup and movement errors."""

from workshop.domain.shared import AggregateNotFound, BusinessRuleViolation


class StockItemNotFoundError(AggregateNotFound):
    """Stock item referenced by a budget line does not exist."""

    def __init__(self, stock_item_id: str) -> None:
        super().__init__(
            f"Stock item {stock_item_id} not found", stock_item_id=stock_item_id
        )
        self.stock_item_id = stock_item_id


class NegativeStockError(BusinessRuleViolation):
    """Outgoing movement larger than the stock on hand."""

    def __init__(self, stock_item_id: str, requested: int, current_stock: int) -> None:
        super().__init__(
            "Invalid stock adjustment: resulting stock cannot be negative",
            stock_item_id=stock_item_id,
            requested=requested,
            current_stock=current_stock,
        )
        self.stock_item_id = stock_item_id
