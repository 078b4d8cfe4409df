"""Budget line invariant: exactly one reference, matching the line type.

Checked at every create/update boundary, never relaxed.
"""

from typing import Optional

from ..exceptions import InvalidBudgetItemError
from ..value_objects import BudgetItemType

BOTH_REFERENCES_MESSAGE = "Cannot provide both service_id and stock_item_id"
SERVICE_ID_MISSING_MESSAGE = "SERVICE type must have a service_id"
STOCK_ITEM_ID_MISSING_MESSAGE = "STOCK_ITEM type must have a stock_item_id"


def validate_budget_item_reference(
    item_type: BudgetItemType,
    service_id: Optional[str],
    stock_item_id: Optional[str],
) -> None:
    """Validate the type / reference combination of a budget line.

    Raises:
        InvalidBudgetItemError: With a distinct message per broken combination.
    """
    if service_id and stock_item_id:
        raise InvalidBudgetItemError(BOTH_REFERENCES_MESSAGE, type=item_type.value)

    if item_type == BudgetItemType.SERVICE and not service_id:
        raise InvalidBudgetItemError(SERVICE_ID_MISSING_MESSAGE, type=item_type.value)

    if item_type == BudgetItemType.STOCK_ITEM and not stock_item_id:
        raise InvalidBudgetItemError(STOCK_ITEM_ID_MISSING_MESSAGE, type=item_type.value)


def validate_quantity(quantity: int) -> None:
    if not isinstance(quantity, int) or isinstance(quantity, bool) or quantity <= 0:
        raise InvalidBudgetItemError("Quantity must be a positive integer", quantity=quantity)
