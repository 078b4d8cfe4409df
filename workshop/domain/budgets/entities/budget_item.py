"""BudgetItem Entity - one line of a budget."""

from typing import Optional
from uuid import uuid4

from workshop.domain.shared import Entity

from ..exceptions import InvalidBudgetItemError
from ..validators import validate_budget_item_reference, validate_quantity
from ..value_objects import BudgetItemType, Money


class BudgetItem(Entity):
    """Budget line: a service or a stock part, times a quantity.

    Invariant: exactly one of `service_id` / `stock_item_id` is set and it
    matches `type`. Checked on creation and on every update.

    Example:
        >>> item = BudgetItem.create(
        ...     budget_id="b-1",
        ...     type=BudgetItemType.STOCK_ITEM,
        ...     description="Brake pads",
        ...     quantity=2,
        ...     unit_price=Money.from_decimal("45.50"),
        ...     stock_item_id="s-1",
        ... )
        >>> str(item.total_price)
        '91.00'
    """

    def __init__(
        self,
        *,
        id: Optional[str] = None,
        budget_id: str,
        type: BudgetItemType,
        description: str,
        quantity: int,
        unit_price: Money,
        service_id: Optional[str] = None,
        stock_item_id: Optional[str] = None,
    ) -> None:
        super().__init__(id)
        self._validate(type, description, quantity, service_id, stock_item_id)
        self.budget_id = budget_id
        self.type = type
        self.description = description.strip()
        self.quantity = quantity
        self.unit_price = unit_price
        self.service_id = service_id
        self.stock_item_id = stock_item_id

    @classmethod
    def create(
        cls,
        budget_id: str,
        type: BudgetItemType,
        description: str,
        quantity: int,
        unit_price: Money,
        service_id: Optional[str] = None,
        stock_item_id: Optional[str] = None,
    ) -> "BudgetItem":
        return cls(
            id=str(uuid4()),
            budget_id=budget_id,
            type=type,
            description=description,
            quantity=quantity,
            unit_price=unit_price,
            service_id=service_id,
            stock_item_id=stock_item_id,
        )

    @property
    def total_price(self) -> Money:
        return self.unit_price * self.quantity

    @property
    def is_stock_item(self) -> bool:
        return self.type == BudgetItemType.STOCK_ITEM

    def update(
        self,
        *,
        type: Optional[BudgetItemType] = None,
        description: Optional[str] = None,
        quantity: Optional[int] = None,
        unit_price: Optional[Money] = None,
        service_id: Optional[str] = None,
        stock_item_id: Optional[str] = None,
        clear_service_id: bool = False,
        clear_stock_item_id: bool = False,
    ) -> None:
        """Apply a partial update, validating the merged state first.

        Nothing changes if the merged state breaks the invariant.

        Raises:
            InvalidBudgetItemError: Merged line is invalid.
        """
        new_type = type or self.type
        new_description = description if description is not None else self.description
        new_quantity = quantity if quantity is not None else self.quantity
        new_service_id = None if clear_service_id else (service_id or self.service_id)
        new_stock_item_id = (
            None if clear_stock_item_id else (stock_item_id or self.stock_item_id)
        )

        self._validate(
            new_type, new_description, new_quantity, new_service_id, new_stock_item_id
        )

        self.type = new_type
        self.description = new_description.strip()
        self.quantity = new_quantity
        if unit_price is not None:
            self.unit_price = unit_price
        self.service_id = new_service_id
        self.stock_item_id = new_stock_item_id

    @staticmethod
    def _validate(
        type: BudgetItemType,
        description: str,
        quantity: int,
        service_id: Optional[str],
        stock_item_id: Optional[str],
    ) -> None:
        if not description or not description.strip():
            raise InvalidBudgetItemError("Description is required")
        validate_quantity(quantity)
        validate_budget_item_reference(type, service_id, stock_item_id)

    def __repr__(self) -> str:
        return (
            f"BudgetItem(id={self.id}, budget_id={self.budget_id}, "
            f"type={self.type.value}, quantity={self.quantity}, total={self.total_price})"
        )
