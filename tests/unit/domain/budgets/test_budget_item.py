"""Tests for the BudgetItem entity and its reference invariant."""

import pytest

from workshop.domain.budgets.entities import BudgetItem
from workshop.domain.budgets.exceptions import InvalidBudgetItemError
from workshop.domain.budgets.validators import (
    BOTH_REFERENCES_MESSAGE,
    SERVICE_ID_MISSING_MESSAGE,
    STOCK_ITEM_ID_MISSING_MESSAGE,
)
from workshop.domain.budgets.value_objects import BudgetItemType, Money


def _item(**overrides):
    data = {
        "budget_id": "b-1",
        "type": BudgetItemType.SERVICE,
        "description": "Oil change",
        "quantity": 1,
        "unit_price": Money(cents=8000),
        "service_id": "svc-1",
    }
    data.update(overrides)
    return BudgetItem.create(**data)


class TestBudgetItemCreation:
    """Tests for creating lines."""

    def test_service_line(self):
        """Test: SERVICE line with a service_id is valid."""
        item = _item()

        assert item.id is not None
        assert item.is_stock_item is False
        assert item.total_price == Money(cents=8000)

    def test_stock_line_total(self):
        """Test: total is unit price times quantity."""
        item = _item(
            type=BudgetItemType.STOCK_ITEM,
            service_id=None,
            stock_item_id="s-1",
            quantity=3,
            unit_price=Money.from_decimal("45.50"),
        )

        assert item.is_stock_item is True
        assert str(item.total_price) == "136.50"

    @pytest.mark.parametrize(
        "item_type,service_id,stock_item_id,message",
        [
            (BudgetItemType.SERVICE, "svc-1", "s-1", BOTH_REFERENCES_MESSAGE),
            (BudgetItemType.STOCK_ITEM, "svc-1", "s-1", BOTH_REFERENCES_MESSAGE),
            (BudgetItemType.SERVICE, None, None, SERVICE_ID_MISSING_MESSAGE),
            (BudgetItemType.SERVICE, None, "s-1", SERVICE_ID_MISSING_MESSAGE),
            (BudgetItemType.STOCK_ITEM, None, None, STOCK_ITEM_ID_MISSING_MESSAGE),
            (BudgetItemType.STOCK_ITEM, "svc-1", None, STOCK_ITEM_ID_MISSING_MESSAGE),
        ],
    )
    def test_reference_invariant_messages(self, item_type, service_id, stock_item_id, message):
        """Test: each broken combination has its own message."""
        with pytest.raises(InvalidBudgetItemError) as exc_info:
            _item(type=item_type, service_id=service_id, stock_item_id=stock_item_id)

        assert exc_info.value.message == message

    def test_messages_are_distinct(self):
        """Test: the three invariant messages differ."""
        assert len(
            {BOTH_REFERENCES_MESSAGE, SERVICE_ID_MISSING_MESSAGE, STOCK_ITEM_ID_MISSING_MESSAGE}
        ) == 3

    @pytest.mark.parametrize("quantity", [0, -1])
    def test_quantity_must_be_positive(self, quantity):
        """Test: zero or negative quantity is refused."""
        with pytest.raises(InvalidBudgetItemError, match="Quantity"):
            _item(quantity=quantity)

    def test_description_required(self):
        """Test: blank description is refused."""
        with pytest.raises(InvalidBudgetItemError, match="Description"):
            _item(description="   ")


class TestBudgetItemUpdate:
    """Tests for partial updates, validated like creation."""

    def test_switch_service_line_to_stock_line(self):
        """Test: changing type together with the references is accepted."""
        item = _item()

        item.update(
            type=BudgetItemType.STOCK_ITEM,
            stock_item_id="s-9",
            clear_service_id=True,
        )

        assert item.type == BudgetItemType.STOCK_ITEM
        assert item.service_id is None
        assert item.stock_item_id == "s-9"

    def test_update_breaking_invariant_leaves_item_untouched(self):
        """Test: an invalid merged state raises and changes nothing."""
        item = _item()

        with pytest.raises(InvalidBudgetItemError) as exc_info:
            item.update(stock_item_id="s-1", quantity=5)

        assert exc_info.value.message == BOTH_REFERENCES_MESSAGE
        assert item.stock_item_id is None
        assert item.quantity == 1

    def test_update_type_without_reference_fails(self):
        """Test: switching to STOCK_ITEM without a stock_item_id is refused."""
        item = _item()

        with pytest.raises(InvalidBudgetItemError) as exc_info:
            item.update(type=BudgetItemType.STOCK_ITEM, clear_service_id=True)

        assert exc_info.value.message == STOCK_ITEM_ID_MISSING_MESSAGE
        assert item.type == BudgetItemType.SERVICE
