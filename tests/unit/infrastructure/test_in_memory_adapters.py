"""Tests for the in-memory repositories, stock adapters and client directory."""

from decimal import Decimal

import pytest

from workshop.domain.budgets.entities import Budget, BudgetItem
from workshop.domain.budgets.exceptions import BudgetNotFoundError
from workshop.domain.budgets.value_objects import BudgetItemType, BudgetStatus, Money
from workshop.domain.clients.ports import ClientContact
from workshop.domain.service_orders.entities import ServiceOrder
from workshop.domain.service_orders.exceptions import ServiceOrderNotFoundError
from workshop.domain.service_orders.value_objects import ServiceOrderStatus
from workshop.domain.shared import ConcurrencyException, PersistenceError, UserRole
from workshop.domain.stock.exceptions import NegativeStockError, StockItemNotFoundError
from workshop.domain.stock.ports import StockLevel, StockLine
from workshop.infrastructure.clients import InMemoryClientDirectory
from workshop.infrastructure.persistence.in_memory import (
    InMemoryBudgetItemRepository,
    InMemoryBudgetRepository,
    InMemoryServiceOrderRepository,
)
from workshop.infrastructure.stock import InMemoryStockAvailabilityChecker, InMemoryStockInventory


class TestInMemoryBudgetRepository:
    """Tests for the budget repository."""

    @pytest.mark.asyncio
    async def test_add_and_get(self):
        """Test: stored budgets are found by ID and by service order."""
        repo = InMemoryBudgetRepository()
        budget = Budget.create(service_order_id="so-1", client_id="c-1")

        await repo.add(budget)

        assert (await repo.get_by_id(budget.id)).id == budget.id
        assert (await repo.get_by_service_order_id("so-1")).id == budget.id
        assert await repo.get_by_service_order_id("so-2") is None

    @pytest.mark.asyncio
    async def test_stored_copy_is_isolated(self):
        """Test: mutating a loaded budget doesn't change storage until update."""
        repo = InMemoryBudgetRepository()
        budget = Budget.create(service_order_id="so-1", client_id="c-1")
        await repo.add(budget)

        loaded = await repo.get_by_id(budget.id)
        loaded.send(UserRole.EMPLOYEE)

        assert (await repo.get_by_id(budget.id)).status == BudgetStatus.GENERATED
        assert loaded.has_domain_events is False

    @pytest.mark.asyncio
    async def test_compare_and_set_conflict(self):
        """Test: update with a stale expected status raises ConcurrencyException."""
        # Arrange
        repo = InMemoryBudgetRepository()
        budget = Budget.create(service_order_id="so-1", client_id="c-1")
        budget.send(UserRole.EMPLOYEE)
        await repo.add(budget)

        first = await repo.get_by_id(budget.id)
        second = await repo.get_by_id(budget.id)
        first.approve(UserRole.CLIENT)
        second.approve(UserRole.CLIENT)

        # Act
        await repo.update(first, expected_status=BudgetStatus.SENT)

        # Assert
        with pytest.raises(ConcurrencyException):
            await repo.update(second, expected_status=BudgetStatus.SENT)

    @pytest.mark.asyncio
    async def test_update_unknown_budget(self):
        """Test: updating a budget that was never added fails."""
        with pytest.raises(BudgetNotFoundError):
            await InMemoryBudgetRepository().update(
                Budget.create(service_order_id="so-1", client_id="c-1")
            )

    @pytest.mark.asyncio
    async def test_add_twice_fails(self):
        """Test: the same budget can't be inserted twice."""
        repo = InMemoryBudgetRepository()
        budget = Budget.create(service_order_id="so-1", client_id="c-1")
        await repo.add(budget)

        with pytest.raises(PersistenceError):
            await repo.add(budget)


class TestInMemoryServiceOrderRepository:
    """Tests for the service order repository."""

    @pytest.mark.asyncio
    async def test_update_persists_new_status(self):
        """Test: update stores the new status."""
        repo = InMemoryServiceOrderRepository()
        order = ServiceOrder.create(client_id="c-1", vehicle_id="v-1")
        await repo.add(order)

        order.transition_to(ServiceOrderStatus.RECEIVED, UserRole.EMPLOYEE, "e-1")
        await repo.update(order)

        assert (await repo.get_by_id(order.id)).status == ServiceOrderStatus.RECEIVED

    @pytest.mark.asyncio
    async def test_update_unknown_order(self):
        """Test: updating an unknown order raises ServiceOrderNotFoundError."""
        with pytest.raises(ServiceOrderNotFoundError):
            await InMemoryServiceOrderRepository().update(
                ServiceOrder.create(client_id="c-1", vehicle_id="v-1")
            )


class TestInMemoryStockAvailabilityChecker:
    """Tests for the stock checker."""

    @pytest.mark.asyncio
    async def test_available(self):
        """Test: enough stock for every line → Success(True)."""
        checker = InMemoryStockAvailabilityChecker([StockLevel("s-1", current_stock=5)])

        result = await checker.execute([StockLine("s-1", 5)])

        assert result.is_success and result.value is True

    @pytest.mark.asyncio
    async def test_lines_for_same_item_are_summed(self):
        """Test: two lines of 2 against a stock of 3 are short."""
        checker = InMemoryStockAvailabilityChecker([StockLevel("s-1", current_stock=3)])

        result = await checker.execute([StockLine("s-1", 2), StockLine("s-1", 2)])

        assert result.is_success and result.value is False

    @pytest.mark.asyncio
    async def test_unknown_item_is_failure(self):
        """Test: an unknown stock item is a Failure, not a shortage."""
        checker = InMemoryStockAvailabilityChecker()

        result = await checker.execute([StockLine("missing", 1)])

        assert result.is_failure
        assert isinstance(result.error, StockItemNotFoundError)


class TestInMemoryClientDirectory:
    """Tests for the client directory."""

    @pytest.mark.asyncio
    async def test_lookup(self):
        """Test: known clients resolve, unknown ones return None."""
        directory = InMemoryClientDirectory([ClientContact("c-1", "Ana", "ana@example.com")])
        directory.register(ClientContact("c-2", "Bruno"))

        assert (await directory.get_contact("c-1")).email == "ana@example.com"
        assert (await directory.get_contact("c-2")).email is None
        assert await directory.get_contact("c-3") is None


class TestInMemoryBudgetItemRepository:
    """Tests for the budget line repository."""

    @pytest.mark.asyncio
    async def test_remove_drops_only_that_line(self):
        """Test: removing one line keeps the others in order."""
        repo = InMemoryBudgetItemRepository()
        lines = [
            BudgetItem.create(
                budget_id="b-1",
                type=BudgetItemType.SERVICE,
                description=description,
                quantity=1,
                unit_price=Money.from_decimal(Decimal("10")),
                service_id="svc-1",
            )
            for description in ("Alignment", "Balancing", "Wash")
        ]
        for line in lines:
            await repo.add(line)

        await repo.remove(lines[1].id)
        await repo.remove("unknown")

        stored = await repo.get_by_budget_id("b-1")
        assert [line.description for line in stored] == ["Alignment", "Wash"]


class TestInMemoryStockInventory:
    """Tests for stock movements."""

    @pytest.mark.asyncio
    async def test_decrease_updates_level_and_records_movement(self):
        """Test: the level drops and the movement is kept with its reason."""
        inventory = InMemoryStockInventory([StockLevel("s-1", current_stock=5, min_stock_level=1)])

        result = await inventory.decrease("s-1", 2, reason="Used for service order so-1")

        assert result.value == StockLevel("s-1", current_stock=3, min_stock_level=1)
        assert inventory.get_level("s-1").current_stock == 3
        assert inventory.movements == [("s-1", 2, "Used for service order so-1")]

    @pytest.mark.asyncio
    async def test_check_sees_decreased_level(self):
        """Test: the availability check reads the same table."""
        inventory = InMemoryStockInventory([StockLevel("s-1", current_stock=5)])
        await inventory.decrease("s-1", 4, reason="Used for service order so-1")

        result = await inventory.execute([StockLine("s-1", 2)])

        assert result.value is False

    @pytest.mark.asyncio
    async def test_decrease_below_zero_is_refused(self):
        """Test: taking more than is on hand changes nothing."""
        inventory = InMemoryStockInventory([StockLevel("s-1", current_stock=1)])

        result = await inventory.decrease("s-1", 2, reason="Used for service order so-1")

        assert isinstance(result.error, NegativeStockError)
        assert inventory.get_level("s-1").current_stock == 1
        assert inventory.movements == []

    @pytest.mark.asyncio
    async def test_decrease_unknown_item_is_failure(self):
        """Test: unknown stock item → StockItemNotFoundError."""
        inventory = InMemoryStockInventory()

        result = await inventory.decrease("missing", 1, reason="Used for service order so-1")

        assert isinstance(result.error, StockItemNotFoundError)
