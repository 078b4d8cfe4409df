"""Integration tests: the whole workflow through the composition root.

Real event bus, real reactions, in-memory adapters.
"""

from datetime import datetime, timezone
from decimal import Decimal

import pytest

from workshop.application.budgets.commands import (
    AddBudgetItemCommand,
    ApproveBudgetCommand,
    RejectBudgetCommand,
    SendBudgetCommand,
)
from workshop.application.service_orders.commands import (
    CreateServiceOrderCommand,
    UpdateServiceOrderStatusCommand,
)
from workshop.application.shared import EventHandler
from workshop.bootstrap import bootstrap
from workshop.config import Settings
from workshop.domain.budgets.exceptions import InsufficientStockError
from workshop.domain.budgets.value_objects import BudgetItemType, BudgetStatus, DeliveryMethod
from workshop.domain.clients.ports import ClientContact
from workshop.domain.service_orders.events import ServiceOrderReceivedEvent
from workshop.domain.service_orders.value_objects import ServiceOrderStatus
from workshop.domain.shared import EventType, InvalidStateTransition
from workshop.domain.stock.ports import StockLevel


class EventRecorder(EventHandler):
    """Collects published events of one kind."""

    def __init__(self, event_type):
        self.event_type = event_type
        self.events = []

    async def handle(self, event):
        self.events.append(event)


@pytest.fixture
def workshop():
    return bootstrap(
        settings=Settings(_env_file=None),
        stock_levels=[StockLevel("s-1", current_stock=5)],
        contacts=[ClientContact("c-1", "Ana Souza", "ana@example.com")],
    )


async def _received_order_with_budget(workshop, employee_actor):
    result = await workshop.create_service_order.handle(
        CreateServiceOrderCommand(client_id="c-1", vehicle_id="v-1", actor=employee_actor)
    )
    order_id = result.value.id
    budget = await workshop.budget_repo.get_by_service_order_id(order_id)
    return order_id, budget


async def _add_lines(workshop, budget_id, employee_actor, stock_quantity):
    await workshop.add_budget_item.handle(
        AddBudgetItemCommand(
            budget_id=budget_id,
            actor=employee_actor,
            type=BudgetItemType.SERVICE,
            description="Brake service",
            quantity=1,
            unit_price=Decimal("150.00"),
            service_id="svc-1",
        )
    )
    await workshop.add_budget_item.handle(
        AddBudgetItemCommand(
            budget_id=budget_id,
            actor=employee_actor,
            type=BudgetItemType.STOCK_ITEM,
            description="Brake pads",
            quantity=stock_quantity,
            unit_price=Decimal("45.50"),
            stock_item_id="s-1",
        )
    )


class TestBudgetGeneration:
    """ServiceOrderReceived → exactly one budget."""

    @pytest.mark.asyncio
    async def test_publishing_received_creates_one_budget(self, workshop):
        """Test: the reaction creates one budget with 7 days and EMAIL."""
        # Arrange
        created = EventRecorder(EventType.BUDGET_CREATED)
        workshop.event_bus.subscribe(EventType.BUDGET_CREATED, created)
        event = ServiceOrderReceivedEvent(
            aggregate_id="so-42",
            client_id="c-1",
            vehicle_id="v-1",
            received_at=datetime.now(timezone.utc),
        )

        # Act
        await workshop.event_bus.publish(event)
        await workshop.event_bus.publish(event)

        # Assert
        budget = await workshop.budget_repo.get_by_service_order_id("so-42")
        assert budget is not None
        assert budget.client_id == "c-1"
        assert budget.validity_period == 7
        assert budget.delivery_method == DeliveryMethod.EMAIL
        assert budget.status == BudgetStatus.GENERATED
        assert budget.notes == workshop.settings.budget_auto_generated_note
        assert [e.aggregate_id for e in created.events] == [budget.id]

    @pytest.mark.asyncio
    async def test_client_request_then_receipt_generates_budget(
        self, workshop, client_actor, employee_actor
    ):
        """Test: REQUESTED order gets its budget once staff mark it RECEIVED."""
        created = await workshop.create_service_order.handle(
            CreateServiceOrderCommand(client_id="c-1", vehicle_id="v-1", actor=client_actor)
        )
        order_id = created.value.id
        assert await workshop.budget_repo.get_by_service_order_id(order_id) is None

        await workshop.update_service_order_status.handle(
            UpdateServiceOrderStatusCommand(
                service_order_id=order_id,
                target_status=ServiceOrderStatus.RECEIVED,
                actor=employee_actor,
            )
        )

        assert await workshop.budget_repo.get_by_service_order_id(order_id) is not None


class TestApprovalFlow:
    """Send → approve, with the service order following the decision."""

    @pytest.mark.asyncio
    async def test_approve_moves_service_order_to_approved(
        self, workshop, employee_actor, client_actor
    ):
        """Test: approving the budget approves the order, one event only."""
        # Arrange
        recorder = EventRecorder(EventType.BUDGET_APPROVED)
        workshop.event_bus.subscribe(EventType.BUDGET_APPROVED, recorder)
        order_id, budget = await _received_order_with_budget(workshop, employee_actor)
        await _add_lines(workshop, budget.id, employee_actor, stock_quantity=2)
        await workshop.send_budget.handle(SendBudgetCommand(budget_id=budget.id, actor=employee_actor))

        # Act
        result = await workshop.approve_budget.approve(budget.id, client_actor)
        again = await workshop.approve_budget.handle(
            ApproveBudgetCommand(budget_id=budget.id, actor=client_actor)
        )

        # Assert
        assert result.is_success
        assert result.value.total_amount == Decimal("241.00")
        assert isinstance(again.error, InvalidStateTransition)

        order = await workshop.service_order_repo.get_by_id(order_id)
        assert order.status == ServiceOrderStatus.APPROVED

        assert len(recorder.events) == 1
        assert recorder.events[0].client_name == "Ana Souza"
        assert str(recorder.events[0].budget_total) == "241.00"
        assert workshop.stock_decreaser.get_level("s-1").current_stock == 3
        assert workshop.stock_decreaser.movements == [
            ("s-1", 2, f"Used for service order {order_id}")
        ]

    @pytest.mark.asyncio
    async def test_insufficient_stock_changes_nothing(
        self, workshop, employee_actor, client_actor
    ):
        """Test: 6 pads requested, 5 in stock → budget stays SENT, order RECEIVED."""
        recorder = EventRecorder(EventType.BUDGET_APPROVED)
        workshop.event_bus.subscribe(EventType.BUDGET_APPROVED, recorder)
        order_id, budget = await _received_order_with_budget(workshop, employee_actor)
        await _add_lines(workshop, budget.id, employee_actor, stock_quantity=6)
        await workshop.send_budget.handle(SendBudgetCommand(budget_id=budget.id, actor=employee_actor))

        result = await workshop.approve_budget.approve(budget.id, client_actor)

        assert isinstance(result.error, InsufficientStockError)
        assert (await workshop.budget_repo.get_by_id(budget.id)).status == BudgetStatus.SENT
        order = await workshop.service_order_repo.get_by_id(order_id)
        assert order.status == ServiceOrderStatus.RECEIVED
        assert recorder.events == []
        assert workshop.stock_decreaser.get_level("s-1").current_stock == 5

    @pytest.mark.asyncio
    async def test_reject_moves_service_order_to_rejected(
        self, workshop, employee_actor, client_actor
    ):
        """Test: rejecting the budget rejects the order."""
        order_id, budget = await _received_order_with_budget(workshop, employee_actor)
        await workshop.send_budget.handle(SendBudgetCommand(budget_id=budget.id, actor=employee_actor))

        result = await workshop.reject_budget.handle(
            RejectBudgetCommand(budget_id=budget.id, actor=client_actor, reason="Too expensive")
        )

        assert result.value.status == "REJECTED"
        order = await workshop.service_order_repo.get_by_id(order_id)
        assert order.status == ServiceOrderStatus.REJECTED
        assert workshop.stock_decreaser.movements == []

    @pytest.mark.asyncio
    async def test_configured_validity_reaches_generated_budget(self, employee_actor):
        """Test: settings drive the auto-generated budget defaults."""
        workshop = bootstrap(
            settings=Settings(
                _env_file=None,
                budget_default_validity_days=3,
                budget_default_delivery_method=DeliveryMethod.SMS,
            )
        )

        _, budget = await _received_order_with_budget(workshop, employee_actor)

        assert budget.validity_period == 3
        assert budget.delivery_method == DeliveryMethod.SMS
