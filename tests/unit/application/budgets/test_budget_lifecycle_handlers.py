"""Tests for create / send / reject / mark-received budget handlers."""

from unittest.mock import AsyncMock, MagicMock

import pytest

from workshop.application.budgets.commands import (
    CreateBudgetCommand,
    MarkBudgetReceivedCommand,
    RejectBudgetCommand,
    SendBudgetCommand,
)
from workshop.application.budgets.handlers import (
    CreateBudgetHandler,
    MarkBudgetReceivedHandler,
    RejectBudgetHandler,
    SendBudgetHandler,
)
from workshop.domain.budgets.entities import Budget
from workshop.domain.budgets.events import (
    BudgetCreatedEvent,
    BudgetReceivedEvent,
    BudgetRejectedEvent,
    BudgetSentEvent,
)
from workshop.domain.budgets.exceptions import BudgetExpiredError, BudgetNotFoundError
from workshop.domain.budgets.value_objects import BudgetStatus, DeliveryMethod
from workshop.domain.clients.ports import ClientContact
from workshop.domain.shared import (
    BusinessRuleViolation,
    UnauthorizedStatusTransition,
    UnexpectedDomainError,
)


@pytest.fixture
def event_bus():
    bus = MagicMock()
    bus.publish = AsyncMock()
    bus.publish_all = AsyncMock()
    return bus


@pytest.fixture
def client_directory():
    directory = AsyncMock()
    directory.get_contact.return_value = ClientContact("c-1", "Ana Souza", "ana@example.com")
    return directory


def _repo_returning(budget):
    repo = AsyncMock()
    repo.get_by_id.return_value = budget
    repo.add.side_effect = lambda b: b
    repo.update.side_effect = lambda b, expected_status=None: b
    return repo


class TestCreateBudgetHandler:
    """Tests for CreateBudgetHandler."""

    @pytest.mark.asyncio
    async def test_create_persists_and_publishes_created_event(self, event_bus, employee_actor):
        """Test: a GENERATED budget is stored and BudgetCreated published."""
        # Arrange
        repo = _repo_returning(None)
        handler = CreateBudgetHandler(repo, event_bus)

        # Act
        result = await handler.handle(
            CreateBudgetCommand(
                service_order_id="so-1",
                client_id="c-1",
                actor=employee_actor,
                validity_period=10,
                delivery_method=DeliveryMethod.SMS,
            )
        )

        # Assert
        assert result.is_success
        assert result.value.status == "GENERATED"
        assert result.value.validity_period == 10
        assert result.value.delivery_method == "SMS"
        repo.add.assert_awaited_once()

        published = event_bus.publish_all.await_args.args[0]
        assert [type(e) for e in published] == [BudgetCreatedEvent]

    @pytest.mark.asyncio
    async def test_invalid_validity_is_domain_failure(self, event_bus, employee_actor):
        """Test: validity 0 comes back as a business rule violation."""
        repo = _repo_returning(None)
        handler = CreateBudgetHandler(repo, event_bus)

        result = await handler.handle(
            CreateBudgetCommand(
                service_order_id="so-1", client_id="c-1", actor=employee_actor, validity_period=0
            )
        )

        assert isinstance(result.error, BusinessRuleViolation)
        repo.add.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_storage_error_is_wrapped(self, event_bus, employee_actor):
        """Test: raw storage errors become UnexpectedDomainError."""
        repo = _repo_returning(None)
        repo.add.side_effect = OSError("connection reset")
        handler = CreateBudgetHandler(repo, event_bus)

        result = await handler.handle(
            CreateBudgetCommand(service_order_id="so-1", client_id="c-1", actor=employee_actor)
        )

        assert isinstance(result.error, UnexpectedDomainError)
        assert result.error.message == "Budget creation failed"


class TestSendBudgetHandler:
    """Tests for SendBudgetHandler."""

    @pytest.mark.asyncio
    async def test_send_publishes_contact(self, event_bus, client_directory, employee_actor):
        """Test: GENERATED → SENT, BudgetSent carries the client's contact."""
        budget = Budget.create(service_order_id="so-1", client_id="c-1")
        repo = _repo_returning(budget)
        handler = SendBudgetHandler(repo, client_directory, event_bus)

        result = await handler.handle(SendBudgetCommand(budget_id=budget.id, actor=employee_actor))

        assert result.value.status == "SENT"
        assert repo.update.await_args.kwargs["expected_status"] == BudgetStatus.GENERATED
        event = event_bus.publish.await_args.args[0]
        assert isinstance(event, BudgetSentEvent)
        assert event.client_email == "ana@example.com"
        assert event.expiration_date == budget.expiration_date

    @pytest.mark.asyncio
    async def test_client_cannot_send(self, event_bus, client_directory, client_actor):
        """Test: a CLIENT sending a budget is unauthorized."""
        budget = Budget.create(service_order_id="so-1", client_id="c-1")
        repo = _repo_returning(budget)
        handler = SendBudgetHandler(repo, client_directory, event_bus)

        result = await handler.handle(SendBudgetCommand(budget_id=budget.id, actor=client_actor))

        assert isinstance(result.error, UnauthorizedStatusTransition)
        repo.update.assert_not_awaited()
        event_bus.publish.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_send_unknown_budget(self, event_bus, client_directory, employee_actor):
        """Test: unknown budget → BudgetNotFoundError."""
        handler = SendBudgetHandler(_repo_returning(None), client_directory, event_bus)

        result = await handler.handle(SendBudgetCommand(budget_id="nope", actor=employee_actor))

        assert isinstance(result.error, BudgetNotFoundError)


class TestRejectBudgetHandler:
    """Tests for RejectBudgetHandler."""

    @pytest.mark.asyncio
    async def test_reject_publishes_reason(
        self, sent_budget, event_bus, client_directory, client_actor
    ):
        """Test: SENT → REJECTED, reason travels with the event."""
        handler = RejectBudgetHandler(_repo_returning(sent_budget), client_directory, event_bus)

        result = await handler.handle(
            RejectBudgetCommand(budget_id=sent_budget.id, actor=client_actor, reason="Too expensive")
        )

        assert result.value.status == "REJECTED"
        event = event_bus.publish.await_args.args[0]
        assert isinstance(event, BudgetRejectedEvent)
        assert event.reason == "Too expensive"
        assert event.service_order_id == "so-1"

    @pytest.mark.asyncio
    async def test_reject_expired_budget(
        self, expired_sent_budget, event_bus, client_directory, client_actor
    ):
        """Test: expired budgets can't be rejected."""
        repo = _repo_returning(expired_sent_budget)
        handler = RejectBudgetHandler(repo, client_directory, event_bus)

        result = await handler.handle(
            RejectBudgetCommand(budget_id=expired_sent_budget.id, actor=client_actor)
        )

        assert isinstance(result.error, BudgetExpiredError)
        repo.update.assert_not_awaited()


class TestMarkBudgetReceivedHandler:
    """Tests for MarkBudgetReceivedHandler."""

    @pytest.mark.asyncio
    async def test_mark_received(self, sent_budget, event_bus, client_actor):
        """Test: SENT → RECEIVED publishes BudgetReceived."""
        handler = MarkBudgetReceivedHandler(_repo_returning(sent_budget), event_bus)

        result = await handler.handle(
            MarkBudgetReceivedCommand(budget_id=sent_budget.id, actor=client_actor)
        )

        assert result.value.status == "RECEIVED"
        event = event_bus.publish.await_args.args[0]
        assert isinstance(event, BudgetReceivedEvent)
        assert event.client_id == "c-1"
