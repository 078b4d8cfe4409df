"""Pytest configuration and fixtures."""

from datetime import datetime, timedelta, timezone

import pytest

from workshop.application.shared import ActorContext
from workshop.domain.shared import UserRole


@pytest.fixture
def client_actor():
    """Vehicle owner acting through the client portal."""
    return ActorContext(user_id="c-1", role=UserRole.CLIENT)


@pytest.fixture
def employee_actor():
    return ActorContext(user_id="e-1", role=UserRole.EMPLOYEE)


@pytest.fixture
def admin_actor():
    return ActorContext(user_id="a-1", role=UserRole.ADMIN)


@pytest.fixture
def sent_budget():
    """Budget already delivered to client c-1 for service order so-1."""
    from workshop.domain.budgets.entities import Budget

    budget = Budget.create(service_order_id="so-1", client_id="c-1")
    budget.clear_domain_events()
    budget.send(UserRole.EMPLOYEE)
    return budget


@pytest.fixture
def expired_sent_budget():
    """SENT budget generated 30 days ago with a 7 day validity."""
    from workshop.domain.budgets.entities import Budget
    from workshop.domain.budgets.value_objects import BudgetStatus, DeliveryMethod, Money

    generated = datetime.now(timezone.utc) - timedelta(days=30)
    return Budget(
        id="b-expired",
        service_order_id="so-1",
        client_id="c-1",
        status=BudgetStatus.SENT,
        total_amount=Money(cents=10_000),
        validity_period=7,
        generation_date=generated,
        delivery_method=DeliveryMethod.EMAIL,
        sent_date=generated,
    )
