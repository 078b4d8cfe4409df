"""Builders for budget lifecycle events.

Lifecycle events carry the client's contact so notification subscribers do not
have to look it up again. Contact is None when the directory does not know the
client.
"""

from typing import Optional

from workshop.domain.budgets.entities import Budget
from workshop.domain.budgets.events import (
    BudgetApprovedEvent,
    BudgetReceivedEvent,
    BudgetRejectedEvent,
    BudgetSentEvent,
)
from workshop.domain.clients.ports import ClientContact


def budget_sent_event(budget: Budget, contact: Optional[ClientContact]) -> BudgetSentEvent:
    return BudgetSentEvent(
        aggregate_id=budget.id or "",
        service_order_id=budget.service_order_id,
        client_id=budget.client_id,
        client_name=contact.name if contact else None,
        client_email=contact.email if contact else None,
        budget_total=budget.total_amount,
        delivery_method=budget.delivery_method.value,
        expiration_date=budget.expiration_date,
    )


def budget_approved_event(
    budget: Budget, contact: Optional[ClientContact]
) -> BudgetApprovedEvent:
    if budget.approval_date is None:
        raise ValueError(f"Budget {budget.id} has no approval date")
    return BudgetApprovedEvent(
        aggregate_id=budget.id or "",
        service_order_id=budget.service_order_id,
        client_id=budget.client_id,
        client_name=contact.name if contact else None,
        client_email=contact.email if contact else None,
        budget_total=budget.total_amount,
        approved_at=budget.approval_date,
    )


def budget_rejected_event(
    budget: Budget, contact: Optional[ClientContact], reason: Optional[str] = None
) -> BudgetRejectedEvent:
    if budget.rejection_date is None:
        raise ValueError(f"Budget {budget.id} has no rejection date")
    return BudgetRejectedEvent(
        aggregate_id=budget.id or "",
        service_order_id=budget.service_order_id,
        client_id=budget.client_id,
        client_name=contact.name if contact else None,
        client_email=contact.email if contact else None,
        budget_total=budget.total_amount,
        rejected_at=budget.rejection_date,
        reason=reason,
    )


def budget_received_event(budget: Budget) -> BudgetReceivedEvent:
    return BudgetReceivedEvent(
        aggregate_id=budget.id or "",
        service_order_id=budget.service_order_id,
        client_id=budget.client_id,
        received_at=budget.updated_at,
    )
