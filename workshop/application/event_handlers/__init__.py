"""Event reactions subscribed to the event bus by the composition root."""

from .budget_decision_reaction import (
    BudgetApprovedReaction,
    BudgetDecisionReaction,
    BudgetRejectedReaction,
)
from .service_order_approved_reaction import ServiceOrderApprovedReaction
from .service_order_received_reaction import AUTO_GENERATED_NOTE, ServiceOrderReceivedReaction

__all__ = [
    "ServiceOrderReceivedReaction",
    "ServiceOrderApprovedReaction",
    "BudgetDecisionReaction",
    "BudgetApprovedReaction",
    "BudgetRejectedReaction",
    "AUTO_GENERATED_NOTE",
]
