"""Budget use case handlers."""

from .add_budget_item_handler import AddBudgetItemHandler
from .approve_budget_handler import ApproveBudgetHandler
from .create_budget_handler import CreateBudgetHandler
from .mark_budget_received_handler import MarkBudgetReceivedHandler
from .reject_budget_handler import RejectBudgetHandler
from .send_budget_handler import SendBudgetHandler

__all__ = [
    "ApproveBudgetHandler",
    "CreateBudgetHandler",
    "SendBudgetHandler",
    "RejectBudgetHandler",
    "MarkBudgetReceivedHandler",
    "AddBudgetItemHandler",
]
