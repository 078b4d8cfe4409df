"""Budget commands."""

from .add_budget_item import AddBudgetItemCommand
from .approve_budget import ApproveBudgetCommand
from .budget_lifecycle import MarkBudgetReceivedCommand, RejectBudgetCommand, SendBudgetCommand
from .create_budget import CreateBudgetCommand

__all__ = [
    "ApproveBudgetCommand",
    "CreateBudgetCommand",
    "SendBudgetCommand",
    "RejectBudgetCommand",
    "MarkBudgetReceivedCommand",
    "AddBudgetItemCommand",
]
