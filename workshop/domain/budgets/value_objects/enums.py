"""Enums for Budgets bounded context."""

from enum import Enum


class BudgetStatus(str, Enum):
    """Budget lifecycle status.

    State machine:
        GENERATED → SENT → APPROVED
                         ↘ REJECTED
                         ↘ RECEIVED (client acknowledged)
    """

    GENERATED = "GENERATED"
    """Budget created, line items may still change."""

    SENT = "SENT"
    """Budget delivered to the client, waiting for a decision."""

    APPROVED = "APPROVED"
    """Client approved, stock was available at approval time."""

    REJECTED = "REJECTED"
    """Client declined."""

    RECEIVED = "RECEIVED"
    """Client acknowledged receipt."""


class BudgetItemType(str, Enum):
    """What a budget line refers to."""

    SERVICE = "SERVICE"
    """Labour / catalogue service, references `service_id`."""

    STOCK_ITEM = "STOCK_ITEM"
    """Part taken from stock, references `stock_item_id`."""


class DeliveryMethod(str, Enum):
    """How the budget reaches the client."""

    EMAIL = "EMAIL"
    SMS = "SMS"
    WHATSAPP = "WHATSAPP"
    IN_PERSON = "IN_PERSON"
