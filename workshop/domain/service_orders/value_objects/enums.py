"""Enums for Service Orders bounded context."""

from enum import Enum


class ServiceOrderStatus(str, Enum):
    """Service order lifecycle status.

    State machine (happy path):
        REQUESTED → RECEIVED → IN_DIAGNOSIS → APPROVED → IN_EXECUTION → FINISHED → DELIVERED

    Any non-terminal status → CANCELLED (ADMIN only).
    DELIVERED and CANCELLED are terminal.
    """

    REQUESTED = "REQUESTED"
    """Client asked for a repair, vehicle not in the workshop yet."""

    RECEIVED = "RECEIVED"
    """Vehicle received, a budget is generated automatically."""

    IN_DIAGNOSIS = "IN_DIAGNOSIS"
    """Mechanic is diagnosing the vehicle."""

    APPROVED = "APPROVED"
    """Client accepted the repair (usually through budget approval)."""

    REJECTED = "REJECTED"
    """Client declined the repair."""

    IN_EXECUTION = "IN_EXECUTION"
    """Repair in progress."""

    FINISHED = "FINISHED"
    """Repair done, waiting for pickup."""

    DELIVERED = "DELIVERED"
    """Vehicle returned to the client."""

    CANCELLED = "CANCELLED"
    """Order cancelled by an administrator."""

    def is_terminal(self) -> bool:
        """Check if no further transition is possible."""
        return self in (ServiceOrderStatus.DELIVERED, ServiceOrderStatus.CANCELLED)
