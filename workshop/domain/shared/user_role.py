"""Actor roles used by the transition role gates."""

from enum import Enum


class UserRole(str, Enum):
    """Role of the actor requesting a state change."""

    CLIENT = "CLIENT"
    """Vehicle owner, acts through the client portal."""

    EMPLOYEE = "EMPLOYEE"
    """Workshop staff (mechanics, front desk)."""

    ADMIN = "ADMIN"
    """Workshop administrator, the only role allowed to cancel."""
