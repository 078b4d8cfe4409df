"""Acting user of a command."""

from dataclasses import dataclass

from workshop.domain.shared import UserRole

SYSTEM_USER_ID = "system"


@dataclass(frozen=True)
class ActorContext:
    """Who is asking, and with which role.

    Example:
        >>> ActorContext(user_id="u-1", role=UserRole.CLIENT)
        >>> ActorContext.system()
        ActorContext(user_id='system', role=<UserRole.EMPLOYEE: 'EMPLOYEE'>)
    """

    user_id: str
    role: UserRole

    @classmethod
    def system(cls) -> "ActorContext":
        """Internal actor used by event reactions."""
        return cls(user_id=SYSTEM_USER_ID, role=UserRole.EMPLOYEE)

    @property
    def is_system(self) -> bool:
        return self.user_id == SYSTEM_USER_ID
