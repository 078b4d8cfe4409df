"""ClientDirectory Port - contact lookup used to enrich budget events."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class ClientContact:
    """Client contact read model."""

    client_id: str
    name: str
    email: Optional[str] = None


class ClientDirectory(ABC):
    """Abstract client lookup."""

    @abstractmethod
    async def get_contact(self, client_id: str) -> Optional[ClientContact]:
        """Get contact data, or None if the client is unknown."""
        pass
