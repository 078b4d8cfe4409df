"""In-memory ClientDirectory."""

from typing import Iterable, Optional

from workshop.domain.clients.ports import ClientContact, ClientDirectory


class InMemoryClientDirectory(ClientDirectory):
    """Dict-backed client contact lookup."""

    def __init__(self, contacts: Iterable[ClientContact] = ()) -> None:
        self._contacts: dict[str, ClientContact] = {c.client_id: c for c in contacts}

    def register(self, contact: ClientContact) -> None:
        self._contacts[contact.client_id] = contact

    async def get_contact(self, client_id: str) -> Optional[ClientContact]:
        return self._contacts.get(client_id)
