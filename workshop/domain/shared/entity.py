"""Base Entity class for domain model.

Entity - an object with a unique identity. Two entities with identical
attributes but different IDs are different objects.
"""

from abc import ABC


class Entity(ABC):
    """Base class for all domain entities.

    Entity has a unique identifier (id) and is compared by ID, not by attribute values.

    Example:
        >>> order1 = ServiceOrder(id="so-1", ...)
        >>> order2 = ServiceOrder(id="so-1", ...)
        >>> order1 == order2  # True (same ID)
    """

    def __init__(self, id: str | None = None) -> None:
        """Initialize entity with optional ID.

        Args:
            id: Unique identifier. None for new entities (not persisted yet).
        """
        self._id = id

    @property
    def id(self) -> str | None:
        """Get entity ID."""
        return self._id

    def __eq__(self, other: object) -> bool:
        """Entities are compared by ID, not by attributes."""
        if not isinstance(other, Entity):
            return False

        # Two unsaved entities are equal only if they are the same object
        if self._id is None and other._id is None:
            return self is other

        return self._id == other._id

    def __hash__(self) -> int:
        if self._id is None:
            return hash(id(self))
        return hash(self._id)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(id={self._id})"
