"""Base ValueObject class for domain model.

ValueObject - an immutable object compared by attribute values, not identity.
"""

from abc import ABC
from dataclasses import dataclass


@dataclass(frozen=True, eq=True)
class ValueObject(ABC):
    """Base class for all domain value objects.

    - **Immutable**: frozen=True
    - **Equality by value**: compared by attributes, no ID
    - **Replaceable**: to change it, build a new one

    Example:
        >>> @dataclass(frozen=True)
        ... class Money(ValueObject):
        ...     cents: int
        ...
        ...     def __post_init__(self):
        ...         validate_value_object(self.cents >= 0, "Amount cannot be negative")
    """

    def __post_init__(self) -> None:
        """Override to validate after initialization.

        Raises:
            ValueError: If validation fails.
        """
        pass


def validate_value_object(condition: bool, message: str) -> None:
    """Helper for value object validation.

    Raises:
        ValueError: If condition is False.
    """
    if not condition:
        raise ValueError(message)
