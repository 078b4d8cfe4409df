"""Money value object - non-negative amount stored as integer cents."""

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Union

from workshop.domain.shared import ValueObject, validate_value_object

_CENT = Decimal("0.01")


@dataclass(frozen=True)
class Money(ValueObject):
    """Currency amount in cents.

    Example:
        >>> Money.from_decimal("12.345")
        Money(cents=1235)
        >>> str(Money(cents=1235) * 2)
        '24.70'
    """

    cents: int

    def __post_init__(self) -> None:
        validate_value_object(
            isinstance(self.cents, int) and not isinstance(self.cents, bool),
            "Amount in cents must be an integer",
        )
        validate_value_object(self.cents >= 0, "Amount cannot be negative")

    @classmethod
    def zero(cls) -> "Money":
        return cls(cents=0)

    @classmethod
    def from_decimal(cls, amount: Union[Decimal, str, int]) -> "Money":
        """Build from a decimal amount, rounding half-up to the cent.

        Raises:
            ValueError: If the amount is not a number or is negative.
        """
        try:
            value = Decimal(str(amount)).quantize(_CENT, rounding=ROUND_HALF_UP)
        except InvalidOperation as e:
            raise ValueError(f"Invalid amount: {amount!r}") from e
        return cls(cents=int(value * 100))

    def to_decimal(self) -> Decimal:
        return (Decimal(self.cents) / 100).quantize(_CENT)

    def __add__(self, other: "Money") -> "Money":
        if not isinstance(other, Money):
            return NotImplemented
        return Money(cents=self.cents + other.cents)

    def __mul__(self, quantity: int) -> "Money":
        if not isinstance(quantity, int) or isinstance(quantity, bool):
            return NotImplemented
        return Money(cents=self.cents * quantity)

    def __str__(self) -> str:
        return str(self.to_decimal())
