"""Result type - Success or Failure.

Use cases return Result instead of raising for expected business outcomes
(not found, expired, insufficient stock). Exceptions are reserved for
programmer errors and truly unexpected failures.

Example:
    >>> result = await handler.approve("b-1", actor)
    >>> if result.is_success:
    ...     dto = result.value
    ... elif isinstance(result.error, InsufficientStockError):
    ...     ...
"""

from dataclasses import dataclass
from typing import Callable, Generic, TypeVar, Union

T = TypeVar("T")
E = TypeVar("E")
U = TypeVar("U")
D = TypeVar("D")


@dataclass(frozen=True)
class Success(Generic[T]):
    """Successful outcome carrying a value."""

    value: T

    @property
    def is_success(self) -> bool:
        return True

    @property
    def is_failure(self) -> bool:
        return False

    def map(self, fn: Callable[[T], U]) -> "Success[U]":
        """Transform the carried value."""
        return Success(fn(self.value))

    def flat_map(self, fn: Callable[[T], "Result[U, E]"]) -> "Result[U, E]":
        """Chain an operation that itself returns a Result."""
        return fn(self.value)

    def unwrap(self) -> T:
        return self.value

    def unwrap_or(self, default: D) -> T:
        return self.value


@dataclass(frozen=True)
class Failure(Generic[E]):
    """Failed outcome carrying an error."""

    error: E

    @property
    def is_success(self) -> bool:
        return False

    @property
    def is_failure(self) -> bool:
        return True

    def map(self, fn: Callable) -> "Failure[E]":
        return self

    def flat_map(self, fn: Callable) -> "Failure[E]":
        return self

    def unwrap(self):
        """Raise the carried error (or wrap a non-exception error)."""
        if isinstance(self.error, BaseException):
            raise self.error
        raise ValueError(f"Called unwrap() on Failure: {self.error!r}")

    def unwrap_or(self, default: D) -> D:
        return default


Result = Union[Success[T], Failure[E]]
