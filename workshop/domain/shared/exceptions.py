"""Base domain exceptions.

Domain exceptions represent business rule violations and expected failures.
They belong to the domain layer and do not depend on infrastructure.
Use cases return them inside `Failure` instead of raising them to callers.
"""

from typing import Any


class DomainException(Exception):
    """Base exception for all domain errors.

    Domain exceptions are business rule violations, not technical errors.

    Example:
        >>> raise DomainException("Budget cannot be approved", budget_id="b-1")
    """

    def __init__(self, message: str, **context: Any) -> None:
        """Initialize domain exception.

        Args:
            message: Human-readable error message.
            **context: Additional context (budget_id, service_order_id, etc).
        """
        super().__init__(message)
        self.message = message
        self.context = context

    def __str__(self) -> str:
        if self.context:
            context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            return f"{self.message} ({context_str})"
        return self.message


class BusinessRuleViolation(DomainException):
    """Exception raised when business rule is violated."""

    pass


class AggregateNotFound(DomainException):
    """Exception raised when aggregate is not found.

    Example:
        >>> budget = await budget_repo.get_by_id("b-1")
        >>> if budget is None:
        ...     raise AggregateNotFound("Budget not found", budget_id="b-1")
    """

    pass


class InvalidStateTransition(DomainException):
    """Requested state change is not an edge of the aggregate's state graph.

    Example:
        >>> # Budget APPROVED -> APPROVED is not an edge
        >>> raise InvalidStateTransition(
        ...     "Cannot transition from APPROVED to APPROVED",
        ...     entity_id="b-1",
        ...     from_status="APPROVED",
        ...     to_status="APPROVED",
        ... )
    """

    pass


class UnauthorizedStatusTransition(DomainException):
    """Edge exists in the state graph, but the actor's role may not take it."""

    pass


class ConcurrencyException(DomainException):
    """Stored aggregate changed between load and update (compare-and-set failed).

    Example:
        >>> if stored.status != expected_status:
        ...     raise ConcurrencyException(
        ...         "Budget was modified by another request",
        ...         budget_id=stored.id,
        ...         expected_status=expected_status.value,
        ...         actual_status=stored.status.value,
        ...     )
    """

    pass


class PersistenceError(DomainException):
    """Repository collaborator failed to store or load an aggregate."""

    pass


class UnexpectedDomainError(DomainException):
    """Wraps an exception that is not a domain error, with a fixed message.

    The original exception is kept as `__cause__` for logs, callers only see
    the fixed message.
    """

    pass
