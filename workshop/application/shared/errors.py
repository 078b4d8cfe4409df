"""Use-case boundary error mapping."""

from workshop.domain.shared import DomainException, Failure, UnexpectedDomainError


def failure_from_exception(error: object, fallback_message: str) -> Failure[Exception]:
    """Turn any error into a Failure a caller can rely on.

    Domain exceptions pass through unchanged. Anything else becomes
    UnexpectedDomainError(fallback_message) with the original chained as
    `__cause__`, raw infrastructure errors never leave a use case.

    Example:
        >>> failure_from_exception(KeyError("x"), "Budget approval failed").error
        UnexpectedDomainError('Budget approval failed')
    """
    if isinstance(error, DomainException):
        return Failure(error)

    wrapped = UnexpectedDomainError(fallback_message, error_type=type(error).__name__)
    if isinstance(error, BaseException):
        wrapped.__cause__ = error
    return Failure(wrapped)
