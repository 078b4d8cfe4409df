"""Exceptions for Service Orders bounded context."""

from workshop.domain.shared import AggregateNotFound, BusinessRuleViolation


class ServiceOrderNotFoundError(AggregateNotFound):
    """Raised when a service order does not exist."""

    def __init__(self, service_order_id: str) -> None:
        super().__init__(
            f"Service order {service_order_id} not found",
            service_order_id=service_order_id,
        )
        self.service_order_id = service_order_id


class CancellationReasonRequiredError(BusinessRuleViolation):
    """Raised when a service order is cancelled without a reason."""

    pass
