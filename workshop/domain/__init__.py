"""Domain Layer - pure business logic.

Bounded contexts:
- service_orders: repair order lifecycle
- budgets: budget generation, approval, line items
- stock: stock availability port (implementation is external)
- clients: client contact lookup port
- shared: common base classes, Result, transition validator

Zero dependencies on infrastructure.
"""

from .shared import AggregateRoot, BusinessRuleViolation, DomainEvent

__all__ = [
    "AggregateRoot",
    "DomainEvent",
    "BusinessRuleViolation",
]
