"""Shared Kernel - base classes for the whole domain layer.

Building blocks:
- Entity / AggregateRoot: objects with identity, aggregates record events
- ValueObject: immutable, compared by value
- DomainEvent / EventType: immutable facts, closed set of kinds
- Result: Success / Failure for expected outcomes
- TransitionValidator: role-gated state machine
- DomainException hierarchy
"""

from .aggregate_root import AggregateRoot
from .domain_event import DomainEvent, EventType
from .entity import Entity
from .exceptions import (
    AggregateNotFound,
    BusinessRuleViolation,
    ConcurrencyException,
    DomainException,
    InvalidStateTransition,
    PersistenceError,
    UnauthorizedStatusTransition,
    UnexpectedDomainError,
)
from .result import Failure, Result, Success
from .transition_validator import TransitionTable, TransitionValidator, edges
from .user_role import UserRole
from .value_object import ValueObject, validate_value_object

__all__ = [
    # Base classes
    "Entity",
    "ValueObject",
    "AggregateRoot",
    "DomainEvent",
    "EventType",
    # Result
    "Result",
    "Success",
    "Failure",
    # State machines
    "TransitionValidator",
    "TransitionTable",
    "edges",
    "UserRole",
    # Utilities
    "validate_value_object",
    # Exceptions
    "DomainException",
    "BusinessRuleViolation",
    "AggregateNotFound",
    "InvalidStateTransition",
    "UnauthorizedStatusTransition",
    "ConcurrencyException",
    "PersistenceError",
    "UnexpectedDomainError",
]
