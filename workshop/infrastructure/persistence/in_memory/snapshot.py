"""Copy aggregates in and out of in-memory storage.

Stored state must not change when a caller mutates the aggregate it loaded,
otherwise compare-and-set updates could never detect a conflict.
"""

import copy
from typing import TypeVar

from workshop.domain.shared import AggregateRoot, Entity

E = TypeVar("E", bound=Entity)


def snapshot(entity: E) -> E:
    """Deep copy of an entity, pending domain events dropped."""
    stored = copy.deepcopy(entity)
    if isinstance(stored, AggregateRoot):
        stored.clear_domain_events()
    return stored
