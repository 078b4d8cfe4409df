"""TransitionValidator - role-gated state machine for aggregates.

The decision policy is a two-dimensional table: legal edges of the state graph,
each edge gated by the set of roles allowed to take it. The graph check and the
role check are independent:

- an edge missing from the table is illegal for every role (ADMIN included);
- an edge present in the table is still rejected for a role it does not list.

One validator instance exists per state-bearing aggregate (ServiceOrder, Budget).
"""

from collections import defaultdict
from enum import Enum
from typing import Generic, Iterable, Mapping, TypeVar

from .exceptions import InvalidStateTransition, UnauthorizedStatusTransition
from .user_role import UserRole

S = TypeVar("S", bound=Enum)

TransitionTable = Mapping[tuple[S, S], frozenset[UserRole]]


def edges(
    sources: Iterable[S], targets: Iterable[S], roles: Iterable[UserRole]
) -> dict[tuple[S, S], frozenset[UserRole]]:
    """Expand a (sources x targets) block of a transition table.

    Self-loops are skipped, a status never transitions to itself.

    Example:
        >>> edges([A, B], [C], [UserRole.ADMIN])
        {(A, C): frozenset({ADMIN}), (B, C): frozenset({ADMIN})}
    """
    allowed = frozenset(roles)
    return {
        (source, target): allowed
        for source in sources
        for target in targets
        if source != target
    }


class TransitionValidator(Generic[S]):
    """Pure decision function over `(current, target, role)`.

    Example:
        >>> validator = TransitionValidator("Budget", BUDGET_TRANSITIONS)
        >>> validator.can_transition(BudgetStatus.SENT, BudgetStatus.APPROVED, UserRole.CLIENT)
        True
        >>> validator.assert_transition(
        ...     BudgetStatus.APPROVED, BudgetStatus.APPROVED, UserRole.ADMIN, "b-1"
        ... )
        Traceback (most recent call last):
        InvalidStateTransition: Budget cannot transition from APPROVED to APPROVED ...
    """

    def __init__(self, aggregate_name: str, table: TransitionTable) -> None:
        """Initialize validator.

        Args:
            aggregate_name: Used in error messages ("Budget", "ServiceOrder").
            table: Mapping of legal edges to the roles allowed to take them.
        """
        self._aggregate_name = aggregate_name
        self._table: dict[tuple[S, S], frozenset[UserRole]] = dict(table)
        self._targets: dict[S, set[S]] = defaultdict(set)
        for source, target in self._table:
            self._targets[source].add(target)

    @property
    def aggregate_name(self) -> str:
        return self._aggregate_name

    def is_legal_edge(self, current: S, target: S) -> bool:
        """Check the state graph only, ignoring roles."""
        return (current, target) in self._table

    def allowed_roles(self, current: S, target: S) -> frozenset[UserRole]:
        """Roles allowed to take the edge (empty if the edge does not exist)."""
        return self._table.get((current, target), frozenset())

    def allowed_targets(self, current: S) -> frozenset[S]:
        """All statuses reachable from `current` in one step, for any role."""
        return frozenset(self._targets.get(current, ()))

    def can_transition(self, current: S, target: S, role: UserRole) -> bool:
        """Check whether `role` may move the aggregate from `current` to `target`."""
        return role in self.allowed_roles(current, target)

    def assert_transition(
        self, current: S, target: S, role: UserRole, entity_id: str | None
    ) -> None:
        """Raise if the transition is not allowed. Never mutates anything.

        Args:
            current: Current status.
            target: Requested status.
            role: Actor role.
            entity_id: Aggregate ID for the error context.

        Raises:
            InvalidStateTransition: Edge is not in the state graph.
            UnauthorizedStatusTransition: Edge exists but role is not permitted.
        """
        if not self.is_legal_edge(current, target):
            raise InvalidStateTransition(
                f"{self._aggregate_name} cannot transition from "
                f"{current.value} to {target.value}",
                entity_id=entity_id,
                from_status=current.value,
                to_status=target.value,
                allowed=sorted(s.value for s in self.allowed_targets(current)),
            )

        if not self.can_transition(current, target, role):
            raise UnauthorizedStatusTransition(
                f"Role {role.value} is not allowed to move {self._aggregate_name} "
                f"from {current.value} to {target.value}",
                entity_id=entity_id,
                from_status=current.value,
                to_status=target.value,
                role=role.value,
            )
