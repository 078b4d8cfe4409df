"""Budget transition table.

| From      | To       | Roles                    | Extra rule                    |
|-----------|----------|--------------------------|-------------------------------|
| GENERATED | SENT     | EMPLOYEE, ADMIN          |                               |
| SENT      | APPROVED | CLIENT, EMPLOYEE, ADMIN  | not expired, stock available  |
| SENT      | REJECTED | CLIENT, EMPLOYEE, ADMIN  | not expired                   |
| SENT      | RECEIVED | CLIENT, EMPLOYEE, ADMIN  |                               |
"""

from workshop.domain.shared import TransitionValidator, UserRole, edges

from ..value_objects import BudgetStatus

_B = BudgetStatus

BUDGET_TRANSITIONS = {
    **edges([_B.GENERATED], [_B.SENT], [UserRole.EMPLOYEE, UserRole.ADMIN]),
    **edges(
        [_B.SENT],
        [_B.APPROVED, _B.REJECTED, _B.RECEIVED],
        [UserRole.CLIENT, UserRole.EMPLOYEE, UserRole.ADMIN],
    ),
}

budget_transition_validator: TransitionValidator[BudgetStatus] = TransitionValidator(
    "Budget", BUDGET_TRANSITIONS
)
