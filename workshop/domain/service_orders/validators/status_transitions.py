"""ServiceOrder transition table.

| From                      | To                                  | Roles                    |
|---------------------------|-------------------------------------|--------------------------|
| REQUESTED                 | RECEIVED, IN_DIAGNOSIS              | EMPLOYEE, ADMIN          |
| REQUESTED                 | APPROVED, REJECTED                  | CLIENT, EMPLOYEE, ADMIN  |
| REQUESTED                 | IN_EXECUTION, FINISHED, DELIVERED   | EMPLOYEE, ADMIN          |
| RECEIVED                  | IN_DIAGNOSIS                        | EMPLOYEE, ADMIN          |
| RECEIVED, IN_DIAGNOSIS    | APPROVED, REJECTED                  | CLIENT, EMPLOYEE, ADMIN  |
| APPROVED                  | IN_EXECUTION                        | EMPLOYEE, ADMIN          |
| IN_EXECUTION              | FINISHED                            | EMPLOYEE, ADMIN          |
| FINISHED                  | DELIVERED                           | EMPLOYEE, ADMIN          |
| any non-terminal          | CANCELLED                           | ADMIN                    |
"""

from workshop.domain.shared import TransitionValidator, UserRole, edges

from ..value_objects import ServiceOrderStatus

_S = ServiceOrderStatus
_STAFF = (UserRole.EMPLOYEE, UserRole.ADMIN)
_ANYONE = (UserRole.CLIENT, UserRole.EMPLOYEE, UserRole.ADMIN)

NON_TERMINAL_STATUSES = tuple(s for s in ServiceOrderStatus if not s.is_terminal())

SERVICE_ORDER_TRANSITIONS = {
    **edges([_S.REQUESTED], [_S.RECEIVED, _S.IN_DIAGNOSIS], _STAFF),
    **edges([_S.REQUESTED], [_S.APPROVED, _S.REJECTED], _ANYONE),
    **edges([_S.REQUESTED], [_S.IN_EXECUTION, _S.FINISHED, _S.DELIVERED], _STAFF),
    **edges([_S.RECEIVED], [_S.IN_DIAGNOSIS], _STAFF),
    **edges([_S.RECEIVED, _S.IN_DIAGNOSIS], [_S.APPROVED, _S.REJECTED], _ANYONE),
    **edges([_S.APPROVED], [_S.IN_EXECUTION], _STAFF),
    **edges([_S.IN_EXECUTION], [_S.FINISHED], _STAFF),
    **edges([_S.FINISHED], [_S.DELIVERED], _STAFF),
    **edges(NON_TERMINAL_STATUSES, [_S.CANCELLED], [UserRole.ADMIN]),
}

service_order_transition_validator: TransitionValidator[ServiceOrderStatus] = (
    TransitionValidator("ServiceOrder", SERVICE_ORDER_TRANSITIONS)
)
