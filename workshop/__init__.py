"""Workshop workflow core.

Repair order lifecycle for a vehicle workshop: role-gated state machines for
service orders and budgets, an in-process domain event bus, and the budget
approval workflow that checks stock before committing.
"""

__version__ = "1.0.0"
