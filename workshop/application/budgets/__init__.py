"""Budgets application layer - use cases around the budget lifecycle."""
