"""Application Layer - use cases and event reactions.

Handlers orchestrate the domain: load aggregates, run domain logic, persist,
publish events. Every handler returns a Result.
"""
