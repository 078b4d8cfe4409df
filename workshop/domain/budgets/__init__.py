"""Budgets bounded context.

A budget is the priced proposal for a service order. It is sent to the client,
who approves or rejects it within its validity period.
"""
