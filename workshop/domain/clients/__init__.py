"""Clients context, consumed through ports only."""
