"""Client adapters."""

from .in_memory_client_directory import InMemoryClientDirectory

__all__ = ["InMemoryClientDirectory"]
