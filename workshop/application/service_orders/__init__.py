"""Service orders application layer."""
