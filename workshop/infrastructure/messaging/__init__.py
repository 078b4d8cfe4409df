"""Messaging infrastructure - Event Bus for domain events."""

from .event_bus import EventBus

__all__ = ["EventBus"]
