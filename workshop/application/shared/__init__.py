"""Shared Application Layer components."""

from .actor_context import SYSTEM_USER_ID, ActorContext
from .command import Command
from .errors import failure_from_exception
from .event_handler import EventHandler
from .handler import CommandHandler

__all__ = [
    "Command",
    "CommandHandler",
    "EventHandler",
    "ActorContext",
    "SYSTEM_USER_ID",
    "failure_from_exception",
]
