"""Workshop configuration.

Settings come from `WORKSHOP_`-prefixed environment variables (pydantic-settings),
logging is rendered by structlog.

Usage:
    from workshop.config import get_settings, setup_logging

    settings = get_settings()
    setup_logging(settings)  # once at startup
"""

from .logging import event_log_context, setup_logging
from .settings import Settings, get_settings

__all__ = [
    "Settings",
    "get_settings",
    "setup_logging",
    "event_log_context",
]
