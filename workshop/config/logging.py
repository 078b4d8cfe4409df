"""Structured logging for the workshop core.

Modules log through the standard library (`logging.getLogger(__name__)` with
dotted event names and `extra={...}`). `setup_logging` routes those records
through structlog, which adds:
- level, logger name and a UTC timestamp
- the service / environment / version stamp
- the context of the domain event being dispatched, if any
- redaction of client contact data (budget events carry e-mail addresses)

Output is JSON (`log_format=json`) or the console renderer.

Usage:
    from workshop.config import setup_logging

    setup_logging(settings)  # once, from the composition root
    logger = logging.getLogger(__name__)
    logger.info("budget.sent", extra={"budget_id": "b-1"})
"""

import logging
import sys
from contextlib import contextmanager
from datetime import datetime, timezone
from typing import Any, Iterator

import structlog
from structlog.typing import EventDict

from workshop.config.settings import Settings, get_settings

SERVICE_NAME = "workshop-core"
SERVICE_VERSION = "1.0.0"

REDACTED = "[REDACTED]"

CONTACT_KEYS = frozenset({
    "client_email",
    "client_name",
    "email",
    "phone",
})
"""Client contact fields, never written to the logs."""


def redact_contact_data(
    logger: logging.Logger,
    method_name: str,
    event_dict: EventDict,
) -> EventDict:
    """Replace client contact values with '[REDACTED]', nested dicts included."""
    for key, value in list(event_dict.items()):
        if key.lower() in CONTACT_KEYS:
            event_dict[key] = REDACTED
        elif isinstance(value, dict):
            event_dict[key] = _redact_nested(value)
    return event_dict


def _redact_nested(values: dict[str, Any]) -> dict[str, Any]:
    return {
        key: REDACTED
        if key.lower() in CONTACT_KEYS
        else _redact_nested(value) if isinstance(value, dict) else value
        for key, value in values.items()
    }


def add_utc_timestamp(
    logger: logging.Logger,
    method_name: str,
    event_dict: EventDict,
) -> EventDict:
    event_dict["timestamp"] = datetime.now(timezone.utc).isoformat()
    return event_dict


def workshop_stamp(settings: Settings) -> structlog.types.Processor:
    """Processor stamping every record with service name, environment and version."""

    def add_workshop_stamp(
        logger: logging.Logger,
        method_name: str,
        event_dict: EventDict,
    ) -> EventDict:
        event_dict["service"] = SERVICE_NAME
        event_dict["environment"] = settings.environment
        event_dict["version"] = SERVICE_VERSION
        return event_dict

    return add_workshop_stamp


def setup_logging(settings: Settings | None = None) -> None:
    """Install the structlog formatter on the root logger.

    Call once per process. `bootstrap(configure_logging=True)` does it.
    """
    settings = settings or get_settings()

    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.ExtraAdder(),
        structlog.stdlib.PositionalArgumentsFormatter(),
        add_utc_timestamp,
        workshop_stamp(settings),
        redact_contact_data,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if settings.log_format == "json":
        output_processors: list[structlog.types.Processor] = [
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        output_processors = [
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            structlog.dev.ConsoleRenderer(colors=settings.is_development),
        ]

    formatter = structlog.stdlib.ProcessorFormatter(
        processors=output_processors,
        foreign_pre_chain=shared_processors,
    )

    structlog.configure(
        processors=shared_processors
        + [structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.handlers = [handler]
    root_logger.setLevel(getattr(logging, settings.log_level))


@contextmanager
def event_log_context(event_type: str, event_id: str, aggregate_id: str) -> Iterator[None]:
    """Tag every record logged inside the block with the event being dispatched.

    Nested dispatches (a reaction publishing its own events) override the tags
    for their block, the outer values come back afterwards.
    """
    with structlog.contextvars.bound_contextvars(
        event_type=event_type,
        event_id=event_id,
        event_aggregate_id=aggregate_id,
    ):
        yield
