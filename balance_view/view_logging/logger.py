"""
Structured logging for the resolver and parser.

structlog, configured once at import from Settings: level filter, UTC ISO
timestamp under "timestamp", the event name under "event_type", then JSON
(LOG_FORMAT=json) or console rendering to stderr. Events carry transaction
context as keyword arguments (digest, coin_type, amount, ...).
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog

from balance_view.config import Settings, get_settings


def build_processors(settings: Settings) -> list[Any]:
    """Processor chain for the given settings; the renderer is always last."""
    processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.TimeStamper(fmt="iso", utc=True, key="timestamp"),
        structlog.processors.EventRenamer("event_type"),
    ]
    if settings.json_logs:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty(), event_key="event_type"))
    return processors


def configure_structlog(settings: Settings | None = None) -> None:
    settings = settings or get_settings()
    structlog.configure(
        processors=build_processors(settings),
        wrapper_class=structlog.make_filtering_bound_logger(
            getattr(logging, settings.log_level, logging.INFO)
        ),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=True,
    )


if not structlog.is_configured():
    configure_structlog()


def get_logger(name: str) -> structlog.BoundLogger:
    """
    Module logger with logger=name bound:

        logger = get_logger(__name__)
        logger.debug("balance_change_skipped", digest=digest, item=repr(item))
    """
    return structlog.get_logger(name).bind(logger=name)


def bind_transaction(digest: str | None) -> structlog.BoundLogger:
    """Logger with the transaction digest bound to every event."""
    return get_logger("balance_view").bind(digest=digest)
