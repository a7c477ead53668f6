"""
Structured logging configuration using structlog.

Routes both structlog loggers and the stdlib ``logging.getLogger(__name__)``
loggers used by the service modules through one JSON renderer, so a host
application gets uniform log lines from the paginator.
"""

from __future__ import annotations

import logging
import sys
from typing import Any, TextIO

import structlog

SERVICE_NAME: str = "block-paginator"


def add_service_name(logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:
    """Inject the service name into every log event."""
    event_dict.setdefault("service", SERVICE_NAME)
    return event_dict


def setup_logging(log_level: str | None = None, stream: TextIO | None = None) -> None:
    """
    Configure structlog and the stdlib logging bridge for JSON output.

    Call this once from the host's startup code.

    Parameters
    ----------
    log_level:
        Minimum severity level name.  Defaults to ``PAGINATION_LOG_LEVEL``
        from :class:`~infrastructure.settings.PaginationSettings`; unknown
        names fall back to ``INFO``.
    stream:
        Destination for rendered lines, ``sys.stdout`` when omitted.
    """
    if log_level is None:
        from infrastructure.settings import get_settings

        log_level = get_settings().log_level

    numeric_level = getattr(logging, log_level.upper(), logging.INFO)

    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        add_service_name,  # type: ignore[list-item]
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    structlog.configure(
        processors=[
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    # Records from plain stdlib loggers skip structlog's chain, so the
    # formatter replays the shared processors on them first.
    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared_processors,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            structlog.processors.JSONRenderer(),
        ],
    )

    handler = logging.StreamHandler(stream or sys.stdout)
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(numeric_level)


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """
    Return a bound structlog logger pre-populated with the given *name*.

    Additional context can be attached via ``.bind()``::

        log = get_logger("listing")
        log = log.bind(resource="articles")
        log.info("Page served", page=3)
    """
    return structlog.get_logger(name)  # type: ignore[no-any-return]
