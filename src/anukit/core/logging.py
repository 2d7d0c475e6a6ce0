"""
Structured logging for anukit.

The toolkit logs through structlog. Library modules emit debug-level events
(captured failures, escalations, pipe short-circuits) through
``get_library_logger``, which stays silent until structlog is configured,
either by ``configure_logging`` or by the application itself. An
unconfigured process sees no output from anukit.

Architecture:
    ::

        configure_logging(level="INFO", json_format=None, service="anukit")
            │
            ▼
        structlog processor chain:
          1. TimeStamper (iso)
          2. merge_contextvars
          3. add_log_level
          4. add_service_metadata
          5. JSONRenderer (or ConsoleRenderer on a tty)

Usage:
    from anukit.core.logging import configure_logging, get_logger

    configure_logging(level="DEBUG", json_format=True, service="billing")
    logger = get_logger(__name__)
    logger.info("import_started", rows=120)

Tags:
    logging, structlog, observability, anukit
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog
from structlog.types import EventDict, Processor, WrappedLogger

# Store service name for metadata
_SERVICE_NAME = "anukit"


def _add_service_metadata(
    logger: WrappedLogger, method_name: str, event_dict: EventDict
) -> EventDict:
    """Add service-level metadata to all logs."""
    event_dict.setdefault("service.name", _SERVICE_NAME)
    return event_dict


def configure_logging(
    level: str = "INFO",
    json_format: bool | None = None,
    service: str = "anukit",
    add_timestamp: bool = True,
) -> None:
    """Configure structured logging for the application.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR)
        json_format: True for JSON, False for console, None for auto (JSON if not tty)
        service: Service name to include in logs
        add_timestamp: Include ISO timestamp in logs
    """
    global _SERVICE_NAME
    _SERVICE_NAME = service

    if json_format is None:
        json_format = not sys.stdout.isatty()

    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.processors.StackInfoRenderer(),
        structlog.dev.set_exc_info,
        _add_service_metadata,
    ]

    if add_timestamp:
        shared_processors.insert(0, structlog.processors.TimeStamper(fmt="iso"))

    if json_format:
        shared_processors.append(structlog.processors.format_exc_info)
        renderer: Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=True)

    structlog.configure(
        processors=shared_processors + [renderer],
        wrapper_class=structlog.make_filtering_bound_logger(
            getattr(logging, level.upper())
        ),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=False,
    )

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, level.upper()),
    )


def configure_from_settings() -> None:
    """Configure logging from ``AnuKitSettings`` (environment / .env)."""
    from anukit.core.settings import get_settings

    settings = get_settings()
    configure_logging(
        level=settings.log_level,
        json_format=settings.json_logs,
        service=settings.service_name,
    )


def get_logger(name: str | None = None) -> Any:
    """Get a structured logger.

    Args:
        name: Logger name (usually __name__)
    """
    return structlog.get_logger(name)


class LibraryLogger:
    """Logger for anukit internals: drops events until structlog is configured.

    Events are dropped while ``structlog.is_configured()`` is False, so an
    application that never sets up logging gets no output.
    """

    __slots__ = ("_logger",)

    def __init__(self, name: str):
        self._logger = structlog.get_logger(name)

    def debug(self, event: str, **kwargs: Any) -> None:
        if structlog.is_configured():
            self._logger.debug(event, **kwargs)


def get_library_logger(name: str) -> LibraryLogger:
    """Get the silent-until-configured logger used by anukit modules."""
    return LibraryLogger(name)


__all__ = [
    "configure_logging",
    "configure_from_settings",
    "get_logger",
    "get_library_logger",
    "LibraryLogger",
]
