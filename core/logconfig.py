"""Structured logging configuration for vizShowcase.

Modules log through structlog loggers obtained from `get_logger`. Output is
routed through the standard library so Django's LOGGING setting controls
handlers and levels, while structlog owns formatting.
"""

from __future__ import annotations

import logging

import structlog
from structlog.typing import Processor

APP_LOGGERS: tuple[str, ...] = ("core", "mockdata")


def configure_logging(*, level: str = "INFO", json_format: bool = False) -> None:
    """Configure structlog for the whole process.

    Args:
        level: Minimum level name (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        json_format: Render events as JSON lines instead of console output.
    """

    log_level = getattr(logging, level.upper())
    for name in APP_LOGGERS:
        logging.getLogger(name).setLevel(log_level)

    processors: list[Processor] = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]
    if json_format:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Return a structlog logger bound to `name`."""

    return structlog.get_logger(name)
