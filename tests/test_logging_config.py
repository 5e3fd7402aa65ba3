"""Unit tests for structlog configuration."""

from __future__ import annotations

import logging
from collections.abc import Iterator

import pytest
import structlog
from structlog.testing import capture_logs
from django.conf import settings

from core.logconfig import APP_LOGGERS, configure_logging, get_logger

pytestmark = pytest.mark.unit


@pytest.fixture(autouse=True)
def _restore_logging() -> Iterator[None]:
    """Reapply the settings-driven configuration after each test."""

    yield
    configure_logging(level=settings.SHOWCASE_LOG_LEVEL, json_format=settings.SHOWCASE_LOG_JSON)


def test_configure_logging_sets_app_logger_levels() -> None:
    """App loggers follow the configured level."""

    configure_logging(level="debug")

    for name in APP_LOGGERS:
        assert logging.getLogger(name).level == logging.DEBUG


def test_configure_logging_selects_json_renderer() -> None:
    """JSON output ends the processor chain with a JSONRenderer."""

    configure_logging(json_format=True)

    processors = structlog.get_config()["processors"]
    assert isinstance(processors[-1], structlog.processors.JSONRenderer)


def test_configure_logging_defaults_to_console_renderer() -> None:
    """Console output is the default."""

    configure_logging()

    processors = structlog.get_config()["processors"]
    assert isinstance(processors[-1], structlog.dev.ConsoleRenderer)


def test_get_logger_emits_structured_events() -> None:
    """Loggers accept key/value context."""

    logger = get_logger("core.tests")
    with capture_logs() as logs:
        logger.warning("something_happened", chart_id="sales")

    assert logs == [{"event": "something_happened", "log_level": "warning", "chart_id": "sales"}]
