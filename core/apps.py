"""App configuration for the core Django app."""

from __future__ import annotations

from django.apps import AppConfig
from django.conf import settings


class CoreConfig(AppConfig):
    """Configuration for the `core` app."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "core"

    def ready(self) -> None:
        from core.logconfig import configure_logging

        configure_logging(level=settings.SHOWCASE_LOG_LEVEL, json_format=settings.SHOWCASE_LOG_JSON)
