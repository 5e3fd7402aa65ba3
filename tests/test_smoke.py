"""Smoke tests for project wiring and environment-driven settings."""

from __future__ import annotations

import os
import subprocess
import sys
from pathlib import Path

import pytest

pytestmark = pytest.mark.integration


def _repo_root() -> Path:
    """Return the repository root directory."""

    return Path(__file__).resolve().parent.parent


def _run_manage(*args: str, env: dict[str, str]) -> subprocess.CompletedProcess[str]:
    """Run `manage.py` in a subprocess with extra environment variables.

    Args:
        args: Management command and its arguments.
        env: Environment variables to merge into the current environment.

    Returns:
        Completed process result with captured output.
    """

    merged_env = os.environ.copy()
    merged_env.update(env)
    merged_env["DJANGO_SETTINGS_MODULE"] = "vizShowcase.settings"
    return subprocess.run(
        [sys.executable, "manage.py", *args],
        cwd=_repo_root(),
        env=merged_env,
        check=False,
        capture_output=True,
        text=True,
    )


def test_django_project_loads() -> None:
    """Settings register the core app and the showcase options."""

    from django.conf import settings

    assert "core.apps.CoreConfig" in settings.INSTALLED_APPS
    assert settings.ROOT_URLCONF == "vizShowcase.urls"
    assert hasattr(settings, "SHOWCASE_RANDOM_SEED")


def test_manage_check_passes_in_debug() -> None:
    """The system check framework reports no issues."""

    result = _run_manage("check", env={"DJANGO_DEBUG": "true"})

    assert result.returncode == 0, result.stderr


def test_production_requires_secret_key() -> None:
    """Disabling debug without a secret key fails fast."""

    env = {"DJANGO_DEBUG": "false", "DJANGO_SECRET_KEY": ""}
    result = _run_manage("check", env=env)

    assert result.returncode != 0
    assert "DJANGO_SECRET_KEY is required" in result.stderr


def test_invalid_seed_fails_settings_import() -> None:
    """A non-integer seed is rejected when settings load."""

    result = _run_manage("check", env={"DJANGO_DEBUG": "true", "SHOWCASE_RANDOM_SEED": "abc"})

    assert result.returncode != 0
    assert "ValueError" in result.stderr
