"""Pytest fixtures shared across the test suite."""

from __future__ import annotations

from collections.abc import Sequence
from random import Random

import pytest

from core.charting.controller import ChartController
from core.charting.instances import ChartJsRenderer


@pytest.fixture
def rng() -> Random:
    """Return a seeded random source for reproducible generator output."""

    return Random(1234)


@pytest.fixture
def controller(rng: Random) -> ChartController:
    """Return a controller rendering into a fresh instance registry."""

    return ChartController(renderer=ChartJsRenderer(), rng=rng)


def pytest_collection_modifyitems(items: Sequence[pytest.Item]) -> None:
    """Enforce that every test has exactly one speed marker.

    The suite is runnable by intent:
    - `unit`: pure, fast tests with no database access.
    - `integration`: tests touching Django views, sessions, settings or IO.

    Each test must have exactly one of these markers.
    """

    invalid: list[str] = []
    for item in items:
        has_unit = item.get_closest_marker("unit") is not None
        has_integration = item.get_closest_marker("integration") is not None
        if has_unit == has_integration:
            markers = []
            if has_unit:
                markers.append("unit")
            if has_integration:
                markers.append("integration")
            invalid.append(f"{item.nodeid} (markers={markers or 'none'})")

    if invalid:
        joined = "\n".join(f"- {nodeid}" for nodeid in invalid)
        raise pytest.UsageError(
            "Each test must have exactly one speed marker: `@pytest.mark.unit` or "
            "`@pytest.mark.integration`.\n"
            f"Offending tests:\n{joined}"
        )
