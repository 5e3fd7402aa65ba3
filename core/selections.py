"""Per-session render-type selections.

The showcase remembers which render type a visitor last picked for each chart
so a reload shows the same encodings. Only the chart id and render type are
stored; datasets are regenerated on every render.
"""

from __future__ import annotations

from random import Random
from typing import Final

from django.conf import settings
from django.http import HttpRequest

from core.charting.configs import CHART_CONFIG_BY_ID

RENDER_TYPES_SESSION_KEY: Final[str] = "viz_render_types"


def selected_render_types(request: HttpRequest) -> dict[str, str]:
    """Return remembered render types, dropping stale or unsupported entries.

    Args:
        request: Incoming request whose session is read.

    Returns:
        Mapping of chart id to render type.
    """

    raw = getattr(request, "session", {}).get(RENDER_TYPES_SESSION_KEY) or {}
    if not isinstance(raw, dict):
        return {}
    selections: dict[str, str] = {}
    for chart_id, render_type in raw.items():
        config = CHART_CONFIG_BY_ID.get(chart_id)
        if config is not None and config.supports(render_type):
            selections[chart_id] = render_type
    return selections


def remember_render_type(request: HttpRequest, *, chart_id: str, render_type: str) -> None:
    """Store the render type selected for `chart_id` in the session.

    Args:
        request: Incoming request whose session will be updated.
        chart_id: Chart identifier.
        render_type: Render type to remember.
    """

    selections = selected_render_types(request)
    selections[chart_id] = render_type
    request.session[RENDER_TYPES_SESSION_KEY] = selections
    request.session.modified = True


def request_rng() -> Random | None:
    """Return a seeded random source when `SHOWCASE_RANDOM_SEED` is set."""

    seed = settings.SHOWCASE_RANDOM_SEED
    if seed is None:
        return None
    return Random(seed)
