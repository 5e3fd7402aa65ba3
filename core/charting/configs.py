"""Built-in ChartConfig definitions for the showcase page."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

from mockdata.registry import DEFAULT_REGISTRY

from .schema import ChartConfig, ChartUI
from .validator import validate_chart_configs


CHART_CONFIGS: Final[tuple[ChartConfig, ...]] = (
    ChartConfig(
        id="time_series",
        title="Hourly Fluctuation",
        description="Hourly readings from Jan 1 00:00 to Jan 2 20:00, low before dawn and high in the afternoon.",
        dataset_key="time_series",
        render_types=("line", "area"),
        default_render_type="line",
        ui=ChartUI(order=1, nav_label="Time series"),
    ),
    ChartConfig(
        id="sales",
        title="National vs Regional Sales",
        description="Monthly sales on two axes; July to September is peak season.",
        dataset_key="sales",
        render_types=("line", "bar"),
        default_render_type="line",
        ui=ChartUI(order=2, nav_label="Sales"),
    ),
    ChartConfig(
        id="survey",
        title="Favourite Programming Language",
        description="Votes from a developer survey with each language's share.",
        dataset_key="survey",
        render_types=("bar", "horizontalBar", "pie"),
        default_render_type="bar",
        ui=ChartUI(order=3, nav_label="Survey"),
    ),
    ChartConfig(
        id="quadratic",
        title="Quadratic Function",
        description="y = x² for x in [-2, 2].",
        dataset_key="quadratic",
        render_types=("line", "scatter"),
        default_render_type="line",
        ui=ChartUI(order=4, nav_label="Quadratic"),
    ),
    ChartConfig(
        id="tangent",
        title="Tangent Function",
        description="y = tan(x) for x in (-π/2, π/2), trimmed to |y| ≤ 3 near the asymptotes.",
        dataset_key="tangent",
        render_types=("line", "scatter"),
        default_render_type="line",
        ui=ChartUI(order=5, nav_label="Tangent"),
    ),
)


_VALIDATION = validate_chart_configs(CHART_CONFIGS, registry=DEFAULT_REGISTRY)
if not _VALIDATION.is_valid:
    joined = "\n".join(_VALIDATION.errors)
    raise ValueError(f"Invalid CHART_CONFIGS:\n{joined}")


CHART_CONFIG_BY_ID: Final[dict[str, ChartConfig]] = {config.id: config for config in CHART_CONFIGS}


class UnknownChartError(KeyError):
    """Raised when a chart id has no ChartConfig."""


@dataclass(frozen=True, slots=True)
class NavLink:
    """A page navigation entry pointing at a chart section."""

    href: str
    label: str


def get_chart_config(chart_id: str) -> ChartConfig:
    """Return the ChartConfig for `chart_id`.

    Raises:
        UnknownChartError: When no chart has that id.
    """

    config = CHART_CONFIG_BY_ID.get(chart_id)
    if config is None:
        raise UnknownChartError(chart_id)
    return config


def list_chart_configs() -> tuple[ChartConfig, ...]:
    """Return charts in page order."""

    return tuple(sorted(CHART_CONFIGS, key=lambda c: (c.ui.order, c.id)))


def navigation_links() -> tuple[NavLink, ...]:
    """Return anchor links for the page navigation, in page order."""

    return tuple(NavLink(href=f"#{config.id}", label=config.ui.nav_label) for config in list_chart_configs())
