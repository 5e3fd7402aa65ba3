"""Schema types for declarative chart configuration.

The showcase page is driven by configuration objects (ChartConfig) instead of
hard-coded chart logic. Adding a chart means registering a dataset and adding a
config entry; view code stays untouched.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

RenderType = Literal["line", "area", "bar", "horizontalBar", "pie", "scatter"]

RENDER_TYPES: tuple[RenderType, ...] = ("line", "area", "bar", "horizontalBar", "pie", "scatter")

RENDER_TYPE_LABELS: dict[str, str] = {
    "line": "Line",
    "area": "Area",
    "bar": "Bar",
    "horizontalBar": "Horizontal bar",
    "pie": "Pie",
    "scatter": "Scatter",
}


@dataclass(frozen=True, slots=True)
class ChartUI:
    """UI presentation hints for charts.

    Args:
        order: Position of the chart section on the page.
        nav_label: Short label used in the page navigation.
    """

    order: int
    nav_label: str


@dataclass(frozen=True, slots=True)
class ChartConfig:
    """Declarative chart definition for the showcase page.

    Args:
        id: Stable, unique identifier; also the canvas and section anchor id.
        title: Chart title displayed in the UI.
        description: Optional text shown under the title.
        dataset_key: Registered DatasetSpec key feeding the chart.
        render_types: Render types offered by the chart's switch buttons.
        default_render_type: Render type used on first load.
        ui: Presentation hints.
    """

    id: str
    title: str
    description: str | None
    dataset_key: str
    render_types: tuple[RenderType, ...]
    default_render_type: RenderType
    ui: ChartUI

    def supports(self, render_type: str) -> bool:
        """Return True when `render_type` is offered for this chart."""

        return render_type in self.render_types

    def control_id(self, render_type: str) -> str:
        """Return the DOM id of the switch button for `render_type`."""

        return f"{self.id}-btn-{render_type}"
