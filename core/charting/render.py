"""Chart.js payload building for ChartConfig-driven charts.

A payload is the JSON-serializable configuration handed to `new Chart(...)` in
the browser. Chart.js callbacks cannot travel as JSON, so tooltip and tick
formatting is described by hints under `meta`, which the page script turns into
callbacks.
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from typing import Any, Final, TypedDict

from mockdata.dto import CurveSample, SalesSeries, SurveyTally, TimeSeriesSample
from mockdata.registry import Dataset

from .schema import ChartConfig


class UnsupportedRenderTypeError(ValueError):
    """Raised when a chart is asked for a render type it does not offer."""


class ChartDataset(TypedDict, total=False):
    """A Chart.js dataset payload."""

    label: str
    type: str
    data: list[float] | list[int] | list[dict[str, float]]
    borderColor: str | list[str]
    backgroundColor: str | list[str]
    borderWidth: int
    fill: bool
    tension: float
    pointRadius: int
    pointHoverRadius: int
    pointBackgroundColor: str
    pointBorderColor: str
    pointBorderWidth: int
    yAxisID: str


class ChartData(TypedDict, total=False):
    """Labels plus datasets for a chart."""

    labels: list[str]
    datasets: list[ChartDataset]


class ChartMeta(TypedDict, total=False):
    """Formatting hints consumed by the page script."""

    chartId: str
    renderType: str
    title: str
    tooltip: dict[str, Any]
    tickMarks: dict[str, Any]


class ChartPayload(TypedDict):
    """The full Chart.js configuration for one chart instance."""

    type: str
    data: ChartData
    options: dict[str, Any]
    meta: ChartMeta


PRIMARY: Final[str] = "rgba(102, 126, 234, 1)"
SECONDARY: Final[str] = "rgba(240, 147, 251, 1)"
PALETTE: Final[tuple[str, ...]] = (
    "rgba(102, 126, 234, 0.8)",
    "rgba(118, 75, 162, 0.8)",
    "rgba(240, 147, 251, 0.8)",
    "rgba(245, 87, 108, 0.8)",
    "rgba(255, 193, 7, 0.8)",
    "rgba(40, 167, 69, 0.8)",
)
GRID_COLOR: Final[str] = "rgba(0, 0, 0, 0.1)"
TOOLTIP_BACKGROUND: Final[str] = "rgba(0, 0, 0, 0.9)"
VALUE_DIGITS: Final[int] = 4

SALES_NATIONAL_AXIS: Final[tuple[float, float]] = (50.0, 90.0)
SALES_REGIONAL_AXIS: Final[tuple[float, float]] = (20.0, 40.0)


def build_chart_payload(config: ChartConfig, dataset: Dataset, render_type: str) -> ChartPayload:
    """Build the Chart.js payload for a dataset rendered as `render_type`.

    Args:
        config: ChartConfig describing the chart.
        dataset: Freshly generated dataset for `config.dataset_key`.
        render_type: One of `config.render_types`.

    Returns:
        ChartPayload ready to be serialized with `json_script` or JsonResponse.

    Raises:
        UnsupportedRenderTypeError: When the chart does not offer `render_type`.
    """

    if not config.supports(render_type):
        raise UnsupportedRenderTypeError(
            f"Chart {config.id!r} does not support render type {render_type!r}; "
            f"expected one of {', '.join(config.render_types)}."
        )

    if isinstance(dataset, TimeSeriesSample):
        payload = _time_series_payload(dataset, render_type=render_type)
    elif isinstance(dataset, SalesSeries):
        payload = _sales_payload(dataset, render_type=render_type)
    elif isinstance(dataset, SurveyTally):
        payload = _survey_payload(dataset, render_type=render_type)
    elif isinstance(dataset, CurveSample):
        payload = _curve_payload(dataset, render_type=render_type, style=_curve_style(config.dataset_key))
    else:
        raise TypeError(f"Unsupported dataset type for chart {config.id!r}: {type(dataset).__name__}.")

    payload["meta"]["chartId"] = config.id
    payload["meta"]["renderType"] = render_type
    payload["meta"]["title"] = config.title
    return payload


def _round_values(values: Sequence[float]) -> list[float]:
    return [round(value, VALUE_DIGITS) for value in values]


def _base_options(*, legend_display: bool = True, legend_position: str = "top") -> dict[str, Any]:
    """Return options shared by every chart."""

    return {
        "responsive": True,
        "maintainAspectRatio": False,
        "plugins": {
            "legend": {
                "display": legend_display,
                "position": legend_position,
                "labels": {"font": {"size": 14, "weight": "bold"}, "padding": 20},
            },
            "tooltip": {"backgroundColor": TOOLTIP_BACKGROUND, "padding": 15},
        },
    }


def _axis_title(text: str, *, color: str | None = None) -> dict[str, Any]:
    title: dict[str, Any] = {"display": True, "text": text, "font": {"size": 14, "weight": "bold"}}
    if color is not None:
        title["color"] = color
    return title


def _time_series_payload(dataset: TimeSeriesSample, *, render_type: str) -> ChartPayload:
    """Line or filled-area rendering of the hourly series."""

    is_area = render_type == "area"
    options = _base_options()
    options["interaction"] = {"mode": "index", "intersect": False}
    options["scales"] = {
        "x": {"ticks": {"maxRotation": 45, "minRotation": 45, "font": {"size": 11}}, "grid": {"display": False}},
        "y": {"min": 99.5, "max": 103.0, "title": _axis_title("Value")},
    }
    dataset_payload: ChartDataset = {
        "label": "Hourly value",
        "data": _round_values(dataset.values),
        "borderColor": PRIMARY,
        "backgroundColor": "rgba(102, 126, 234, 0.3)" if is_area else "rgba(102, 126, 234, 0.1)",
        "borderWidth": 3,
        "fill": is_area,
        "tension": 0.4,
        "pointRadius": 3,
        "pointHoverRadius": 8,
        "pointBackgroundColor": PRIMARY,
        "pointBorderColor": "#fff",
        "pointBorderWidth": 2,
    }
    return {
        "type": "line",
        "data": {"labels": dataset.labels, "datasets": [dataset_payload]},
        "options": options,
        "meta": {"tooltip": {"kind": "value", "titlePrefix": "Time: ", "valuePrefix": "Value: ", "decimals": 3}},
    }


def _sales_payload(dataset: SalesSeries, *, render_type: str) -> ChartPayload:
    """Dual-axis sales rendering.

    `line` draws both series as lines; `bar` draws national volume as bars with
    the regional series overlaid as a line on the right axis. Axis bounds are
    suggestions so values outside them stay visible.
    """

    national: ChartDataset = {
        "label": "National sales",
        "data": _round_values(dataset.national),
        "yAxisID": "y",
        "borderWidth": 3 if render_type == "line" else 2,
    }
    regional: ChartDataset = {
        "label": "Regional sales",
        "data": _round_values(dataset.regional),
        "yAxisID": "y1",
        "borderColor": SECONDARY,
        "borderWidth": 3 if render_type == "line" else 2,
    }
    if render_type == "line":
        national.update(
            {
                "borderColor": PRIMARY,
                "backgroundColor": "rgba(102, 126, 234, 0.1)",
                "tension": 0.4,
                "pointRadius": 5,
                "pointHoverRadius": 8,
            }
        )
        regional.update(
            {"backgroundColor": "rgba(240, 147, 251, 0.1)", "tension": 0.4, "pointRadius": 5, "pointHoverRadius": 8}
        )
        chart_type = "line"
    else:
        national.update({"borderColor": PRIMARY, "backgroundColor": PALETTE[0]})
        regional.update({"backgroundColor": PALETTE[2], "type": "line"})
        chart_type = "bar"

    options = _base_options()
    options["interaction"] = {"mode": "index", "intersect": False}
    options["scales"] = {
        "y": {
            "type": "linear",
            "position": "left",
            "suggestedMin": SALES_NATIONAL_AXIS[0],
            "suggestedMax": SALES_NATIONAL_AXIS[1],
            "title": _axis_title("National sales (k units)", color=PRIMARY),
            "ticks": {"color": PRIMARY},
        },
        "y1": {
            "type": "linear",
            "position": "right",
            "suggestedMin": SALES_REGIONAL_AXIS[0],
            "suggestedMax": SALES_REGIONAL_AXIS[1],
            "title": _axis_title("Regional sales (k units)", color=SECONDARY),
            "ticks": {"color": SECONDARY},
            "grid": {"drawOnChartArea": False},
        },
        "x": {"ticks": {"font": {"size": 12}}},
    }
    return {
        "type": chart_type,
        "data": {"labels": list(dataset.months), "datasets": [national, regional]},
        "options": options,
        "meta": {
            "tooltip": {
                "kind": "value",
                "titleSuffix": " sales",
                "withDatasetLabel": True,
                "decimals": 1,
                "valueSuffix": "k units",
            }
        },
    }


def _survey_payload(dataset: SurveyTally, *, render_type: str) -> ChartPayload:
    """Vertical bar, horizontal bar or pie rendering of the survey."""

    colors = [PALETTE[idx % len(PALETTE)] for idx in range(len(dataset.entries))]
    tooltip = {"kind": "share", "countSuffix": " votes", "decimals": 1}

    if render_type == "pie":
        options = _base_options(legend_position="right")
        options["plugins"]["legend"]["labels"] = {"font": {"size": 12}, "padding": 15}
        labels = [f"{entry.category} ({entry.percentage_label}%)" for entry in dataset.entries]
        return {
            "type": "pie",
            "data": {
                "labels": labels,
                "datasets": [{"data": dataset.counts, "backgroundColor": colors, "borderColor": "#fff", "borderWidth": 3}],
            },
            "options": options,
            "meta": {"tooltip": tooltip},
        }

    horizontal = render_type == "horizontalBar"
    options = _base_options(legend_display=False)
    options["indexAxis"] = "y" if horizontal else "x"
    rotation = 0 if horizontal else 45
    options["scales"] = {
        "x": {
            "title": {**_axis_title("Votes" if horizontal else "Language"), "display": horizontal},
            "ticks": {"font": {"size": 12}, "maxRotation": rotation, "minRotation": rotation},
        },
        "y": {
            "title": {**_axis_title("Language" if horizontal else "Votes"), "display": not horizontal},
            "ticks": {"font": {"size": 12}},
        },
    }
    return {
        "type": "bar",
        "data": {
            "labels": dataset.categories,
            "datasets": [
                {
                    "label": "Votes",
                    "data": dataset.counts,
                    "backgroundColor": colors,
                    "borderColor": [color.replace("0.8)", "1)") for color in colors],
                    "borderWidth": 2,
                }
            ],
        },
        "options": options,
        "meta": {"tooltip": tooltip},
    }


_HALF_PI = math.pi / 2
_QUARTER_PI = math.pi / 4

_CURVE_STYLES: Final[dict[str, dict[str, Any]]] = {
    "quadratic": {
        "color": PRIMARY,
        "fill": "rgba(102, 126, 234, 0.2)",
        "point": "rgba(102, 126, 234, 0.8)",
        "x_decimals": 2,
        "x_title": "x",
        "x_range": (-2.2, 2.2),
        "y_range": (-0.5, 4.5),
        "y_step": 1,
        "tooltip_title": "Function value",
        "tick_marks": {"tolerance": 1e-9, "marks": [[float(n), str(n)] for n in (-2, -1, 0, 1, 2)]},
        "note": None,
    },
    "tangent": {
        "color": SECONDARY,
        "fill": "rgba(240, 147, 251, 0.2)",
        "point": "rgba(240, 147, 251, 0.8)",
        "x_decimals": 3,
        "x_title": "x (radians)",
        "x_range": (-_HALF_PI - 0.1, _HALF_PI + 0.1),
        "y_range": (-3.5, 3.5),
        "y_step": None,
        "tooltip_title": "Tangent value",
        "tick_marks": {
            "tolerance": 0.1,
            "marks": [
                [-_HALF_PI, "-π/2"],
                [-_QUARTER_PI, "-π/4"],
                [0.0, "0"],
                [_QUARTER_PI, "π/4"],
                [_HALF_PI, "π/2"],
            ],
        },
        "note": "Domain: (-π/2, π/2)\nRange: (-∞, +∞)",
    },
}


def _curve_style(dataset_key: str) -> dict[str, Any]:
    return _CURVE_STYLES.get(dataset_key, _CURVE_STYLES["quadratic"])


def _curve_payload(dataset: CurveSample, *, render_type: str, style: dict[str, Any]) -> ChartPayload:
    """Line (category x labels) or scatter (linear x axis) rendering of a curve."""

    is_scatter = render_type == "scatter"
    x_decimals = int(style["x_decimals"])
    y_values = _round_values(dataset.y_values)

    data_payload: ChartDataset = {
        "label": dataset.label,
        "borderColor": style["color"],
        "backgroundColor": style["point"] if is_scatter else style["fill"],
        "borderWidth": 3,
        "fill": not is_scatter,
        "tension": 0.4,
        "pointRadius": 4 if is_scatter else 0,
        "pointHoverRadius": 8,
        "pointBackgroundColor": style["point"],
        "pointBorderColor": "#fff",
        "pointBorderWidth": 2,
    }
    chart_data: ChartData
    if is_scatter:
        data_payload["data"] = [
            {"x": round(x, VALUE_DIGITS), "y": y} for x, y in zip(dataset.x_values, y_values)
        ]
        chart_data = {"datasets": [data_payload]}
    else:
        data_payload["data"] = y_values
        chart_data = {"labels": [f"{x:.{x_decimals}f}" for x in dataset.x_values], "datasets": [data_payload]}

    x_scale: dict[str, Any] = {"title": _axis_title(style["x_title"]), "grid": {"color": GRID_COLOR}}
    if is_scatter:
        x_scale.update({"type": "linear", "min": style["x_range"][0], "max": style["x_range"][1]})
    y_scale: dict[str, Any] = {
        "min": style["y_range"][0],
        "max": style["y_range"][1],
        "title": _axis_title(dataset.label),
        "grid": {"color": GRID_COLOR},
    }
    if style["y_step"] is not None:
        y_scale["ticks"] = {"stepSize": style["y_step"]}

    options = _base_options()
    options["scales"] = {"x": x_scale, "y": y_scale}

    tooltip: dict[str, Any] = {
        "kind": "point",
        "title": style["tooltip_title"],
        "xDecimals": x_decimals,
        "decimals": 3,
    }
    if style["note"] is not None:
        tooltip["nearZeroNote"] = style["note"]
    meta: ChartMeta = {"tooltip": tooltip}
    if is_scatter:
        meta["tickMarks"] = {"axis": "x", **style["tick_marks"]}

    return {
        "type": "scatter" if is_scatter else "line",
        "data": chart_data,
        "options": options,
        "meta": meta,
    }
