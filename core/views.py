"""Views for the chart showcase page and its JSON chart endpoints."""

from __future__ import annotations

from typing import cast

from django.http import HttpRequest, HttpResponse, JsonResponse
from django.shortcuts import render
from django.views.decorators.http import require_GET, require_POST

from core.charting.configs import UnknownChartError, get_chart_config, list_chart_configs, navigation_links
from core.charting.controller import ChartController
from core.charting.instances import ChartJsInstance, ChartJsRenderer
from core.charting.render import UnsupportedRenderTypeError
from core.charting.schema import RENDER_TYPE_LABELS
from core.selections import remember_render_type, request_rng, selected_render_types


def _controller() -> ChartController:
    """Return a request-scoped controller with its own instance registry."""

    return ChartController(renderer=ChartJsRenderer(), rng=request_rng())


def _chart_not_found() -> JsonResponse:
    return JsonResponse({"ok": False, "error": "Chart not found."}, status=404)


def _unsupported_render_type(exc: UnsupportedRenderTypeError) -> JsonResponse:
    return JsonResponse({"ok": False, "error": str(exc)}, status=400)


@require_GET
def showcase(request: HttpRequest) -> HttpResponse:
    """Render the showcase page with every chart's initial payload."""

    controller = _controller()
    init_result = controller.init_charts(selected_render_types(request))

    sections = []
    payloads = {}
    for config in list_chart_configs():
        instance = controller.instances.get(config.id)
        if isinstance(instance, ChartJsInstance):
            payloads[config.id] = instance.payload
        sections.append(
            {
                "config": config,
                "rendered": instance is not None,
                "active_control_id": controller.active_controls.get(config.id),
                "buttons": [
                    {
                        "render_type": render_type,
                        "label": RENDER_TYPE_LABELS.get(render_type, render_type),
                        "control_id": config.control_id(render_type),
                    }
                    for render_type in config.render_types
                ],
            }
        )

    return render(
        request,
        "core/showcase.html",
        {
            "sections": sections,
            "nav_links": navigation_links(),
            "chart_payloads": payloads,
            "init_ok": init_result.ok,
        },
    )


@require_GET
def chart_payload(request: HttpRequest, chart_id: str) -> JsonResponse:
    """Return a freshly generated payload for one chart.

    The render type comes from the `type` query parameter and defaults to the
    chart's default render type.
    """

    try:
        config = get_chart_config(chart_id)
    except UnknownChartError:
        return _chart_not_found()

    render_type = (request.GET.get("type") or config.default_render_type).strip()
    controller = _controller()
    try:
        instance = controller.render(config.id, render_type)
    except UnsupportedRenderTypeError as exc:
        return _unsupported_render_type(exc)

    return JsonResponse({"ok": True, "chart": cast(ChartJsInstance, instance).payload})


@require_POST
def switch_chart(request: HttpRequest, chart_id: str) -> JsonResponse:
    """Switch a chart's render type and remember the choice for the session.

    Form fields:
        type: Requested render type.
        control: Optional DOM id of the button that triggered the switch.
    """

    try:
        get_chart_config(chart_id)
    except UnknownChartError:
        return _chart_not_found()

    render_type = (request.POST.get("type") or "").strip()
    control_id = (request.POST.get("control") or "").strip() or None
    controller = _controller()
    try:
        result = controller.switch_chart(chart_id, render_type, control_id=control_id)
    except UnsupportedRenderTypeError as exc:
        return _unsupported_render_type(exc)

    remember_render_type(request, chart_id=chart_id, render_type=render_type)
    return JsonResponse(
        {
            "ok": True,
            "chartId": result.chart_id,
            "renderType": result.render_type,
            "activeControlId": result.active_control_id,
            "chart": cast(ChartJsInstance, result.instance).payload,
        }
    )
