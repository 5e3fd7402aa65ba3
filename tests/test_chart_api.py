"""Django integration tests for the chart JSON endpoints."""

from __future__ import annotations

import pytest

from core.selections import RENDER_TYPES_SESSION_KEY

pytestmark = pytest.mark.integration


@pytest.mark.django_db
def test_chart_payload_defaults_to_default_render_type(client) -> None:
    """Without a type parameter the chart default is used."""

    response = client.get("/api/charts/survey/")

    assert response.status_code == 200
    body = response.json()
    assert body["ok"] is True
    assert body["chart"]["meta"]["renderType"] == "bar"


@pytest.mark.django_db
def test_chart_payload_honours_type_parameter(client) -> None:
    """The type query parameter selects the render type."""

    body = client.get("/api/charts/quadratic/", {"type": "scatter"}).json()

    assert body["chart"]["type"] == "scatter"
    assert len(body["chart"]["data"]["datasets"][0]["data"]) == 81


@pytest.mark.django_db
def test_chart_payload_unknown_chart_returns_404(client) -> None:
    """Unknown chart ids map to a JSON 404."""

    response = client.get("/api/charts/chart42/")

    assert response.status_code == 404
    assert response.json() == {"ok": False, "error": "Chart not found."}


@pytest.mark.django_db
def test_chart_payload_unsupported_type_returns_400(client) -> None:
    """Render types a chart does not offer map to a JSON 400."""

    response = client.get("/api/charts/time_series/", {"type": "pie"})

    assert response.status_code == 400
    assert response.json()["ok"] is False
    assert "does not support render type 'pie'" in response.json()["error"]


@pytest.mark.django_db
def test_switch_chart_returns_payload_and_active_control(client) -> None:
    """Switching returns the new payload and the triggering control."""

    response = client.post(
        "/api/charts/survey/switch/",
        {"type": "horizontalBar", "control": "survey-btn-horizontalBar"},
    )

    assert response.status_code == 200
    body = response.json()
    assert body["ok"] is True
    assert body["chartId"] == "survey"
    assert body["renderType"] == "horizontalBar"
    assert body["activeControlId"] == "survey-btn-horizontalBar"
    assert body["chart"]["options"]["indexAxis"] == "y"


@pytest.mark.django_db
def test_switch_chart_remembers_selection_in_session(client) -> None:
    """The chosen render type is stored for the session and reused by the page."""

    client.post("/api/charts/tangent/switch/", {"type": "scatter"})

    assert client.session[RENDER_TYPES_SESSION_KEY] == {"tangent": "scatter"}
    page = client.get("/")
    sections = {section["config"].id: section for section in page.context["sections"]}
    assert sections["tangent"]["active_control_id"] == "tangent-btn-scatter"


@pytest.mark.django_db
def test_switch_chart_without_control_defaults_to_button_id(client) -> None:
    """The chart's own button is reported active when no control is sent."""

    body = client.post("/api/charts/sales/switch/", {"type": "bar"}).json()

    assert body["activeControlId"] == "sales-btn-bar"


@pytest.mark.django_db
def test_switch_chart_rejects_bad_requests(client) -> None:
    """Unknown charts, missing types and GET requests are rejected."""

    assert client.post("/api/charts/nope/switch/", {"type": "line"}).status_code == 404
    assert client.post("/api/charts/sales/switch/", {}).status_code == 400
    assert client.get("/api/charts/sales/switch/").status_code == 405
    assert RENDER_TYPES_SESSION_KEY not in client.session
