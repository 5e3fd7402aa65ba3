"""URL configuration for core views."""

from __future__ import annotations

from django.urls import path

from core import views

app_name = "core"

urlpatterns = [
    path("", views.showcase, name="showcase"),
    path("api/charts/<slug:chart_id>/", views.chart_payload, name="chart_payload"),
    path("api/charts/<slug:chart_id>/switch/", views.switch_chart, name="switch_chart"),
]
