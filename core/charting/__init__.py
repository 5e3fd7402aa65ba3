"""Declarative chart configuration and rendering helpers.

Charts on the showcase page are driven by `ChartConfig` objects rather than
bespoke view logic. This package contains the schema, validation, Chart.js
payload building, the chart-instance registry and the controller used by the
showcase views.
"""
