"""Pure mock-data package for vizShowcase.

This package synthesizes the datasets shown on the showcase page. It contains
deterministic baselines plus small random perturbations and returns immutable
DTOs. It must not import Django.
"""

from .generators import (
    generate_quadratic_curve,
    generate_sales,
    generate_survey_tally,
    generate_tangent_curve,
    generate_time_series,
)
from .registry import DEFAULT_REGISTRY

__all__ = [
    "DEFAULT_REGISTRY",
    "generate_quadratic_curve",
    "generate_sales",
    "generate_survey_tally",
    "generate_tangent_curve",
    "generate_time_series",
]
