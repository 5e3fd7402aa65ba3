"""Dataset registry used by the chart layer.

The registry describes which datasets exist and how to generate them. Chart
configs reference datasets by key, and the validator checks those keys against
this registry.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from random import Random
from typing import Final

from .dto import CurveSample, SalesSeries, SurveyTally, TimeSeriesSample
from .generators import (
    generate_quadratic_curve,
    generate_sales,
    generate_survey_tally,
    generate_tangent_curve,
    generate_time_series,
)

Dataset = TimeSeriesSample | SalesSeries | SurveyTally | CurveSample


class UnknownDatasetError(KeyError):
    """Raised when a dataset key is not registered."""


@dataclass(frozen=True, slots=True)
class DatasetSpec:
    """Describe a generated dataset.

    Args:
        key: Stable dataset key referenced by ChartConfig.dataset_key.
        label: Human-friendly label.
        description: Short description shown beside the chart.
        generator: Callable producing a fresh dataset. Randomized generators
            accept an `rng` keyword.
        randomized: Whether the generator perturbs its output.
    """

    key: str
    label: str
    description: str
    generator: Callable[..., Dataset]
    randomized: bool


class DatasetRegistry:
    """Lookup and generation helpers for dataset definitions."""

    def __init__(self, specs: Iterable[DatasetSpec]) -> None:
        self._specs: dict[str, DatasetSpec] = {}
        for spec in specs:
            if spec.key in self._specs:
                raise ValueError(f"Duplicate DatasetSpec key: {spec.key!r}")
            self._specs[spec.key] = spec

    def get(self, key: str) -> DatasetSpec | None:
        """Return a spec for a dataset key, or None when missing."""

        return self._specs.get(key)

    def list(self) -> tuple[DatasetSpec, ...]:
        """Return all specs in registration order."""

        return tuple(self._specs.values())

    def generate(self, key: str, *, rng: Random | None = None) -> Dataset:
        """Generate a fresh dataset.

        Args:
            key: Registered dataset key.
            rng: Optional random source, ignored by deterministic generators.

        Returns:
            A newly built dataset DTO.

        Raises:
            UnknownDatasetError: When `key` is not registered.
        """

        spec = self._specs.get(key)
        if spec is None:
            raise UnknownDatasetError(key)
        if spec.randomized:
            return spec.generator(rng=rng)
        return spec.generator()


DEFAULT_REGISTRY: Final[DatasetRegistry] = DatasetRegistry(
    specs=(
        DatasetSpec(
            key="time_series",
            label="Hourly readings",
            description="Hourly values over 44 hours following a day/night cycle.",
            generator=generate_time_series,
            randomized=True,
        ),
        DatasetSpec(
            key="sales",
            label="Monthly sales",
            description="National and regional sales with a July-September peak.",
            generator=generate_sales,
            randomized=True,
        ),
        DatasetSpec(
            key="survey",
            label="Language survey",
            description="Votes for favourite programming language.",
            generator=generate_survey_tally,
            randomized=False,
        ),
        DatasetSpec(
            key="quadratic",
            label="Quadratic curve",
            description="y = x² sampled over [-2, 2].",
            generator=generate_quadratic_curve,
            randomized=False,
        ),
        DatasetSpec(
            key="tangent",
            label="Tangent curve",
            description="y = tan(x) over (-π/2, π/2) with |y| ≤ 3.",
            generator=generate_tangent_curve,
            randomized=False,
        ),
    )
)
