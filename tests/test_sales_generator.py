"""Unit tests for the seasonal sales generator."""

from __future__ import annotations

from random import Random

import pytest

from mockdata.generators import (
    MONTH_LABELS,
    NATIONAL_BASELINE,
    REGIONAL_BASELINE,
    generate_sales,
    seasonal_multiplier,
)

pytestmark = pytest.mark.unit


class FixedRandom(Random):
    """Random source that always returns the same draw."""

    def __init__(self, value: float) -> None:
        super().__init__()
        self.value = value

    def random(self) -> float:
        return self.value


def test_sales_has_twelve_months_per_series(rng: Random) -> None:
    """National and regional sequences each carry one value per month."""

    sales = generate_sales(rng=rng)

    assert sales.months == MONTH_LABELS
    assert len(sales.national) == 12
    assert len(sales.regional) == 12


@pytest.mark.parametrize(
    ("month", "expected"),
    [(1, 0.8), (2, 0.8), (3, 1.1), (6, 1.1), (7, 1.4), (8, 1.4), (9, 1.4), (10, 1.1), (11, 0.8), (12, 0.8)],
)
def test_seasonal_multiplier_table(month: int, expected: float) -> None:
    """Peak in July-September, trough in November-February."""

    assert seasonal_multiplier(month) == expected


def test_sales_without_noise_equals_baseline_times_multiplier() -> None:
    """A centred draw adds zero noise."""

    sales = generate_sales(rng=FixedRandom(0.5))

    for index in range(12):
        factor = seasonal_multiplier(index + 1)
        assert sales.national[index] == pytest.approx(NATIONAL_BASELINE * factor)
        assert sales.regional[index] == pytest.approx(REGIONAL_BASELINE * factor)


def test_peak_months_stay_within_noise_bound_of_peak_baseline(rng: Random) -> None:
    """July-September values lie within ±4 / ±2 of baseline × 1.4."""

    for _ in range(50):
        sales = generate_sales(rng=rng)
        for index in (6, 7, 8):
            assert abs(sales.national[index] - NATIONAL_BASELINE * 1.4) <= 4.0
            assert abs(sales.regional[index] - REGIONAL_BASELINE * 1.4) <= 2.0


def test_sales_values_are_not_clamped_to_axis_bounds() -> None:
    """Peak-season values exceed the nominal 90 / 40 axis maxima unchanged."""

    sales = generate_sales(rng=FixedRandom(0.999999))

    assert sales.national[7] > 90.0
    assert sales.regional[7] > 40.0
