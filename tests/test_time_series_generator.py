"""Unit tests for the hourly time-series generator."""

from __future__ import annotations

from datetime import datetime
from random import Random

import pytest

from mockdata.generators import (
    TIME_SERIES_MAX,
    TIME_SERIES_MIN,
    baseline_for_hour,
    generate_time_series,
)

pytestmark = pytest.mark.unit


class FixedRandom(Random):
    """Random source that always returns the same draw."""

    def __init__(self, value: float) -> None:
        super().__init__()
        self.value = value

    def random(self) -> float:
        return self.value


def test_time_series_covers_44_hour_window_inclusive() -> None:
    """One point per hour from Jan 1 00:00 through Jan 2 20:00."""

    sample = generate_time_series()

    assert len(sample.points) == 45
    assert sample.points[0].timestamp == datetime(2025, 1, 1, 0, 0)
    assert sample.points[-1].timestamp == datetime(2025, 1, 2, 20, 0)
    assert sample.labels[0] == "01/01 00:00"
    assert sample.labels[-1] == "01/02 20:00"


def test_time_series_values_stay_within_clamp_bounds(rng: Random) -> None:
    """Every generated value lies in [99.5, 103.0] across many draws."""

    for _ in range(50):
        sample = generate_time_series(rng=rng)
        assert all(TIME_SERIES_MIN <= value <= TIME_SERIES_MAX for value in sample.values)


@pytest.mark.parametrize(
    ("hour", "expected"),
    [
        (0, 100.8),
        (1, 100.8),
        (2, 100.2),
        (6, 100.2),
        (7, 101.5),
        (13, 101.5),
        (14, 102.3),
        (18, 102.3),
        (19, 101.5),
        (20, 100.8),
        (23, 100.8),
    ],
)
def test_baseline_for_hour_uses_day_night_buckets(hour: int, expected: float) -> None:
    """Bucket bounds are inclusive on both ends."""

    assert baseline_for_hour(hour) == expected


def test_time_series_noise_is_bounded_by_two_tenths() -> None:
    """Extreme draws move a value at most 0.2 away from its baseline."""

    low = generate_time_series(rng=FixedRandom(0.0))
    high = generate_time_series(rng=FixedRandom(0.999999))

    for point in low.points:
        assert point.value == pytest.approx(baseline_for_hour(point.timestamp.hour) - 0.2)
    for point in high.points:
        assert point.value == pytest.approx(baseline_for_hour(point.timestamp.hour) + 0.2, abs=1e-5)


def test_time_series_is_reproducible_with_seeded_rng() -> None:
    """The same seed yields the same values."""

    first = generate_time_series(rng=Random(42))
    second = generate_time_series(rng=Random(42))

    assert first == second


def test_time_series_calls_share_length_and_labels() -> None:
    """Repeated calls keep the same domain even though values vary."""

    first = generate_time_series()
    second = generate_time_series()

    assert len(first.points) == len(second.points)
    assert first.labels == second.labels
