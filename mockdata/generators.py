"""Dataset generators for the showcase charts.

Each generator is a total function over a fixed domain: it takes no external
input, never raises, and returns a new immutable DTO on every call. Generators
that perturb their baselines accept an optional `rng` so tests and the
`SHOWCASE_RANDOM_SEED` setting can make the output reproducible.
"""

from __future__ import annotations

import math
from datetime import datetime, timedelta
from random import Random
from typing import Final

from .dto import CurveSample, SalesSeries, SurveyEntry, SurveyTally, TimeSeriesPoint, TimeSeriesSample
from .noise import clamp, resolve_rng, uniform_noise

TIME_SERIES_START: Final[datetime] = datetime(2025, 1, 1, 0, 0)
TIME_SERIES_END: Final[datetime] = datetime(2025, 1, 2, 20, 0)
TIME_SERIES_STEP: Final[timedelta] = timedelta(hours=1)
TIME_SERIES_MIN: Final[float] = 99.5
TIME_SERIES_MAX: Final[float] = 103.0
TIME_SERIES_NOISE_SPREAD: Final[float] = 0.4

MONTH_LABELS: Final[tuple[str, ...]] = (
    "Jan",
    "Feb",
    "Mar",
    "Apr",
    "May",
    "Jun",
    "Jul",
    "Aug",
    "Sep",
    "Oct",
    "Nov",
    "Dec",
)
PEAK_MULTIPLIER: Final[float] = 1.4
TROUGH_MULTIPLIER: Final[float] = 0.8
NORMAL_MULTIPLIER: Final[float] = 1.1
# Indexed by month number - 1.
SEASONAL_MULTIPLIERS: Final[tuple[float, ...]] = (
    TROUGH_MULTIPLIER,
    TROUGH_MULTIPLIER,
    NORMAL_MULTIPLIER,
    NORMAL_MULTIPLIER,
    NORMAL_MULTIPLIER,
    NORMAL_MULTIPLIER,
    PEAK_MULTIPLIER,
    PEAK_MULTIPLIER,
    PEAK_MULTIPLIER,
    NORMAL_MULTIPLIER,
    TROUGH_MULTIPLIER,
    TROUGH_MULTIPLIER,
)
NATIONAL_BASELINE: Final[float] = 70.0
REGIONAL_BASELINE: Final[float] = 30.0
NATIONAL_NOISE_SPREAD: Final[float] = 8.0
REGIONAL_NOISE_SPREAD: Final[float] = 4.0

SURVEY_VOTES: Final[tuple[tuple[str, int], ...]] = (
    ("Python", 450),
    ("JavaScript", 380),
    ("Java", 290),
    ("C#", 180),
    ("Go", 120),
    ("TypeScript", 90),
)

CURVE_STEP: Final[float] = 0.05
QUADRATIC_MIN_X: Final[float] = -2.0
QUADRATIC_MAX_X: Final[float] = 2.0
TANGENT_EDGE_MARGIN: Final[float] = 0.1
TANGENT_Y_LIMIT: Final[float] = 3.0


def baseline_for_hour(hour: int) -> float:
    """Return the day/night baseline for an hour of the day (0-23).

    Args:
        hour: Hour of the day.

    Returns:
        100.2 overnight (02-06), 102.3 in the afternoon (14-18), 100.8 in the
        evening (20-01) and 101.5 otherwise. Bucket bounds are inclusive.
    """

    if 2 <= hour <= 6:
        return 100.2
    if 14 <= hour <= 18:
        return 102.3
    if hour >= 20 or hour <= 1:
        return 100.8
    return 101.5


def generate_time_series(*, rng: Random | None = None) -> TimeSeriesSample:
    """Generate an hourly series over 2025-01-01 00:00 .. 2025-01-02 20:00.

    Args:
        rng: Optional random source for the ±0.2 perturbation.

    Returns:
        TimeSeriesSample with 45 points, every value clamped to [99.5, 103.0].
    """

    source = resolve_rng(rng)
    points: list[TimeSeriesPoint] = []
    current = TIME_SERIES_START
    while current <= TIME_SERIES_END:
        value = baseline_for_hour(current.hour) + uniform_noise(TIME_SERIES_NOISE_SPREAD, rng=source)
        points.append(
            TimeSeriesPoint(
                timestamp=current,
                label=current.strftime("%m/%d %H:%M"),
                value=clamp(value, lower=TIME_SERIES_MIN, upper=TIME_SERIES_MAX),
            )
        )
        current += TIME_SERIES_STEP
    return TimeSeriesSample(points=tuple(points))


def seasonal_multiplier(month: int) -> float:
    """Return the seasonal multiplier for a 1-based month number."""

    return SEASONAL_MULTIPLIERS[month - 1]


def generate_sales(*, rng: Random | None = None) -> SalesSeries:
    """Generate twelve months of national and regional sales.

    Values are `baseline * multiplier + noise` with noise in ±4 (national) and
    ±2 (regional). Results are not clamped to the chart axis ranges.

    Args:
        rng: Optional random source for the perturbation.

    Returns:
        SalesSeries with 12 entries per sequence.
    """

    source = resolve_rng(rng)
    national: list[float] = []
    regional: list[float] = []
    for month in range(1, 13):
        factor = seasonal_multiplier(month)
        national.append(NATIONAL_BASELINE * factor + uniform_noise(NATIONAL_NOISE_SPREAD, rng=source))
        regional.append(REGIONAL_BASELINE * factor + uniform_noise(REGIONAL_NOISE_SPREAD, rng=source))
    return SalesSeries(months=MONTH_LABELS, national=tuple(national), regional=tuple(regional))


def generate_survey_tally() -> SurveyTally:
    """Return the fixed programming-language survey with rounded shares."""

    total = sum(count for _category, count in SURVEY_VOTES)
    entries = tuple(
        SurveyEntry(category=category, count=count, percentage=round(count / total * 100, 1))
        for category, count in SURVEY_VOTES
    )
    return SurveyTally(entries=entries)


def generate_quadratic_curve() -> CurveSample:
    """Sample `y = x²` over [-2, 2] at 0.05 steps (81 points).

    Positions are derived from the sample index rather than accumulated, so
    both endpoints are included exactly.
    """

    count = round((QUADRATIC_MAX_X - QUADRATIC_MIN_X) / CURVE_STEP) + 1
    x_values = tuple(round(QUADRATIC_MIN_X + index * CURVE_STEP, 2) for index in range(count))
    y_values = tuple(x * x for x in x_values)
    return CurveSample(label="y = x²", x_values=x_values, y_values=y_values)


def generate_tangent_curve() -> CurveSample:
    """Sample `y = tan(x)` over (-π/2, π/2) away from the asymptotes.

    x runs from -π/2 + 0.1 up to (excluding) π/2 - 0.1 at 0.05 steps; samples
    where |y| > 3 are dropped.
    """

    start = -math.pi / 2 + TANGENT_EDGE_MARGIN
    stop = math.pi / 2 - TANGENT_EDGE_MARGIN
    x_values: list[float] = []
    y_values: list[float] = []
    index = 0
    x = start
    while x < stop:
        y = math.tan(x)
        if abs(y) <= TANGENT_Y_LIMIT:
            x_values.append(x)
            y_values.append(y)
        index += 1
        x = start + index * CURVE_STEP
    return CurveSample(label="y = tan(x)", x_values=tuple(x_values), y_values=tuple(y_values))
