"""DTO types returned by the mock-data generators.

DTOs are plain, frozen data containers. Every generator call builds fresh
instances; nothing here is shared or mutated after construction.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True, slots=True)
class TimeSeriesPoint:
    """A single hourly observation.

    Attributes:
        timestamp: Wall-clock time of the observation (naive, local).
        label: Display label formatted as `MM/DD HH:mm`.
        value: Observed value, always within the clamp bounds.
    """

    timestamp: datetime
    label: str
    value: float


@dataclass(frozen=True, slots=True)
class TimeSeriesSample:
    """Hourly series over a fixed window."""

    points: tuple[TimeSeriesPoint, ...]

    @property
    def labels(self) -> list[str]:
        return [point.label for point in self.points]

    @property
    def values(self) -> list[float]:
        return [point.value for point in self.points]


@dataclass(frozen=True, slots=True)
class SalesSeries:
    """Monthly national and regional sales volumes.

    Attributes:
        months: Month labels, January first.
        national: National volume per month.
        regional: Regional volume per month.
    """

    months: tuple[str, ...]
    national: tuple[float, ...]
    regional: tuple[float, ...]


@dataclass(frozen=True, slots=True)
class SurveyEntry:
    """One survey category with its vote count and share."""

    category: str
    count: int
    percentage: float

    @property
    def percentage_label(self) -> str:
        """Return the share as a one-decimal string, e.g. `"29.8"`."""

        return f"{self.percentage:.1f}"


@dataclass(frozen=True, slots=True)
class SurveyTally:
    """Survey results in display order.

    Percentages are rounded independently, so their sum may differ from 100.0
    by a rounding error.
    """

    entries: tuple[SurveyEntry, ...]

    @property
    def categories(self) -> list[str]:
        return [entry.category for entry in self.entries]

    @property
    def counts(self) -> list[int]:
        return [entry.count for entry in self.entries]

    @property
    def percentages(self) -> list[str]:
        return [entry.percentage_label for entry in self.entries]

    @property
    def total(self) -> int:
        return sum(entry.count for entry in self.entries)


@dataclass(frozen=True, slots=True)
class CurveSample:
    """Sampled curve as parallel x/y sequences.

    Attributes:
        label: Legend label, e.g. `y = x²`.
        x_values: Sample positions in ascending order.
        y_values: Function values aligned with `x_values`.
    """

    label: str
    x_values: tuple[float, ...]
    y_values: tuple[float, ...]

    @property
    def points(self) -> list[tuple[float, float]]:
        """Return `(x, y)` pairs."""

        return list(zip(self.x_values, self.y_values))
