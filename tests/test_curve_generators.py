"""Unit tests for the quadratic and tangent curve generators."""

from __future__ import annotations

import math

import pytest

from mockdata.generators import generate_quadratic_curve, generate_tangent_curve

pytestmark = pytest.mark.unit


def test_quadratic_curve_has_81_points_including_endpoints() -> None:
    """x runs from -2.0 to 2.0 inclusive at 0.05 steps."""

    curve = generate_quadratic_curve()

    assert len(curve.x_values) == 81
    assert len(curve.y_values) == 81
    assert curve.x_values[0] == -2.0
    assert curve.x_values[-1] == 2.0
    assert curve.x_values[40] == 0.0


def test_quadratic_curve_y_is_exactly_x_squared() -> None:
    """No noise is applied to the quadratic curve."""

    curve = generate_quadratic_curve()

    for x, y in curve.points:
        assert y == x * x


def test_quadratic_curve_steps_are_uniform() -> None:
    """Consecutive positions differ by 0.05."""

    xs = generate_quadratic_curve().x_values
    for left, right in zip(xs, xs[1:]):
        assert right - left == pytest.approx(0.05)


def test_tangent_curve_retains_only_bounded_values() -> None:
    """Every retained sample satisfies |tan(x)| ≤ 3."""

    curve = generate_tangent_curve()

    assert curve.y_values
    assert all(abs(y) <= 3.0 for y in curve.y_values)


def test_tangent_curve_stays_inside_the_open_domain() -> None:
    """Samples never reach the asymptotes at ±π/2."""

    curve = generate_tangent_curve()

    for x, y in curve.points:
        assert -math.pi / 2 + 0.1 <= x < math.pi / 2 - 0.1
        assert math.cos(x) != 0.0
        assert y == math.tan(x)


def test_tangent_curve_is_shorter_than_quadratic_curve() -> None:
    """Filtering near the asymptotes drops samples."""

    assert len(generate_tangent_curve().x_values) < len(generate_quadratic_curve().x_values)


def test_tangent_curve_is_ascending_and_symmetric_in_extent() -> None:
    """Positions ascend and the retained range spans both signs."""

    xs = generate_tangent_curve().x_values

    assert list(xs) == sorted(xs)
    assert xs[0] < 0 < xs[-1]
    assert xs[0] >= -math.atan(3.0) - 1e-9
    assert xs[-1] <= math.atan(3.0) + 1e-9


def test_curve_generators_are_idempotent() -> None:
    """Deterministic generators return equal samples on every call."""

    assert generate_quadratic_curve() == generate_quadratic_curve()
    assert generate_tangent_curve() == generate_tangent_curve()
