"""Random perturbation helpers shared by the generators."""

from __future__ import annotations

from random import Random


def uniform_noise(spread: float, *, rng: Random) -> float:
    """Draw uniform noise centred on zero.

    Args:
        spread: Full width of the interval; the draw falls in
            `[-spread / 2, +spread / 2)`.
        rng: Random source. Callers pass a seeded `Random` for reproducible
            output.

    Returns:
        The perturbation to add to a baseline.
    """

    return (rng.random() - 0.5) * spread


def clamp(value: float, *, lower: float, upper: float) -> float:
    """Restrict `value` to the inclusive `[lower, upper]` range."""

    return min(upper, max(lower, value))


def resolve_rng(rng: Random | None) -> Random:
    """Return `rng`, or a freshly seeded `Random` when None."""

    return rng if rng is not None else Random()
