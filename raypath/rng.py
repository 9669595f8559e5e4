"""Shared pseudo-random source and small numeric helpers."""

from __future__ import annotations

import random

_rng = random.Random()


def seed(value: int | float | str | bytes | None) -> None:
    """Re-seed the shared generator so that sampling becomes reproducible."""
    _rng.seed(value)


def random_double(low: float = 0.0, high: float = 1.0) -> float:
    """Return a uniform float in [low, high)."""
    return low + (high - low) * _rng.random()


def clamp(x: float, low: float, high: float) -> float:
    """Limit ``x`` to the closed interval [low, high]."""
    if x < low:
        return low
    if x > high:
        return high
    return x


def random_int(low: int, high: int) -> int:
    """Return a uniform integer in [low, high], both ends included."""
    return int(random_double(low, high + 1))