"""2D vector helpers operating on tuple[float, float]."""
from __future__ import annotations

from jetpack.types import Vec


def add(a: Vec, b: Vec) -> Vec:
    return (a[0] + b[0], a[1] + b[1])


def with_y(v: Vec, y: float) -> Vec:
    return (v[0], y)


def clamp(value: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, value))
