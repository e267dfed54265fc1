"""2-D vector math helpers operating on tuple[float, float]."""
from __future__ import annotations

import math

Point = tuple[float, float]


def sub(a: Point, b: Point) -> Point:
    return (a[0] - b[0], a[1] - b[1])


def magnitude(v: Point) -> float:
    return math.sqrt(v[0] * v[0] + v[1] * v[1])


def midpoint(a: Point, b: Point) -> Point:
    return (a[0] + (b[0] - a[0]) / 2, a[1] + (b[1] - a[1]) / 2)


def lerp(start: Point, vector: Point, t: float) -> Point:
    """Point at fraction ``t`` along ``vector`` from ``start``."""
    return (start[0] + vector[0] * t, start[1] + vector[1] * t)


ORIGIN: Point = (0.0, 0.0)
