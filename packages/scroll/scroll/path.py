"""Path building - optional quadratic Bezier smoothing of waypoints."""
from __future__ import annotations

import logging
from typing import Sequence

from scroll.types import Path
from scroll.vec import Point, midpoint, sub

logger = logging.getLogger(__name__)


def bezier_point(control: Point, start: Point, end: Point, t: float) -> Point:
    """Sample the quadratic Bezier ``start -> control -> end`` at ``t``.

    Written relative to the control point, which is algebraically the same
    as ``(1-t)^2 * start + 2t(1-t) * control + t^2 * end``.
    """
    to_start = sub(start, control)
    to_end = sub(end, control)
    t2 = t * t
    a = 1 - 2 * t + t2
    return (
        control[0] + a * to_start[0] + t2 * to_end[0],
        control[1] + a * to_start[1] + t2 * to_end[1],
    )


def build_path(waypoints: Sequence[Point], smoothing: bool = False, resolution: int = 15) -> Path:
    """Turn waypoints into the path traversed at playback time.

    Without smoothing (or with only two waypoints) the waypoints are the
    path. With smoothing every interior waypoint is replaced by
    ``resolution`` samples of the curve running between the midpoints of
    its two adjacent legs; the endpoints are kept as given.
    """
    if len(waypoints) < 2:
        raise ValueError("a path needs at least two waypoints")
    if smoothing and resolution <= 1:
        raise ValueError("smoothing resolution must be greater than one")

    points = tuple(waypoints)
    if not smoothing or len(points) <= 2:
        return points

    step = 1.0 / (resolution - 1)
    out: list[Point] = [points[0]]
    for i in range(1, len(points) - 1):
        start = midpoint(points[i - 1], points[i])
        end = midpoint(points[i], points[i + 1])
        for j in range(resolution):
            pt = bezier_point(points[i], start, end, step * j)
            logger.debug("Bezier %d/%d: (%f; %f)", i, j, pt[0], pt[1])
            out.append(pt)
    out.append(points[-1])
    return tuple(out)
