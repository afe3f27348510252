"""Contour tracing: smooth outline around a closed circle chain.

Each circle contributes one arc between the bearing of its incoming neighbour
and the bearing of its outgoing neighbour. Arcs alternate sides of the chain by
index parity, so the outline snakes along the chain through every tangent
point. The two traversal conventions swap which end of the arc anchors the
walk and the walk direction, giving two distinct blob styles from one chain.
"""

from __future__ import annotations

import enum
import math

import numpy as np

from bouba.utils.geometry import Circle, Point

TAU = 2 * math.pi
DEFAULT_N_POINTS = 50


class TraversalConvention(str, enum.Enum):
    A = "a"
    B = "b"

    def toggled(self) -> TraversalConvention:
        return TraversalConvention.B if self is TraversalConvention.A else TraversalConvention.A


def arc_span(o: float, f: float) -> float:
    """Angular distance walked from ``o`` to ``f``; the long way round when f < o."""
    dist = abs(o - f) % TAU
    return TAU - dist if f < o else dist


def _arc(
    circle: Circle,
    o: float,
    f: float,
    n_points: int,
    *,
    forward: bool,
) -> list[Point]:
    """Vertices of one arc.

    A forward run emits all ``n_points`` steps anchored at ``o`` walking
    counter-clockwise. A backward run skips the first step, anchored at ``f``
    walking clockwise.
    """
    span = arc_span(o, f)
    start, anchor, step = (0, o, 1.0) if forward else (1, f, -1.0)
    j = np.arange(start, n_points, dtype=np.float64)
    theta = anchor + step * (j / (n_points - 1)) * span
    xs = circle.x + circle.r * np.cos(theta)
    ys = circle.y + circle.r * np.sin(theta)
    return [Point(float(x), float(y)) for x, y in zip(xs, ys)]


def trace(
    circles: list[Circle],
    angles: list[float],
    convention: TraversalConvention = TraversalConvention.A,
    n_points: int = DEFAULT_N_POINTS,
) -> list[Point]:
    """Ordered outline vertices for a closed chain.

    ``angles[i]`` is the bearing from circle i to circle i+1; index -1 wraps to
    the seam angle. The caller closes the path from the last vertex to the first.
    """
    if len(angles) < len(circles):
        raise ValueError(f"need {len(circles)} angles, got {len(angles)}")
    if n_points < 2:
        raise ValueError(f"n_points must be >= 2, got {n_points}")

    convention = TraversalConvention(convention)
    points: list[Point] = []
    for i, circle in enumerate(circles):
        prev = math.pi + angles[i - 1]
        curr = angles[i]
        odd = i % 2 == 1
        o, f = (prev, curr) if odd else (curr, prev)

        if convention is TraversalConvention.A:
            points.extend(_arc(circle, o, f, n_points, forward=odd))
        else:
            points.extend(_arc(circle, f, o, n_points, forward=not odd))
    return points
