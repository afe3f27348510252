"""Leaf-node geometry helpers. No engine imports."""

from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np
from numpy.typing import NDArray
from shapely.geometry import LinearRing


@dataclass(frozen=True)
class Point:
    x: float
    y: float


@dataclass(frozen=True)
class Circle:
    """A placed circle. Identified by its index in the chain."""

    x: float
    y: float
    r: float

    @property
    def center(self) -> Point:
        return Point(self.x, self.y)


def distance(c1: Circle | Point, c2: Circle | Point) -> float:
    """Euclidean distance between two centres."""
    return math.sqrt((c1.x - c2.x) ** 2 + (c1.y - c2.y) ** 2)


def overlap(c1: Circle, c2: Circle, tolerance: float = 0.0) -> bool:
    """True when the circles intersect. Tangent circles do not overlap.

    ``tolerance`` absorbs floating-point rounding on tangent pairs.
    """
    return distance(c1, c2) < c1.r + c2.r - tolerance


def no_overlaps(circles: list[Circle], tolerance: float = 0.0) -> bool:
    """Pairwise check across the whole list, O(n^2)."""
    n = len(circles)
    for i in range(n):
        for j in range(i + 1, n):
            if overlap(circles[i], circles[j], tolerance):
                return False
    return True


def contour_as_array(points: list[Point]) -> NDArray[np.float64]:
    """Nx2 array of (x, y)."""
    if not points:
        return np.empty((0, 2))
    return np.array([(p.x, p.y) for p in points], dtype=np.float64)


def dedupe_consecutive(points: NDArray[np.float64], eps: float = 1e-6) -> NDArray[np.float64]:
    """Drop vertices within ``eps`` of their predecessor, wrap-around included.

    Neighbouring arcs both emit the shared tangent point, a few ulps apart.
    """
    if len(points) < 2:
        return points
    step = np.linalg.norm(np.diff(points, axis=0), axis=1)
    keep = np.concatenate([[True], step > eps])
    points = points[keep]
    if len(points) > 1 and np.linalg.norm(points[-1] - points[0]) <= eps:
        points = points[:-1]
    return points


def contour_is_simple(points: list[Point]) -> bool:
    """True if the closed polyline through ``points`` does not self-intersect."""
    coords = dedupe_consecutive(contour_as_array(points))
    if len(coords) < 3:
        return False
    return bool(LinearRing(coords).is_simple)
