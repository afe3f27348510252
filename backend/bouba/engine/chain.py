"""Circle chain construction: placement, loop closing and overlap validation.

A chain starts with a circle at the origin. Each following circle is tangent to
its predecessor at a random bearing. The last circle is not drawn at random: it
is computed so that it touches both the last placed circle and the first one,
closing the loop.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from bouba.engine.config import GeneratorConfig
from bouba.engine.errors import LocalPlacementExhausted
from bouba.engine.random_source import UniformSource, uniform
from bouba.utils.geometry import Circle, distance, no_overlaps, overlap

TAU = 2 * math.pi


@dataclass
class Chain:
    """Circles plus the connecting angle leaving each of them."""

    circles: list[Circle] = field(default_factory=list)
    angles: list[float] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.circles)


def _draw_radius(source: UniformSource, config: GeneratorConfig) -> float:
    r = uniform(source, config.min_radius, config.max_radius)
    return float(int(r)) if config.integer_radii else r


def build_chain(config: GeneratorConfig, source: UniformSource) -> Chain:
    """Place the first ``circle_count - 1`` circles of an open chain.

    Raises LocalPlacementExhausted when one circle cannot be placed; the chain
    is then abandoned as a whole.
    """
    circles = [Circle(0.0, 0.0, _draw_radius(source, config))]
    angles: list[float] = []
    tol = config.overlap_tolerance

    for i in range(config.circle_count - 2):
        prev = circles[i]
        for _ in range(config.max_circle_tries):
            # Draw order (angle, then radius) is part of the reproducibility contract
            angle = uniform(source, 0.0, TAU)
            r = _draw_radius(source, config)
            candidate = Circle(
                prev.x + (prev.r + r) * math.cos(angle),
                prev.y + (prev.r + r) * math.sin(angle),
                r,
            )
            if not any(overlap(c, candidate, tol) for c in circles):
                break
        else:
            raise LocalPlacementExhausted(i + 1, config.max_circle_tries)

        circles.append(candidate)
        angles.append(angle)

    return Chain(circles=circles, angles=angles)


def close_loop(circles: list[Circle]) -> tuple[Circle, float]:
    """Closing circle between the last placed circle and the first one.

    Returns the circle and its bearing from the last placed circle. The radius
    is half the gap left between the two end circles, so it may come out
    non-positive when they already touch or overlap.
    """
    c0 = circles[0]
    cn = circles[-1]

    hip = distance(c0, cn)
    ah = max(-1.0, min(1.0, (c0.x - cn.x) / hip))

    rl = (hip - cn.r - c0.r) / 2
    rc = rl + cn.r
    # acos only covers [0, pi]; mirror into the lower half-plane when needed
    al = math.acos(-ah) - math.pi if cn.y > c0.y else math.acos(ah)

    closing = Circle(cn.x + rc * math.cos(al), cn.y + rc * math.sin(al), rl)
    return closing, al


def closed_chain(open_chain: Chain) -> Chain:
    """Append the closing circle, and its angle twice (one per side of the seam)."""
    closing, al = close_loop(open_chain.circles)
    return Chain(
        circles=[*open_chain.circles, closing],
        angles=[*open_chain.angles, al, al],
    )


def is_valid_chain(circles: list[Circle], tolerance: float = 0.0) -> bool:
    """Every radius is positive and no pair of circles overlaps, adjacent or not.

    A closing circle whose radius is zero or negative (within ``tolerance``) is
    rejected. That covers three-circle chains, whose closing circle collapses
    onto the tangent point of the two placed circles.
    """
    if any(c.r <= tolerance for c in circles):
        return False
    return no_overlaps(circles, tolerance)
