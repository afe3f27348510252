"""Axis-aligned bounds of a circle chain, and canvas placement from them."""

from __future__ import annotations

from dataclasses import dataclass
from functools import reduce

from bouba.utils.geometry import Circle


@dataclass(frozen=True)
class BoundingBox:
    left: float = 0.0
    top: float = 0.0
    right: float = 0.0
    bottom: float = 0.0

    @property
    def width(self) -> float:
        return abs(self.left - self.right)

    @property
    def height(self) -> float:
        return abs(self.top - self.bottom)

    def placement(self, canvas_w: float, canvas_h: float) -> tuple[float, float]:
        """Translation (dx, dy) that centres the box on a canvas."""
        dx = (canvas_w - self.width) / 2 + abs(self.left)
        dy = (canvas_h - self.height) / 2 + abs(self.top)
        return dx, dy

    def as_tuple(self) -> tuple[float, float, float, float]:
        return (self.left, self.top, self.right, self.bottom)


def _extend(box: BoundingBox, c: Circle) -> BoundingBox:
    return BoundingBox(
        left=min(box.left, c.x - c.r),
        top=min(box.top, c.y - c.r),
        right=max(box.right, c.x + c.r),
        bottom=max(box.bottom, c.y + c.r),
    )


def bounding_box(circles: list[Circle]) -> BoundingBox:
    """Fold over circle extents, seeded at the origin.

    The seed means the box always contains (0, 0), even for a chain lying
    entirely on one side of it. Placement offsets rely on that.
    """
    return reduce(_extend, circles, BoundingBox())
