"""Integer 2D points with simple affine operations."""

from __future__ import annotations

import math
from dataclasses import dataclass

__all__ = ["Point"]


def _lround(value: float) -> int:
    """Round to the nearest integer, halves away from zero."""
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


@dataclass(frozen=True)
class Point:
    """A point with integer coordinates."""

    x: int
    y: int

    def translate(self, offset: Point) -> Point:
        """Return this point moved by ``offset``."""
        return Point(self.x + offset.x, self.y + offset.y)

    def rotate(self, origin: Point, degrees: int) -> Point:
        """Return this point rotated around ``origin`` by ``degrees``."""
        angle = math.pi * degrees / 180.0
        dx = self.x - origin.x
        dy = self.y - origin.y
        sin_a = math.sin(angle)
        cos_a = math.cos(angle)
        rx = _lround(cos_a * dx - sin_a * dy)
        ry = _lround(sin_a * dx + cos_a * dy)
        return Point(origin.x + rx, origin.y + ry)

    def scale(self, origin: Point, factor: int) -> Point:
        """Return this point scaled by ``factor`` relative to ``origin``."""
        return Point(
            origin.x + (self.x - origin.x) * factor,
            origin.y + (self.y - origin.y) * factor,
        )