"""An in-memory RGB raster that can be drawn on and stored as PNG."""

from __future__ import annotations

import math
from collections.abc import Sequence
from os import PathLike
from typing import Union

from PIL import Image

from .color import Color
from .point import Point

__all__ = ["PNGImage"]

_WHITE = 0xFF
StrPath = Union[str, "PathLike[str]"]


def _round_half_away(value: float) -> int:
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def _squared_ratio(numerator: int, denominator: int) -> float:
    if denominator == 0:
        return math.inf
    ratio = numerator / denominator
    return ratio * ratio


class PNGImage:
    """An RGB image; new images start fully white."""

    def __init__(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"invalid image size: {width}x{height}")
        self._width = width
        self._height = height
        self._pixels = bytearray([_WHITE]) * (width * height * 3)

    @classmethod
    def load(cls, path: StrPath) -> PNGImage:
        """Load an image file, converting it to RGB."""
        try:
            with Image.open(path) as source:
                rgb = source.convert("RGB")
                image = cls(rgb.width, rgb.height)
                image._pixels = bytearray(rgb.tobytes())
        except OSError as exc:
            raise OSError(f"{path}: could not load image!") from exc
        return image

    def save(self, path: StrPath) -> None:
        """Write the image to ``path`` in PNG format."""
        Image.frombytes(
            "RGB", (self._width, self._height), bytes(self._pixels)
        ).save(path, format="PNG")

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def _offset(self, position: tuple[int, int]) -> int:
        x, y = position
        if not (0 <= x < self._width and 0 <= y < self._height):
            raise IndexError(
                f"pixel ({x}, {y}) outside {self._width}x{self._height} image"
            )
        return (y * self._width + x) * 3

    def __getitem__(self, position: tuple[int, int]) -> Color:
        offset = self._offset(position)
        return Color(*self._pixels[offset : offset + 3])

    def __setitem__(self, position: tuple[int, int], color: Color) -> None:
        offset = self._offset(position)
        self._pixels[offset : offset + 3] = bytes(color.as_tuple())

    def draw_line(self, a: Point, b: Point, color: Color) -> None:
        """Draw a line from ``a`` to ``b`` using Bresenham's algorithm."""
        x, y = a.x, a.y
        x_to, y_to = b.x, b.y
        dy = y_to - y
        dx = x_to - x
        step_x = step_y = 1
        if dy < 0:
            dy, step_y = -dy, -1
        if dx < 0:
            dx, step_x = -dx, -1
        dy *= 2
        dx *= 2
        self[x, y] = color
        if dx > dy:
            fraction = dy - dx // 2
            while x != x_to:
                if fraction >= 0:
                    y += step_y
                    fraction -= dx
                x += step_x
                fraction += dy
                self[x, y] = color
        else:
            fraction = dx - dy // 2
            while y != y_to:
                if fraction >= 0:
                    x += step_x
                    fraction -= dy
                y += step_y
                fraction += dx
                self[x, y] = color

    def draw_polygon(self, points: Sequence[Point], fill: Color) -> None:
        """Fill a polygon with a scanline algorithm, then draw its outline."""
        y_min = min([self._height, *(p.y for p in points)])
        y_max = max([0, *(p.y for p in points)])
        edges = list(zip(points, [*points[1:], *points[:1]]))

        for y in range(y_min, y_max):
            crossings = sorted(
                (y - a.y) * (b.x - a.x) / (b.y - a.y) + a.x
                for a, b in edges
                if min(a.y, b.y) <= y <= max(a.y, b.y) and a.y != b.y
            )
            i = 0
            while i + 1 < len(crossings):
                start = Point(_round_half_away(crossings[i]), y)
                end = Point(_round_half_away(crossings[i + 1]), y)
                if start.x == end.x:
                    i += 1
                else:
                    self.draw_line(start, end, fill)
                    i += 2

        for a, b in edges:
            self.draw_line(a, b, fill)

    def draw_ellipse(self, center: Point, radius: Point, fill: Color) -> None:
        """Fill an axis-aligned ellipse with the given radii."""
        self.draw_line(
            center.translate(Point(-radius.x, 0)),
            center.translate(Point(radius.x, 0)),
            fill,
        )
        x0 = radius.x
        dx = 0
        for y in range(1, radius.y + 1):
            vy = _squared_ratio(y, radius.y)
            x1 = x0 - (dx - 1)
            while x1 > 0:
                if _squared_ratio(x1, radius.x) + vy <= 1:
                    break
                x1 -= 1
            dx = x0 - x1
            x0 = x1
            self.draw_line(
                center.translate(Point(-x0, -y)),
                center.translate(Point(x0, -y)),
                fill,
            )
            self.draw_line(
                center.translate(Point(-x0, y)),
                center.translate(Point(x0, y)),
                fill,
            )