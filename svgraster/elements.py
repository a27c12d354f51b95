"""SVG shape elements that can be transformed, cloned and drawn."""

from __future__ import annotations

import copy
from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from .color import Color
from .image import PNGImage
from .point import Point

__all__ = ["SVGElement", "Ellipse", "Polygon", "Polyline", "Group", "Use"]


def _parse_int(text: str) -> int:
    """Parse a leading integer, skipping leading whitespace and ignoring the rest."""
    stripped = text.lstrip()
    end = 0
    if stripped[:1] in ("+", "-"):
        end = 1
    start_digits = end
    while end < len(stripped) and stripped[end].isdigit():
        end += 1
    if end == start_digits:
        raise ValueError(f"invalid integer in transform: {text!r}")
    return int(stripped[:end])


def _first_of(text: str, chars: str) -> int:
    positions = [i for i in (text.find(c) for c in chars) if i >= 0]
    return min(positions) if positions else -1


def _between(text: str, start: int, end: int) -> str:
    """Slice from ``start`` to ``end``; a missing or earlier end means the rest."""
    if end < start:
        return text[start:]
    return text[start:end]


def _translation(transform: str) -> Point:
    start = transform.find("(") + 1
    separator = _first_of(transform, " ,")
    close = transform.find(")")
    first = _between(transform, start, separator)
    second = _between(transform, separator + 1, close)
    return Point(_parse_int(first), _parse_int(second))


def _scalar(transform: str) -> int:
    start = transform.find("(") + 1
    return _parse_int(_between(transform, start, transform.find(")")))


def _transform_points(points: list[Point], transform: str, origin: Point) -> list[Point]:
    if "translate" in transform:
        offset = _translation(transform)
        points = [p.translate(offset) for p in points]
    if "rotate" in transform:
        angle = _scalar(transform)
        points = [p.rotate(origin, angle) for p in points]
    if "scale" in transform:
        factor = _scalar(transform)
        points = [p.scale(origin, factor) for p in points]
    return points


class SVGElement(ABC):
    """Base class for drawable SVG elements."""

    @abstractmethod
    def draw(self, image: PNGImage) -> None:
        """Draw the element on ``image``."""

    @abstractmethod
    def transform(self, transform: str, origin: Point) -> None:
        """Apply an SVG transform string relative to ``origin``."""

    @abstractmethod
    def clone(self) -> SVGElement:
        """Return an independent copy of the element."""


@dataclass
class Ellipse(SVGElement):
    """A filled axis-aligned ellipse."""

    fill: Color
    center: Point
    radius: Point

    def draw(self, image: PNGImage) -> None:
        image.draw_ellipse(self.center, self.radius, self.fill)

    def transform(self, transform: str, origin: Point) -> None:
        if "translate" in transform:
            self.center = self.center.translate(_translation(transform))
        if "rotate" in transform:
            self.center = self.center.rotate(origin, _scalar(transform))
        if "scale" in transform:
            factor = _scalar(transform)
            self.radius = self.radius.scale(Point(0, 0), factor)
            self.center = self.center.scale(origin, factor)

    def clone(self) -> Ellipse:
        return Ellipse(self.fill, self.center, self.radius)


@dataclass
class Polygon(SVGElement):
    """A filled polygon."""

    fill: Color
    points: list[Point]

    def __post_init__(self) -> None:
        self.points = list(self.points)

    def draw(self, image: PNGImage) -> None:
        image.draw_polygon(self.points, self.fill)

    def transform(self, transform: str, origin: Point) -> None:
        self.points = _transform_points(self.points, transform, origin)

    def clone(self) -> Polygon:
        return Polygon(self.fill, list(self.points))


@dataclass
class Polyline(SVGElement):
    """An open chain of line segments."""

    stroke: Color
    points: list[Point]

    def __post_init__(self) -> None:
        self.points = list(self.points)

    def draw(self, image: PNGImage) -> None:
        for a, b in zip(self.points, self.points[1:]):
            image.draw_line(a, b, self.stroke)

    def transform(self, transform: str, origin: Point) -> None:
        self.points = _transform_points(self.points, transform, origin)

    def clone(self) -> Polyline:
        return Polyline(self.stroke, list(self.points))


@dataclass
class Group(SVGElement):
    """A collection of elements drawn and transformed together."""

    elements: list[SVGElement] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.elements = list(self.elements)

    def draw(self, image: PNGImage) -> None:
        for element in self.elements:
            element.draw(image)

    def add_element(self, element: SVGElement) -> None:
        """Append an element to the group."""
        self.elements.append(element)

    def transform(self, transform: str, origin: Point) -> None:
        for element in self.elements:
            element.transform(transform, origin)

    def clone(self) -> Group:
        return Group([element.clone() for element in self.elements])


class Use(SVGElement):
    """A copy of another element, taken when the reference is made."""

    def __init__(self, element: SVGElement) -> None:
        if element is None:
            raise ValueError("use element refers to no element")
        self.element = element.clone()

    def __repr__(self) -> str:
        return f"Use({self.element!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Use):
            return NotImplemented
        return self.element == other.element

    def draw(self, image: PNGImage) -> None:
        self.element.draw(image)

    def transform(self, transform: str, origin: Point) -> None:
        self.element.transform(transform, origin)

    def clone(self) -> Use:
        return Use(self.element)


def _deep_copy(element: SVGElement) -> SVGElement:
    return copy.deepcopy(element)