"""Reading SVG documents into drawable elements and rendering them to PNG."""

from __future__ import annotations

import re
import xml.etree.ElementTree as ET
from collections.abc import Callable
from os import PathLike
from typing import Union

from .color import parse_color
from .elements import Ellipse, Group, Polygon, Polyline, SVGElement, Use
from .image import PNGImage
from .point import Point

__all__ = ["read_svg", "parse_element", "convert"]

StrPath = Union[str, "PathLike[str]"]

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")
_LEADING_HEX = re.compile(r"\s*0[xX]([0-9a-fA-F]+)")


def _stoi(text: str) -> int:
    """Parse a leading integer, ignoring leading whitespace and trailing text."""
    match = _LEADING_INT.match(text)
    if match is None:
        raise ValueError(f"invalid integer: {text!r}")
    return int(match.group(1))


def _int_attribute(node: ET.Element, name: str) -> int:
    """Read an integer attribute; missing or unparseable values give 0."""
    value = node.get(name)
    if value is None:
        return 0
    hex_match = _LEADING_HEX.match(value)
    if hex_match is not None:
        return int(hex_match.group(1), 16)
    match = _LEADING_INT.match(value)
    return int(match.group(1)) if match else 0


def _required(node: ET.Element, name: str) -> str:
    value = node.get(name)
    if value is None:
        raise ValueError(f"<{_local_name(node.tag)}> is missing attribute {name!r}")
    return value


def _local_name(tag: str) -> str:
    return tag.rpartition("}")[2]


def _pair(text: str, separator: str) -> Point:
    """Split ``text`` at the first ``separator``; without one both parts are the text."""
    index = text.find(separator)
    if index < 0:
        return Point(_stoi(text), _stoi(text))
    return Point(_stoi(text[:index]), _stoi(text[index + 1 :]))


def _parse_points(text: str) -> list[Point]:
    return [_pair(piece, ",") for piece in text.split(" ")]


def _children(node: ET.Element) -> list[ET.Element]:
    return [child for child in node if isinstance(child.tag, str)]


def _ellipse(node: ET.Element, shapes, dictionary) -> SVGElement:
    return Ellipse(
        parse_color(_required(node, "fill")),
        Point(_int_attribute(node, "cx"), _int_attribute(node, "cy")),
        Point(_int_attribute(node, "rx"), _int_attribute(node, "ry")),
    )


def _circle(node: ET.Element, shapes, dictionary) -> SVGElement:
    r = _int_attribute(node, "r")
    return Ellipse(
        parse_color(_required(node, "fill")),
        Point(_int_attribute(node, "cx"), _int_attribute(node, "cy")),
        Point(r, r),
    )


def _polygon(node: ET.Element, shapes, dictionary) -> SVGElement:
    return Polygon(
        parse_color(_required(node, "fill")),
        _parse_points(_required(node, "points")),
    )


def _rect(node: ET.Element, shapes, dictionary) -> SVGElement:
    x = _int_attribute(node, "x")
    y = _int_attribute(node, "y")
    right = x + _int_attribute(node, "width") - 1
    bottom = y + _int_attribute(node, "height") - 1
    return Polygon(
        parse_color(_required(node, "fill")),
        [Point(x, y), Point(right, y), Point(right, bottom), Point(x, bottom)],
    )


def _polyline(node: ET.Element, shapes, dictionary) -> SVGElement:
    return Polyline(
        parse_color(_required(node, "stroke")),
        _parse_points(_required(node, "points")),
    )


def _line(node: ET.Element, shapes, dictionary) -> SVGElement:
    return Polyline(
        parse_color(_required(node, "stroke")),
        [
            Point(_int_attribute(node, "x1"), _int_attribute(node, "y1")),
            Point(_int_attribute(node, "x2"), _int_attribute(node, "y2")),
        ],
    )


def _group(node: ET.Element, shapes, dictionary) -> SVGElement:
    members: list[SVGElement] = []
    for child in _children(node):
        parse_element(child, members, dictionary)
    return Group(members)


def _use(node: ET.Element, shapes, dictionary) -> SVGElement:
    href = _required(node, "href")
    return Use(dictionary.get(href[1:]))


_BUILDERS: dict[str, Callable[..., SVGElement]] = {
    "g": _group,
    "ellipse": _ellipse,
    "circle": _circle,
    "polygon": _polygon,
    "rect": _rect,
    "polyline": _polyline,
    "line": _line,
    "use": _use,
}


def parse_element(
    node: ET.Element,
    shapes: list[SVGElement],
    dictionary: dict[str, SVGElement],
) -> None:
    """Build the element for ``node``, append it to ``shapes`` and index it by id.

    Unknown element kinds are reported on standard output and skipped.
    """
    builder = _BUILDERS.get(_local_name(node.tag))
    if builder is None:
        print("Unknown element")
        return

    element = builder(node, shapes, dictionary)

    transform = node.get("transform")
    if transform:
        origin_text = node.get("transform-origin")
        origin = _pair(origin_text, " ") if origin_text is not None else Point(0, 0)
        element.transform(transform, origin)

    shapes.append(element)
    element_id = node.get("id")
    if element_id is not None:
        dictionary[element_id] = element


def read_svg(path: StrPath) -> tuple[Point, list[SVGElement]]:
    """Read an SVG file; return its (width, height) and top-level elements."""
    try:
        root = ET.parse(path).getroot()
    except (OSError, ET.ParseError) as exc:
        raise OSError(f"Unable to load {path}") from exc

    dimensions = Point(_int_attribute(root, "width"), _int_attribute(root, "height"))
    shapes: list[SVGElement] = []
    dictionary: dict[str, SVGElement] = {}
    for child in _children(root):
        parse_element(child, shapes, dictionary)
    return dimensions, shapes


def convert(svg_file: StrPath, png_file: StrPath) -> None:
    """Render the SVG file ``svg_file`` into the PNG file ``png_file``."""
    dimensions, elements = read_svg(svg_file)
    image = PNGImage(dimensions.x, dimensions.y)
    for element in elements:
        element.draw(image)
    image.save(png_file)