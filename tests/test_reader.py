import xml.etree.ElementTree as ET

import pytest

from svgraster.color import NAMED_COLORS
from svgraster.elements import Ellipse, Group, Polygon, Polyline, Use
from svgraster.image import PNGImage
from svgraster.point import Point
from svgraster.reader import convert, parse_element, read_svg

RED = NAMED_COLORS["red"]
BLUE = NAMED_COLORS["blue"]
WHITE = NAMED_COLORS["white"]


def _write(tmp_path, body, width="20", height="10", xmlns=True):
    ns = ' xmlns="http://www.w3.org/2000/svg"' if xmlns else ""
    path = tmp_path / "image.svg"
    path.write_text(f'<svg{ns} width="{width}" height="{height}">{body}</svg>')
    return path


def test_dimensions_and_circle(tmp_path):
    path = _write(tmp_path, '<circle cx="5" cy="6" r="3" fill="red"/>')
    dims, elements = read_svg(path)
    assert dims == Point(20, 10)
    assert elements == [Ellipse(RED, Point(5, 6), Point(3, 3))]


def test_ellipse_without_namespace(tmp_path):
    path = _write(
        tmp_path, '<ellipse cx="4" cy="5" rx="2" ry="1" fill="#0000ff"/>', xmlns=False
    )
    _, elements = read_svg(path)
    assert elements == [Ellipse(BLUE, Point(4, 5), Point(2, 1))]


def test_rect_corners(tmp_path):
    path = _write(tmp_path, '<rect x="1" y="2" width="4" height="3" fill="blue"/>')
    _, elements = read_svg(path)
    assert elements == [
        Polygon(BLUE, [Point(1, 2), Point(4, 2), Point(4, 4), Point(1, 4)])
    ]


def test_polygon_polyline_and_line(tmp_path):
    body = (
        '<polygon points="0,0 5,0 5,5" fill="red"/>'
        '<polyline points="1,1 2,3 4,5" stroke="blue"/>'
        '<line x1="0" y1="1" x2="7" y2="8" stroke="red"/>'
    )
    _, elements = read_svg(_write(tmp_path, body))
    assert elements == [
        Polygon(RED, [Point(0, 0), Point(5, 0), Point(5, 5)]),
        Polyline(BLUE, [Point(1, 1), Point(2, 3), Point(4, 5)]),
        Polyline(RED, [Point(0, 1), Point(7, 8)]),
    ]


def test_transform_matches_element_transform(tmp_path):
    body = (
        '<circle cx="5" cy="5" r="2" fill="red" '
        'transform="rotate(90)" transform-origin="3 4"/>'
    )
    _, elements = read_svg(_write(tmp_path, body))
    expected = Ellipse(RED, Point(5, 5), Point(2, 2))
    expected.transform("rotate(90)", Point(3, 4))
    assert elements == [expected]


def test_transform_origin_ignored_without_transform(tmp_path):
    body = '<line x1="0" y1="0" x2="3" y2="3" stroke="red" transform-origin="9 9"/>'
    _, elements = read_svg(_write(tmp_path, body))
    assert elements == [Polyline(RED, [Point(0, 0), Point(3, 3)])]


def test_group_transform_applies_to_members(tmp_path):
    body = (
        '<g transform="translate(2,3)">'
        '<line x1="0" y1="0" x2="3" y2="3" stroke="red"/>'
        '<circle cx="1" cy="1" r="1" fill="blue"/>'
        "</g>"
    )
    _, elements = read_svg(_write(tmp_path, body))
    expected = Group(
        [
            Polyline(RED, [Point(0, 0), Point(3, 3)]),
            Ellipse(BLUE, Point(1, 1), Point(1, 1)),
        ]
    )
    expected.transform("translate(2,3)", Point(0, 0))
    assert elements == [expected]


def test_use_copies_referenced_element(tmp_path):
    body = (
        '<rect id="box" x="0" y="0" width="2" height="2" fill="red"/>'
        '<use href="#box" transform="translate(5,5)"/>'
    )
    _, elements = read_svg(_write(tmp_path, body))
    original, use = elements
    assert isinstance(use, Use)
    moved = original.clone()
    moved.transform("translate(5,5)", Point(0, 0))
    assert use.element == moved
    assert original.points[0] == Point(0, 0)


def test_use_of_unknown_id_raises(tmp_path):
    path = _write(tmp_path, '<use href="#missing"/>')
    with pytest.raises(ValueError):
        read_svg(path)


def test_unknown_element_is_reported_and_skipped(tmp_path, capsys):
    path = _write(tmp_path, '<text>hi</text><circle cx="1" cy="1" r="1" fill="red"/>')
    _, elements = read_svg(path)
    assert capsys.readouterr().out == "Unknown element\n"
    assert len(elements) == 1


def test_missing_fill_raises(tmp_path):
    path = _write(tmp_path, '<circle cx="1" cy="1" r="1"/>')
    with pytest.raises(ValueError):
        read_svg(path)


def test_bad_point_list_raises(tmp_path):
    path = _write(tmp_path, '<polygon points="0,0  1,1" fill="red"/>')
    with pytest.raises(ValueError):
        read_svg(path)


def test_missing_and_suffixed_dimensions(tmp_path):
    dims, _ = read_svg(_write(tmp_path, "", width="40px", height="abc"))
    assert dims == Point(40, 0)


def test_unreadable_file_raises(tmp_path):
    with pytest.raises(OSError):
        read_svg(tmp_path / "absent.svg")
    broken = tmp_path / "broken.svg"
    broken.write_text("<svg><circle")
    with pytest.raises(OSError):
        read_svg(broken)


def test_parse_element_registers_id():
    node = ET.fromstring('<circle id="dot" cx="2" cy="3" r="1" fill="red"/>')
    shapes, dictionary = [], {}
    parse_element(node, shapes, dictionary)
    assert shapes == [Ellipse(RED, Point(2, 3), Point(1, 1))]
    assert dictionary["dot"] is shapes[0]


def test_convert_renders_png(tmp_path):
    svg = _write(tmp_path, '<rect x="0" y="0" width="5" height="5" fill="blue"/>')
    png = tmp_path / "out.png"
    convert(svg, png)
    image = PNGImage.load(png)
    assert (image.width, image.height) == (20, 10)
    assert image[2, 2] == BLUE
    assert image[15, 8] == WHITE