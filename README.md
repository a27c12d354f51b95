# svgraster

A small rasterizer that turns a simple subset of SVG into PNG images.

Supported elements:

- `ellipse`, `circle`, `rect`, `polygon` — filled shapes (`fill` colour)
- `line`, `polyline` — lines drawn in the `stroke` colour
- `g` — groups of elements
- `use` — a copy of an earlier element referenced by `href="#id"`

Every element may carry a `transform` attribute holding one of
`translate(x,y)`, `rotate(degrees)` or `scale(factor)` with integer values,
and an optional `transform-origin="x y"`. Colours are given as names
(`black`, `white`, `red`, `green`, `blue`, `yellow`) or as `#rrggbb`.
The root `svg` element's `width` and `height` set the image size; the
canvas starts out white. An unknown element kind prints `Unknown element`
and is skipped.

## Installation

```
pip install .
```

## Command line

Convert an SVG file to PNG:

```
svgtopng input.svg output.png
```

Print the element tree of an XML file, with attributes:

```
xmldump input.svg
```

Run the regression suite over a directory that holds `input/*.svg`,
`expected/*.png` and an existing `output/` directory. The optional first
argument selects the inputs whose file names start with it; the optional
second argument is the root directory (the current directory by default).
Each test prints `pass` or `fail`, followed by a summary; details are
written to `test_log.txt` in the root directory.

```
svgraster-regression [prefix] [root]
```

## Library use

```python
from svgraster.reader import convert, read_svg
from svgraster.image import PNGImage
from svgraster.color import parse_color
from svgraster.point import Point

convert("drawing.svg", "drawing.png")

dimensions, elements = read_svg("drawing.svg")
print(dimensions.x, dimensions.y, len(elements))

image = PNGImage(100, 100)
image.draw_line(Point(0, 0), Point(99, 99), parse_color("red"))
image.draw_ellipse(Point(50, 50), Point(20, 10), parse_color("#0000ff"))
image.draw_polygon([Point(10, 10), Point(30, 10), Point(20, 30)], parse_color("green"))
image.save("out.png")
print(image[50, 50])  # Color(red=0, green=0, blue=255)
```

The element classes `Ellipse`, `Polygon`, `Polyline`, `Group` and `Use` live
in `svgraster.elements`; each has `draw(image)`, `transform(transform, origin)`
and `clone()`. `PNGImage.load(path)` reads an existing image as RGB.

## Limitations

- Only integer coordinates, radii, angles and scale factors are understood.
- Filled shapes have no outline stroke, and lines have no width.
- Only the plain `href` attribute is read for `use`, not `xlink:href`.
- Paths, text, gradients, opacity and CSS styling are not supported.
- Drawing outside the canvas raises `IndexError` instead of clipping.