"""Rasterize a simple subset of SVG into PNG images, with command-line tools."""

__version__ = "0.1.0"