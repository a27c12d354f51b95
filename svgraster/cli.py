"""Command that renders an SVG file into a PNG file."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from .reader import convert

__all__ = ["main", "USAGE"]

USAGE = "Usage: svgtopng in_file.svg out_file.png"


def main(argv: Sequence[str] | None = None) -> int:
    """Convert ``argv[0]`` (SVG) into ``argv[1]`` (PNG); print usage otherwise."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 2:
        print(USAGE)
        return 0
    svg_file, png_file = args
    print(f"Performing conversion ... {svg_file} --> {png_file}")
    convert(svg_file, png_file)
    print("Done!")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())