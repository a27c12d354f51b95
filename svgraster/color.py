"""8-bit RGB colours and parsing of SVG colour strings."""

from __future__ import annotations

import string
from dataclasses import dataclass

__all__ = ["Color", "parse_color", "NAMED_COLORS"]


@dataclass(frozen=True)
class Color:
    """An 8-bit RGB colour."""

    red: int
    green: int
    blue: int

    def __post_init__(self) -> None:
        for component in (self.red, self.green, self.blue):
            if not 0 <= component <= 0xFF:
                raise ValueError(f"colour component out of range: {component}")

    def as_tuple(self) -> tuple[int, int, int]:
        """Return the colour as an ``(r, g, b)`` tuple."""
        return (self.red, self.green, self.blue)


NAMED_COLORS: dict[str, Color] = {
    "black": Color(0, 0, 0),
    "white": Color(255, 255, 255),
    "red": Color(255, 0, 0),
    "green": Color(0, 255, 0),
    "blue": Color(0, 0, 255),
    "yellow": Color(255, 255, 0),
}


def _leading_hex(text: str) -> str:
    digits = []
    for char in text:
        if char not in string.hexdigits:
            break
        digits.append(char)
    return "".join(digits)


def parse_color(text: str) -> Color:
    """Parse a colour name or a ``#rrggbb`` hexadecimal colour.

    Raises ``ValueError`` for an empty string, a malformed hexadecimal value
    or an unknown colour name.
    """
    if not text:
        raise ValueError("empty colour string")
    if text[0] == "#":
        digits = _leading_hex(text[1:])
        if not digits:
            raise ValueError(f"invalid hexadecimal colour: {text!r}")
        value = int(digits, 16)
        return Color((value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF)
    try:
        return NAMED_COLORS[text]
    except KeyError:
        raise ValueError(f"unknown colour name: {text!r}") from None