"""Command that prints the element tree of an XML document."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from xml.dom import minidom
from xml.dom.minidom import Element, Node
from xml.parsers.expat import ExpatError

__all__ = ["dump", "main"]


def dump(element: Element, indentation: int) -> None:
    """Print ``element`` with its attributes, then its child elements indented."""
    attributes = "".join(
        f' {name}="{value}"' for name, value in element.attributes.items()
    )
    print(f"{' ' * indentation}{element.tagName} --> [{attributes} ] ")
    for child in element.childNodes:
        if child.nodeType == Node.ELEMENT_NODE:
            dump(child, indentation + 2)


def main(argv: Sequence[str] | None = None) -> int:
    """Dump the XML file named by the single argument."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        print("Usage: xmldump filename", end="")
        return 0
    try:
        document = minidom.parse(args[0])
    except (OSError, ExpatError) as exc:
        raise OSError(f"Unable to load {args[0]}") from exc
    dump(document.documentElement, 0)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())