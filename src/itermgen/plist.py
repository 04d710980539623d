"""
Plist assembly for iTerm2 color presets.

Each color record becomes a `key` leaf followed by a `dict` with five fixed
entries. Entries are appended in input order; repeated labels are kept.
"""

from __future__ import annotations

from .dom import Node
from .records import ColorRecord

PLIST_ATTRIBUTES = 'version="1.0"'
ALPHA = "1"
COLOR_SPACE = "sRGB"


def format_real(value: float) -> str:
    """Fixed-point with 17 fractional digits, enough to round-trip a double."""
    return f"{value:.17f}"


def color_dict(record: ColorRecord) -> Node:
    """Build the five-pair component dictionary for one color."""
    return Node.element(
        "dict",
        Node.leaf("key", "Red Component"),
        Node.leaf("real", format_real(record.red)),
        Node.leaf("key", "Green Component"),
        Node.leaf("real", format_real(record.green)),
        Node.leaf("key", "Blue Component"),
        Node.leaf("real", format_real(record.blue)),
        Node.leaf("key", "Alpha Component"),
        Node.leaf("integer", ALPHA),
        Node.leaf("key", "Color Space"),
        Node.leaf("string", COLOR_SPACE),
    )


def append_color(dict_node: Node, record: ColorRecord) -> Node:
    """Append the label key and its component dict; returns the dict."""
    return dict_node.append(Node.leaf("key", record.label), color_dict(record))


def new_plist() -> tuple[Node, Node]:
    """Return (plist root, top-level dict) with the dict already attached."""
    top = Node.element("dict")
    root = Node.element("plist", top, attributes=PLIST_ATTRIBUTES)
    return root, top
