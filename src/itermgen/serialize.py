"""
XML serialization of the node tree.

Depth-first writer: one element per line, `indent * level` leading spaces.
Leaf text is written as-is unless `escape` is set, so labels containing
'<' or '&' produce malformed XML by default.
"""

from __future__ import annotations

import io
from typing import TextIO
from xml.sax.saxutils import escape as xml_escape

from .dom import Node, NodeListContent, StringContent

XML_PROLOG = '<?xml version="1.0" encoding="UTF-8"?>'
PLIST_DOCTYPE = (
    '<!DOCTYPE plist PUBLIC "-//Apple//DTD PLIST 1.0//EN" '
    '"http://www.apple.com/DTDs/PropertyList-1.0.dtd">'
)


def _open_tag(node: Node) -> str:
    if node.attributes is not None:
        return f"<{node.tag} {node.attributes}>"
    return f"<{node.tag}>"


def write_node(
    node: Node,
    stream: TextIO,
    level: int = 0,
    indent: int = 2,
    escape: bool = False,
) -> None:
    """Write node and its subtree to stream, starting at `level`."""
    pad = " " * (indent * level)
    content = node.content

    if isinstance(content, StringContent):
        text = xml_escape(content.text) if escape else content.text
        stream.write(f"{pad}{_open_tag(node)}{text}</{node.tag}>\n")
    elif isinstance(content, NodeListContent):
        stream.write(f"{pad}{_open_tag(node)}\n")
        for child in content.children:
            write_node(child, stream, level + 1, indent, escape)
        stream.write(f"{pad}</{node.tag}>\n")
    else:
        raise TypeError(f"Unsupported content type on <{node.tag}>: {type(content).__name__}")


def render(node: Node, level: int = 0, indent: int = 2, escape: bool = False) -> str:
    """Serialize node to a string."""
    buf = io.StringIO()
    write_node(node, buf, level, indent, escape)
    return buf.getvalue()


def write_document(root: Node, stream: TextIO, indent: int = 2, escape: bool = False) -> None:
    """Write the XML prolog, the plist DOCTYPE, then the tree at level 0."""
    stream.write(XML_PROLOG + "\n")
    stream.write(PLIST_DOCTYPE + "\n")
    write_node(root, stream, 0, indent, escape)
