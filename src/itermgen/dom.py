"""
DOM - Document Object Model for itermgen

Minimal tree of tagged nodes used to build the plist document. Every node holds
exactly one of two content variants: a string (leaf) or an ordered list of
child nodes. The variant is fixed when the node is created.

Key invariant: a node has at most one parent. The tree is strictly
hierarchical, so dropping the root releases the whole document.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import Enum

from .errors import ContentKindError


class ContentKind(Enum):
    """Variant tag chosen at construction time."""
    STRING = "string"
    NODE_LIST = "node_list"


@dataclass
class StringContent:
    """Leaf content: rendered between the opening and closing tag."""
    text: str = ""


@dataclass
class NodeListContent:
    """Ordered child nodes. Order is significant (plist key/value pairing)."""
    children: list[Node] = field(default_factory=list)


Content = StringContent | NodeListContent


@dataclass(eq=False)
class Node:
    """A tagged element in the output document."""
    tag: str
    attributes: str | None = None
    kind: ContentKind = ContentKind.STRING
    content: Content = field(init=False)
    parent: Node | None = field(default=None, init=False, repr=False)

    def __post_init__(self):
        if not self.tag:
            raise ValueError("Tag must not be empty")
        if self.kind is ContentKind.STRING:
            self.content = StringContent()
        else:
            self.content = NodeListContent()

    @classmethod
    def leaf(cls, tag: str, text: str, attributes: str | None = None) -> Node:
        """Create a string node with its text already set."""
        node = cls(tag, attributes, ContentKind.STRING)
        node.set_text(text)
        return node

    @classmethod
    def element(cls, tag: str, *children: Node, attributes: str | None = None) -> Node:
        """Create a list node, optionally with initial children."""
        node = cls(tag, attributes, ContentKind.NODE_LIST)
        if children:
            node.append(*children)
        return node

    @property
    def text(self) -> str:
        if not isinstance(self.content, StringContent):
            raise ContentKindError(f"<{self.tag}> holds child nodes, not text")
        return self.content.text

    @property
    def children(self) -> tuple[Node, ...]:
        """Snapshot of the children; empty for leaves. Use append() to mutate."""
        if isinstance(self.content, NodeListContent):
            return tuple(self.content.children)
        return ()

    def set_text(self, text: str) -> None:
        """Replace the text of a string node."""
        if not isinstance(self.content, StringContent):
            raise ContentKindError(
                f"set_text() called on <{self.tag}>, whose content is not a string"
            )
        self.content.text = text

    def append(self, *children: Node) -> Node | None:
        """
        Append children in order and return the last one for chaining.

        Each child must be detached and must not be an ancestor of this node.
        """
        if not isinstance(self.content, NodeListContent):
            raise ContentKindError(
                f"append() called on <{self.tag}>, whose content is not a node list"
            )
        for child in children:
            if child.parent is not None:
                raise ValueError(f"<{child.tag}> already belongs to <{child.parent.tag}>")
            if child in self.ancestors():
                raise ValueError(f"appending <{child.tag}> to <{self.tag}> would create a cycle")
        for child in children:
            child.parent = self
            self.content.children.append(child)
        return children[-1] if children else None

    def ancestors(self) -> Iterator[Node]:
        """Yield self, then each parent up to the root."""
        node: Node | None = self
        while node is not None:
            yield node
            node = node.parent

    def depth_first(self) -> Iterator[Node]:
        """Traverse tree depth-first, yielding self then children."""
        yield self
        for child in self.children:
            yield from child.depth_first()


def find_all(root: Node, tag: str) -> list[Node]:
    """Collect nodes with the given tag in document order."""
    return [node for node in root.depth_first() if node.tag == tag]
