"""
Tier 0: Data Model Contract Tests

These tests pin down the node tree contract that plist assembly and the
serializer rely on.
"""

import pytest
from itermgen.dom import (
    ContentKind,
    Node,
    NodeListContent,
    StringContent,
    find_all,
)
from itermgen.errors import ContentKindError


class TestNodeCreation:
    def test_default_kind_is_string(self):
        node = Node("key")
        assert node.kind is ContentKind.STRING
        assert isinstance(node.content, StringContent)
        assert node.text == ""

    def test_list_node_starts_empty(self):
        node = Node("dict", kind=ContentKind.NODE_LIST)
        assert isinstance(node.content, NodeListContent)
        assert node.children == ()

    def test_attributes_kept_verbatim(self):
        node = Node("plist", 'version="1.0"', ContentKind.NODE_LIST)
        assert node.attributes == 'version="1.0"'

    def test_attributes_default_none(self):
        assert Node("key").attributes is None

    def test_empty_tag_rejected(self):
        with pytest.raises(ValueError, match="Tag must not be empty"):
            Node("")

    def test_leaf_constructor(self):
        node = Node.leaf("real", "0.5")
        assert node.kind is ContentKind.STRING
        assert node.text == "0.5"

    def test_element_constructor_with_children(self):
        a = Node.leaf("key", "a")
        b = Node.leaf("string", "b")
        node = Node.element("dict", a, b, attributes="x")
        assert node.children == (a, b)
        assert node.attributes == "x"

    def test_leaf_has_no_children(self):
        assert Node.leaf("key", "x").children == ()


class TestVariantInvariant:
    def test_set_text_on_string_node(self):
        node = Node("key")
        node.set_text("Red Component")
        node.set_text("Green Component")
        assert node.text == "Green Component"

    def test_set_text_on_list_node_fails(self):
        node = Node.element("dict")
        with pytest.raises(ContentKindError, match="not a string"):
            node.set_text("oops")

    def test_append_on_string_node_fails(self):
        node = Node.leaf("key", "x")
        with pytest.raises(ContentKindError, match="not a node list"):
            node.append(Node.leaf("key", "y"))

    def test_text_on_list_node_fails(self):
        with pytest.raises(ContentKindError):
            _ = Node.element("dict").text

    def test_content_kind_error_is_type_error(self):
        assert issubclass(ContentKindError, TypeError)


class TestAppend:
    def test_append_preserves_order(self):
        parent = Node.element("dict")
        children = [Node.leaf("key", str(i)) for i in range(5)]
        parent.append(*children[:2])
        parent.append(*children[2:])
        assert [c.text for c in parent.children] == ["0", "1", "2", "3", "4"]

    def test_append_returns_last_child(self):
        parent = Node.element("dict")
        a = Node.leaf("key", "a")
        b = Node.element("dict")
        assert parent.append(a, b) is b

    def test_append_sets_parent(self):
        parent = Node.element("dict")
        child = parent.append(Node.leaf("key", "a"))
        assert child.parent is parent

    def test_child_cannot_have_two_parents(self):
        first = Node.element("dict")
        second = Node.element("dict")
        child = first.append(Node.leaf("key", "a"))
        with pytest.raises(ValueError, match="already belongs"):
            second.append(child)
        assert second.children == ()

    def test_cannot_append_to_self(self):
        node = Node.element("dict")
        with pytest.raises(ValueError, match="cycle"):
            node.append(node)

    def test_cannot_append_ancestor(self):
        root = Node.element("plist")
        inner = root.append(Node.element("dict"))
        with pytest.raises(ValueError, match="cycle"):
            inner.append(root)

    def test_failed_append_leaves_node_unchanged(self):
        parent = Node.element("dict")
        attached = Node.element("other").append(Node.leaf("key", "taken"))
        fresh = Node.leaf("key", "fresh")
        with pytest.raises(ValueError):
            parent.append(fresh, attached)
        assert parent.children == ()
        assert fresh.parent is None

    def test_children_cannot_be_mutated_directly(self):
        parent = Node.element("dict", Node.leaf("key", "a"))
        stray = Node.leaf("key", "b")
        with pytest.raises(AttributeError):
            parent.children.append(stray)
        assert len(parent.children) == 1
        assert stray.parent is None


class TestTreeTraversal:
    def test_depth_first_order(self):
        root = Node.element("plist")
        top = root.append(Node.element("dict"))
        top.append(Node.leaf("key", "A"), Node.element("dict", Node.leaf("key", "inner")))
        tags = [n.tag for n in root.depth_first()]
        assert tags == ["plist", "dict", "key", "dict", "key"]

    def test_single_node_traversal(self):
        node = Node.leaf("key", "alone")
        assert list(node.depth_first()) == [node]

    def test_ancestors_walks_to_root(self):
        root = Node.element("plist")
        top = root.append(Node.element("dict"))
        leaf = top.append(Node.leaf("key", "k"))
        assert list(leaf.ancestors()) == [leaf, top, root]

    def test_find_all(self):
        root = Node.element("dict", Node.leaf("key", "a"), Node.leaf("real", "1"))
        root.append(Node.element("dict", Node.leaf("key", "b")))
        assert [n.text for n in find_all(root, "key")] == ["a", "b"]

    def test_find_all_no_match(self):
        assert find_all(Node.leaf("key", "a"), "real") == []
