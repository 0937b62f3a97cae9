"""Tests for TrieNode and CardinalTrieNode."""

import gc

import pytest

from trie_errors import ConfigurationError, TrieError
from trie_node import CardinalTrieNode, TrieNode


class TestTrieNodeConstruction:
    """Construction contract for sparse nodes."""

    def test_root_without_parent(self):
        """A root node needs no parent and starts empty."""
        root = TrieNode(is_root=True)
        assert root.is_root
        assert root.parent is None
        assert root.is_end_of_word is False
        assert root.has_children() is False
        assert root.data is None
        assert root.sequence is None

    def test_missing_key_raises(self):
        """A non-root node without a key is rejected."""
        root = TrieNode(is_root=True)
        with pytest.raises(ConfigurationError):
            TrieNode(None, root)

    def test_unhashable_key_raises(self):
        """A non-root node with an unhashable key is rejected."""
        root = TrieNode(is_root=True)
        with pytest.raises(ConfigurationError):
            TrieNode(["a"], root)

    def test_missing_parent_raises(self):
        """A non-root node without a parent is rejected."""
        with pytest.raises(ConfigurationError, match="Parent node"):
            TrieNode("a", None)

    def test_wrong_parent_type_raises(self):
        """A sparse node cannot hang off a dense node."""
        with pytest.raises(ConfigurationError):
            TrieNode("a", CardinalTrieNode(is_root=True))

    def test_configuration_error_is_value_error(self):
        """ConfigurationError is catchable as both TrieError and ValueError."""
        with pytest.raises(TrieError):
            TrieNode("a")
        with pytest.raises(ValueError):
            TrieNode("a")

    def test_parent_link(self):
        """The parent link exposes the key and the parent node."""
        root = TrieNode(is_root=True)
        child = TrieNode("a", root)
        assert child.parent == ("a", root)
        assert child.is_root is False

    def test_repr_before_init(self):
        """repr works on a node whose constructor never completed."""
        assert repr(TrieNode.__new__(TrieNode)) == "TrieNode(unlinked)"
        assert (repr(CardinalTrieNode.__new__(CardinalTrieNode))
                == "CardinalTrieNode(unlinked)")


class TestTrieNodeMethods:
    """Child management and data updates on sparse nodes."""

    @pytest.fixture
    def nodes(self):
        root = TrieNode(is_root=True)
        child = TrieNode("a", root)
        root.add_child("a", child)
        return root, child

    def test_has_child(self, nodes):
        root, _ = nodes
        assert root.has_child("a") is True
        assert root.has_child("b") is False
        assert root.has_child(None) is False
        assert root.has_child(["a"]) is False

    def test_add_child_returns_previous(self, nodes):
        """add_child returns the child it replaced."""
        root, child = nodes
        other = TrieNode("a", root)
        assert root.add_child("a", other) is child
        assert root.child("a") is other
        assert root.add_child("b", TrieNode("b", root)) is None

    def test_add_child_rejects_invalid(self, nodes):
        """Invalid keys and None nodes leave the node untouched."""
        root, child = nodes
        assert root.add_child("a", None) is None
        assert root.add_child(None, TrieNode("x", root)) is None
        assert root.child("a") is child
        assert len(root) == 1

    def test_delete_child(self, nodes):
        """delete_child detaches the child and vacates its slot."""
        root, child = nodes
        child.sequence = "a"
        child.update(5)
        root.delete_child("a")
        assert root.has_child("a") is False
        assert root.has_children() is False
        assert child.parent is None
        assert child.is_end_of_word is False
        assert child.data is None
        assert child.sequence is None

    def test_delete_child_missing_is_noop(self, nodes):
        root, _ = nodes
        root.delete_child("zzz")
        root.delete_child(None)
        assert len(root) == 1

    def test_delete_child_does_not_recurse(self, nodes):
        """Grandchildren stay attached to the removed child."""
        root, child = nodes
        grandchild = TrieNode("b", child)
        child.add_child("b", grandchild)
        root.delete_child("a")
        assert child.child("b") is grandchild
        assert grandchild.parent == ("b", child)

    def test_unlink(self, nodes):
        _, child = nodes
        child.unlink()
        assert child.parent is None

    def test_update(self, nodes):
        """update marks the node terminal iff data is not None."""
        _, child = nodes
        child.sequence = "a"
        child.update("testData")
        assert child.data == "testData"
        assert child.is_end_of_word is True
        assert child.sequence == "a"

        child.update(None)
        assert child.data is None
        assert child.is_end_of_word is False
        assert child.sequence is None

    @pytest.mark.parametrize("value", [0, "", False, [], 0.0])
    def test_update_falsy_data_is_present(self, nodes, value):
        """Falsy values other than None still terminate the node."""
        _, child = nodes
        child.update(value)
        assert child.is_end_of_word is True
        assert child.data == value

    def test_children_view_is_read_only(self, nodes):
        root, child = nodes
        view = root.children
        assert view["a"] is child
        with pytest.raises(TypeError):
            view["b"] = child  # type: ignore[index]

    def test_iter_and_len(self, nodes):
        root, child = nodes
        assert list(root) == [("a", child)]
        assert len(root) == 1
        assert len(child) == 0

    def test_parent_link_does_not_own_parent(self):
        """Dropping the last owner of a parent leaves the child unlinked."""
        root = TrieNode(is_root=True)
        child = TrieNode("a", root)
        root.add_child("a", child)
        del root
        gc.collect()
        assert child.parent is None


class TestCardinalTrieNodeConstruction:
    """Construction contract for dense nodes."""

    def test_root_defaults(self):
        root = CardinalTrieNode(is_root=True)
        assert root.k == 2
        assert root.children == (None, None)
        assert root.is_end_of_word is False
        assert root.has_children() is False

    def test_missing_key_raises(self):
        root = CardinalTrieNode(is_root=True)
        with pytest.raises(ConfigurationError,
                           match="Parent key cannot be None or not of type int!"):
            CardinalTrieNode(None, root)

    def test_non_int_key_raises(self):
        root = CardinalTrieNode(is_root=True)
        with pytest.raises(ConfigurationError):
            CardinalTrieNode("0", root)
        with pytest.raises(ConfigurationError):
            CardinalTrieNode(True, root)

    def test_missing_parent_raises(self):
        with pytest.raises(
                ConfigurationError,
                match="Parent node cannot be None or not an instance of "
                      "CardinalTrieNode"):
            CardinalTrieNode(0, None)

    def test_key_out_of_range_raises(self):
        root = CardinalTrieNode(is_root=True, k=3)
        with pytest.raises(ConfigurationError):
            CardinalTrieNode(3, root)
        with pytest.raises(ConfigurationError):
            CardinalTrieNode(-1, root)

    def test_degree_inherited_from_parent(self):
        root = CardinalTrieNode(is_root=True, k=5)
        assert CardinalTrieNode(4, root).k == 5

    def test_degree_mismatch_raises(self):
        root = CardinalTrieNode(is_root=True, k=5)
        with pytest.raises(ConfigurationError):
            CardinalTrieNode(0, root, k=4)

    @pytest.mark.parametrize("k", [0, -1, 2.0, "3"])
    def test_invalid_degree_raises(self, k):
        with pytest.raises(ConfigurationError):
            CardinalTrieNode(is_root=True, k=k)


class TestCardinalTrieNodeMethods:
    """Slot management on dense nodes."""

    @pytest.fixture
    def nodes(self):
        node = CardinalTrieNode(is_root=True, k=2)
        child = CardinalTrieNode(0, node)
        node.add_child(0, child)
        return node, child

    def test_has_child(self, nodes):
        node, _ = nodes
        assert node.has_child(0) is True
        assert node.has_child(1) is False

    @pytest.mark.parametrize("key", [-1, 2, 100, None, "0", 0.0])
    def test_has_child_out_of_range(self, nodes, key):
        node, _ = nodes
        assert node.has_child(key) is False

    def test_add_and_delete_child(self, nodes):
        node, _ = nodes
        new_child = CardinalTrieNode(1, node)
        assert node.add_child(1, new_child) is None
        assert node.has_child(1) is True
        assert len(node) == 2

        node.delete_child(1)
        assert node.has_child(1) is False
        assert node.children == (node.child(0), None)
        assert len(node) == 1

    def test_add_child_out_of_range_ignored(self, nodes):
        node, child = nodes
        assert node.add_child(2, CardinalTrieNode(1, node)) is None
        assert node.add_child(1, None) is None
        assert node.children == (child, None)

    def test_add_child_returns_previous(self, nodes):
        node, child = nodes
        replacement = CardinalTrieNode(0, node)
        assert node.add_child(0, replacement) is child
        assert node.child(0) is replacement

    def test_has_children(self, nodes):
        node, _ = nodes
        assert node.has_children() is True
        node.delete_child(0)
        assert node.has_children() is False

    def test_delete_child_out_of_range_is_noop(self, nodes):
        node, _ = nodes
        node.delete_child(5)
        node.delete_child(-1)
        node.delete_child(1)
        assert len(node) == 1

    def test_unlink(self, nodes):
        node, child = nodes
        assert child.parent[1] is node
        child.unlink()
        assert child.parent is None

    def test_update(self, nodes):
        _, child = nodes
        child.update("testData")
        assert child.data == "testData"
        assert child.is_end_of_word is True

        child.update(None)
        assert child.data is None
        assert child.is_end_of_word is False

    def test_iter_yields_occupied_slots(self):
        node = CardinalTrieNode(is_root=True, k=4)
        a = CardinalTrieNode(1, node)
        b = CardinalTrieNode(3, node)
        node.add_child(3, b)
        node.add_child(1, a)
        assert list(node) == [(1, a), (3, b)]
