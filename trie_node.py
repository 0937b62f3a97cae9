"""Trie vertices: sparse ``TrieNode`` and fixed-degree ``CardinalTrieNode``.

A node owns its children.  The link back to its parent is a
``(key, weakref)`` pair, so it never keeps the parent alive and never forms
a reference cycle with the owning parent -> child edge.
"""

import weakref
from types import MappingProxyType
from typing import Any, Iterator, Mapping, Optional

from bitarray import bitarray
from bitarray.util import zeros

from slot_index import is_hashable
from trie_errors import ConfigurationError


class _NodeBase:
    """State and behaviour shared by both node variants."""

    __slots__ = ("_parent", "_is_root", "data", "is_end_of_word", "sequence",
                 "__weakref__")

    def __init__(self, key: Any, parent: Optional["_NodeBase"],
                 is_root: bool) -> None:
        self._is_root = is_root
        self._parent: Optional[tuple[Any, weakref.ref]] = (
            None if is_root else (key, weakref.ref(parent)))
        self.data: Any = None
        self.is_end_of_word = False
        self.sequence: Any = None

    @property
    def parent(self) -> Optional[tuple[Any, Any]]:
        """``(key, parent_node)`` for a linked node, else ``None``."""
        if self._parent is None:
            return None
        key, ref = self._parent
        node = ref()
        if node is None:
            return None
        return key, node

    @property
    def is_root(self) -> bool:
        return self._is_root

    def update(self, data: Any) -> None:
        """Store *data*; the node is terminal iff *data* is not ``None``.

        Passing ``None`` un-terminates the node and drops its cached sequence.
        """
        self.is_end_of_word = data is not None
        self.data = data
        if not self.is_end_of_word:
            self.sequence = None

    def unlink(self) -> None:
        """Drop the link to the parent node."""
        self._parent = None

    def _detach(self) -> None:
        self.update(None)
        self.unlink()
        self.sequence = None

    def __repr__(self) -> str:
        kind = type(self).__name__
        if not hasattr(self, "_is_root"):
            return f"{kind}(unlinked)"
        if self._is_root:
            return f"{kind}(root, children={len(self)})"
        link = self._parent[0] if self._parent is not None else None
        return (f"{kind}(key={link!r}, data={self.data!r}, "
                f"children={len(self)})")


class TrieNode(_NodeBase):
    """Node with children keyed by arbitrary hashable symbols."""

    __slots__ = ("_children",)

    def __init__(self, key: Any = None, parent: Optional["TrieNode"] = None,
                 *, is_root: bool = False) -> None:
        if not is_root:
            if key is None or not is_hashable(key):
                raise ConfigurationError(
                    "Parent key cannot be None or unhashable!")
            if not isinstance(parent, TrieNode):
                raise ConfigurationError(
                    "Parent node cannot be None or not an instance of TrieNode")
        super().__init__(key, parent, is_root)
        self._children: dict[Any, TrieNode] = {}

    @property
    def children(self) -> Mapping[Any, "TrieNode"]:
        """Read-only view of ``symbol -> child``."""
        return MappingProxyType(self._children)

    @staticmethod
    def _valid_key(key: Any) -> bool:
        return key is not None and is_hashable(key)

    def has_children(self) -> bool:
        return len(self._children) > 0

    def has_child(self, key: Any) -> bool:
        return self._valid_key(key) and key in self._children

    def child(self, key: Any) -> Optional["TrieNode"]:
        if not self._valid_key(key):
            return None
        return self._children.get(key)

    def add_child(self, key: Any, node: "TrieNode") -> Optional["TrieNode"]:
        """Install *node* under *key*; return the child it replaced, if any."""
        if not self._valid_key(key) or node is None:
            return None
        old = self._children.get(key)
        self._children[key] = node
        return old

    def delete_child(self, key: Any) -> None:
        """Detach and drop the child under *key*.  Does not recurse."""
        if not self.has_child(key):
            return
        self._children.pop(key)._detach()

    def __iter__(self) -> Iterator[tuple[Any, "TrieNode"]]:
        return iter(list(self._children.items()))

    def __len__(self) -> int:
        return len(self._children)


class CardinalTrieNode(_NodeBase):
    """Node with exactly ``k`` child slots addressed by ``0 .. k-1``.

    Slot occupancy is mirrored in a ``bitarray`` so ``has_children`` and
    ``len`` do not scan the slot list.
    """

    __slots__ = ("_k", "_slots", "_occupied")

    def __init__(self, key: Optional[int] = None,
                 parent: Optional["CardinalTrieNode"] = None,
                 *, k: Optional[int] = None, is_root: bool = False) -> None:
        if is_root:
            if k is None:
                k = 2
        else:
            if type(key) is not int:
                raise ConfigurationError(
                    "Parent key cannot be None or not of type int!")
            if not isinstance(parent, CardinalTrieNode):
                raise ConfigurationError(
                    "Parent node cannot be None or not an instance of "
                    "CardinalTrieNode")
            if k is None:
                k = parent.k
            elif k != parent.k:
                raise ConfigurationError(
                    f"Node degree {k} does not match parent degree {parent.k}")
            if not 0 <= key < k:
                raise ConfigurationError(
                    f"Parent key {key} out of range [0, {k})")
        if type(k) is not int or k < 1:
            raise ConfigurationError(f"Degree must be a positive int, got {k!r}")
        super().__init__(key, parent, is_root)
        self._k = k
        self._slots: list[Optional[CardinalTrieNode]] = [None] * k
        self._occupied: bitarray = zeros(k)

    @property
    def k(self) -> int:
        return self._k

    @property
    def children(self) -> tuple:
        """Snapshot of the ``k`` slots; empty slots are ``None``."""
        return tuple(self._slots)

    def _valid_key(self, key: Any) -> bool:
        return type(key) is int and 0 <= key < self._k

    def has_children(self) -> bool:
        return self._occupied.any()

    def has_child(self, key: Any) -> bool:
        return self._valid_key(key) and bool(self._occupied[key])

    def child(self, key: Any) -> Optional["CardinalTrieNode"]:
        if not self._valid_key(key):
            return None
        return self._slots[key]

    def add_child(self, key: int,
                  node: "CardinalTrieNode") -> Optional["CardinalTrieNode"]:
        """Install *node* in slot *key*; return the child it replaced, if any.

        Out-of-range keys and ``None`` nodes are ignored.
        """
        if not self._valid_key(key) or node is None:
            return None
        old = self._slots[key]
        self._slots[key] = node
        self._occupied[key] = 1
        return old

    def delete_child(self, key: int) -> None:
        """Detach and drop the child in slot *key*.  Does not recurse."""
        if not self.has_child(key):
            return
        child = self._slots[key]
        self._slots[key] = None
        self._occupied[key] = 0
        child._detach()

    def __iter__(self) -> Iterator[tuple[int, "CardinalTrieNode"]]:
        slots = self._slots
        return iter([(i, slots[i])
                     for i, bit in enumerate(self._occupied) if bit])

    def __len__(self) -> int:
        return self._occupied.count()
