"""Mutable prefix trees over symbol sequences.

``TrieBase`` implements insert / search / update / delete / get_path once;
the variants differ only in how a symbol is turned into a child-slot key
and which node class they grow:

* ``Trie``         - sparse: any hashable symbol keys a child dict.
* ``CardinalTrie`` - dense: every node has ``k`` slots, addressed through
  an alphabet or by the symbol's decimal digit value.

All traversals are loops over the input, never one call frame per symbol,
so sequences far longer than the interpreter's recursion limit are fine.
"""

import logging
from collections.abc import Sequence as SequenceABC
from typing import Any, Iterable, Optional, Sequence

from slot_index import AlphabetIndex, DigitIndex, SymbolIndex
from trie_errors import ConfigurationError, InvalidSymbolError
from trie_node import CardinalTrieNode, TrieNode

logger = logging.getLogger(__name__)


class TrieBase:
    """Prefix tree engine parameterised over a child-slot resolver.

    Maps each inserted sequence to a data value.  When no value is given on
    insert, the trie assigns the next number from a private counter that
    starts at 1.  ``None`` is the "absent" value: it is never stored, and
    every other value (including ``0``, ``""`` and ``False``) is.
    """

    def __init__(self, index: Any, root: Any) -> None:
        self._index = index
        self._root = root
        self._last_index = 1
        self._size = 0

    # ------------------------------------------------------------------ #
    #  Accessors                                                           #
    # ------------------------------------------------------------------ #

    @property
    def root(self) -> Any:
        return self._root

    @property
    def next_index(self) -> int:
        """Value the next data-less insert will receive."""
        return self._last_index

    def _new_node(self, key: Any, parent: Any) -> Any:
        raise NotImplementedError

    def _get_next_index(self) -> int:
        idx = self._last_index
        self._last_index += 1
        return idx

    # ------------------------------------------------------------------ #
    #  Traversal                                                           #
    # ------------------------------------------------------------------ #

    def _walk(self, sequence: Iterable[Any]) -> Any:
        """Follow *sequence* from the root without creating nodes.

        Returns the node reached, or ``None`` once a symbol is unresolvable
        or its slot is empty.
        """
        find = self._index.find
        node = self._root
        for symbol in sequence:
            key = find(symbol)
            if key is None:
                return None
            node = node.child(key)
            if node is None:
                return None
        return node

    def _search_node(self, sequence: Iterable[Any]) -> Any:
        node = self._walk(sequence)
        if node is None or node is self._root or not node.is_end_of_word:
            return None
        return node

    # ------------------------------------------------------------------ #
    #  Public API                                                          #
    # ------------------------------------------------------------------ #

    def insert(self, sequence: Sequence[Any], data: Any = None) -> bool:
        """Insert *sequence* and map *data* onto it.

        Every symbol is resolved before the tree is touched, so a rejected
        sequence leaves no partial branch behind.

        Args:
            sequence: Symbols to index.  A ``str`` or sequence is cached as
                given; any other iterable is cached as a tuple.
            data: Value to store.  ``None`` assigns the next auto-index.

        Returns:
            True once stored; False for the empty sequence, which is not
            stored.

        Raises:
            InvalidSymbolError: If a symbol has no child slot.
        """
        if not isinstance(sequence, SequenceABC):
            sequence = tuple(sequence)
        resolve = self._index.resolve
        try:
            keys = [resolve(symbol, i) for i, symbol in enumerate(sequence)]
        except InvalidSymbolError as exc:
            logger.debug("Rejected insert: %r at position %s",
                         exc.symbol, exc.position)
            raise
        if not keys:
            return False

        node = self._root
        created = 0
        for key in keys:
            child = node.child(key)
            if child is None:
                child = self._new_node(key, node)
                node.add_child(key, child)
                created += 1
            node = child

        if not node.is_end_of_word:
            self._size += 1
        node.sequence = sequence
        node.update(data if data is not None else self._get_next_index())
        if created:
            logger.debug("Inserted %d-symbol sequence, %d new nodes",
                         len(keys), created)
        return True

    def search(self, sequence: Iterable[Any]) -> Any:
        """Return the data stored for *sequence*, or ``None``.

        Strict prefixes of stored sequences are not matches.
        """
        node = self._search_node(sequence)
        return None if node is None else node.data

    def get_data_node(self, sequence: Iterable[Any]) -> Any:
        """Return the terminal node for *sequence*, or ``None``."""
        return self._search_node(sequence)

    def update(self, sequence: Iterable[Any], data: Any) -> bool:
        """Replace the data stored for *sequence*.

        The tree shape is unchanged.  Updating to ``None`` removes the
        sequence, exactly like ``delete``.

        Returns:
            False if *sequence* is not stored, True otherwise.
        """
        if data is None:
            return self.delete(sequence)
        node = self._search_node(sequence)
        if node is None:
            return False
        node.update(data)
        return True

    def delete(self, sequence: Iterable[Any]) -> bool:
        """Remove *sequence* and prune the branch it leaves empty.

        A node that still has children is only un-terminated.  Otherwise the
        node is cut from its parent and the check repeats on the parent,
        stopping at the root, at a node with other children, or at a node
        that terminates another sequence.

        Returns:
            False if *sequence* is not stored, True otherwise.
        """
        node = self._search_node(sequence)
        if node is None:
            return False
        self._size -= 1

        if node.has_children():
            node.update(None)
            return True

        pruned = 0
        while not node.is_root:
            link = node.parent
            if link is None:
                break
            key, parent = link
            parent.delete_child(key)
            pruned += 1
            if parent.is_root or parent.is_end_of_word or parent.has_children():
                break
            node = parent
        logger.debug("Deleted sequence, pruned %d nodes", pruned)
        return True

    def get_path(self, sequence: Iterable[Any]) -> list:
        """Return the nodes visited while walking *sequence*.

        The result has ``len(sequence) + 1`` entries: the root, then the
        node reached after each symbol, terminal or not.  Once the walk
        diverges every remaining entry is ``None``.
        """
        find = self._index.find
        node = self._root
        path = [node]
        for symbol in sequence:
            if node is not None:
                key = find(symbol)
                node = None if key is None else node.child(key)
            path.append(node)
        return path

    def count_nodes(self) -> int:
        """Return the number of nodes, root included."""
        total = 0
        stack = [self._root]
        while stack:
            node = stack.pop()
            total += 1
            stack.extend(child for _, child in node)
        return total

    # ------------------------------------------------------------------ #
    #  Dunder methods                                                      #
    # ------------------------------------------------------------------ #

    def __contains__(self, sequence: Iterable[Any]) -> bool:
        return self._search_node(sequence) is not None

    def __len__(self) -> int:
        """Return the number of stored sequences."""
        return self._size

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._size} sequences)"


class Trie(TrieBase):
    """Sparse trie: children are keyed by the symbols themselves.

    >>> t = Trie()
    >>> t.insert("CACAO")
    True
    >>> t.search("CACAO")
    1
    >>> t.search("CACA") is None
    True
    """

    def __init__(self) -> None:
        super().__init__(SymbolIndex(), TrieNode(is_root=True))

    def _new_node(self, key: Any, parent: TrieNode) -> TrieNode:
        return TrieNode(key, parent)


class CardinalTrie(TrieBase):
    """Dense trie of degree ``k``: every node has ``k`` child slots.

    With an *alphabet*, ``alphabet[i]`` addresses slot ``i``.  Without one,
    symbols are decimal digits (``"3"`` or ``3``) in ``[0, k)``.

    Args:
        k: Number of child slots per node.
        alphabet: Optional ordered symbols; its length must equal *k*.

    Raises:
        ConfigurationError: On a non-positive degree, or an alphabet of the
            wrong length or with duplicate symbols.
    """

    def __init__(self, k: int = 2,
                 alphabet: Optional[Iterable[Any]] = None) -> None:
        if type(k) is not int or k < 1:
            raise ConfigurationError(f"Degree must be a positive int, got {k!r}")
        if alphabet is not None:
            alphabet = list(alphabet)
            if len(alphabet) != k:
                raise ConfigurationError("Alphabet length must match the k")
            index: Any = AlphabetIndex(alphabet)
        else:
            index = DigitIndex(k)
        super().__init__(index, CardinalTrieNode(is_root=True, k=k))
        self._k = k

    def _new_node(self, key: int, parent: CardinalTrieNode) -> CardinalTrieNode:
        return CardinalTrieNode(key, parent)

    @property
    def k(self) -> int:
        return self._k

    @property
    def alphabet(self) -> Optional[tuple]:
        if isinstance(self._index, AlphabetIndex):
            return self._index.alphabet
        return None

    @property
    def char_to_index(self) -> Optional[dict]:
        if isinstance(self._index, AlphabetIndex):
            return self._index.char_to_index
        return None

    @property
    def index_to_char(self) -> Optional[dict]:
        if isinstance(self._index, AlphabetIndex):
            return self._index.index_to_char
        return None

    def symbol_for(self, index: int) -> Any:
        """Return the symbol addressing slot *index*."""
        if not 0 <= index < self._k:
            raise IndexError(f"Slot {index} out of range [0, {self._k})")
        return self._index.symbol_for(index)
