"""
Examples of using Trie and CardinalTrie.
"""

import string

from trie import CardinalTrie, Trie
from trie_errors import InvalidSymbolError


def example_basic_usage():
    """Insert, look up and auto-index."""
    print("=== Basic Usage ===")

    trie = Trie()
    trie.insert("CACAO")
    trie.insert("cocoa", {"origin": "Ghana"})

    print(f"CACAO -> {trie.search('CACAO')}")
    print(f"cocoa -> {trie.search('cocoa')}")
    print(f"'CACA' in trie: {'CACA' in trie}")
    print(f"{trie!r}")
    print()


def example_update_delete():
    """Update in place, then delete with pruning."""
    print("=== Update and Delete ===")

    trie = Trie()
    trie.insert("car")
    trie.insert("cart")
    trie.update("car", 0)
    print(f"car -> {trie.search('car')} (falsy data is kept)")

    trie.delete("car")
    print(f"after delete: car -> {trie.search('car')}, "
          f"cart -> {trie.search('cart')}")

    trie.delete("cart")
    print(f"nodes left: {trie.count_nodes()}")
    print()


def example_cardinal_alphabet():
    """Dense trie over lowercase letters and digits."""
    print("=== CardinalTrie with alphabet ===")

    alphabet = string.ascii_lowercase + "1234567890"
    trie = CardinalTrie(len(alphabet), alphabet)
    for word in ("caca0", "cake", "cat"):
        trie.insert(word)
        print(f"{word} -> {trie.search(word)}")

    try:
        trie.insert("Cat")
    except InvalidSymbolError as exc:
        print(f"rejected: {exc} (position {exc.position})")
    print()


def example_cardinal_digits():
    """Dense binary trie addressed by digit value."""
    print("=== CardinalTrie without alphabet ===")

    trie = CardinalTrie(2)
    for word in ("0", "01", "011"):
        trie.insert(word)

    path = trie.get_path("011")
    flags = [node.is_end_of_word for node in path]
    print(f"terminal flags along 011: {flags}")
    print()


if __name__ == "__main__":
    example_basic_usage()
    example_update_delete()
    example_cardinal_alphabet()
    example_cardinal_digits()
