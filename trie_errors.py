"""Exceptions raised by the trie engine."""

from typing import Any, Optional


class TrieError(Exception):
    """Base class for all trie errors."""


class ConfigurationError(TrieError, ValueError):
    """A node or trie was constructed with invalid arguments."""


class InvalidSymbolError(TrieError, ValueError):
    """A symbol cannot be mapped to a child slot.

    Attributes:
        symbol: The offending symbol.
        position: Offset of the symbol in the inserted sequence, if known.
    """

    def __init__(self, symbol: Any, position: Optional[int] = None) -> None:
        super().__init__(f"Invalid character in word: {symbol}")
        self.symbol = symbol
        self.position = position
