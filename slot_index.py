"""Child-slot resolvers: map a sequence symbol to the key of a child slot.

A trie walks its input one symbol at a time and asks its resolver which
child slot the symbol addresses.  Three strategies exist:

* ``SymbolIndex``   - the symbol is its own key (sparse tries).
* ``AlphabetIndex`` - an ordered alphabet maps symbols onto ``[0, k)``.
* ``DigitIndex``    - the symbol's base-10 value is the slot in ``[0, k)``.

``find`` never raises and returns ``None`` for unresolvable symbols;
``resolve`` raises ``InvalidSymbolError`` instead.
"""

from typing import Any, Iterable, Optional

from trie_errors import ConfigurationError, InvalidSymbolError


def is_hashable(symbol: Any) -> bool:
    """True if *symbol* can key a dict, e.g. ``(1, [2])`` cannot."""
    try:
        hash(symbol)
    except TypeError:
        return False
    return True


class SymbolIndex:
    """Identity mapping over an unbounded alphabet."""

    slot_count: Optional[int] = None

    def find(self, symbol: Any) -> Any:
        if symbol is None or not is_hashable(symbol):
            return None
        return symbol

    def resolve(self, symbol: Any, position: Optional[int] = None) -> Any:
        key = self.find(symbol)
        if key is None:
            raise InvalidSymbolError(symbol, position)
        return key

    def symbol_for(self, key: Any) -> Any:
        return key

    def __repr__(self) -> str:
        return "SymbolIndex()"


class AlphabetIndex:
    """Bijection between the symbols of an alphabet and ``[0, k)``.

    Symbol ``alphabet[i]`` addresses slot ``i``.
    """

    def __init__(self, alphabet: Iterable[Any]) -> None:
        symbols = list(alphabet)
        char_to_index: dict = {}
        for i, symbol in enumerate(symbols):
            if symbol is None or not is_hashable(symbol):
                raise ConfigurationError(
                    f"Alphabet symbol at position {i} is not hashable: {symbol!r}")
            if symbol in char_to_index:
                raise ConfigurationError(
                    f"Alphabet symbol {symbol!r} appears more than once")
            char_to_index[symbol] = i
        self._alphabet = tuple(symbols)
        self._char_to_index = char_to_index
        self.slot_count: Optional[int] = len(symbols)

    @property
    def alphabet(self) -> tuple:
        return self._alphabet

    @property
    def char_to_index(self) -> dict:
        return dict(self._char_to_index)

    @property
    def index_to_char(self) -> dict:
        return dict(enumerate(self._alphabet))

    def find(self, symbol: Any) -> Optional[int]:
        if not is_hashable(symbol):
            return None
        return self._char_to_index.get(symbol)

    def resolve(self, symbol: Any, position: Optional[int] = None) -> int:
        idx = self.find(symbol)
        if idx is None:
            raise InvalidSymbolError(symbol, position)
        return idx

    def symbol_for(self, key: int) -> Any:
        return self._alphabet[key]

    def __len__(self) -> int:
        return len(self._alphabet)

    def __repr__(self) -> str:
        return f"AlphabetIndex({''.join(map(str, self._alphabet))!r})"


class DigitIndex:
    """Slot addressed by the symbol's decimal value.

    ``"7"`` and ``7`` both address slot 7; the value must lie in ``[0, k)``.
    Only ASCII digits are accepted, so ``"٣"`` or ``"+1"`` are rejected.
    """

    def __init__(self, k: int) -> None:
        self.slot_count: Optional[int] = k

    def find(self, symbol: Any) -> Optional[int]:
        if isinstance(symbol, bool):
            return None
        if isinstance(symbol, int):
            value = int(symbol)
        elif isinstance(symbol, str) and symbol.isascii() and symbol.isdigit():
            value = int(symbol, 10)
        else:
            return None
        if 0 <= value < self.slot_count:
            return value
        return None

    def resolve(self, symbol: Any, position: Optional[int] = None) -> int:
        idx = self.find(symbol)
        if idx is None:
            raise InvalidSymbolError(symbol, position)
        return idx

    def symbol_for(self, key: int) -> str:
        return str(key)

    def __repr__(self) -> str:
        return f"DigitIndex({self.slot_count})"
