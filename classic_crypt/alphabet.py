"""
Alphabet: the ordered symbol set every substitution scheme works over
======================================================================
A substitution cipher never looks at a character on its own. It looks at
the character's *position* in an ordered alphabet, moves that position,
and reads back whatever symbol lives at the new place. The order of the
alphabet is therefore key material in its own right: reorder it and every
scheme in this package produces a different ciphertext.

The default alphabet is lowercase Russian (33 letters, including ё),
the space, and the punctuation that shows up in ordinary prose:

    абвгдеёжзийклмнопрстуфхцчшщъыьэюя ,.!?-:"–

Anything else (capitals, digits, newlines, Latin text) is not a member and
is left alone by the position-based schemes.
"""

from typing import Dict, Iterable, Optional

from .errors import UnknownSymbolError


class Alphabet:
    """Immutable ordered symbol table with O(1) position lookup."""

    __slots__ = ("_symbols", "_index")

    def __init__(self, symbols: Iterable[str]):
        symbols = list(symbols)
        for ch in symbols:
            if not isinstance(ch, str) or len(ch) != 1:
                raise ValueError(f"Alphabet symbols must be single characters, got {ch!r}.")
        symbols = "".join(symbols)
        if not symbols:
            raise ValueError("Alphabet must contain at least one symbol.")
        index: Dict[str, int] = {}
        for pos, ch in enumerate(symbols):
            if ch in index:
                raise ValueError(f"Duplicate symbol {ch!r} in alphabet.")
            index[ch] = pos
        self._symbols = symbols
        self._index   = index

    # ── lookups ──────────────────────────────────────────────────────────────

    def index_of(self, symbol: str) -> Optional[int]:
        """Position of `symbol`, or None when it is not a member."""
        return self._index.get(symbol)

    def symbol_at(self, position: int) -> str:
        return self._symbols[position % len(self._symbols)]

    def size(self) -> int:
        return len(self._symbols)

    def contains(self, symbol: str) -> bool:
        return symbol in self._index

    # ── position arithmetic ──────────────────────────────────────────────────

    def shift(self, symbol: str, offset: int) -> str:
        """
        Move `symbol` by `offset` places, wrapping at the end.
        Symbols outside the alphabet come back unchanged.
        """
        pos = self._index.get(symbol)
        if pos is None:
            return symbol
        return self._symbols[(pos + offset) % len(self._symbols)]

    def rotated(self, offset: int) -> str:
        """Left rotation by `offset` (negative rotates right)."""
        k = offset % len(self._symbols)
        return self._symbols[k:] + self._symbols[:k]

    def validate(self, text: str) -> None:
        """Raise UnknownSymbolError on the first symbol that is not a member."""
        for pos, ch in enumerate(text):
            if ch not in self._index:
                raise UnknownSymbolError(ch, pos)

    # ── dunder ───────────────────────────────────────────────────────────────

    def __len__(self) -> int:
        return len(self._symbols)

    def __contains__(self, symbol) -> bool:
        return symbol in self._index

    def __iter__(self):
        return iter(self._symbols)

    def __str__(self) -> str:
        return self._symbols

    def __eq__(self, other) -> bool:
        return isinstance(other, Alphabet) and other._symbols == self._symbols

    def __hash__(self) -> int:
        return hash(self._symbols)

    def __repr__(self):
        return f"Alphabet({self._symbols!r})"


RUSSIAN = Alphabet('абвгдеёжзийклмнопрстуфхцчшщъыьэюя ,.!?-:"–')
