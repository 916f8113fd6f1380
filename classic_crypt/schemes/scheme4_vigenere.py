"""
Scheme 4: Vigenère Polyalphabetic Cipher
========================================
Each text symbol is moved by the position of the key symbol beneath it,
plus one:

    encrypt:  out = (t + k + 1) mod L
    decrypt:  out = (t - k - 1) mod L

The extra +1 means a key made of the first alphabet letter still shifts
by one, so no key symbol is a no-op. The key runs in lock-step with the
text: one key symbol is consumed per text symbol, wrapping at the key
length.

Symbols outside the alphabet are copied unchanged but still consume a
key symbol, so the round trip holds for any text. Key symbols must all be
alphabet members; that is checked once, at construction.

Historical note: Blaise de Vigenère, 1586 (after Bellaso, 1553).
"le chiffre indéchiffrable" until Kasiski broke it in 1863.
"""

from ..alphabet import Alphabet, RUSSIAN
from .base import KeyedCipher


class VigenereCipher(KeyedCipher):
    """Keyed additive substitution with an offset of OFFSET."""

    name   = "Vigenère"
    OFFSET = 1

    def __init__(self, key: str, alphabet: Alphabet = RUSSIAN):
        super().__init__(key, alphabet)
        alphabet.validate(key)
        self._shifts = [alphabet.index_of(ch) + self.OFFSET for ch in key]

    def encrypt(self, text: str) -> str:
        return self._process(text, sign=1)

    def decrypt(self, text: str) -> str:
        return self._process(text, sign=-1)

    def _process(self, text: str, sign: int) -> str:
        shift  = self._alphabet.shift
        shifts = self._shifts
        n      = len(shifts)
        return "".join(shift(ch, sign * shifts[i % n]) for i, ch in enumerate(text))
