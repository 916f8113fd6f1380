"""
Scheme 3: Gamma (XOR stream) Cipher
===================================
"Gamming" overlays the text with a key stream (the gamma) symbol by
symbol. Here the stream is the password repeated end to end and the
overlay is bitwise XOR on Unicode code points:

    out[i] = text[i] XOR key[i mod len(key)]

XOR is its own inverse, so encryption and decryption are one operation.
Unlike the other schemes this one ignores the alphabet: every symbol is
transformed, including newlines, digits and Latin letters. The output can
therefore contain control characters; write it with fileio, which keeps
such text byte-stable.

Key symbols must lie in the Basic Multilingual Plane (U+0000..U+FFFF).
XOR with a 16-bit value only touches the low 16 bits of a code point, so
the result always stays inside the Unicode range whatever the text is.

Not modern-secure: a repeating key stream leaks under known plaintext.
"""

from ..alphabet import Alphabet, RUSSIAN
from ..errors import CipherError
from .base import KeyedCipher

MAX_KEY_CODE_POINT = 0xFFFF


class GammaCipher(KeyedCipher):
    """Self-inverse XOR of each code point with the cycling key."""

    name = "Gamma"

    def __init__(self, key: str, alphabet: Alphabet = RUSSIAN):
        super().__init__(key, alphabet)
        for pos, ch in enumerate(key):
            if ord(ch) > MAX_KEY_CODE_POINT:
                raise CipherError(
                    f"Gamma key symbol {ch!r} at position {pos} is outside "
                    f"the Basic Multilingual Plane."
                )

    def encrypt(self, text: str) -> str:
        return self.process(text)

    def decrypt(self, text: str) -> str:
        return self.process(text)

    def process(self, text: str) -> str:
        key = self._key
        n   = len(key)
        out = []
        for i, ch in enumerate(text):
            out.append(chr(ord(ch) ^ ord(key[i % n])))
        return "".join(out)
