"""
Scheme 1: Caesar Cipher
=======================
Every alphabet symbol moves a fixed three places forward; decryption moves
it three places back. Symbols outside the alphabet are copied unchanged.

Historical note: Suetonius records Julius Caesar shifting letters by three
in his private correspondence. With a single fixed shift and no key there
is nothing to keep secret except the method itself.
"""

from .base import SubstitutionCipher


class CaesarCipher(SubstitutionCipher):
    """Fixed shift of SHIFT positions over the alphabet."""

    name  = "Caesar"
    SHIFT = 3

    def encrypt(self, text: str) -> str:
        return self._shift(text, self.SHIFT)

    def decrypt(self, text: str) -> str:
        return self._shift(text, -self.SHIFT)

    def _shift(self, text: str, offset: int) -> str:
        shift = self._alphabet.shift
        return "".join(shift(ch, offset) for ch in text)
