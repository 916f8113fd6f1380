"""
Scheme 2: Trithemius Cipher (progressive Caesar)
================================================
Johannes Trithemius, Polygraphia (1508). The tabula recta is read one row
further down for every letter, so the shift applied to the symbol at text
position i is i itself:

    position 0 → shift 0
    position 1 → shift 1
    ...
    position L → shift 0 again (rotation wraps modulo the alphabet size)

Encryption looks the symbol up in the base alphabet and reads the same
slot from the alphabet rotated left by i; decryption reads it from the
alphabet rotated right by i. Symbols outside the alphabet pass through.
"""

from .base import SubstitutionCipher


class TrithemiusCipher(SubstitutionCipher):
    """Position-dependent rotating alphabet."""

    name = "Trithemius"

    def encrypt(self, text: str) -> str:
        return self._rotate(text, forward=True)

    def decrypt(self, text: str) -> str:
        return self._rotate(text, forward=False)

    def _rotate(self, text: str, forward: bool) -> str:
        alpha = self._alphabet
        size  = len(alpha)
        result = []
        for i, ch in enumerate(text):
            pos = alpha.index_of(ch)
            if pos is None:
                result.append(ch)
                continue
            step = i % size
            result.append(alpha.symbol_at(pos + step if forward else pos - step))
        return "".join(result)

    def table_row(self, position: int, forward: bool = True) -> str:
        """The rotated alphabet used for the symbol at `position`."""
        step = position % len(self._alphabet)
        return self._alphabet.rotated(step if forward else -step)
