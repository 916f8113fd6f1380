"""
CipherContext: run whichever scheme was picked
===============================================
The caller chooses a scheme once, by menu number, and from then on only
talks to the context. The context is built with its cipher, so there is
no "nothing selected yet" state to trip over.

Menu numbers (kept from the console program):
    1  Caesar
    2  Trithemius
    3  Gamma      (needs a key)
    4  Vigenère   (needs a key)
"""

import enum
import logging
from typing import Dict, Optional, Type

from .alphabet import Alphabet, RUSSIAN
from .errors import EmptyKeyError
from .schemes.base import SubstitutionCipher
from .schemes.scheme1_caesar import CaesarCipher
from .schemes.scheme2_trithemius import TrithemiusCipher
from .schemes.scheme3_gamma import GammaCipher
from .schemes.scheme4_vigenere import VigenereCipher

logger = logging.getLogger(__name__)

SCHEMES: Dict[int, Type[SubstitutionCipher]] = {
    1: CaesarCipher,
    2: TrithemiusCipher,
    3: GammaCipher,
    4: VigenereCipher,
}


class Direction(enum.IntEnum):
    ENCRYPT = 1
    DECRYPT = 2

    @classmethod
    def parse(cls, value) -> "Direction":
        """Accept 1/2, "1"/"2" or "encrypt"/"decrypt"."""
        if isinstance(value, cls):
            return value
        text = str(value).strip().lower()
        if text in ("1", "encrypt"):
            return cls.ENCRYPT
        if text in ("2", "decrypt"):
            return cls.DECRYPT
        raise ValueError(f"Unknown direction {value!r}; expected encrypt or decrypt.")


def requires_key(choice: int) -> bool:
    return _scheme_class(choice).requires_key


def build_cipher(choice: int, key: Optional[str] = None,
                 alphabet: Alphabet = RUSSIAN) -> SubstitutionCipher:
    """Construct the scheme behind menu number `choice`."""
    cls = _scheme_class(choice)
    if cls.requires_key:
        if not key:
            raise EmptyKeyError(cls.name)
        return cls(key, alphabet)
    return cls(alphabet)


def _scheme_class(choice: int) -> Type[SubstitutionCipher]:
    try:
        return SCHEMES[int(choice)]
    except (KeyError, TypeError, ValueError):
        raise ValueError(
            f"Unknown scheme {choice!r}; choose one of {sorted(SCHEMES)}."
        ) from None


class CipherContext:
    """Holds one cipher and forwards encrypt/decrypt to it."""

    def __init__(self, cipher: SubstitutionCipher):
        if not isinstance(cipher, SubstitutionCipher):
            raise TypeError(f"Expected a SubstitutionCipher, got {type(cipher).__name__}.")
        self._cipher = cipher

    @classmethod
    def from_choice(cls, choice: int, key: Optional[str] = None,
                    alphabet: Alphabet = RUSSIAN) -> "CipherContext":
        return cls(build_cipher(choice, key, alphabet))

    @property
    def scheme(self) -> str:
        return self._cipher.name

    def encrypt(self, text: str) -> str:
        return self._cipher.encrypt(text)

    def decrypt(self, text: str) -> str:
        return self._cipher.decrypt(text)

    def run(self, text: str, direction) -> str:
        direction = Direction.parse(direction)
        logger.info(f"{self.scheme}: {direction.name.lower()} {len(text)} symbols")
        if direction is Direction.ENCRYPT:
            return self.encrypt(text)
        return self.decrypt(text)

    def __repr__(self):
        return f"CipherContext({self._cipher!r})"
