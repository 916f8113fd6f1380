"""
Shared contract for the four substitution schemes
==================================================
Every scheme is a length-preserving, position-indexed transform: symbol i
of the output depends only on symbol i of the input, on i itself, and on
the scheme's key (if any). The alphabet is injected at construction and
never mutated, so one Alphabet instance can be shared by any number of
cipher objects.

Dependencies: cryptography >= 41.0 (key fingerprints for logging)
"""

import logging
from abc import ABC, abstractmethod

from cryptography.hazmat.primitives import hashes

from ..alphabet import Alphabet, RUSSIAN
from ..errors import EmptyKeyError

logger = logging.getLogger(__name__)


class SubstitutionCipher(ABC):
    """Base class: one alphabet, one encrypt, one decrypt."""

    name         = "substitution"
    requires_key = False

    def __init__(self, alphabet: Alphabet = RUSSIAN):
        self._alphabet = alphabet

    @property
    def alphabet(self) -> Alphabet:
        return self._alphabet

    @abstractmethod
    def encrypt(self, text: str) -> str:
        ...

    @abstractmethod
    def decrypt(self, text: str) -> str:
        ...

    def __repr__(self):
        return f"{type(self).__name__}(L={len(self._alphabet)})"


class KeyedCipher(SubstitutionCipher):
    """A scheme that cycles a non-empty key along the text."""

    requires_key = True

    def __init__(self, key: str, alphabet: Alphabet = RUSSIAN):
        super().__init__(alphabet)
        if not key:
            raise EmptyKeyError(self.name)
        self._key = key
        logger.debug(f"{self.name}: key accepted, "
                     f"len={len(key)} fingerprint={key_fingerprint(key)}")

    def __repr__(self):
        return (f"{type(self).__name__}(L={len(self._alphabet)}, "
                f"key={key_fingerprint(self._key)})")


def key_fingerprint(key: str) -> str:
    """
    Short SHA-256 identifier of a key, safe to print or log.
    Two runs with the same password show the same fingerprint.
    """
    digest = hashes.Hash(hashes.SHA256())
    digest.update(key.encode("utf-8", errors="surrogatepass"))
    return digest.finalize().hex()[:16]
