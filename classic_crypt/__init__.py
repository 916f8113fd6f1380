"""
classic_crypt
=============
Four classical substitution schemes over a Russian alphabet, with a
console front end that encrypts or decrypts a whole text file.

Schemes (menu numbers):
    1  CAESAR      Fixed shift of three places
    2  TRITHEMIUS  Shift grows with the text position (rotating alphabet)
    3  GAMMA       XOR with a repeating password (self-inverse)
    4  VIGENÈRE    Password-driven additive shift, +1 offset

These are teaching ciphers. None of them is secure.

License: Apache 2.0
"""

__version__ = "1.0.0"

from .alphabet                   import Alphabet, RUSSIAN
from .errors                     import CipherError, EmptyKeyError, UnknownSymbolError
from .schemes.base               import SubstitutionCipher, KeyedCipher, key_fingerprint
from .schemes.scheme1_caesar     import CaesarCipher
from .schemes.scheme2_trithemius import TrithemiusCipher
from .schemes.scheme3_gamma      import GammaCipher
from .schemes.scheme4_vigenere   import VigenereCipher
from .context                    import CipherContext, Direction, SCHEMES, build_cipher
from .fileio                     import read_text, write_text, process_file

__all__ = [
    "Alphabet",
    "RUSSIAN",
    "CipherError",
    "EmptyKeyError",
    "UnknownSymbolError",
    "SubstitutionCipher",
    "KeyedCipher",
    "key_fingerprint",
    "CaesarCipher",
    "TrithemiusCipher",
    "GammaCipher",
    "VigenereCipher",
    "CipherContext",
    "Direction",
    "SCHEMES",
    "build_cipher",
    "read_text",
    "write_text",
    "process_file",
]
