"""
Errors raised by the cipher core.

All of them are ValueError subclasses so callers that only care about
"bad input" can keep catching ValueError.
"""


class CipherError(ValueError):
    """Base class for cipher construction and processing errors."""


class EmptyKeyError(CipherError):
    def __init__(self, scheme: str):
        super().__init__(f"{scheme} key must not be empty.")
        self.scheme = scheme


class UnknownSymbolError(CipherError):
    """A symbol that must belong to the alphabet does not."""

    def __init__(self, symbol: str, position: int):
        super().__init__(
            f"Symbol {symbol!r} at position {position} is not in the alphabet."
        )
        self.symbol   = symbol
        self.position = position
