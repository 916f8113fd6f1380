"""
Text file adapter
=================
Reads a whole file into a str and writes a str back, both as UTF-8.

Two settings keep encrypt/decrypt round trips byte-stable:
  newline=""            no CRLF translation on either side, so a Gamma
                        ciphertext containing "\\r" survives a rewrite
  errors=surrogatepass  lone surrogate code points (possible XOR output)
                        are encoded instead of rejected

A missing or unreadable file raises; it is never read as empty text.
"""

import logging
import os
from typing import Union

from .context import CipherContext

logger = logging.getLogger(__name__)

ENCODING = "utf-8"
ERRORS   = "surrogatepass"

PathLike = Union[str, "os.PathLike[str]"]


def read_text(path: PathLike) -> str:
    with open(path, "r", encoding=ENCODING, errors=ERRORS, newline="") as fh:
        content = fh.read()
    logger.debug(f"Read {len(content)} symbols from {os.fspath(path)}")
    return content


def write_text(path: PathLike, content: str) -> None:
    with open(path, "w", encoding=ENCODING, errors=ERRORS, newline="") as fh:
        fh.write(content)
    logger.debug(f"Wrote {len(content)} symbols to {os.fspath(path)}")


def process_file(src: PathLike, dst: PathLike,
                 context: CipherContext, direction) -> int:
    """
    Read `src`, run it through `context` in `direction`, write `dst`.
    Returns the number of symbols processed.
    """
    text   = read_text(src)
    result = context.run(text, direction)
    write_text(dst, result)
    return len(result)
