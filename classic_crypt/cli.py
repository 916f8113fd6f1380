"""
Console front end
=================
Run:  python -m classic_crypt [-i SRC] [-o DST] [-m 1-4] [-a encrypt|decrypt] [-v]

Anything not given on the command line is asked for interactively:

    source file → destination file → scheme menu → password (schemes 3, 4)
    → encrypt/decrypt → process → "repeat?"

Command-line values only pre-fill the first round. An empty file name
ends the program.
"""

import argparse
import logging
import sys
from typing import Optional, Sequence

from . import __version__
from .context import SCHEMES, CipherContext, Direction, build_cipher, requires_key
from .errors import CipherError
from .fileio import process_file
from .password import ask_password
from .schemes.base import key_fingerprint

logger = logging.getLogger(__name__)

LINE = "═" * 60

SCHEME_MENU = (
    "Choose a scheme:\n"
    "1. Caesar cipher\n"
    "2. Modified Caesar (Trithemius cipher)\n"
    "3. Gamma (XOR)\n"
    "4. Vigenère cipher\n"
)

DIRECTION_MENU = (
    "Choose an action:\n"
    "1. Encrypt\n"
    "2. Decrypt\n"
)


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="classic_crypt",
        description="Encrypt or decrypt a text file with a classical cipher.",
    )
    p.add_argument("-i", "--input", help="source text file")
    p.add_argument("-o", "--output", help="destination file")
    p.add_argument("-m", "--method", type=int, choices=sorted(SCHEMES),
                   help="1 Caesar, 2 Trithemius, 3 Gamma, 4 Vigenère")
    p.add_argument("-a", "--action", choices=["encrypt", "decrypt"])
    p.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return p


# ── prompts ──────────────────────────────────────────────────────────────────

def ask_number(menu: str, allowed: Sequence[int]) -> int:
    """Show `menu` until the answer is one of `allowed`."""
    while True:
        print(menu)
        answer = input("Your choice: ").strip()
        try:
            value = int(answer)
        except ValueError:
            value = None
        if value in allowed:
            print()
            return value
        print("\nInvalid choice. Try again.\n")


def ask_path(prompt: str) -> str:
    return input(prompt).strip()


def ask_key(choice: int) -> str:
    # building the cipher runs the scheme's own key checks
    return ask_password(validate=lambda pw: build_cipher(choice, pw))


# ── one round ────────────────────────────────────────────────────────────────

def run_round(src: str, dst: str, choice: int, direction: Direction,
              key: Optional[str] = None) -> bool:
    """Process one file. Returns False if the round failed."""
    try:
        context = CipherContext.from_choice(choice, key)
        count   = process_file(src, dst, context, direction)
    except OSError as e:
        print(f"File error: {e}")
        logger.debug("File error", exc_info=True)
        return False
    except UnicodeDecodeError as e:
        print(f"File error: {src} is not UTF-8 text ({e.reason}).")
        return False
    except CipherError as e:
        print(f"Cipher error: {e}")
        return False

    verb = "Encrypted" if direction is Direction.ENCRYPT else "Decrypted"
    print(f"  ✓  {verb} {count} symbols with {context.scheme} → {dst}")
    if key:
        logger.debug(f"Key fingerprint: {key_fingerprint(key)}")
    return True


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format=" %(message)s")

    print(f"\n{LINE}\n  classic_crypt {__version__}\n{LINE}\n")

    preset = args
    try:
        while True:
            src = preset.input if preset else None
            dst = preset.output if preset else None
            src = src or ask_path("Source file: ")
            dst = dst or ask_path("Destination file: ")
            if not src or not dst:
                print("File selection cancelled.", file=sys.stderr)
                return 0

            choice = (preset.method if preset else None) or ask_number(SCHEME_MENU, sorted(SCHEMES))
            key    = ask_key(choice) if requires_key(choice) else None

            action = preset.action if preset else None
            direction = (Direction.parse(action) if action
                         else Direction(ask_number(DIRECTION_MENU, [1, 2])))

            run_round(src, dst, choice, direction, key)
            preset = None

            again = ask_number("Repeat encryption/decryption? (1 - yes, 0 - no)", [0, 1])
            if again == 0:
                return 0
    except (KeyboardInterrupt, EOFError):
        print("\nCancelled.", file=sys.stderr)
        return 1
