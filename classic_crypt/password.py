"""
Masked password entry with confirmation
=======================================
The password is typed twice without echo. Mismatches, empty entries and
entries longer than MAX_PASSWORD_LENGTH are re-asked. An optional
`validate` callback lets the caller reject a password for scheme reasons
(Vigenère needs every symbol to be in the alphabet).

The two entries are compared in constant time.

Dependencies: cryptography >= 41.0
"""

import getpass
from typing import Callable, Optional

from cryptography.hazmat.primitives import constant_time

MAX_PASSWORD_LENGTH = 256


def _read(prompt: str) -> str:
    return getpass.getpass(prompt)


def passwords_match(first: str, second: str) -> bool:
    return constant_time.bytes_eq(
        first.encode("utf-8", errors="surrogatepass"),
        second.encode("utf-8", errors="surrogatepass"),
    )


def ask_password(prompt: str = "Enter password: ",
                 confirm_prompt: str = "Confirm password: ",
                 validate: Optional[Callable[[str], None]] = None,
                 max_attempts: Optional[int] = None) -> str:
    """
    Ask until two matching, acceptable entries are given.

    validate     : called with the password; raise ValueError to reject it
    max_attempts : give up with RuntimeError after this many rounds
                   (None = keep asking)
    """
    attempt = 0
    while max_attempts is None or attempt < max_attempts:
        attempt += 1
        password = _read(prompt)
        if not password:
            print("\nPassword must not be empty. Try again.\n")
            continue
        if len(password) > MAX_PASSWORD_LENGTH:
            print(f"\nPassword is longer than {MAX_PASSWORD_LENGTH} symbols. Try again.\n")
            continue
        if validate is not None:
            try:
                validate(password)
            except ValueError as e:
                print(f"\n{e} Try again.\n")
                continue
        confirm = _read(confirm_prompt)
        if not passwords_match(password, confirm):
            print("\nPasswords do not match. Try again.\n")
            continue
        print("\nPassword accepted.\n")
        return password
    raise RuntimeError(f"No valid password after {max_attempts} attempts.")
