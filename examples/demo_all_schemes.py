"""
classic_crypt — Live Demo: All Four Schemes
===========================================
Run:  python examples/demo_all_schemes.py

Encrypts and decrypts one sentence with every scheme and prints the
ciphertext, the round-trip result and the timing for each.
"""

import sys, os, time
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from classic_crypt.alphabet     import RUSSIAN
from classic_crypt.context      import SCHEMES, CipherContext, Direction
from classic_crypt.schemes.base import key_fingerprint

LINE = "═" * 70
MSG  = "в чащах юга жил бы цитрус? да, но фальшивый экземпляр!"
KEY  = "пароль"

def header(number, name):
    print(f"\n{LINE}")
    print(f"  Scheme {number} — {name}")
    print(LINE)

def ok(label, value=""):
    print(f"  ✓  {label}{f': {value!r}' if value else ''}")

print(f"\n{LINE}")
print("  classic_crypt — Four-Scheme Demo")
print(LINE)
print(f"  Alphabet ({len(RUSSIAN)} symbols): {RUSSIAN}")
print(f"  Message: {MSG}")
print(f"  Key:     {key_fingerprint(KEY)} (fingerprint)")

for number, cls in SCHEMES.items():
    header(number, cls.name)
    ctx = CipherContext.from_choice(number, KEY)
    t0  = time.perf_counter()
    ct  = ctx.run(MSG, Direction.ENCRYPT)
    pt  = ctx.run(ct, Direction.DECRYPT)
    elapsed = time.perf_counter() - t0
    ok("Encrypted",  ct)
    ok("Decrypted",  pt)
    ok("Round-trip", f"{elapsed*1000:.3f} ms, match={pt == MSG}")

print(f"\n{LINE}")
print("  ALL SCHEMES COMPLETE")
print(LINE + "\n")
