"""
crypto_manager — Live Demo: Caesar + Bellaso
=============================================
Run:  python examples/demo_ciphers.py

Encrypts and decrypts one message with each tier and shows the
fail-silent / strict behavior on input outside the alphabet band.
"""

import sys, os, logging
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from crypto_manager import (
    LOWER_RANGE, UPPER_RANGE, RANGE,
    is_in_bounds, expand_key,
    CaesarCipher, BellasoCipher, OutOfAlphabetError,
)

LINE = "═" * 70
MSG  = "THIS TEST WILL BE SUCCESSFUL"

def header(tier, name):
    print(f"\n{LINE}")
    print(f"  Tier {tier} — {name}")
    print(LINE)

def ok(label, value=""):
    print(f"  ✓  {label}{f': {value}' if value else ''}")


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format=' %(levelname)s %(name)s: %(message)s')

    print(f"\n{LINE}")
    print("  crypto_manager — Classical Cipher Demo")
    print(LINE)
    print(f"  Message:  {MSG}")
    print(f"  Alphabet: {chr(LOWER_RANGE)!r} .. {chr(UPPER_RANGE)!r} ({RANGE} symbols)")
    ok("In bounds", str(is_in_bounds(MSG)))

    # ── TIER 1 ───────────────────────────────────────────────────────────────
    header(1, "FIXED OFFSET — Caesar")
    c  = CaesarCipher(3)
    ct = c.encrypt(MSG)
    ok("Encrypted", ct)
    ok("Decrypted", c.decrypt(ct))
    ok("Out of band", repr(c.encrypt("lower{case}")) + "  (fail silent)")
    try:
        CaesarCipher(3, strict=True).encrypt("lower{case}")
    except OutOfAlphabetError as e:
        ok("Strict mode", str(e))

    # ── TIER 2 ───────────────────────────────────────────────────────────────
    header(2, "RUNNING KEY — Bellaso")
    b  = BellasoCipher("CMSC203")
    ok("Expanded key", expand_key(len(MSG), b.key))
    ct = b.encrypt(MSG)
    ok("Encrypted", ct)
    ok("Decrypted", b.decrypt(ct))

    print(f"\n{LINE}\n")
