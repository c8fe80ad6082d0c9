"""
Tier 1 — FIXED OFFSET: Caesar Cipher
=====================================
Every character is shifted by the same integer offset.

Historical note: Julius Caesar, ~50 BC, shift of three. The simplest
substitution cipher there is, and the usual first lesson in why
substitution alone is not encryption.

Arithmetic (kept for compatibility with existing ciphertexts):

    encrypt:  tmod(code + offset - 65, 59) + 65
    decrypt:  tmod(code - offset - 65, 59) + 65

`tmod` is truncated modulo: the remainder takes the sign of the
dividend. Python's `%` floors, so it is NOT used here; with floor
modulo "HELLO USER" would no longer encrypt to "IFMMP!VTFS".

Known defect: the 65/59 pair is oriented at the 26 uppercase letters
while input is validated against the 64-symbol band (32..95). A large
offset can push output outside the band, and such output no longer
decrypts. Round trips hold while every code + offset stays in 32..95.

Out-of-band input returns "" (fail silent) unless strict=True, in
which case OutOfAlphabetError is raised.
"""

import logging

from ..bounds import is_in_bounds, find_out_of_bounds
from ..errors import OutOfAlphabetError

logger = logging.getLogger(__name__)

ANCHOR  = ord("A")   # 65
MODULUS = 59


def _tmod(dividend: int, divisor: int) -> int:
    """Remainder with the sign of the dividend."""
    r = abs(dividend) % divisor
    return -r if dividend < 0 else r


def _shift(text: str, offset: int, strict: bool) -> str:
    text = text.upper()
    if not is_in_bounds(text):
        invalid = find_out_of_bounds(text)
        if strict:
            raise OutOfAlphabetError(invalid)
        logger.warning(f"Caesar input rejected: {len(invalid)} character(s) "
                       f"outside the band, first at index {invalid[0][0]}")
        return ""
    return "".join(chr(_tmod(ord(ch) + offset - ANCHOR, MODULUS) + ANCHOR)
                   for ch in text)


def caesar_encrypt(plaintext: str, offset: int, strict: bool = False) -> str:
    """Uppercase and shift forward by `offset`. "" if out of bounds."""
    return _shift(plaintext, offset, strict)


def caesar_decrypt(ciphertext: str, offset: int, strict: bool = False) -> str:
    """Inverse of caesar_encrypt for the same offset."""
    return _shift(ciphertext, -offset, strict)


class CaesarCipher:
    """Caesar cipher bound to one offset."""

    ANCHOR  = ANCHOR
    MODULUS = MODULUS

    def __init__(self, offset: int, strict: bool = False):
        if isinstance(offset, bool) or not isinstance(offset, int):
            raise TypeError("Caesar offset must be an int.")
        self._offset = offset
        self._strict = strict

    @property
    def offset(self) -> int:
        return self._offset

    def encrypt(self, plaintext: str) -> str:
        return caesar_encrypt(plaintext, self._offset, self._strict)

    def decrypt(self, ciphertext: str) -> str:
        return caesar_decrypt(ciphertext, self._offset, self._strict)

    def __repr__(self):
        return f"CaesarCipher(offset={self._offset})"
