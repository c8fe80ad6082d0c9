"""
Tier 2 — RUNNING KEY: Bellaso Polyalphabetic Cipher
====================================================
Each character is shifted by the code of the matching key character,
with the key repeated to the length of the message.

Historical note: Giovan Battista Bellaso, 1553 — the cipher later
credited to Vigenère. Unlike Caesar, one plaintext letter maps to many
ciphertext letters, which defeats single-letter frequency counts.

Works over the full 64-symbol band (' ' .. '_'):

    encrypt:  (code(p) + (code(k) - 32)) % 64 + 32
    decrypt:  (code(c) - (code(k) - 32)) % 64 + 32

Python's `%` floors for a positive modulus, so decrypt always lands
back in the band and needs no correction step.

Input is not bounds-checked. Characters outside the band are folded
into it by the modulo and will not round-trip.
"""

import logging

from ..bounds import LOWER_RANGE, RANGE
from ..errors import EmptyKeyError
from ..keys import expand_key

logger = logging.getLogger(__name__)


def _keystream(length: int, key_seed: str) -> list:
    """Per-position offsets (0-63) for a message of `length` characters."""
    key = expand_key(length, key_seed).upper()
    return [ord(k) - LOWER_RANGE for k in key]


def bellaso_encrypt(plaintext: str, key_seed: str) -> str:
    """Uppercase and encrypt `plaintext` with the repeating key."""
    if not key_seed:
        raise EmptyKeyError()
    text = plaintext.upper()
    stream = _keystream(len(text), key_seed)
    logger.debug(f"Bellaso encrypt: {len(text)} chars, key period {len(key_seed)}")
    return "".join(chr((ord(ch) + k) % RANGE + LOWER_RANGE)
                   for ch, k in zip(text, stream))


def bellaso_decrypt(ciphertext: str, key_seed: str) -> str:
    """Inverse of bellaso_encrypt for the same key."""
    if not key_seed:
        raise EmptyKeyError()
    text = ciphertext.upper()
    stream = _keystream(len(text), key_seed)
    logger.debug(f"Bellaso decrypt: {len(text)} chars, key period {len(key_seed)}")
    return "".join(chr((ord(ch) - k) % RANGE + LOWER_RANGE)
                   for ch, k in zip(text, stream))


class BellasoCipher:
    """
    Bellaso cipher bound to one key.

    The key is validated once here; the expanded key is rebuilt on
    every call and never stored.
    """

    def __init__(self, key: str):
        if not isinstance(key, str):
            raise TypeError("Bellaso key must be a str.")
        if not key:
            raise EmptyKeyError()
        self._key = key

    @property
    def key(self) -> str:
        return self._key

    def encrypt(self, plaintext: str) -> str:
        return bellaso_encrypt(plaintext, self._key)

    def decrypt(self, ciphertext: str) -> str:
        return bellaso_decrypt(ciphertext, self._key)

    def __repr__(self):
        return f"BellasoCipher(period={len(self._key)})"
