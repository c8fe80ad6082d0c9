"""
crypto_manager — Classical Substitution Ciphers
================================================
Two pedagogical ciphers over the 64-symbol band ' ' (32) .. '_' (95).
Reversible character substitutions, NOT secure encryption.

Tiers:
    1  FIXED OFFSET — Caesar (constant shift)
    2  RUNNING KEY  — Bellaso (repeating key shift, 1553)

Support:
    bounds  — alphabet band and is_in_bounds()
    keys    — cyclic running-key expansion
    errors  — CipherError, OutOfAlphabetError, EmptyKeyError

License: Apache 2.0
"""

__version__  = "1.0.0"

from .bounds               import LOWER_RANGE, UPPER_RANGE, RANGE, is_in_bounds, find_out_of_bounds
from .keys                 import expand_key
from .errors               import CipherError, OutOfAlphabetError, EmptyKeyError
from .tiers.tier1_caesar   import CaesarCipher, caesar_encrypt, caesar_decrypt
from .tiers.tier2_bellaso  import BellasoCipher, bellaso_encrypt, bellaso_decrypt

__all__ = [
    "LOWER_RANGE",
    "UPPER_RANGE",
    "RANGE",
    "is_in_bounds",
    "find_out_of_bounds",
    "expand_key",
    "CipherError",
    "OutOfAlphabetError",
    "EmptyKeyError",
    "CaesarCipher",
    "caesar_encrypt",
    "caesar_decrypt",
    "BellasoCipher",
    "bellaso_encrypt",
    "bellaso_decrypt",
]
