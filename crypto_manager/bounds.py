"""
Alphabet band shared by both ciphers.

Valid characters run from LOWER_RANGE (' ', code 32) to UPPER_RANGE
('_', code 95) inclusive: 64 symbols covering space, punctuation,
digits and the uppercase letters.
"""

from typing import List, Tuple

LOWER_RANGE = ord(" ")
UPPER_RANGE = ord("_")
RANGE       = UPPER_RANGE - LOWER_RANGE + 1   # 64


def is_in_bounds(text: str) -> bool:
    """True if every character of `text` lies in the band. Empty text is in bounds."""
    return all(LOWER_RANGE <= ord(ch) <= UPPER_RANGE for ch in text)


def find_out_of_bounds(text: str) -> List[Tuple[int, str]]:
    """(index, char) for each character outside the band."""
    return [(i, ch) for i, ch in enumerate(text)
            if not LOWER_RANGE <= ord(ch) <= UPPER_RANGE]
