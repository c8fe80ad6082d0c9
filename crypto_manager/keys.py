"""
Running-key expansion.

The Bellaso cipher needs one key character per message character.
A short seed is stretched by cyclic repetition, so position p of the
expanded key is seed[p % len(seed)]. A seed longer than the message
is cut down by the same rule.
"""

import logging

from .errors import EmptyKeyError

logger = logging.getLogger(__name__)


def expand_key(text_length: int, key_seed: str) -> str:
    """
    Stretch `key_seed` to exactly `text_length` characters.

    Raises EmptyKeyError for an empty seed and ValueError for a
    negative length.
    """
    if not key_seed:
        raise EmptyKeyError()
    if text_length < 0:
        raise ValueError("text_length must be non-negative.")
    if len(key_seed) == text_length:
        return key_seed

    period = len(key_seed)
    expanded = "".join(key_seed[p % period] for p in range(text_length))
    logger.debug(f"Key expanded: seed={period} chars -> {text_length} chars")
    return expanded
