"""
GS1 character sets and constants for the GMN check character pair.

CSET82 is the GS1 AI encodable character set 82; a character's value is its
position in the string. CSET32 is the subset used for the check character
pair (no 0, 1, I or O).
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, Optional, Tuple


CSET82 = (
    "!\"%&'()*+,-./0123456789:;<=>?ABCDEFGHIJKLMNOPQRSTUVWXYZ"
    "_abcdefghijklmnopqrstuvwxyz"
)

CSET32 = "23456789ABCDEFGHJKLMNPQRSTUVWXYZ"

NUMERIC = frozenset("0123456789")

CSET82_VALUES: Mapping[str, int] = MappingProxyType(
    {char: value for value, char in enumerate(CSET82)}
)

CSET32_VALUES: Mapping[str, int] = MappingProxyType(
    {char: value for value, char in enumerate(CSET32)}
)

# Descending primes, right-aligned against the data characters
WEIGHTS: Tuple[int, ...] = (
    83, 79, 73, 71, 67, 61, 59, 53, 47, 43, 41, 37,
    31, 29, 23, 19, 17, 13, 11, 7, 5, 3, 2,
)

# Largest prime below 32 * 32
MODULUS = 1021

CHECK_PAIR_LENGTH = 2

GCP_MIN_LENGTH = 5
GCP_MAX_LENGTH = 12

# Leading characters that must be digits in any GMN
NUMERIC_PREFIX_LENGTH = GCP_MIN_LENGTH

MIN_PARTIAL_LENGTH = NUMERIC_PREFIX_LENGTH + 1
MAX_PARTIAL_LENGTH = len(WEIGHTS)
MIN_COMPLETE_LENGTH = MIN_PARTIAL_LENGTH + CHECK_PAIR_LENGTH
MAX_COMPLETE_LENGTH = MAX_PARTIAL_LENGTH + CHECK_PAIR_LENGTH


def cset82_value(char: str) -> Optional[int]:
    """Return the CSET82 value of ``char``, or None if it is not in the set."""
    return CSET82_VALUES.get(char)


def cset32_value(char: str) -> Optional[int]:
    """Return the CSET32 value of ``char``, or None if it is not in the set."""
    return CSET32_VALUES.get(char)
