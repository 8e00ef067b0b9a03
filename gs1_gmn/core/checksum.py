"""
GMN check character pair calculation.

Algorithm (GS1 General Specifications, 7.9.5):
1. Right-align the data characters against the descending prime weights
2. Sum the products of each CSET82 character value and its weight
3. Reduce the sum modulo 1021
4. Split the 10-bit result over two CSET32 characters (high five bits first)

Inputs are expected to have passed format validation already.
"""

from __future__ import annotations

from ..validators.charsets import (
    CHECK_PAIR_LENGTH,
    CSET32,
    CSET82_VALUES,
    MODULUS,
    WEIGHTS,
)


def weighted_sum(part: str) -> int:
    """Modulo 1021 sum of character values multiplied by their weights."""
    offset = len(WEIGHTS) - len(part)
    total = 0
    for i, char in enumerate(part):
        total += CSET82_VALUES[char] * WEIGHTS[offset + i]
    return total % MODULUS


def compute_check_pair(part: str) -> str:
    """
    Calculate the check character pair for a validated partial GMN.

    Args:
        part: Partial GMN (6-23 characters)

    Returns:
        Two CSET32 characters
    """
    total = weighted_sum(part)
    return CSET32[total // 32] + CSET32[total % 32]


def verify_check_pair(gmn: str) -> bool:
    """Recalculate the check pair of a validated complete GMN and compare."""
    part = gmn[:-CHECK_PAIR_LENGTH]
    supplied = gmn[-CHECK_PAIR_LENGTH:]
    return compute_check_pair(part) == supplied
