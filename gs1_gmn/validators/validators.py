"""
GMN Format Validation

Implements the format checks that guard the GMN check character calculation:
- Overall length for partial (6-23) and complete (8-25) GMNs
- First five characters numeric (start of the GS1 Company Prefix)
- Data characters in CSET82, check characters in CSET32
- GCP / model reference / check pair component rules for split input

Based on the GS1 General Specifications, section 7.9.5 (GMN check characters).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from ..errors import ErrorKind, GMNFormatError
from .charsets import (
    CHECK_PAIR_LENGTH,
    GCP_MAX_LENGTH,
    GCP_MIN_LENGTH,
    MAX_COMPLETE_LENGTH,
    MAX_PARTIAL_LENGTH,
    MIN_COMPLETE_LENGTH,
    MIN_PARTIAL_LENGTH,
    NUMERIC,
    NUMERIC_PREFIX_LENGTH,
    cset32_value,
    cset82_value,
)


logger = logging.getLogger(__name__)


@dataclass
class ValidationResult:
    """Result of a non-raising validation operation."""
    valid: bool
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)
    meta: Dict[str, Any] = field(default_factory=dict)


def good_character_positions(value: str, complete: bool) -> List[bool]:
    """
    Indicate whether each character of a GMN belongs to the character set
    required at its position.

    Args:
        value: A partial or complete GMN
        complete: True if the GMN includes its check character pair

    Returns:
        One boolean per input character
    """
    out = []
    check_start = len(value) - CHECK_PAIR_LENGTH
    for i, char in enumerate(value):
        # GMN begins with a GS1 Company Prefix of at least five digits
        if i < NUMERIC_PREFIX_LENGTH:
            out.append(char in NUMERIC)
        elif not complete or i < check_start:
            out.append(cset82_value(char) is not None)
        else:
            out.append(cset32_value(char) is not None)
    return out


def _force_gcp_positions(out: List[bool], gcp: str) -> List[bool]:
    """The GS1 Company Prefix is numeric only, and all bad if mis-sized."""
    gcp_length_ok = GCP_MIN_LENGTH <= len(gcp) <= GCP_MAX_LENGTH
    for i, char in enumerate(gcp):
        out[i] = gcp_length_ok and char in NUMERIC
    return out


def good_character_positions_gcp_model(gcp: str, model: str) -> List[bool]:
    """
    Per-character validity of a partial GMN given as GCP and model reference.

    Every GCP position must be a digit; if the GCP length is outside 5-12
    all GCP positions are reported bad.
    """
    return _force_gcp_positions(
        good_character_positions(gcp + model, False), gcp
    )


def good_character_positions_gcp_model_checks(
    gcp: str,
    model: str,
    checks: str
) -> List[bool]:
    """
    Per-character validity of a complete GMN given as GCP, model reference
    and check character pair.
    """
    return _force_gcp_positions(
        good_character_positions(gcp + model + checks, True), gcp
    )


def _reject(kind: ErrorKind, message: str, position: Optional[int] = None) -> GMNFormatError:
    logger.debug("GMN rejected [%s] %s", kind.value, message)
    return GMNFormatError(kind, message, position)


def validate_format(value: str, complete: bool) -> None:
    """
    Check the length and character sets of a partial or complete GMN.

    Args:
        value: The GMN string
        complete: True if ``value`` ends with a check character pair

    Raises:
        GMNFormatError: on the first problem found
    """
    max_length = MAX_COMPLETE_LENGTH if complete else MAX_PARTIAL_LENGTH
    min_length = MIN_COMPLETE_LENGTH if complete else MIN_PARTIAL_LENGTH
    suffix = "." if complete else " excluding the check character pair."

    if len(value) < min_length:
        raise _reject(
            ErrorKind.TOO_SHORT,
            f"The input is too short. It should be at least {min_length} characters long{suffix}",
        )
    if len(value) > max_length:
        raise _reject(
            ErrorKind.TOO_LONG,
            f"The input is too long. It should be {max_length} characters maximum{suffix}",
        )

    good = good_character_positions(value, complete)
    check_start = len(value) - CHECK_PAIR_LENGTH
    for i, ok in enumerate(good):
        if ok:
            continue
        if i < NUMERIC_PREFIX_LENGTH:
            raise _reject(
                ErrorKind.PREFIX_NOT_NUMERIC,
                "GMN starts with the GS1 Company Prefix. "
                "At least the first five characters must be digits.",
                i,
            )
        if not complete or i < check_start:
            raise _reject(
                ErrorKind.INVALID_DATA_CHARACTER,
                f"Invalid character at position {i + 1}: {value[i]}",
                i,
            )
        raise _reject(
            ErrorKind.INVALID_CHECK_CHARACTER,
            f"Invalid check character at position {i + 1}: {value[i]}",
            i,
        )


def validate_format_gcp_model(
    gcp: str,
    model: str,
    checks: Optional[str] = None
) -> None:
    """
    Check a GMN supplied as GCP, model reference and optional check pair.

    The component rules are checked first, then the concatenation is
    checked as a whole (complete when ``checks`` is given).

    Raises:
        GMNFormatError: on the first problem found
    """
    if len(gcp) < GCP_MIN_LENGTH:
        raise _reject(
            ErrorKind.TOO_SHORT,
            "The GS1 Company Prefix is too short. "
            f"It should be at least {GCP_MIN_LENGTH} digits long.",
        )
    if len(gcp) > GCP_MAX_LENGTH:
        raise _reject(
            ErrorKind.TOO_LONG,
            "The GS1 Company Prefix is too long. "
            f"It should not be more than {GCP_MAX_LENGTH} digits long.",
        )

    if not model:
        raise _reject(
            ErrorKind.MODEL_EMPTY,
            "The model reference must contain at least one character.",
        )

    for i, char in enumerate(gcp):
        if char not in NUMERIC:
            raise _reject(
                ErrorKind.PREFIX_NOT_NUMERIC,
                "The GS1 Company Prefix must only contain digits.",
                i,
            )

    if checks is not None and len(checks) != CHECK_PAIR_LENGTH:
        raise _reject(
            ErrorKind.CHECKS_LENGTH_INVALID,
            f"The check must be {CHECK_PAIR_LENGTH} characters long.",
        )

    if checks is None:
        validate_format(gcp + model, False)
    else:
        validate_format(gcp + model + checks, True)
