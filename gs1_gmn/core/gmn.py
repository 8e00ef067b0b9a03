"""
GS1 Global Model Number (GMN) check character pair API.

A GMN is a GS1 Company Prefix (at least five digits) followed by a model
reference drawn from CSET82, and is completed by a pair of CSET32 check
characters:

    1987654 Ad4X4bL5ttr2310c 2K
    ^gcp    ^model           ^checks

Every function validates its input first and raises GMNFormatError when the
input is malformed. An incorrect check pair is not an error: the verify
functions return False.
"""

from __future__ import annotations

import logging

from ..errors import GMNFormatError
from ..validators.charsets import CHECK_PAIR_LENGTH
from ..validators.validators import (
    ValidationResult,
    validate_format,
    validate_format_gcp_model,
)
from .checksum import compute_check_pair, verify_check_pair


logger = logging.getLogger(__name__)


def check_characters(part: str) -> str:
    """
    Calculate the check character pair for a partial GMN.

    Args:
        part: A partial GMN (no check characters)

    Returns:
        The two check characters

    Raises:
        GMNFormatError: if the format of ``part`` is invalid
    """
    validate_format(part, False)
    checks = compute_check_pair(part)
    logger.debug("Check characters for %r: %s", part, checks)
    return checks


def add_check_characters(part: str) -> str:
    """Complete a partial GMN by appending its check character pair."""
    return part + check_characters(part)


def verify_check_characters(gmn: str) -> bool:
    """
    Verify that a complete GMN carries the correct check character pair.

    Returns:
        True if the check pair matches, otherwise False

    Raises:
        GMNFormatError: if the format of ``gmn`` is invalid
    """
    validate_format(gmn, True)
    return verify_check_pair(gmn)


def check_characters_gcp_model(gcp: str, model: str) -> str:
    """Check character pair for a partial GMN given as GCP and model reference."""
    validate_format_gcp_model(gcp, model)
    return check_characters(gcp + model)


def add_check_characters_gcp_model(gcp: str, model: str) -> str:
    """Complete GMN for a GCP and model reference."""
    validate_format_gcp_model(gcp, model)
    return add_check_characters(gcp + model)


def verify_check_characters_gcp_model_checks(gcp: str, model: str, checks: str) -> bool:
    """Verify a GMN given as GCP, model reference and check character pair."""
    validate_format_gcp_model(gcp, model, checks)
    return verify_check_characters(gcp + model + checks)


def validate_gmn(value: str, complete: bool = True) -> ValidationResult:
    """
    Validate a GMN without raising.

    For a complete GMN the check pair is verified; for a partial GMN the
    check pair is calculated.

    Args:
        value: The GMN string
        complete: True if ``value`` includes its check character pair

    Returns:
        ValidationResult with error details or check characters in meta
    """
    result = ValidationResult(valid=True)
    result.meta['complete'] = complete

    try:
        validate_format(value, complete)
    except GMNFormatError as e:
        result.valid = False
        result.errors.append(e.message)
        result.meta['error_kind'] = e.kind.value
        result.meta['error_position'] = e.position
        return result

    if not complete:
        result.meta['check_characters'] = compute_check_pair(value)
        return result

    calculated = compute_check_pair(value[:-CHECK_PAIR_LENGTH])
    supplied = value[-CHECK_PAIR_LENGTH:]
    result.meta['calculated_check_characters'] = calculated
    result.meta['provided_check_characters'] = supplied
    result.meta['check_characters_valid'] = (calculated == supplied)

    if calculated != supplied:
        result.valid = False
        result.errors.append(
            f"Check character mismatch: expected {calculated}, got {supplied}"
        )

    return result
