"""
Core check character modules for the GMN library.
"""

from .checksum import compute_check_pair, verify_check_pair, weighted_sum
from .gmn import (
    check_characters,
    add_check_characters,
    verify_check_characters,
    check_characters_gcp_model,
    add_check_characters_gcp_model,
    verify_check_characters_gcp_model_checks,
    validate_gmn,
)

__all__ = [
    "compute_check_pair",
    "verify_check_pair",
    "weighted_sum",
    "check_characters",
    "add_check_characters",
    "verify_check_characters",
    "check_characters_gcp_model",
    "add_check_characters_gcp_model",
    "verify_check_characters_gcp_model_checks",
    "validate_gmn",
]
