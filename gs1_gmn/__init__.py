"""
GS1 Global Model Number Check Characters

Calculates and verifies the check character pair of a GS1 Global Model
Number (GMN), with per-character diagnostics for malformed input.

Based on the GS1 General Specifications, section 7.9.5.
"""

from .core.gmn import (
    check_characters,
    add_check_characters,
    verify_check_characters,
    check_characters_gcp_model,
    add_check_characters_gcp_model,
    verify_check_characters_gcp_model_checks,
    validate_gmn,
)
from .validators.validators import (
    good_character_positions,
    good_character_positions_gcp_model,
    good_character_positions_gcp_model_checks,
    ValidationResult,
)
from .errors import ErrorKind, GMNFormatError
from .formatters.json_formatter import (
    FormatOptions,
    gmn_result_to_dict,
    format_gmn_result_json,
)

__version__ = "1.0.0"
__all__ = [
    "check_characters",
    "add_check_characters",
    "verify_check_characters",
    "check_characters_gcp_model",
    "add_check_characters_gcp_model",
    "verify_check_characters_gcp_model_checks",
    "validate_gmn",
    "good_character_positions",
    "good_character_positions_gcp_model",
    "good_character_positions_gcp_model_checks",
    "ValidationResult",
    "ErrorKind",
    "GMNFormatError",
    "FormatOptions",
    "gmn_result_to_dict",
    "format_gmn_result_json",
]
