"""
Validation modules for the GMN check character library.
"""

from .charsets import (
    CSET82,
    CSET32,
    CSET82_VALUES,
    CSET32_VALUES,
    NUMERIC,
    WEIGHTS,
    MODULUS,
)
from .validators import (
    good_character_positions,
    good_character_positions_gcp_model,
    good_character_positions_gcp_model_checks,
    validate_format,
    validate_format_gcp_model,
    ValidationResult,
)

__all__ = [
    "CSET82",
    "CSET32",
    "CSET82_VALUES",
    "CSET32_VALUES",
    "NUMERIC",
    "WEIGHTS",
    "MODULUS",
    "good_character_positions",
    "good_character_positions_gcp_model",
    "good_character_positions_gcp_model_checks",
    "validate_format",
    "validate_format_gcp_model",
    "ValidationResult",
]
