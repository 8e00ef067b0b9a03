"""
Errors raised by GMN format validation.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional


class ErrorKind(str, Enum):
    """Format error codes."""
    TOO_SHORT = "TOO_SHORT"
    TOO_LONG = "TOO_LONG"
    PREFIX_NOT_NUMERIC = "PREFIX_NOT_NUMERIC"
    INVALID_DATA_CHARACTER = "INVALID_DATA_CHARACTER"
    INVALID_CHECK_CHARACTER = "INVALID_CHECK_CHARACTER"
    MODEL_EMPTY = "MODEL_EMPTY"
    CHECKS_LENGTH_INVALID = "CHECKS_LENGTH_INVALID"


class GMNFormatError(ValueError):
    """
    Raised when a GMN, or its GCP / model / checks components, is malformed.

    Attributes:
        kind: The ErrorKind describing the failure
        message: Human-readable description
        position: 0-based index of the offending character, if any
    """

    def __init__(self, kind: ErrorKind, message: str, position: Optional[int] = None):
        super().__init__(message)
        self.kind = kind
        self.message = message
        self.position = position

    def __repr__(self) -> str:
        return (
            f"GMNFormatError(kind={self.kind.value!r}, message={self.message!r}, "
            f"position={self.position!r})"
        )
