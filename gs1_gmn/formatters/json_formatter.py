"""
JSON Formatter for GMN check character results

Provides clean JSON output with:
- Human-readable field names
- The completed GMN or check pair for partial input
- Verification outcome for complete input
- Optional 1-based list of bad character positions
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Dict, Optional

from ..core.gmn import validate_gmn
from ..validators.validators import good_character_positions


OPERATIONS = ("verify", "complete", "check")


@dataclass
class FormatOptions:
    """
    Output options for the JSON formatter.

    Attributes:
        include_positions: Add the 1-based positions of bad characters
        include_error_kind: Add the machine-readable error code on failure
        indent: JSON indentation (None for a single line)
    """
    include_positions: bool = False
    include_error_kind: bool = True
    indent: Optional[int] = 2


def gmn_result_to_dict(
    value: str,
    operation: str = "verify",
    options: Optional[FormatOptions] = None
) -> Dict[str, Any]:
    """
    Run one GMN operation and describe the outcome as a dict.

    Args:
        value: A complete GMN for "verify", a partial GMN otherwise
        operation: One of "verify", "complete", "check"
        options: Output options

    Returns:
        Dict with human-readable keys
    """
    if operation not in OPERATIONS:
        raise ValueError(f"Unknown operation: {operation}")
    options = options or FormatOptions()

    complete = operation == "verify"
    result = validate_gmn(value, complete)

    output: Dict[str, Any] = {"Input": value, "Operation": operation}

    if result.errors and "error_kind" in result.meta:
        output["Valid"] = False
        output["Error"] = result.errors[0]
        if options.include_error_kind:
            output["Error Kind"] = result.meta["error_kind"]
    elif complete:
        output["Valid"] = result.meta["check_characters_valid"]
        output["Check Characters"] = result.meta["provided_check_characters"]
        output["Expected Check Characters"] = result.meta["calculated_check_characters"]
    else:
        checks = result.meta["check_characters"]
        output["Valid"] = True
        output["Check Characters"] = checks
        if operation == "complete":
            output["GMN"] = value + checks

    if options.include_positions:
        output["Bad Positions"] = [
            i + 1
            for i, ok in enumerate(good_character_positions(value, complete))
            if not ok
        ]

    return output


def format_gmn_result_json(
    value: str,
    operation: str = "verify",
    options: Optional[FormatOptions] = None
) -> str:
    """
    Run one GMN operation and format the outcome as JSON.

    Returns:
        JSON string
    """
    options = options or FormatOptions()
    output = gmn_result_to_dict(value, operation, options)
    return json.dumps(output, ensure_ascii=False, indent=options.indent)
